# cluster/surface.py
"""
What the clusterer needs from a host map.

A host binding implements ``MapSurface``; the clusterer and every cluster
icon implement ``Overlay`` and are registered with ``add_overlay``. The
surface calls ``on_attach`` once it is mounted (or immediately if it already
is), ``on_redraw`` whenever the view changes and ``on_detach`` on removal.
"""
from __future__ import annotations
from typing import Any, Callable, Optional, Protocol, Tuple, runtime_checkable

from markercluster.model.models import LatLng, LatLngBounds, Point


@runtime_checkable
class MapProjection(Protocol):
    def from_latlng_to_div_pixel(self, latlng: LatLng) -> Point: ...
    def from_div_pixel_to_latlng(self, point: Point) -> LatLng: ...


@runtime_checkable
class Overlay(Protocol):
    def on_attach(self, surface: "MapSurface") -> None: ...
    def on_detach(self) -> None: ...
    def on_redraw(self) -> None: ...


@runtime_checkable
class MapSurface(Protocol):
    # None until the surface has been laid out
    def get_bounds(self) -> Optional[LatLngBounds]: ...
    def get_zoom(self) -> float: ...
    def get_projection(self) -> Optional[MapProjection]: ...
    def fit_bounds(self, bounds: LatLngBounds) -> None: ...

    def add_overlay(self, overlay: Overlay) -> None: ...
    def remove_overlay(self, overlay: Overlay) -> None: ...

    # events: "zoom_changed", "idle"
    def subscribe(self, event_type: str, callback: Callable[..., Any]) -> Tuple[str, Callable[..., Any]]: ...
    def unsubscribe(self, handle: Tuple[str, Callable[..., Any]]) -> bool: ...

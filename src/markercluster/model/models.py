from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any, Iterable, Optional, Tuple

from markercluster.events import EventEmitter


# --- Geometry ---------------------------------------------------------

@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float


@dataclass(frozen=True)
class Point:
    """Pixel coordinate (x grows east, y grows south)."""
    x: float
    y: float


@dataclass(frozen=True)
class LatLngBounds:
    """Axis-aligned geographic rectangle given by its SW and NE corners."""
    south_west: LatLng
    north_east: LatLng

    @classmethod
    def from_points(cls, points: Iterable[LatLng]) -> Optional["LatLngBounds"]:
        bounds: Optional[LatLngBounds] = None
        for p in points:
            bounds = cls(p, p) if bounds is None else bounds.extend(p)
        return bounds

    def extend(self, p: LatLng) -> "LatLngBounds":
        sw, ne = self.south_west, self.north_east
        return LatLngBounds(
            south_west=LatLng(min(sw.lat, ne.lat, p.lat), min(sw.lng, ne.lng, p.lng)),
            north_east=LatLng(max(sw.lat, ne.lat, p.lat), max(sw.lng, ne.lng, p.lng)),
        )

    def union(self, other: "LatLngBounds") -> "LatLngBounds":
        return self.extend(other.south_west).extend(other.north_east)

    def contains(self, p: LatLng) -> bool:
        min_lat, min_lng, max_lat, max_lng = self.to_tuple()
        return min_lat <= p.lat <= max_lat and min_lng <= p.lng <= max_lng

    def center(self) -> LatLng:
        min_lat, min_lng, max_lat, max_lng = self.to_tuple()
        return LatLng((min_lat + max_lat) * 0.5, (min_lng + max_lng) * 0.5)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """(min_lat, min_lng, max_lat, max_lng)"""
        sw, ne = self.south_west, self.north_east
        return (min(sw.lat, ne.lat), min(sw.lng, ne.lng),
                max(sw.lat, ne.lat), max(sw.lng, ne.lng))


class Anchor(IntFlag):
    """
    Where a cluster icon box sits relative to its geographic center.
    Horizontal flags live in the low nibble, vertical flags in the high one.
    """
    X_CENTER = 0x01
    X_RIGHT = 0x02
    Y_CENTER = 0x10
    Y_BOTTOM = 0x20

    TOP_LEFT = 0x00
    TOP = X_CENTER
    TOP_RIGHT = X_RIGHT
    CENTER_LEFT = Y_CENTER
    CENTER = X_CENTER | Y_CENTER
    CENTER_RIGHT = X_RIGHT | Y_CENTER
    BOTTOM_LEFT = Y_BOTTOM
    BOTTOM = X_CENTER | Y_BOTTOM
    BOTTOM_RIGHT = X_RIGHT | Y_BOTTOM


# --- Marker -----------------------------------------------------------

@dataclass(eq=False)
class Marker(EventEmitter):
    """
    A point on the map. Compared and hashed by identity.

    ``map`` is the surface the marker is currently drawn on (None = hidden),
    ``clustered`` is owned by the clusterer.
    """
    lat: float
    lng: float
    label: Optional[str] = None
    draggable: bool = False
    id: Optional[str] = None
    data: Any = None
    map: Any = field(default=None, repr=False)
    clustered: bool = False

    def __post_init__(self):
        EventEmitter.__init__(self)

    @property
    def position(self) -> LatLng:
        return LatLng(self.lat, self.lng)

    @property
    def visible(self) -> bool:
        return self.map is not None

    def get_map(self):
        return self.map

    def set_map(self, surface) -> None:
        self.map = surface

    def drag_to(self, lat: float, lng: float) -> None:
        """Host-side drag: move then notify ``dragend`` listeners."""
        self.lat, self.lng = float(lat), float(lng)
        self.publish("dragend", self)


__all__ = [
    "LatLng",
    "Point",
    "LatLngBounds",
    "Anchor",
    "Marker",
]

# mapview.py
from typing import List, Optional

from loguru import logger

from markercluster.events import EventEmitter
from markercluster.model.models import LatLng, LatLngBounds, Point
from .projection import PixelProjection


class StaticMap(EventEmitter):
    """
    In-process map surface: a viewport of ``width`` x ``height`` pixels
    centred on ``center`` at an integer Web Mercator zoom.

    Nothing is laid out until ``mount()``: before that there are no bounds,
    no projection and overlays wait in a queue. View changes publish
    ``zoom_changed`` / ``center_changed``, redraw the overlays and finish
    with ``idle``.
    """

    def __init__(self, center: LatLng, zoom: int, width: int = 1024, height: int = 768,
                 min_zoom: int = 0, max_zoom: int = 22):
        super().__init__()
        self.width = width
        self.height = height
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self._center = center
        self._zoom = self._clamp(zoom)
        self._mounted = False
        self._overlays: List = []

    # --- lifecycle ----------------------------------------------------

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        logger.debug(f"map mounted: {len(self._overlays)} overlays pending")
        for overlay in list(self._overlays):
            overlay.on_attach(self)
        self.publish("idle")

    def add_overlay(self, overlay) -> None:
        if any(o is overlay for o in self._overlays):
            return
        self._overlays.append(overlay)
        if self._mounted:
            overlay.on_attach(self)

    def remove_overlay(self, overlay) -> None:
        for i, o in enumerate(self._overlays):
            if o is overlay:
                del self._overlays[i]
                if self._mounted:
                    overlay.on_detach()
                return

    def get_overlays(self) -> List:
        return list(self._overlays)

    # --- view ---------------------------------------------------------

    def get_center(self) -> LatLng:
        return self._center

    def get_zoom(self) -> int:
        return self._zoom

    def get_projection(self) -> Optional[PixelProjection]:
        if not self._mounted:
            return None
        return PixelProjection(self._zoom)

    def get_bounds(self) -> Optional[LatLngBounds]:
        projection = self.get_projection()
        if projection is None:
            return None
        c = projection.from_latlng_to_div_pixel(self._center)
        ne = projection.from_div_pixel_to_latlng(Point(c.x + self.width / 2, c.y - self.height / 2))
        sw = projection.from_div_pixel_to_latlng(Point(c.x - self.width / 2, c.y + self.height / 2))
        return LatLngBounds(sw, ne)

    def set_zoom(self, zoom: int) -> None:
        self.set_view(self._center, zoom)

    def pan_to(self, center: LatLng) -> None:
        self.set_view(center, self._zoom)

    def set_view(self, center: LatLng, zoom: int) -> None:
        zoom = self._clamp(zoom)
        zoom_changed = zoom != self._zoom
        center_changed = center != self._center
        if not (zoom_changed or center_changed):
            return

        self._center, self._zoom = center, zoom
        if not self._mounted:
            return

        if zoom_changed:
            self.publish("zoom_changed")
        if center_changed:
            self.publish("center_changed")
        self._redraw_overlays()
        self.publish("idle")

    def fit_bounds(self, bounds: LatLngBounds) -> None:
        """Largest zoom at which ``bounds`` fits in the viewport, centred on it."""
        zoom = self.min_zoom
        for z in range(self.max_zoom, self.min_zoom - 1, -1):
            p = PixelProjection(z)
            ne = p.from_latlng_to_div_pixel(bounds.north_east)
            sw = p.from_latlng_to_div_pixel(bounds.south_west)
            if abs(ne.x - sw.x) <= self.width and abs(sw.y - ne.y) <= self.height:
                zoom = z
                break

        p = PixelProjection(zoom)
        ne = p.from_latlng_to_div_pixel(bounds.north_east)
        sw = p.from_latlng_to_div_pixel(bounds.south_west)
        center = p.from_div_pixel_to_latlng(Point((ne.x + sw.x) / 2, (ne.y + sw.y) / 2))
        self.set_view(center, zoom)

    def idle(self) -> None:
        self.publish("idle")

    def _redraw_overlays(self) -> None:
        for overlay in list(self._overlays):
            overlay.on_redraw()

    def _clamp(self, zoom: int) -> int:
        return max(self.min_zoom, min(self.max_zoom, int(zoom)))

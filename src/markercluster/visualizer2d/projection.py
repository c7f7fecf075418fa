# projection.py
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple, Protocol

from markercluster.model.models import LatLng, Point

INITIAL_RES = 156543.03392804097  # m/px at z=0 (3857, 256px)
ORIGIN_SHIFT = 20037508.342789244  # half the 3857 world width (m)
TILE_SIZE = 256
MAX_LAT = 85.05112878  # edge of the 3857 square


class Projection(Protocol):
    def lonlat_to_xy(self, lon: float, lat: float) -> Tuple[float, float]: ...
    def xy_to_lonlat(self, x: float, y: float) -> Tuple[float, float]: ...


@dataclass(frozen=True)
class WebMercatorProjection:
    """EPSG:4326 <-> EPSG:3857"""
    def __post_init__(self):
        from pyproj import Transformer
        object.__setattr__(self, "_to_merc",
            Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True))
        object.__setattr__(self, "_to_geo",
            Transformer.from_crs("EPSG:3857", "EPSG:4326", always_xy=True))
    def lonlat_to_xy(self, lon, lat):
        return self._to_merc.transform(lon, lat)
    def xy_to_lonlat(self, x, y):
        return self._to_geo.transform(x, y)


@lru_cache(maxsize=1)
def web_mercator() -> WebMercatorProjection:
    return WebMercatorProjection()


def resolution(zoom: float) -> float:
    """Metres per pixel at ``zoom``."""
    return INITIAL_RES / (2 ** zoom)


@dataclass(frozen=True)
class PixelProjection:
    """
    World pixel coordinates at a fixed zoom: (0, 0) is the north-west corner
    of the Web Mercator square, x grows east and y grows south.
    """
    zoom: float
    proj: Projection = None

    def __post_init__(self):
        if self.proj is None:
            object.__setattr__(self, "proj", web_mercator())

    def world_size(self) -> float:
        return TILE_SIZE * 2 ** self.zoom

    def from_latlng_to_div_pixel(self, latlng: LatLng) -> Point:
        lat = min(max(latlng.lat, -MAX_LAT), MAX_LAT)
        X, Y = self.proj.lonlat_to_xy(latlng.lng, lat)
        res = resolution(self.zoom)
        return Point((X + ORIGIN_SHIFT) / res, (ORIGIN_SHIFT - Y) / res)

    def from_div_pixel_to_latlng(self, point: Point) -> LatLng:
        # clamped to the world square, so nothing wraps across the antimeridian
        world = self.world_size()
        x = min(max(point.x, 0.0), world)
        y = min(max(point.y, 0.0), world)
        res = resolution(self.zoom)
        X = x * res - ORIGIN_SHIFT
        Y = ORIGIN_SHIFT - y * res
        lon, lat = self.proj.xy_to_lonlat(X, Y)
        return LatLng(lat, lon)

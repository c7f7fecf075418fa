# cluster/bounds.py
from typing import Tuple

from markercluster.model.models import LatLngBounds, Point
from markercluster.cluster.surface import MapProjection


def expand(bounds: LatLngBounds, grid_size: float, projection: MapProjection) -> LatLngBounds:
    """
    Grow ``bounds`` outward by ``grid_size`` pixels on every side.

    The pixel/degree ratio depends on zoom, so the result is only valid for
    the projection it was computed with.
    """
    # pixel y grows southward
    tr = projection.from_latlng_to_div_pixel(bounds.north_east)
    tr = Point(tr.x + grid_size, tr.y - grid_size)

    bl = projection.from_latlng_to_div_pixel(bounds.south_west)
    bl = Point(bl.x - grid_size, bl.y + grid_size)

    ne = projection.from_div_pixel_to_latlng(tr)
    sw = projection.from_div_pixel_to_latlng(bl)
    return bounds.extend(ne).extend(sw)


def to_query_rect(bounds: LatLngBounds) -> Tuple[float, float, float, float]:
    """[min_lat, min_lng, max_lat, max_lng] for SpatialIndex.search()."""
    ne, sw = bounds.north_east, bounds.south_west
    return (
        min(ne.lat, sw.lat),
        min(ne.lng, sw.lng),
        max(ne.lat, sw.lat),
        max(ne.lng, sw.lng),
    )

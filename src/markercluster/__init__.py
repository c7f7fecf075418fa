# __init__.py
"""
markercluster: groups map markers into viewport-dependent clusters.

    surface = StaticMap(LatLng(35.68, 139.76), zoom=10)
    clusterer = MarkerClusterer(surface, markers, {"gridSize": 60})
    surface.mount()
"""
from markercluster.model.models import Anchor, LatLng, LatLngBounds, Marker, Point
from markercluster.fastsearch.builder import IndexRecord
from markercluster.fastsearch.index import SpatialIndex
from markercluster.cluster.options import ClustererOptions
from markercluster.cluster.cluster import Cluster
from markercluster.cluster.clusterer import MarkerClusterer

__all__ = [
    "Anchor",
    "LatLng",
    "LatLngBounds",
    "Marker",
    "Point",
    "IndexRecord",
    "SpatialIndex",
    "ClustererOptions",
    "Cluster",
    "MarkerClusterer",
]

# fastsearch/__init__.py
"""
fastsearch: 2-D bounding volume hierarchy over (lat, lng, marker) records.

- builder: BBox / Node / IndexRecord and the bulk (median split) build
- search: closed-rectangle range queries and record lookup
- analysis: tree shape statistics
- index: SpatialIndex, the mutable facade used by the clusterer
"""
__all__ = ["builder", "search", "analysis", "index"]

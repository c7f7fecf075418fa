# cluster/__init__.py
"""
Clustering engine.

- surface: capability protocols the host map binding implements
- bounds: pixel-margin expansion of geographic rectangles
- options: ClustererOptions
- icon / cluster / clusterer: ClusterIcon, Cluster, MarkerClusterer
"""
__all__ = ["surface", "bounds", "options", "icon", "cluster", "clusterer"]

# visualizer2d/__init__.py
"""
Host side: a Web Mercator map surface, tile overlay, matplotlib renderer
and the ``markercluster-viz`` command.
"""
__all__ = ["projection", "mapview", "overlay", "renderer", "config", "cli"]

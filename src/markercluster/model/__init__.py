# model/__init__.py
"""
Model layer: geographic value types, the Marker entity and JSON loading.

- models: LatLng / LatLngBounds / Point / Anchor / Marker
- loader: ModelLoader (marker files and viewer config, jsonschema validated)
"""
__all__ = ["models", "loader"]

# config.py
from dataclasses import dataclass, field

from markercluster.model.loader import ModelLoader


@dataclass
class VizConfig:
    markers: str
    center_lat: float | None = None
    center_lon: float | None = None
    zoom: int | None = None
    width_px: int = 1024
    height_px: int = 768
    overlay_map: bool = False
    tiles: str = "OpenStreetMap.Mapnik"
    output: str | None = None
    show: bool = False
    log_level: str = "INFO"
    clusterer: dict = field(default_factory=dict)

def load_json(path: str | None) -> dict:
    return ModelLoader(validate_schema=True).load_config(path)

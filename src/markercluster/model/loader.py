from __future__ import annotations
import pathlib, json, warnings
from typing import Any, List

from jsonschema import validate

from .models import Marker


class ModelLoader:
    """Reads marker files and viewer configs, validating them against the bundled schemas."""

    def __init__(self, validate_schema: bool = True, schema_dir: str | pathlib.Path | None = None):
        self.validate_schema = validate_schema
        # default: this package's schemas directory
        if schema_dir is None:
            self.schema_dir = pathlib.Path(__file__).parent.parent / "schemas"
        else:
            self.schema_dir = pathlib.Path(schema_dir)

    def _load_json(self, path: str | pathlib.Path) -> Any:
        p = pathlib.Path(path)
        if not p.exists():
            raise FileNotFoundError(str(path))
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _validate(self, instance: Any, schema_name: str) -> None:
        if self.validate_schema:
            schema = self._load_json(self.schema_dir / schema_name)
            validate(instance=instance, schema=schema)

    # --- public API ---------------------------------------------------

    def load_markers(self, path: str | pathlib.Path) -> List[Marker]:
        """markers.json -> list of Marker"""
        return self.markers_from_dict(self._load_json(path))

    def markers_from_dict(self, data: Any) -> List[Marker]:
        self._validate(data, "markers.schema.json")

        markers: List[Marker] = []
        seen: set[str] = set()
        for item in data["markers"]:
            mid = item.get("id")
            if mid is not None:
                mid = str(mid)
                if mid in seen:
                    warnings.warn(f"Duplicate marker id {mid}")
                seen.add(mid)
            lng = item["lng"] if "lng" in item else item["lon"]
            markers.append(
                Marker(
                    lat=float(item["lat"]),
                    lng=float(lng),
                    label=item.get("label"),
                    draggable=bool(item.get("draggable", False)),
                    id=mid,
                )
            )
        return markers

    def load_config(self, path: str | pathlib.Path | None) -> dict:
        """viewer config json -> dict (empty when no path is given)"""
        if not path:
            return {}
        data = self._load_json(path)
        self._validate(data, "viz_config.schema.json")
        return data

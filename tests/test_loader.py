"""Tests for model.loader and visualizer2d.config."""

import json

import jsonschema
import pytest

from markercluster.model.loader import ModelLoader
from markercluster.visualizer2d.config import VizConfig, load_json


def write(tmp_path, name, data):
    p = tmp_path / name
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


class TestLoadMarkers:

    @pytest.mark.unit
    def test_load(self, tmp_path):
        path = write(tmp_path, "markers.json", {"markers": [
            {"id": "a", "lat": 35.68, "lng": 139.76, "label": "Tokyo"},
            {"id": 7, "lat": 34.69, "lon": 135.50, "draggable": True},
        ]})
        markers = ModelLoader().load_markers(path)
        assert [(m.id, m.lat, m.lng) for m in markers] == [("a", 35.68, 139.76), ("7", 34.69, 135.50)]
        assert markers[0].label == "Tokyo"
        assert markers[1].draggable
        assert not markers[0].clustered and not markers[0].visible

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ModelLoader().load_markers(tmp_path / "nope.json")

    @pytest.mark.unit
    @pytest.mark.parametrize("item", [
        {"lng": 1.0},
        {"lat": 91.0, "lng": 1.0},
        {"lat": 1.0},
        {"lat": "x", "lng": 1.0},
    ])
    def test_schema_violation(self, item):
        with pytest.raises(jsonschema.ValidationError):
            ModelLoader().markers_from_dict({"markers": [item]})

    @pytest.mark.unit
    def test_validation_can_be_disabled(self):
        markers = ModelLoader(validate_schema=False).markers_from_dict(
            {"markers": [{"lat": 91.0, "lng": 1.0}]})
        assert markers[0].lat == 91.0

    @pytest.mark.unit
    def test_duplicate_ids_warn(self):
        with pytest.warns(UserWarning, match="Duplicate marker id a"):
            ModelLoader().markers_from_dict({"markers": [
                {"id": "a", "lat": 1, "lng": 1},
                {"id": "a", "lat": 2, "lng": 2},
            ]})


class TestVizConfig:

    @pytest.mark.unit
    def test_load_json_empty_path(self):
        assert load_json(None) == {}

    @pytest.mark.unit
    def test_load_json_round_trip(self, tmp_path):
        path = write(tmp_path, "viz.json", {
            "markers": "m.json", "zoom": 9, "clusterer": {"gridSize": 30},
        })
        cfg = VizConfig(**load_json(str(path)))
        assert cfg.markers == "m.json"
        assert cfg.zoom == 9
        assert cfg.clusterer == {"gridSize": 30}
        assert cfg.width_px == 1024

    @pytest.mark.unit
    def test_unknown_key_rejected(self, tmp_path):
        path = write(tmp_path, "viz.json", {"markers": "m.json", "zooom": 9})
        with pytest.raises(jsonschema.ValidationError):
            load_json(str(path))

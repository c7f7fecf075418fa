"""Shared fixtures for markercluster tests."""

from __future__ import annotations

import os

# headless matplotlib for renderer tests
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest
from loguru import logger

from markercluster.cluster.clusterer import MarkerClusterer
from markercluster.model.models import LatLng, Marker
from markercluster.visualizer2d.mapview import StaticMap

# At zoom 8 one degree of longitude is ~182 px, so the default 60 px grid
# covers ~0.33 deg around a point near (10, 10).
CENTER = LatLng(10.0, 10.0)
ZOOM = 8


@pytest.fixture
def surface() -> StaticMap:
    """A mounted 1024x768 map centred on (10, 10) at zoom 8."""
    s = StaticMap(CENTER, ZOOM, width=1024, height=768)
    s.mount()
    return s


@pytest.fixture
def unmounted_surface() -> StaticMap:
    return StaticMap(CENTER, ZOOM, width=1024, height=768)


@pytest.fixture
def make_clusterer(surface):
    def _make(markers=None, **options) -> MarkerClusterer:
        return MarkerClusterer(surface, markers, options)
    return _make


@pytest.fixture
def log_records():
    """loguru records emitted while the test runs."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


def markers_at(*coords, **kwargs) -> list[Marker]:
    return [Marker(lat=lat, lng=lng, id=f"m{i}", **kwargs) for i, (lat, lng) in enumerate(coords)]


def membership(clusterer: MarkerClusterer) -> list[list[str]]:
    return [[m.id for m in c.get_markers()] for c in clusterer.get_clusters()]

"""Tests for visualizer2d.projection: Web Mercator pixel projection."""

import pytest

from markercluster.model.models import LatLng, Point
from markercluster.visualizer2d.projection import (
    INITIAL_RES, PixelProjection, resolution, web_mercator,
)


class TestPixelProjection:

    @pytest.mark.unit
    def test_resolution_halves_per_zoom(self):
        assert resolution(0) == pytest.approx(INITIAL_RES)
        assert resolution(1) == pytest.approx(INITIAL_RES / 2)

    @pytest.mark.unit
    def test_origin_maps_to_world_center(self):
        p = PixelProjection(0).from_latlng_to_div_pixel(LatLng(0, 0))
        assert p.x == pytest.approx(128)
        assert p.y == pytest.approx(128)

    @pytest.mark.unit
    def test_north_is_up(self):
        proj = PixelProjection(5)
        north = proj.from_latlng_to_div_pixel(LatLng(20, 0))
        south = proj.from_latlng_to_div_pixel(LatLng(-20, 0))
        assert north.y < south.y

    @pytest.mark.unit
    @pytest.mark.parametrize("latlng", [LatLng(35.68, 139.76), LatLng(-33.9, 18.4), LatLng(0, 0)])
    def test_round_trip(self, latlng):
        proj = PixelProjection(10)
        back = proj.from_div_pixel_to_latlng(proj.from_latlng_to_div_pixel(latlng))
        assert back.lat == pytest.approx(latlng.lat, abs=1e-9)
        assert back.lng == pytest.approx(latlng.lng, abs=1e-9)

    @pytest.mark.unit
    def test_one_degree_longitude_in_pixels(self):
        proj = PixelProjection(8)
        a = proj.from_latlng_to_div_pixel(LatLng(10, 10))
        b = proj.from_latlng_to_div_pixel(LatLng(10, 11))
        assert b.x - a.x == pytest.approx(256 * 2 ** 8 / 360)

    @pytest.mark.unit
    def test_web_mercator_is_shared(self):
        assert web_mercator() is web_mercator()
        assert PixelProjection(3).proj is web_mercator()

    @pytest.mark.unit
    def test_pixels_outside_world_are_clamped(self):
        proj = PixelProjection(0)
        west = proj.from_div_pixel_to_latlng(Point(-500, 128))
        east = proj.from_div_pixel_to_latlng(Point(900, 128))
        assert west.lng == pytest.approx(-180)
        assert east.lng == pytest.approx(180)
        assert proj.from_div_pixel_to_latlng(Point(128, -50)).lat == pytest.approx(85.0511, abs=1e-3)

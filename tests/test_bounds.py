"""Tests for cluster.bounds and the LatLngBounds value type."""

import pytest

from markercluster.cluster.bounds import expand, to_query_rect
from markercluster.model.models import LatLng, LatLngBounds, Point
from markercluster.visualizer2d.projection import PixelProjection


class LinearProjection:
    """100 px per degree, pixel y pointing south."""

    def from_latlng_to_div_pixel(self, latlng):
        return Point(latlng.lng * 100, -latlng.lat * 100)

    def from_div_pixel_to_latlng(self, point):
        return LatLng(-point.y / 100, point.x / 100)


class TestLatLngBounds:

    @pytest.mark.unit
    def test_contains_is_closed(self):
        b = LatLngBounds(LatLng(0, 0), LatLng(1, 1))
        assert b.contains(LatLng(0, 0))
        assert b.contains(LatLng(1, 1))
        assert b.contains(LatLng(0.5, 0.5))
        assert not b.contains(LatLng(1.01, 0.5))

    @pytest.mark.unit
    def test_extend_and_union(self):
        b = LatLngBounds(LatLng(0, 0), LatLng(0, 0)).extend(LatLng(2, -3))
        assert b.to_tuple() == (0, -3, 2, 0)
        u = b.union(LatLngBounds(LatLng(-1, 5), LatLng(-1, 5)))
        assert u.to_tuple() == (-1, -3, 2, 5)

    @pytest.mark.unit
    def test_from_points(self):
        assert LatLngBounds.from_points([]) is None
        b = LatLngBounds.from_points([LatLng(1, 1), LatLng(3, -2), LatLng(2, 4)])
        assert b.to_tuple() == (1, -2, 3, 4)
        assert b.center() == LatLng(2, 1)


class TestToQueryRect:

    @pytest.mark.unit
    def test_normalizes_corners(self):
        b = LatLngBounds(south_west=LatLng(5, 7), north_east=LatLng(1, 2))
        assert to_query_rect(b) == (1, 2, 5, 7)

    @pytest.mark.unit
    def test_point_bounds(self):
        b = LatLngBounds(LatLng(3, 4), LatLng(3, 4))
        assert to_query_rect(b) == (3, 4, 3, 4)


class TestExpand:

    @pytest.mark.unit
    def test_expand_linear(self):
        b = LatLngBounds(LatLng(0, 0), LatLng(1, 1))
        out = expand(b, 10, LinearProjection())
        min_lat, min_lng, max_lat, max_lng = out.to_tuple()
        assert min_lat == pytest.approx(-0.1)
        assert min_lng == pytest.approx(-0.1)
        assert max_lat == pytest.approx(1.1)
        assert max_lng == pytest.approx(1.1)

    @pytest.mark.unit
    def test_expand_contains_original(self):
        b = LatLngBounds(LatLng(10, 10), LatLng(10, 10))
        out = expand(b, 60, PixelProjection(8))
        assert out.contains(LatLng(10, 10))
        assert not out.contains(LatLng(10, 10.4))
        assert out.contains(LatLng(10, 10.3))

    @pytest.mark.unit
    def test_expand_shrinks_with_zoom(self):
        b = LatLngBounds(LatLng(10, 10), LatLng(10, 10))
        wide = expand(b, 60, PixelProjection(6)).to_tuple()
        narrow = expand(b, 60, PixelProjection(12)).to_tuple()
        assert (wide[3] - wide[1]) == pytest.approx(64 * (narrow[3] - narrow[1]), rel=1e-6)

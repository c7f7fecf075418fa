"""Tests for visualizer2d.renderer: matplotlib output (Agg, no basemap)."""

import matplotlib.pyplot as plt
import pytest

from markercluster.visualizer2d.renderer import PlotRenderer

from conftest import markers_at


class TestPlotRenderer:

    @pytest.mark.unit
    def test_draws_markers_and_icons(self, make_clusterer, surface):
        ms = markers_at((10, 10), (10, 10.05), (10, 11.5))
        ms[2].label = "alone"
        clusterer = make_clusterer(ms)

        fig = PlotRenderer().draw(surface, clusterer)
        try:
            ax = fig.axes[0]
            texts = sorted(t.get_text() for t in ax.texts)
            assert texts == ["2", "alone"]
            assert len(ax.collections) == 2
            assert "2 clusters" in ax.get_title()
        finally:
            plt.close(fig)

    @pytest.mark.unit
    def test_unmounted_surface_renders_empty(self, unmounted_surface):
        from markercluster.cluster.clusterer import MarkerClusterer

        clusterer = MarkerClusterer(unmounted_surface, markers_at((10, 10)))
        fig = PlotRenderer().draw(unmounted_surface, clusterer)
        try:
            assert len(fig.axes[0].collections) == 0
        finally:
            plt.close(fig)

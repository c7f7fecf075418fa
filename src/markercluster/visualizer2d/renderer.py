# renderer.py
from typing import Optional
import numpy as np
import matplotlib.pyplot as plt

from .projection import web_mercator
from .overlay import TileOverlay
from .mapview import StaticMap


class PlotRenderer:
    """Draws standalone markers and cluster icons of a clusterer in EPSG:3857 metres."""

    def __init__(self, overlay: TileOverlay | None = None):
        self.ov = overlay
        self.proj = web_mercator()

    def _xy(self, latlng):
        return self.proj.lonlat_to_xy(latlng.lng, latlng.lat)

    def draw(self, surface: StaticMap, clusterer, ax=None, show: bool = False):
        if ax is None:
            fig, ax = plt.subplots(figsize=(surface.width / 100, surface.height / 100), dpi=100)
        else:
            fig = ax.figure

        bounds = surface.get_bounds()
        if bounds is None:
            return fig
        xmin, ymin = self._xy(bounds.south_west)
        xmax, ymax = self._xy(bounds.north_east)

        # background map
        if self.ov:
            img, extent_wm, _ = self.ov.fetch(xmin, ymin, xmax, ymax, surface.get_zoom())
            ax.imshow(img, extent=extent_wm, origin="upper", interpolation="bilinear", zorder=0)

        # standalone markers
        shown = [m for m in clusterer.get_markers() if m.get_map() is surface]
        if shown:
            pts = np.array([self._xy(m.position) for m in shown])
            ax.scatter(pts[:, 0], pts[:, 1], s=36, c="yellow", edgecolors="black", zorder=6)
            for m, (x, y) in zip(shown, pts):
                if m.label:
                    ax.annotate(m.label, (x, y), xytext=(5, 8), textcoords="offset points",
                                fontsize=9, zorder=7)

        # cluster icons
        icons = [c.get_icon() for c in clusterer.get_clusters()]
        icons = [i for i in icons if i.visible and i.center is not None]
        if icons:
            pts = np.array([self._xy(i.center) for i in icons])
            sizes = np.array([i.cluster.get_size() for i in icons], dtype=float)
            ax.scatter(pts[:, 0], pts[:, 1], s=200 + 40 * np.sqrt(sizes),
                       c="tab:blue", alpha=0.75, edgecolors="white", zorder=8)
            for icon, (x, y) in zip(icons, pts):
                content = icon.content if icon.content is not None else icon.cluster.get_size()
                ax.annotate(str(content), (x, y), ha="center", va="center",
                            color="white", fontsize=9, fontweight="bold", zorder=9)

        ax.set_xlim(xmin, xmax)
        ax.set_ylim(ymin, ymax)
        ax.set_aspect("equal", adjustable="box")
        ax.set_xlabel("E [m] (EPSG:3857)")
        ax.set_ylabel("N [m] (EPSG:3857)")
        ax.set_title(f"zoom {surface.get_zoom()}: {clusterer.get_total_clusters()} clusters, "
                     f"{clusterer.get_total_markers()} markers")
        if show:
            plt.tight_layout(); plt.show()
        return fig

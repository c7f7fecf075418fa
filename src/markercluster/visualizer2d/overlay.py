# overlay.py
from dataclasses import dataclass
import contextily as ctx

from .projection import resolution


@dataclass(frozen=True)
class TileOverlay:
    tiles: str = "OpenStreetMap.Mapnik"
    zoom: int | None = None
    max_px: int = 8192

    def _resolve(self):
        if self.tiles.startswith(("http://", "https://")):
            return self.tiles
        prov = ctx.providers
        for p in self.tiles.split("."):
            if p: prov = getattr(prov, p)
        return prov

    def cap_zoom(self, xmin, ymin, xmax, ymax, zoom) -> int:
        m_per_px = resolution(zoom)
        w_px = (xmax - xmin) / m_per_px
        while w_px > self.max_px and zoom > 0:
            zoom -= 1; m_per_px *= 2; w_px /= 2
        return zoom

    def fetch(self, Xmin, Ymin, Xmax, Ymax, map_zoom: int | None = None):
        """Basemap image for a Web Mercator extent (metres)."""
        provider = self._resolve()
        z = self.zoom if self.zoom is not None else map_zoom
        if z is not None:
            zmax = getattr(provider, "max_zoom", 22)
            z = self.cap_zoom(Xmin, Ymin, Xmax, Ymax, min(int(round(z)), zmax))
        else:
            z = "auto"
        img, extent_wm = ctx.bounds2img(Xmin, Ymin, Xmax, Ymax, source=provider, zoom=z, ll=False)
        return img, extent_wm, z

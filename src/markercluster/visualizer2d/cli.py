# cli.py
import argparse
import sys

from loguru import logger

from markercluster.cluster.clusterer import MarkerClusterer
from markercluster.cluster.options import ClustererOptions
from markercluster.model.loader import ModelLoader
from markercluster.model.models import LatLng, LatLngBounds
from .config import VizConfig, load_json
from .mapview import StaticMap
from .overlay import TileOverlay


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="markercluster-viz")
    p.add_argument("--config")
    p.add_argument("--markers")
    p.add_argument("--zoom", type=int)
    p.add_argument("--output")
    p.add_argument("--show", action="store_true", default=None)
    p.add_argument("--log-level", dest="log_level")
    return p.parse_args(argv)

def build(cfg: VizConfig):
    markers = ModelLoader(validate_schema=True).load_markers(cfg.markers)
    options = ClustererOptions.from_dict(cfg.clusterer)

    if cfg.center_lat is not None and cfg.center_lon is not None:
        center = LatLng(cfg.center_lat, cfg.center_lon)
    else:
        extent = LatLngBounds.from_points(m.position for m in markers)
        center = extent.center() if extent else LatLng(0.0, 0.0)

    surface = StaticMap(center, cfg.zoom if cfg.zoom is not None else 0,
                        width=cfg.width_px, height=cfg.height_px)
    clusterer = MarkerClusterer(surface, markers, options)
    surface.mount()
    if cfg.zoom is None:
        clusterer.fit_map_to_markers()
    return surface, clusterer

def main(argv=None):
    args = parse_args(argv)
    cfg_dict = load_json(args.config)
    # JSON is the base, CLI flags override
    for k, v in vars(args).items():
        if k == "config": continue
        if v is not None: cfg_dict[k] = v
    if "markers" not in cfg_dict:
        print("markercluster-viz: a marker file is required (--markers or config)", file=sys.stderr)
        return 2
    cfg = VizConfig(**cfg_dict)

    logger.remove()
    logger.add(sys.stderr, level=cfg.log_level.upper())

    surface, clusterer = build(cfg)
    logger.info(f"{clusterer.get_total_markers()} markers -> "
                f"{clusterer.get_total_clusters()} clusters at zoom {surface.get_zoom()}")

    print("# cluster,size,center_lat,center_lon,icon_visible")
    for i, c in enumerate(clusterer.get_clusters()):
        center = c.get_center()
        print(f"{i},{c.get_size()},{center.lat:.8f},{center.lng:.8f},{c.get_icon().visible}")

    if cfg.output or cfg.show:
        from .renderer import PlotRenderer
        overlay = TileOverlay(cfg.tiles) if cfg.overlay_map else None
        fig = PlotRenderer(overlay).draw(surface, clusterer, show=cfg.show)
        if cfg.output:
            fig.savefig(cfg.output)
            logger.info(f"rendered to {cfg.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())

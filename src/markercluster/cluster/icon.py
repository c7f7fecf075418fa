# cluster/icon.py
from typing import Any, Callable, Optional, Sequence

from markercluster.model.models import Anchor, LatLng, Marker, Point


class ClusterIcon:
    """
    Presentation state of one cluster: where the icon goes and what it shows.

    Drawing itself belongs to the host; the icon only registers as an overlay
    on the cluster's map, computes its anchored pixel box on ``on_redraw`` and
    asks ``icon_generator`` for its content.
    """

    def __init__(self, cluster, icon_generator: Callable[[Sequence[Marker]], Any],
                 width: float = 0, height: float = 0, anchor: Anchor = Anchor.CENTER):
        self.cluster = cluster
        self.icon_generator = icon_generator
        self.width = width
        self.height = height
        self.anchor = anchor
        self.center: Optional[LatLng] = None
        self.visible = False
        self.attached = False
        self.content: Any = None
        self.position: Optional[Point] = None
        self.map = None
        self.set_map(cluster.get_map())

    def get_map(self):
        return self.map

    def set_map(self, surface) -> None:
        if self.map is not None:
            self.map.remove_overlay(self)
        self.map = surface
        if surface is not None:
            surface.add_overlay(self)

    # --- Overlay capability ------------------------------------------

    def on_attach(self, surface) -> None:
        self.attached = True
        self.on_redraw()

    def on_detach(self) -> None:
        self.hide()
        self.attached = False
        self.position = None
        self.content = None

    def on_redraw(self) -> None:
        if not (self.attached and self.visible):
            return
        self.position = self.get_pos_from_latlng(self.center)
        self.content = self.icon_generator(self.cluster.get_markers())

    # --- visibility ---------------------------------------------------

    def show(self) -> None:
        self.visible = True
        self.on_redraw()

    def hide(self) -> None:
        self.visible = False

    def remove(self) -> None:
        self.set_map(None)

    # --- geometry -----------------------------------------------------

    def get_pos_from_latlng(self, latlng: Optional[LatLng]) -> Optional[Point]:
        """Top-left pixel of the icon box, shifted according to ``anchor``."""
        projection = self.map.get_projection() if self.map is not None else None
        if projection is None or latlng is None:
            return None
        pos = projection.from_latlng_to_div_pixel(latlng)
        x, y = pos.x, pos.y
        width, height = self.width or 0, self.height or 0

        if self.anchor & Anchor.X_CENTER:
            x -= width / 2
        if self.anchor & Anchor.X_RIGHT:
            x -= width
        if self.anchor & Anchor.Y_CENTER:
            y -= height / 2
        if self.anchor & Anchor.Y_BOTTOM:
            y -= height
        return Point(x, y)

    def css(self) -> str:
        pos = self.position or Point(0, 0)
        return (f"cursor:pointer; position:absolute; top:{pos.y}px; left:{pos.x}px;"
                f"height:{self.height}px; width:{self.width}px;")

    # --- interaction --------------------------------------------------

    def trigger_cluster_click(self) -> None:
        clusterer = self.cluster.get_marker_clusterer()
        clusterer.publish("clusterclick", self.cluster)

        if clusterer.options.zoom_on_click and self.map is not None:
            self.map.fit_bounds(self.cluster.get_bounds())

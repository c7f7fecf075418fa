# cluster/clusterer.py
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from loguru import logger

from markercluster.events import EventEmitter, Handle
from markercluster.fastsearch.builder import IndexRecord
from markercluster.fastsearch.index import SpatialIndex
from markercluster.model.models import LatLngBounds, Marker
from markercluster.cluster.bounds import expand, to_query_rect
from markercluster.cluster.cluster import Cluster
from markercluster.cluster.options import ClustererOptions


def _record_of(marker: Marker) -> IndexRecord:
    return IndexRecord(marker.lat, marker.lng, marker)


class MarkerClusterer(EventEmitter):
    """
    Groups markers into clusters for the current view of a map surface.

    - registers itself as an overlay; the first ``on_attach`` makes it ready
    - ``redraw()``: incremental pass over markers not yet clustered
    - ``repaint()``: drop every cluster and run a full pass (zoom changes)
    - publishes ``clusterclick`` with the clicked Cluster
    """

    def __init__(self, map=None, markers: Optional[Iterable[Marker]] = None,
                 options: Union[ClustererOptions, Mapping[str, Any], None] = None):
        super().__init__()
        if not isinstance(options, ClustererOptions):
            options = ClustererOptions.from_dict(options)
        self.options = options

        self._map = None
        self._markers: List[Marker] = []
        self._clusters: List[Cluster] = []
        self._ready = False

        self._tree = SpatialIndex(options.max_entries)
        self._records: Dict[Marker, IndexRecord] = {}
        self._drag_handles: Dict[Marker, Handle] = {}
        self._map_handles: List[Handle] = []
        self._last_zoom = None
        self._zoom_changed = False

        self.set_map(map)

        if markers:
            self.add_markers(markers, False)

    # --- Overlay capability ------------------------------------------

    def on_attach(self, surface) -> None:
        self._set_ready(True)

    def on_detach(self) -> None:
        self.reset_viewport()

    def on_redraw(self) -> None:
        pass

    # --- map ----------------------------------------------------------

    def get_map(self):
        return self._map

    def set_map(self, surface) -> None:
        if self._map is not None:
            # nothing stays on the surface being left
            self.reset_viewport(True)
            for handle in self._map_handles:
                self._map.unsubscribe(handle)
            self._map_handles = []
            self._map.remove_overlay(self)

        self._map = surface
        if surface is None:
            return

        self._last_zoom = surface.get_zoom()
        self._zoom_changed = False
        self._map_handles = [
            surface.subscribe("zoom_changed", self._on_zoom_changed),
            surface.subscribe("idle", self._on_idle),
        ]
        was_ready = self._ready
        surface.add_overlay(self)
        if was_ready:
            self.redraw()

    def get_projection(self):
        return self._map.get_projection() if self._map is not None else None

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def grid_size(self) -> float:
        return self.options.grid_size

    def _on_zoom_changed(self) -> None:
        if self._map.get_zoom() != self._last_zoom:
            self._zoom_changed = True

    def _on_idle(self) -> None:
        if self._zoom_changed:
            self._zoom_changed = False
            self.repaint()
        else:
            self.redraw()

    def _set_ready(self, ready: bool) -> None:
        if not self._ready:
            self._ready = ready
            logger.debug(f"clusterer ready={ready}")
            self.create_clusters()

    # --- markers ------------------------------------------------------

    def get_markers(self) -> List[Marker]:
        return self._markers

    def get_total_markers(self) -> int:
        return len(self._markers)

    def add_marker(self, marker: Marker, defer_redraw: bool = False) -> None:
        if not self._push_marker(marker):
            return
        record = _record_of(marker)
        self._records[marker] = record
        self._tree.insert(record)

        if not defer_redraw:
            self.redraw()

    def add_markers(self, markers: Iterable[Marker], defer_redraw: bool = False) -> None:
        records = []
        for marker in markers:
            if self._push_marker(marker):
                record = _record_of(marker)
                self._records[marker] = record
                records.append(record)

        self._tree.load(records)
        logger.debug(f"indexed {len(records)} markers (total {len(self._markers)})")

        if not defer_redraw:
            self.redraw()

    def _push_marker(self, marker: Marker) -> bool:
        if marker in self._records:
            logger.warning(f"marker {marker.id or id(marker)} is already tracked")
            return False

        marker.clustered = False
        if marker.draggable:
            # the index entry goes stale once the marker moves
            self._drag_handles[marker] = marker.subscribe("dragend", self._on_marker_dragend)
        self._markers.append(marker)
        return True

    def _on_marker_dragend(self, marker: Marker) -> None:
        old = self._records.get(marker)
        if old is None:
            return
        self._tree.remove(old)
        record = _record_of(marker)
        self._records[marker] = record
        self._tree.insert(record)
        marker.clustered = False
        self.repaint()

    def _remove_marker(self, marker: Marker) -> bool:
        record = self._records.pop(marker, None)
        if record is None:
            return False

        marker.set_map(None)
        self._markers = [m for m in self._markers if m is not marker]
        self._tree.remove(record)

        handle = self._drag_handles.pop(marker, None)
        if handle is not None:
            marker.unsubscribe(handle)
        return True

    def remove_marker(self, marker: Marker, defer_redraw: bool = False) -> bool:
        """Stop tracking ``marker``. Any removal triggers a full recluster."""
        removed = self._remove_marker(marker)

        if removed and not defer_redraw:
            self.reset_viewport()
            self.redraw()
        return removed

    def remove_markers(self, markers: Iterable[Marker], defer_redraw: bool = False) -> bool:
        removed = False
        for marker in markers:
            if self._remove_marker(marker):
                removed = True
            else:
                logger.warning(f"marker {marker.id or id(marker)} is not tracked, not removed")

        if removed and not defer_redraw:
            self.reset_viewport()
            self.redraw()
        return removed

    def clear_markers(self, defer_redraw: bool = False) -> None:
        self.reset_viewport(True)

        for marker, handle in self._drag_handles.items():
            marker.unsubscribe(handle)
        self._drag_handles = {}
        self._markers = []
        self._records = {}
        self._tree.clear()

        if not defer_redraw:
            self.redraw()

    def fit_map_to_markers(self) -> None:
        bounds = LatLngBounds.from_points(m.position for m in self._markers)
        if bounds is not None and self._map is not None:
            self._map.fit_bounds(bounds)

    # --- clusters -----------------------------------------------------

    def get_clusters(self) -> List[Cluster]:
        return self._clusters

    def get_total_clusters(self) -> int:
        return len(self._clusters)

    def get_marker_cluster(self, marker: Marker) -> Optional[Cluster]:
        if not marker.clustered:
            return None
        for cluster in self._clusters:
            if cluster.is_marker_already_added(marker):
                return cluster
        return None

    def remove_cluster(self, cluster: Cluster) -> bool:
        for i, c in enumerate(self._clusters):
            if c is cluster:
                for m in cluster.get_markers():
                    m.clustered = False
                cluster.dispose()
                del self._clusters[i]
                return True
        return False

    def get_extended_bounds(self, bounds: LatLngBounds) -> Optional[LatLngBounds]:
        projection = self.get_projection()
        if projection is None:
            return None
        return expand(bounds, self.options.grid_size, projection)

    def reset_viewport(self, also_detach: bool = False) -> None:
        for cluster in self._clusters:
            cluster.dispose()

        for marker in self._markers:
            marker.clustered = False
            if also_detach:
                marker.set_map(None)

        self._clusters = []

    def repaint(self) -> None:
        self.reset_viewport()
        self.redraw()

    def redraw(self) -> None:
        self.create_clusters()

    def create_clusters(self) -> None:
        if not self._ready:
            return

        map_bounds = self._map.get_bounds() if self._map is not None else None
        if map_bounds is None:
            logger.debug("viewport undefined, clustering pass skipped")
            return
        map_bounds = self.get_extended_bounds(map_bounds)
        if map_bounds is None:
            logger.warning("map surface has bounds but no projection, clustering pass skipped")
            return

        self._last_zoom = self._map.get_zoom()
        is_clusterable = self.options.is_clusterable
        before = len(self._clusters)
        skipped = 0

        for marker in list(self._markers):
            if marker.clustered:
                continue

            pos = marker.position
            if not map_bounds.contains(pos) or not is_clusterable(marker):
                skipped += 1
                continue

            cluster = Cluster(self)
            cluster.add_marker(marker)

            catchment = self.get_extended_bounds(LatLngBounds(pos, pos))
            for record in self._tree.search(to_query_rect(catchment)):
                m = record.marker
                if m.clustered:
                    continue
                if not is_clusterable(m):
                    continue
                cluster.add_marker(m)

            self._clusters.append(cluster)

        logger.debug(
            f"clustering pass at zoom {self._last_zoom}: "
            f"{len(self._clusters) - before} new, {len(self._clusters)} total, "
            f"{skipped} markers skipped"
        )

# cluster/cluster.py
from typing import List, Optional

from markercluster.model.models import LatLng, LatLngBounds, Marker
from markercluster.cluster.icon import ClusterIcon


class Cluster:
    """
    A group of markers around a center.

    The catchment bounds are the center grown by ``grid_size`` pixels at the
    current zoom; they are recomputed whenever the center moves.
    """

    def __init__(self, marker_clusterer):
        self._marker_clusterer = marker_clusterer
        self._map = marker_clusterer.get_map()
        options = marker_clusterer.options
        self.grid_size = options.grid_size
        self.min_cluster_size = options.minimum_cluster_size
        self.average_center = options.average_center
        self._center: Optional[LatLng] = None
        self._markers: List[Marker] = []
        self._bounds: Optional[LatLngBounds] = None
        self._cluster_icon = ClusterIcon(
            self, options.icon_generator,
            width=options.width, height=options.height, anchor=options.anchor,
        )

    # --- membership ---------------------------------------------------

    def is_marker_already_added(self, marker: Marker) -> bool:
        return any(m is marker for m in self._markers)

    def add_marker(self, marker: Marker) -> bool:
        if self.is_marker_already_added(marker):
            return False

        pos = marker.position
        if self._center is None:
            self._center = pos
            self._calculate_bounds()
        elif self.average_center:
            n = len(self._markers) + 1
            lat = (self._center.lat * (n - 1) + pos.lat) / n
            lng = (self._center.lng * (n - 1) + pos.lng) / n
            self._center = LatLng(lat, lng)
            self._calculate_bounds()

        marker.clustered = True
        self._markers.append(marker)

        count = len(self._markers)
        if count < self.min_cluster_size and marker.get_map() is not self._map:
            # not enough members yet: the marker stands alone
            marker.set_map(self._map)

        if count == self.min_cluster_size:
            for m in self._markers:
                m.set_map(None)

        if count >= self.min_cluster_size:
            marker.set_map(None)

        self.refresh_presentation()
        return True

    def remove_marker(self, marker: Marker) -> bool:
        """
        Drop ``marker`` from the cluster. Center and catchment stay as they
        were; if the cluster falls below the minimum size its remaining
        members are shown again and the icon is hidden.
        """
        for i, m in enumerate(self._markers):
            if m is marker:
                break
        else:
            return False

        del self._markers[i]
        marker.clustered = False

        if len(self._markers) < self.min_cluster_size:
            for m in self._markers:
                m.set_map(self._map)
        self.refresh_presentation()
        return True

    def contains_point(self, position: LatLng) -> bool:
        return self._bounds is not None and self._bounds.contains(position)

    def is_marker_in_cluster_bounds(self, marker: Marker) -> bool:
        return self.contains_point(marker.position)

    # --- accessors ----------------------------------------------------

    def get_marker_clusterer(self):
        return self._marker_clusterer

    def get_map(self):
        return self._map

    def get_markers(self) -> List[Marker]:
        return self._markers

    def get_size(self) -> int:
        return len(self._markers)

    def get_center(self) -> Optional[LatLng]:
        return self._center

    def get_catchment_bounds(self) -> Optional[LatLngBounds]:
        return self._bounds

    def get_icon(self) -> ClusterIcon:
        return self._cluster_icon

    def get_bounds(self) -> Optional[LatLngBounds]:
        """Tight bounds of the center and every member."""
        if self._center is None:
            return None
        bounds = LatLngBounds(self._center, self._center)
        for m in self._markers:
            bounds = bounds.extend(m.position)
        return bounds

    # --- presentation -------------------------------------------------

    def refresh_presentation(self) -> None:
        zoom = self._map.get_zoom() if self._map is not None else None
        max_zoom = self._marker_clusterer.options.max_zoom

        if max_zoom is not None and zoom is not None and zoom > max_zoom:
            # clustering is off past max_zoom
            for m in self._markers:
                m.set_map(self._map)
            self._cluster_icon.hide()
            return

        if len(self._markers) < self.min_cluster_size:
            self._cluster_icon.hide()
            return

        self._cluster_icon.center = self._center
        self._cluster_icon.show()

    def dispose(self) -> None:
        self._cluster_icon.remove()
        self._markers = []

    def _calculate_bounds(self) -> None:
        bounds = LatLngBounds(self._center, self._center)
        self._bounds = self._marker_clusterer.get_extended_bounds(bounds)

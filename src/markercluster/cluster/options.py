# cluster/options.py
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Mapping, Optional, Sequence

from markercluster.model.models import Anchor, Marker

# camelCase keys accepted by from_dict()
_ALIASES = {
    "gridSize": "grid_size",
    "maxZoom": "max_zoom",
    "zoomOnClick": "zoom_on_click",
    "averageCenter": "average_center",
    "minimumClusterSize": "minimum_cluster_size",
    "isClusterable": "is_clusterable",
    "iconGenerator": "icon_generator",
    "maxMarkers": "max_entries",
}


def accept_all(marker: Marker) -> bool:
    return True


def marker_count(markers: Sequence[Marker]) -> Any:
    return len(markers)


@dataclass
class ClustererOptions:
    grid_size: float = 60
    max_zoom: Optional[float] = None
    zoom_on_click: bool = True
    average_center: bool = False
    minimum_cluster_size: int = 2
    is_clusterable: Callable[[Marker], bool] = field(default=accept_all, repr=False)
    icon_generator: Callable[[Sequence[Marker]], Any] = field(default=marker_count, repr=False)
    width: float = 0
    height: float = 0
    anchor: Anchor = Anchor.CENTER
    max_entries: int = 9

    def __post_init__(self):
        if self.grid_size is None or self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size!r}")
        if self.minimum_cluster_size is None or self.minimum_cluster_size < 1:
            raise ValueError(f"minimum_cluster_size must be >= 1, got {self.minimum_cluster_size!r}")
        if self.max_entries < 2:
            raise ValueError(f"max_entries must be >= 2, got {self.max_entries!r}")
        # null means the default hook
        if self.is_clusterable is None:
            self.is_clusterable = accept_all
        if self.icon_generator is None:
            self.icon_generator = marker_count
        for name in ("is_clusterable", "icon_generator"):
            if not callable(getattr(self, name)):
                raise ValueError(f"{name} must be callable, got {getattr(self, name)!r}")
        if isinstance(self.anchor, str):
            try:
                self.anchor = Anchor[self.anchor.upper()]
            except KeyError:
                raise ValueError(f"unknown anchor {self.anchor!r}") from None
        else:
            self.anchor = Anchor(self.anchor)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ClustererOptions":
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for k, v in (data or {}).items():
            name = _ALIASES.get(k, k)
            if name not in known:
                raise ValueError(f"unknown clusterer option {k!r}")
            kwargs[name] = v
        return cls(**kwargs)

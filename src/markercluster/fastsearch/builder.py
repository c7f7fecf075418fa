# fastsearch/builder.py
from dataclasses import dataclass
from typing import Any, List, Optional
import numpy as np


@dataclass(frozen=True)
class IndexRecord:
    """One indexed marker. Equality is structural: (lat, lng, marker)."""
    lat: float
    lng: float
    marker: Any


@dataclass
class BBox:
    # x = latitude, y = longitude
    minx: float; miny: float
    maxx: float; maxy: float

    @classmethod
    def of_record(cls, r: IndexRecord) -> "BBox":
        return cls(r.lat, r.lng, r.lat, r.lng)

    def area(self) -> float:
        return (self.maxx - self.minx) * (self.maxy - self.miny)

    def margin(self) -> float:
        return (self.maxx - self.minx) + (self.maxy - self.miny)

    def enlarged_area(self, r: IndexRecord) -> float:
        return ((max(self.maxx, r.lat) - min(self.minx, r.lat)) *
                (max(self.maxy, r.lng) - min(self.miny, r.lng)))

    def enlarged_margin(self, r: IndexRecord) -> float:
        return ((max(self.maxx, r.lat) - min(self.minx, r.lat)) +
                (max(self.maxy, r.lng) - min(self.miny, r.lng)))

    def extend(self, r: IndexRecord) -> None:
        self.minx = min(self.minx, r.lat); self.miny = min(self.miny, r.lng)
        self.maxx = max(self.maxx, r.lat); self.maxy = max(self.maxy, r.lng)

    def contains_point(self, x: float, y: float) -> bool:
        # closed on every edge
        return self.minx <= x <= self.maxx and self.miny <= y <= self.maxy

    def intersects(self, other: "BBox") -> bool:
        return (self.minx <= other.maxx and other.minx <= self.maxx and
                self.miny <= other.maxy and other.miny <= self.maxy)


@dataclass
class Node:
    bbox: BBox
    left: Optional['Node'] = None
    right: Optional['Node'] = None
    is_leaf: bool = False
    records: Optional[List[IndexRecord]] = None  # leaves only
    count: int = 0  # records in this subtree


def merge_bbox(a: BBox, b: BBox) -> BBox:
    return BBox(
        min(a.minx, b.minx), min(a.miny, b.miny),
        max(a.maxx, b.maxx), max(a.maxy, b.maxy),
    )


def records_bbox(records: List[IndexRecord]) -> BBox:
    return BBox(
        min(r.lat for r in records), min(r.lng for r in records),
        max(r.lat for r in records), max(r.lng for r in records),
    )


def refit(node: Node) -> None:
    if node.is_leaf:
        node.bbox = records_bbox(node.records)
        node.count = len(node.records)
    else:
        node.bbox = merge_bbox(node.left.bbox, node.right.bbox)
        node.count = node.left.count + node.right.count


def build_bvh(records: List[IndexRecord], depth=0, max_depth: Optional[int] = None,
              leaf_capacity: int = 9) -> Node:
    if len(records) == 0:
        raise ValueError("records is empty")

    if len(records) <= leaf_capacity or (max_depth is not None and depth >= max_depth):
        return Node(bbox=records_bbox(records), is_leaf=True, records=list(records),
                    count=len(records))

    coords = np.array([[r.lat, r.lng] for r in records])
    spreads = coords.max(axis=0) - coords.min(axis=0)
    axis = int(np.argmax(spreads))

    # split at the median along the widest axis
    order = np.argsort(coords[:, axis], kind="stable")
    ordered = [records[i] for i in order]
    mid = len(ordered) // 2

    left = build_bvh(ordered[:mid], depth + 1, max_depth, leaf_capacity)
    right = build_bvh(ordered[mid:], depth + 1, max_depth, leaf_capacity)
    return Node(bbox=merge_bbox(left.bbox, right.bbox), left=left, right=right,
                count=left.count + right.count)

# fastsearch/index.py
import math
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from markercluster.fastsearch.analysis import analyze_tree
from markercluster.fastsearch.builder import (
    BBox, IndexRecord, Node, build_bvh, refit,
)
from markercluster.fastsearch.search import collect_all, find_path, search_rect


class SpatialIndex:
    """
    Mutable range-query index over IndexRecord points.

    - load(): bulk build (median split BVH); merged into an existing tree by rebuild
    - insert(): least-enlargement descent, overfull leaves split in two
    - remove(): structural match, empty leaves collapse into their sibling
    - search(): closed rectangle [min_lat, min_lng, max_lat, max_lng]

    The tree is rebuilt whenever an insert path grows past twice the
    balanced height, which keeps inserts logarithmic on average.
    """

    def __init__(self, max_entries: int = 9):
        self.max_entries = max(4, int(max_entries))
        self.min_entries = max(2, math.ceil(self.max_entries * 0.4))
        self.root: Optional[Node] = None
        self._size = 0
        self.rebuilds = 0

    def __len__(self) -> int:
        return self._size

    # --- bulk ---------------------------------------------------------

    def load(self, records: Iterable[IndexRecord]) -> "SpatialIndex":
        records = list(records)
        if not records:
            return self

        if self.root is None:
            self.root = build_bvh(records, leaf_capacity=self.max_entries)
            self._size = len(records)
        elif len(records) < self.min_entries:
            for r in records:
                self.insert(r)
        else:
            merged = self.all() + records
            logger.debug(f"spatial index: rebuilding with {len(merged)} records")
            self.root = build_bvh(merged, leaf_capacity=self.max_entries)
            self._size = len(merged)
        return self

    def clear(self) -> "SpatialIndex":
        self.root = None
        self._size = 0
        return self

    # --- single record ------------------------------------------------

    def insert(self, record: IndexRecord) -> "SpatialIndex":
        if self.root is None:
            self.root = Node(bbox=BBox.of_record(record), is_leaf=True, records=[record], count=1)
            self._size = 1
            return self

        node = self.root
        depth = 0
        while not node.is_leaf:
            node.bbox.extend(record)
            node.count += 1
            node = self._choose_subtree(node, record)
            depth += 1

        node.records.append(record)
        node.bbox.extend(record)
        node.count += 1
        self._size += 1

        if len(node.records) > self.max_entries:
            self._split(node)
            depth += 1

        if depth > self._height_limit():
            logger.debug(f"spatial index: depth {depth} over limit, rebalancing")
            self.rebuilds += 1
            self.root = build_bvh(self.all(), leaf_capacity=self.max_entries)
        return self

    def remove(self, record: IndexRecord) -> bool:
        """Remove one structurally equal record. Returns False if absent."""
        path = find_path(self.root, record)
        if path is None:
            return False

        leaf = path[-1]
        leaf.records.remove(record)
        self._size -= 1

        if leaf.records:
            ancestors = path
        elif len(path) == 1:
            self.root = None
            return True
        else:
            parent = path[-2]
            sibling = parent.right if parent.left is leaf else parent.left
            self._replace(parent, sibling)
            ancestors = path[:-1]

        for node in reversed(ancestors):
            refit(node)
        return True

    # --- queries ------------------------------------------------------

    def search(self, rect: Sequence[float]) -> List[IndexRecord]:
        min_lat, min_lng, max_lat, max_lng = rect
        return search_rect(self.root, BBox(min_lat, min_lng, max_lat, max_lng))

    def all(self) -> List[IndexRecord]:
        return collect_all(self.root)

    def stats(self) -> dict:
        return analyze_tree(self.root)

    # --- internals ----------------------------------------------------

    @staticmethod
    def _choose_subtree(node: Node, record: IndexRecord) -> Node:
        # margin and subtree size break ties between degenerate (zero-area) boxes
        def cost(child: Node):
            bbox = child.bbox
            return (bbox.enlarged_area(record) - bbox.area(),
                    bbox.enlarged_margin(record) - bbox.margin(),
                    child.count)
        return min((node.left, node.right), key=cost)

    def _split(self, leaf: Node) -> None:
        sub = build_bvh(leaf.records, max_depth=1, leaf_capacity=self.max_entries)
        self._replace(leaf, sub)

    @staticmethod
    def _replace(target: Node, source: Node) -> None:
        target.bbox = source.bbox
        target.left = source.left
        target.right = source.right
        target.is_leaf = source.is_leaf
        target.records = source.records
        target.count = source.count

    def _height_limit(self) -> int:
        leaves = max(1, self._size / self.max_entries)
        return 2 * math.ceil(math.log2(leaves + 1)) + 2

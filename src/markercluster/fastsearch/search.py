# fastsearch/search.py
from typing import List, Optional

from markercluster.fastsearch.builder import BBox, IndexRecord, Node


def search_rect(node: Optional[Node], rect: BBox, found=None, stats=None) -> List[IndexRecord]:
    """Collect every record whose point lies inside the closed rectangle."""
    if found is None:
        found = []
    if stats is None:
        stats = {"visited": 0}
    if node is None:
        return found

    stats["visited"] += 1
    if not node.bbox.intersects(rect):
        return found

    if node.is_leaf:
        for r in node.records:
            if rect.contains_point(r.lat, r.lng):
                found.append(r)
        return found

    search_rect(node.left, rect, found, stats)
    search_rect(node.right, rect, found, stats)
    return found


def collect_all(node: Optional[Node], found=None) -> List[IndexRecord]:
    if found is None:
        found = []
    if node is None:
        return found
    if node.is_leaf:
        found.extend(node.records)
    else:
        collect_all(node.left, found)
        collect_all(node.right, found)
    return found


def find_path(node: Optional[Node], record: IndexRecord) -> Optional[List[Node]]:
    """Root-to-leaf node path for the leaf holding ``record``, or None."""
    if node is None or not node.bbox.contains_point(record.lat, record.lng):
        return None
    if node.is_leaf:
        return [node] if record in node.records else None
    for child in (node.left, node.right):
        sub = find_path(child, record)
        if sub is not None:
            return [node] + sub
    return None

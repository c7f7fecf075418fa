# fastsearch/analysis.py

def analyze_tree(root):
    """Max depth, leaf count, average leaf size and record count of a BVH."""
    leaf_counts = []
    max_depth = 0

    if root is None:
        return {"max_depth": 0, "leaves": 0, "avg_leaf_size": 0, "records": 0}

    def traverse(node, depth=0):
        nonlocal max_depth
        max_depth = max(max_depth, depth)

        if node.is_leaf:
            leaf_counts.append(len(node.records))
        else:
            if node.left:
                traverse(node.left, depth + 1)
            if node.right:
                traverse(node.right, depth + 1)

    traverse(root)
    avg_leaf_size = sum(leaf_counts) / len(leaf_counts) if leaf_counts else 0
    return {
        "max_depth": max_depth,
        "leaves": len(leaf_counts),
        "avg_leaf_size": avg_leaf_size,
        "records": sum(leaf_counts),
    }

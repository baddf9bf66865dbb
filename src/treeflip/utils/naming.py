from __future__ import annotations

from treeflip.trees.node import RootedTree


def tree_name(tree: RootedTree) -> str:
    """Human-readable name for the unrooted tree underlying *tree*.

    Handles: K1, K2, P{n}, K1,{r}, fork, and general T{n}[{internal degrees}].
    The root is ignored, so every member of a cluster gets the same name.
    """
    nodes = tree.all_nodes()
    n = len(nodes)
    if n == 1:
        return "K1"
    if n == 2:
        return "K2"

    # Undirected degree: children plus the edge up to the parent
    degs = sorted(
        (node.degree() + (0 if node.is_root() else 1) for node in nodes),
        reverse=True,
    )
    max_d = degs[0]

    if max_d <= 2:
        return f"P{n}"

    # Star: one hub adjacent to every other vertex
    if max_d == n - 1:
        return f"K1,{n - 1}"

    # Fork (chair): the only 5-vertex tree with a degree-3 vertex that is not a star
    if n == 5 and max_d == 3:
        return "fork"

    ds_str = "".join(str(d) for d in degs if d > 1)
    return f"T{n}[{ds_str}]"

from .graph6 import tree_to_edges, tree_to_nx, tree_to_g6, tree_from_edges, tree_from_nx

__all__ = [
    "tree_to_edges",
    "tree_to_nx",
    "tree_to_g6",
    "tree_from_edges",
    "tree_from_nx",
]

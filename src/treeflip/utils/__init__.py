from .connectivity import is_tree_edges
from .naming import tree_name

__all__ = [
    "is_tree_edges",
    "tree_name",
]

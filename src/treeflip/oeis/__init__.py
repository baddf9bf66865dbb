from .sequences import (
    A000055,
    A000081,
    TABLE_MAX_N,
    count_rooted_trees,
    count_unrooted_trees,
    rooted_tree_count,
    unrooted_tree_count,
)

__all__ = [
    "A000055",
    "A000081",
    "TABLE_MAX_N",
    "count_rooted_trees",
    "count_unrooted_trees",
    "rooted_tree_count",
    "unrooted_tree_count",
]

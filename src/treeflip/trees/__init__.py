from .node import TreeNode, RootedTree, copy_subtree
from .canonical import LEAF, canonical_form, parse_canonical, is_canonical
from .generator import (
    MAX_NODES,
    TreeCache,
    clear_cache,
    default_cache,
    generate,
    integer_partitions,
    iter_subtree_choices,
)
from .reroot import (
    UnrootedTree,
    all_rootings,
    center_signature,
    path_to_root,
    reroot,
    same_unrooted_class,
    tree_centers,
    unrooted_signature,
)

__all__ = [
    "TreeNode",
    "RootedTree",
    "copy_subtree",
    "LEAF",
    "canonical_form",
    "parse_canonical",
    "is_canonical",
    "MAX_NODES",
    "TreeCache",
    "clear_cache",
    "default_cache",
    "generate",
    "integer_partitions",
    "iter_subtree_choices",
    "UnrootedTree",
    "all_rootings",
    "center_signature",
    "path_to_root",
    "reroot",
    "same_unrooted_class",
    "tree_centers",
    "unrooted_signature",
]

"""
treeflip: enumeration of unlabeled rooted trees, AHU canonical forms, and the
flip transform grouping rooted trees into unrooted classes (A000081 / A000055).
"""

from .trees.node import TreeNode, RootedTree
from .trees.canonical import canonical_form, parse_canonical
from .trees.generator import TreeCache, generate, integer_partitions
from .trees.reroot import (
    UnrootedTree,
    all_rootings,
    center_signature,
    reroot,
    same_unrooted_class,
    unrooted_signature,
)
from .trees.clusters import group_into_clusters, cluster_count, nauty_signature, verify

# Reference sequences
from .oeis.sequences import A000081, A000055, rooted_tree_count, unrooted_tree_count

# Level facade
from .levels.mapping import LevelSummary, summary

# Interop
from .io.graph6 import tree_to_edges, tree_to_nx, tree_to_g6, tree_from_edges, tree_from_nx
from .external.nauty import nauty_available
from .utils.naming import tree_name

__all__ = [
    # Trees
    "TreeNode",
    "RootedTree",
    "canonical_form",
    "parse_canonical",
    "TreeCache",
    "generate",
    "integer_partitions",
    # Flip transform
    "UnrootedTree",
    "all_rootings",
    "center_signature",
    "reroot",
    "same_unrooted_class",
    "unrooted_signature",
    "group_into_clusters",
    "cluster_count",
    "nauty_signature",
    "verify",
    # Sequences
    "A000081",
    "A000055",
    "rooted_tree_count",
    "unrooted_tree_count",
    # Levels
    "LevelSummary",
    "summary",
    # Interop
    "tree_to_edges",
    "tree_to_nx",
    "tree_to_g6",
    "tree_from_edges",
    "tree_from_nx",
    "nauty_available",
    "tree_name",
]

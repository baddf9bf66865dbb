"""Level facade: level L is answered with the trees on L+1 nodes.

The root plays the part of the level's enclosing whole and the remaining L
nodes are its terms. Term counts follow A000081(L+1), cluster counts
A000055(L+1). Levels outside MIN_LEVEL..MAX_LEVEL, or whose trees would exceed the
generator's MAX_NODES ceiling, give empty answers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from treeflip.oeis.sequences import rooted_tree_count, unrooted_tree_count
from treeflip.trees.clusters import group_into_clusters
import treeflip.trees.generator as generator
from treeflip.trees.generator import TreeCache, generate
from treeflip.trees.node import RootedTree
from treeflip.utils.naming import tree_name

MIN_LEVEL = 0
MAX_LEVEL = 10


@dataclass(frozen=True)
class LevelSummary:
    """
    Everything the display side needs to know about one level.

    tree_canonicals: canonical form of every term (rooted tree).
    cluster_sizes:   number of terms in each cluster, clusters ordered by
                     unrooted signature.
    cluster_names:   tree_name() of each cluster, same order.
    """

    level: int
    term_count: int
    cluster_count: int
    node_count: int
    tree_canonicals: Tuple[str, ...]
    cluster_sizes: Tuple[int, ...]
    cluster_names: Tuple[str, ...]


def in_range(level: int) -> bool:
    """Level has terms and its trees fit under the generator's node ceiling."""
    return MIN_LEVEL <= level <= MAX_LEVEL and nodes_for_level(level) <= generator.MAX_NODES


def nodes_for_level(level: int) -> int:
    return level + 1


def term_count(level: int) -> int:
    if not in_range(level):
        return 0
    return rooted_tree_count(nodes_for_level(level))


def cluster_count(level: int) -> int:
    if not in_range(level):
        return 0
    return unrooted_tree_count(nodes_for_level(level))


def node_count(level: int) -> int:
    """Non-root nodes per term, i.e. the level itself."""
    return max(level, 0)


def level_trees(level: int, *, cache: Optional[TreeCache] = None) -> List[RootedTree]:
    if not in_range(level):
        return []
    return generate(nodes_for_level(level), cache=cache)


def canonical_forms(level: int, *, cache: Optional[TreeCache] = None) -> List[str]:
    return [t.canonical() for t in level_trees(level, cache=cache)]


def level_clusters(level: int, *, cache: Optional[TreeCache] = None) -> List[List[RootedTree]]:
    return group_into_clusters(level_trees(level, cache=cache))


def clusters(level: int, *, cache: Optional[TreeCache] = None) -> List[List[str]]:
    """One list of canonical forms per cluster."""
    return [[t.canonical() for t in c] for c in level_clusters(level, cache=cache)]


def cluster_sizes(level: int, *, cache: Optional[TreeCache] = None) -> List[int]:
    return [len(c) for c in level_clusters(level, cache=cache)]


def summary(level: int, *, cache: Optional[TreeCache] = None) -> LevelSummary:
    """Generate and cluster one level.

    Counts are taken from the generated trees, not the reference tables, so
    they agree with term_count()/cluster_count() only as long as the
    generator is correct.
    """
    trees = level_trees(level, cache=cache)
    groups = group_into_clusters(trees)
    return LevelSummary(
        level=level,
        term_count=len(trees),
        cluster_count=len(groups),
        node_count=node_count(level),
        tree_canonicals=tuple(t.canonical() for t in trees),
        cluster_sizes=tuple(len(c) for c in groups),
        cluster_names=tuple(tree_name(c[0]) for c in groups),
    )


def summaries(max_level: int = MAX_LEVEL, *, cache: Optional[TreeCache] = None) -> List[LevelSummary]:
    return [summary(level, cache=cache) for level in range(MIN_LEVEL, min(max_level, MAX_LEVEL) + 1)]

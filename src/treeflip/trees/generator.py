"""Enumeration of unlabeled rooted trees on n nodes (OEIS A000081).

A rooted tree on n nodes is a root plus a multiset of subtrees whose sizes
form an integer partition of n-1. For each partition we pick one subtree per
part from the (memoized) trees of that size, taking runs of equal parts with
non-decreasing indices so every multiset of subtrees is built exactly once.
"""
from __future__ import annotations

import os
import sys
import threading
from itertools import chain, combinations_with_replacement, count, groupby, product
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from treeflip.trees.node import RootedTree, TreeNode, copy_subtree

_DEFAULT_MAX_NODES = 14


def _env_int(name: str, default: int) -> int:
    """Integer setting from the environment; unset or unparsable gives *default*."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"[treeflip] ignoring {name}={raw!r} (not an integer), using {default}", file=sys.stderr)
        return default


# Hard ceiling on n; R(14) = 32973 trees, R(16) is already 235381.
MAX_NODES = _env_int("TREEFLIP_MAX_NODES", _DEFAULT_MAX_NODES)


def integer_partitions(total: int, max_part: Optional[int] = None) -> Iterator[Tuple[int, ...]]:
    """Partitions of *total* as non-increasing tuples, largest first part first.

    >>> list(integer_partitions(4))
    [(4,), (3, 1), (2, 2), (2, 1, 1), (1, 1, 1, 1)]
    """
    if max_part is None:
        max_part = total
    if total == 0:
        yield ()
        return
    for part in range(min(total, max_part), 0, -1):
        for rest in integer_partitions(total - part, part):
            yield (part,) + rest


class TreeCache:
    """Memo of generated trees keyed by node count.

    Populated lazily and never invalidated, except by an explicit clear().
    All access from generate() happens under ``lock``, so concurrent callers
    compute a given n at most once.
    """

    def __init__(self) -> None:
        self._trees: Dict[int, List[RootedTree]] = {}
        self.lock = threading.RLock()

    def get(self, n: int) -> Optional[List[RootedTree]]:
        """The cached list itself (not a copy), or None."""
        with self.lock:
            return self._trees.get(n)

    def store(self, n: int, trees: List[RootedTree]) -> None:
        with self.lock:
            self._trees[n] = trees

    def clear(self) -> None:
        with self.lock:
            self._trees.clear()

    def sizes(self) -> Dict[int, int]:
        """Number of cached trees per n."""
        with self.lock:
            return {n: len(trees) for n, trees in sorted(self._trees.items())}

    def __contains__(self, n: object) -> bool:
        with self.lock:
            return n in self._trees

    def __len__(self) -> int:
        with self.lock:
            return len(self._trees)


_DEFAULT_CACHE = TreeCache()


def default_cache() -> TreeCache:
    """The process-wide cache used when generate() gets no cache."""
    return _DEFAULT_CACHE


def clear_cache() -> None:
    _DEFAULT_CACHE.clear()


def iter_subtree_choices(
    partition: Sequence[int],
    pools: Mapping[int, Sequence[RootedTree]],
) -> Iterator[Tuple[RootedTree, ...]]:
    """Yield one tuple of subtrees per distinct multiset compatible with *partition*.

    *partition* must be non-increasing so equal parts are adjacent;
    *pools[size]* lists the duplicate-free candidate subtrees of that size.
    Within a run of k equal parts the chosen pool indices are non-decreasing
    (combinations with replacement), which rules out permuted duplicates.
    """
    runs = []
    for size, group in groupby(partition):
        k = sum(1 for _ in group)
        runs.append(list(combinations_with_replacement(pools[size], k)))
    for picked in product(*runs):
        yield tuple(chain.from_iterable(picked))


def _assemble(subtrees: Sequence[RootedTree]) -> RootedTree:
    ids = count(1)
    root = TreeNode(0)
    for sub in subtrees:
        root.add_child(copy_subtree(sub.root, ids))
    return RootedTree(root)


def _build(n: int, cache: TreeCache) -> List[RootedTree]:
    if n == 1:
        return [RootedTree.single()]

    result: List[RootedTree] = []
    seen: set[str] = set()
    for partition in integer_partitions(n - 1):
        pools = {size: _generate(size, cache) for size in set(partition)}
        for subtrees in iter_subtree_choices(partition, pools):
            tree = _assemble(subtrees)
            key = tree.canonical()
            if key in seen:
                raise RuntimeError(
                    f"duplicate rooted tree {key} generated for n={n} "
                    f"(partition {partition})"
                )
            seen.add(key)
            result.append(tree)
    return result


def _generate(n: int, cache: TreeCache) -> List[RootedTree]:
    with cache.lock:
        trees = cache.get(n)
        if trees is None:
            trees = _build(n, cache)
            cache.store(n, trees)
        return trees


def generate(
    n: int,
    *,
    cache: Optional[TreeCache] = None,
    max_nodes: Optional[int] = None,
) -> List[RootedTree]:
    """All pairwise non-isomorphic rooted trees on exactly *n* nodes.

    Parameters
    ----------
    n : int
        Number of nodes, root included. ``n <= 0`` gives an empty list.
    cache : TreeCache, optional
        Memo to read and populate; defaults to the process-wide cache.
    max_nodes : int, optional
        Ceiling on n, defaults to MAX_NODES. Larger n raise ValueError
        instead of running for hours.

    Returns
    -------
    list[RootedTree]
        R(n) trees in enumeration order. The order carries no meaning.
        The list is a fresh copy; the trees themselves are shared with the
        cache and are immutable.
    """
    if n <= 0:
        return []
    limit = MAX_NODES if max_nodes is None else max_nodes
    if n > limit:
        raise ValueError(
            f"refusing to generate rooted trees on n={n} nodes (limit {limit}); "
            "raise max_nodes or TREEFLIP_MAX_NODES to allow it."
        )
    if cache is None:
        cache = _DEFAULT_CACHE
    return list(_generate(n, cache))

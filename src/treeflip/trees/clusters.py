"""Grouping rooted trees into unrooted classes (clusters).

A cluster is the set of rooted trees that reroot into one another, i.e. one
unrooted tree. For the output of generate(n) the number of clusters is
A000055(n).
"""
from __future__ import annotations

import sys
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional

from treeflip.external.nauty import canon_g6
from treeflip.io.graph6 import tree_to_g6
from treeflip.oeis.sequences import TABLE_MAX_N, rooted_tree_count, unrooted_tree_count
from treeflip.trees.generator import TreeCache, generate
from treeflip.trees.node import RootedTree
from treeflip.trees.reroot import center_signature, unrooted_signature

SignatureFn = Callable[[RootedTree], str]


def nauty_signature(tree: RootedTree) -> str:
    """Canonical graph6 of the underlying unrooted tree, via nauty shortg."""
    return canon_g6(tree_to_g6(tree))


SIGNATURES: Dict[str, SignatureFn] = {
    "reroot": unrooted_signature,
    "center": center_signature,
    "nauty": nauty_signature,
}


def signature_function(method: str) -> SignatureFn:
    try:
        return SIGNATURES[method]
    except KeyError:
        raise ValueError(
            f"unknown signature method {method!r}; expected one of {sorted(SIGNATURES)}"
        ) from None


def group_into_clusters(
    trees: Iterable[RootedTree],
    key: SignatureFn = unrooted_signature,
) -> List[List[RootedTree]]:
    """Partition *trees* by unrooted signature.

    Clusters come back ordered by signature; within a cluster, trees keep
    their input order.
    """
    buckets: Dict[str, List[RootedTree]] = defaultdict(list)
    for tree in trees:
        buckets[key(tree)].append(tree)
    return [buckets[sig] for sig in sorted(buckets)]


def cluster_count(
    n: int,
    *,
    cache: Optional[TreeCache] = None,
    method: str = "reroot",
) -> int:
    """Number of unrooted trees on n nodes, counted by clustering generate(n)."""
    key = signature_function(method)
    return len(group_into_clusters(generate(n, cache=cache), key=key))


def verify(
    max_n: int = 6,
    *,
    cache: Optional[TreeCache] = None,
    method: str = "reroot",
    strict: bool = False,
    verbose: bool = False,
) -> bool:
    """Check tree and cluster counts for n = 1..max_n against A000081 / A000055.

    Returns True iff every count matches. With strict=True a mismatch
    raises RuntimeError instead. Progress goes to stderr when verbose.
    """
    if max_n > TABLE_MAX_N:
        raise ValueError(f"reference tables only cover n <= {TABLE_MAX_N}")
    key = signature_function(method)

    for n in range(1, max_n + 1):
        trees = generate(n, cache=cache)
        clusters = group_into_clusters(trees, key=key)
        want_r, want_u = rooted_tree_count(n), unrooted_tree_count(n)
        if verbose:
            print(
                f"[n={n}] rooted={len(trees)}/{want_r} clusters={len(clusters)}/{want_u}",
                file=sys.stderr,
            )
        if len(trees) != want_r or len(clusters) != want_u:
            msg = (
                f"count mismatch at n={n}: {len(trees)} rooted trees (expected {want_r}), "
                f"{len(clusters)} clusters (expected {want_u})"
            )
            if strict:
                raise RuntimeError(msg)
            if verbose:
                print(f"[n={n}] {msg}", file=sys.stderr)
            return False
    return True

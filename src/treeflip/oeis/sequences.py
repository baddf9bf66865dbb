"""Reference counts for rooted (A000081) and unrooted (A000055) trees.

The tables are indexed by node count starting at n = 0. The recurrences
reproduce them and extend past the table when needed.
"""
from __future__ import annotations

from functools import lru_cache

# a(n) = number of rooted trees with n unlabeled nodes
A000081 = (0, 1, 1, 2, 4, 9, 20, 48, 115, 286, 719, 1842)

# a(n) = number of unrooted trees with n unlabeled nodes
A000055 = (1, 1, 1, 1, 2, 3, 6, 11, 23, 47, 106, 235)

TABLE_MAX_N = len(A000081) - 1


def rooted_tree_count(n: int) -> int:
    """A000081(n) from the table; 0 outside 0..TABLE_MAX_N."""
    if n < 0 or n > TABLE_MAX_N:
        return 0
    return A000081[n]


def unrooted_tree_count(n: int) -> int:
    """A000055(n) from the table; 0 outside 0..TABLE_MAX_N."""
    if n < 0 or n > TABLE_MAX_N:
        return 0
    return A000055[n]


@lru_cache(maxsize=None)
def _divisor_weight(k: int) -> int:
    """sum_{d | k} d * R(d)."""
    return sum(d * count_rooted_trees(d) for d in range(1, k + 1) if k % d == 0)


@lru_cache(maxsize=None)
def count_rooted_trees(n: int) -> int:
    """A000081(n) via the Euler transform recurrence.

    R(n+1) = (1/n) * sum_{k=1..n} (sum_{d|k} d R(d)) * R(n-k+1)
    """
    if n <= 0:
        return 0
    if n == 1:
        return 1
    m = n - 1
    total = sum(_divisor_weight(k) * count_rooted_trees(m - k + 1) for k in range(1, m + 1))
    return total // m


def count_unrooted_trees(n: int) -> int:
    """A000055(n) via Otter's dissimilarity theorem.

    U(n) = R(n) - (1/2) * sum_{i+j=n} R(i) R(j) [+ R(n/2)/2 if n even]
    """
    if n < 0:
        return 0
    if n == 0:
        return 1
    pairs = sum(count_rooted_trees(i) * count_rooted_trees(n - i) for i in range(1, n))
    if n % 2 == 0:
        pairs -= count_rooted_trees(n // 2)
    return count_rooted_trees(n) - pairs // 2

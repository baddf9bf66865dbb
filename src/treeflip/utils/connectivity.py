from __future__ import annotations


def is_tree_edges(edges: list[tuple[int, int]], n: int) -> bool:
    """Check whether *edges* form a spanning tree on vertices {0..n-1}.

    A tree on n vertices has exactly n-1 edges and no cycle; with that edge
    count, acyclic implies connected. Out-of-range endpoints and self-loops
    make the answer False.

    Semantics for degenerate cases:
      - n == 0                  -> False (no tree has zero vertices)
      - n == 1, no edges        -> True
    """
    if n <= 0:
        return False
    if len(edges) != n - 1:
        return False

    parent = list(range(n))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n) or u == v:
            return False
        ru, rv = find(u), find(v)
        if ru == rv:
            return False
        parent[ru] = rv
    return True

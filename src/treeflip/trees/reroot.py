"""Rerooting and unrooted-tree signatures (the flip transform).

Rerooting keeps the undirected adjacency of a tree and picks a different
root. The unrooted signature of a rooted tree is the smallest canonical form
over all of its rootings, so two rooted trees share a signature iff they are
the same unrooted tree.
"""
from __future__ import annotations

from itertools import count
from typing import Iterator, List

from treeflip.trees.node import RootedTree, TreeNode, copy_subtree


def path_to_root(node: TreeNode) -> List[TreeNode]:
    """[node, parent, grandparent, ..., root]."""
    path = [node]
    p = node.parent
    while p is not None:
        path.append(p)
        p = p.parent
    return path


def _reversed_path(path: List[TreeNode], i: int, ids: Iterator[int]) -> TreeNode:
    """Subtree hanging below path[i-1] once the path is flipped.

    path[i] keeps its off-path children and gains path[i+1] (its former
    parent) as a child, recursively up to the old root.
    """
    node = TreeNode(next(ids))
    prev = path[i - 1]
    nxt = path[i + 1] if i + 1 < len(path) else None
    for child in path[i].children:
        if child is prev or child is nxt:
            continue
        node.add_child(copy_subtree(child, ids))
    if nxt is not None:
        node.add_child(_reversed_path(path, i + 1, ids))
    return node


def reroot(tree: RootedTree, v: TreeNode) -> RootedTree:
    """New tree with the same underlying unrooted tree, rooted at *v*.

    *v* must be a node of *tree*. Rerooting at the current root returns a
    copy. The input tree is never modified.
    """
    path = path_to_root(v)
    if path[-1] is not tree.root:
        raise ValueError(f"node {v.id} does not belong to {tree!r}")
    if len(path) == 1:
        return tree.copy()

    ids = count()
    new_root = TreeNode(next(ids))
    for child in v.children:
        if child is not path[1]:
            new_root.add_child(copy_subtree(child, ids))
    new_root.add_child(_reversed_path(path, 1, ids))
    return RootedTree(new_root)


def all_rootings(tree: RootedTree) -> List[RootedTree]:
    """Pairwise non-isomorphic rerootings of *tree*, in pre-order of the new root."""
    out: List[RootedTree] = []
    seen: set[str] = set()
    for v in tree.all_nodes():
        r = reroot(tree, v)
        key = r.canonical()
        if key not in seen:
            seen.add(key)
            out.append(r)
    return out


def unrooted_signature(tree: RootedTree) -> str:
    """Lexicographically smallest canonical form over every rooting of *tree*."""
    return min(reroot(tree, v).canonical() for v in tree.all_nodes())


def same_unrooted_class(a: RootedTree, b: RootedTree) -> bool:
    if a.node_count() != b.node_count():
        return False
    return unrooted_signature(a) == unrooted_signature(b)


def _adjacency(nodes: List[TreeNode]) -> List[List[int]]:
    index = {id(node): i for i, node in enumerate(nodes)}
    adj: List[List[int]] = [[] for _ in nodes]
    for i, node in enumerate(nodes):
        for child in node.children:
            j = index[id(child)]
            adj[i].append(j)
            adj[j].append(i)
    return adj


def tree_centers(tree: RootedTree) -> List[TreeNode]:
    """The one or two center nodes of the underlying unrooted tree.

    Found by repeatedly stripping the current leaves until at most two
    vertices remain.
    """
    nodes = tree.all_nodes()
    adj = _adjacency(nodes)
    n = len(nodes)
    deg = [len(nbrs) for nbrs in adj]
    leaves = [i for i, d in enumerate(deg) if d <= 1]
    removed = len(leaves)
    while removed < n:
        new_leaves: List[int] = []
        for u in leaves:
            deg[u] = 0
            for w in adj[u]:
                if deg[w] > 0:
                    deg[w] -= 1
                    if deg[w] == 1:
                        new_leaves.append(w)
        removed += len(new_leaves)
        leaves = new_leaves
    return [nodes[i] for i in leaves]


def center_signature(tree: RootedTree) -> str:
    """Unrooted signature from at most two rootings (at the tree's centers).

    Centers are preserved by isomorphism, so this key induces the same
    classes as unrooted_signature(), at a fraction of the cost. The strings
    themselves generally differ from unrooted_signature().
    """
    return min(reroot(tree, c).canonical() for c in tree_centers(tree))


class UnrootedTree:
    """An unrooted tree, held as one rooted representative plus its signature."""

    __slots__ = ("representative", "signature")

    def __init__(self, representative: RootedTree) -> None:
        self.representative = representative
        self.signature = unrooted_signature(representative)

    def rootings(self) -> List[RootedTree]:
        return all_rootings(self.representative)

    def node_count(self) -> int:
        return self.representative.node_count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnrootedTree):
            return NotImplemented
        return self.signature == other.signature

    def __lt__(self, other: UnrootedTree) -> bool:
        if not isinstance(other, UnrootedTree):
            return NotImplemented
        return self.signature < other.signature

    def __hash__(self) -> int:
        return hash(self.signature)

    def __repr__(self) -> str:
        return f"UnrootedTree({self.signature!r})"

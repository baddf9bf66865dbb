"""Conversion between rooted trees and edge lists, NetworkX graphs and graph6.

Vertices are numbered in pre-order, so the root is always vertex 0 on the
way out. On the way in, the caller names the root.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Hashable, List, Optional, Tuple

import networkx as nx

from treeflip.external.nauty import edgelist_to_g6
from treeflip.trees.node import RootedTree, TreeNode
from treeflip.utils.connectivity import is_tree_edges


def tree_to_edges(tree: RootedTree) -> Tuple[List[Tuple[int, int]], int]:
    """Return (edges, n) with each edge written (parent, child)."""
    nodes = tree.all_nodes()
    index = {id(node): i for i, node in enumerate(nodes)}
    edges = [
        (index[id(node)], index[id(child)])
        for node in nodes
        for child in node.children
    ]
    return edges, len(nodes)


def tree_to_nx(tree: RootedTree) -> nx.Graph:
    """
    Undirected NetworkX graph of the tree; G.graph["root"] is 0.
    """
    edges, n = tree_to_edges(tree)
    G = nx.Graph(root=0)
    G.add_nodes_from(range(n))
    G.add_edges_from(edges)
    return G


def tree_to_g6(tree: RootedTree) -> str:
    """graph6 string of the underlying unrooted tree (root is dropped)."""
    edges, n = tree_to_edges(tree)
    return edgelist_to_g6(edges, n)


def tree_from_edges(
    edges: List[Tuple[int, int]],
    n: Optional[int] = None,
    root: int = 0,
) -> RootedTree:
    """
    Build a RootedTree from an undirected edge list on {0..n-1}, rooted at *root*.

    If *n* is not given it is inferred as max vertex + 1 (1 for no edges).
    Raises ValueError if the edges do not form a tree or *root* is out of range.
    """
    if n is None:
        n = max((max(u, v) for u, v in edges), default=0) + 1
    if not is_tree_edges(edges, n):
        raise ValueError(f"edges do not form a tree on {n} vertices: {edges!r}")
    if not 0 <= root < n:
        raise ValueError(f"root {root} out of range for {n} vertices")

    adj: dict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)

    made = {root: TreeNode(root)}
    stack = [root]
    while stack:
        u = stack.pop()
        for w in sorted(adj[u]):
            if w in made:
                continue
            made[w] = made[u].add_child(TreeNode(w))
            stack.append(w)
    return RootedTree(made[root])


def tree_from_nx(G: nx.Graph, root: Optional[Hashable] = None) -> RootedTree:
    """
    Build a RootedTree from a NetworkX tree.

    *root* defaults to G.graph["root"] if present, else the first node.
    Node ids follow the order of G.nodes().
    """
    if G.number_of_nodes() == 0:
        raise ValueError("empty graph is not a tree")
    labels = list(G.nodes())
    if root is None:
        root = G.graph.get("root", labels[0])
    if root not in G:
        raise ValueError(f"root {root!r} is not a node of the graph")
    index = {v: i for i, v in enumerate(labels)}
    edges = [(index[u], index[v]) for u, v in G.edges()]
    return tree_from_edges(edges, n=len(labels), root=index[root])

"""Rooted tree representation.

Each node owns its children; the parent link is a weak reference used only
for upward traversal (depth, rerooting). A RootedTree seals every node it
owns at construction time, so built trees cannot be edited in place.
Restructuring always builds a new tree.
"""
from __future__ import annotations

import weakref
from itertools import count
from typing import Iterator, List, Optional


class TreeNode:
    """A node of an unlabeled rooted tree.

    ``id`` is for display and debugging only; it carries no meaning for
    isomorphism or equality.
    """

    __slots__ = ("id", "_children", "_parent", "_sealed", "__weakref__")

    def __init__(self, id: int = 0) -> None:
        self.id = id
        self._children: List[TreeNode] = []
        self._parent: Optional[weakref.ReferenceType[TreeNode]] = None
        self._sealed = False

    @property
    def children(self) -> tuple[TreeNode, ...]:
        return tuple(self._children)

    @property
    def parent(self) -> Optional[TreeNode]:
        if self._parent is None:
            return None
        return self._parent()

    def add_child(self, child: TreeNode) -> TreeNode:
        """Attach *child* below this node and return it.

        The child must be a detached root: a node that already has a parent
        would end up with two owners.
        """
        if self._sealed:
            raise ValueError(f"node {self.id} belongs to a built tree and cannot be modified")
        if child.parent is not None:
            raise ValueError(f"node {child.id} already has a parent")
        anc: Optional[TreeNode] = self
        while anc is not None:
            if anc is child:
                raise ValueError(f"attaching node {child.id} would create a cycle")
            anc = anc.parent
        child._parent = weakref.ref(self)
        self._children.append(child)
        return child

    def is_root(self) -> bool:
        return self.parent is None

    def is_leaf(self) -> bool:
        return not self._children

    def degree(self) -> int:
        """Number of children (out-degree in the rooted orientation)."""
        return len(self._children)

    def depth(self) -> int:
        d = 0
        p = self.parent
        while p is not None:
            d += 1
            p = p.parent
        return d

    def subtree_size(self) -> int:
        return sum(1 for _ in self.iter_preorder())

    def iter_preorder(self) -> Iterator[TreeNode]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id}, children={len(self._children)})"


def copy_subtree(node: TreeNode, ids: Optional[Iterator[int]] = None) -> TreeNode:
    """Deep copy of the subtree below *node*, with fresh ids.

    The copy is detached (no parent) and unsealed. Ids are drawn from *ids*
    in pre-order; a new counter starting at 0 is used when omitted.
    """
    if ids is None:
        ids = count()
    new = TreeNode(next(ids))
    for child in node._children:
        new.add_child(copy_subtree(child, ids))
    return new


def _seal(root: TreeNode) -> None:
    for node in root.iter_preorder():
        node._sealed = True


class RootedTree:
    """An immutable rooted tree.

    Two trees compare equal iff their canonical forms are identical, i.e.
    iff they are isomorphic as rooted trees. Node identity plays no part.
    """

    __slots__ = ("_root", "_canonical")

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        if root is None:
            root = TreeNode(0)
        if root.parent is not None:
            raise ValueError("the root of a RootedTree must not have a parent")
        _seal(root)
        self._root = root
        self._canonical: Optional[str] = None

    @classmethod
    def single(cls) -> RootedTree:
        """The one-node tree."""
        return cls(TreeNode(0))

    @classmethod
    def from_canonical(cls, text: str) -> RootedTree:
        from treeflip.trees.canonical import parse_canonical

        return cls(parse_canonical(text))

    @property
    def root(self) -> TreeNode:
        return self._root

    def node_count(self) -> int:
        return self._root.subtree_size()

    def canonical(self) -> str:
        # Memoized: the tree is sealed, so the form cannot go stale.
        if self._canonical is None:
            from treeflip.trees.canonical import canonical_form

            self._canonical = canonical_form(self._root)
        return self._canonical

    def all_nodes(self) -> List[TreeNode]:
        """All nodes in pre-order, root first."""
        return list(self._root.iter_preorder())

    def copy(self) -> RootedTree:
        return RootedTree(copy_subtree(self._root))

    def __len__(self) -> int:
        return self.node_count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RootedTree):
            return NotImplemented
        return self.canonical() == other.canonical()

    def __lt__(self, other: RootedTree) -> bool:
        if not isinstance(other, RootedTree):
            return NotImplemented
        return self.canonical() < other.canonical()

    def __hash__(self) -> int:
        return hash(self.canonical())

    def __repr__(self) -> str:
        return f"RootedTree({self.canonical()!r})"

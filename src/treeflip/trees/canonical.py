"""AHU canonical form for rooted trees.

A leaf is ``()``; an internal node is ``(`` + its children's forms sorted
ascending + ``)``. Sorting the children erases sibling order, so two rooted
trees get the same string iff they are isomorphic root-to-root.
"""
from __future__ import annotations

from itertools import count

from treeflip.trees.node import TreeNode

OPEN = "("
CLOSE = ")"
LEAF = OPEN + CLOSE


def canonical_form(node: TreeNode) -> str:
    """Canonical string of the subtree rooted at *node*."""
    if node.is_leaf():
        return LEAF
    parts = sorted(canonical_form(child) for child in node.children)
    return OPEN + "".join(parts) + CLOSE


def parse_canonical(text: str) -> TreeNode:
    """Parse a bracket string back into a detached tree.

    Accepts any single balanced term over ``(`` and ``)`` (children need not
    be sorted). Node ids are assigned in pre-order starting at 0.
    Raises ValueError for anything else.
    """
    s = text.strip()
    if not s:
        raise ValueError("empty canonical form")

    ids = count()
    stack: list[TreeNode] = []
    root: TreeNode | None = None

    for pos, ch in enumerate(s):
        if ch == OPEN:
            if root is not None and not stack:
                raise ValueError(f"trailing input after position {pos} in {text!r}")
            node = TreeNode(next(ids))
            if stack:
                stack[-1].add_child(node)
            else:
                root = node
            stack.append(node)
        elif ch == CLOSE:
            if not stack:
                raise ValueError(f"unbalanced ')' at position {pos} in {text!r}")
            stack.pop()
        else:
            raise ValueError(f"unexpected character {ch!r} at position {pos} in {text!r}")

    if stack or root is None:
        raise ValueError(f"unbalanced canonical form {text!r}")
    return root


def is_canonical(text: str) -> bool:
    """True iff *text* parses and is already in sorted canonical form."""
    try:
        root = parse_canonical(text)
    except ValueError:
        return False
    return canonical_form(root) == text.strip()

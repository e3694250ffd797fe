"""Exercises on binary trees of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in root, left, right order."""
    return list(_preorder(root))


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, right, root order."""
    return list(_postorder(root))


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node of a binary search tree holding ``val``, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node
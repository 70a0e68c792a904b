"""Binary tree node and basic tree algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Check mirror symmetry level by level."""
    if root is None:
        return True

    layer: deque[Optional[TreeNode]] = deque([root.left, root.right])
    while layer:
        next_layer: deque[Optional[TreeNode]] = deque()
        while layer:
            left = layer.popleft()
            right = layer.pop()
            if left is None and right is None:
                continue
            if left is None or right is None:
                return False
            if left.val != right.val:
                return False
            next_layer.appendleft(left.left)
            next_layer.appendleft(left.right)
            next_layer.append(right.right)
            next_layer.append(right.left)
        layer = next_layer
    return True


def _mirrored(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.val == b.val and _mirrored(a.left, b.right) and _mirrored(a.right, b.left)


def is_symmetric_recursive(root: Optional[TreeNode]) -> bool:
    """Check mirror symmetry recursively."""
    if root is None:
        return True
    return _mirrored(root.left, root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


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


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    return list(_inorder(root))
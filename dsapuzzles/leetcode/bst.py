"""Binary search tree construction and search, plus diameter and level order."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from dsapuzzles.leetcode.tree import TreeNode


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val`` in a binary search tree, or None."""
    current = root
    while current is not None:
        if val == current.val:
            return current
        current = current.left if val < current.val else current.right
    return None


def _build(values: Sequence[int]) -> Optional[TreeNode]:
    if not values:
        return None
    root_val = values[0]
    split = next(
        (i for i, value in enumerate(values) if value > root_val), len(values)
    )
    return TreeNode(root_val, _build(values[1:split]), _build(values[split:]))


def bst_from_preorder(preorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a binary search tree from its preorder traversal."""
    return _build(list(preorder))


def _height_and_diameter(node: TreeNode) -> tuple[int, int]:
    left = _height_and_diameter(node.left) if node.left is not None else (-1, 0)
    right = _height_and_diameter(node.right) if node.right is not None else (-1, 0)
    height = max(left[0], right[0]) + 1
    through_node = left[0] + right[0] + 2
    return height, max(through_node, left[1], right[1])


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between two nodes."""
    if root is None:
        return 0
    return _height_and_diameter(root)[1]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values grouped by depth, left to right."""
    levels: list[list[int]] = []
    layer = [root] if root is not None else []
    while layer:
        levels.append([node.val for node in layer])
        layer = [
            child
            for node in layer
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels
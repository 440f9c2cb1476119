"""Iterative preorder, inorder and postorder traversal of binary trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in node-left-right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left-node-right order."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.val)
            node = node.right
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left-right-node order."""
    result = []
    stack: list[TreeNode] = []
    node = root
    last: TreeNode | None = None
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is None or top.right is last:
            result.append(top.val)
            last = stack.pop()
        else:
            node = top.right
    return result
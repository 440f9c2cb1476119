"""A red-black tree of distinct keys with double-black deletion fix-up."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node colours; DOUBLE_BLACK exists only while a deletion is being repaired."""

    RED = 0
    BLACK = 1
    DOUBLE_BLACK = 2


class _Node:
    __slots__ = ("key", "color", "left", "right")

    def __init__(self, key: Any, color: Color, left: _Node | None = None,
                 right: _Node | None = None) -> None:
        self.key = key
        self.color = color
        self.left = left if left is not None else self
        self.right = right if right is not None else self


def _rotate_left(root: _Node) -> _Node:
    new_root = root.right
    root.right = new_root.left
    new_root.left = root
    return new_root


def _rotate_right(root: _Node) -> _Node:
    new_root = root.left
    root.left = new_root.right
    new_root.right = root
    return new_root


def _has_red_child(node: _Node) -> bool:
    return node.left.color == Color.RED or node.right.color == Color.RED


class RedBlackTree:
    """An ordered set of keys kept balanced by red-black colouring.

    Empty children are shown with key -1 by :meth:`render`.
    """

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._nil = _Node(-1, Color.BLACK)
        self._root = self._nil
        self._size = 0
        for key in iterable:
            self.insert(key)

    # insertion

    def _insert_maintain(self, root: _Node) -> _Node:
        flag = 0
        if root.left.color == Color.RED and _has_red_child(root.left):
            flag = 1
        if root.right.color == Color.RED and _has_red_child(root.right):
            flag = 2
        if flag == 0:
            return root
        if not (root.left.color == Color.RED and root.right.color == Color.RED):
            if flag == 1:
                if root.left.right.color == Color.RED:
                    root.left = _rotate_left(root.left)
                root = _rotate_right(root)
            else:
                if root.right.left.color == Color.RED:
                    root.right = _rotate_right(root.right)
                root = _rotate_left(root)
        root.color = Color.RED
        root.left.color = Color.BLACK
        root.right.color = Color.BLACK
        return root

    def _insert(self, root: _Node, key: Any) -> _Node:
        if root is self._nil:
            self._size += 1
            return _Node(key, Color.RED, self._nil, self._nil)
        if key == root.key:
            return root
        if key < root.key:
            root.left = self._insert(root.left, key)
        else:
            root.right = self._insert(root.right, key)
        return self._insert_maintain(root)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False when it was already present."""
        before = self._size
        self._root = self._insert(self._root, key)
        self._root.color = Color.BLACK
        return self._size > before

    # deletion

    def _erase_maintain(self, root: _Node) -> _Node:
        if root.left.color != Color.DOUBLE_BLACK and root.right.color != Color.DOUBLE_BLACK:
            return root
        if _has_red_child(root):
            root.color = Color.RED
            if root.left.color == Color.RED:
                root = _rotate_right(root)
                root.right = self._erase_maintain(root.right)
            else:
                root = _rotate_left(root)
                root.left = self._erase_maintain(root.left)
            root.color = Color.BLACK
            return root
        if ((root.left.color == Color.DOUBLE_BLACK and not _has_red_child(root.right))
                or (root.right.color == Color.DOUBLE_BLACK and not _has_red_child(root.left))):
            root.color = Color(root.color + 1)
            root.left.color = Color(root.left.color - 1)
            root.right.color = Color(root.right.color - 1)
            return root
        if root.right.color == Color.DOUBLE_BLACK:
            root.right.color = Color.BLACK
            if root.left.left.color != Color.RED:
                root.left = _rotate_left(root.left)
            root.left.color = root.color
            root = _rotate_right(root)
        else:
            root.left.color = Color.BLACK
            if root.right.right.color != Color.RED:
                root.right = _rotate_right(root.right)
            root.right.color = root.color
            root = _rotate_left(root)
        root.left.color = Color.BLACK
        root.right.color = Color.BLACK
        return root

    def _erase(self, root: _Node, key: Any) -> _Node:
        if root is self._nil:
            return root
        if key < root.key:
            root.left = self._erase(root.left, key)
        elif key > root.key:
            root.right = self._erase(root.right, key)
        else:
            if root.left is self._nil or root.right is self._nil:
                child = root.right if root.left is self._nil else root.left
                child.color = Color(child.color + root.color)
                self._size -= 1
                return child
            predecessor = root.left
            while predecessor.right is not self._nil:
                predecessor = predecessor.right
            root.key = predecessor.key
            root.left = self._erase(root.left, predecessor.key)
        return self._erase_maintain(root)

    def erase(self, key: Any) -> bool:
        """Remove ``key``; return False when it was not present."""
        before = self._size
        self._root = self._erase(self._root, key)
        self._root.color = Color.BLACK
        return self._size < before

    # queries

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not self._nil:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        """Keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while node is not self._nil or stack:
            if node is not self._nil:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node.key
                node = node.right

    def __len__(self) -> int:
        return self._size

    def _preorder_nodes(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not self._nil else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not self._nil:
                stack.append(node.right)
            if node.left is not self._nil:
                stack.append(node.left)

    def preorder(self) -> Iterator[tuple[Any, Color]]:
        """(key, colour) pairs in root-left-right order."""
        for node in self._preorder_nodes():
            yield node.key, node.color

    def black_height(self) -> int:
        """Black nodes on every root-to-leaf path; ValueError if the invariants fail."""
        if self._root.color != Color.BLACK:
            raise ValueError("root is not black")

        def check(node: _Node) -> int:
            if node is self._nil:
                return 0
            if node.color not in (Color.RED, Color.BLACK):
                raise ValueError(f"node {node.key!r} is double black")
            if node.color == Color.RED and _has_red_child(node):
                raise ValueError(f"red node {node.key!r} has a red child")
            left, right = check(node.left), check(node.right)
            if left != right:
                raise ValueError(f"unequal black heights below {node.key!r}")
            return left + (1 if node.color == Color.BLACK else 0)

        return check(self._root)

    def render(self) -> str:
        """One line per node in preorder: ``(colour| key; left key, right key)``."""
        return "\n".join(
            f"({int(node.color)}| {node.key}; {node.left.key}, {node.right.key})"
            for node in self._preorder_nodes()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
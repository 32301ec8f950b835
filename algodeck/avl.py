"""A self-balancing AVL binary search tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    key: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_Node], key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[_Node], key: Any) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)

    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            assert node.left is not None
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            assert node.right is not None
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _walk_in_order(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _walk_in_order(node.left)
        yield node.key
        yield from _walk_in_order(node.right)


def _walk_pre_order(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield node.key
        yield from _walk_pre_order(node.left)
        yield from _walk_pre_order(node.right)


class AVLTree:
    """A binary search tree whose subtrees differ in height by at most one.

    Duplicate keys are ignored on insertion.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree unless it is already there."""
        self._root = _insert(self._root, key)

    def remove(self, key: Any) -> None:
        """Remove ``key`` from the tree; a missing key is ignored."""
        self._root = _delete(self._root, key)

    def in_order(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(_walk_in_order(self._root))

    def pre_order(self) -> list[Any]:
        """Return the keys in pre-order: node, left subtree, right subtree."""
        return list(_walk_pre_order(self._root))

    def height(self) -> int:
        """Return the height of the tree, 0 when empty."""
        return _height(self._root)

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return sum(1 for _ in _walk_in_order(self._root))

    def __iter__(self) -> Iterator[Any]:
        return _walk_in_order(self._root)


def _show(tree: AVLTree) -> None:
    print("In-order traversal: " + "".join(f"{key} " for key in tree.in_order()))
    print("Pre-order traversal: " + "".join(f"{key} " for key in tree.pre_order()))


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small example tree, delete a key and print its traversals."""
    parser = argparse.ArgumentParser(
        prog="avl", description="Show insertions and a deletion on an AVL tree."
    )
    parser.parse_args(argv)
    tree = AVLTree()
    for key in (10, 20, 30, 40, 50, 25):
        tree.insert(key)
    _show(tree)
    tree.remove(30)
    _show(tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())
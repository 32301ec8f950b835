"""A self-adjusting binary search tree that splays accessed keys to the root."""

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


def _rotate_right(x: _Node) -> _Node:
    y = x.left
    assert y is not None
    x.left = y.right
    y.right = x
    return y


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    return y


def _splay(root: Optional[_Node], key: Any) -> Optional[_Node]:
    if root is None or root.key == key:
        return root
    if root.key > key:
        if root.left is None:
            return root
        if root.left.key > key:
            root.left.left = _splay(root.left.left, key)
            root = _rotate_right(root)
        elif root.left.key < key:
            root.left.right = _splay(root.left.right, key)
            if root.left.right is not None:
                root.left = _rotate_left(root.left)
        return root if root.left is None else _rotate_right(root)
    if root.right is None:
        return root
    if root.right.key > key:
        root.right.left = _splay(root.right.left, key)
        if root.right.left is not None:
            root.right = _rotate_right(root.right)
    elif root.right.key < key:
        root.right.right = _splay(root.right.right, key)
        root = _rotate_left(root)
    return root if root.right is None else _rotate_left(root)


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


class SplayTree:
    """A binary search tree that moves every accessed key to its root.

    Duplicate keys are ignored on insertion.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, key: Any) -> None:
        """Add ``key`` and make it the root; an existing key is splayed instead."""
        if self._root is None:
            self._root = _Node(key)
            return
        root = _splay(self._root, key)
        assert root is not None
        if root.key == key:
            self._root = root
            return
        node = _Node(key)
        if root.key > key:
            node.right = root
            node.left = root.left
            root.left = None
        else:
            node.left = root
            node.right = root.right
            root.right = None
        self._root = node

    def search(self, key: Any) -> bool:
        """Splay towards ``key`` and tell whether it is now at the root."""
        self._root = _splay(self._root, key)
        return self._root is not None and self._root.key == key

    def remove(self, key: Any) -> None:
        """Remove ``key`` from the tree; a missing key is ignored."""
        root = _splay(self._root, key)
        if root is None or root.key != key:
            self._root = root
            return
        if root.left is None:
            self._root = root.right
            return
        new_root = _splay(root.left, key)
        assert new_root is not None
        new_root.right = root.right
        self._root = new_root

    def in_order(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(_walk_in_order(self._root))

    def pre_order(self) -> list[Any]:
        """Return the keys in pre-order: node, left subtree, right subtree."""
        return list(_walk_pre_order(self._root))

    def root_key(self) -> Any:
        """Return the key at the root; raise ``LookupError`` when the tree is empty."""
        if self._root is None:
            raise LookupError("Tree is empty")
        return self._root.key

    def __len__(self) -> int:
        return sum(1 for _ in _walk_in_order(self._root))

    def __iter__(self) -> Iterator[Any]:
        return _walk_in_order(self._root)


def _show(tree: SplayTree) -> None:
    print("In-order traversal: " + "".join(f"{key} " for key in tree.in_order()))


def _report(tree: SplayTree, key: Any) -> None:
    if tree.search(key):
        print(f"Key {key} found in the tree")
    else:
        print(f"Key {key} not found in the tree")


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise a small example splay tree and print it along the way."""
    parser = argparse.ArgumentParser(
        prog="splay", description="Show insertions, searches and a deletion on a splay tree."
    )
    parser.parse_args(argv)
    tree = SplayTree()
    for key in (10, 20, 30, 40, 50, 25):
        tree.insert(key)
    _show(tree)
    _report(tree, 30)
    print(f"After searching 30, root is: {tree.root_key()}")
    _show(tree)
    tree.remove(30)
    print("After removing 30:")
    _show(tree)
    _report(tree, 25)
    print(f"After searching 25, root is: {tree.root_key()}")
    _show(tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""A mergeable min-priority queue kept as a binomial heap."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class _Node:
    key: Any
    degree: int = 0
    # Children in ascending order of degree, i.e. the order they were linked.
    children: list[_Node] = field(default_factory=list)


def _link(parent: _Node, child: _Node) -> _Node:
    parent.children.append(child)
    parent.degree += 1
    return parent


def _merge(first: list[_Node], second: list[_Node]) -> list[_Node]:
    return list(heapq.merge(first, second, key=lambda node: node.degree))


def _consolidate(roots: list[_Node]) -> list[_Node]:
    i = 0
    while i + 1 < len(roots):
        current, following = roots[i], roots[i + 1]
        if current.degree != following.degree or (
            i + 2 < len(roots) and roots[i + 2].degree == current.degree
        ):
            i += 1
        elif current.key <= following.key:
            roots[i : i + 2] = [_link(current, following)]
        else:
            roots[i : i + 2] = [_link(following, current)]
    return roots


def _pre_order(node: _Node) -> Iterator[Any]:
    yield node.key
    for child in reversed(node.children):
        yield from _pre_order(child)


class BinomialHeap:
    """A forest of binomial trees, at most one of each degree, each heap-ordered."""

    def __init__(self) -> None:
        self._roots: list[_Node] = []
        self._size = 0

    def insert(self, key: Any) -> None:
        """Add ``key`` to the heap."""
        self._roots = _consolidate(_merge(self._roots, [_Node(key)]))
        self._size += 1

    def _min_index(self) -> int:
        if not self._roots:
            raise IndexError("heap is empty")
        return min(range(len(self._roots)), key=lambda i: self._roots[i].key)

    def find_min(self) -> Any:
        """Return the smallest key; raise ``IndexError`` when the heap is empty."""
        return self._roots[self._min_index()].key

    def extract_min(self) -> Any:
        """Remove and return the smallest key; raise ``IndexError`` when empty."""
        smallest = self._roots.pop(self._min_index())
        self._roots = _consolidate(_merge(self._roots, smallest.children))
        self._size -= 1
        return smallest.key

    def trees(self) -> list[tuple[int, list[Any]]]:
        """Return ``(degree, keys)`` for each tree, keys in pre-order from its root."""
        return [(root.degree, list(_pre_order(root))) for root in self._roots]

    def __len__(self) -> int:
        return self._size


def _show(heap: BinomialHeap) -> None:
    print("Binomial Heap:")
    for degree, keys in heap.trees():
        print(f"B{degree}: " + "".join(f"{key} " for key in keys))


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small example heap, extract its minimum and print it along the way."""
    parser = argparse.ArgumentParser(
        prog="binomial-heap", description="Show insertions and extraction on a binomial heap."
    )
    parser.parse_args(argv)
    heap = BinomialHeap()
    for key in (10, 20, 5, 30, 1):
        heap.insert(key)
    _show(heap)
    print(f"\nExtracted Min: {heap.extract_min()}")
    _show(heap)
    return 0


if __name__ == "__main__":
    sys.exit(main())
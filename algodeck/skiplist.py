"""A probabilistic sorted set kept as a skip list."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator, Sequence
from typing import Any, Optional

MAX_LEVEL = 16


class _Node:
    __slots__ = ("key", "forward")

    def __init__(self, key: Any, level: int) -> None:
        self.key = key
        self.forward: list[Optional[_Node]] = [None] * (level + 1)


class SkipList:
    """Sorted distinct keys linked on several levels, each level a sparser subset."""

    def __init__(self, max_level: int = MAX_LEVEL, rng: random.Random | None = None) -> None:
        if max_level < 0:
            raise ValueError("maximum level must not be negative")
        self.max_level = max_level
        self._rng = rng if rng is not None else random.Random()
        self._header = _Node(None, max_level)
        self._level = 0

    def _random_level(self) -> int:
        level = 0
        while self._rng.random() < 0.5 and level < self.max_level:
            level += 1
        return level

    def _predecessors(self, key: Any) -> list[_Node]:
        update = [self._header] * (self.max_level + 1)
        current = self._header
        for i in range(self._level, -1, -1):
            while (following := current.forward[i]) is not None and following.key < key:
                current = following
            update[i] = current
        return update

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is in the list."""
        candidate = self._predecessors(key)[0].forward[0]
        return candidate is not None and candidate.key == key

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False if it was already present."""
        update = self._predecessors(key)
        candidate = update[0].forward[0]
        if candidate is not None and candidate.key == key:
            return False
        level = self._random_level()
        if level > self._level:
            for i in range(self._level + 1, level + 1):
                update[i] = self._header
            self._level = level
        node = _Node(key, level)
        for i in range(level + 1):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        return True

    def remove(self, key: Any) -> bool:
        """Delete ``key``; return False if it was not present."""
        update = self._predecessors(key)
        target = update[0].forward[0]
        if target is None or target.key != key:
            return False
        for i in range(self._level + 1):
            if update[i].forward[i] is not target:
                break
            update[i].forward[i] = target.forward[i]
        while self._level > 0 and self._header.forward[self._level] is None:
            self._level -= 1
        return True

    def _walk(self, level: int) -> Iterator[Any]:
        node = self._header.forward[level]
        while node is not None:
            yield node.key
            node = node.forward[level]

    def levels(self) -> list[list[Any]]:
        """Return the keys linked on each level, from level 0 upwards."""
        return [list(self._walk(level)) for level in range(self._level + 1)]

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def __iter__(self) -> Iterator[Any]:
        return self._walk(0)

    def __len__(self) -> int:
        return sum(1 for _ in self._walk(0))


def _show(skip_list: SkipList) -> None:
    print("\n*****Skip List*****")
    for level, keys in enumerate(skip_list.levels()):
        print(f"Level {level}: " + "".join(f"{key} " for key in keys))


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise a small example skip list and print it along the way."""
    parser = argparse.ArgumentParser(
        prog="skiplist", description="Show insertions, searches and deletions on a skip list."
    )
    parser.parse_args(argv)
    skip_list = SkipList()
    for key in (3, 6, 7, 9, 12, 19, 17, 26, 21, 25):
        if skip_list.insert(key):
            print(f"Successfully inserted key {key}")
    _show(skip_list)
    for key, lead in ((19, "\n"), (20, "")):
        found = "Found" if skip_list.search(key) else "Not Found"
        print(f"{lead}Searching for {key}: {found}")
    for key in (19, 20):
        if skip_list.remove(key):
            print(f"Successfully deleted key {key}")
        else:
            print(f"Key {key} not found in the list")
    _show(skip_list)
    return 0


if __name__ == "__main__":
    sys.exit(main())
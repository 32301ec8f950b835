"""A hash table using separate chaining to resolve collisions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Hashable, Iterator, Sequence
from typing import Any


class HashTable:
    """A fixed number of buckets, each a list of ``(key, value)`` pairs."""

    def __init__(self, size: int = 10) -> None:
        self._buckets: list[list[tuple[Hashable, Any]]] = self._empty(size)

    @staticmethod
    def _empty(size: int) -> list[list[tuple[Hashable, Any]]]:
        if size <= 0:
            raise ValueError("table size must be positive")
        return [[] for _ in range(size)]

    def _bucket(self, key: Hashable) -> list[tuple[Hashable, Any]]:
        return self._buckets[hash(key) % len(self._buckets)]

    def insert(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                return
        bucket.append((key, value))

    def remove(self, key: Hashable) -> bool:
        """Delete ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                return True
        return False

    def search(self, key: Hashable) -> Any:
        """Return the value stored under ``key``; raise ``KeyError`` if absent."""
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        raise KeyError(key)

    def keys(self) -> list[Hashable]:
        """Return every key, bucket by bucket."""
        return [key for bucket in self._buckets for key, _ in bucket]

    def values(self) -> list[Any]:
        """Return every value, bucket by bucket."""
        return [value for bucket in self._buckets for _, value in bucket]

    def buckets(self) -> list[list[tuple[Hashable, Any]]]:
        """Return a copy of the buckets and their ``(key, value)`` pairs."""
        return [list(bucket) for bucket in self._buckets]

    def load_factor(self) -> float:
        """Return the number of entries per bucket."""
        return len(self) / len(self._buckets)

    def max_bucket_size(self) -> int:
        """Return the length of the longest bucket."""
        return max(len(bucket) for bucket in self._buckets)

    def resize(self, new_size: int) -> None:
        """Rebuild the table with ``new_size`` buckets, rehashing every entry."""
        old = self._buckets
        self._buckets = self._empty(new_size)
        for bucket in old:
            for key, value in bucket:
                self.insert(key, value)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: Hashable) -> bool:
        return any(existing == key for existing, _ in self._bucket(key))

    def __getitem__(self, key: Hashable) -> Any:
        return self.search(key)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.insert(key, value)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())


def _format_buckets(table: HashTable) -> str:
    return "\n".join(
        f"Bucket {index}: " + "".join(f"({key}, {value}) " for key, value in bucket)
        for index, bucket in enumerate(table.buckets())
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise a small example table and print its contents along the way."""
    parser = argparse.ArgumentParser(
        prog="hashtable", description="Show the workings of a chained hash table."
    )
    parser.parse_args(argv)
    table = HashTable(7)
    for key, value in [
        ("apple", 5), ("banana", 8), ("cherry", 12), ("date", 15),
        ("elderberry", 20), ("fig", 3), ("grape", 7),
    ]:
        table.insert(key, value)

    print("Hash Table Contents:")
    print(_format_buckets(table))

    for key, lead in (("apple", "\n"), ("orange", "")):
        try:
            print(f"{lead}Found {key} with value: {table.search(key)}")
        except KeyError:
            print(f"{lead}{key} not found")

    if table.remove("banana"):
        print("\nRemoved banana successfully")
    else:
        print("\nCouldn't find banana to remove")

    print("\nAfter removal:")
    print(_format_buckets(table))

    print("\nAll keys: " + "".join(f"{key} " for key in table.keys()))
    print("All values: " + "".join(f"{value} " for value in table.values()))

    print(f"\nLoad factor: {table.load_factor():.6g}")
    print(f"Max bucket size: {table.max_bucket_size()}")

    print("\nResizing hash table to size 15...")
    table.resize(15)
    print("After resizing:")
    print(_format_buckets(table))
    print(f"New load factor: {table.load_factor():.6g}")

    numbers = HashTable(5)
    for key, value in [
        (1, "one"), (2, "two"), (3, "three"), (11, "eleven"), (22, "twenty-two"),
    ]:
        numbers.insert(key, value)
    print("\nHash Table with Integer Keys:")
    print(_format_buckets(numbers))
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Dictionary ADT backed by a hash table with separate chaining."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from .hashing import DEFAULT_SIZE, string_hash


class DuplicateKeyError(KeyError):
    """Raised when inserting a key that is already present."""


class ChainedDictionary:
    """Unique-key mapping; collisions are chained, newest entry at the head."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[tuple[str, str]]] = [[] for _ in range(size)]

    def _bucket(self, key: str) -> list[tuple[str, str]]:
        return self._buckets[string_hash(key, self.size)]

    def insert(self, key: str, value: str) -> None:
        bucket = self._bucket(key)
        if any(existing == key for existing, _ in bucket):
            raise DuplicateKeyError(key)
        bucket.insert(0, (key, value))

    def find(self, key: str) -> str:
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        raise KeyError(key)

    def delete(self, key: str) -> str:
        """Remove ``key`` and return its value."""
        bucket = self._bucket(key)
        for position, (existing, value) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                return value
        raise KeyError(key)

    def format(self) -> str:
        lines = []
        for index, bucket in enumerate(self._buckets):
            chain = "".join(f"({key}, {value}) -> " for key, value in bucket)
            lines.append(f"[{index}] -> {chain}NULL")
        return "\n".join(lines)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and any(k == key for k, _ in self._bucket(key))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Interactive insert/search/delete/display menu."""
    table = ChainedDictionary()
    tokens = _tokens(sys.stdin)
    while True:
        print("\n1.Insert 2.Search 3.Delete 4.Display 5.Exit\nEnter choice: ", end="")
        token = next(tokens, None)
        try:
            choice = int(token) if token is not None else None
        except ValueError:
            choice = None
        if choice is None or choice == 5:
            break
        if choice == 1:
            print("Key: ", end="")
            key = next(tokens, None)
            print("Value: ", end="")
            value = next(tokens, None)
            if key is None or value is None:
                break
            try:
                table.insert(key, value)
            except DuplicateKeyError:
                print("Key already exists.")
            else:
                print(f"Inserted ({key}, {value})")
        elif choice == 2:
            print("Search key: ", end="")
            key = next(tokens, None)
            if key is None:
                break
            try:
                print(f"Found: {table.find(key)}")
            except KeyError:
                print("Not found.")
        elif choice == 3:
            print("Delete key: ", end="")
            key = next(tokens, None)
            if key is None:
                break
            try:
                table.delete(key)
            except KeyError:
                print("Key not found.")
            else:
                print("Deleted.")
        elif choice == 4:
            print(table.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())
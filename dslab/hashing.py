"""Telephone book lookup using two collision strategies: chaining and linear probing."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, TextIO

DEFAULT_SIZE = 10


def string_hash(key: str, size: int = DEFAULT_SIZE) -> int:
    """Bucket index of ``key``: the sum of its character codes modulo ``size``."""
    if size < 1:
        raise ValueError("table size must be positive")
    return sum(map(ord, key)) % size


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a lookup and the number of key comparisons it took."""

    phone: int | None
    comparisons: int

    @property
    def found(self) -> bool:
        return self.phone is not None


class ChainingTable:
    """Hash table whose buckets are chains; new entries go to the chain head."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[tuple[str, int]]] = [[] for _ in range(size)]

    def insert(self, name: str, phone: int) -> None:
        self._buckets[string_hash(name, self.size)].insert(0, (name, phone))

    def search(self, name: str) -> SearchResult:
        comparisons = 0
        for entry_name, phone in self._buckets[string_hash(name, self.size)]:
            comparisons += 1
            if entry_name == name:
                return SearchResult(phone, comparisons)
        return SearchResult(None, comparisons)

    def format(self) -> str:
        lines = []
        for index, bucket in enumerate(self._buckets):
            chain = "".join(f"({name}, {phone}) -> " for name, phone in bucket)
            lines.append(f"{index}: {chain}NULL")
        return "\n".join(lines)


class LinearProbingTable:
    """Open-addressing hash table that probes successive slots on collision."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._slots: list[tuple[str, int] | None] = [None] * size

    def _probe(self, name: str) -> Iterator[int]:
        start = string_hash(name, self.size)
        return ((start + step) % self.size for step in range(self.size))

    def insert(self, name: str, phone: int) -> bool:
        """Store the entry; return False when the table is full."""
        for index in self._probe(name):
            if self._slots[index] is None:
                self._slots[index] = (name, phone)
                return True
        return False

    def search(self, name: str) -> SearchResult:
        comparisons = 0
        for index in self._probe(name):
            slot = self._slots[index]
            if slot is None:
                break
            comparisons += 1
            if slot[0] == name:
                return SearchResult(slot[1], comparisons)
        return SearchResult(None, comparisons)

    def format(self) -> str:
        return "\n".join(
            f"{index}: NULL" if slot is None else f"{index}: ({slot[0]}, {slot[1]})"
            for index, slot in enumerate(self._slots)
        )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def main(argv=None) -> int:
    """Interactive menu comparing both tables on the same entries."""
    chaining = ChainingTable()
    probing = LinearProbingTable()
    tokens = _tokens(sys.stdin)
    while True:
        print("\n1.Insert 2.Search 3.Display 4.Exit\nChoice: ", end="")
        choice = _next_int(tokens)
        if choice is None or choice == 4:
            break
        if choice == 1:
            print("Name Phone: ", end="")
            name = next(tokens, None)
            phone = _next_int(tokens)
            if name is None or phone is None:
                break
            chaining.insert(name, phone)
            probing.insert(name, phone)
        elif choice == 2:
            print("Name to search: ", end="")
            name = next(tokens, None)
            if name is None:
                break
            for label, table in (("Chaining", chaining), ("Linear Probing", probing)):
                print(f"-- {label} --")
                result = table.search(name)
                if result.found:
                    print(f"Found: {result.phone}")
                print(f"Comparisons: {result.comparisons}")
        elif choice == 3:
            print("Chaining Table:")
            print(chaining.format())
            print("Linear Probing Table:")
            print(probing.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Binary search tree converted in place into a right-threaded tree."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO


@dataclass(eq=False)
class _Node:
    data: int
    left: _Node | None = None
    right: _Node | None = None
    threaded: bool = False


class ThreadedBinaryTree:
    """BST whose right links become inorder-successor threads after convert()."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._converted = False
        for value in values:
            self.insert(value)

    @property
    def converted(self) -> bool:
        return self._converted

    def insert(self, value: int) -> None:
        if self._converted:
            raise RuntimeError("cannot insert into a tree that has been threaded")
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value < current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def convert(self) -> None:
        """Point every node's right link at its inorder successor (Morris walk)."""
        if self._converted:
            return
        previous: _Node | None = None
        current = self._root
        while current is not None:
            if current.left is None:
                if previous is not None:
                    previous.right = current
                    previous.threaded = True
                previous = current
                current = current.right
                continue
            predecessor = current.left
            while predecessor.right is not None and predecessor.right is not current:
                predecessor = predecessor.right
            if predecessor.right is None:
                predecessor.right = current
                current = current.left
            else:
                predecessor.right = None
                if previous is not None:
                    previous.right = current
                    previous.threaded = True
                previous = current
                current = current.right
        self._converted = True

    def inorder(self) -> list[int]:
        """Walk leftmost nodes and threads; complete only once converted."""
        result: list[int] = []
        current = self._root
        while current is not None:
            while current.left is not None:
                current = current.left
            result.append(current.data)
            while current is not None and current.threaded:
                current = current.right
                if current is not None:
                    result.append(current.data)
            if current is None:
                break
            current = current.right
        return result


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
    """Interactive insert/convert/traverse menu."""
    tree = ThreadedBinaryTree()
    tokens = _tokens(sys.stdin)
    while True:
        print(
            "\n1. Insert\n2. Convert to Threaded Tree\n3. In-order Traversal\n4. Exit\nChoice: ",
            end="",
        )
        choice = _next_int(tokens)
        if choice is None:
            break
        if choice == 1:
            print("Enter value: ", end="")
            value = _next_int(tokens)
            if value is None:
                break
            try:
                tree.insert(value)
            except RuntimeError as error:
                print(error)
        elif choice == 2:
            tree.convert()
            print("Converted to threaded binary tree.")
        elif choice == 3:
            print("In-order traversal: " + "".join(f"{v} " for v in tree.inorder()))
        elif choice == 4:
            print("Exiting.")
            break
        else:
            print("Invalid choice.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
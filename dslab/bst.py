"""Binary search tree with height, minimum, mirroring and search."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

INITIAL_VALUES = (50, 30, 70, 20, 40, 60, 80)


@dataclass(eq=False)
class _Node:
    data: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Unbalanced BST; equal values go to the right subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
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

    def contains(self, value: int) -> bool:
        current = self._root
        while current is not None:
            if current.data == value:
                return True
            current = current.left if value < current.data else current.right
        return False

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        level = [self._root] if self._root is not None else []
        depth = 0
        while level:
            depth += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return depth

    def minimum(self) -> int:
        """Value of the leftmost node."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def mirror(self) -> None:
        """Swap left and right children at every node."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child is not None)

    def inorder(self) -> list[int]:
        result: list[int] = []
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.data)
            current = current.right
        return result

    def __iter__(self) -> Iterator[int]:
        return iter(self.inorder())


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
    """Interactive menu over a tree seeded with a fixed set of values."""
    tree = BinarySearchTree(INITIAL_VALUES)
    tokens = _tokens(sys.stdin)
    while True:
        print("\n1.Insert 2.Search 3.Height 4.Min 5.Mirror 6.Inorder 7.Exit\nChoice: ", end="")
        choice = _next_int(tokens)
        if choice is None or choice == 7:
            break
        if choice in (1, 2):
            print("Enter value: ", end="")
            value = _next_int(tokens)
            if value is None:
                break
            if choice == 1:
                tree.insert(value)
            else:
                print("Found" if tree.contains(value) else "Not Found")
        elif choice == 3:
            print(f"Height: {tree.height()}")
        elif choice == 4:
            if tree.height():
                print(f"Min: {tree.minimum()}")
        elif choice == 5:
            tree.mirror()
            print("Tree mirrored.")
        elif choice == 6:
            print("Inorder: " + "".join(f"{value} " for value in tree.inorder()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
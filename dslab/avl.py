"""Keyword dictionary kept in a height-balanced (AVL) tree."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator


@dataclass(eq=False)
class _Node:
    key: str
    meaning: str
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


@dataclass(frozen=True)
class SearchResult:
    """Meaning found (or None) and the number of nodes compared."""

    meaning: str | None
    comparisons: int

    @property
    def found(self) -> bool:
        return self.meaning is not None


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _refresh(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _refresh(x)
    _refresh(y)
    return y


def _insert(node: _Node | None, key: str, meaning: str) -> _Node:
    if node is None:
        return _Node(key, meaning)
    if key < node.key:
        node.left = _insert(node.left, key, meaning)
    elif key > node.key:
        node.right = _insert(node.right, key, meaning)
    else:
        return node
    _refresh(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: _Node | None, key: str) -> _Node | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        node = node.left or node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key, node.meaning = successor.key, successor.meaning
        node.right = _delete(node.right, successor.key)
    if node is None:
        return None
    _refresh(node)
    balance = _balance(node)
    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if balance > 1:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if balance < -1:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _inorder(node: _Node | None, reverse: bool) -> Iterator[tuple[str, str]]:
    if node is None:
        return
    first, second = (node.right, node.left) if reverse else (node.left, node.right)
    yield from _inorder(first, reverse)
    yield node.key, node.meaning
    yield from _inorder(second, reverse)


class AVLDictionary:
    """Keyword-to-meaning mapping with logarithmic lookups."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def _find(self, key: str) -> tuple[_Node | None, int]:
        comparisons = 0
        node = self._root
        while node is not None:
            comparisons += 1
            if key == node.key:
                return node, comparisons
            node = node.left if key < node.key else node.right
        return None, comparisons

    def insert(self, key: str, meaning: str) -> bool:
        """Add a keyword; an existing keyword is left unchanged and False returned."""
        if key in self:
            return False
        self._root = _insert(self._root, key, meaning)
        self._size += 1
        return True

    def delete(self, key: str) -> bool:
        if key not in self:
            return False
        self._root = _delete(self._root, key)
        self._size -= 1
        return True

    def update(self, key: str, meaning: str) -> bool:
        node, _ = self._find(key)
        if node is None:
            return False
        node.meaning = meaning
        return True

    def search(self, key: str) -> SearchResult:
        node, comparisons = self._find(key)
        return SearchResult(node.meaning if node else None, comparisons)

    def ascending(self) -> list[tuple[str, str]]:
        return list(_inorder(self._root, reverse=False))

    def descending(self) -> list[tuple[str, str]]:
        return list(_inorder(self._root, reverse=True))

    def max_comparisons(self) -> int:
        """Worst-case comparisons for a lookup: the tree height."""
        return _height(self._root)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key)[0] is not None

    def __len__(self) -> int:
        return self._size


def main(argv=None) -> int:
    """Interactive keyword dictionary menu."""
    tree = AVLDictionary()
    tokens = (word for line in sys.stdin for word in line.split())
    menu = (
        "\n1. Insert\n2. Delete\n3. Update\n4. Search\n5. Display Ascending\n"
        "6. Display Descending\n7. Max Comparisons\n8. Exit\nEnter choice: "
    )
    while True:
        print(menu, end="")
        token = next(tokens, None)
        if token is None:
            break
        try:
            choice = int(token)
        except ValueError:
            break
        try:
            if choice == 1:
                print("Enter key: ", end="")
                key = next(tokens)
                print("Enter meaning: ", end="")
                tree.insert(key, next(tokens))
            elif choice == 2:
                print("Enter key to delete: ", end="")
                tree.delete(next(tokens))
            elif choice == 3:
                print("Enter key to update: ", end="")
                key = next(tokens)
                print("Enter new meaning: ", end="")
                tree.update(key, next(tokens))
            elif choice == 4:
                print("Enter key to search: ", end="")
                result = tree.search(next(tokens))
                if result.found:
                    print(
                        f"Found. Meaning: {result.meaning}, Comparisons: {result.comparisons}"
                    )
                else:
                    print(f"Not found. Comparisons: {result.comparisons}")
            elif choice in (5, 6):
                entries = tree.ascending() if choice == 5 else tree.descending()
                for key, meaning in entries:
                    print(f"{key}: {meaning}")
            elif choice == 7:
                print(f"Max comparisons: {tree.max_comparisons()}")
            elif choice == 8:
                print("Exiting...")
                break
            else:
                print("Invalid choice.")
        except StopIteration:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Expression trees built from prefix notation, walked in postorder without recursion."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator


@dataclass(eq=False)
class ExprNode:
    """Operand (a letter) or binary operator with two subtrees."""

    data: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalpha()


def build_from_prefix(expression: str) -> ExprNode:
    """Build a tree from a prefix expression with single-letter operands."""
    stack: list[ExprNode] = []
    for symbol in reversed(expression):
        if _is_operand(symbol):
            stack.append(ExprNode(symbol))
            continue
        if len(stack) < 2:
            raise ValueError(f"malformed prefix expression: {expression!r}")
        left = stack.pop()
        right = stack.pop()
        stack.append(ExprNode(symbol, left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack.pop()


def _postorder_nodes(root: ExprNode | None) -> Iterator[ExprNode]:
    if root is None:
        return
    pending = [root]
    collected: list[ExprNode] = []
    while pending:
        node = pending.pop()
        collected.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    yield from reversed(collected)


def postorder(root: ExprNode | None) -> str:
    """Postorder listing of the tree, computed with two explicit stacks."""
    return "".join(node.data for node in _postorder_nodes(root))


def delete_tree(root: ExprNode | None) -> list[str]:
    """Detach every node, children first; return the symbols in deletion order."""
    nodes = list(_postorder_nodes(root))
    for node in nodes:
        node.left = None
        node.right = None
    return [node.data for node in nodes]


def main(argv=None) -> int:
    """Read a prefix expression, print its postorder form, optionally delete it."""
    tokens = (word for line in sys.stdin for word in line.split())
    print("Enter Prefix: ", end="")
    expression = next(tokens, None)
    if expression is None:
        return 1
    try:
        root = build_from_prefix(expression)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print("Postorder: " + postorder(root), end="")
    print("\nDelete tree? (1/0): ", end="")
    answer = next(tokens, "0")
    try:
        delete = int(answer) != 0
    except ValueError:
        delete = False
    if delete:
        for symbol in delete_tree(root):
            print(f"Deleting: {symbol}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Optimal binary search tree by dynamic programming over key and gap probabilities."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class OptimalBST:
    """Minimum cost and the chosen root (1-based key index) of every key range."""

    keys: tuple
    cost: float
    roots: tuple[tuple[int, ...], ...]

    @property
    def root_index(self) -> int:
        """1-based index of the key at the root of the whole tree."""
        return self.roots[0][len(self.keys)]

    @property
    def root_key(self):
        return self.keys[self.root_index - 1]


def optimal_bst(keys: Sequence, p: Sequence[float], q: Sequence[float]) -> OptimalBST:
    """Build the cost table for sorted ``keys``.

    ``p[i]`` is the probability of searching ``keys[i]``; ``q[i]`` that of a search
    falling in the gap before key ``i`` (``q`` has one more entry than ``keys``).
    """
    n = len(keys)
    if n == 0:
        raise ValueError("at least one key is required")
    if len(p) != n:
        raise ValueError("need one success probability per key")
    if len(q) != n + 1:
        raise ValueError("need one more failure probability than keys")

    cost = [[0.0] * (n + 1) for _ in range(n + 1)]
    roots = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        cost[i][i] = q[i]

    for length in range(1, n + 1):
        for i in range(n - length + 1):
            j = i + length
            weight = sum(p[i:j]) + sum(q[i : j + 1])
            best, root = min(
                ((cost[i][r - 1] + cost[r][j] + weight, r) for r in range(i + 1, j + 1)),
                key=lambda candidate: candidate[0],
            )
            cost[i][j] = best
            roots[i][j] = root

    return OptimalBST(
        keys=tuple(keys),
        cost=cost[0][n],
        roots=tuple(tuple(row) for row in roots),
    )


def main(argv=None) -> int:
    """Read keys and probabilities from stdin and print the optimal cost and root."""
    tokens = (word for line in sys.stdin for word in line.split())
    try:
        print("Enter number of keys: ", end="")
        n = int(next(tokens))
        if n <= 0:
            raise ValueError
        print("Enter keys (sorted):")
        keys = []
        for i in range(1, n + 1):
            print(f"Key {i}: ", end="")
            keys.append(int(next(tokens)))
        print("Enter success probabilities (p[i]):")
        p = []
        for i in range(1, n + 1):
            print(f"p[{i}]: ", end="")
            p.append(float(next(tokens)))
        print("Enter failure probabilities (q[i]):")
        q = []
        for i in range(n + 1):
            print(f"q[{i}]: ", end="")
            q.append(float(next(tokens)))
    except (StopIteration, ValueError):
        print("\ninvalid input", file=sys.stderr)
        return 1
    tree = optimal_bst(keys, p, q)
    print(f"\nMinimum cost of OBST: {tree.cost:g}")
    print(f"Root key: {tree.root_key}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
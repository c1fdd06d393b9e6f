"""Campus landmark graph stored as adjacency lists, walked breadth- and depth-first."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable

SAMPLE_EDGES = (
    ("Library", "Canteen"),
    ("Library", "Admin Block"),
    ("Canteen", "Auditorium"),
    ("Admin Block", "Main Gate"),
    ("Auditorium", "Playground"),
    ("Main Gate", "Playground"),
)


class LandmarkGraph:
    """Undirected graph of named landmarks; neighbours keep insertion order."""

    def __init__(self, edges: Iterable[tuple[str, str]] = ()) -> None:
        self._adjacency: dict[str, list[str]] = {}
        for u, v in edges:
            self.add_edge(u, v)

    def add_edge(self, u: str, v: str) -> None:
        self._adjacency.setdefault(u, []).append(v)
        self._adjacency.setdefault(v, []).append(u)

    @property
    def landmarks(self) -> list[str]:
        """All landmarks in sorted order."""
        return sorted(self._adjacency)

    def neighbours(self, landmark: str) -> list[str]:
        return list(self._adjacency.get(landmark, ()))

    def format(self) -> str:
        """One line per landmark, in sorted order, listing its neighbours."""
        return "\n".join(
            f"{landmark} -> " + "".join(f"{n}, " for n in self._adjacency[landmark])
            for landmark in self.landmarks
        )

    def bfs(self, start: str) -> list[str]:
        """Landmarks in breadth-first order from ``start``."""
        visited = {start}
        order: list[str] = []
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._adjacency.get(current, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: str) -> list[str]:
        """Landmarks in depth-first order from ``start``, using an explicit stack."""
        visited: set[str] = set()
        order: list[str] = []
        stack = [start]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            order.append(current)
            stack.extend(
                n for n in reversed(self._adjacency.get(current, ())) if n not in visited
            )
        return order


def main(argv=None) -> int:
    """Show the sample campus graph and traverse it from a landmark read from stdin."""
    graph = LandmarkGraph(SAMPLE_EDGES)
    print("\nGraph (Adjacency List):")
    print(graph.format())
    print("\nEnter starting landmark for traversal (e.g., Library): ", end="")
    start = None
    for line in sys.stdin:
        stripped = line.lstrip().rstrip("\r\n")
        if stripped:
            start = stripped
            break
    if start is None:
        return 1
    print(f"\nBFS Traversal starting from {start}:")
    print("".join(f"{name} " for name in graph.bfs(start)))
    print(f"\nDFS Traversal starting from {start}:")
    print("".join(f"{name} " for name in graph.dfs(start)))
    print("\nNote: Adjacency List is used as the graph is sparse and it saves memory.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
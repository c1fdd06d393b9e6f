"""Flight network between cities as a weighted adjacency list, with connectivity check."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO


class FlightGraph:
    """Undirected weighted graph; cities keep the order they were first seen."""

    def __init__(self) -> None:
        self._routes: dict[str, list[tuple[str, int]]] = {}

    def add_city(self, city: str) -> None:
        """Add ``city``; an existing city loses its recorded flights."""
        self._routes[city] = []

    def add_flight(self, city1: str, city2: str, cost: int) -> None:
        self._routes.setdefault(city1, []).append((city2, cost))
        self._routes.setdefault(city2, []).append((city1, cost))

    @property
    def cities(self) -> list[str]:
        return list(self._routes)

    def flights(self, city: str) -> list[tuple[str, int]]:
        return list(self._routes.get(city, ()))

    def format(self) -> str:
        return "\n".join(
            f"{city} -> " + "".join(f"{dest}({cost} mins) " for dest, cost in routes)
            for city, routes in self._routes.items()
        )

    def reachable(self, city: str) -> set[str]:
        """Every city reachable from ``city``, including itself."""
        visited: set[str] = set()
        stack = [city]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            stack.extend(d for d, _ in self._routes.get(current, ()) if d not in visited)
        return visited

    def is_connected(self) -> bool:
        if not self._routes:
            return True
        start = next(iter(self._routes))
        return len(self.reachable(start)) == len(self._routes)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Read cities and flights from stdin, list them and report connectivity."""
    graph = FlightGraph()
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of cities: ", end="")
        for _ in range(int(next(tokens))):
            print("Enter city name: ", end="")
            graph.add_city(next(tokens))
        print("Enter number of flights: ", end="")
        for _ in range(int(next(tokens))):
            print(
                "Enter source city, destination city, and flight time (in minutes): ",
                end="",
            )
            source, destination = next(tokens), next(tokens)
            graph.add_flight(source, destination, int(next(tokens)))
    except (StopIteration, ValueError):
        print("\ninvalid input", file=sys.stderr)
        return 1

    print("\nFlight paths between cities:")
    if graph.cities:
        print(graph.format())
    if graph.is_connected():
        print("\nThe graph is connected. All cities are reachable from one another.")
    else:
        print("\nThe graph is NOT connected. Some cities are unreachable from others.")
    print(
        "\nNote: Adjacency List is used for graph representation as it is more "
        "space-efficient for sparse graphs like flight networks,\n"
        "where most cities are not directly connected to every other city."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Maximum and minimum marks found with binary max- and min-heaps."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, MutableSequence, TextIO


def max_heapify(values: MutableSequence[int], n: int, i: int) -> None:
    """Sift ``values[i]`` down within the first ``n`` items of a max-heap."""
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < n and values[left] > values[largest]:
            largest = left
        if right < n and values[right] > values[largest]:
            largest = right
        if largest == i:
            return
        values[i], values[largest] = values[largest], values[i]
        i = largest


def min_heapify(values: MutableSequence[int], n: int, i: int) -> None:
    """Sift ``values[i]`` down within the first ``n`` items of a min-heap."""
    while True:
        smallest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < n and values[left] < values[smallest]:
            smallest = left
        if right < n and values[right] < values[smallest]:
            smallest = right
        if smallest == i:
            return
        values[i], values[smallest] = values[smallest], values[i]
        i = smallest


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` arranged as a max-heap."""
    heap = list(values)
    for index in range(len(heap) // 2 - 1, -1, -1):
        max_heapify(heap, len(heap), index)
    return heap


def build_min_heap(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` arranged as a min-heap."""
    heap = list(values)
    for index in range(len(heap) // 2 - 1, -1, -1):
        min_heapify(heap, len(heap), index)
    return heap


def max_min(marks: Iterable[int]) -> tuple[int, int]:
    """Return (maximum, minimum) read from the roots of the two heaps."""
    values = list(marks)
    if not values:
        raise ValueError("no marks given")
    return build_max_heap(values)[0], build_min_heap(values)[0]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Read the student count and marks, then print the extremes."""
    tokens = _tokens(sys.stdin)
    print("Enter number of students: ", end="")
    try:
        count = int(next(tokens))
    except (StopIteration, ValueError):
        print("invalid number of students", file=sys.stderr)
        return 1
    if count <= 0:
        print("number of students must be positive", file=sys.stderr)
        return 1
    print("Enter marks obtained in DSAL:")
    marks = []
    for student in range(1, count + 1):
        print(f"Student {student}: ", end="")
        try:
            marks.append(int(next(tokens)))
        except (StopIteration, ValueError):
            print("invalid mark", file=sys.stderr)
            return 1
    highest, lowest = max_min(marks)
    print(f"\nMaximum Marks: {highest}", end="")
    print(f"\nMinimum Marks: {lowest}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
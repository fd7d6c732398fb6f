"""
Circular candidate lists used while a path is being built.

Every node lives in a dense arena; `before` and `after` are arena indices
rather than object references. The arena is built in input order, so walking
the ring from its head visits the surviving candidates in input order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from .errors import EmptyRingError
from .geometry import distance


@dataclass
class Waypoint:
    point: Sequence
    index: int
    before: int = -1
    after: int = -1

    def score(self, position) -> Tuple[np.float32, int]:
        return distance(position, self.point), 0

    def materialize(self, entry: int):
        return self.point

    def exit_position(self, entry: int):
        return self.point


@dataclass
class Wayline:
    line: Sequence
    index: int
    before: int = -1
    after: int = -1

    def score(self, position) -> Tuple[np.float32, int]:
        """Distance to the nearer endpoint, and which endpoint that is (0 or 1)."""
        to_first = distance(position, self.line[0])
        to_second = distance(position, self.line[1])
        if to_second < to_first:
            return to_second, 1
        return to_first, 0

    def materialize(self, entry: int):
        return (self.line[entry], self.line[1 - entry])

    def exit_position(self, entry: int):
        return self.line[1 - entry]


Candidate = Union[Waypoint, Wayline]


class CandidateRing:
    """Circular doubly-linked list of not-yet-placed candidates."""

    def __init__(self, nodes: List[Candidate]):
        self._nodes = list(nodes)
        n = len(self._nodes)
        for i, node in enumerate(self._nodes):
            node.before = (i - 1) % n
            node.after = (i + 1) % n
        self._head = 0 if n else -1
        self._size = n

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Candidate]:
        cursor = self._head
        for _ in range(self._size):
            node = self._nodes[cursor]
            yield node
            cursor = node.after

    def remove(self, node: Candidate) -> None:
        if node.before < 0:
            raise ValueError(f"candidate {node.index} is not in the ring")
        # arena slot of the node itself
        slot = self._nodes[node.before].after
        if self._size == 1:
            self._head = -1
        else:
            self._nodes[node.before].after = node.after
            self._nodes[node.after].before = node.before
            if slot == self._head:
                self._head = node.after
        node.before = node.after = -1
        self._size -= 1

    def pop_head(self) -> Candidate:
        if not self._size:
            raise EmptyRingError("no candidates left")
        node = self._nodes[self._head]
        self.remove(node)
        return node

    def nearest(self, position) -> Tuple[Candidate, int, np.float32]:
        """
        Scan the whole ring for the candidate closest to `position`.

        Returns (node, entry, distance). On exact ties the first node met
        from the head wins.
        """
        if not self._size:
            raise EmptyRingError("no candidates left")
        best = None
        best_entry = 0
        best_dist = None
        for node in self:
            dist, entry = node.score(position)
            if best_dist is None or dist < best_dist:
                best, best_entry, best_dist = node, entry, dist
        return best, best_entry, best_dist

"""
Short paths past a set of points or lines.

A short path is computed that visits every item, but not always the
shortest one: finding that is the Travelling Salesman Problem, which is
NP-complete. The paths built here come from the greedy nearest-neighbor
heuristic, which repeatedly extends the path to the closest unvisited item.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .candidates import CandidateRing, Waypoint, Wayline
from .config import get_path_config
from .errors import PathInputError
from .geometry import check_line, check_point, line_travel_length, point_path_length

logger = logging.getLogger(__name__)


# -------------------------
# 1. SHARED CONSTRUCTION LOOP
# -------------------------
def _construct(ring: CandidateRing, starting_point=None) -> List[Tuple[object, int]]:
    """
    Consume `ring` greedily and return the placed (node, entry) pairs in order.

    Without a starting point the head of the ring seeds the path, entered
    through its first endpoint.
    """
    placed = []
    if starting_point is None:
        if not len(ring):
            return placed
        seed = ring.pop_head()
        placed.append((seed, 0))
        position = seed.exit_position(0)
    else:
        position = starting_point

    while len(ring):
        node, entry, _ = ring.nearest(position)
        ring.remove(node)
        placed.append((node, entry))
        position = node.exit_position(entry)
    return placed


# -------------------------
# 2. POINTS
# -------------------------
def find_point_order(points: Sequence, starting_point=None) -> List[int]:
    """Indices into `points`, in the order of a short path past all of them."""
    items = list(points)
    if starting_point is not None:
        check_point(starting_point)
    ring = CandidateRing(
        [Waypoint(check_point(p, i), i) for i, p in enumerate(items)]
    )
    return [node.index for node, _ in _construct(ring, starting_point)]


def find_point_path(
    points: Sequence,
    starting_point=None,
    *,
    include_starting_point: Optional[bool] = None,
) -> list:
    """
    Compute a short path along all specified points.

    Parameters
    ----------
    points : sequence of 2D points
        The waypoints past which the path must run. Never modified.
    starting_point : 2D point, optional
        A fixed starting point of the path. If None, the path starts at the
        first waypoint.
    include_starting_point : bool, optional
        Prepend `starting_point` to the result. Defaults to
        `PathConfig.include_starting_point`, which is False.

    Returns
    -------
    list
        The caller's own point objects, in an order that makes a short path.
    """
    items = list(points)
    if include_starting_point is None:
        include_starting_point = get_path_config().include_starting_point

    order = find_point_order(items, starting_point)
    path = [items[i] for i in order]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Point path over %d waypoints (start=%s): travel %.3f",
            len(path), starting_point, point_path_length(path, starting_point),
        )
    if include_starting_point and starting_point is not None:
        path.insert(0, starting_point)
    return path


# -------------------------
# 3. LINES
# -------------------------
def find_line_order(lines: Sequence, starting_point=None) -> List[Tuple[int, bool]]:
    """(index, reversed) pairs into `lines`, in the order of a short path."""
    items = list(lines)
    if starting_point is not None:
        check_point(starting_point)
    ring = CandidateRing(
        [Wayline(check_line(line, i), i) for i, line in enumerate(items)]
    )
    return [(node.index, entry == 1) for node, entry in _construct(ring, starting_point)]


def find_line_path(lines: Sequence, starting_point=None) -> List[tuple]:
    """
    Compute a short path along all specified lines.

    Lines are pairs of points and may be reversed if that makes the path
    shorter. Each result pair is read in order, the first point being where
    the line is entered and the second where it is left. The starting point,
    if given, only seeds the first distance comparisons and is never part of
    the result.
    """
    items = list(lines)
    path = []
    for index, flipped in find_line_order(items, starting_point):
        first, second = items[index]
        path.append((second, first) if flipped else (first, second))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Line path over %d waylines (start=%s): travel %.3f",
            len(path), starting_point, line_travel_length(path, starting_point),
        )
    return path


# -------------------------
# 4. DISPATCH
# -------------------------
def find_path(items: Sequence, starting_point=None) -> list:
    """
    Short path past points or lines, whichever `items` holds.

    Items of dimension 1 (x, y) are points; items of dimension 2
    ((x1, y1), (x2, y2)) are lines.
    """
    items = list(items)
    if not items:
        return find_point_path(items, starting_point)
    try:
        dims = np.ndim(items[0])
    except ValueError:
        raise PathInputError(f"ragged item {items[0]!r}", 0) from None
    if dims == 2:
        return find_line_path(items, starting_point)
    return find_point_path(items, starting_point)

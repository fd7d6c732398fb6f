import numbers

import numpy as np

from .errors import PathInputError


# -------------------------
# 1. GRID GENERATION
# -------------------------
def generate_grid_points(M: int) -> np.ndarray:
    """Generate the integer MxM lattice {0..M-1}^2 as an (M*M, 2) array."""
    points = []
    for i in range(M):
        for j in range(M):
            points.append(np.array([i, j], dtype=np.int64))
    if not points:
        return np.empty((0, 2), dtype=np.int64)
    return np.array(points)


# -------------------------
# 2. POINT / LINE CHECKS
# -------------------------
def check_point(point, index=None):
    """Return `point` unchanged if it looks like a 2D coordinate pair."""
    try:
        size = len(point)
    except TypeError:
        raise PathInputError(f"expected a 2D point, got {point!r}", index) from None
    if size != 2:
        raise PathInputError(f"expected a 2D point, got {size} coordinates", index)
    if not all(isinstance(c, numbers.Real) for c in point):
        raise PathInputError(f"expected scalar coordinates, got {point!r}", index)
    return point


def check_line(line, index=None):
    """Return `line` unchanged if it is a pair of 2D points."""
    try:
        size = len(line)
    except TypeError:
        raise PathInputError(f"expected a pair of points, got {line!r}", index) from None
    if size != 2:
        raise PathInputError(f"expected a pair of points, got {size} items", index)
    check_point(line[0], index)
    check_point(line[1], index)
    return line


# -------------------------
# 3. DISTANCE
# -------------------------
def distance(a, b) -> np.float32:
    """
    Euclidean distance from A to B in single precision.

    The result is only ever compared against other distances, so only the
    integer differences go to float32, never the coordinates themselves.
    """
    dx = np.float32(int(a[0]) - int(b[0]))
    dy = np.float32(int(a[1]) - int(b[1]))
    return np.sqrt(dx * dx + dy * dy)


# -------------------------
# 4. PATH COSTS
# -------------------------
def compute_path_cost(points, order) -> float:
    """Length of the open path visiting points[order] in sequence."""
    pts = np.asarray(points, dtype=float)
    if len(order) < 2:
        return 0.0
    ordered = pts[np.asarray(order, dtype=int)]
    return float(np.sum(np.linalg.norm(np.diff(ordered, axis=0), axis=1)))


def point_path_length(path, starting_point=None) -> float:
    """Travel length of an already ordered point path, including the leg from the start."""
    pts = [tuple(p) for p in path]
    if starting_point is not None:
        pts.insert(0, tuple(starting_point))
    if len(pts) < 2:
        return 0.0
    return compute_path_cost(pts, list(range(len(pts))))


def line_travel_length(lines, starting_point=None) -> float:
    """
    Non-productive travel along an ordered list of oriented lines:
    from the start to the first entry, then from each exit to the next entry.
    """
    total = 0.0
    position = starting_point
    for entry, exit_point in lines:
        if position is not None:
            total += float(np.hypot(float(entry[0]) - float(position[0]),
                                    float(entry[1]) - float(position[1])))
        position = exit_point
    return total

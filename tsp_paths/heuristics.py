import numpy as np
from hilbertcurve.hilbertcurve import HilbertCurve
import zCurve as z

from .salesman import find_point_order


def _to_curve_grid(points, R):
    """Map integer points into [0, R-1]^2 by their bounding box."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    lo = pts.min(axis=0)
    span = pts.max(axis=0) - lo
    span[span == 0] = 1.0
    scaled = (pts - lo) / span * (R - 1)
    return np.clip(np.rint(scaled), 0, R - 1).astype(int)


# -------------------------
# NEAREST NEIGHBOR
# -------------------------
def nearest_neighbor_order(points: np.ndarray):
    """
    Greedy nearest-neighbor order starting from the first point.
    Returns (indices, step_lengths).
    """
    if len(points) == 0:
        return np.array([], dtype=int), np.array([])
    order = np.array(find_point_order(points), dtype=int)
    ordered = np.asarray(points, dtype=float)[order]
    steps = np.linalg.norm(np.diff(ordered, axis=0), axis=1)
    return order, steps


# -------------------------
# HILBERT ORDER
# -------------------------
def hilbert_order(points: np.ndarray, p: int = 10):
    """
    Order points by their distance along a 2D Hilbert curve of order p.
    Returns (indices, codes).
    """
    if len(points) == 0:
        return np.array([], dtype=int), np.array([])
    n = 2
    hilbert_curve = HilbertCurve(p, n)
    R = 2 ** p

    grid = _to_curve_grid(points, R)
    hilbert_indices = [hilbert_curve.distance_from_point([int(x), int(y)]) for x, y in grid]
    return np.argsort(hilbert_indices, kind="stable"), hilbert_indices


# -------------------------
# Z-CURVE (MORTON ORDER)
# -------------------------
def zcurve_order(points: np.ndarray, bits: int = 16):
    """
    Order points by Z-curve (Morton code).
    Returns (indices, morton_codes).
    """
    if len(points) == 0:
        return np.array([], dtype=int), np.array([])
    R = 2 ** bits

    int_points = [(int(x), int(y)) for x, y in _to_curve_grid(points, R)]
    morton_codes = z.par_interlace(int_points, dims=2, bits_per_dim=bits)
    return np.argsort(morton_codes, kind="stable"), morton_codes


# === Accessible heuristics ===
heuristics_registry_dict = {
    "NearestNeighbor": nearest_neighbor_order,
    "Hilbert": hilbert_order,
    "Z-order": zcurve_order,
}

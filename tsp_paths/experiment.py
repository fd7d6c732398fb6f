import logging
import os

import numpy as np

from .geometry import generate_grid_points, compute_path_cost
from .heuristics import nearest_neighbor_order
from .utils import pick_random_combs

logger = logging.getLogger(__name__)


# -------------------------
# SAVE / LOAD RESULTS
# -------------------------
def _result_filename(M, k, oracle_name, folder):
    return os.path.join(folder, f"grid_M{M}_set_k{k}_heuristic_{oracle_name}.npz")


def save_result_to_file(points, heur_order, nn_order, ratio, M, k, oracle_name="heuristic", folder="results"):
    """Save one .npz per heuristic with metadata."""
    os.makedirs(folder, exist_ok=True)
    filename = _result_filename(M, k, oracle_name, folder)

    np.savez_compressed(
        filename,
        points=points,
        heur_order=heur_order,
        nn_order=nn_order,
        heuristic_cost=compute_path_cost(points, heur_order),
        nn_cost=compute_path_cost(points, nn_order),
        ratio=ratio,
    )
    logger.info("Saved %s", filename)
    return filename


def load_result_from_file(M, k, oracle_name="Hilbert", folder="results"):
    """Load a saved .npz result."""
    filename = _result_filename(M, k, oracle_name, folder)
    with np.load(filename) as data:
        return {
            "points": data["points"],
            "heur_order": data["heur_order"],
            "nn_order": data["nn_order"],
            "heuristic_cost": data["heuristic_cost"].item(),
            "nn_cost": data["nn_cost"].item(),
            "ratio": data["ratio"].item(),
        }


# -------------------------
# MAIN RANDOMIZED SEARCH
# -------------------------
def compare_orderings(
    M,
    k,
    order_fn,
    order_name="Order",
    max_iter=50,
    seed=None,
    folder=None,
):
    """
    Draw random k-subsets of the MxM grid; for each, compare every ordering's
    path cost with the greedy nearest-neighbor cost on the same subset.

    Keeps the worst (largest) heuristic / nearest-neighbor ratio per ordering.
    When `folder` is given, each worst case is saved there.
    Returns {name: {"worst_ratio", "worst_subset", "orders", "mean_ratio"}}.
    """
    # Normalize inputs to lists
    if not isinstance(order_fn, (list, tuple)):
        order_fn = [order_fn]
    if not isinstance(order_name, (list, tuple)):
        order_name = [order_name]
    if len(order_fn) != len(order_name):
        raise ValueError("order_fn and order_name must have the same length")

    all_points = generate_grid_points(M)
    N = len(all_points)
    logger.info("Grid generated with %d points (%dx%d)", N, M, M)

    results = {
        name: {"worst_ratio": -np.inf, "worst_subset": None, "orders": None, "ratios": []}
        for name in order_name
    }

    random_combs = pick_random_combs(N, k, max_iter, seed=seed)

    for idx, indices in enumerate(random_combs):
        subset = all_points[list(indices)]

        # Nearest neighbor once per subset
        nn_order, _ = nearest_neighbor_order(subset)
        nn_cost = compute_path_cost(subset, nn_order)
        if nn_cost == 0:
            continue

        for fn, name in zip(order_fn, order_name):
            heur_order, _ = fn(subset)
            heur_cost = compute_path_cost(subset, heur_order)
            ratio = heur_cost / nn_cost
            results[name]["ratios"].append(ratio)

            if idx % max(1, max_iter // 10) == 0:
                logger.info(
                    "[%s] subset %d/%d | ratio %.4f | worst %.4f",
                    name, idx, max_iter, ratio, results[name]["worst_ratio"],
                )

            if ratio > results[name]["worst_ratio"]:
                results[name]["worst_ratio"] = ratio
                results[name]["worst_subset"] = subset
                results[name]["orders"] = (heur_order, nn_order)

    summary = {}
    for name, r in results.items():
        if r["worst_subset"] is None:
            continue
        summary[name] = {
            "worst_ratio": r["worst_ratio"],
            "worst_subset": r["worst_subset"],
            "orders": r["orders"],
            "mean_ratio": float(np.mean(r["ratios"])),
        }
        if folder is not None:
            save_result_to_file(
                r["worst_subset"],
                r["orders"][0],
                r["orders"][1],
                r["worst_ratio"],
                M,
                k,
                oracle_name=name,
                folder=folder,
            )
        logger.info("Result for %s: worst ratio=%.4f", name, r["worst_ratio"])

    logger.info("Comparison completed for all orders.")
    return summary

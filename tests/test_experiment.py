import logging
import os

import pytest

from tsp_paths import (
    compare_orderings,
    hilbert_order,
    load_result_from_file,
    max_iter_from_k,
    nearest_neighbor_order,
    pick_random_combs,
    zcurve_order,
)


def test_pick_random_combs_are_unique_k_subsets():
    combs = pick_random_combs(10, 3, 5, seed=1)
    assert len(combs) == 5
    seen = {tuple(c) for c in combs}
    assert len(seen) == 5
    for c in combs:
        assert len(c) == 3
        assert list(c) == sorted(c)
        assert all(0 <= i < 10 for i in c)


def test_pick_random_combs_is_reproducible():
    first = [tuple(c) for c in pick_random_combs(20, 4, 6, seed=7)]
    second = [tuple(c) for c in pick_random_combs(20, 4, 6, seed=7)]
    assert first == second


def test_pick_random_combs_warns_when_short(caplog):
    with caplog.at_level(logging.WARNING, logger="tsp_paths.utils"):
        combs = pick_random_combs(4, 4, 3, seed=0)
    assert len(combs) == 1
    assert "Only 1 unique combinations" in caplog.text


def test_pick_random_combs_rejects_oversized_subsets():
    with pytest.raises(ValueError):
        pick_random_combs(3, 4, 1)


def test_max_iter_from_k():
    assert max_iter_from_k(5) == 1000
    assert max_iter_from_k(12) == 200
    assert max_iter_from_k(50) == 5


def test_compare_orderings_saves_worst_cases(tmp_path):
    folder = str(tmp_path / "results")
    summary = compare_orderings(
        M=4,
        k=6,
        order_fn=[hilbert_order, zcurve_order],
        order_name=["Hilbert", "Z-order"],
        max_iter=5,
        seed=0,
        folder=folder,
    )
    assert set(summary) == {"Hilbert", "Z-order"}
    for name, result in summary.items():
        assert result["worst_ratio"] >= result["mean_ratio"] > 0
        assert len(result["worst_subset"]) == 6
        assert os.path.exists(os.path.join(folder, f"grid_M4_set_k6_heuristic_{name}.npz"))

    data = load_result_from_file(4, 6, "Hilbert", folder)
    assert data["ratio"] == pytest.approx(summary["Hilbert"]["worst_ratio"])
    assert data["heuristic_cost"] / data["nn_cost"] == pytest.approx(data["ratio"])
    assert data["points"].shape == (6, 2)


def test_nearest_neighbor_against_itself_has_unit_ratio():
    summary = compare_orderings(4, 5, nearest_neighbor_order, "NearestNeighbor", max_iter=3, seed=3)
    assert summary["NearestNeighbor"]["worst_ratio"] == pytest.approx(1.0)
    assert summary["NearestNeighbor"]["mean_ratio"] == pytest.approx(1.0)


def test_compare_orderings_requires_matching_names():
    with pytest.raises(ValueError):
        compare_orderings(4, 5, [hilbert_order, zcurve_order], ["Hilbert"], max_iter=1)


def test_load_missing_result(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_result_from_file(4, 6, "Hilbert", str(tmp_path))

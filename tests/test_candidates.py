import pytest

from tsp_paths import CandidateRing, EmptyRingError, Waypoint, Wayline


def _ring(points):
    return CandidateRing([Waypoint(p, i) for i, p in enumerate(points)])


def test_ring_iterates_in_input_order():
    ring = _ring([(0, 0), (1, 0), (2, 0)])
    assert len(ring) == 3
    assert [node.point for node in ring] == [(0, 0), (1, 0), (2, 0)]


def test_remove_relinks_neighbours():
    ring = _ring([(0, 0), (1, 0), (2, 0), (3, 0)])
    nodes = list(ring)
    ring.remove(nodes[1])
    assert [node.index for node in ring] == [0, 2, 3]
    assert nodes[0].after == 2
    assert nodes[2].before == 0
    assert nodes[1].before == nodes[1].after == -1


def test_removing_head_moves_head_forward():
    ring = _ring([(0, 0), (1, 0), (2, 0)])
    ring.remove(list(ring)[0])
    assert [node.index for node in ring] == [1, 2]
    # still circular
    last = list(ring)[-1]
    assert last.after == 1


def test_remove_twice_is_rejected():
    ring = _ring([(0, 0), (1, 0)])
    node = list(ring)[0]
    ring.remove(node)
    with pytest.raises(ValueError):
        ring.remove(node)


def test_pop_head_drains_ring():
    ring = _ring([(0, 0), (1, 0)])
    assert ring.pop_head().index == 0
    assert ring.pop_head().index == 1
    assert len(ring) == 0
    assert list(ring) == []
    with pytest.raises(EmptyRingError):
        ring.pop_head()


def test_empty_ring():
    ring = _ring([])
    assert len(ring) == 0
    with pytest.raises(EmptyRingError):
        ring.nearest((0, 0))


def test_nearest_prefers_first_seen_on_ties():
    ring = _ring([(5, 0), (0, 1), (1, 0), (0, 5)])
    node, entry, dist = ring.nearest((0, 0))
    assert node.index == 1
    assert entry == 0
    assert dist == pytest.approx(1.0)


def test_wayline_scores_nearer_endpoint():
    line = Wayline(((10, 0), (0, 0)), 0)
    dist, entry = line.score((1, 0))
    assert entry == 1
    assert dist == pytest.approx(1.0)
    assert line.materialize(entry) == ((0, 0), (10, 0))
    assert line.exit_position(entry) == (10, 0)


def test_wayline_endpoint_tie_keeps_stored_orientation():
    line = Wayline(((0, 0), (10, 0)), 0)
    dist, entry = line.score((5, 0))
    assert entry == 0
    assert line.materialize(entry) == ((0, 0), (10, 0))


def test_waypoint_capabilities():
    point = Waypoint((3, 4), 7)
    dist, entry = point.score((0, 0))
    assert dist == pytest.approx(5.0)
    assert point.materialize(entry) == (3, 4)
    assert point.exit_position(entry) == (3, 4)

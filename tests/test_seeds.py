from conftest import SequenceRNG
from fractalgarden.rng import new_rng
from fractalgarden.state.seeds import SeedPoint, SeedPointStore


def test_initialize_scatters_within_bounds():
    store = SeedPointStore(new_rng(4))
    assert store.initialize(25, 1200, 800) == 25
    assert len(store) == 25
    for p in store:
        assert 0 <= p.x < 1200
        assert 0 <= p.y < 800
        assert 0 <= p.angle < 360


def test_initialize_only_fills_an_empty_store():
    store = SeedPointStore(new_rng(4))
    store.append(10, 20)
    assert store.initialize(5, 100, 100) == 0
    assert len(store) == 1


def test_initialize_uses_the_injected_rng():
    store = SeedPointStore(SequenceRNG([0.5, 0.25, 0.1]))
    store.initialize(1, 200, 400)
    assert store.points == (SeedPoint(100.0, 100.0, 36.0),)


def test_append_adds_one_point_and_keeps_the_rest():
    store = SeedPointStore(new_rng(8))
    store.initialize(3, 300, 300)
    before = store.points

    added = store.append(42, 17)

    assert len(store) == 4
    assert store.points[:3] == before
    assert (added.x, added.y) == (42.0, 17.0)
    assert store.points[-1] is added
    assert 0 <= added.angle < 360


def test_clear_empties_any_store():
    store = SeedPointStore(new_rng(8))
    store.clear()
    assert len(store) == 0

    store.initialize(12, 100, 100)
    store.append(1, 1)
    store.clear()
    assert len(store) == 0
    assert store.points == ()


def test_points_snapshot_is_detached():
    store = SeedPointStore(new_rng(1))
    snapshot = store.points
    store.append(5, 5)
    assert snapshot == ()

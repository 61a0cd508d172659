import asyncio

import pytest

from conftest import RecordingCanvas, SequenceRNG, frame_config
from fractalgarden.errors import SurfaceError
from fractalgarden.patterns.branch import BranchExpander
from fractalgarden.patterns.scheduler import TreeScheduler
from fractalgarden.rng import new_rng
from fractalgarden.state.seeds import SeedPoint

POINTS = [SeedPoint(50.0, 60.0, 0.0), SeedPoint(200.0, 150.0, 90.0), SeedPoint(10.0, 290.0, 45.0)]


def scheduler_for(canvas, rng=None):
    return TreeScheduler(BranchExpander(canvas, rng or new_rng(9)))


def test_every_tree_completes(canvas):
    config = frame_config(depth=4)
    total = asyncio.run(scheduler_for(canvas).expand_all(POINTS, config))
    assert total == len(POINTS) * (2 ** 4 - 1)
    assert len(canvas.motifs) == total


def test_no_points_is_immediately_done(canvas):
    assert asyncio.run(scheduler_for(canvas).expand_all([], frame_config())) == 0
    assert canvas.calls == []


def test_trees_start_on_staggered_motifs(canvas):
    config = frame_config(depth=1, motifs=("A", "B"))
    asyncio.run(scheduler_for(canvas).expand_all(POINTS, config))
    # depth 1 draws only the roots, in seed order
    assert [c[1] for c in canvas.motifs] == ["A", "B", "A"]
    assert [(c[2], c[3]) for c in canvas.motifs] == [(p.x, p.y) for p in POINTS]


def test_trees_grow_interleaved(canvas):
    config = frame_config(depth=3, step_delay=0.001)
    asyncio.run(scheduler_for(canvas).expand_all(POINTS[:2], config))
    roots = [(c[2], c[3]) for c in canvas.motifs[:2]]
    assert roots == [(50.0, 60.0), (200.0, 150.0)]


def test_replay_with_fixed_randomness_is_identical():
    config = frame_config(depth=5, motifs=("x", "y", "z"), debug=True)

    def run():
        canvas = RecordingCanvas()
        rng = SequenceRNG([0.3, 0.7, 0.05, 0.95])
        asyncio.run(scheduler_for(canvas, rng).expand_all(POINTS, config))
        return canvas.calls

    first = run()
    assert first == run()
    assert len([c for c in first if c[0] == "glyph"]) == 3 * 31


def test_surface_failure_aborts_all_trees():
    # the second root fails once; the other trees must not keep growing
    canvas = RecordingCanvas(fail_at=1)
    config = frame_config(depth=4, step_delay=0.01)
    scheduler = scheduler_for(canvas)

    async def scenario():
        with pytest.raises(SurfaceError):
            await scheduler.expand_all(POINTS, config)
        drawn = len(canvas.motifs)
        await asyncio.sleep(0.1)
        return drawn, len(canvas.motifs)

    at_failure, later = asyncio.run(scenario())
    assert at_failure <= 2
    assert later == at_failure

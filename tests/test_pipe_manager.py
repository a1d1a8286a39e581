import random

from flappy_bird.constants import PIPE_GAP, PIPE_SPAWN_X, PIPE_SPEED
from flappy_bird.data_models import Orientation
from flappy_bird.pipe_manager import PipeManager


def make_manager(seed=7):
    return PipeManager(pipe_width=320.0, pipe_height=576.0, rng=random.Random(seed))


def test_spawn_creates_top_and_bottom_at_right_edge():
    manager = make_manager()
    top, bottom = manager.spawn(150.0)
    assert list(manager) == [top, bottom]
    assert top.orientation is Orientation.TOP
    assert bottom.orientation is Orientation.BOTTOM
    assert top.x == bottom.x == PIPE_SPAWN_X
    assert bottom.gap_y == 310.0


def test_random_gaps_stay_in_band_and_pairs_keep_gap():
    manager = make_manager()
    for _ in range(200):
        top, bottom = manager.spawn()
        assert 150.0 <= top.gap_y < 400.0
        assert bottom.gap_y == top.gap_y + PIPE_GAP
    for _ in range(50):
        manager.advance()
    pipes = list(manager)
    for top, bottom in zip(pipes[::2], pipes[1::2]):
        assert bottom.gap_y == top.gap_y + PIPE_GAP
        assert top.x == bottom.x


def test_advance_moves_every_pipe_by_fixed_step():
    manager = make_manager()
    manager.spawn(200.0)
    manager.spawn(300.0)
    before = [p.x for p in manager]
    manager.advance()
    assert [p.x for p in manager] == [x - PIPE_SPEED for x in before]


def test_spawn_timer_requires_interval_to_strictly_elapse():
    manager = make_manager()
    assert not manager.tick_spawn_timer(0.8)
    assert not manager.tick_spawn_timer(0.8)
    assert len(manager) == 0
    assert manager.tick_spawn_timer(0.8)
    assert len(manager) == 2


def test_spawn_timer_resets_on_spawn():
    manager = make_manager()
    spawned = [manager.tick_spawn_timer(0.5) for _ in range(8)]
    assert spawned == [False, False, False, True, False, False, False, True]
    assert manager.spawn_elapsed == 0.0


def test_reap_removes_only_fully_offscreen_pipes_in_order():
    manager = make_manager()
    old = manager.spawn(150.0)
    new = manager.spawn(250.0)
    for pipe in old:
        pipe.x = -320.0
    assert manager.reap() == 0

    for pipe in old:
        pipe.x = -320.5
    assert manager.reap() == 2
    assert list(manager) == list(new)


def test_score_crossing_counts_bottom_pipe_once_inside_window():
    manager = make_manager()
    top, bottom = manager.spawn(150.0)

    for center, expected in [(70.1, 0), (70.0, 1), (67.0, 1), (66.5, 0)]:
        top.x = bottom.x = center - 160.0
        assert manager.score_crossings(70.0) == expected


def test_each_pair_scores_exactly_once_while_scrolling():
    manager = make_manager()
    manager.spawn(150.0)
    total = 0
    while len(manager):
        manager.advance()
        total += manager.score_crossings(70.0)
        manager.reap()
    assert total == 1


def test_clear_empties_pipes_but_keeps_spawn_clock():
    manager = make_manager()
    manager.spawn()
    manager.tick_spawn_timer(1.0)
    manager.clear()
    assert len(manager) == 0
    assert manager.spawn_elapsed == 1.0

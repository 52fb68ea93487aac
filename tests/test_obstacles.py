import random
from collections import deque
from dataclasses import replace

from flappy_game.obstacles import ObstacleStream
from flappy_game.world import ObstaclePair


def xs(pairs):
    return [pair.x for pair in pairs]


def assert_evenly_spaced(pairs, spacing):
    positions = xs(pairs)
    assert all(b - a == spacing for a, b in zip(positions, positions[1:])), positions


def test_populate_fills_lookahead_past_right_edge(config):
    stream = ObstacleStream(config, random.Random(0))
    pairs = deque()
    stream.populate(pairs)
    assert xs(pairs) == [520, 740, 960, 1180]
    assert all(not pair.scored for pair in pairs)
    assert all(60 <= pair.gap_y < 310 for pair in pairs)


def test_populate_replaces_existing_pairs(config):
    stream = ObstacleStream(config, random.Random(0))
    pairs = deque([ObstaclePair(x=5, gap_y=100, scored=True)])
    stream.populate(pairs)
    assert len(pairs) == 4
    assert pairs[0].x == 520


def test_advance_scrolls_every_pair(config):
    stream = ObstacleStream(config, random.Random(0))
    pairs = deque()
    stream.populate(pairs)
    gaps = [pair.gap_y for pair in pairs]

    assert stream.advance(pairs) == 0
    assert xs(pairs) == [517, 737, 957, 1177]
    assert [pair.gap_y for pair in pairs] == gaps


def test_pair_leaving_screen_is_recycled_behind_tail(config):
    stream = ObstacleStream(config, random.Random(0))
    pairs = deque(ObstaclePair(x=x, gap_y=100) for x in (-58, 162, 382, 602))

    assert stream.advance(pairs) == 1
    assert xs(pairs) == [159, 379, 599, 819]
    assert 60 <= pairs[-1].gap_y < 310
    assert pairs[-1].scored is False
    assert_evenly_spaced(pairs, 220)


def test_pair_with_right_edge_at_zero_is_kept(config):
    stream = ObstacleStream(config, random.Random(0))
    pairs = deque(ObstaclePair(x=x, gap_y=100) for x in (-57, 163, 383, 603))

    assert stream.advance(pairs) == 0
    assert pairs[0].x == -60


def test_spacing_holds_over_long_runs(config):
    stream = ObstacleStream(config, random.Random(3))
    pairs = deque()
    stream.populate(pairs)
    recycled = 0
    for _ in range(2000):
        recycled += stream.advance(pairs)
        assert len(pairs) == 4
        assert_evenly_spaced(pairs, 220)
        assert pairs[0].x + 60 >= 0
    assert recycled > 0


def test_gap_sampling_follows_injected_generator(config):
    expected_rng = random.Random(7)
    expected = [60 + expected_rng.randrange(250) for _ in range(4)]

    pairs = deque()
    ObstacleStream(config, random.Random(7)).populate(pairs)
    assert [pair.gap_y for pair in pairs] == expected


def test_gap_sampling_stays_in_half_open_range(config):
    stream = ObstacleStream(config, random.Random(11))
    samples = [stream.sample_gap() for _ in range(5000)]
    assert min(samples) >= 60
    assert max(samples) < 310


def test_degenerate_range_clamps_to_single_placement(config):
    # Bypasses validation on purpose: max_top == min_top.
    cramped = replace(config, obstacles=replace(config.obstacles, gap=420))
    stream = ObstacleStream(cramped, random.Random(0))
    assert {stream.sample_gap() for _ in range(20)} == {60}

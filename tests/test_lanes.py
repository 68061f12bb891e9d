import random

import pytest

from config import GRID_SIZE, WINDOW_HEIGHT, COLORS
from lanes import HazardObject, Lane, LaneType, generate_lanes, lane_speed


@pytest.mark.parametrize("seed", range(25))
def test_layout_shape(seed):
    lanes = generate_lanes(1, random.Random(seed))
    assert 3 <= len(lanes) <= 4
    for lane in lanes:
        assert 2 <= len(lane.objects) <= 3
        # rows sit between the two safe zones
        assert GRID_SIZE <= lane.y
        assert lane.y + GRID_SIZE <= WINDOW_HEIGHT - GRID_SIZE


@pytest.mark.parametrize("seed", range(25))
def test_directions_alternate_by_index(seed):
    lanes = generate_lanes(3, random.Random(seed))
    for i, lane in enumerate(lanes):
        assert (lane.speed > 0) == (i % 2 == 0)


@pytest.mark.parametrize("stage", [1, 2, 7])
def test_speed_magnitude_range(stage):
    rng = random.Random(stage)
    for _ in range(20):
        for lane in generate_lanes(stage, rng):
            assert 1.2 + 0.15 * stage <= abs(lane.speed) < 2.7 + 0.15 * stage


def test_speed_grows_linearly_with_stage():
    first = generate_lanes(1, random.Random(99))
    later = generate_lanes(5, random.Random(99))
    for a, b in zip(first, later):
        assert abs(b.speed) - abs(a.speed) == pytest.approx(4 * 0.15)


def test_logs_wider_than_cars():
    rng = random.Random(7)
    for _ in range(20):
        for lane in generate_lanes(1, rng):
            for obj in lane.objects:
                if lane.type is LaneType.WATER:
                    assert 80 <= obj.width < 120
                    assert obj.color == COLORS["log"]
                else:
                    assert 40 <= obj.width < 70
                    assert obj.color in COLORS["cars"]


def test_lanes_are_evenly_spaced():
    lanes = generate_lanes(1, random.Random(3))
    gaps = {round(b.y - a.y, 6) for a, b in zip(lanes, lanes[1:])}
    assert len(gaps) == 1


def test_each_call_builds_a_new_set():
    rng = random.Random(5)
    assert generate_lanes(1, rng) is not generate_lanes(1, rng)


def test_both_lane_types_show_up():
    rng = random.Random(11)
    kinds = {lane.type for _ in range(10) for lane in generate_lanes(1, rng)}
    assert kinds == {LaneType.ROAD, LaneType.WATER}


def test_stage_must_be_positive():
    with pytest.raises(ValueError):
        generate_lanes(0, random.Random(0))


def test_zero_speed_rejected():
    with pytest.raises(ValueError):
        Lane(100, 0, LaneType.ROAD)


def test_lane_speed_sign():
    assert lane_speed(1, 0, random.Random(0)) > 0
    assert lane_speed(1, 1, random.Random(0)) < 0


def test_lane_geometry():
    lane = Lane(295, 1.5, LaneType.ROAD, [HazardObject(110, 40, "#fff")])
    assert lane.center_y == 310
    assert (lane.band_top, lane.band_bottom) == (285, 335)
    assert lane.objects[0].right == 150

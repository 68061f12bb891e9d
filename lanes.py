# lanes.py - Lane Generator
"""
Hazard layout for one stage: lanes of vehicles (ROAD) or floating logs (WATER).
A fresh lane set is built on every stage start; only object positions change
while the stage is running.
"""

import random
from dataclasses import dataclass, field
from enum import Enum

from config import (
    WINDOW_WIDTH, WINDOW_HEIGHT, GRID_SIZE, COLORS,
    LANE_COUNT_RANGE, OBJECTS_PER_LANE, OBJECT_HEIGHT, LANE_BAND_OFFSET,
    BASE_SPEED, SPEED_SPREAD, STAGE_SPEED_STEP, LOG_WIDTH, CAR_WIDTH,
)


class LaneType(Enum):
    ROAD = "ROAD"
    WATER = "WATER"


@dataclass
class HazardObject:
    """A vehicle or a log. Only ``x`` changes once the stage is running."""
    x: float
    width: float
    color: str

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Lane:
    """One horizontal hazard strip.

    ``y`` is the top of the row the objects are drawn in; the hit band used
    for occupancy is one grid cell tall and starts ``LANE_BAND_OFFSET`` above it.
    """
    y: float
    speed: float  # pixels per tick, sign gives the direction
    type: LaneType
    objects: list[HazardObject] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.speed == 0:
            raise ValueError("lane speed must be non-zero")

    @property
    def center_y(self) -> float:
        return self.y + OBJECT_HEIGHT / 2

    @property
    def band_top(self) -> float:
        return self.y - LANE_BAND_OFFSET

    @property
    def band_bottom(self) -> float:
        return self.band_top + GRID_SIZE


def lane_speed(stage: int, index: int, rng: random.Random) -> float:
    """Random magnitude widened by stage, direction alternating by index."""
    magnitude = BASE_SPEED + rng.random() * SPEED_SPREAD + stage * STAGE_SPEED_STEP
    return magnitude if index % 2 == 0 else -magnitude


def _make_object(lane_type: LaneType, width: float, rng: random.Random) -> HazardObject:
    """Random start x across the playfield; logs are wider than cars."""
    x = rng.random() * width
    if lane_type is LaneType.WATER:
        base, extra = LOG_WIDTH
        return HazardObject(x, base + rng.random() * extra, COLORS["log"])
    base, extra = CAR_WIDTH
    return HazardObject(x, base + rng.random() * extra, rng.choice(COLORS["cars"]))


def generate_lanes(stage: int, rng: random.Random | None = None,
                   width: float = WINDOW_WIDTH, height: float = WINDOW_HEIGHT,
                   grid: float = GRID_SIZE) -> list[Lane]:
    """
    Build the lane set for ``stage``.

    Lanes are spread evenly over the band between the top and bottom safe
    zones (each one grid cell tall). Nothing is stage-deterministic: two
    calls with the same stage give different layouts unless ``rng`` is seeded.

    Returns:
        list[Lane]: a brand new list, meant to replace the previous set whole.
    """
    if stage < 1:
        raise ValueError(f"stage must be >= 1, got {stage}")
    rng = rng or random.Random()

    low, high = LANE_COUNT_RANGE
    count = low + rng.randint(0, high - low)
    spacing = (height - 2 * grid) / count

    lanes: list[Lane] = []
    for i in range(count):
        y = grid + i * spacing + (spacing - grid) / 2  # centre a grid row in its slot
        speed = lane_speed(stage, i, rng)
        lane_type = LaneType.WATER if rng.random() > 0.5 else LaneType.ROAD

        low_obj, high_obj = OBJECTS_PER_LANE
        n_objects = low_obj + rng.randint(0, high_obj - low_obj)
        objects = [_make_object(lane_type, width, rng) for _ in range(n_objects)]
        lanes.append(Lane(y, speed, lane_type, objects))
    return lanes

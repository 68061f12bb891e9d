# collision.py - Collision & Carry Resolver
"""
Decides what happens to the actor on one tick, after the lanes have moved.

Checks run in a fixed order and the first terminal one wins:

    1. run over   - actor box overlaps a vehicle in a lane it occupies
    2. drowned    - actor occupies a water lane but no log is under it
    3. carried off - log drift would push the actor past the carry margins
    4. off track  - actor x (after drift) is outside the lateral bounds

The resolver is pure: it reads lanes and the actor position and reports a
``Resolution``. Committing the new position is the caller's job.
"""

from dataclasses import dataclass
from enum import Enum

from config import (
    WINDOW_WIDTH, ACTOR_SIZE, OBJECT_HEIGHT,
    CARRY_MIN_X, SIDE_MIN_X, SIDE_RIGHT_MARGIN,
)
from lanes import Lane, LaneType


class ActorStatus(Enum):
    SAFE = "safe"
    ON_LOG = "on_log"
    RUN_OVER = "run_over"
    DROWNED = "drowned"
    CARRIED_OFF = "carried_off"
    OUT_OF_BOUNDS = "out_of_bounds"

    @property
    def terminal(self) -> bool:
        return self not in (ActorStatus.SAFE, ActorStatus.ON_LOG)


@dataclass(frozen=True)
class Resolution:
    status: ActorStatus
    x: float  # actor x to commit (drifted when carried)
    lane: Lane | None = None  # lane responsible for the outcome, if any


def boxes_overlap(ax: float, ay: float, aw: float, ah: float,
                  bx: float, by: float, bw: float, bh: float) -> bool:
    """Strict axis-aligned overlap; touching edges do not collide."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def lane_occupied(lane: Lane, actor_y: float) -> bool:
    """True when the actor's vertical centre lies inside the lane hit band."""
    centre = actor_y + ACTOR_SIZE / 2
    return lane.band_top < centre < lane.band_bottom


def resolve(lanes: list[Lane], x: float, y: float,
            width: float = WINDOW_WIDTH) -> Resolution:
    """
    Outcome of one tick for an actor at (x, y), lanes already moved.

    Terminal statuses carry the last committed x; non-terminal ones carry
    the x to commit, drifted by the carrying log when there is one.
    """
    in_water = False
    carrier: Lane | None = None
    water_lane: Lane | None = None
    centre_x = x + ACTOR_SIZE / 2

    for lane in lanes:
        if not lane_occupied(lane, y):
            continue
        if lane.type is LaneType.ROAD:
            for obj in lane.objects:
                if boxes_overlap(x, y, ACTOR_SIZE, ACTOR_SIZE,
                                 obj.x, lane.y, obj.width, OBJECT_HEIGHT):
                    return Resolution(ActorStatus.RUN_OVER, x, lane)
        else:
            in_water = True
            water_lane = lane
            # last carrying lane in scan order supplies the drift
            if any(obj.x < centre_x < obj.right for obj in lane.objects):
                carrier = lane

    if in_water and carrier is None:
        return Resolution(ActorStatus.DROWNED, x, water_lane)

    if carrier is not None:
        drifted = x + carrier.speed
        if drifted < CARRY_MIN_X or drifted > width:
            return Resolution(ActorStatus.CARRIED_OFF, x, carrier)
        x = drifted

    if x < SIDE_MIN_X or x > width - SIDE_RIGHT_MARGIN:
        return Resolution(ActorStatus.OUT_OF_BOUNDS, x, carrier)

    if carrier is not None:
        return Resolution(ActorStatus.ON_LOG, x, carrier)
    return Resolution(ActorStatus.SAFE, x)

# motion.py - Motion & Wrap Engine
"""
Moves every hazard object by its lane speed once per tick. Objects leaving
the playfield are teleported to the opposite edge instead of being removed,
so each lane keeps the same population for the whole stage.
"""

from config import WINDOW_WIDTH
from lanes import HazardObject, Lane


def wrap_object(obj: HazardObject, speed: float, width: float = WINDOW_WIDTH) -> None:
    """Recycle ``obj`` once it is fully past the edge it is heading to."""
    if speed > 0 and obj.x > width:
        obj.x = -obj.width  # re-enter from the left
    elif speed < 0 and obj.x < -obj.width:
        obj.x = width  # re-enter from the right


def advance_lanes(lanes: list[Lane], width: float = WINDOW_WIDTH) -> None:
    """Move every object by its lane speed, then wrap it. Counts never change."""
    for lane in lanes:
        for obj in lane.objects:
            obj.x += lane.speed
            wrap_object(obj, lane.speed, width)

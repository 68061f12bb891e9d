# session.py - Game State Machine
"""
Owns everything that changes while the game runs: state, stage, score,
best score, the lane set and the actor. All mutation happens inside
``start``, ``move`` and ``tick``; the frame loop and the input handlers
only call those.

Collaborators (feedback cues, high score load/save) are plain callables.
Their failures are logged and swallowed so the frame loop never stops.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from config import (
    GRID_SIZE, START_X, START_Y, STAGE_BONUS,
    MOVE_MIN_X, MOVE_MAX_X, MOVE_MIN_Y, MOVE_MAX_Y, WINDOW_WIDTH,
)
from collision import ActorStatus, Resolution, resolve
from lanes import Lane, generate_lanes
from motion import advance_lanes

if TYPE_CHECKING:
    from controls import Move

log = logging.getLogger(__name__)


class GameState(Enum):
    START = "START"
    PLAYING = "PLAYING"
    GAMEOVER = "GAMEOVER"


class Cue(Enum):
    """Feedback events sent to the audio collaborator."""
    MOVE = "move"
    WIN = "win"
    LOSE = "lose"
    START = "start"


@dataclass
class Actor:
    x: float = START_X
    y: float = START_Y

    def reset(self) -> None:
        self.x, self.y = START_X, START_Y


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


class GameSession:
    """Single owner of the simulation state."""

    def __init__(self,
                 feedback: Callable[[Cue], None] | None = None,
                 load_best: Callable[[], int] | None = None,
                 save_best: Callable[[int], None] | None = None,
                 rng: random.Random | None = None) -> None:
        self.feedback = feedback
        self.save_best = save_best
        self.rng = rng or random.Random()

        self.state = GameState.START
        self.stage = 1
        self.score = 0
        self.high_score = 0
        self.lanes: list[Lane] = []
        self.actor = Actor()
        self.death_cause: ActorStatus | None = None

        if load_best is not None:
            try:
                self.high_score = max(0, int(load_best()))
            except Exception:
                log.warning("could not read high score, starting from 0", exc_info=True)

    @property
    def playing(self) -> bool:
        return self.state is GameState.PLAYING

    # ------------------------------------------------------------------ #
    # COLLABORATOR BOUNDARY
    # ------------------------------------------------------------------ #
    def _emit(self, cue: Cue) -> None:
        if self.feedback is None:
            return
        try:
            self.feedback(cue)
        except Exception:
            log.warning("feedback cue %s failed", cue.value, exc_info=True)

    def _persist_best(self) -> None:
        if self.save_best is None:
            return
        try:
            self.save_best(self.high_score)
        except Exception:
            log.warning("could not save high score %d", self.high_score, exc_info=True)

    # ------------------------------------------------------------------ #
    # TRANSITIONS
    # ------------------------------------------------------------------ #
    def _enter_stage(self) -> None:
        self.lanes = generate_lanes(self.stage, self.rng)  # replaced whole
        self.actor.reset()

    def start(self) -> bool:
        """START/GAMEOVER -> PLAYING. Ignored while already playing."""
        if self.playing:
            return False
        self.score = 0
        self.stage = 1
        self.death_cause = None
        self._enter_stage()
        self.state = GameState.PLAYING
        log.info("game started")
        self._emit(Cue.START)
        return True

    def complete_stage(self) -> None:
        if not self.playing:
            return
        self.stage += 1
        self.score += STAGE_BONUS
        self._enter_stage()
        log.info("stage cleared, now on stage %d (score %d)", self.stage, self.score)
        self._emit(Cue.WIN)

    def game_over(self, cause: ActorStatus) -> bool:
        """
        PLAYING -> GAMEOVER.

        Fires at most once per session: any further call before the next
        ``start`` is a no-op and returns False.
        """
        if not self.playing:
            return False
        self.state = GameState.GAMEOVER
        self.death_cause = cause
        log.info("game over (%s) with score %d", cause.value, self.score)
        if self.score > self.high_score:
            self.high_score = self.score
            self._persist_best()
        self._emit(Cue.LOSE)
        return True

    # ------------------------------------------------------------------ #
    # INPUT & TICK
    # ------------------------------------------------------------------ #
    def reached_far_side(self) -> bool:
        return self.actor.y <= GRID_SIZE

    def move(self, move: "Move") -> bool:
        """Hop one grid cell, clamped to the playfield. Ignored unless playing."""
        if not self.playing:
            return False
        dx, dy = move.value
        self.actor.x = clamp(self.actor.x + dx * GRID_SIZE, MOVE_MIN_X, MOVE_MAX_X)
        self.actor.y = clamp(self.actor.y + dy * GRID_SIZE, MOVE_MIN_Y, MOVE_MAX_Y)
        self._emit(Cue.MOVE)
        if self.reached_far_side():
            self.complete_stage()
        return True

    def tick(self) -> Resolution | None:
        """
        One simulation step: stage check, motion, resolution, commit.

        Returns:
            Resolution | None: the resolver outcome, or None when nothing
            was simulated (not playing, or the stage was just cleared).
        """
        if not self.playing:
            return None
        if self.reached_far_side():
            self.complete_stage()
            return None

        advance_lanes(self.lanes, WINDOW_WIDTH)
        outcome = resolve(self.lanes, self.actor.x, self.actor.y, WINDOW_WIDTH)
        if outcome.status.terminal:
            self.game_over(outcome.status)
        else:
            self.actor.x = outcome.x
        return outcome

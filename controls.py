# controls.py - Input Normalizer
"""
Turns raw key presses and swipe gestures into at most one discrete move.
Nothing comes out unless the game is being played.
"""

from enum import Enum

from config import (
    KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_START, KEY_REPEAT_GAP_MS, SWIPE_THRESHOLD,
)
from session import GameState


class Move(Enum):
    # (dx, dy) in grid cells, screen coordinates (y grows downwards)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


KEY_MOVES: dict[str, Move] = {}
for _keys, _move in ((KEY_UP, Move.UP), (KEY_DOWN, Move.DOWN),
                     (KEY_LEFT, Move.LEFT), (KEY_RIGHT, Move.RIGHT)):
    for _key in _keys:
        KEY_MOVES[_key] = _move


def move_from_key(keysym: str, state: GameState) -> Move | None:
    """Arrow keys and WASD, any case. None for other keys or when not playing."""
    if state is not GameState.PLAYING:
        return None
    return KEY_MOVES.get(keysym.lower())


def move_from_swipe(dx: float, dy: float, state: GameState,
                    threshold: float = SWIPE_THRESHOLD) -> Move | None:
    """Dominant axis wins; equal travel counts as vertical."""
    if state is not GameState.PLAYING:
        return None
    abs_x, abs_y = abs(dx), abs(dy)
    if max(abs_x, abs_y) <= threshold:
        return None
    if abs_x > abs_y:
        return Move.RIGHT if dx > 0 else Move.LEFT
    return Move.DOWN if dy > 0 else Move.UP


def is_start_key(keysym: str, state: GameState) -> bool:
    """Space starts a game from the title or game-over screen."""
    return state is not GameState.PLAYING and keysym.lower() in KEY_START


class KeyLatch:
    """
    Lets a key through once per press; auto-repeat while held is dropped.

    Some platforms (X11) report auto-repeat as a release immediately followed
    by a press. When event times are given, a press arriving within
    ``KEY_REPEAT_GAP_MS`` of the release of the same key counts as repeat.
    """

    def __init__(self, repeat_gap_ms: int = KEY_REPEAT_GAP_MS) -> None:
        self.repeat_gap_ms = repeat_gap_ms
        self.held: set[str] = set()
        self.released_at: dict[str, int] = {}

    def press(self, keysym: str, time_ms: int | None = None) -> bool:
        key = keysym.lower()
        if key in self.held:
            return False
        self.held.add(key)
        released = self.released_at.pop(key, None)
        if time_ms is not None and released is not None \
                and 0 <= time_ms - released <= self.repeat_gap_ms:
            return False  # synthetic release/press pair
        return True

    def release(self, keysym: str, time_ms: int | None = None) -> None:
        key = keysym.lower()
        self.held.discard(key)
        if time_ms is not None:
            self.released_at[key] = time_ms

    def clear(self) -> None:
        self.held.clear()
        self.released_at.clear()

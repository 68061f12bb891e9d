import random
import tkinter as tk

import pytest

from config import HOP_DURATION
from controls import Move
from game import FroggerGame
from session import GameSession, GameState


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    window.withdraw()
    yield window
    window.destroy()


@pytest.fixture
def game(root):
    window = FroggerGame(root, GameSession(rng=random.Random(3)))
    root.update()  # run the first frame
    yield window
    window.close()


def pending_after_ids(root):
    return set(root.tk.splitlist(root.tk.call("after", "info")))


def test_frame_loop_is_scheduled(root, game):
    assert game.frames.loop_id in pending_after_ids(root)


def test_close_stops_loop_and_unbinds(root, game):
    pending = game.frames.loop_id
    game.close()
    game.close()
    assert game.frames.loop_id is None
    assert game.inputs.bindings == []
    assert pending not in pending_after_ids(root)


def test_hop_flag_clears_without_blocking_ticks(game):
    game.start_game()
    assert game.session.state is GameState.PLAYING
    game._hop(Move.LEFT)
    assert game.hop.active

    x_before = [obj.x for lane in game.session.lanes for obj in lane.objects]
    game.last_time -= HOP_DURATION + 0.01
    game._game_loop()
    assert game.hop.remaining == 0
    x_after = [obj.x for lane in game.session.lanes for obj in lane.objects]
    assert x_after != x_before

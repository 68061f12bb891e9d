import os
import random

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from lanes import HazardObject, Lane, LaneType
from session import GameSession


def road(y, speed, *spans):
    """Lane of vehicles from (x, width) pairs."""
    return Lane(y, speed, LaneType.ROAD, [HazardObject(x, w, "#ff4757") for x, w in spans])


def water(y, speed, *spans):
    """Lane of logs from (x, width) pairs."""
    return Lane(y, speed, LaneType.WATER, [HazardObject(x, w, "#634433") for x, w in spans])


class RecordingFeedback:
    def __init__(self):
        self.cues = []

    def __call__(self, cue):
        self.cues.append(cue)


class MemoryStore:
    def __init__(self, best=0):
        self.best = best
        self.saves = []

    def load(self):
        return self.best

    def save(self, value):
        self.saves.append(value)
        self.best = value


@pytest.fixture
def feedback():
    return RecordingFeedback()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def session(feedback, store):
    return GameSession(feedback=feedback, load_best=store.load, save_best=store.save,
                       rng=random.Random(1234))


@pytest.fixture
def playing(session):
    """A started session with no lanes, ready for hand-built layouts."""
    session.start()
    session.lanes = []
    return session

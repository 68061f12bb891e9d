# config.py
import os

# Base folders
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
HIGHSCORE_KEY = "frogger-high-score"
HIGHSCORE_FILE = os.path.join(BASE_DIR, f"{HIGHSCORE_KEY}.txt")

# Dimensions of the playfield
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
GRID_SIZE = 50  # One hop, also the height of both safe zones

# Actor (the frog)
ACTOR_SIZE = 30
START_X = WINDOW_WIDTH / 2 - 15
START_Y = WINDOW_HEIGHT - GRID_SIZE + 10

# Lanes
LANE_COUNT_RANGE = (3, 4)
OBJECTS_PER_LANE = (2, 3)
OBJECT_HEIGHT = 30
LANE_BAND_OFFSET = 10  # hit band starts this far above the row top
BASE_SPEED = 1.2
SPEED_SPREAD = 1.5
STAGE_SPEED_STEP = 0.15  # linear increment per stage
LOG_WIDTH = (80, 40)  # minimum, random extra
CAR_WIDTH = (40, 30)

# Bounds
MOVE_MIN_X = -30
MOVE_MAX_X = WINDOW_WIDTH
MOVE_MIN_Y = 0
MOVE_MAX_Y = WINDOW_HEIGHT - GRID_SIZE + 10
CARRY_MIN_X = -30  # drifting left of this, or right of the playfield, ends the run
SIDE_MIN_X = -10
SIDE_RIGHT_MARGIN = 20  # right lateral bound is width - margin

STAGE_BONUS = 10

# Timing
FRAME_MS = 16
HOP_DURATION = 0.15

# Input
SWIPE_THRESHOLD = 20
KEY_UP = ("up", "w")
KEY_DOWN = ("down", "s")
KEY_LEFT = ("left", "a")
KEY_RIGHT = ("right", "d")
KEY_START = ("space",)
KEY_REPEAT_GAP_MS = 1  # X11 auto-repeat sends release+press with the same timestamp

COLORS = {
    "frog": "#2ecc71",
    "road": "#1a1a1f",
    "grass": "#102a10",
    "safe": "#222233",
    "water": "#0984e3",
    "log": "#634433",
    "cars": ["#ff4757", "#eccc68", "#70a1ff", "#ffa502", "#5352ed"],
}


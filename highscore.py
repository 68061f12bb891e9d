# highscore.py - Score Persistence Module
"""
Loads and saves the single best score.
The file is named after the fixed high score key and holds one integer.
"""

import logging

from config import HIGHSCORE_FILE  # Path to score file: "frogger-high-score.txt"

log = logging.getLogger(__name__)


def load_high_score(path: str = HIGHSCORE_FILE) -> int:
    """
    Load the high score from file.
    Returns:
        int: The saved high score, or 0 if the file doesn't exist or is corrupted.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            val = int(f.read().strip())  # Read, strip whitespace, convert to int
    except FileNotFoundError:
        return 0  # First run
    except (OSError, ValueError):
        log.warning("ignoring unreadable high score file %s", path)
        return 0
    return max(0, val)  # Ensure non-negative score


def save_high_score(value: int, path: str = HIGHSCORE_FILE) -> None:
    """
    Save a new high score to file.
    Args:
        value (int): The score to save (negative values stored as 0)
    Raises:
        OSError: if the file can't be written; the session decides what to do.
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(str(max(0, int(value))))

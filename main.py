# main.py - Application Entry Point
"""
Main entry point for Frog Crossing.
Builds the window, the collaborators and the session, then runs the event loop.
"""

import logging
import tkinter as tk  # GUI framework

from config import WINDOW_WIDTH, WINDOW_HEIGHT  # Window size constants
from audio_manager import AudioManager
from game import FroggerGame
from highscore import load_high_score, save_high_score
from session import GameSession


def main() -> None:
    """Create window, wire the session to its collaborators, run until closed."""
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    root = tk.Tk()
    root.title("Frog Crossing")
    root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
    root.resizable(False, False)  # Fixed window size
    root.configure(bg="black")

    audio = AudioManager()
    session = GameSession(feedback=audio, load_best=load_high_score,
                          save_best=save_high_score)
    game = FroggerGame(root, session, audio)

    def on_close():
        """Stop the frame loop before the window goes away."""
        game.close()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)

    try:
        root.mainloop()
    finally:
        game.close()  # no-op when on_close already ran
        audio.close()


if __name__ == "__main__":
    main()  # Run application

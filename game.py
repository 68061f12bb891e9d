# game.py - Game Window
"""
tkinter front end: draws the session every frame, turns keyboard and mouse
input into moves, and drives the simulation clock with ``after()``.
The canvas only reads simulation state; every change goes through the
``GameSession`` it was given.
"""

import logging
import time
import tkinter as tk

from config import (
    WINDOW_WIDTH, WINDOW_HEIGHT, GRID_SIZE, ACTOR_SIZE, OBJECT_HEIGHT,
    COLORS,
)
from audio_manager import AudioManager
from collision import ActorStatus
from frame_loop import BindingSet, FrameLoop, HopTimer
from controls import KeyLatch, SwipeTracker, is_start_key, move_from_key
from lanes import HazardObject, LaneType
from session import GameSession, GameState

log = logging.getLogger(__name__)

DEATH_MESSAGES = {
    ActorStatus.RUN_OVER: "Run over!",
    ActorStatus.DROWNED: "Drowned!",
    ActorStatus.CARRIED_OFF: "Swept away!",
    ActorStatus.OUT_OF_BOUNDS: "Fell off the edge!",
}


class FroggerGame(tk.Canvas):
    """Playfield canvas plus HUD and menu overlay."""

    def __init__(self, master: tk.Tk, session: GameSession,
                 audio: AudioManager | None = None, **kwargs) -> None:
        super().__init__(master, width=WINDOW_WIDTH, height=WINDOW_HEIGHT,
                         bg=COLORS["grass"], highlightthickness=0, **kwargs)
        self.pack(fill="both", expand=True)

        self.session = session
        self.audio = audio

        # Canvas items for the current lane set
        self.drawn_lanes: list | None = None
        self.object_items: list[tuple[HazardObject, int, float]] = []  # (obj, item, row y)
        self.actor_item: int | None = None

        # Presentation-only hop flag
        self.hop = HopTimer()

        # Input helpers
        self.key_latch = KeyLatch()
        self.swipe = SwipeTracker()
        self.inputs = BindingSet()

        # Frame loop
        self.last_time = time.perf_counter()
        self.frames = FrameLoop(self.after, self.after_cancel, self._game_loop)
        self.shown_state: GameState | None = None

        # HUD
        self.stage_txt = tk.StringVar()
        self.score_txt = tk.StringVar()
        self.best_score_txt = tk.StringVar()
        self._update_hud()
        for text_var, x in ((self.stage_txt, 20), (self.score_txt, 230), (self.best_score_txt, 440)):
            tk.Label(master, textvariable=text_var, bg=COLORS["safe"], fg="#ffffff",
                     font=("Arial", 14, "bold")).place(x=x, y=10)

        self._draw_background()
        self.actor_item = self.create_oval(0, 0, 0, 0, fill=COLORS["frog"],
                                           outline="#ffffff", width=2)
        self._build_menu_overlay()
        self._sync_state()

        self.bind_inputs()
        self.frames.start()

    # ------------------------------------------------------------------ #
    # MENU SYSTEM
    # ------------------------------------------------------------------ #
    def _build_menu_overlay(self) -> None:
        self.menu_frame = tk.Frame(self.master, bg="#000000", bd=0)

        self.menu_title_label = tk.Label(self.menu_frame, text="", fg=COLORS["frog"],
                                         bg="#000000", font=("Arial", 24, "bold"))
        self.menu_title_label.pack(pady=(0, 10))

        self.menu_message_label = tk.Label(self.menu_frame, text="", fg="#ffffff",
                                           bg="#000000", font=("Arial", 12))
        self.menu_message_label.pack(pady=(0, 10))

        tk.Label(self.menu_frame, textvariable=self.best_score_txt, fg=COLORS["frog"],
                 bg="#000000", font=("Arial", 14, "bold")).pack(pady=(0, 10))

        self.menu_button = tk.Button(self.menu_frame, text="START", font=("Arial", 14, "bold"),
                                     fg="#000000", bg=COLORS["frog"], relief="flat",
                                     padx=20, pady=5, command=self.start_game)
        self.menu_button.pack(pady=(0, 10))

        self.sound_button = tk.Button(self.menu_frame, text="Sound: ON",
                                      font=("Arial", 10, "bold"), fg="#000000",
                                      bg=COLORS["frog"], relief="flat", padx=10, pady=3,
                                      command=self._on_toggle_sound_clicked)
        if self.audio is not None:
            self.sound_button.configure(text=f"Sound: {'ON' if self.audio.sound_enabled else 'OFF'}")
            self.sound_button.pack(pady=(0, 5))

        tk.Label(self.menu_frame, text="SPACE or START to begin\nArrows / WASD or drag to hop",
                 fg="#888888", bg="#000000", font=("Arial", 10, "italic")).pack(pady=(5, 0))

    def show_menu(self, title: str, message: str, button_text: str) -> None:
        self.menu_title_label.configure(text=title)
        self.menu_message_label.configure(text=message)
        self.menu_button.configure(text=button_text)
        self.menu_frame.place(relx=0.5, rely=0.5, anchor="center")

    def hide_menu(self) -> None:
        self.menu_frame.place_forget()

    def _on_toggle_sound_clicked(self) -> None:
        enabled = self.audio.toggle_sound()
        self.sound_button.configure(text=f"Sound: {'ON' if enabled else 'OFF'}")

    def _sync_state(self) -> None:
        """Show or hide the overlay when the session changed state."""
        state = self.session.state
        if state is self.shown_state:
            return
        self.shown_state = state
        if state is GameState.PLAYING:
            self.hide_menu()
        elif state is GameState.START:
            self.show_menu("FROG CROSSING", "Survive the traffic and get across!", "START")
        else:
            cause = DEATH_MESSAGES.get(self.session.death_cause, "Game over!")
            self.show_menu(cause, f"Score: {self.session.score}. Try again?", "RETRY")

    def _update_hud(self) -> None:
        self.stage_txt.set(f"STAGE: {self.session.stage}")
        self.score_txt.set(f"SCORE: {self.session.score}")
        self.best_score_txt.set(f"BEST: {self.session.high_score}")

    # ------------------------------------------------------------------ #
    # RENDERING
    # ------------------------------------------------------------------ #
    def _draw_background(self) -> None:
        self.create_rectangle(0, 0, WINDOW_WIDTH, GRID_SIZE, fill=COLORS["safe"], outline="")
        self.create_rectangle(0, WINDOW_HEIGHT - GRID_SIZE, WINDOW_WIDTH, WINDOW_HEIGHT,
                              fill=COLORS["safe"], outline="")

    def _rebuild_lanes(self) -> None:
        """Recreate canvas items after the session swapped in a new lane set."""
        self.delete("lane")
        self.object_items.clear()
        for lane in self.session.lanes:
            fill = COLORS["water"] if lane.type is LaneType.WATER else COLORS["road"]
            self.create_rectangle(0, lane.band_top, WINDOW_WIDTH, lane.band_bottom,
                                  fill=fill, outline="", tags="lane")
            for obj in lane.objects:
                item = self.create_rectangle(0, 0, 0, 0, fill=obj.color, outline="",
                                             tags="lane")
                self.object_items.append((obj, item, lane.y))
        self.drawn_lanes = self.session.lanes
        self.tag_raise(self.actor_item)

    def _render(self) -> None:
        if self.drawn_lanes is not self.session.lanes:
            self._rebuild_lanes()

        for obj, item, row_y in self.object_items:
            self.coords(item, obj.x, row_y, obj.x + obj.width, row_y + OBJECT_HEIGHT)

        # Hopping frog is drawn a little larger
        actor = self.session.actor
        grow = 3 if self.hop.active else 0
        self.coords(self.actor_item, actor.x - grow, actor.y - grow,
                    actor.x + ACTOR_SIZE + grow, actor.y + ACTOR_SIZE + grow)
        self._update_hud()

    # ------------------------------------------------------------------ #
    # INPUT
    # ------------------------------------------------------------------ #
    def bind_inputs(self) -> None:
        self.inputs.bind(self.master, "<KeyPress>", self._on_key_down)
        self.inputs.bind(self.master, "<KeyRelease>", self._on_key_up)
        self.inputs.bind(self, "<ButtonPress-1>", self._on_mouse_down)
        self.inputs.bind(self, "<ButtonRelease-1>", self._on_mouse_up)

    def unbind_inputs(self) -> None:
        self.inputs.unbind_all()
        self.key_latch.clear()

    def _on_key_down(self, event) -> None:
        if not self.key_latch.press(event.keysym, event.time):
            return  # auto-repeat while held
        if is_start_key(event.keysym, self.session.state):
            self.start_game()
            return
        move = move_from_key(event.keysym, self.session.state)
        if move is not None:
            self._hop(move)

    def _on_key_up(self, event) -> None:
        self.key_latch.release(event.keysym, event.time)

    def _on_mouse_down(self, event) -> None:
        self.swipe.begin(event.x, event.y, self.session.state)

    def _on_mouse_up(self, event) -> None:
        move = self.swipe.end(event.x, event.y, self.session.state)
        if move is not None:
            self._hop(move)

    def _hop(self, move) -> None:
        if self.session.move(move):
            self.hop.trigger()

    def start_game(self) -> None:
        if self.session.start():
            self.hop.reset()
            self._sync_state()

    # ------------------------------------------------------------------ #
    # GAME LOOP / TEARDOWN
    # ------------------------------------------------------------------ #
    def _game_loop(self) -> None:
        """One frame: simulate (PLAYING only), then draw."""
        now = time.perf_counter()
        self.hop.advance(now - self.last_time)
        self.last_time = now
        self.session.tick()  # no-op unless PLAYING
        self._sync_state()
        self._render()

    def close(self) -> None:
        """Stop the frame loop and drop every input handler. Safe to call twice."""
        if self.frames.closed:
            return
        self.frames.close()
        self.unbind_inputs()
        log.info("game window closed")

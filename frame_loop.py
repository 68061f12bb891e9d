# frame_loop.py - Frame Scheduling
"""
Bookkeeping behind the window's frame loop: the pending ``after`` id, the
input handlers registered for the session, and the presentation-only hop
flag. None of it needs a display; the canvas hands in its own
``after`` / ``after_cancel`` and widgets.
"""

from typing import Callable

from config import FRAME_MS, HOP_DURATION


class HopTimer:
    """Set on every hop, cleared once ``duration`` seconds of frame time passed."""

    def __init__(self, duration: float = HOP_DURATION) -> None:
        self.duration = duration
        self.remaining = 0.0

    @property
    def active(self) -> bool:
        return self.remaining > 0

    def trigger(self) -> None:
        self.remaining = self.duration

    def reset(self) -> None:
        self.remaining = 0.0

    def advance(self, dt: float) -> None:
        if self.remaining > 0:
            self.remaining = max(0.0, self.remaining - dt)


class FrameLoop:
    """
    Runs ``frame`` every ``interval`` ms until closed.

    ``schedule(ms, callback) -> id`` and ``cancel(id)`` are tkinter's
    ``after`` and ``after_cancel``. A frame that raises still gets the next
    one scheduled; only ``close`` stops the loop.
    """

    def __init__(self, schedule: Callable[[int, Callable[[], None]], str],
                 cancel: Callable[[str], None], frame: Callable[[], None],
                 interval: int = FRAME_MS) -> None:
        self.schedule = schedule
        self.cancel = cancel
        self.frame = frame
        self.interval = interval
        self.loop_id: str | None = None
        self.closed = False

    def start(self) -> None:
        if self.closed or self.loop_id is not None:
            return
        self.loop_id = self.schedule(0, self._run)

    def _run(self) -> None:
        self.loop_id = None  # the callback that was pending is the one running
        try:
            self.frame()
        finally:
            if not self.closed:
                self.loop_id = self.schedule(self.interval, self._run)

    def close(self) -> None:
        """Cancel the pending frame. Safe to call twice."""
        if self.closed:
            return
        self.closed = True
        if self.loop_id is not None:
            self.cancel(self.loop_id)
            self.loop_id = None


class BindingSet:
    """Event handlers bound for the session, so all of them can be dropped at once."""

    def __init__(self) -> None:
        self.bindings: list[tuple[object, str, str]] = []  # (widget, sequence, funcid)

    def bind(self, widget, sequence: str, handler) -> None:
        funcid = widget.bind(sequence, handler, add="+")
        self.bindings.append((widget, sequence, funcid))

    def unbind_all(self) -> None:
        for widget, sequence, funcid in self.bindings:
            widget.unbind(sequence, funcid)
        self.bindings.clear()

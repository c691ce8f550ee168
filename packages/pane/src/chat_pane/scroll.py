"""Scroll controller — offset, in wrapped lines, back from the newest line."""
from __future__ import annotations

import threading

from .config import DEFAULT_SCROLL_STEP


def max_offset(line_count: int) -> int:
    # The oldest line is one position short of reachable on purpose: offset
    # never exceeds line_count - 1, so at least one line stays on screen.
    return max(0, line_count - 1)


class ScrollController:
    """
    Offset 0 pins the newest line to the bottom row. ``line_count`` is passed
    on every call because new messages can arrive between scrolls.
    """

    def __init__(self, step: int = DEFAULT_SCROLL_STEP) -> None:
        if step < 1:
            raise ValueError("scroll step must be at least 1")
        self._step = step
        self._offset = 0
        self._lock = threading.Lock()

    @property
    def step(self) -> int:
        return self._step

    @property
    def offset(self) -> int:
        with self._lock:
            return self._offset

    @property
    def at_bottom(self) -> bool:
        return self.offset == 0

    def scroll_up(self, line_count: int) -> int:
        with self._lock:
            self._offset = min(self._offset + self._step, max_offset(line_count))
            return self._offset

    def scroll_down(self, line_count: int) -> int:
        with self._lock:
            self._offset = max(self._offset - self._step, 0)
            # The log may have shrunk since the last scroll
            self._offset = min(self._offset, max_offset(line_count))
            return self._offset

    def scroll_to(self, offset: int, line_count: int) -> int:
        with self._lock:
            self._offset = max(0, min(offset, max_offset(line_count)))
            return self._offset

    def clamp(self, line_count: int) -> int:
        with self._lock:
            self._offset = max(0, min(self._offset, max_offset(line_count)))
            return self._offset

    def reset(self) -> None:
        with self._lock:
            self._offset = 0

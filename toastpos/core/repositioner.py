"""
toastpos.core.repositioner - Moving a notification window.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from toastpos.core.desktop import Desktop
from toastpos.core.rect import WindowRect

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RepositionResult:
    """
    Outcome of a move.

    On success *rect* holds the window's rect re-read after the move.
    On failure *rect* is None and *error* says why.
    """

    hwnd: int
    rect: Optional[WindowRect] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.rect is not None


class Repositioner:
    """
    Moves a window to a target position, keeping its size and Z-order.

    A short settle delay runs before every move so a toast that is still
    sliding in has finished its own layout first.
    """

    def __init__(
        self,
        desktop: Desktop,
        settle_delay: float = 0.1,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._desktop = desktop
        self._settle_delay = settle_delay
        self._sleep = sleep

    def apply(self, hwnd: int, x: int, y: int) -> RepositionResult:
        """Move *hwnd* to (x, y) and return the rect it actually ended at."""
        if self._settle_delay > 0:
            self._sleep(self._settle_delay)

        if not self._desktop.move_window(hwnd, x, y):
            log.debug("Move of %#010x to (%d, %d) refused", hwnd, x, y)
            return RepositionResult(hwnd, error="move refused")

        rect = self._desktop.get_window_rect(hwnd)
        if rect is None:
            log.debug("Window %#010x vanished after move", hwnd)
            return RepositionResult(hwnd, error="handle invalid after move")

        log.info("MOVE %#010x -> (%d, %d) now %s", hwnd, x, y, rect)
        return RepositionResult(hwnd, rect=rect)

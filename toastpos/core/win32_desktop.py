"""
toastpos.core.win32_desktop - Desktop implementation on top of Win32.

Uses the ctypes bindings in `toastpos.core.win32` for window queries and
moves, and pywin32 (win32api) for display metrics.

EnumWindows reports windows through a callback.  `enumerate_windows()`
turns that into a lazy iterator: the callback only collects HWNDs, and
title / class / rect are read one window at a time as the consumer pulls.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from typing import Optional

from toastpos.core.desktop import Desktop
from toastpos.core.rect import WindowRect
from toastpos.core.window import WindowInfo

log = logging.getLogger(__name__)


class Win32Desktop(Desktop):
    """Desktop backed by user32.dll."""

    def __init__(self) -> None:
        if sys.platform != "win32":
            raise RuntimeError(
                f"Win32Desktop requires Windows (running on {sys.platform})"
            )

        # Imported here so the rest of the package loads on any platform.
        import win32api
        import win32con

        from toastpos.core import win32

        self._win32 = win32
        self._win32api = win32api
        self._win32con = win32con

    def setup(self) -> None:
        self._win32.set_dpi_aware()
        log.debug("Process marked DPI aware")

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------
    def enumerate_windows(self) -> Iterator[WindowInfo]:
        for hwnd in self._win32.list_window_handles():
            info = self._describe(hwnd)
            if info is not None:
                yield info

    def _describe(self, hwnd: int) -> Optional[WindowInfo]:
        """Read one descriptor, or None if the window vanished mid-read."""
        visible = self._win32.is_window_visible(hwnd)
        if not visible:
            # Hidden windows are never candidates; skip the extra reads.
            return WindowInfo(hwnd, False, "", "", WindowRect(0, 0, 0, 0))

        ltrb = self._win32.get_window_rect(hwnd)
        if ltrb is None:
            return None

        return WindowInfo(
            hwnd=hwnd,
            visible=True,
            title=self._win32.get_window_text(hwnd),
            class_name=self._win32.get_class_name(hwnd),
            rect=WindowRect.from_ltrb(*ltrb),
        )

    def find_window_by_title(self, title: str) -> Optional[int]:
        hwnd = self._win32.find_window(title)
        return hwnd or None

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def get_window_rect(self, hwnd: int) -> Optional[WindowRect]:
        if not self._win32.is_window_valid(hwnd):
            return None
        ltrb = self._win32.get_window_rect(hwnd)
        if ltrb is None:
            return None
        return WindowRect.from_ltrb(*ltrb)

    def move_window(self, hwnd: int, x: int, y: int) -> bool:
        if not self._win32.is_window_valid(hwnd):
            return False
        return self._win32.set_window_pos(
            hwnd, x, y, 0, 0, flags=self._win32.SWP_TOAST_MOVE,
        )

    def is_visible(self, hwnd: int) -> bool:
        return self._win32.is_window_visible(hwnd)

    def primary_screen_width(self) -> int:
        return self._win32api.GetSystemMetrics(self._win32con.SM_CXSCREEN)

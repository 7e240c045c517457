"""
toastpos.core.desktop - The Desktop capability surface.

Everything the monitoring core needs from the operating system goes
through a Desktop.  The core never calls Win32 directly, so it can be
driven by `Win32Desktop` in production and by an in-memory fake in tests.

Failures are reported as values, not exceptions:
    - a stale handle yields None from `get_window_rect()`
    - a refused move yields False from `move_window()`
    - a stale handle is simply "not visible"
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Optional

from toastpos.core.rect import WindowRect
from toastpos.core.window import WindowInfo


class Desktop(ABC):
    """Abstract interface to the desktop shell's top-level windows."""

    @abstractmethod
    def enumerate_windows(self) -> Iterator[WindowInfo]:
        """
        Yield a descriptor for every top-level window, in OS order.

        The iterator is lazy: callers may stop pulling at any point.
        Each call starts a fresh enumeration.
        """

    @abstractmethod
    def find_window_by_title(self, title: str) -> Optional[int]:
        """Return the handle of the window titled exactly *title*, or None."""

    @abstractmethod
    def get_window_rect(self, hwnd: int) -> Optional[WindowRect]:
        """Return the current bounding rect, or None if the handle is stale."""

    @abstractmethod
    def move_window(self, hwnd: int, x: int, y: int) -> bool:
        """
        Move the window's top-left corner to (x, y).

        Size and Z-order are preserved and the window is forced shown.
        Returns False if the OS refused or the handle is stale.
        """

    @abstractmethod
    def is_visible(self, hwnd: int) -> bool:
        """True if the window exists and is currently shown."""

    @abstractmethod
    def primary_screen_width(self) -> int:
        """Width in pixels of the primary display."""

    def setup(self) -> None:
        """Platform-specific initialization. Default does nothing."""

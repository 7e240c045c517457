"""
Pytest configuration and shared fixtures for ToastPos tests.

This file contains:
- FakeDesktop: an in-memory Desktop with failure injection
- Settings fixtures
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

import pytest

from toastpos.config.settings import ToastSettings
from toastpos.core.desktop import Desktop
from toastpos.core.rect import WindowRect
from toastpos.core.window import WindowInfo


class FakeDesktop(Desktop):
    """
    In-memory desktop.  Windows are kept in insertion order, which is
    the enumeration order.  Every call is recorded in `calls`.
    """

    def __init__(self, screen_width: int = 1920) -> None:
        self.screen_width = screen_width
        self.windows: dict[int, WindowInfo] = {}
        self.calls: list[tuple] = []
        self.enumerated: list[int] = []

        # Failure injection
        self.refuse_moves = False
        self.fail_enumerations = 0
        self.moves_ignored = False

    # --- Test helpers ---
    def add(
        self,
        hwnd: int,
        rect: WindowRect,
        title: str = "",
        class_name: str = "",
        visible: bool = True,
    ) -> WindowInfo:
        info = WindowInfo(hwnd, visible, title, class_name, rect)
        self.windows[hwnd] = info
        return info

    def hide(self, hwnd: int) -> None:
        info = self.windows[hwnd]
        self.windows[hwnd] = WindowInfo(
            hwnd, False, info.title, info.class_name, info.rect,
        )

    def destroy(self, hwnd: int) -> None:
        del self.windows[hwnd]

    def place(self, hwnd: int, rect: WindowRect) -> None:
        info = self.windows[hwnd]
        self.windows[hwnd] = WindowInfo(
            hwnd, info.visible, info.title, info.class_name, rect,
        )

    def calls_to(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]

    # --- Desktop ---
    def enumerate_windows(self) -> Iterator[WindowInfo]:
        self.calls.append(("enumerate_windows",))
        if self.fail_enumerations > 0:
            self.fail_enumerations -= 1
            raise OSError("simulated EnumWindows failure")
        for info in list(self.windows.values()):
            self.enumerated.append(info.hwnd)
            yield info

    def find_window_by_title(self, title: str) -> Optional[int]:
        self.calls.append(("find_window_by_title", title))
        for info in self.windows.values():
            if info.title == title:
                return info.hwnd
        return None

    def get_window_rect(self, hwnd: int) -> Optional[WindowRect]:
        self.calls.append(("get_window_rect", hwnd))
        info = self.windows.get(hwnd)
        return info.rect if info is not None else None

    def move_window(self, hwnd: int, x: int, y: int) -> bool:
        self.calls.append(("move_window", hwnd, x, y))
        if self.refuse_moves or hwnd not in self.windows:
            return False
        if not self.moves_ignored:
            info = self.windows[hwnd]
            self.windows[hwnd] = WindowInfo(
                hwnd, True, info.title, info.class_name, info.rect.moved_to(x, y),
            )
        return True

    def is_visible(self, hwnd: int) -> bool:
        self.calls.append(("is_visible", hwnd))
        info = self.windows.get(hwnd)
        return info is not None and info.visible

    def primary_screen_width(self) -> int:
        return self.screen_width


@pytest.fixture
def desktop() -> FakeDesktop:
    return FakeDesktop()


@pytest.fixture
def settings() -> ToastSettings:
    """Default settings without any sleeping."""
    return ToastSettings().replace(poll_interval=0.0, settle_delay=0.0)

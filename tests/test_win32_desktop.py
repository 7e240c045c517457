"""Tests for the Win32 Desktop backend, with the user32 bindings stubbed out."""

import sys
from types import SimpleNamespace

import pytest

from toastpos.core.rect import WindowRect
from toastpos.core.win32_desktop import Win32Desktop

TOAST_MOVE = 0x0001 | 0x0004 | 0x0040


class Bindings(SimpleNamespace):
    """Stand-in for `toastpos.core.win32` over a dict of hwnd -> (visible, title, cls, ltrb)."""

    def __init__(self, windows):
        super().__init__(SWP_TOAST_MOVE=TOAST_MOVE)
        self.windows = windows
        self.moves = []
        self.reads = []

    def list_window_handles(self):
        return list(self.windows)

    def is_window_valid(self, hwnd):
        return hwnd in self.windows

    def is_window_visible(self, hwnd):
        return hwnd in self.windows and self.windows[hwnd][0]

    def get_window_text(self, hwnd):
        self.reads.append(hwnd)
        return self.windows[hwnd][1]

    def get_class_name(self, hwnd):
        return self.windows[hwnd][2]

    def get_window_rect(self, hwnd):
        return self.windows[hwnd][3] if hwnd in self.windows else None

    def set_window_pos(self, hwnd, x, y, width, height, flags=0):
        self.moves.append((hwnd, x, y, width, height, flags))
        return True


def _backend(windows):
    backend = Win32Desktop.__new__(Win32Desktop)
    backend._win32 = Bindings(windows)
    return backend


class TestMoveWindow:
    def test_move_keeps_size_and_stacking(self):
        backend = _backend({7: (True, "新しい通知", "", (1200, 20, 1500, 120))})

        assert backend.move_window(7, 1610, 10)
        assert backend._win32.moves == [(7, 1610, 10, 0, 0, TOAST_MOVE)]

    def test_stale_handle_is_not_moved(self):
        backend = _backend({})

        assert backend.move_window(7, 1610, 10) is False
        assert backend._win32.moves == []


class TestQueries:
    def test_rect_of_stale_handle_is_none(self):
        assert _backend({}).get_window_rect(7) is None

    def test_rect(self):
        backend = _backend({7: (True, "", "", (1200, 20, 1500, 120))})
        assert backend.get_window_rect(7) == WindowRect(1200, 20, 1500, 120)

    def test_enumeration_is_lazy_and_skips_reads_for_hidden(self):
        backend = _backend({
            1: (False, "New notification", "", (0, 0, 300, 150)),
            2: (True, "", "ToastWndClass", (500, 500, 800, 650)),
            3: (True, "Editor", "Notepad", (0, 0, 1920, 1040)),
        })

        windows = backend.enumerate_windows()
        hidden = next(windows)
        shown = next(windows)

        assert not hidden.visible and hidden.title == ""
        assert shown.class_name == "ToastWndClass"
        assert backend._win32.reads == [2]


@pytest.mark.skipif(sys.platform != "win32", reason="user32 bindings need Windows")
def test_set_window_pos_defaults_to_toast_move():
    import inspect

    from toastpos.core import win32

    flags = inspect.signature(win32.set_window_pos).parameters["flags"].default
    assert flags == win32.SWP_TOAST_MOVE == TOAST_MOVE
    assert not hasattr(win32, "SWP_NOMOVE")

"""
toastpos.core.win32 - Low-level Win32 API bindings via ctypes.

Centralizes all Win32 API calls used by the notification mover so that
no other module needs to import ctypes directly.
"""

from __future__ import annotations

import ctypes
import ctypes.wintypes
from typing import Callable, Optional

# ============================================================================
# DLL handles
# ============================================================================
user32 = ctypes.windll.user32

# ============================================================================
# Constants
# ============================================================================

# SetWindowPos flags
SWP_NOSIZE = 0x0001
SWP_NOZORDER = 0x0004
SWP_SHOWWINDOW = 0x0040
HWND_TOP = 0

# Size + stacking preserved, window forced shown
SWP_TOAST_MOVE = SWP_NOSIZE | SWP_NOZORDER | SWP_SHOWWINDOW

# SetProcessDpiAwareness values
PROCESS_PER_MONITOR_DPI_AWARE = 2

# ============================================================================
# Prototypes
# ============================================================================
user32.FindWindowW.restype = ctypes.wintypes.HWND
user32.FindWindowW.argtypes = [ctypes.wintypes.LPCWSTR, ctypes.wintypes.LPCWSTR]

user32.GetWindowRect.restype = ctypes.wintypes.BOOL
user32.GetWindowRect.argtypes = [
    ctypes.wintypes.HWND, ctypes.POINTER(ctypes.wintypes.RECT),
]

user32.SetWindowPos.restype = ctypes.wintypes.BOOL
user32.SetWindowPos.argtypes = [
    ctypes.wintypes.HWND, ctypes.wintypes.HWND,
    ctypes.c_int, ctypes.c_int, ctypes.c_int, ctypes.c_int,
    ctypes.wintypes.UINT,
]

# ============================================================================
# Callback types
# ============================================================================
EnumWindowsProc = ctypes.WINFUNCTYPE(
    ctypes.c_bool,
    ctypes.wintypes.HWND,
    ctypes.wintypes.LPARAM,
)

# ============================================================================
# Wrapped API functions
# ============================================================================

def enum_windows(callback: Callable[[int, int], bool]) -> None:
    """Enumerate all top-level windows."""
    _cb = EnumWindowsProc(callback)
    user32.EnumWindows(_cb, 0)


def list_window_handles() -> list[int]:
    """Return the HWND of every top-level window, in enumeration order."""
    handles: list[int] = []

    def _callback(hwnd: int, _: int) -> bool:
        if hwnd:
            handles.append(hwnd)
        return True  # continue enumeration

    enum_windows(_callback)
    return handles


def find_window(title: str, class_name: Optional[str] = None) -> int:
    """Return the HWND of the top-level window titled exactly *title*, or 0."""
    return user32.FindWindowW(class_name, title) or 0


def get_window_text(hwnd: int) -> str:
    """Get the title bar text of a window."""
    length = user32.GetWindowTextLengthW(hwnd)
    if length == 0:
        return ""
    buf = ctypes.create_unicode_buffer(length + 1)
    user32.GetWindowTextW(hwnd, buf, length + 1)
    return buf.value


def get_class_name(hwnd: int) -> str:
    """Get the window class name."""
    buf = ctypes.create_unicode_buffer(256)
    user32.GetClassNameW(hwnd, buf, 256)
    return buf.value


def get_window_rect(hwnd: int) -> Optional[tuple[int, int, int, int]]:
    """Return (left, top, right, bottom) of the window, or None on failure."""
    rect = ctypes.wintypes.RECT()
    if not user32.GetWindowRect(hwnd, ctypes.byref(rect)):
        return None
    return (rect.left, rect.top, rect.right, rect.bottom)


def is_window_visible(hwnd: int) -> bool:
    return bool(user32.IsWindowVisible(hwnd))


def is_window_valid(hwnd: int) -> bool:
    """True if the window handle is still valid."""
    return bool(user32.IsWindow(hwnd))


def set_window_pos(
    hwnd: int,
    x: int,
    y: int,
    width: int,
    height: int,
    flags: int = SWP_TOAST_MOVE,
    insert_after: int = HWND_TOP,
) -> bool:
    """Move a window.  The default flags keep its size and Z-order and show it."""
    return bool(
        user32.SetWindowPos(hwnd, insert_after, x, y, width, height, flags)
    )


def set_dpi_aware() -> None:
    """Make the process DPI aware so window rects are physical pixels."""
    try:
        shcore = ctypes.windll.shcore
    except OSError:
        shcore = None
    if shcore is not None:
        shcore.SetProcessDpiAwareness(PROCESS_PER_MONITOR_DPI_AWARE)
        return
    # Vista-8 fallback
    user32.SetProcessDPIAware()

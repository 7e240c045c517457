"""
toastpos.core - Notification detection and placement subsystem.

This package contains:
    - win32 : Low-level Win32 API bindings via ctypes
    - rect : The WindowRect geometry value
    - window : The WindowInfo snapshot descriptor
    - desktop : Abstract OS capability surface (Desktop)
    - win32_desktop : Desktop implementation on Win32
    - classifier : Which window is the notification popup
    - tracker : PositionTracker - registry and reposition decision
    - repositioner : Moving a window and verifying the result
    - loop : MonitorLoop - the polling cycle and run flag
"""

from toastpos.core.rect import WindowRect
from toastpos.core.window import WindowInfo
from toastpos.core.desktop import Desktop
from toastpos.core.classifier import WindowClassifier, is_toast_candidate
from toastpos.core.tracker import (
    PositionTracker, RecordOnly, Reposition, WindowRecord,
)
from toastpos.core.repositioner import Repositioner, RepositionResult
from toastpos.core.loop import LoopState, MonitorLoop, RunState

__all__ = [
    "WindowRect", "WindowInfo", "Desktop",
    "WindowClassifier", "is_toast_candidate",
    "PositionTracker", "RecordOnly", "Reposition", "WindowRecord",
    "Repositioner", "RepositionResult",
    "LoopState", "MonitorLoop", "RunState",
]

"""
toastpos.core.classifier - Notification window detection.

Decides which top-level window, if any, is the toast popup to act on.
Detection runs in two phases, the first taking priority:

    1. Fast path: direct lookup of a visible window whose title exactly
       equals one of the configured notification titles.  No enumeration.
    2. Heuristic: enumerate all windows and return the first visible one
       that looks like a toast (marker in class/title + toast-sized).

At most one handle is returned per call.  In phase 2 "first" means first
in the OS enumeration order, which is not the visual stacking order.
With several toasts on screen at once, which one wins is unspecified.
"""

from __future__ import annotations

import logging
from typing import Optional

from toastpos.config.settings import ToastSettings
from toastpos.core.desktop import Desktop
from toastpos.core.window import WindowInfo

log = logging.getLogger(__name__)


# ============================================================================
# Per-window predicates
# ============================================================================
def has_marker(info: WindowInfo, settings: ToastSettings) -> bool:
    """True if the class name or title carries a notification marker."""
    cls = info.class_name
    if any(marker in cls for marker in settings.class_markers):
        return True
    title = info.title
    return any(marker in title for marker in settings.title_markers)


def has_toast_size(info: WindowInfo, settings: ToastSettings) -> bool:
    """True if the window's size falls within the toast size ranges."""
    return (
        settings.min_width <= info.width <= settings.max_width
        and settings.min_height <= info.height <= settings.max_height
    )


def is_toast_candidate(info: WindowInfo, settings: ToastSettings) -> bool:
    """
    Return True if *info* qualifies as a notification popup.

    The rules, in order:
        1. Must be visible.
        2. An exact notification title qualifies regardless of size.
        3. Otherwise a class/title marker AND a toast-like size are both
           required.
    """
    # --- 1. Visibility ---
    if not info.visible:
        return False

    # --- 2. Exact title ---
    if info.title in settings.notification_titles:
        return True

    # --- 3. Marker + size ---
    return has_marker(info, settings) and has_toast_size(info, settings)


def explain(info: WindowInfo, settings: ToastSettings) -> str:
    """Return a short reason why *info* is or is not a candidate."""
    if not info.visible:
        return "rejected: hidden"
    if info.title in settings.notification_titles:
        return "accepted: exact title"
    marker = has_marker(info, settings)
    size = has_toast_size(info, settings)
    if marker and size:
        return "accepted: marker + toast size"
    if marker:
        return f"rejected: marker but size {info.width}x{info.height}"
    return "rejected: no marker"


# ============================================================================
# WindowClassifier
# ============================================================================
class WindowClassifier:
    """
    Selects at most one notification window from a Desktop.

    Usage:
        classifier = WindowClassifier(settings)
        hwnd = classifier.classify(desktop)   # int or None
    """

    def __init__(self, settings: Optional[ToastSettings] = None) -> None:
        self._settings = settings or ToastSettings()

    @property
    def settings(self) -> ToastSettings:
        return self._settings

    def find_by_title(self, desktop: Desktop) -> Optional[int]:
        """Phase 1: exact-title lookup.  Hidden matches count as misses."""
        for title in self._settings.notification_titles:
            hwnd = desktop.find_window_by_title(title)
            if not hwnd:
                continue
            if not desktop.is_visible(hwnd):
                log.debug("Fast path %#010x (%r) is hidden, ignoring", hwnd, title)
                continue
            log.debug("Fast path hit %#010x (%r)", hwnd, title)
            return hwnd
        return None

    def scan(self, desktop: Desktop) -> Optional[int]:
        """Phase 2: first qualifying window in enumeration order."""
        for info in desktop.enumerate_windows():
            if is_toast_candidate(info, self._settings):
                log.debug("Heuristic hit %s", info)
                return info.hwnd
        return None

    def classify(self, desktop: Desktop) -> Optional[int]:
        """Return the notification window handle, or None if there is none."""
        hwnd = self.find_by_title(desktop)
        if hwnd is not None:
            return hwnd
        return self.scan(desktop)


def classify(desktop: Desktop, settings: Optional[ToastSettings] = None) -> Optional[int]:
    """Shortcut for `WindowClassifier(settings).classify(desktop)`."""
    return WindowClassifier(settings).classify(desktop)

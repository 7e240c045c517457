"""
toastpos.core.window - The WindowInfo descriptor.

A WindowInfo is a one-time read of a top-level window: identity,
visibility, title, class name and bounding rect as of the moment the
snapshot was taken.  Unlike a live handle it never re-queries the OS.
"""

from __future__ import annotations

from dataclasses import dataclass

from toastpos.core.rect import WindowRect


@dataclass(frozen=True, slots=True)
class WindowInfo:
    """Snapshot of a single top-level window."""

    hwnd: int
    visible: bool
    title: str
    class_name: str
    rect: WindowRect

    @property
    def width(self) -> int:
        return self.rect.width

    @property
    def height(self) -> int:
        return self.rect.height

    def __str__(self) -> str:
        state = "visible" if self.visible else "hidden"
        return (
            f"[{self.hwnd:#010x}] {self.title!r} | "
            f"Class: {self.class_name} | "
            f"{state} | "
            f"{self.width}x{self.height}+{self.rect.left}+{self.rect.top}"
        )

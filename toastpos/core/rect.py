"""
toastpos.core.rect - The WindowRect geometry value.

An immutable rectangle in screen coordinates, stored the way Win32
reports it: (left, top, right, bottom).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WindowRect:
    """
    Immutable window rectangle in screen pixels.

    The origin (0, 0) is the top-left corner of the primary monitor.
    Two rects are equal only if all four edges are equal.

    Attributes:
        left:   X coordinate of the left edge.
        top:    Y coordinate of the top edge.
        right:  X coordinate of the right edge (exclusive).
        bottom: Y coordinate of the bottom edge (exclusive).
    """

    left: int
    top: int
    right: int
    bottom: int

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def position(self) -> tuple[int, int]:
        return (self.left, self.top)

    @property
    def is_valid(self) -> bool:
        """True if both width and height are positive."""
        return self.width > 0 and self.height > 0

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def moved_to(self, x: int, y: int) -> WindowRect:
        """Return a rect of the same size with its top-left corner at (x, y)."""
        return WindowRect(x, y, x + self.width, y + self.height)

    # ------------------------------------------------------------------
    # Win32 tuple conversion (left, top, right, bottom)
    # ------------------------------------------------------------------
    def to_ltrb(self) -> tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)

    @classmethod
    def from_ltrb(cls, left: int, top: int, right: int, bottom: int) -> WindowRect:
        return cls(left, top, right, bottom)

    @classmethod
    def from_xywh(cls, x: int, y: int, width: int, height: int) -> WindowRect:
        """Build a rect from position and size."""
        return cls(x, y, x + width, y + height)

    def __str__(self) -> str:
        return f"Rect({self.width}x{self.height}+{self.left}+{self.top})"

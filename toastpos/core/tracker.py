"""
toastpos.core.tracker - Per-window position tracking.

PositionTracker owns the Registry: the last rect observed for every
notification window it has acted on.  It decides, idempotently, whether
a candidate needs to be moved:

    changed   = no record yet, or any edge differs from the record
    at_target = left/top within tolerance of the anchor

    changed and not at_target  ->  Reposition(anchor)
    anything else              ->  RecordOnly

A window the user dragged away is therefore moved back only once per
change, and a window already at the anchor is never touched again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional, Union

from toastpos.core.rect import WindowRect

log = logging.getLogger(__name__)


# ============================================================================
# Records and actions
# ============================================================================
@dataclass(frozen=True, slots=True)
class WindowRecord:
    """Last rect seen for a tracked window."""
    hwnd: int
    last_rect: WindowRect


@dataclass(frozen=True, slots=True)
class Reposition:
    """Move the window's top-left corner to (x, y)."""
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class RecordOnly:
    """Leave the window where it is; just remember its rect."""


Action = Union[Reposition, RecordOnly]


def has_changed(old: WindowRect, new: WindowRect) -> bool:
    """True if at least one of left/top/right/bottom differs."""
    return (
        old.left != new.left
        or old.top != new.top
        or old.right != new.right
        or old.bottom != new.bottom
    )


# ============================================================================
# PositionTracker
# ============================================================================
class PositionTracker:
    """
    Registry of tracked windows plus the reposition decision.

    Only the monitor worker touches a tracker, so it does no locking.
    """

    def __init__(
        self,
        max_valid_width: int = 2000,
        max_valid_height: int = 1000,
    ) -> None:
        self._max_valid_width = max_valid_width
        self._max_valid_height = max_valid_height

        # Tracked windows indexed by HWND
        self._records: dict[int, WindowRecord] = {}

    # ------------------------------------------------------------------
    # Registry access
    # ------------------------------------------------------------------
    def get(self, hwnd: int) -> Optional[WindowRecord]:
        return self._records.get(hwnd)

    @property
    def handles(self) -> list[int]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, hwnd: object) -> bool:
        return hwnd in self._records

    def __iter__(self) -> Iterator[WindowRecord]:
        return iter(list(self._records.values()))

    # ------------------------------------------------------------------
    # Decision
    # ------------------------------------------------------------------
    def is_plausible(self, rect: WindowRect) -> bool:
        """False for empty, negative or implausibly large rects."""
        return (
            0 < rect.width <= self._max_valid_width
            and 0 < rect.height <= self._max_valid_height
        )

    def decide(
        self,
        hwnd: int,
        rect: WindowRect,
        screen_width: int,
        target_y: int,
        margin: int,
        tolerance: int,
    ) -> Optional[Action]:
        """
        Decide what to do with window *hwnd* currently at *rect*.

        Args:
            hwnd:         Window handle.
            rect:         Its current rect.
            screen_width: Width of the primary display.
            target_y:     Y coordinate of the anchor.
            margin:       Gap between the window and the right screen edge.
            tolerance:    Distance (exclusive) counted as "at the anchor".

        Returns:
            Reposition or RecordOnly, or None if the geometry is noise
            (in which case nothing must be recorded or moved).
        """
        if not self.is_plausible(rect):
            log.debug("Ignoring %#010x: implausible geometry %s", hwnd, rect)
            return None

        adjusted_x = screen_width - rect.width - margin

        record = self._records.get(hwnd)
        changed = record is None or has_changed(record.last_rect, rect)

        at_target = (
            abs(rect.left - adjusted_x) < tolerance
            and abs(rect.top - target_y) < tolerance
        )

        if changed and not at_target:
            return Reposition(adjusted_x, target_y)
        return RecordOnly()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def record(self, hwnd: int, rect: WindowRect) -> WindowRecord:
        """Create or refresh the record for *hwnd*."""
        rec = WindowRecord(hwnd, rect)
        if hwnd not in self._records:
            log.debug("TRACK  %#010x %s", hwnd, rect)
        self._records[hwnd] = rec
        return rec

    def forget(self, hwnd: int) -> Optional[WindowRecord]:
        return self._records.pop(hwnd, None)

    def prune(self, is_visible: Callable[[int], bool]) -> list[int]:
        """
        Drop every record whose window is no longer visible.

        Returns:
            The handles that were removed.
        """
        gone = [hwnd for hwnd in self._records if not is_visible(hwnd)]
        for hwnd in gone:
            del self._records[hwnd]
            log.debug("UNTRACK %#010x", hwnd)
        return gone

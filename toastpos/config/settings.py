"""
toastpos.config.settings - Tunables for detection and placement.

Defaults reproduce the behaviour of the Windows 10/11 toast popups:
    Detection:
        Exact titles        "新しい通知", "New notification"
        Class markers       "Toast", "Notification"
        Title markers       "通知"
        Toast size          200..600 x 50..400 px

    Placement:
        Anchor              top-right, 10 px from the right edge, y = 10
        Tolerance           50 px ("already there")
        Geometry ceiling    2000 x 1000 px (anything larger is noise)

    Timing:
        Poll interval       500 ms
        Settle delay        100 ms before each move
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

# ============================================================================
# Defaults
# ============================================================================

# Localized titles of the shell's toast host window (exact match).
NOTIFICATION_TITLES: tuple[str, ...] = (
    "新しい通知",
    "New notification",
)

# Substrings of the window class name that mark a notification host.
CLASS_MARKERS: tuple[str, ...] = (
    "Toast",
    "Notification",
)

# Substrings of the window title that mark a notification host.
TITLE_MARKERS: tuple[str, ...] = (
    "通知",
)


# ============================================================================
# ToastSettings
# ============================================================================
@dataclass(frozen=True, slots=True)
class ToastSettings:
    """
    Immutable bundle of every tunable used by the monitoring core.

    Build a modified copy with `replace()`; call `validate()` after
    applying user input.
    """

    # --- Classification ---
    notification_titles: tuple[str, ...] = NOTIFICATION_TITLES
    class_markers: tuple[str, ...] = CLASS_MARKERS
    title_markers: tuple[str, ...] = TITLE_MARKERS
    min_width: int = 200
    max_width: int = 600
    min_height: int = 50
    max_height: int = 400

    # --- Geometry sanity ceiling ---
    max_valid_width: int = 2000
    max_valid_height: int = 1000

    # --- Placement ---
    margin: int = 10
    target_y: int = 10
    tolerance: int = 50

    # --- Timing (seconds) ---
    poll_interval: float = 0.5
    settle_delay: float = 0.1

    def replace(self, **overrides: object) -> ToastSettings:
        """Return a copy with *overrides* applied. None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)

    def validate(self) -> ToastSettings:
        """
        Check the settings for values the core cannot work with.

        Returns:
            self, so calls can be chained.

        Raises:
            ValueError: On the first inconsistent value found.
        """
        if self.poll_interval < 0:
            raise ValueError(f"poll_interval must be >= 0, got {self.poll_interval}")
        if self.settle_delay < 0:
            raise ValueError(f"settle_delay must be >= 0, got {self.settle_delay}")
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be > 0, got {self.tolerance}")
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0, got {self.margin}")
        if self.min_width > self.max_width:
            raise ValueError(
                f"min_width {self.min_width} > max_width {self.max_width}"
            )
        if self.min_height > self.max_height:
            raise ValueError(
                f"min_height {self.min_height} > max_height {self.max_height}"
            )
        if self.max_valid_width <= 0 or self.max_valid_height <= 0:
            raise ValueError("geometry ceilings must be positive")
        return self

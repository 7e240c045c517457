"""
toastpos.shell.icon - Tray icon image loading.

The tray image is read from an .ico/.png file with Pillow.  When no file
is given or it cannot be read, a default image is drawn instead so the
tray always comes up.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw

log = logging.getLogger(__name__)

ICON_SIZE = 64


def create_default_icon(size: int = ICON_SIZE) -> Image.Image:
    """Draw the fallback icon: a screen with a toast in the top-right corner."""
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    dc = ImageDraw.Draw(image)

    # Screen
    pad = size // 16
    dc.rectangle(
        (pad, pad * 3, size - pad, size - pad * 3),
        fill=(40, 44, 52, 255),
        outline=(255, 255, 255, 255),
        width=max(1, size // 32),
    )

    # Toast
    tw, th = size // 2, size // 4
    right = size - pad * 3
    top = pad * 5
    dc.rectangle(
        (right - tw, top, right, top + th),
        fill=(0, 120, 215, 255),
    )
    return image


def load_icon_image(path: Optional[Union[str, Path]] = None) -> Image.Image:
    """
    Load the tray icon from *path*, falling back to the default image.

    Args:
        path: Image file to load, or None for the default.

    Returns:
        A Pillow image, never None.
    """
    if path is None:
        return create_default_icon()

    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (OSError, ValueError):
        log.warning("Could not load tray icon %s, using default", path)
        return create_default_icon()

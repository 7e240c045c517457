"""
toastpos.shell - Tray icon front end around the monitoring core.

`tray` imports pystray, which needs a desktop session; import it only
when the tray is actually shown.
"""

from toastpos.shell.icon import create_default_icon, load_icon_image

__all__ = ["create_default_icon", "load_icon_image"]

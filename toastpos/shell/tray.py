"""
toastpos.shell.tray - System tray front end.

A pystray icon with a status line and a Quit item.  The tray owns the
main thread (pystray's event loop); the MonitorLoop runs on its own
worker.  Quitting only asks the loop to stop and tears the icon down;
the worker is never joined.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from pystray import Icon, Menu, MenuItem

from toastpos.core.loop import MonitorLoop
from toastpos.shell.icon import load_icon_image

log = logging.getLogger(__name__)

APP_NAME = "ToastPos"
TOOLTIP = "ToastPos - notification mover"
STATUS_RUNNING = "Watching notifications..."
STATUS_STOPPED = "Stopped"
QUIT_LABEL = "Quit"


class TrayApp:
    """
    Hosting shell for a MonitorLoop.

    Usage:
        tray = TrayApp(loop, icon_path)
        tray.run()   # blocks until Quit is chosen
    """

    def __init__(
        self,
        loop: MonitorLoop,
        icon_path: Optional[Union[str, Path]] = None,
    ) -> None:
        self._loop = loop
        self._icon = Icon(
            APP_NAME,
            load_icon_image(icon_path),
            TOOLTIP,
            menu=self._build_menu(),
        )

    def _build_menu(self) -> Menu:
        return Menu(
            MenuItem(lambda item: self.status_text, lambda: None, enabled=False),
            Menu.SEPARATOR,
            MenuItem(QUIT_LABEL, self._on_quit),
        )

    @property
    def status_text(self) -> str:
        return STATUS_RUNNING if self._loop.is_running() else STATUS_STOPPED

    def _on_quit(self, icon: Icon, item: MenuItem) -> None:
        log.info("Quit requested from tray")
        self._loop.request_stop()
        icon.visible = False
        icon.stop()

    def run(self) -> None:
        """Start the monitor worker and enter the tray event loop."""

        def setup(icon: Icon) -> None:
            icon.visible = True
            self._loop.start()
            log.info("Tray icon ready")

        self._icon.run(setup=setup)

"""
ToastPos - Entry point.

Run with:  python -m toastpos
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import Optional, Sequence

from toastpos import __version__
from toastpos.config.settings import ToastSettings
from toastpos.core.classifier import explain
from toastpos.core.desktop import Desktop
from toastpos.core.loop import MonitorLoop

log = logging.getLogger("toastpos")


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(debug: bool = False) -> None:
    """Configure logging for ToastPos."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    root.addHandler(handler)

    # Quiet down PIL plugin loading
    logging.getLogger("PIL").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toastpos",
        description="Move desktop notification popups to the top-right corner.",
    )
    parser.add_argument("--margin", type=int,
                        help="gap to the right screen edge in px (default: 10)")
    parser.add_argument("--top", type=int, dest="target_y",
                        help="y coordinate of the anchor in px (default: 10)")
    parser.add_argument("--tolerance", type=int,
                        help="distance in px counted as already placed (default: 50)")
    parser.add_argument("--interval", type=float, dest="poll_interval",
                        help="poll interval in seconds (default: 0.5)")
    parser.add_argument("--settle", type=float, dest="settle_delay",
                        help="delay before each move in seconds (default: 0.1)")
    parser.add_argument("--title", action="append", dest="titles", metavar="TITLE",
                        help="exact notification window title; repeat for several "
                             "(replaces the built-in list)")
    parser.add_argument("--icon", help="tray icon image file")
    parser.add_argument("--list", action="store_true",
                        help="print every visible window with its classification and exit")
    parser.add_argument("--no-tray", action="store_true",
                        help="run in the foreground without a tray icon")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace) -> ToastSettings:
    """Apply command-line overrides on top of the default settings."""
    settings = ToastSettings().replace(
        margin=args.margin,
        target_y=args.target_y,
        tolerance=args.tolerance,
        poll_interval=args.poll_interval,
        settle_delay=args.settle_delay,
        notification_titles=tuple(args.titles) if args.titles else None,
    )
    return settings.validate()


def list_windows(desktop: Desktop, settings: ToastSettings) -> None:
    """Print every visible top-level window and why it is or is not a toast."""
    for info in desktop.enumerate_windows():
        if not info.visible:
            continue
        print(f"  {explain(info, settings):<40s} {info}")


def run_headless(loop: MonitorLoop) -> None:
    """Run the loop on the calling thread until Ctrl+C."""

    def _signal_handler(sig: int, frame: object) -> None:
        log.info("Signal %d received, stopping...", sig)
        loop.request_stop()

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    loop.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    try:
        settings = settings_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    from toastpos.core.win32_desktop import Win32Desktop

    try:
        desktop = Win32Desktop()
    except RuntimeError as exc:
        log.error("%s", exc)
        return 1

    if args.list:
        desktop.setup()
        list_windows(desktop, settings)
        return 0

    loop = MonitorLoop(desktop, settings)

    if args.no_tray:
        desktop.setup()
        run_headless(loop)
    else:
        from toastpos.shell.tray import TrayApp

        TrayApp(loop, args.icon).run()

    log.debug("\n%s", loop.dump_state())
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
toastpos.core.loop - MonitorLoop: the polling cycle and its run flag.

This is the heart of ToastPos.  Every poll interval the MonitorLoop:

  1. Asks the WindowClassifier for the current notification window
     (exact-title fast path first, full enumeration only on a miss).
  2. Prunes the tracker's Registry of windows that are no longer visible.
  3. If there is a visible candidate, reads its rect, asks the PositionTracker
     what to do, and for a Reposition lets the Repositioner move it and
     feeds the resulting rect back into the Registry.

A failing cycle is logged and forgotten; it never stops the loop.  The
loop stops only when `request_stop()` has been called, and it notices
that at the top of the next cycle.
"""

from __future__ import annotations

import enum
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from toastpos.config.settings import ToastSettings
from toastpos.core.classifier import WindowClassifier
from toastpos.core.desktop import Desktop
from toastpos.core.rect import WindowRect
from toastpos.core.repositioner import Repositioner, RepositionResult
from toastpos.core.tracker import Action, PositionTracker, RecordOnly, Reposition

log = logging.getLogger(__name__)


# ============================================================================
# Run state
# ============================================================================
class LoopState(enum.Enum):
    """Lifecycle of a MonitorLoop."""
    RUNNING = "running"
    STOPPED = "stopped"


class RunState:
    """
    The "keep running" flag shared between the worker and the control
    surface.  Written once by `request_stop()`, read once per cycle.
    """

    def __init__(self) -> None:
        self._running = threading.Event()
        self._running.set()

    @property
    def running(self) -> bool:
        return self._running.is_set()

    def request_stop(self) -> None:
        self._running.clear()


@dataclass(frozen=True, slots=True)
class CycleReport:
    """What happened during one cycle."""

    candidate: Optional[int] = None
    rect: Optional[WindowRect] = None
    action: Optional[Action] = None
    result: Optional[RepositionResult] = None
    pruned: tuple[int, ...] = ()

    @property
    def moved(self) -> bool:
        return self.result is not None and self.result.ok


# ============================================================================
# MonitorLoop
# ============================================================================
class MonitorLoop:
    """
    Owns the classifier, the tracker, the repositioner and the run flag.

    Usage:
        loop = MonitorLoop(Win32Desktop(), ToastSettings())
        loop.start()          # spawns the worker thread
        ...
        loop.request_stop()   # worker exits at the next cycle boundary
    """

    def __init__(
        self,
        desktop: Desktop,
        settings: Optional[ToastSettings] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._desktop = desktop
        self._settings = settings or ToastSettings()
        self._sleep = sleep

        self._classifier = WindowClassifier(self._settings)
        self._tracker = PositionTracker(
            max_valid_width=self._settings.max_valid_width,
            max_valid_height=self._settings.max_valid_height,
        )
        self._repositioner = Repositioner(
            desktop, settle_delay=self._settings.settle_delay, sleep=sleep,
        )

        self._run_state = RunState()
        self._state = LoopState.RUNNING

        # Worker thread (set by start())
        self._thread: Optional[threading.Thread] = None

        # Counters for status display and debugging
        self._cycles: int = 0
        self._failed_cycles: int = 0
        self._moves: int = 0

    # ------------------------------------------------------------------
    # Public: state access
    # ------------------------------------------------------------------
    @property
    def settings(self) -> ToastSettings:
        return self._settings

    @property
    def tracker(self) -> PositionTracker:
        return self._tracker

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def cycles(self) -> int:
        return self._cycles

    @property
    def failed_cycles(self) -> int:
        return self._failed_cycles

    @property
    def moves(self) -> int:
        return self._moves

    def is_running(self) -> bool:
        return self._run_state.running

    # ------------------------------------------------------------------
    # One cycle
    # ------------------------------------------------------------------
    def run_once(self) -> CycleReport:
        """
        Run a single classify -> prune -> decide -> act cycle.

        OS failures reported as values end the cycle early.  Exceptions
        propagate to the caller; `run()` is what absorbs them.
        """
        candidate = self._classifier.classify(self._desktop)

        # Prune every cycle, candidate or not.
        pruned = tuple(self._tracker.prune(self._desktop.is_visible))

        if candidate is None:
            return CycleReport(pruned=pruned)

        # The candidate may have been hidden since it was classified.  Only
        # shown windows are tracked, and moving a hidden one would show it.
        if not self._desktop.is_visible(candidate):
            log.debug("Candidate %#010x was hidden, skipping", candidate)
            return CycleReport(candidate=candidate, pruned=pruned)

        rect = self._desktop.get_window_rect(candidate)
        if rect is None:
            log.debug("Candidate %#010x vanished before it could be read", candidate)
            return CycleReport(candidate=candidate, pruned=pruned)

        s = self._settings
        action = self._tracker.decide(
            candidate,
            rect,
            self._desktop.primary_screen_width(),
            s.target_y,
            s.margin,
            s.tolerance,
        )

        if isinstance(action, RecordOnly):
            self._tracker.record(candidate, rect)
            return CycleReport(candidate, rect, action, pruned=pruned)

        if isinstance(action, Reposition):
            result = self._repositioner.apply(candidate, action.x, action.y)
            if result.ok:
                self._tracker.record(candidate, result.rect)
                self._moves += 1
            # On failure the record stays as it was, so the next cycle
            # re-evaluates against the window's real position.
            return CycleReport(candidate, rect, action, result, pruned)

        # Implausible geometry: nothing recorded, nothing moved.
        return CycleReport(candidate, rect, pruned=pruned)

    # ------------------------------------------------------------------
    # Public: lifecycle
    # ------------------------------------------------------------------
    def run(self) -> None:
        """
        Poll until a stop is requested.  Blocks the calling thread.
        """
        log.info(
            "Monitor loop running (interval=%.3fs, anchor=right-%d,%d)",
            self._settings.poll_interval,
            self._settings.margin,
            self._settings.target_y,
        )

        while True:
            if not self._run_state.running:
                self._state = LoopState.STOPPED
                break

            self._cycles += 1
            try:
                report = self.run_once()
                if report.candidate is not None:
                    log.debug(
                        "Cycle %d: candidate %#010x action=%s",
                        self._cycles, report.candidate, report.action,
                    )
            except Exception:
                self._failed_cycles += 1
                log.debug("Cycle %d failed", self._cycles, exc_info=True)

            self._sleep(self._settings.poll_interval)

        log.info(
            "Monitor loop stopped after %d cycles (%d moves, %d failed)",
            self._cycles, self._moves, self._failed_cycles,
        )

    def start(self) -> threading.Thread:
        """
        Spawn the background worker running `run()`.

        The worker is a daemon thread and is never joined: the process
        may exit as soon as the control surface has torn itself down.
        """
        if self._thread is not None:
            raise RuntimeError("MonitorLoop already started")

        self._desktop.setup()
        self._thread = threading.Thread(
            target=self.run, name="toastpos-monitor", daemon=True,
        )
        self._thread.start()
        return self._thread

    def request_stop(self) -> None:
        """
        Ask the worker to stop at the next cycle boundary.
        Safe to call from any thread.
        """
        if self._run_state.running:
            log.info("Stop requested")
        self._run_state.request_stop()

    # ------------------------------------------------------------------
    # Debug helpers
    # ------------------------------------------------------------------
    def dump_state(self) -> str:
        """Return a formatted string of all tracked windows."""
        lines = [
            f"=== MonitorLoop: {self._state.value}, {self._cycles} cycles, "
            f"{self._moves} moves, {self._failed_cycles} failed ===",
            f"    Tracked: {len(self._tracker)}",
        ]
        for rec in self._tracker:
            lines.append(f"    [{rec.hwnd:#010x}] {rec.last_rect}")
        return "\n".join(lines)

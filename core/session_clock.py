"""Countdown clock driving the typing test lifecycle."""

import logging
from enum import Enum
from typing import Callable, Optional, Protocol

log = logging.getLogger("typeladder.session_clock")


class SessionPhase(str, Enum):
    """Lifecycle phase of a typing test."""

    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


class TickSource(Protocol):
    """Anything that calls SessionClock.tick() about once per second."""

    def start(self) -> None: ...

    def cancel(self) -> None: ...


class SessionClock:
    """Idle -> Running -> Finished countdown.

    The clock does not measure time itself; a tick source (or the host)
    calls tick() once per second while the test runs.
    """

    def __init__(self, length_sec: int = 60,
                 tick_source: Optional[TickSource] = None,
                 on_finished: Optional[Callable[[], None]] = None):
        """Initialize clock.

        Args:
            length_sec: Test length in seconds (default: 60)
            tick_source: Started on start(), cancelled on finish and reset
            on_finished: Called exactly once when the countdown reaches zero
        """
        self.length_sec = length_sec
        self.tick_source = tick_source
        self.on_finished = on_finished
        self.phase = SessionPhase.IDLE
        self.seconds_remaining = length_sec

    @property
    def is_running(self) -> bool:
        return self.phase == SessionPhase.RUNNING

    @property
    def is_finished(self) -> bool:
        return self.phase == SessionPhase.FINISHED

    def start(self) -> bool:
        """Start the countdown if idle.

        Returns:
            True if the clock transitioned to running
        """
        if self.phase != SessionPhase.IDLE:
            return False
        self.phase = SessionPhase.RUNNING
        if self.tick_source:
            self.tick_source.start()
        log.info(f"Test started ({self.length_sec}s)")
        return True

    def tick(self) -> bool:
        """Advance the countdown by one second.

        Returns:
            True if this tick finished the test
        """
        if self.phase != SessionPhase.RUNNING:
            return False
        self.seconds_remaining = max(0, self.seconds_remaining - 1)
        if self.seconds_remaining == 0:
            self._finish()
            return True
        return False

    def _finish(self) -> None:
        self.phase = SessionPhase.FINISHED
        if self.tick_source:
            self.tick_source.cancel()
        log.info("Test finished")
        if self.on_finished:
            self.on_finished()

    def reset(self) -> None:
        """Return to idle with a full countdown; cancels pending ticks."""
        if self.tick_source:
            self.tick_source.cancel()
        self.phase = SessionPhase.IDLE
        self.seconds_remaining = self.length_sec

"""Periodic deadline check that drives the countdown and auto-submission."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
import logging
from threading import Event, Lock, Thread

from word_exam.constants.exam_constants import TIMER_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


def format_remaining(remaining: timedelta) -> str:
    """Format a remaining duration as ``MM:SS`` (whole seconds, truncated)."""
    total_seconds = max(0, int(remaining.total_seconds()))
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


class SessionTimer:
    """Checks a session deadline every ``interval`` seconds on a daemon thread.

    Each check either reports the remaining time through ``on_tick`` or, once
    the deadline has passed, stops checking and calls ``on_expired`` exactly
    once. ``cancel`` stops the timer permanently and may be called any number
    of times, including from inside the callbacks.
    """

    def __init__(
        self,
        deadline: datetime,
        on_tick: Callable[[str], None] | None = None,
        on_expired: Callable[[], None] | None = None,
        *,
        interval: float = TIMER_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = datetime.now,
        name: str = "SessionTimer",
    ) -> None:
        if interval <= 0:
            raise ValueError("Timer interval must be positive.")
        self.deadline = deadline
        self._on_tick = on_tick
        self._on_expired = on_expired
        self._interval = interval
        self._clock = clock
        self._name = name

        self._stop_event = Event()
        self._state_lock = Lock()
        self._expired_fired = False
        self._thread: Thread | None = None

    def start(self) -> Thread:
        if self._thread is not None:
            raise RuntimeError("Timer has already been started.")
        self._thread = Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        return self._thread

    def cancel(self) -> None:
        if not self._stop_event.is_set():
            logger.debug("%s cancelled", self._name)
        self._stop_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._stop_event.is_set()

    @property
    def has_expired(self) -> bool:
        return self._expired_fired

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def tick(self) -> bool:
        """Run one deadline check. Returns False once the timer has stopped."""
        if self._stop_event.is_set():
            return False

        now = self._clock()
        if now >= self.deadline:
            with self._state_lock:
                if self._expired_fired:
                    return False
                self._expired_fired = True
            self._stop_event.set()
            logger.info("%s reached its deadline", self._name)
            if self._on_expired is not None:
                self._on_expired()
            return False

        if self._on_tick is not None:
            try:
                self._on_tick(format_remaining(self.deadline - now))
            except Exception:
                # The deadline check keeps running when a countdown update fails.
                logger.exception("%s tick callback failed", self._name)
        return True

    def _run(self) -> None:
        try:
            while self.tick():
                if self._stop_event.wait(self._interval):
                    break
        except Exception:
            logger.exception("%s stopped after an error", self._name)
            self._stop_event.set()

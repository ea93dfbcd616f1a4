"""Clock sources for "now".

Operations that need the current time take a ``clock`` argument instead
of reading the wall clock directly, so tests can substitute a
FixedClock.

    SystemClock   reads ``time.time_ns()`` on every call
    CachedClock   serves a value refreshed by a background thread;
                  staleness is bounded by the refresh period
    FixedClock    returns a value set by the caller

Examples:
    >>> clock = FixedClock(0)
    >>> clock.now_millis()
    0
    >>> clock.advance(1500)
    >>> clock.now_millis()
    1500
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Protocol, runtime_checkable

from datekit.errors import ValidationError

logger = logging.getLogger(__name__)


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current epoch milliseconds."""

    def now_millis(self) -> int:
        ...


class SystemClock:
    """Clock reading the operating system wall clock."""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, millis: int = 0) -> None:
        self._millis = millis

    def now_millis(self) -> int:
        return self._millis

    def set(self, millis: int) -> None:
        self._millis = millis

    def advance(self, millis: int) -> None:
        self._millis += millis

    def __repr__(self) -> str:
        return f"FixedClock({self._millis})"


class CachedClock:
    """Clock that serves a value refreshed periodically in the background.

    Reading the cached value is a plain attribute load, which suits
    callers that ask for "now" at a very high rate and can tolerate
    ``refresh_millis`` of staleness.

    The refresher runs on a daemon thread started by ``start()`` or by
    entering the clock as a context manager, and stopped by ``close()``.
    Until started, and after closing, reads go straight to the source.

    Args:
        refresh_millis: Refresh period in milliseconds, at least 1.
        source: Clock to sample; defaults to SystemClock.

    Examples:
        >>> with CachedClock(10) as clock:
        ...     now = clock.now_millis()
    """

    def __init__(self, refresh_millis: int, source: Clock | None = None) -> None:
        if refresh_millis < 1:
            raise ValidationError(
                f"refresh_millis must be at least 1, got {refresh_millis}"
            )
        self._refresh_millis = refresh_millis
        self._source: Clock = source if source is not None else SystemClock()
        self._current = self._source.now_millis()
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def refresh_millis(self) -> int:
        return self._refresh_millis

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> CachedClock:
        """Start the refresher thread if it is not running."""
        with self._lock:
            if self.running:
                return self
            self._current = self._source.now_millis()
            self._stopped.clear()
            self._thread = threading.Thread(
                target=self._run,
                name=f"datekit-clock-{self._refresh_millis}ms",
                daemon=True,
            )
            self._thread.start()
        logger.debug("cached clock started (refresh every %d ms)", self._refresh_millis)
        return self

    def close(self) -> None:
        """Stop the refresher thread and wait for it to exit."""
        with self._lock:
            thread, self._thread = self._thread, None
        self._stopped.set()
        if thread is not None:
            thread.join()
            logger.debug("cached clock stopped")

    def refresh(self) -> None:
        """Sample the source clock now."""
        self._current = self._source.now_millis()

    def now_millis(self) -> int:
        """Return the cached value, or sample the source if not running.

        Reading never starts the refresher; a clock that was never started
        or has been closed passes reads through to its source.
        """
        if not self.running:
            return self._source.now_millis()
        return self._current

    def _run(self) -> None:
        interval = self._refresh_millis / 1000
        while not self._stopped.wait(interval):
            self.refresh()

    def __enter__(self) -> CachedClock:
        return self.start()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"CachedClock(refresh_millis={self._refresh_millis})"


_default_clock: Clock = SystemClock()


def default_clock() -> Clock:
    """Return the clock used when callers pass none."""
    return _default_clock


__all__ = ["Clock", "SystemClock", "FixedClock", "CachedClock", "default_clock"]

"""Tests for clock sources."""

from __future__ import annotations

import time

import pytest

from datekit.clock import CachedClock, Clock, FixedClock, SystemClock, default_clock
from datekit.errors import ValidationError


class TestSystemClock:
    """Tests for SystemClock."""

    def test_reads_wall_clock(self) -> None:
        """The value is close to time.time()."""
        assert abs(SystemClock().now_millis() - int(time.time() * 1000)) < 5_000

    def test_is_a_clock(self) -> None:
        """SystemClock satisfies the Clock protocol."""
        assert isinstance(SystemClock(), Clock)
        assert isinstance(default_clock(), Clock)


class TestFixedClock:
    """Tests for FixedClock."""

    def test_set_and_advance(self) -> None:
        """The value only changes when told to."""
        clock = FixedClock(100)
        assert clock.now_millis() == 100
        clock.advance(50)
        assert clock.now_millis() == 150
        clock.set(0)
        assert clock.now_millis() == 0


class TestCachedClock:
    """Tests for CachedClock."""

    def test_rejects_zero_period(self) -> None:
        """The refresh period must be at least one millisecond."""
        with pytest.raises(ValidationError, match="at least 1"):
            CachedClock(0)

    def test_serves_cached_value_until_refresh(self) -> None:
        """The value is sampled from the source, not read on every call."""
        source = FixedClock(1_000)
        with CachedClock(60_000, source) as clock:
            assert clock.now_millis() == 1_000
            source.advance(500)
            assert clock.now_millis() == 1_000
            clock.refresh()
            assert clock.now_millis() == 1_500

    def test_read_does_not_start_thread(self) -> None:
        """Reading an unstarted clock passes through to the source."""
        source = FixedClock(1_000)
        clock = CachedClock(60_000, source)
        source.advance(500)
        assert clock.now_millis() == 1_500
        assert not clock.running

    def test_read_after_close_does_not_restart(self) -> None:
        """A closed clock stays closed when read."""
        source = FixedClock(0)
        clock = CachedClock(60_000, source).start()
        clock.close()
        source.set(7)
        assert clock.now_millis() == 7
        assert not clock.running

    def test_start_samples_source(self) -> None:
        """Starting takes a fresh sample."""
        source = FixedClock(0)
        clock = CachedClock(60_000, source)
        source.set(99)
        with clock:
            assert clock.now_millis() == 99

    def test_background_refresh(self) -> None:
        """The refresher thread picks up changes in the source."""
        source = FixedClock(0)
        with CachedClock(1, source) as clock:
            assert clock.running
            source.set(42)
            deadline = time.monotonic() + 5
            while clock.now_millis() != 42 and time.monotonic() < deadline:
                time.sleep(0.005)
            assert clock.now_millis() == 42
        assert not clock.running

    def test_close_is_idempotent(self) -> None:
        """close() can be called on a clock that never started."""
        clock = CachedClock(10, FixedClock(0))
        clock.close()
        clock.close()
        assert not clock.running

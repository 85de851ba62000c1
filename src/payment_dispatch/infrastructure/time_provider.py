"""Clocks that stamp payment records with their creation time."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from payment_dispatch.application.ports import TimeProvider
from payment_dispatch.domain.value_objects import require_utc


class SystemTimeProvider(TimeProvider):
    """Stamps each payment with the wall-clock time it was built."""

    def now(self) -> datetime:
        return require_utc(datetime.now(UTC), "system time")


class FixedTimeProvider(TimeProvider):
    """Clock frozen at a chosen instant, so describe() output is reproducible.

    Every payment built from it shares one created_at until the time is
    moved with set_time() or advance(). Single-threaded use only.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._fixed_time = require_utc(fixed_time, "fixed_time")

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = require_utc(new_time, "new_time")

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock by delta (may be negative) and return the new time."""
        self._fixed_time = self._fixed_time + delta
        return self._fixed_time

"""Current-time sources used by the domain services."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def today(clock: Clock) -> date:
    return clock.now().date()


def day_window(day: date) -> tuple[datetime, datetime]:
    """Return the half-open UTC range ``[start, end)`` covering ``day``."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


__all__ = ["Clock", "SystemClock", "today", "day_window"]

# taskplanner/core/clock.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


def to_naive_utc(value: datetime) -> datetime:
    """Instants are stored and compared as naive UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(tz=timezone.utc).replace(tzinfo=None)


class FixedClock:
    """Clock pinned to a single instant (tests, replays)."""

    def __init__(self, instant: datetime) -> None:
        self.instant = to_naive_utc(instant)

    def now(self) -> datetime:
        return self.instant

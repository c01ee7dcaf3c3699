# taskplanner/services/time_distribution.py
"""
Spread each task's estimated hours over the weekdays it covers.

Buckets are indexed Monday=0 .. Sunday=6 (datetime.weekday()).
"""
from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Iterable, List, Tuple

from taskplanner.models.task import Task

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MAX_HOURS_PER_DAY = 24


def week_window(anchor: datetime) -> Tuple[datetime, datetime]:
    """Half-open [Monday 00:00, next Monday 00:00) around `anchor`."""
    day = anchor.replace(hour=0, minute=0, second=0, microsecond=0)
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=7)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def distribute(
    tasks: Iterable[Task],
    window_start: datetime,
    window_end: datetime,
) -> List[int]:
    """
    Hours per weekday for `tasks`, already filtered to the window by the caller.
    `window_start`/`window_end` only document the range the buckets stand for.
    """
    hours = [0] * 7
    for task in tasks:
        start, due = task.start_date, task.due_date
        if start is None or due is None or due < start:
            continue
        total = task.estimated_time or 0

        days_in_task = (due - start).days + 1
        per_day = math.ceil(total / days_in_task)

        # walks calendar days, so a task crossing midnight in under 24h
        # gets per_day on its start day and the remainder on its due day
        day = start
        while day.date() < due.date():
            hours[day.weekday()] += min(per_day, MAX_HOURS_PER_DAY)
            day += timedelta(days=1)

        # whatever the earlier days did not take; never negative
        remainder = total - per_day * (days_in_task - 1)
        hours[due.weekday()] += int(_clamp(remainder, 0, MAX_HOURS_PER_DAY))
    return hours

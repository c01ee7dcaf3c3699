# taskplanner/services/dashboard.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from taskplanner.models.task import STATUS_ORDER, Task, TaskStatus


@dataclass(frozen=True)
class DashboardSummary:
    total_time_spent: int = 0
    total_estimated_time: int = 0
    completion_percentage: float = 0
    task_count: int = 0


def summarize(tasks: Iterable[Task]) -> DashboardSummary:
    """Completion totals over a user's tasks. Empty input gives all zeros."""
    spent = estimated = completed = count = 0
    for task in tasks:
        hours = task.estimated_time or 0
        count += 1
        estimated += hours
        if task.status == TaskStatus.COMPLETED:
            completed += 1
            spent += hours
    pct = round(completed / count * 100, 2) if count else 0
    return DashboardSummary(
        total_time_spent=spent,
        total_estimated_time=estimated,
        completion_percentage=pct,
        task_count=count,
    )


def count(tasks: Iterable[Task]) -> Dict[TaskStatus, int]:
    counts = {status: 0 for status in STATUS_ORDER}
    for task in tasks:
        try:
            status = TaskStatus(getattr(task.status, "value", task.status))
        except ValueError:
            continue
        counts[status] += 1
    return counts

# taskplanner/services/reports.py
from __future__ import annotations

from typing import Dict, Sequence

from taskplanner.models.task import STATUS_ORDER, TaskStatus
from taskplanner.schemas.task import ChartDataset, ChartOut, DashboardOut
from taskplanner.services.dashboard import DashboardSummary
from taskplanner.services.time_distribution import WEEKDAY_LABELS


def daily_time_report(hours: Sequence[float]) -> ChartOut:
    return ChartOut(
        labels=list(WEEKDAY_LABELS),
        datasets=[ChartDataset(label="Time Spent (hours)", data=list(hours))],
    )


def status_report(counts: Dict[TaskStatus, int]) -> ChartOut:
    return ChartOut(
        labels=[s.value for s in STATUS_ORDER],
        datasets=[ChartDataset(data=[counts.get(s, 0) for s in STATUS_ORDER])],
    )


def dashboard_report(summary: DashboardSummary) -> DashboardOut:
    return DashboardOut(
        total_time_spent=summary.total_time_spent,
        total_estimated_time=summary.total_estimated_time,
        estimated_time_percentage=summary.completion_percentage,
        task_count=summary.task_count,
    )

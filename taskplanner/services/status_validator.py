# taskplanner/services/status_validator.py
"""
Write-time checks for task dates and status.

Status rules look only at the fields carried by the write unless
`effective=True`, in which case the stored record overlaid with the
patch is checked as a whole.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from taskplanner.core.errors import (
    InvalidDateRange,
    InvalidTransition,
    MissingPairedDate,
)
from taskplanner.models.task import Task, TaskStatus

_CREATABLE = {TaskStatus.TODO, TaskStatus.IN_PROGRESS}


def effective_fields(existing: Optional[Task], patch: Mapping[str, Any]) -> dict:
    merged: dict = {}
    if existing is not None:
        merged.update(
            status=existing.status,
            start_date=existing.start_date,
            due_date=existing.due_date,
        )
    merged.update({k: v for k, v in patch.items() if k in ("status", "start_date", "due_date")})
    return merged


def _status(value: Any) -> Optional[TaskStatus]:
    if value is None:
        return None
    try:
        return TaskStatus(getattr(value, "value", value))
    except ValueError:
        return None


def validate(
    now: datetime,
    existing: Optional[Task],
    patch: Mapping[str, Any],
    *,
    creating: bool = False,
    effective: bool = False,
) -> None:
    """Raise a TaskError subclass if the write is not allowed at `now`."""
    start = patch.get("start_date")
    due = patch.get("due_date")

    if creating:
        if start is None or due is None:
            raise MissingPairedDate("Both startDate and dueDate are required.")
        status = _status(patch.get("status")) or TaskStatus.TODO
        if status not in _CREATABLE:
            raise InvalidTransition(f'A new task cannot start as "{status.value}".')

    if start is not None or due is not None:
        dates = effective_fields(existing, patch)
        lo, hi = dates.get("start_date"), dates.get("due_date")
        if lo is not None and hi is not None and hi <= lo:
            raise InvalidDateRange("dueDate must be after startDate.")

    if effective:
        if not any(k in patch for k in ("status", "start_date", "due_date")):
            return
        fields = effective_fields(existing, patch)
    else:
        fields = dict(patch)
    _check_status(now, _status(fields.get("status")), fields.get("start_date"), fields.get("due_date"))


def _check_status(
    now: datetime,
    status: Optional[TaskStatus],
    start: Optional[datetime],
    due: Optional[datetime],
) -> None:
    if status is TaskStatus.TODO:
        if start is not None and start <= now:
            raise InvalidTransition('startDate must be in the future for status "Todo".')
    elif status is TaskStatus.IN_PROGRESS:
        if start is not None and start > now:
            raise InvalidTransition(
                'startDate must be now or in the past for status "In Progress".'
            )
    elif status is TaskStatus.COMPLETED:
        if (due is not None and due > now) or (start is not None and start > now):
            raise InvalidTransition(
                'startDate and dueDate must be in the past for status "Completed".'
            )
    elif status is TaskStatus.EXPIRED:
        if due is not None and due >= now:
            raise InvalidTransition('dueDate must be in the past for status "Expired".')

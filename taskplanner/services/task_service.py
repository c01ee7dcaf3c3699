# taskplanner/services/task_service.py
from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from taskplanner.core.clock import Clock
from taskplanner.core.errors import DuplicateName, NotFound
from taskplanner.models.task import Task
from taskplanner.schemas.task import TaskCreate, TaskQuery
from taskplanner.services import dashboard, expired_sweeper
from taskplanner.services.dashboard import DashboardSummary
from taskplanner.services.status_validator import effective_fields, validate
from taskplanner.services.task_store import TaskFilter, TaskStore
from taskplanner.services.time_distribution import distribute, week_window

logger = logging.getLogger(__name__)


def hours_between(start: datetime, due: datetime) -> int:
    return math.ceil((due - start).total_seconds() / 3600)


class TaskService:
    """Validator + store glue for one request."""

    def __init__(self, store: TaskStore, clock: Clock, *, validate_effective: bool = False) -> None:
        self.store = store
        self.clock = clock
        self.validate_effective = validate_effective

    # ---- writes ----

    def create(self, owner_id: UUID, data: TaskCreate) -> Task:
        # status rules only see a status the caller actually sent
        patch = {
            **data.model_dump(exclude_unset=True),
            "start_date": data.start_date,
            "due_date": data.due_date,
        }
        validate(self.clock.now(), None, patch, creating=True)

        if not self.store.owner_exists(owner_id):
            raise NotFound("User not found")
        if self.store.find_by_name_and_owner(data.name, owner_id) is not None:
            raise DuplicateName("Task with the same name already exists for this user.")

        task = Task(
            owner_id=owner_id,
            name=data.name,
            description=data.description,
            priority=data.priority.value,
            status=data.status.value,
            start_date=data.start_date,
            due_date=data.due_date,
            estimated_time=hours_between(data.start_date, data.due_date),
        )
        task = self.store.create(task)
        logger.info("task created id=%s owner=%s", task.task_id, owner_id)
        return task

    def update(self, task_id: UUID, patch: dict, owner_id: Optional[UUID] = None) -> Task:
        existing = self.get(task_id, owner_id)
        validate(self.clock.now(), existing, patch, effective=self.validate_effective)

        new_name = patch.get("name")
        if new_name is not None and new_name != existing.name:
            clash = self.store.find_by_name_and_owner(new_name, existing.owner_id)
            if clash is not None:
                raise DuplicateName("Task with the same name already exists for this user.")

        if ("start_date" in patch or "due_date" in patch) and "estimated_time" not in patch:
            dates = effective_fields(existing, patch)
            if dates.get("start_date") and dates.get("due_date"):
                patch = {
                    **patch,
                    "estimated_time": hours_between(dates["start_date"], dates["due_date"]),
                }

        updated = self.store.update_by_id(task_id, patch)
        if updated is None:
            raise NotFound("Task not found")
        logger.info("task updated id=%s fields=%s", task_id, sorted(patch))
        return updated

    def delete(self, task_id: UUID, owner_id: Optional[UUID] = None) -> Task:
        self.get(task_id, owner_id)
        deleted = self.store.delete_by_id(task_id)
        if deleted is None:
            raise NotFound("Task not found")
        logger.info("task deleted id=%s", task_id)
        return deleted

    def expire_overdue(self, owner_id: UUID) -> int:
        return expired_sweeper.sweep(self.store, owner_id, self.clock.now())

    # ---- reads ----

    def get(self, task_id: UUID, owner_id: Optional[UUID] = None) -> Task:
        task = self.store.find_by_id(task_id)
        if task is None or (owner_id is not None and task.owner_id != owner_id):
            raise NotFound("Task not found")
        return task

    def list(self, owner_id: UUID, query: Optional[TaskQuery] = None) -> List[Task]:
        query = query or TaskQuery()
        flt = TaskFilter(
            search=query.search,
            priority=query.priority,
            status=query.status,
            sort_by=query.sort_by,
        )
        return self.store.find_by_owner(owner_id, flt)

    def weekly_hours(self, owner_id: UUID, anchor: Optional[datetime] = None) -> List[int]:
        window_start, window_end = week_window(anchor or self.clock.now())
        tasks = self.store.find_by_owner(
            owner_id, TaskFilter(start_from=window_start, due_before=window_end)
        )
        return distribute(tasks, window_start, window_end)

    def summary(self, owner_id: UUID) -> DashboardSummary:
        return dashboard.summarize(self.store.find_by_owner(owner_id))

    def status_counts(self, owner_id: UUID) -> dict:
        return dashboard.count(self.store.find_by_owner(owner_id))

# taskplanner/services/expired_sweeper.py
from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from taskplanner.models.task import TaskStatus
from taskplanner.services.task_store import TaskFilter, TaskStore

logger = logging.getLogger(__name__)


def sweep(store: TaskStore, owner_id: UUID, now: datetime) -> int:
    """
    Mark every overdue, unfinished task of `owner_id` as Expired in one bulk write.
    Returns the number of records changed; re-running it changes nothing new.
    """
    flt = TaskFilter(
        owner_id=owner_id,
        due_before=now,
        status_not_in=(TaskStatus.EXPIRED, TaskStatus.COMPLETED),
    )
    modified = store.bulk_update(flt, {"status": TaskStatus.EXPIRED})
    logger.info("expired sweep owner=%s now=%s modified=%s", owner_id, now.isoformat(), modified)
    return modified

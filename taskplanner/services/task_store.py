# taskplanner/services/task_store.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Iterable, Optional, Protocol
from uuid import UUID

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from taskplanner.core.errors import DuplicateName, StoreUnavailable
from taskplanner.models.task import Task
from taskplanner.models.user import User

logger = logging.getLogger(__name__)


@dataclass
class TaskFilter:
    """Subset of task records. Unset fields do not constrain."""

    owner_id: Optional[UUID] = None
    search: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    status_not_in: Optional[Iterable[str]] = None
    start_from: Optional[datetime] = None   # start_date >= start_from
    due_before: Optional[datetime] = None   # due_date < due_before
    sort_by: Optional[str] = None

    def clauses(self) -> list:
        out = []
        if self.owner_id is not None:
            out.append(Task.owner_id == self.owner_id)
        if self.search:
            out.append(func.lower(Task.name).contains(self.search.lower()))
        if self.priority is not None:
            out.append(Task.priority == _value(self.priority))
        if self.status is not None:
            out.append(Task.status == _value(self.status))
        if self.status_not_in:
            out.append(Task.status.not_in([_value(s) for s in self.status_not_in]))
        if self.start_from is not None:
            out.append(Task.start_date >= self.start_from)
        if self.due_before is not None:
            out.append(Task.due_date < self.due_before)
        return out


def _value(v: Any) -> Any:
    return getattr(v, "value", v)


class TaskStore(Protocol):
    def owner_exists(self, owner_id: UUID) -> bool: ...
    def find_by_owner(self, owner_id: UUID, flt: Optional[TaskFilter] = None) -> list[Task]: ...
    def find_by_id(self, task_id: UUID) -> Optional[Task]: ...
    def find_by_name_and_owner(self, name: str, owner_id: UUID) -> Optional[Task]: ...
    def create(self, task: Task) -> Task: ...
    def update_by_id(self, task_id: UUID, patch: dict) -> Optional[Task]: ...
    def delete_by_id(self, task_id: UUID) -> Optional[Task]: ...
    def bulk_update(self, flt: TaskFilter, patch: dict) -> int: ...


class SqlTaskStore:
    """
    TaskStore over a SQLModel session.
    Every SQLAlchemy failure is re-raised as StoreUnavailable; no retries here.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def owner_exists(self, owner_id: UUID) -> bool:
        try:
            return self.session.get(User, owner_id) is not None
        except SQLAlchemyError as exc:
            raise self._unavailable("owner lookup", exc) from exc

    def find_by_owner(self, owner_id: UUID, flt: Optional[TaskFilter] = None) -> list[Task]:
        flt = replace(flt or TaskFilter(), owner_id=owner_id)
        stmt = select(Task).where(*flt.clauses())
        if flt.sort_by:
            stmt = stmt.order_by(getattr(Task, flt.sort_by).asc())
        else:
            stmt = stmt.order_by(Task.created_at.desc())
        try:
            return list(self.session.exec(stmt).all())
        except SQLAlchemyError as exc:
            raise self._unavailable("find_by_owner", exc) from exc

    def find_by_id(self, task_id: UUID) -> Optional[Task]:
        try:
            return self.session.get(Task, task_id)
        except SQLAlchemyError as exc:
            raise self._unavailable("find_by_id", exc) from exc

    def find_by_name_and_owner(self, name: str, owner_id: UUID) -> Optional[Task]:
        stmt = select(Task).where(Task.owner_id == owner_id, Task.name == name)
        try:
            return self.session.exec(stmt).first()
        except SQLAlchemyError as exc:
            raise self._unavailable("find_by_name_and_owner", exc) from exc

    def create(self, task: Task) -> Task:
        try:
            self.session.add(task)
            self.session.commit()
        except IntegrityError:
            # lost a race against another create with the same name
            self.session.rollback()
            raise DuplicateName("Task with the same name already exists for this user.")
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise self._unavailable("create", exc) from exc
        self.session.refresh(task)
        return task

    def update_by_id(self, task_id: UUID, patch: dict) -> Optional[Task]:
        task = self.find_by_id(task_id)
        if task is None:
            return None
        for key, value in patch.items():
            setattr(task, key, _value(value))
        try:
            self.session.add(task)
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise DuplicateName("Task with the same name already exists for this user.")
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise self._unavailable("update_by_id", exc) from exc
        self.session.refresh(task)
        return task

    def delete_by_id(self, task_id: UUID) -> Optional[Task]:
        task = self.find_by_id(task_id)
        if task is None:
            return None
        try:
            self.session.delete(task)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise self._unavailable("delete_by_id", exc) from exc
        return task

    def bulk_update(self, flt: TaskFilter, patch: dict) -> int:
        values = {k: _value(v) for k, v in patch.items()}
        stmt = (
            update(Task)
            .where(*flt.clauses())
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.session.execute(stmt)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise self._unavailable("bulk_update", exc) from exc
        # objects loaded before the bulk write are stale now
        self.session.expire_all()
        return result.rowcount or 0

    @staticmethod
    def _unavailable(op: str, exc: Exception) -> StoreUnavailable:
        logger.warning("task store %s failed: %s", op, exc)
        return StoreUnavailable(f"Task store unavailable ({op})")

# taskplanner/models/task.py
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, String, UniqueConstraint
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


class TaskStatus(str, Enum):
    TODO = "Todo"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    EXPIRED = "Expired"


class TaskPriority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# chart/histogram order
STATUS_ORDER = (
    TaskStatus.TODO,
    TaskStatus.IN_PROGRESS,
    TaskStatus.COMPLETED,
    TaskStatus.EXPIRED,
)


class Task(SQLModel, table=True):
    __tablename__ = "task"
    __table_args__ = (UniqueConstraint("owner_id", "name", name="uq_task_owner_name"),)

    task_id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: UUID = Field(foreign_key="user.user_id", index=True)
    name: str
    description: Optional[str] = None
    priority: str = Field(sa_column=Column(String, nullable=False))
    estimated_time: int = Field(default=0, ge=0)  # hours
    status: str = Field(
        default=TaskStatus.TODO.value,
        sa_column=Column(String, nullable=False, default=TaskStatus.TODO.value),
    )
    # naive UTC throughout; plain DateTime columns keep it that way
    start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    due_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime, nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime, nullable=False, onupdate=_utcnow),
    )

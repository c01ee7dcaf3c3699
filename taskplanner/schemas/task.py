# taskplanner/schemas/task.py
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from taskplanner.core.clock import to_naive_utc
from taskplanner.models.task import TaskPriority, TaskStatus


class CamelModel(BaseModel):
    """JSON bodies use camelCase keys; python code uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _DatesMixin(CamelModel):
    start_date: Optional[datetime] = None
    due_date: Optional[datetime] = None

    @field_validator("start_date", "due_date")
    @classmethod
    def _naive_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v) if v is not None else None


# ===== Task write bodies =====

class TaskCreate(_DatesMixin):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    priority: TaskPriority
    status: TaskStatus = TaskStatus.TODO
    # ignored: derived from the dates on create
    estimated_time: Optional[int] = Field(default=None, ge=0)


class TaskUpdate(_DatesMixin):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    estimated_time: Optional[int] = Field(default=None, ge=0)

    def to_patch(self) -> dict:
        """Fields the caller actually sent. Only description may be cleared with null."""
        data = self.model_dump(exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k == "description"}


class TaskOut(CamelModel):
    task_id: UUID
    owner_id: UUID
    name: str
    description: Optional[str] = None
    priority: str
    estimated_time: int
    status: str
    start_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


SortField = Literal[
    "name", "priority", "status", "estimated_time", "start_date", "due_date", "created_at"
]


class TaskQuery(CamelModel):
    search: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    sort_by: Optional[SortField] = None


# ===== Reports =====

class ChartDataset(CamelModel):
    label: Optional[str] = None
    data: List[float]


class ChartOut(CamelModel):
    labels: List[str]
    datasets: List[ChartDataset]


class DashboardOut(CamelModel):
    total_time_spent: int
    total_estimated_time: int
    estimated_time_percentage: float
    task_count: int


class SweepOut(CamelModel):
    modified_count: int
    message: str


class ErrorOut(BaseModel):
    status: str = "ERR"
    kind: str
    message: str

# taskplanner/routers/task.py
from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from taskplanner.core.clock import to_naive_utc
from taskplanner.dependencies.auth import get_current_user
from taskplanner.dependencies.services import get_task_service
from taskplanner.models.task import TaskPriority, TaskStatus
from taskplanner.schemas.task import (
    ChartOut,
    DashboardOut,
    SortField,
    SweepOut,
    TaskCreate,
    TaskOut,
    TaskQuery,
    TaskUpdate,
)
from taskplanner.services import reports
from taskplanner.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def _out(task) -> TaskOut:
    return TaskOut.model_validate(task, from_attributes=True)


@router.post("/", response_model=TaskOut)
def create_task(
    body: TaskCreate,
    service: TaskService = Depends(get_task_service),
    user_id: UUID = Depends(get_current_user),
):
    return _out(service.create(user_id, body))


@router.get("/", response_model=list[TaskOut])
def list_tasks(
    search: Optional[str] = Query(None),
    priority: Optional[TaskPriority] = Query(None),
    status: Optional[TaskStatus] = Query(None),
    sort_by: Optional[SortField] = Query(None, alias="sortBy"),
    service: TaskService = Depends(get_task_service),
    user_id: UUID = Depends(get_current_user),
):
    query = TaskQuery(search=search, priority=priority, status=status, sort_by=sort_by)
    return [_out(t) for t in service.list(user_id, query)]


# ===== reports =====

@router.get("/reports/daily-time", response_model=ChartOut)
def daily_time_spent(
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    service: TaskService = Depends(get_task_service),
    user_id: UUID = Depends(get_current_user),
):
    anchor = to_naive_utc(start_date) if start_date else None
    return reports.daily_time_report(service.weekly_hours(user_id, anchor))


@router.get("/reports/status", response_model=ChartOut)
def task_status(
    service: TaskService = Depends(get_task_service),
    user_id: UUID = Depends(get_current_user),
):
    return reports.status_report(service.status_counts(user_id))


@router.get("/reports/dashboard", response_model=DashboardOut)
def dashboard(
    service: TaskService = Depends(get_task_service),
    user_id: UUID = Depends(get_current_user),
):
    return reports.dashboard_report(service.summary(user_id))


@router.post("/expire", response_model=SweepOut)
def expire_overdue(
    service: TaskService = Depends(get_task_service),
    user_id: UUID = Depends(get_current_user),
):
    modified = service.expire_overdue(user_id)
    return SweepOut(modified_count=modified, message=f"{modified} tasks updated to 'Expired'.")


# ===== single task =====

@router.get("/{task_id}", response_model=TaskOut)
def get_task(
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
    user_id: UUID = Depends(get_current_user),
):
    return _out(service.get(task_id, user_id))


@router.patch("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: UUID,
    body: TaskUpdate,
    service: TaskService = Depends(get_task_service),
    user_id: UUID = Depends(get_current_user),
):
    return _out(service.update(task_id, body.to_patch(), user_id))


@router.delete("/{task_id}")
def delete_task(
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
    user_id: UUID = Depends(get_current_user),
):
    service.delete(task_id, user_id)
    return {"status": "SUCCESS", "message": "Task deleted successfully"}

# taskplanner/schemas/advisor.py
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from taskplanner.schemas.task import CamelModel


class CalendarEvent(CamelModel):
    """Calendar-shaped task as the planner UI sends it."""

    title: str
    desc: Optional[str] = None
    all_day: Optional[bool] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    end: Optional[str] = None
    estimated_time: Optional[int] = None
    priority: Optional[str] = None
    status: Optional[str] = None


class ScheduleRequest(CamelModel):
    calendar_events: List[CalendarEvent] = Field(..., min_length=1)


class SuggestRequest(CamelModel):
    cur_task: CalendarEvent
    tasks: List[CalendarEvent] = Field(..., min_length=1)


class QuestionRequest(CamelModel):
    question: str = Field(..., min_length=1)


class AdvisorOut(CamelModel):
    feedback: str

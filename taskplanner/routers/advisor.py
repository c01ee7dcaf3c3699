# taskplanner/routers/advisor.py
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from taskplanner.dependencies.auth import get_current_user
from taskplanner.dependencies.services import get_task_advisor, get_task_service
from taskplanner.schemas.advisor import AdvisorOut, QuestionRequest, ScheduleRequest, SuggestRequest
from taskplanner.services.task_advisor import TaskAdvisor
from taskplanner.services.task_service import TaskService

router = APIRouter(prefix="/tasks/ai", tags=["Task advisor"])


@router.post("/analyze-schedule", response_model=AdvisorOut)
def analyze_schedule(
    body: ScheduleRequest,
    advisor: TaskAdvisor = Depends(get_task_advisor),
    user_id: UUID = Depends(get_current_user),
):
    return AdvisorOut(feedback=advisor.analyze_schedule(body.calendar_events))


@router.post("/suggest", response_model=AdvisorOut)
def suggest_task(
    body: SuggestRequest,
    advisor: TaskAdvisor = Depends(get_task_advisor),
    user_id: UUID = Depends(get_current_user),
):
    return AdvisorOut(feedback=advisor.suggest_task(body.cur_task, body.tasks))


@router.get("/feedback", response_model=AdvisorOut)
def feedback(
    service: TaskService = Depends(get_task_service),
    advisor: TaskAdvisor = Depends(get_task_advisor),
    user_id: UUID = Depends(get_current_user),
):
    return AdvisorOut(feedback=advisor.feedback(service.list(user_id)))


@router.post("/ask", response_model=AdvisorOut)
def ask(
    body: QuestionRequest,
    service: TaskService = Depends(get_task_service),
    advisor: TaskAdvisor = Depends(get_task_advisor),
    user_id: UUID = Depends(get_current_user),
):
    try:
        answer = advisor.answer(service.list(user_id), body.question)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return AdvisorOut(feedback=answer)


@router.get("/focus", response_model=AdvisorOut)
def suggest_focus(
    service: TaskService = Depends(get_task_service),
    advisor: TaskAdvisor = Depends(get_task_advisor),
    user_id: UUID = Depends(get_current_user),
):
    return AdvisorOut(feedback=advisor.suggest_focus(service.list(user_id)))

# taskplanner/dependencies/services.py
from functools import lru_cache

from fastapi import Depends
from openai import OpenAI
from sqlmodel import Session

from taskplanner.config import get_settings
from taskplanner.core.clock import Clock, SystemClock
from taskplanner.core.errors import AdvisorUnavailable
from taskplanner.db.session import get_session
from taskplanner.services.task_advisor import TaskAdvisor
from taskplanner.services.task_service import TaskService
from taskplanner.services.task_store import SqlTaskStore

_system_clock = SystemClock()


def get_clock() -> Clock:
    return _system_clock


def get_task_service(
    db: Session = Depends(get_session),
    clock: Clock = Depends(get_clock),
) -> TaskService:
    return TaskService(
        SqlTaskStore(db),
        clock,
        validate_effective=get_settings().validate_effective_record,
    )


@lru_cache(maxsize=1)
def _openai_client() -> OpenAI:
    settings = get_settings()
    kwargs = {"api_key": settings.openai_api_key}
    if settings.openai_base_url:
        kwargs["base_url"] = settings.openai_base_url
    return OpenAI(**kwargs)


def get_llm_client():
    if not get_settings().openai_api_key:
        raise AdvisorUnavailable("OPENAI_API_KEY is not configured.")
    return _openai_client()


def get_task_advisor(client=Depends(get_llm_client)) -> TaskAdvisor:
    settings = get_settings()
    return TaskAdvisor(
        client,
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
    )

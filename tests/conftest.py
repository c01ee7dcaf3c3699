# tests/conftest.py
from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from taskplanner.core.clock import FixedClock  # noqa: E402
from taskplanner.models.task import Task  # noqa: E402
from taskplanner.models.user import User  # noqa: E402
from taskplanner.services.task_service import TaskService  # noqa: E402
from taskplanner.services.task_store import SqlTaskStore  # noqa: E402

# Wednesday
NOW = datetime(2026, 3, 11, 12, 0)


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(eng)
    yield eng
    SQLModel.metadata.drop_all(eng)


@pytest.fixture
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture
def store(session) -> SqlTaskStore:
    return SqlTaskStore(session)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


def _user(session: Session, name: str) -> User:
    user = User(name=name, email=f"{name}@example.com")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def owner(session) -> User:
    return _user(session, "alice")


@pytest.fixture
def other_owner(session) -> User:
    return _user(session, "bob")


@pytest.fixture
def service(store, clock) -> TaskService:
    return TaskService(store, clock)


@pytest.fixture
def make_task(store):
    """Persist a task directly through the store, skipping validation."""

    def _make(owner_id, name, *, status="Todo", start=None, due=None, estimated=0, priority="Medium"):
        return store.create(
            Task(
                owner_id=owner_id,
                name=name,
                priority=priority,
                status=status,
                start_date=start,
                due_date=due,
                estimated_time=estimated,
            )
        )

    return _make

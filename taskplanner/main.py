# taskplanner/main.py
import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, HTTPException, Request  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from sqlmodel import text  # noqa: E402

from taskplanner.config import get_settings  # noqa: E402
from taskplanner.core.errors import TaskError  # noqa: E402
from taskplanner.core.logging_config import setup_logging  # noqa: E402
from taskplanner.db.session import get_engine  # noqa: E402

# model modules register their tables
from taskplanner.models import task as _m_task  # noqa: F401,E402
from taskplanner.models import user as _m_user  # noqa: F401,E402

from taskplanner.routers import advisor, task  # noqa: E402

setup_logging()
logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="Task Planner Backend",
    version=settings.app_version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskError)
async def task_error_handler(request: Request, exc: TaskError):
    if exc.status_code >= 500:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(task.router)
app.include_router(advisor.router)


@app.get("/health")
def health_app():
    return {"ok": True}


@app.get("/health/db")
def health_db():
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception:
        raise HTTPException(status_code=500, detail="Database connection failed")

# taskplanner/core/errors.py
from __future__ import annotations


class TaskError(Exception):
    """Base for every failure the task core reports to callers."""

    kind = "TaskError"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"status": "ERR", "kind": self.kind, "message": self.message}


class MissingPairedDate(TaskError):
    kind = "MissingPairedDate"


class InvalidDateRange(TaskError):
    kind = "InvalidDateRange"


class InvalidTransition(TaskError):
    kind = "InvalidTransition"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class DuplicateName(TaskError):
    kind = "DuplicateName"
    status_code = 409


class NotFound(TaskError):
    kind = "NotFound"
    status_code = 404


class StoreUnavailable(TaskError):
    kind = "StoreUnavailable"
    status_code = 503


class AdvisorUnavailable(TaskError):
    kind = "AdvisorUnavailable"
    status_code = 503

from uuid import uuid4

from taskplanner.models.task import Task, TaskStatus
from taskplanner.services import reports
from taskplanner.services.dashboard import DashboardSummary, count, summarize


def _task(status, estimated=0) -> Task:
    return Task(owner_id=uuid4(), name=f"t-{uuid4()}", priority="Low", status=status, estimated_time=estimated)


def test_summarize_empty_is_all_zero():
    assert summarize([]) == DashboardSummary(
        total_time_spent=0, total_estimated_time=0, completion_percentage=0, task_count=0
    )


def test_summarize_totals_and_percentage():
    tasks = [
        _task("Completed", 5),
        _task("Todo", 3),
        _task("In Progress", 4),
    ]
    summary = summarize(tasks)
    assert summary.total_time_spent == 5
    assert summary.total_estimated_time == 12
    assert summary.task_count == 3
    assert summary.completion_percentage == 33.33


def test_summarize_all_completed():
    summary = summarize([_task(TaskStatus.COMPLETED, 1), _task(TaskStatus.COMPLETED, 2)])
    assert summary.completion_percentage == 100
    assert summary.total_time_spent == summary.total_estimated_time == 3


def test_count_empty_has_all_four_keys():
    assert count([]) == {
        TaskStatus.TODO: 0,
        TaskStatus.IN_PROGRESS: 0,
        TaskStatus.COMPLETED: 0,
        TaskStatus.EXPIRED: 0,
    }


def test_count_two_todo_one_completed():
    counts = count([_task("Todo"), _task("Todo"), _task("Completed")])
    assert counts == {
        TaskStatus.TODO: 2,
        TaskStatus.IN_PROGRESS: 0,
        TaskStatus.COMPLETED: 1,
        TaskStatus.EXPIRED: 0,
    }


def test_count_ignores_unknown_status():
    counts = count([_task("Archived"), _task("Expired")])
    assert sum(counts.values()) == 1
    assert counts[TaskStatus.EXPIRED] == 1


def test_status_report_shape():
    out = reports.status_report(count([_task("In Progress")]))
    assert out.labels == ["Todo", "In Progress", "Completed", "Expired"]
    assert out.datasets[0].data == [0, 1, 0, 0]


def test_dashboard_report_uses_presentation_keys():
    out = reports.dashboard_report(summarize([_task("Completed", 2), _task("Todo", 2)]))
    assert out.model_dump(by_alias=True) == {
        "totalTimeSpent": 2,
        "totalEstimatedTime": 4,
        "estimatedTimePercentage": 50.0,
        "taskCount": 2,
    }


def test_daily_time_report_shape():
    out = reports.daily_time_report([1, 2, 3, 4, 5, 6, 7])
    assert out.labels == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert out.datasets[0].label == "Time Spent (hours)"
    assert out.datasets[0].data == [1, 2, 3, 4, 5, 6, 7]

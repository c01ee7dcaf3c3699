# taskplanner/services/task_advisor.py
from __future__ import annotations

import logging
from typing import Any, List, Sequence

from taskplanner.core.errors import AdvisorUnavailable, NotFound
from taskplanner.models.task import Task
from taskplanner.schemas.advisor import CalendarEvent

logger = logging.getLogger(__name__)

NO_FEEDBACK = "No feedback provided by the AI model."

NAVIGATION_HINTS = ("where can i", "how do i find")

NAVIGATION_ANSWER = """Here are some sections you may be looking for:
- **Task Management**: click the "Tasks" tab in the navigation menu.
- **Calendar View**: click "Calendar" in the sidebar.
- **Focus Timer**: select a task in the calendar and click the timer icon.
- **AI Suggestions**: click "Analyze Schedule" on the dashboard.
- **Profile & Settings**: click your name in the top-right corner and pick "Profile".

If you're looking for something specific, feel free to ask!"""


def _event_block(e: CalendarEvent) -> str:
    return (
        f"All Day: {e.all_day}, Description: {e.desc}, End: {e.end or e.due_date}, "
        f"Estimated Time: {e.estimated_time or 'Not Scheduled'}, "
        f"Priority: {e.priority}, Status: {e.status}, Title: {e.title}"
    )


def _task_block(index: int, t: Task) -> str:
    return (
        f"Task {index}:\n"
        f"- Title: {t.name}\n"
        f"- Description: {t.description or ''}\n"
        f"- Start: {t.start_date.isoformat() if t.start_date else 'Not Scheduled'}\n"
        f"- Deadline: {t.due_date.isoformat() if t.due_date else 'No Deadline'}\n"
        f"- Estimated Time: {t.estimated_time or 'Not Scheduled'}\n"
        f"- Priority: {t.priority}\n"
        f"- Status: {t.status}"
    )


def _tasks_text(tasks: Sequence[Task]) -> str:
    return "\n\n".join(_task_block(i, t) for i, t in enumerate(tasks, start=1))


def schedule_prompt(events: Sequence[CalendarEvent]) -> str:
    lines = "\n".join(_event_block(e) for e in events)
    return (
        "Analyze the following tasks:\n"
        f"{lines}\n\n"
        "Provide feedback on this schedule including:\n"
        "Warnings: identify at least three tasks that are too tightly scheduled, "
        "conflict, or could cause problems.\n"
        "Prioritization Recommendations: which tasks should be prioritized and balanced.\n"
        "Simple Steps to Fix: quick fixes such as moving or extending tasks or adjusting priorities.\n"
        "Time Management Suggestion: a structured approach to managing time.\n"
        "Keep the feedback concise and easy to understand."
    )


def suggest_prompt(current: CalendarEvent, others: Sequence[CalendarEvent]) -> str:
    lines = "\n".join(_event_block(e) for e in others)
    return (
        "Given this task:\n"
        f"Title: {current.title}\n"
        f"Description: {current.desc}\n"
        f"Priority: {current.priority}\n"
        f"Status: {current.status}\n"
        f"Start Date: {current.start_date}\n"
        f"Due Date: {current.due_date}\n"
        f"Estimated Time: {current.estimated_time} hours\n\n"
        "Along with the following tasks:\n"
        f"{lines}\n\n"
        "Suggest how the first task should change to fit with the others and point out "
        "each attribute that should be fixed. Keep each suggestion as short as possible. "
        "No general optimizations for all tasks."
    )


def feedback_prompt(tasks: Sequence[Task]) -> str:
    return (
        "Analyze the following tasks in detail:\n\n"
        f"{_tasks_text(tasks)}\n\n"
        "Provide detailed feedback in these sections, referencing specific tasks:\n"
        "1. **Areas of Excellence**: at least five things the user is doing well.\n"
        "2. **Tasks Needing Attention**: at least five tasks or areas with conflicts, "
        "delays, lack of progress or unclear scheduling, each with a suggestion.\n"
        "3. **Motivational Feedback**: at least five pieces of advice to stay motivated "
        "and improve the completion rate."
    )


def question_prompt(tasks: Sequence[Task], question: str) -> str:
    return (
        "Analyze the following tasks and answer the question based on them:\n\n"
        f"{_tasks_text(tasks)}\n\n"
        f'User\'s Question: "{question}"\n\n'
        "Answer based on the task information above."
    )


def focus_prompt(tasks: Sequence[Task]) -> str:
    return (
        "You have the following tasks:\n\n"
        f"{_tasks_text(tasks)}\n\n"
        'Suggest the top 3 tasks with status "In Progress" to focus on TODAY. '
        "For each, give an estimated focus time (hours or minutes). Sort from top "
        "priority, drop tasks that need not be done today, and answer only as:\n"
        " - **Task's title:** Estimate time (its Priority)."
    )


class TaskAdvisor:
    """
    Prompt construction over a user's tasks plus one chat-completion call.
    `client` is anything shaped like openai.OpenAI (chat.completions.create).
    """

    def __init__(
        self,
        client: Any,
        *,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 800,
    ) -> None:
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def _ask(self, instruction: str, prompt: str) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": instruction},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as exc:
            logger.exception("advisor call failed model=%s", self.model)
            raise AdvisorUnavailable("An error occurred while contacting the AI model.") from exc

        content = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        return content or NO_FEEDBACK

    def analyze_schedule(self, events: Sequence[CalendarEvent]) -> str:
        if not events:
            raise ValueError("calendarEvents must be a non-empty list")
        return self._ask(
            "Analyze the following tasks and provide optimization suggestions.",
            schedule_prompt(events),
        )

    def suggest_task(self, current: CalendarEvent, others: Sequence[CalendarEvent]) -> str:
        if not others:
            raise ValueError("tasks must be a non-empty list")
        return self._ask(
            "Analyze the following tasks and provide optimization suggestions.",
            suggest_prompt(current, others),
        )

    def feedback(self, tasks: List[Task]) -> str:
        if not tasks:
            raise NotFound("No tasks found for the user.")
        return self._ask(
            "Analyze the following tasks and provide detailed feedback on areas of "
            "excellence, improvement, and motivational advice.",
            feedback_prompt(tasks),
        )

    def answer(self, tasks: List[Task], question: str) -> str:
        question = (question or "").strip()
        if not question:
            raise ValueError("A valid question must be provided.")
        if not tasks:
            raise NotFound("No tasks found for the user.")
        lowered = question.lower()
        if any(hint in lowered for hint in NAVIGATION_HINTS):
            return NAVIGATION_ANSWER
        return self._ask(
            "Analyze the tasks and answer the question based on the information provided.",
            question_prompt(tasks, question),
        )

    def suggest_focus(self, tasks: List[Task]) -> str:
        if not tasks:
            raise NotFound("No tasks found for the user.")
        return self._ask(
            "Suggest the best focus time for the tasks based on the schedule.",
            focus_prompt(tasks),
        )

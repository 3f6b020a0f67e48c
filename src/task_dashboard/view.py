from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from task_dashboard.models import Task


def day_key(value: date) -> date:
    # datetime is a date subclass but never compares equal to one
    if isinstance(value, datetime):
        return value.date()
    return date(value.year, value.month, value.day)


def same_day(left: date, right: date) -> bool:
    return day_key(left) == day_key(right)


def filter_by_date(tasks: Iterable[Task], selected_date: date | None) -> list[Task]:
    """Tasks due on ``selected_date``'s calendar day, or all tasks when unset."""
    if selected_date is None:
        return list(tasks)
    wanted = day_key(selected_date)
    return [task for task in tasks if day_key(task.due_date) == wanted]


def marked_dates(tasks: Iterable[Task]) -> set[date]:
    return {day_key(task.due_date) for task in tasks}

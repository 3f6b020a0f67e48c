from __future__ import annotations

from datetime import date, datetime

from task_dashboard.analytics import priority_distribution, tasks_per_day
from task_dashboard.models import Priority, Task


def make_task(task_id: str, due: date, priority: Priority = Priority.MEDIUM) -> Task:
    return Task(id=task_id, title="t", subtitle="s", description="d", due_date=due, priority=priority)


def test_priority_distribution_includes_zero_counts() -> None:
    tasks = [
        make_task("1", date(2024, 6, 1), Priority.HIGH),
        make_task("2", date(2024, 6, 1), Priority.HIGH),
        make_task("3", date(2024, 6, 2), Priority.LOW),
    ]
    assert priority_distribution(tasks) == {Priority.LOW: 1, Priority.MEDIUM: 0, Priority.HIGH: 2}


def test_tasks_per_day_groups_by_calendar_day_in_order() -> None:
    tasks = [
        make_task("1", datetime(2024, 6, 3, 10)),
        make_task("2", datetime(2024, 6, 1, 9)),
        make_task("3", date(2024, 6, 1)),
    ]
    counts = tasks_per_day(tasks)
    assert counts == {date(2024, 6, 1): 2, date(2024, 6, 3): 1}
    assert list(counts) == [date(2024, 6, 1), date(2024, 6, 3)]

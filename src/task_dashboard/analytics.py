from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Iterable

from task_dashboard.models import Priority, Task
from task_dashboard.view import day_key


def priority_distribution(tasks: Iterable[Task]) -> dict[Priority, int]:
    distribution = {level: 0 for level in Priority}
    for task in tasks:
        distribution[task.priority] += 1
    return distribution


def tasks_per_day(tasks: Iterable[Task]) -> dict[date, int]:
    counts = Counter(day_key(task.due_date) for task in tasks)
    return {day: counts[day] for day in sorted(counts)}

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from task_dashboard import view
from task_dashboard.models import Priority, Task
from task_dashboard.store import TaskStore


@dataclass(slots=True)
class TaskForm:
    """Draft values of the "new task" form."""

    title: str = ""
    subtitle: str = ""
    description: str = ""
    due_date: date | None = field(default_factory=date.today)
    priority: Priority = Priority.MEDIUM

    def reset(self, today: date) -> None:
        self.title = ""
        self.subtitle = ""
        self.description = ""
        self.due_date = today
        self.priority = Priority.MEDIUM

    def missing_fields(self) -> tuple[str, ...]:
        return TaskStore.validate(self.title, self.subtitle, self.description, self.due_date)


class DashboardSession:
    def __init__(
        self,
        store: TaskStore | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.store = store if store is not None else TaskStore()
        self._clock = clock
        self.form = TaskForm(due_date=clock())
        self.selected_date: date | None = None

    def submit(self) -> Task | None:
        """Create a task from the form; the form is cleared only on success."""
        task = self.store.create(
            self.form.title,
            self.form.subtitle,
            self.form.description,
            self.form.due_date,
            self.form.priority,
        )
        if task is not None:
            self.reset_form()
        return task

    def reset_form(self) -> None:
        self.form.reset(self._clock())

    def select_date(self, day: date | None) -> None:
        self.selected_date = day

    def clear_selection(self) -> None:
        self.selected_date = None

    def visible_tasks(self) -> list[Task]:
        return view.filter_by_date(self.store.all(), self.selected_date)

    def marked_dates(self) -> set[date]:
        return view.marked_dates(self.store.all())

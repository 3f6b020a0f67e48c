from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from uuid import uuid4

from task_dashboard.models import Priority, Task

logger = logging.getLogger(__name__)

TaskListener = Callable[[Task], None]


class TaskStore:
    """
    In-memory, insertion-ordered task collection for one session.

    Creation fails closed and silently: incomplete input yields None and
    leaves the collection as it was. Tasks are never updated or removed.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._listeners: list[TaskListener] = []

    def __len__(self) -> int:
        return len(self._tasks)

    @staticmethod
    def validate(
        title: str | None,
        subtitle: str | None,
        description: str | None,
        due_date: date | None,
    ) -> tuple[str, ...]:
        """Return the names of required fields that are missing or empty."""
        fields = {
            "title": title,
            "subtitle": subtitle,
            "description": description,
        }
        missing = [name for name, value in fields.items() if not isinstance(value, str) or not value]
        if not isinstance(due_date, date):
            missing.append("due_date")
        return tuple(missing)

    def create(
        self,
        title: str | None,
        subtitle: str | None,
        description: str | None,
        due_date: date | None,
        priority: Priority | str | None = Priority.MEDIUM,
    ) -> Task | None:
        missing = self.validate(title, subtitle, description, due_date)
        if missing:
            logger.debug("Task rejected missing=%s", ",".join(missing))
            return None

        task = Task(
            id=str(uuid4()),
            title=title,
            subtitle=subtitle,
            description=description,
            due_date=due_date,
            priority=Priority.parse(priority),
        )
        self._tasks.append(task)
        logger.debug(
            "Task added id=%s due=%s priority=%s total=%s",
            task.id,
            task.due_date.isoformat(),
            task.priority.value,
            len(self._tasks),
        )
        for listener in list(self._listeners):
            try:
                listener(task)
            except Exception:
                logger.exception("Task listener failed id=%s listener=%r", task.id, listener)
        return task

    def all(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """
        Call ``listener`` with every task created from now on.

        A listener that raises is logged and skipped; the task stays created.
        Returns a callable that removes the listener again; calling it twice
        is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

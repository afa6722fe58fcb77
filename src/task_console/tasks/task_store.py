# src/task_console/tasks/task_store.py

"""
In-memory task collection.

The store owns the ordered task list and the id counter:
- ids start at 1 and only ever grow (removal and clearing never reset them),
- tasks are frozen; a status change swaps in a copy at the same position,
- every failure is raised to the caller, the store catches nothing.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .errors import NotFoundError, ValidationError
from .task_models import PLACEHOLDER_DESCRIPTION, Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, name: str, description: str = "") -> Task:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Task name cannot be empty.")

        task = Task(
            id=self._next_id,
            name=name,
            description=(description or "").strip() or PLACEHOLDER_DESCRIPTION,
            status=TaskStatus.PENDING,
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task added id=%s name=%r", task.id, task.name)
        return task

    def get_task(self, task_id: int) -> Task:
        idx = self._index_of(task_id)
        if idx is None:
            raise NotFoundError(task_id)
        return self._tasks[idx]

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in insertion order."""
        return list(self._tasks)

    def remove_task(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            raise NotFoundError(task_id)
        del self._tasks[idx]
        logger.debug("Task removed id=%s", task_id)

    def update_task_status(self, task_id: int, status: TaskStatus | str) -> Task:
        """
        Set the status of one task and return the updated copy.

        The status is validated before the lookup, so an unknown value never
        reaches a stored task.
        """
        new_status = status if isinstance(status, TaskStatus) else TaskStatus.parse(status)

        idx = self._index_of(task_id)
        if idx is None:
            raise NotFoundError(task_id, f"Task with ID {task_id} not found for update.")

        updated = replace(self._tasks[idx], status=new_status)
        self._tasks[idx] = updated
        logger.debug("Task status updated id=%s status=%s", task_id, new_status.value)
        return updated

    def clear_tasks(self) -> int:
        n = len(self._tasks)
        self._tasks.clear()
        logger.debug("Tasks cleared count=%d next_id=%d", n, self._next_id)
        return n

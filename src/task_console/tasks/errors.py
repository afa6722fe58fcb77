# src/task_console/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for recoverable task operation failures."""


class ValidationError(TaskError):
    """Input failed a precondition (empty name, malformed id, unknown status)."""


class NotFoundError(TaskError):
    """No task with the referenced id exists in the store."""

    def __init__(self, task_id: int, message: str | None = None) -> None:
        self.task_id = task_id
        super().__init__(message or f"Task with ID {task_id} not found.")

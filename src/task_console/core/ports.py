# src/task_console/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the console loop and menu handlers.

Handlers depend on Protocols instead of concrete implementations,
so tests can drive the loop with scripted input and capture output.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskStatus


class TaskRepo(Protocol):
    def add_task(self, name: str, description: str = "") -> Task: ...
    def get_task(self, task_id: int) -> Task: ...
    def list_tasks(self) -> list[Task]: ...
    def remove_task(self, task_id: int) -> None: ...
    def update_task_status(self, task_id: int, status: TaskStatus | str) -> Task: ...
    def clear_tasks(self) -> int: ...
    def count_tasks(self) -> int: ...


class LineReader(Protocol):
    """Shows a prompt and returns one line of text (raises EOFError at end of input)."""
    def __call__(self, prompt: str = "", /) -> str: ...


class LineWriter(Protocol):
    def __call__(self, text: str = "", /) -> None: ...

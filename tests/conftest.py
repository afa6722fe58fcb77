# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from task_console.core.state import AppState
from task_console.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console loop.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-console-test",
        log_level="DEBUG",
        log_file=None,
        pacing_delay_seconds=0.5,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)

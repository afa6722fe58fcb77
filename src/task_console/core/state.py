# src/task_console/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .ports import TaskRepo

if TYPE_CHECKING:
    from types import SimpleNamespace

    from ..config import Settings


@dataclass(slots=True)
class AppState:
    # Tests pass a SimpleNamespace with the same fields.
    settings: Settings | SimpleNamespace
    task_store: TaskRepo

# src/task_console/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .errors import ValidationError

PLACEHOLDER_DESCRIPTION = "No description provided."


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are the exact text users type at the status prompt.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        # Exact, case-sensitive match; callers trim before passing.
        try:
            return cls(raw)
        except ValueError:
            allowed = " or ".join(f"'{s.value}'" for s in cls)
            raise ValidationError(f"Invalid status: '{raw}'. Must be {allowed}.") from None

    @property
    def icon(self) -> str:
        return "✅" if self is TaskStatus.COMPLETED else "⏳"


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    name: str
    description: str = PLACEHOLDER_DESCRIPTION
    status: TaskStatus = TaskStatus.PENDING

    @property
    def icon(self) -> str:
        return self.status.icon

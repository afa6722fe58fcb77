# src/task_console/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.errors import ValidationError
from ..tasks.task_models import Task

Prompt = Callable[[str], str]
Emitter = Callable[[str], None]
# A handler returns the reply text, or None when the loop should exit.
MenuHandler = Callable[[AppState, Prompt, Emitter], str | None]

MENU_TITLE = "--- Task Manager Menu ---"
MENU_RULE = "-------------------------"
LIST_TITLE = "--- Current Tasks ---"
LIST_RULE = "---------------------"
EMPTY_LIST_TEXT = "Your task list is empty!"

_LEADING_INT = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


def parse_task_id(raw: str) -> int:
    """Read the leading integer of `raw`; trailing text is ignored ("12abc" -> 12)."""
    m = _LEADING_INT.match(raw.strip())
    if m is None:
        raise ValidationError("Invalid ID entered.")
    return int(m.group(0))


def render_task_line(task: Task) -> str:
    return f"{task.icon} [{task.id}] {task.name} - Status: {task.status.value}"


def render_task_list(tasks: Iterable[Task]) -> str:
    lines = [LIST_TITLE]
    body = [render_task_line(t) for t in tasks]
    if not body:
        # Empty list: notice only, no closing rule.
        lines.append(EMPTY_LIST_TEXT)
        return "\n".join(lines)
    lines.extend(body)
    lines.append(LIST_RULE)
    return "\n".join(lines)


@dataclass(slots=True)
class MenuEntry:
    key: str
    label: str
    handler: MenuHandler


class MenuRegistry:
    """Numbered menu actions used by the console loop."""

    def __init__(self) -> None:
        self._entries: dict[str, MenuEntry] = {}

    def register(self, key: str, label: str, handler: MenuHandler) -> None:
        self._entries[key] = MenuEntry(key=key, label=label, handler=handler)

    @property
    def keys(self) -> list[str]:
        return list(self._entries)

    def render_menu(self) -> str:
        lines = [MENU_TITLE]
        lines.extend(f"{e.key}. {e.label}" for e in self._entries.values())
        lines.append(MENU_RULE)
        return "\n".join(lines)

    def invalid_selection_text(self) -> str:
        keys = self.keys
        if not keys:
            return "❌ Invalid selection."
        return f"❌ Invalid selection. Please choose a number between {keys[0]} and {keys[-1]}."

    def dispatch(
        self, state: AppState, choice: str, prompt: Prompt, emit: Emitter
    ) -> str | None:
        """
        Run the handler registered for `choice` (already trimmed).
        Returns the reply text, or None for the exit action.
        Task errors propagate to the caller.
        """
        entry = self._entries.get(choice)
        if entry is None:
            logger.debug("Unknown menu choice %r", choice)
            return self.invalid_selection_text()
        logger.debug("Menu choice %s (%s)", entry.key, entry.label)
        return entry.handler(state, prompt, emit)


# ---- handlers ----


def _add(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    name = prompt("Task Name: ")
    description = prompt("Task Description (Optional): ")
    task = state.task_store.add_task(name, description)
    return f"✅ Task {task.id}: '{task.name}' added successfully."


def _list(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    return render_task_list(state.task_store.list_tasks())


def _remove(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    task_id = parse_task_id(prompt("Enter Task ID to remove: "))
    state.task_store.remove_task(task_id)
    return f"🗑️ Task ID {task_id} removed."


def _update_status(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    # Show the list first so the user can pick an id.
    emit(render_task_list(state.task_store.list_tasks()))
    task_id = parse_task_id(prompt("Enter Task ID to update status: "))
    raw_status = prompt("New Status (Pending/Completed): ").strip()
    task = state.task_store.update_task_status(task_id, raw_status)
    return f"📝 Task {task.id} status updated to: {task.status.value}"


def _clear(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    state.task_store.clear_tasks()
    return "🔥 All tasks cleared."


def _exit(state: AppState, prompt: Prompt, emit: Emitter) -> None:
    return None


def build_default_registry() -> MenuRegistry:
    reg = MenuRegistry()
    reg.register("1", "Add New Task", _add)
    reg.register("2", "List All Tasks", _list)
    reg.register("3", "Remove Task by ID", _remove)
    reg.register("4", "Update Task Status", _update_status)
    reg.register("5", "Clear All Tasks", _clear)
    reg.register("6", "Exit", _exit)
    return reg


registry = build_default_registry()

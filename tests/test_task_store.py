# tests/test_task_store.py

from __future__ import annotations

import pytest

from task_console.tasks.errors import NotFoundError, ValidationError
from task_console.tasks.task_models import PLACEHOLDER_DESCRIPTION, Task, TaskStatus
from task_console.tasks.task_store import TaskStore


def test_ids_increase_from_one_and_are_never_reused(store: TaskStore) -> None:
    ids = [store.add_task(f"t{i}").id for i in range(3)]
    assert ids == [1, 2, 3]

    store.remove_task(3)
    assert store.add_task("after remove").id == 4

    store.clear_tasks()
    assert store.add_task("after clear").id == 5


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_add_rejects_blank_name(store: TaskStore, name: str) -> None:
    store.add_task("keep me")
    with pytest.raises(ValidationError, match="cannot be empty"):
        store.add_task(name, "x")
    assert [t.name for t in store.list_tasks()] == ["keep me"]
    # a rejected add does not consume an id
    assert store.add_task("next").id == 2


def test_add_trims_and_uses_placeholder_description(store: TaskStore) -> None:
    task = store.add_task("  Buy milk  ", "   ")
    assert task == Task(
        id=1, name="Buy milk", description=PLACEHOLDER_DESCRIPTION, status=TaskStatus.PENDING
    )
    assert store.add_task("Call", "  mom ").description == "mom"


def test_remove_unknown_id_leaves_store_unchanged(store: TaskStore) -> None:
    store.add_task("a")
    store.add_task("b")
    before = store.list_tasks()

    with pytest.raises(NotFoundError) as exc:
        store.remove_task(42)
    assert exc.value.task_id == 42
    assert "Task with ID 42 not found." in str(exc.value)
    assert store.list_tasks() == before


def test_remove_preserves_order_of_remaining(store: TaskStore) -> None:
    for name in ("a", "b", "c"):
        store.add_task(name)
    store.remove_task(2)
    assert [t.id for t in store.list_tasks()] == [1, 3]


@pytest.mark.parametrize("raw", ["Done", "completed", "PENDING", " Completed", ""])
def test_update_status_rejects_unknown_values(store: TaskStore, raw: str) -> None:
    store.add_task("a")
    with pytest.raises(ValidationError, match="Invalid status"):
        store.update_task_status(1, raw)
    assert store.get_task(1).status is TaskStatus.PENDING


def test_update_status_validates_before_lookup(store: TaskStore) -> None:
    # Unknown status wins over unknown id.
    with pytest.raises(ValidationError):
        store.update_task_status(99, "Done")


def test_update_status_changes_only_status(store: TaskStore) -> None:
    original = store.add_task("a", "desc")
    store.add_task("b")

    updated = store.update_task_status(1, "Completed")

    assert updated.status is TaskStatus.COMPLETED
    assert (updated.id, updated.name, updated.description) == (
        original.id,
        original.name,
        original.description,
    )
    assert [t.id for t in store.list_tasks()] == [1, 2]
    # previously returned snapshots are not mutated
    assert original.status is TaskStatus.PENDING

    assert store.update_task_status(1, TaskStatus.PENDING).status is TaskStatus.PENDING


def test_update_status_unknown_id(store: TaskStore) -> None:
    with pytest.raises(NotFoundError, match="not found for update"):
        store.update_task_status(7, "Completed")


def test_clear_is_idempotent(store: TaskStore) -> None:
    assert store.clear_tasks() == 0
    store.add_task("a")
    store.add_task("b")
    assert store.clear_tasks() == 2
    assert store.list_tasks() == []
    assert store.count_tasks() == 0


def test_list_returns_snapshot(store: TaskStore) -> None:
    store.add_task("a")
    snapshot = store.list_tasks()
    snapshot.clear()
    assert store.count_tasks() == 1


def test_end_to_end_sequence(store: TaskStore) -> None:
    store.add_task("Task A", "")
    store.add_task("Task B", "desc")
    assert store.list_tasks() == [
        Task(id=1, name="Task A", description=PLACEHOLDER_DESCRIPTION, status=TaskStatus.PENDING),
        Task(id=2, name="Task B", description="desc", status=TaskStatus.PENDING),
    ]

    store.remove_task(1)
    assert [t.id for t in store.list_tasks()] == [2]

    store.update_task_status(2, "Completed")
    assert store.list_tasks() == [
        Task(id=2, name="Task B", description="desc", status=TaskStatus.COMPLETED)
    ]


def test_status_parse_and_icon() -> None:
    assert TaskStatus.parse("Pending") is TaskStatus.PENDING
    assert TaskStatus.parse("Completed") is TaskStatus.COMPLETED
    assert TaskStatus.COMPLETED.icon == "✅"
    assert TaskStatus.PENDING.icon == "⏳"

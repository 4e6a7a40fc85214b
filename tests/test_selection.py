# tests/test_selection.py

from __future__ import annotations

from taskpad.tasks.selection import ViewSelection
from taskpad.tasks.task_models import Task
from taskpad.tasks.task_store import TaskStore


def test_open_and_close(store: TaskStore) -> None:
    task = store.create("a", "details")
    assert isinstance(task, Task)
    sel = ViewSelection()

    sel.open(task)
    assert sel.is_open
    assert sel.viewed_key == task.key
    assert sel.snapshot == task
    assert not sel.is_stale(store)

    sel.close()
    assert not sel.is_open
    assert sel.snapshot is None
    assert not sel.is_stale(store)


def test_snapshot_survives_edit_and_delete(store: TaskStore) -> None:
    task = store.create("original", "text")
    assert isinstance(task, Task)
    sel = ViewSelection()
    sel.open(task)

    store.update(task.key, "edited", "other")
    assert sel.snapshot is not None
    assert sel.snapshot.title == "original"
    assert sel.is_stale(store)

    store.delete(task.key)
    assert sel.snapshot.title == "original"
    assert sel.is_stale(store)


def test_toggle_makes_snapshot_stale(store: TaskStore) -> None:
    task = store.create("a")
    assert isinstance(task, Task)
    sel = ViewSelection()
    sel.open(task)

    store.toggle_completed(task.key)
    assert sel.is_stale(store)

# tests/test_task_store.py

from __future__ import annotations

from taskpad.tasks.task_models import StoreOutcome, Task
from taskpad.tasks.task_store import TaskStore

from .fakes import RecordingListener, photo


def test_create_appends_task_with_defaults(store: TaskStore) -> None:
    task = store.create("Buy milk", "", None)

    assert isinstance(task, Task)
    assert store.list() == (
        Task(key=task.key, title="Buy milk", description="", completed=False, media=None),
    )


def test_keys_are_unique_and_never_reused(store: TaskStore) -> None:
    keys = []
    for i in range(5):
        t = store.create(f"task {i}")
        assert isinstance(t, Task)
        keys.append(t.key)
    store.delete(keys[-1])
    again = store.create("after delete")

    assert isinstance(again, Task)
    keys.append(again.key)
    assert len(set(keys)) == len(keys)
    assert again.key != keys[-2]


def test_create_rejects_blank_title(store: TaskStore) -> None:
    assert store.create("", "d", photo()) is StoreOutcome.INVALID_INPUT
    assert store.create("   \t", "d", None) is StoreOutcome.INVALID_INPUT
    assert store.list() == ()


def test_create_keeps_title_as_entered(store: TaskStore) -> None:
    task = store.create("  padded  ")
    assert isinstance(task, Task)
    assert task.title == "  padded  "


def test_update_preserves_identity_position_and_completion(store: TaskStore) -> None:
    a = store.create("a")
    b = store.create("b", "old")
    c = store.create("c")
    assert isinstance(a, Task) and isinstance(b, Task) and isinstance(c, Task)
    store.toggle_completed(b.key)

    pic = photo()
    updated = store.update(b.key, "b2", "new", pic)

    assert isinstance(updated, Task)
    assert [t.key for t in store.list()] == [a.key, b.key, c.key]
    assert store.list()[1] == Task(key=b.key, title="b2", description="new", completed=True, media=pic)
    assert store.list()[0] == a
    assert store.list()[2] == c


def test_update_blank_title_leaves_task_unchanged(store: TaskStore) -> None:
    task = store.create("keep me", "desc")
    assert isinstance(task, Task)

    assert store.update(task.key, "  ", "changed", photo()) is StoreOutcome.INVALID_INPUT
    assert store.get(task.key) == task


def test_update_missing_key(store: TaskStore) -> None:
    assert store.update("404", "title") is StoreOutcome.NOT_FOUND
    assert store.list() == ()


def test_update_checks_title_before_key(store: TaskStore) -> None:
    assert store.update("404", "") is StoreOutcome.INVALID_INPUT


def test_delete_is_idempotent(store: TaskStore) -> None:
    a = store.create("a")
    b = store.create("b")
    assert isinstance(a, Task) and isinstance(b, Task)

    store.delete(a.key)
    after_first = store.list()
    store.delete(a.key)

    assert store.list() == after_first == (b,)


def test_toggle_is_self_inverse(store: TaskStore) -> None:
    task = store.create("flip")
    assert isinstance(task, Task)

    once = store.toggle_completed(task.key)
    twice = store.toggle_completed(task.key)

    assert isinstance(once, Task) and once.completed is True
    assert isinstance(twice, Task) and twice.completed is False
    assert store.get(task.key) == task


def test_delete_then_toggle_reports_not_found(store: TaskStore) -> None:
    task = store.create("Buy milk")
    assert isinstance(task, Task)

    store.delete(task.key)

    assert store.toggle_completed(task.key) is StoreOutcome.NOT_FOUND
    assert store.list() == ()


def test_list_is_a_read_only_snapshot(store: TaskStore) -> None:
    store.create("a")
    snap = store.list()
    store.create("b")

    assert len(snap) == 1
    assert len(store.list()) == 2
    assert list(snap) == list(snap)


def test_media_is_shared_not_copied(store: TaskStore) -> None:
    pic = photo()
    task = store.create("with photo", "", pic)
    assert isinstance(task, Task)

    updated = store.update(task.key, "renamed", "", task.media)
    assert isinstance(updated, Task)
    assert updated.media is pic


def test_subscribers_get_snapshot_only_on_success(store: TaskStore) -> None:
    listener = RecordingListener()
    store.subscribe(listener)

    task = store.create("a")
    assert isinstance(task, Task)
    store.create("")
    store.update(task.key, "")
    store.update("404", "x")
    store.toggle_completed("404")
    store.delete("404")
    store.toggle_completed(task.key)
    store.delete(task.key)

    assert len(listener.snapshots) == 3
    assert listener.snapshots[0] == (task,)
    assert listener.snapshots[1][0].completed is True
    assert listener.snapshots[2] == ()


def test_unsubscribe_and_failing_listener(store: TaskStore) -> None:
    calls: list[int] = []

    def broken(_snapshot) -> None:
        raise RuntimeError("boom")

    store.subscribe(broken)
    unsubscribe = store.subscribe(lambda snap: calls.append(len(snap)))

    store.create("a")
    unsubscribe()
    unsubscribe()
    store.create("b")

    assert calls == [1]
    assert store.count_tasks() == 2

# src/taskpad/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from dataclasses import replace

from .task_models import MediaAttachment, StoreOutcome, Task, is_blank

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[tuple[Task, ...]], None]


class TaskStore:
    """
    In-memory ordered task collection.

    Invariants:
    - keys come from a per-store monotonic counter and are never reused
    - order is insertion order; update keeps the index, delete removes in place
    - Task objects are frozen; every mutation swaps in a new Task at the same index

    Every successful mutation publishes the new snapshot to subscribers.
    Rejected or no-op calls publish nothing.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._key_seq = itertools.count(1)
        self._listeners: list[SnapshotListener] = []
        logger.info("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _index_of(self, key: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.key == key:
                return i
        return None

    def _next_key(self) -> str:
        return str(next(self._key_seq))

    def _publish(self) -> None:
        snapshot = self.list()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Snapshot listener %r failed", listener)

    # ---- subscriptions ----

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- public API ----

    def list(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, key: str) -> Task | None:
        idx = self._index_of(key)
        return None if idx is None else self._tasks[idx]

    def count_tasks(self) -> int:
        return len(self._tasks)

    def create(
        self,
        title: str,
        description: str = "",
        media: MediaAttachment | None = None,
    ) -> Task | StoreOutcome:
        if is_blank(title):
            logger.debug("Create rejected: empty title")
            return StoreOutcome.INVALID_INPUT

        task = Task(
            key=self._next_key(),
            title=title,
            description=description or "",
            completed=False,
            media=media,
        )
        self._tasks.append(task)
        logger.debug("Task created key=%s media=%s", task.key, media is not None)
        self._publish()
        return task

    def update(
        self,
        key: str,
        title: str,
        description: str = "",
        media: MediaAttachment | None = None,
    ) -> Task | StoreOutcome:
        """
        Replace title, description and media of the task at `key`.

        `completed` and the position in the list are kept.
        An empty title is checked before the key, so a blank update
        never reports NOT_FOUND.
        """
        if is_blank(title):
            logger.debug("Update rejected key=%s: empty title", key)
            return StoreOutcome.INVALID_INPUT

        idx = self._index_of(key)
        if idx is None:
            logger.debug("Update skipped: key=%s not found", key)
            return StoreOutcome.NOT_FOUND

        task = replace(self._tasks[idx], title=title, description=description or "", media=media)
        self._tasks[idx] = task
        logger.debug("Task updated key=%s", key)
        self._publish()
        return task

    def delete(self, key: str) -> None:
        idx = self._index_of(key)
        if idx is None:
            logger.debug("Delete skipped: key=%s not found", key)
            return
        del self._tasks[idx]
        logger.debug("Task deleted key=%s", key)
        self._publish()

    def toggle_completed(self, key: str) -> Task | StoreOutcome:
        idx = self._index_of(key)
        if idx is None:
            logger.debug("Toggle skipped: key=%s not found", key)
            return StoreOutcome.NOT_FOUND

        old = self._tasks[idx]
        task = replace(old, completed=not old.completed)
        self._tasks[idx] = task
        logger.debug("Task toggled key=%s completed=%s", key, task.completed)
        self._publish()
        return task

# src/taskpad/tasks/selection.py

from __future__ import annotations

import logging

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)


class ViewSelection:
    """
    Which task is open in the detail view.

    The view keeps the snapshot taken at open() time and does not follow later
    edits or deletes. is_stale() lets a renderer flag a snapshot that no longer
    matches the store.
    """

    def __init__(self) -> None:
        self.viewed_key: str | None = None
        self.snapshot: Task | None = None

    @property
    def is_open(self) -> bool:
        return self.viewed_key is not None

    def open(self, task: Task) -> None:
        self.viewed_key = task.key
        self.snapshot = task
        logger.debug("Detail view opened key=%s", task.key)

    def close(self) -> None:
        if self.viewed_key is not None:
            logger.debug("Detail view closed key=%s", self.viewed_key)
        self.viewed_key = None
        self.snapshot = None

    def is_stale(self, store: TaskRepo) -> bool:
        if self.viewed_key is None:
            return False
        return store.get(self.viewed_key) != self.snapshot

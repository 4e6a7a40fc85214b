# src/taskpad/tasks/draft.py

"""
Draft / edit session.

Holds what the user is typing before it is committed, and decides whether
`save()` creates a new task or updates an existing one:

- target_key is None  -> Create mode, save() calls TaskStore.create
- target_key is set   -> Edit mode,   save() calls TaskStore.update

Key invariants:
- at most one pending attachment; attaching again replaces it,
- begin_edit() silently discards whatever was typed before,
- a rejected save in Create mode leaves the draft as typed,
- every other save resets the draft to empty Create mode, including a
  rejected or orphaned edit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import TaskRepo
from .task_models import MediaAttachment, StoreOutcome, Task

logger = logging.getLogger(__name__)


class DraftMode(StrEnum):
    CREATE = "create"
    EDIT = "edit"


class SaveStatus(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    REJECTED = "rejected"
    TARGET_MISSING = "target_missing"


@dataclass(frozen=True, slots=True)
class SaveResult:
    status: SaveStatus
    task: Task | None = None

    @property
    def ok(self) -> bool:
        return self.status in (SaveStatus.CREATED, SaveStatus.UPDATED)


class DraftSession:
    def __init__(self, store: TaskRepo) -> None:
        self._store = store
        self.title = ""
        self.description = ""
        self.pending_media: MediaAttachment | None = None
        self.target_key: str | None = None

    @property
    def mode(self) -> DraftMode:
        return DraftMode.CREATE if self.target_key is None else DraftMode.EDIT

    # ---- field edits ----

    def set_title(self, text: str) -> None:
        self.title = text

    def set_description(self, text: str) -> None:
        self.description = text

    def attach_media(self, media: MediaAttachment) -> None:
        if self.pending_media is not None:
            logger.debug("Replacing pending attachment %s", self.pending_media.uri)
        self.pending_media = media

    # ---- mode transitions ----

    def begin_edit(self, task: Task) -> None:
        if self.target_key is not None and self.target_key != task.key:
            logger.debug("Edit target switched %s -> %s; unsaved draft dropped", self.target_key, task.key)
        self.title = task.title
        self.description = task.description
        self.pending_media = task.media
        self.target_key = task.key

    def cancel_edit(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.title = ""
        self.description = ""
        self.pending_media = None
        self.target_key = None

    def save(self) -> SaveResult:
        target = self.target_key
        if target is None:
            outcome = self._store.create(self.title, self.description, self.pending_media)
        else:
            outcome = self._store.update(target, self.title, self.description, self.pending_media)

        if isinstance(outcome, Task):
            self._reset()
            status = SaveStatus.CREATED if target is None else SaveStatus.UPDATED
            return SaveResult(status, outcome)

        # A rejected edit still drops the draft; a rejected create keeps it.
        if target is not None:
            self._reset()

        if outcome is StoreOutcome.NOT_FOUND:
            logger.info("Edit target %s no longer exists; draft discarded", target)
            return SaveResult(SaveStatus.TARGET_MISSING)

        logger.debug("Draft save rejected (empty title) target=%s", target)
        return SaveResult(SaveStatus.REJECTED)

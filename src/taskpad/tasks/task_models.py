# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_MEDIA_NAME = "Image File"


class StoreOutcome(StrEnum):
    """
    Non-exceptional failure results returned by TaskStore operations.

    Notes:
    - both outcomes leave the collection untouched
    - callers compare with `is`, e.g. `if result is StoreOutcome.NOT_FOUND`
    """

    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True, slots=True)
class MediaAttachment:
    uri: str
    kind: str = "image"
    display_name: str | None = None


@dataclass(frozen=True, slots=True)
class Task:
    key: str
    title: str
    description: str
    completed: bool = False
    media: MediaAttachment | None = None


def is_blank(text: str | None) -> bool:
    return not text or not text.strip()

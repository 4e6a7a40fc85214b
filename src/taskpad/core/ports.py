# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the picker and the task store swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import MediaAttachment, StoreOutcome, Task


class MediaPicker(Protocol):
    """
    Photo picker boundary.

    Returns one image attachment, or None when the user cancels.
    Single-shot: each call is an independent pick.
    """

    async def pick_image(self) -> MediaAttachment | None: ...


class TaskRepo(Protocol):
    def list(self) -> tuple[Task, ...]: ...
    def get(self, key: str) -> Task | None: ...
    def count_tasks(self) -> int: ...

    def create(
            self,
            title: str,
            description: str = "",
            media: MediaAttachment | None = None,
    ) -> Task | StoreOutcome: ...

    def update(
            self,
            key: str,
            title: str,
            description: str = "",
            media: MediaAttachment | None = None,
    ) -> Task | StoreOutcome: ...

    def delete(self, key: str) -> None: ...
    def toggle_completed(self, key: str) -> Task | StoreOutcome: ...

    def subscribe(
            self, listener: Callable[[tuple[Task, ...]], None]
    ) -> Callable[[], None]: ...

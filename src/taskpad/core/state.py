# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.draft import DraftSession
from ..tasks.selection import ViewSelection
from ..tasks.task_store import TaskStore
from .ports import MediaPicker


@dataclass
class AppState:
    """
    Everything the running app owns, in one place.

    Connectors get this object and only go through the operations of
    task_store / draft / selection; nothing is kept in module globals.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: Any

    task_store: TaskStore
    draft: DraftSession
    selection: ViewSelection
    picker: MediaPicker

    dark_mode: bool = False
    color_output: bool = False

# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (store/draft/selection/picker).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_picker import ConsoleMediaPicker
from ..core.ports import MediaPicker
from ..core.state import AppState
from ..tasks.draft import DraftSession
from ..tasks.selection import ViewSelection
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, picker: MediaPicker | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the picker) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if picker is None:
        picker = ConsoleMediaPicker(base_dir=getattr(settings, "media_dir", None))

    store = TaskStore()
    state = AppState(
        settings=settings,
        task_store=store,
        draft=DraftSession(store),
        selection=ViewSelection(),
        picker=picker,
        dark_mode=bool(getattr(settings, "dark_mode", False)),
    )
    logger.debug("AppState created (dark_mode=%s)", state.dark_mode)
    return state

# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.state import AppState
from taskpad.tasks.draft import DraftSession
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeMediaPicker


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        media_dir=tmp_path,
        console_enabled=False,
        dark_mode=False,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def draft(store: TaskStore) -> DraftSession:
    return DraftSession(store)


@pytest.fixture()
def picker() -> FakeMediaPicker:
    return FakeMediaPicker()


@pytest.fixture()
def state(settings: SimpleNamespace, picker: FakeMediaPicker) -> AppState:
    """AppState wired through the real composition root, with a scripted picker."""
    return create_initial_state(settings=settings, picker=picker)


@pytest.fixture()
def image_file(tmp_path: Path) -> Path:
    path = tmp_path / "cat.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n")
    return path

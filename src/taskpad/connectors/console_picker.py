# src/taskpad/connectors/console_picker.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from ..tasks.task_api import media_from_path
from ..tasks.task_models import MediaAttachment

logger = logging.getLogger(__name__)

PROMPT = "Photo path (empty to cancel): "


class ConsoleMediaPicker:
    """
    MediaPicker for the console: asks for a local image path.

    Empty input, a missing file or a non-image file all count as "cancelled".
    The blocking prompt runs in a worker thread so the event loop stays free.
    """

    def __init__(
        self,
        *,
        base_dir: str | Path | None = None,
        input_fn: Callable[[str], str] = input,
    ) -> None:
        self._base_dir = base_dir
        self._input = input_fn

    async def pick_image(self) -> MediaAttachment | None:
        try:
            raw = await asyncio.to_thread(self._input, PROMPT)
        except (EOFError, KeyboardInterrupt):
            logger.info("Photo picker interrupted.")
            return None
        return media_from_path(raw, base_dir=self._base_dir)

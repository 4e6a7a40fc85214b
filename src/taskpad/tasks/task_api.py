# src/taskpad/tasks/task_api.py

from __future__ import annotations

import logging
from pathlib import Path

from ..core.state import AppState
from .task_models import DEFAULT_MEDIA_NAME, MediaAttachment

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp", ".heic", ".heif"})


def media_from_path(raw: str, *, base_dir: str | Path | None = None) -> MediaAttachment | None:
    """
    Build an image attachment from a local file path.

    Relative paths are resolved against base_dir. Returns None (treated as a
    cancelled pick) when the path is empty, missing, or not an image.
    """
    raw = (raw or "").strip().strip('"').strip("'")
    if not raw:
        return None

    path = Path(raw).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir).expanduser() / path

    if path.suffix.lower() not in IMAGE_SUFFIXES:
        logger.warning("Not an image file: %s", path)
        return None
    if not path.is_file():
        logger.warning("Image file not found: %s", path)
        return None

    resolved = path.resolve()
    return MediaAttachment(
        uri=resolved.as_uri(),
        kind="image",
        display_name=resolved.name or DEFAULT_MEDIA_NAME,
    )


async def attach_picked_media(state: AppState) -> bool:
    """
    Run the picker and attach the result to the draft.

    Returns True if a new attachment was set. On cancel the pending
    attachment is left as it was.
    """
    media = await state.picker.pick_image()
    if media is None:
        logger.debug("Photo pick cancelled; pending attachment unchanged")
        return False

    state.draft.attach_media(media)
    logger.info("Photo attached to draft: %s", media.display_name or media.uri)
    return True

# src/taskpad/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """Console gets every taskpad.* record; anything else only at ERROR and above."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("taskpad."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskpad",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """Send filtered records to stderr and everything to <log_dir>/taskpad.log."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "taskpad.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Handlers from an earlier call would print every record twice.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # warnings.warn(...) lands in the file log as py.warnings.
    logging.captureWarnings(True)

# src/taskpad/connectors/console_view.py

"""
Plain-text rendering of the task list, the draft panel and the detail view.

Pure functions: they read state and return strings. ANSI colors are applied
only when `color=True`; tests render without them.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.draft import DraftMode, DraftSession
from ..tasks.selection import ViewSelection
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

RESET = "\033[0m"

# role -> ANSI SGR code
LIGHT_PALETTE: dict[str, str] = {
    "header": "1;30",
    "muted": "90",
    "accent": "35",
    "ok": "32",
    "done": "9;37",
    "warn": "33",
}

DARK_PALETTE: dict[str, str] = {
    "header": "1;97",
    "muted": "37",
    "accent": "95",
    "ok": "92",
    "done": "9;90",
    "warn": "93",
}


def _paint(text: str, role: str, *, dark: bool, color: bool) -> str:
    if not color:
        return text
    palette = DARK_PALETTE if dark else LIGHT_PALETTE
    return f"\033[{palette[role]}m{text}{RESET}"


def _first_lines(text: str, n: int = 2) -> str:
    lines = text.splitlines()
    out = " / ".join(lines[:n])
    return out + " ..." if len(lines) > n else out


def render_task_row(task: Task, *, dark: bool = False, color: bool = False) -> str:
    box = "[x]" if task.completed else "[ ]"
    title = _paint(task.title, "done" if task.completed else "header", dark=dark, color=color)
    row = f"{task.key:>3}. {box} {title}"
    if task.description:
        row += "\n       " + _paint(_first_lines(task.description), "muted", dark=dark, color=color)
    if task.media is not None:
        row += "\n       " + _paint("Image attached", "accent", dark=dark, color=color)
    return row


def render_task_list(tasks: Iterable[Task], *, dark: bool = False, color: bool = False) -> str:
    rows = [render_task_row(t, dark=dark, color=color) for t in tasks]
    header = _paint("My Tasks", "header", dark=dark, color=color)
    if not rows:
        return f"{header}\n  (no tasks yet)"
    return header + "\n" + "\n".join(rows)


def render_draft(draft: DraftSession, *, dark: bool = False, color: bool = False) -> str:
    action = "Add" if draft.mode is DraftMode.CREATE else "Save"
    lines = [_paint(f"Draft [{action}]", "header", dark=dark, color=color)]
    if draft.mode is DraftMode.EDIT:
        lines.append(f"  editing: #{draft.target_key}")
    lines.append(f"  title: {draft.title}")
    lines.append(f"  description: {draft.description}")
    if draft.pending_media is not None:
        lines.append("  " + _paint("Attached: Image", "ok", dark=dark, color=color))
    return "\n".join(lines)


def render_detail(
    selection: ViewSelection,
    store: TaskStore | None = None,
    *,
    dark: bool = False,
    color: bool = False,
) -> str:
    task = selection.snapshot
    if task is None:
        return "No task is open."

    lines = [_paint("Task Details", "header", dark=dark, color=color)]
    if store is not None and selection.is_stale(store):
        note = "(deleted since opened)" if store.get(task.key) is None else "(changed since opened)"
        lines.append(_paint(note, "warn", dark=dark, color=color))
    lines.append(task.title)
    lines.append(task.description or "No description provided.")
    if task.media is not None and task.media.kind == "image":
        lines.append(_paint("Attached Photo:", "muted", dark=dark, color=color))
        label = task.media.display_name or task.media.uri
        lines.append(f"  {label} <{task.media.uri}>")
    return "\n".join(lines)

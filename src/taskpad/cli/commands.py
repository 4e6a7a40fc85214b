# src/taskpad/cli/commands.py

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.console_view import render_detail, render_draft, render_task_list
from ..core.state import AppState
from ..tasks.draft import DraftMode, SaveStatus
from ..tasks.task_api import attach_picked_media, media_from_path
from ..tasks.task_models import StoreOutcome

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /save, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        """raw_args: pass the untouched text after the command name as a single arg."""
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        names = [key, *(a.lower() for a in aliases)]
        for alias in names[1:]:
            self._handlers[alias] = handler
        if raw_args:
            self._raw.update(names)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        body = line[1:]
        parts = body.split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        if name in self._raw:
            rest = body.lstrip()[len(parts[0]) :]
            # Drop the one separator after the name; keep the rest as typed.
            rest = rest[1:] if rest[:1].isspace() else rest
            args = [rest] if rest else []

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Plain text (without /) sets the draft title.")
        return "\n".join(lines)


registry = CommandRegistry()


def _key_arg(args: list[str]) -> str | None:
    if not args:
        return None
    return args[0].lstrip("#") or None


def _view_opts(state: AppState) -> dict[str, bool]:
    return {"dark": state.dark_mode, "color": state.color_output}


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list()
    done = sum(1 for t in tasks if t.completed)
    mode = "EDIT #" + str(state.draft.target_key) if state.draft.mode is DraftMode.EDIT else "CREATE"
    viewing = f"#{state.selection.viewed_key}" if state.selection.is_open else "none"
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({done} completed)\n"
        f"  Draft mode: {mode}\n"
        f"  Detail view: {viewing}\n"
        f"  Theme: {'dark' if state.dark_mode else 'light'}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(state.task_store.list(), **_view_opts(state))


def cmd_title(state: AppState, args: list[str]) -> str:
    state.draft.set_title(args[0] if args else "")
    return render_draft(state.draft, **_view_opts(state))


def cmd_desc(state: AppState, args: list[str]) -> str:
    state.draft.set_description(args[0] if args else "")
    return render_draft(state.draft, **_view_opts(state))


def cmd_draft(state: AppState, args: list[str]) -> str:
    return render_draft(state.draft, **_view_opts(state))


def cmd_photo(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /photo         -> ask for an image path
    /photo <path>  -> attach the image at <path>
    """
    if args:
        base_dir = getattr(state.settings, "media_dir", None)
        media = media_from_path(args[0], base_dir=base_dir)
        if media is None:
            return "Could not attach photo (missing file or not an image)."
        state.draft.attach_media(media)
        return f"Attached: {media.display_name}"

    if emit:
        emit("Opening photo picker...")
    attached = asyncio.run(attach_picked_media(state))
    if not attached:
        return "No photo selected."
    media = state.draft.pending_media
    return f"Attached: {media.display_name if media else 'Image'}"


def cmd_save(state: AppState, args: list[str]) -> str:
    target = state.draft.target_key
    result = state.draft.save()

    if result.status is SaveStatus.CREATED and result.task is not None:
        return f"Task #{result.task.key} added."
    if result.status is SaveStatus.UPDATED and result.task is not None:
        return f"Task #{result.task.key} saved."
    if result.status is SaveStatus.TARGET_MISSING:
        return f"Task #{target} no longer exists; draft discarded."
    return "Title is empty; nothing saved."


def cmd_edit(state: AppState, args: list[str]) -> str:
    key = _key_arg(args)
    if key is None:
        return "Usage: /edit <key>"
    task = state.task_store.get(key)
    if task is None:
        return f"No task #{key}."
    state.draft.begin_edit(task)
    return render_draft(state.draft, **_view_opts(state))


def cmd_cancel(state: AppState, args: list[str]) -> str:
    state.draft.cancel_edit()
    return "Draft cleared."


def cmd_done(state: AppState, args: list[str]) -> str:
    key = _key_arg(args)
    if key is None:
        return "Usage: /done <key>"
    result = state.task_store.toggle_completed(key)
    if result is StoreOutcome.NOT_FOUND:
        return f"No task #{key}."
    return f"Task #{key} marked {'done' if result.completed else 'not done'}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    key = _key_arg(args)
    if key is None:
        return "Usage: /delete <key>"
    state.task_store.delete(key)
    return f"Task #{key} deleted."


def cmd_open(state: AppState, args: list[str]) -> str:
    key = _key_arg(args)
    if key is None:
        if state.selection.is_open:
            return render_detail(state.selection, state.task_store, **_view_opts(state))
        return "Usage: /open <key>"
    task = state.task_store.get(key)
    if task is None:
        return f"No task #{key}."
    state.selection.open(task)
    return render_detail(state.selection, state.task_store, **_view_opts(state))


def cmd_close(state: AppState, args: list[str]) -> str:
    state.selection.close()
    return "Detail view closed."


def cmd_theme(state: AppState, args: list[str]) -> str:
    """
    /theme            -> toggle light/dark
    /theme light|dark -> set explicitly
    """
    if args and args[0].lower() in ("light", "dark"):
        state.dark_mode = args[0].lower() == "dark"
    elif args:
        return "Usage: /theme [light|dark]"
    else:
        state.dark_mode = not state.dark_mode
    return f"Theme: {'dark' if state.dark_mode else 'light'}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task count, draft mode and theme.")
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("title", cmd_title, help_text="Set the draft title: /title <text>.", raw_args=True)
registry.register(
    "desc", cmd_desc, help_text="Set the draft description: /desc <text>.", raw_args=True
)
registry.register("draft", cmd_draft, help_text="Show the current draft.")
registry.register(
    "photo", cmd_photo, help_text="Attach a photo to the draft: /photo [path].", raw_args=True
)
registry.register("save", cmd_save, help_text="Add the draft as a task, or save the edit.", aliases=["add"])
registry.register("edit", cmd_edit, help_text="Load a task into the draft: /edit <key>.")
registry.register("cancel", cmd_cancel, help_text="Discard the draft and leave edit mode.")
registry.register("done", cmd_done, help_text="Toggle completion: /done <key>.", aliases=["toggle"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <key>.", aliases=["rm", "del"])
registry.register("open", cmd_open, help_text="Open the detail view: /open <key>.", aliases=["view"])
registry.register("close", cmd_close, help_text="Close the detail view.")
registry.register("theme", cmd_theme, help_text="Switch theme: /theme [light|dark].")

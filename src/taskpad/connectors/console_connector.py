# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import Task
from .console_view import render_draft, render_task_list

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Route one line of console input.

    Slash commands go to the registry; any other text becomes the draft title.
    Returns the text to print, or None when there is nothing to show.
    """
    line = line.strip()
    if not line:
        return None

    def emit(text: str) -> None:
        # Immediate user-visible feedback before a blocking prompt (e.g. the photo picker)
        print(f"[{_ts_local()}] {text}", flush=True)

    try:
        cmd_response = command_registry.handle(state, line, emit=emit)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if cmd_response is not None:
        return cmd_response

    state.draft.set_title(line)
    return render_draft(state.draft, dark=state.dark_mode, color=state.color_output)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))

    state.color_output = sys.stdout.isatty()

    def on_snapshot(tasks: tuple[Task, ...]) -> None:
        print(render_task_list(tasks, dark=state.dark_mode, color=state.color_output))

    unsubscribe = state.task_store.subscribe(on_snapshot)

    _print_ts(f"[{app_name}] Type a title, then /save. Use /help for commands. Use /exit to quit.\n")

    try:
        while True:
            try:
                user_input = input(">>> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            reply = handle_line(state, user_input)
            if reply is not None:
                print(f"[{_ts_local()}] {reply}")
    finally:
        unsubscribe()

    logger.info("Console connector finished.")

# src/flowlist/connectors/console_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import shutil
import threading
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import parse_task_fields, render_task_list
from ..core.state import AppState
from ..tasks.task_api import create_task
from ..tasks.task_models import Task
from ..visuals.celebration import Bounds

logger = logging.getLogger(__name__)

LineReader = Callable[[str], str]

_EXIT_WORDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _refresh_canvas(state: AppState) -> None:
    size = shutil.get_terminal_size((80, 24))
    state.canvas = Bounds(width=float(size.columns), height=float(size.lines))


async def _read(read_line: LineReader, prompt: str) -> str | None:
    """
    Read one line off the loop thread so timers keep firing meanwhile. None means EOF.

    The reader runs in a daemon thread that nothing joins, so Ctrl+C can end
    the loop while input() is still blocked.
    """
    loop = asyncio.get_running_loop()
    result: asyncio.Future[str] = loop.create_future()

    def deliver(line: str | None, exc: Exception | None) -> None:
        if result.done():
            return
        if exc is not None:
            result.set_exception(exc)
        else:
            result.set_result(line or "")

    def reader() -> None:
        try:
            line = read_line(prompt)
        except Exception as e:
            outcome: tuple[str | None, Exception | None] = (None, e)
        else:
            outcome = (line, None)
        # The loop may already be closed if the app shut down meanwhile.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(deliver, *outcome)

    threading.Thread(target=reader, name="console-reader", daemon=True).start()
    try:
        return await result
    except EOFError:
        return None


async def run_welcome(state: AppState, *, read_line: LineReader = input) -> bool:
    """
    Show the welcome surface until the user presses Enter.

    Returns False if the input closed (EOF) before the user got past it.
    """
    cycler = state.welcome_cycler
    if cycler is None:
        return True

    app_name = str(getattr(state.settings, "app_name", "FlowList"))
    cycler.start()
    try:
        print(f"\n  {app_name}\n  Organize your day, one task at a time.\n")
        line = await _read(read_line, "Press Enter to start... ")
        return line is not None
    finally:
        # Leaving the welcome surface tears its timer down.
        await cycler.close()


async def run_console_loop(state: AppState, *, read_line: LineReader = input) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task title to add it. Use /help for commands. Use /exit to quit.\n")

    changed: list[tuple[Task, ...]] = []
    unsubscribe = state.task_store.subscribe(changed.append)

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    state.main_cycler.start()
    try:
        while True:
            user_input = await _read(read_line, ">>> ")
            if user_input is None:
                logger.info("Console EOF received, exiting.")
                break

            user_input = user_input.strip()
            if not user_input:
                continue

            if user_input.lower() in _EXIT_WORDS:
                logger.info("Console exit command received.")
                break

            _refresh_canvas(state)

            try:
                reply = command_registry.handle(state, user_input, emit=emit)
                if reply is None:
                    # Plain text is a quick add, with the same fields as /add.
                    title, description, priority, category = parse_task_fields(user_input.split())
                    create_task(state, title, description or "", priority=priority, category=category)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is not None:
                _print_ts(reply)

            if changed:
                print(render_task_list(changed[-1]))
                changed.clear()
    finally:
        unsubscribe()

    logger.info("Console connector finished.")

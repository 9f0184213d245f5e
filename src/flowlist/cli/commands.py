# src/flowlist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import complete_toggle, create_task, edit_task
from ..tasks.task_models import Task, TaskCategory, TaskPriority

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

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

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
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
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def _fmt_ts(ts: datetime | None) -> str:
    if ts is None:
        return "-"
    return ts.astimezone().strftime("%Y-%m-%d %H:%M")


def render_task_line(position: int, task: Task) -> str:
    mark = "x" if task.is_completed else " "
    style = task.category.style
    return f"{position:>2}. [{mark}] {task.title}  ({task.priority.value}, {task.category.value}:{style.icon})"


def render_task_list(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "No tasks yet. Add one with /add <title>."
    pending = sum(1 for t in tasks if not t.is_completed)
    lines = [f"Tasks: {pending} pending, {len(tasks) - pending} completed"]
    lines.extend(render_task_line(i, t) for i, t in enumerate(tasks, start=1))
    return "\n".join(lines)


def render_task_detail(task: Task) -> str:
    style = task.category.style
    lines = [
        f"{task.title}",
        f"  Status:    {'completed' if task.is_completed else 'pending'}",
        f"  Priority:  {task.priority.value} ({task.priority.accent})",
        f"  Category:  {task.category.value} ({style.icon}, {' -> '.join(style.gradient)})",
        f"  Created:   {_fmt_ts(task.created_at)}",
    ]
    if task.completed_at is not None:
        lines.append(f"  Completed: {_fmt_ts(task.completed_at)}")
    if task.description:
        lines.append(f"  Notes:     {task.description}")
    return "\n".join(lines)


# ---- argument helpers ----


def resolve_task(state: AppState, ref: str) -> Task | None:
    """Find a task by its 1-based list position or by an id prefix."""
    tasks = state.task_store.snapshot()
    if ref.isdigit():
        pos = int(ref)
        if 1 <= pos <= len(tasks):
            return tasks[pos - 1]
        return None

    ref = ref.lower()
    matches = [t for t in tasks if t.id.startswith(ref)]
    return matches[0] if len(matches) == 1 else None


def parse_task_fields(
    args: list[str],
) -> tuple[str, str | None, TaskPriority | None, TaskCategory | None]:
    """
    Split "/add" style arguments into (title, description, priority, category).

    "!high" and "#work" tokens pick priority and category; text after a
    "|" is the description (None when there is no "|").
    """
    priority: TaskPriority | None = None
    category: TaskCategory | None = None
    words: list[str] = []

    for token in args:
        if token.startswith("!") and TaskPriority.parse(token[1:]) is not None:
            priority = TaskPriority.parse(token[1:])
        elif token.startswith("#") and TaskCategory.parse(token[1:]) is not None:
            category = TaskCategory.parse(token[1:])
        else:
            words.append(token)

    text = " ".join(words)
    if "|" in text:
        title, description = text.split("|", 1)
        return title.strip(), description.strip(), priority, category
    return text.strip(), None, priority, category


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(state.task_store.snapshot())


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add Buy milk                       -> medium priority, "other" category
    /add Report | due friday !high #work
    """
    title, description, priority, category = parse_task_fields(args)
    if not create_task(state, title, description or "", priority=priority, category=category):
        return "Usage: /add <title> [| description] [!low|!medium|!high] [#work|#personal|#study|#health|#other]"
    return f"Added: {title}"


def cmd_done(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return "Usage: /done <n>"
    task = resolve_task(state, args[0])
    if task is None:
        return f"No task {args[0]}."

    if complete_toggle(state, task.id):
        if emit:
            emit("*** Well done! ***")
        return f"Completed: {task.title}"
    return f"Reopened: {task.title}"


def cmd_show(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /show <n>"
    task = resolve_task(state, args[0])
    if task is None:
        return f"No task {args[0]}."
    return render_task_detail(task)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit 2 New title
    /edit 2 | new description
    /edit 2 !low #health
    """
    if len(args) < 2:
        return "Usage: /edit <n> [title] [| description] [!priority] [#category]"
    task = resolve_task(state, args[0])
    if task is None:
        return f"No task {args[0]}."

    title, description, priority, category = parse_task_fields(args[1:])
    ok = edit_task(
        state,
        task.id,
        title=title or None,
        description=description,
        priority=priority,
        category=category,
    )
    if not ok:
        return f"Could not update task {args[0]}."
    return f"Updated: {title or task.title}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <n>"
    task = resolve_task(state, args[0])
    if task is None:
        return f"No task {args[0]}."
    state.task_store.delete(task.id)
    return f"Deleted: {task.title}"


def cmd_clear(state: AppState, args: list[str]) -> str:
    """
    /clear      -> ask for confirmation
    /clear yes  -> delete every completed task
    """
    count = state.task_store.completed_count()
    if not count:
        return "No completed tasks to clear."
    if not args or args[0].lower() not in ("yes", "y"):
        return f"Delete {count} completed task(s)? This cannot be undone. Use /clear yes to confirm."
    state.task_store.delete_completed()
    return f"Cleared {count} completed task(s)."


def cmd_theme(state: AppState, args: list[str]) -> str:
    cycler = state.main_cycler
    cycler.advance()
    return f"Background: {cycler.current.name} ({cycler.index + 1}/{len(cycler.palette)})"


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    cycler = state.main_cycler
    return (
        "Status:\n"
        f"  Pending: {store.pending_count()}\n"
        f"  Completed: {store.completed_count()}\n"
        f"  Background: {cycler.current.name} (every {cycler.interval_seconds:.1f}s)\n"
        f"  Celebration: {'showing' if state.celebration.visible else 'idle'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks, newest first.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title> [| description] [!priority] [#category].")
registry.register("done", cmd_done, help_text="Toggle completion: /done <n>.", aliases=["toggle"])
registry.register("show", cmd_show, help_text="Show task details: /show <n>.")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <n> [title] [| description] [!priority] [#category].")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <n>.", aliases=["del"])
registry.register("clear", cmd_clear, help_text="Delete all completed tasks (asks first): /clear yes.")
registry.register("theme", cmd_theme, help_text="Switch to the next background gradient.")
registry.register("status", cmd_status, help_text="Show counts and ambient state.")

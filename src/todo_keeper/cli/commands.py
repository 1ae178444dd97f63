# src/todo_keeper/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.state import AppState, EditDraft
from ..tasks.dates import NO_DUE_DATE, parse_date
from ..tasks.errors import NotFoundError, TodoError, ValidationError
from ..tasks.filters import FilterMode
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

MIN_ID_PREFIX = 4
DUE_PREFIX = "due:"


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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Engine errors (empty text, unknown task) become the reply; anything
        else propagates to the caller.
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
            return handler(state, args)
        except ValidationError:
            logger.info("Command /%s rejected: empty task text", name)
            return "Task text cannot be empty."
        except NotFoundError as e:
            logger.info("Command /%s: task %s not found", name, e.task_id)
            return "That task no longer exists."
        except TodoError as e:
            logger.warning("Command /%s failed: %s", name, e)
            return f"Failed: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


class _BadArgs(Exception):
    pass


def _split_due(args: list[str]) -> tuple[str, date | None, bool]:
    """
    Split "<text words> [due:MM/dd/yyyy]".

    Returns (text, due, due_given). "due:none" clears the date.
    """
    if args and args[-1].lower().startswith(DUE_PREFIX):
        raw = args[-1][len(DUE_PREFIX) :]
        text = " ".join(args[:-1])
        if raw.lower() in ("", "none", "-"):
            return text, None, True
        due = parse_date(raw)
        if due is None:
            raise _BadArgs(f"Invalid date {raw!r}; use MM/dd/yyyy.")
        return text, due, True
    return " ".join(args), None, False


def _resolve(state: AppState, ref: str) -> Task:
    """Find a task by its position in the last listing or by an id prefix."""
    if ref.isdigit():
        visible = state.visible or state.visible_tasks()
        n = int(ref)
        if n < 1 or n > len(visible):
            raise _BadArgs(f"No task #{n} in the current list.")
        return visible[n - 1]

    if len(ref) < MIN_ID_PREFIX:
        raise _BadArgs(f"Id prefix must be at least {MIN_ID_PREFIX} characters.")
    matches = [t for t in state.task_store.list() if t.id.startswith(ref)]
    if not matches:
        raise _BadArgs(f"No task with id starting {ref!r}.")
    if len(matches) > 1:
        raise _BadArgs(f"Id prefix {ref!r} is ambiguous.")
    return matches[0]


def _with_usage(usage: str) -> Callable[[CommandHandler], CommandHandler]:
    def wrap(handler: CommandHandler) -> CommandHandler:
        def run(state: AppState, args: list[str]) -> str:
            try:
                return handler(state, args)
            except _BadArgs as e:
                return f"{e}\nUsage: {usage}"

        return run

    return wrap


def render_tasks(state: AppState) -> str:
    tasks = state.visible_tasks()
    header = f"Tasks [{state.filter_mode.value}] ({len(tasks)} of {len(state.task_store)}):"
    if not tasks:
        return f"{header}\n  (empty)"
    lines = [header]
    for i, t in enumerate(tasks, start=1):
        mark = "x" if t.completed else " "
        status = "Completed" if t.completed else "Pending"
        lines.append(f"  {i}. [{mark}] {t.text} | {t.due_date} | {status} | {t.id[:8]}")
    return "\n".join(lines)


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tasks(state)


@_with_usage("/add <text> [due:MM/dd/yyyy]")
def cmd_add(state: AppState, args: list[str]) -> str:
    text, due, _ = _split_due(args)
    state.task_store.create(text, due)
    state.visible_tasks()
    return "Todo Added successfully"


@_with_usage("/edit <n|id>")
def cmd_edit(state: AppState, args: list[str]) -> str:
    if not args:
        raise _BadArgs("Which task?")
    task = _resolve(state, args[0])
    state.draft = EditDraft(task_id=task.id, text=task.text, due=task.due())
    return (
        f"Editing: {task.text} (due: {task.due_date}).\n"
        f"Use /save [text] [due:MM/dd/yyyy|due:none] to apply, /cancel to stop."
    )


@_with_usage("/save [text] [due:MM/dd/yyyy|due:none]")
def cmd_save(state: AppState, args: list[str]) -> str:
    draft = state.draft
    if draft is None:
        raise _BadArgs("Nothing is being edited. Use /edit first.")

    text, due, due_given = _split_due(args)
    if text:
        draft.text = text
    if due_given:
        draft.due = due

    try:
        state.task_store.update(draft.task_id, draft.text, draft.due)
    except NotFoundError:
        state.draft = None
        raise
    state.draft = None
    state.visible_tasks()
    return "Todo Updated successfully"


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if state.draft is None:
        return "Nothing is being edited."
    state.draft = None
    return "Edit cancelled."


@_with_usage("/done <n|id>")
def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        raise _BadArgs("Which task?")
    task = state.task_store.toggle_complete(_resolve(state, args[0]).id)
    state.visible_tasks()
    return f"Todo marked {task.status.value}"


@_with_usage("/rm <n|id>")
def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        raise _BadArgs("Which task?")
    task = _resolve(state, args[0])
    state.task_store.remove(task.id)
    if state.draft is not None and state.draft.task_id == task.id:
        state.draft = None
    state.visible_tasks()
    return "Todo Removed successfully"


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.task_store.clear()
    state.draft = None
    state.visible_tasks()
    return "Todo Cleared successfully"


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                       -> show current mode
    /filter All|Completed|Pending -> switch mode (unknown values mean All)
    """
    if not args:
        return f"Filter: {state.filter_mode.value}. Use /filter All|Completed|Pending."
    state.filter_mode = FilterMode.parse(args[0])
    return render_tasks(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks for the current filter.", aliases=["ls"])
registry.register(
    "add", cmd_add, help_text=f"Add a task: /add <text> [due:MM/dd/yyyy] (default: {NO_DUE_DATE})."
)
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <n|id>.")
registry.register("save", cmd_save, help_text="Apply the edit: /save [text] [due:MM/dd/yyyy|due:none].")
registry.register("cancel", cmd_cancel, help_text="Drop the current edit.")
registry.register("done", cmd_done, help_text="Toggle complete/pending: /done <n|id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Remove a task: /rm <n|id>.", aliases=["del"])
registry.register("clear", cmd_clear, help_text="Delete all tasks.")
registry.register("filter", cmd_filter, help_text="Filter: /filter All|Completed|Pending.")

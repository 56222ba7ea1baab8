"""Command dispatching: map CLI commands onto TaskStore calls."""

from dataclasses import dataclass
from typing import Callable

from task_cli import formatters
from task_cli.errors import UsageError, ValidationError
from task_cli.models import VALID_TASK_STATUSES, TaskStatus
from task_cli.store import TaskStore


@dataclass
class CommandHandler:
    """Defines how to execute a command."""

    executor: Callable[[list[str], TaskStore], str]
    usage: str = ""
    summary: str = ""


def parse_task_id(raw: str | None) -> int:
    """Convert caller-supplied id text to a task id.

    Non-numeric and non-positive ids are rejected up front instead of
    being looked up.
    """
    if raw is None or not str(raw).strip():
        raise ValidationError("id required")
    try:
        task_id = int(str(raw).strip())
    except ValueError:
        raise ValidationError(f"invalid id: {raw}") from None
    if task_id <= 0:
        raise ValidationError(f"invalid id: {raw}")
    return task_id


def _join_args(args: list[str]) -> str:
    return " ".join(str(a) for a in args)


def _single_id(args: list[str], usage: str) -> int:
    if len(args) > 1:
        raise UsageError(f"Usage: {usage}")
    return parse_task_id(args[0] if args else None)


def _exec_add(args: list[str], store: TaskStore) -> str:
    task = store.add(_join_args(args))
    return f"Task added successfully (ID: {task.id})"


def _exec_update(args: list[str], store: TaskStore) -> str:
    task_id = parse_task_id(args[0] if args else None)
    task = store.update(task_id, _join_args(args[1:]))
    return f"Task {task.id} updated successfully"


def _exec_delete(args: list[str], store: TaskStore) -> str:
    task = store.delete(_single_id(args, "delete <id>"))
    return f"Task {task.id} deleted successfully"


def _mark_executor(status: TaskStatus) -> Callable[[list[str], TaskStore], str]:
    usage = f"mark-{status.value} <id>"

    def _exec_mark(args: list[str], store: TaskStore) -> str:
        task = store.mark(_single_id(args, usage), status)
        return f"Task {task.id} marked as {task.status}"

    return _exec_mark


def _exec_list(args: list[str], store: TaskStore) -> str:
    if len(args) > 1:
        raise UsageError("Usage: list [todo|in-progress|done]")
    status_filter = args[0] if args else None
    return formatters.format_task_list(store.list(status_filter), status_filter)


def _exec_help(args: list[str], store: TaskStore) -> str:
    return render_help_text()


def render_help_text() -> str:
    """Render help text from command registry metadata."""
    width = max(len(handler.usage) for handler in COMMAND_REGISTRY.values())

    lines = [
        "Usage: task-cli [--data PATH] [--log-file PATH] <command> [args...]",
        "",
        "Available commands:",
    ]
    for handler in COMMAND_REGISTRY.values():
        lines.append(f"  {handler.usage.ljust(width)} - {handler.summary}")
    lines.append("")
    lines.append(f"Statuses: {', '.join(VALID_TASK_STATUSES)}")
    return "\n".join(lines)


COMMAND_REGISTRY = {
    "add": CommandHandler(_exec_add, usage="add <description>", summary="Add a new task"),
    "update": CommandHandler(
        _exec_update, usage="update <id> <description>", summary="Update a task"
    ),
    "delete": CommandHandler(_exec_delete, usage="delete <id>", summary="Delete a task"),
    "mark-todo": CommandHandler(
        _mark_executor(TaskStatus.TODO), usage="mark-todo <id>", summary="Mark task as todo"
    ),
    "mark-in-progress": CommandHandler(
        _mark_executor(TaskStatus.IN_PROGRESS),
        usage="mark-in-progress <id>",
        summary="Mark task as in progress",
    ),
    "mark-done": CommandHandler(
        _mark_executor(TaskStatus.DONE), usage="mark-done <id>", summary="Mark task as done"
    ),
    "list": CommandHandler(
        _exec_list, usage="list [status]", summary="List tasks, optionally by status"
    ),
    "help": CommandHandler(_exec_help, usage="help", summary="Show available commands"),
}


def execute_command(cmd: str | None, args: list[str], store: TaskStore) -> str:
    """Execute one parsed command and return user-facing text.

    Unknown or missing commands print usage without touching the store.
    """
    handler = COMMAND_REGISTRY.get(cmd or "")
    if handler is None:
        return render_help_text()
    return handler.executor(list(args), store)

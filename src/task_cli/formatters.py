"""Text formatters for CLI output."""

from task_cli.models import Task

SEPARATOR = "-" * 21


def format_task(task: Task) -> str:
    """Render one task as labeled lines followed by a separator."""
    return "\n".join(
        [
            f"ID: {task.id}",
            f"Description: {task.description}",
            f"Status: {task.status}",
            SEPARATOR,
        ]
    )


def format_task_list(tasks: list[Task], status_filter: str | None = None) -> str:
    """Render a list result; an empty result becomes a message."""
    if not tasks:
        if status_filter:
            return f"No {status_filter} tasks found"
        return "No tasks found"

    return "\n".join(format_task(task) for task in tasks)

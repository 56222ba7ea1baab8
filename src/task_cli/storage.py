"""Task persistence and persisted-structure validation."""

import json
from pathlib import Path
from typing import Any

from task_cli.errors import StorageError
from task_cli.models import Task


def parse_tasks(data: Any) -> list[Task]:
    """Validate a decoded JSON payload and build the task list."""
    if not isinstance(data, list):
        raise ValueError("Invalid tasks file structure: expected a JSON array")

    tasks: list[Task] = []
    seen_ids: set[int] = set()
    for i, raw_task in enumerate(data):
        if not isinstance(raw_task, dict):
            raise ValueError(f"Task {i} is not a valid object")
        try:
            task = Task.from_dict(raw_task)
        except ValueError as e:
            raise ValueError(f"Task {i}: {e}") from e
        if task.id in seen_ids:
            raise ValueError(f"Duplicate task id: {task.id}")
        seen_ids.add(task.id)
        tasks.append(task)

    return tasks


def load_tasks(path: str | Path) -> list[Task]:
    """Load tasks from JSON and validate structure.

    A missing file is initialized with an empty array first, so the
    caller always reads back what is on disk.
    """
    task_path = Path(path)

    if not task_path.exists():
        save_tasks(task_path, [])

    try:
        with open(task_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return parse_tasks(data)
    except json.JSONDecodeError as e:
        raise StorageError(f"Invalid JSON in tasks file: {e}") from e
    except ValueError as e:
        raise StorageError(str(e)) from e
    except OSError as e:
        raise StorageError(f"Failed to read tasks file: {task_path}: {e}") from e


def save_tasks(path: str | Path, tasks: list[Task]) -> None:
    """Save the whole task list to JSON, replacing prior content.

    The file is rewritten in place. A failure mid-write can leave it
    truncated.
    """
    task_path = Path(path)
    payload = [task.to_dict() for task in tasks]
    try:
        task_path.parent.mkdir(parents=True, exist_ok=True)

        with open(task_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise StorageError(f"Failed to save tasks file: {task_path}: {e}") from e

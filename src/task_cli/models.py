"""Typed domain models for task-cli."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping


class TaskStatus(str, Enum):
    """Task lifecycle statuses."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


VALID_TASK_STATUSES = tuple(status.value for status in TaskStatus)


def is_valid_status(value: Any) -> bool:
    """Return True when value names one of the task statuses."""
    if isinstance(value, TaskStatus):
        return True
    return isinstance(value, str) and value in VALID_TASK_STATUSES


def _coerce_task_status(value: str) -> str:
    if isinstance(value, TaskStatus):
        return value.value
    if not is_valid_status(value):
        raise ValueError(f"Invalid task status: {value}")
    return value


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Task:
    """In-memory task model."""

    id: int
    description: str
    status: str = TaskStatus.TODO.value
    created_at: str | None = None
    updated_at: str | None = None

    def __post_init__(self) -> None:
        self.status = _coerce_task_status(self.status)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Task":
        """Create task from a dict-like payload."""
        required_fields = {"id", "description", "status"}
        missing = required_fields - set(payload.keys())
        if missing:
            raise ValueError(f"Task missing required fields: {', '.join(sorted(missing))}")

        task_id = payload["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id <= 0:
            raise ValueError(f"Task id must be a positive integer: {task_id!r}")

        description = payload["description"]
        if not isinstance(description, str):
            raise ValueError(f"Task {task_id} description must be a string")

        for key in ("created_at", "updated_at"):
            value = payload.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Task {task_id} {key} must be a string")

        return cls(
            id=task_id,
            description=description,
            status=payload["status"],
            created_at=payload.get("created_at"),
            updated_at=payload.get("updated_at"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize task to dict payload.

        Timestamps are only written when set, so files without them
        round-trip unchanged.
        """
        payload: dict[str, Any] = {
            "id": self.id,
            "description": self.description,
            "status": self.status,
        }
        if self.created_at is not None:
            payload["created_at"] = self.created_at
        if self.updated_at is not None:
            payload["updated_at"] = self.updated_at
        return payload

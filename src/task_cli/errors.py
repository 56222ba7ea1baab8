"""Custom exception hierarchy for task-cli."""


class AppError(Exception):
    """Base exception for app-specific failures."""


class UsageError(ValueError, AppError):
    """Command usage errors (wrong number of arguments)."""


class ValidationError(ValueError, AppError):
    """Caller input violates a precondition."""


class NotFoundError(LookupError, AppError):
    """A well-formed task id matches no stored task."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"no task with id {task_id}")
        self.task_id = task_id


class StorageError(AppError):
    """Storage load/save failures."""

"""Task store: CRUD operations over the persisted task list.

Every operation loads the whole list from disk, and every mutation writes
the whole list back. There is no locking: two processes working on the same
file at once can lose each other's updates (last writer wins).
"""

from pathlib import Path

from task_cli import storage
from task_cli.errors import NotFoundError, ValidationError
from task_cli.log import log_event
from task_cli.models import Task, TaskStatus, is_valid_status, utc_now_iso


def _require_description(description: str | None) -> str:
    text = (description or "").strip()
    if not text:
        raise ValidationError("description required")
    return text


def _require_task_id(task_id: int | None) -> int:
    if task_id is None:
        raise ValidationError("id required")
    if isinstance(task_id, bool) or not isinstance(task_id, int):
        raise ValidationError(f"invalid id: {task_id!r}")
    return task_id


def _find_task(tasks: list[Task], task_id: int) -> Task:
    for task in tasks:
        if task.id == task_id:
            return task
    raise NotFoundError(task_id)


class TaskStore:
    """Owner of the task list persisted at `path`."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        # Highest id seen by this store, so ids freed by delete are not
        # handed out again while the store lives.
        self._last_id = 0

    def load(self) -> list[Task]:
        """Read the persisted task list, creating an empty file if absent."""
        if not self.path.exists():
            log_event("tasks_initialized", data_file=self.path)
        tasks = storage.load_tasks(self.path)
        self._remember_ids(tasks)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Persist the full task list, replacing prior content."""
        storage.save_tasks(self.path, tasks)

    def _remember_ids(self, tasks: list[Task]) -> None:
        for task in tasks:
            if task.id > self._last_id:
                self._last_id = task.id

    def next_id(self, tasks: list[Task]) -> int:
        """Return the id the next added task gets."""
        highest = max((task.id for task in tasks), default=0)
        return max(highest, self._last_id) + 1

    def add(self, description: str) -> Task:
        """Append a new `todo` task and return it."""
        text = _require_description(description)

        tasks = self.load()
        now = utc_now_iso()
        task = Task(
            id=self.next_id(tasks),
            description=text,
            status=TaskStatus.TODO.value,
            created_at=now,
            updated_at=now,
        )
        tasks.append(task)
        self.save(tasks)
        self._last_id = task.id

        log_event("task_added", task_id=task.id, data_file=self.path)
        return task

    def update(self, task_id: int | None, description: str | None) -> Task:
        """Replace a task's description."""
        task_id = _require_task_id(task_id)
        text = _require_description(description)

        tasks = self.load()
        task = _find_task(tasks, task_id)
        task.description = text
        task.updated_at = utc_now_iso()
        self.save(tasks)

        log_event("task_updated", task_id=task_id, data_file=self.path)
        return task

    def delete(self, task_id: int | None) -> Task:
        """Remove a task, keeping the order of the rest."""
        task_id = _require_task_id(task_id)

        tasks = self.load()
        task = _find_task(tasks, task_id)
        remaining = [t for t in tasks if t.id != task_id]
        self.save(remaining)

        log_event("task_deleted", task_id=task_id, data_file=self.path)
        return task

    def mark(self, task_id: int | None, status: str | TaskStatus) -> Task:
        """Set a task's status.

        The status is checked before the id, so an invalid status is
        reported even when the id does not exist either.
        """
        if not is_valid_status(status):
            raise ValidationError("invalid status")
        status_value = TaskStatus(status).value
        task_id = _require_task_id(task_id)

        tasks = self.load()
        task = _find_task(tasks, task_id)
        task.status = status_value
        task.updated_at = utc_now_iso()
        self.save(tasks)

        log_event("task_marked", task_id=task_id, status=status_value, data_file=self.path)
        return task

    def list(self, status_filter: str | TaskStatus | None = None) -> list[Task]:
        """Return all tasks, or those with the given status, in stored order."""
        if status_filter is not None and not is_valid_status(status_filter):
            raise ValidationError("invalid filter")

        tasks = self.load()
        if status_filter is None:
            return tasks

        wanted = TaskStatus(status_filter).value
        return [task for task in tasks if task.status == wanted]

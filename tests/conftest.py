"""Pytest configuration and fixtures for task-cli tests."""

import json
import logging
import tempfile
from pathlib import Path

import pytest

from task_cli.store import TaskStore


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_tasks_data():
    """Create sample persisted task list."""
    return [
        {"id": 1, "description": "Task one", "status": "todo"},
        {"id": 2, "description": "Task two", "status": "done"},
        {"id": 4, "description": "Task four", "status": "in-progress"},
    ]


@pytest.fixture
def tasks_file(temp_dir, sample_tasks_data):
    """Write sample tasks to a JSON file and return its path."""
    path = temp_dir / "tasks.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(sample_tasks_data, f, indent=2)
    return path


@pytest.fixture
def empty_store(temp_dir):
    """Store whose backing file does not exist yet."""
    return TaskStore(temp_dir / "tasks.json")


@pytest.fixture
def sample_store(tasks_file):
    """Store seeded with sample tasks."""
    return TaskStore(tasks_file)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging setup done by CLI startup."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def frozen_time():
    """Freeze time for consistent time-dependent tests."""
    from freezegun import freeze_time
    with freeze_time("2026-02-09 10:00:00"):
        yield

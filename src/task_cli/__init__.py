"""task-cli: track short text tasks in a JSON file."""

__version__ = "1.0.0"

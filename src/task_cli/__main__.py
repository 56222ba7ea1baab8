"""Entry point for running task-cli as a module."""

from task_cli.cli import main

if __name__ == "__main__":
    main()

"""Command-line entry point for task-cli."""

import argparse
import logging
import sys
from pathlib import Path

from task_cli import dispatcher
from task_cli.errors import AppError
from task_cli.log import log_event, setup_logging
from task_cli.store import TaskStore

DEFAULT_DATA_FILE = "tasks.json"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the global options."""
    parser = argparse.ArgumentParser(
        prog="task-cli",
        description="task-cli - track short text tasks in a JSON file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  task-cli add Buy groceries
  task-cli update 1 Buy groceries and cook dinner
  task-cli mark-in-progress 1
  task-cli list done
  task-cli --data ~/tasks.json list
        """,
    )
    parser.add_argument(
        "--data", "-d",
        default=DEFAULT_DATA_FILE,
        help=f"Path to the tasks JSON file (default: ./{DEFAULT_DATA_FILE})",
    )
    parser.add_argument(
        "--log-file",
        help="Write structured logs to this file",
    )
    parser.add_argument("command", nargs="?", help="Command to run (see 'help')")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for task-cli."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file)

    store = TaskStore(Path(args.data).expanduser())

    try:
        output = dispatcher.execute_command(args.command, args.args, store)
    except AppError as e:
        log_event(
            "command_failed",
            level=logging.WARNING,
            command=args.command,
            error_type=type(e).__name__,
            error=str(e),
        )
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()

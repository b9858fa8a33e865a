"""
Tasklist TUI Application.

Main entry point for the terminal user interface.
"""

from __future__ import annotations

import argparse
import logging
import sys

from textual.app import App
from textual.binding import Binding

from tasklist.config import DEFAULT_LOG_DIR
from tasklist.logging_setup import setup_logging
from tasklist.store import TaskStore
from tasklist.views.task_list import TaskListScreen

logger = logging.getLogger(__name__)


class TaskListApp(App):
    """Main task list application."""

    TITLE = "Tasks"
    SUB_TITLE = "Add, edit, complete and search"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("ctrl+t", "toggle_dark", "Dark/Light", show=True),
    ]

    def __init__(self, store: TaskStore | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        # Volatile: the list lives only as long as the app
        self.store = store if store is not None else TaskStore()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        logger.info("Starting with %d task(s)", len(self.store))
        self.push_screen(TaskListScreen(self.store))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Single-page task list in the terminal",
    )
    parser.add_argument(
        "--log-dir",
        default=DEFAULT_LOG_DIR,
        help=f"Directory for tasklist.log (default: {DEFAULT_LOG_DIR})",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Don't write a log file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Level for the Textual devtools console",
    )
    return parser


def run(store: TaskStore | None = None) -> None:
    """Run the TUI application."""
    app = TaskListApp(store=store)
    app.run()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_dir = None if args.no_log_file else args.log_dir
    try:
        setup_logging(log_dir=log_dir, level=getattr(logging, args.log_level))
    except OSError as e:
        print(f"Error: cannot write logs to {args.log_dir}: {e}", file=sys.stderr)
        return 1

    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

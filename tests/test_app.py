"""Smoke tests for the Textual front end."""

import asyncio
import sys
from pathlib import Path

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from textual.widgets import Button, Checkbox, Input

from tasklist.app import TaskListApp, build_parser
from tasklist.config import TaskStrings
from tasklist.providers import EmptyReason
from tasklist.views.task_list import TaskListScreen
from tasklist.views.widgets import EmptySign, ErrorNotice, TaskRow


def _run(scenario) -> None:
    asyncio.run(scenario())


class TestTaskListApp:
    """Drive the app through Textual's headless test harness."""

    def test_starts_with_no_tasks_sign(self) -> None:
        async def scenario() -> None:
            app = TaskListApp()
            async with app.run_test() as pilot:
                await pilot.pause()
                assert isinstance(app.screen, TaskListScreen)
                assert app.screen.query_one(EmptySign).reason is EmptyReason.NO_TASKS

        _run(scenario)

    def test_add_then_toggle_patches_row(self) -> None:
        async def scenario() -> None:
            app = TaskListApp()
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                task_input = screen.query_one("#task-input", Input)
                task_input.focus()
                task_input.value = "Buy milk"
                await pilot.press("enter")
                await pilot.pause()

                assert [t.text for t in app.store.tasks()] == ["Buy milk"]
                rows = list(screen.query(TaskRow))
                assert len(rows) == 1
                assert task_input.value == ""

                row = rows[0]
                row.query_one(Checkbox).toggle()
                await pilot.pause()

                assert app.store.tasks()[0].completed is True
                # Same widget, patched in place
                assert screen.query_one(TaskRow) is row
                assert row.has_class("completed")

        _run(scenario)

    def test_edit_focuses_full_text_with_caret_at_end(self) -> None:
        async def scenario() -> None:
            app = TaskListApp()
            long_text = "x" * 40
            app.store.add(long_text)
            async with app.run_test() as pilot:
                await pilot.pause()
                row = app.screen.query_one(TaskRow)
                editor = row.query_one(".task-edit-input", Input)
                assert editor.value == "x" * 30 + "..."

                row.query_one(".edit-button", Button).press()
                await pilot.pause()
                await pilot.pause()

                assert row.row_view.editing is True
                assert editor.value == long_text
                assert app.focused is editor
                assert editor.cursor_position == len(long_text)
                # Entering edit mode leaves the store alone
                assert app.store.tasks()[0].text == long_text

                await pilot.press("z", "enter")
                await pilot.pause()

                assert app.store.tasks()[0].text == long_text + "z"
                assert row.row_view.editing is False

        _run(scenario)

    def test_duplicate_add_shows_notice(self) -> None:
        async def scenario() -> None:
            app = TaskListApp()
            app.store.add("a")
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                screen.controller.handle_add("a")
                await pilot.pause()

                assert screen.query_one(ErrorNotice).notice == TaskStrings.DUPLICATE_TASK_ERROR
                assert len(app.store) == 1

        _run(scenario)


class TestBuildParser:
    """Tests for command line options."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.no_log_file is False
        assert args.log_level == "INFO"

    def test_no_log_file(self) -> None:
        args = build_parser().parse_args(["--no-log-file", "--log-level", "DEBUG"])
        assert args.no_log_file is True
        assert args.log_level == "DEBUG"

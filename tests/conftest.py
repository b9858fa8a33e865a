"""Shared fixtures: a store and a recording RenderTarget."""

import sys
from pathlib import Path

import pytest

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from tasklist.controller import TaskListController  # noqa: E402
from tasklist.providers import EmptyReason, RowView  # noqa: E402
from tasklist.store import TaskStore  # noqa: E402
from tasklist.sync import ViewSynchronizer  # noqa: E402


class FakeRenderTarget:
    """RenderTarget that keeps rows in memory and records every call."""

    def __init__(self) -> None:
        self.rows: dict[int, RowView] = {}
        self.order: list[int] = []
        self.empty_reason: EmptyReason | None = None
        self.progress: tuple[float, str] | None = None
        self.counter: tuple[str, str] | None = None
        self.error: str | None = None
        self.focused: int | None = None
        self.calls: list[str] = []

    def _record(self, name: str) -> None:
        self.calls.append(name)

    def count(self, name: str) -> int:
        return self.calls.count(name)

    def reset_calls(self) -> None:
        self.calls.clear()

    @property
    def shown(self) -> list[RowView]:
        return [self.rows[task_id] for task_id in self.order]

    def clear_rows(self) -> None:
        self._record("clear_rows")
        self.rows.clear()
        self.order.clear()

    def append_row(self, row: RowView) -> None:
        self._record("append_row")
        self.rows[row.task_id] = row
        self.order.append(row.task_id)

    def replace_row(self, task_id: int, row: RowView) -> None:
        self._record("replace_row")
        assert task_id in self.rows, f"row {task_id} is not rendered"
        self.rows[task_id] = row

    def show_empty_sign(self, reason: EmptyReason) -> None:
        self._record("show_empty_sign")
        self.empty_reason = reason

    def clear_empty_sign(self) -> None:
        self._record("clear_empty_sign")
        self.empty_reason = None

    def set_progress(self, ratio: float, label: str) -> None:
        self._record("set_progress")
        self.progress = (ratio, label)

    def set_counter(self, label: str, color: str) -> None:
        self._record("set_counter")
        self.counter = (label, color)

    def show_error(self, message: str) -> None:
        self._record("show_error")
        self.error = message

    def clear_error(self) -> None:
        self._record("clear_error")
        self.error = None

    def focus_row_editor(self, task_id: int) -> None:
        self._record("focus_row_editor")
        self.focused = task_id

    def scroll_to_bottom(self) -> None:
        self._record("scroll_to_bottom")

    def reset_input(self) -> None:
        self._record("reset_input")


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def target() -> FakeRenderTarget:
    return FakeRenderTarget()


@pytest.fixture
def sync(store: TaskStore, target: FakeRenderTarget) -> ViewSynchronizer:
    return ViewSynchronizer(store, target)


@pytest.fixture
def controller(store: TaskStore, sync: ViewSynchronizer) -> TaskListController:
    ctl = TaskListController(store, sync)
    ctl.start()
    return ctl

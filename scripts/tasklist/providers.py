"""
Render-side interfaces for the task list.

Protocols define what the synchronizer needs from a view; implementations
can be swapped for testing (a recording fake) or for the Textual screen.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from tasklist.config import DISPLAY_TRUNCATE, TaskStrings
from tasklist.store import Task


class EmptyReason(Enum):
    """Why the list has no rows."""

    NO_TASKS = "no_tasks"
    NO_SEARCH_RESULTS = "no_search_results"


def empty_message(reason: EmptyReason) -> str:
    if reason is EmptyReason.NO_TASKS:
        return TaskStrings.NO_TASKS
    if reason is EmptyReason.NO_SEARCH_RESULTS:
        return TaskStrings.NO_RESULTS
    raise ValueError(f"Unsupported empty reason: {reason!r}")


def display_text(text: str, limit: int = DISPLAY_TRUNCATE) -> str:
    """Shorten text for display mode."""
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


@dataclass(frozen=True)
class RowView:
    """Immutable snapshot of what one row should show."""

    task_id: int
    text: str
    completed: bool
    editing: bool = False

    @classmethod
    def from_task(cls, task: Task, editing: bool = False) -> "RowView":
        return cls(
            task_id=task.id,
            text=task.text,
            completed=task.completed,
            editing=editing,
        )

    @property
    def shown_text(self) -> str:
        """Full text while editing, truncated otherwise."""
        return self.text if self.editing else display_text(self.text)


class RenderTarget(Protocol):
    """Protocol for the on-screen representation of the list.

    Rows are addressed by task id, never by position.
    """

    def clear_rows(self) -> None:
        """Remove every rendered row."""
        ...

    def append_row(self, row: RowView) -> None:
        """Add a row at the end of the list."""
        ...

    def replace_row(self, task_id: int, row: RowView) -> None:
        """Rebuild the row for task_id in place."""
        ...

    def show_empty_sign(self, reason: EmptyReason) -> None:
        ...

    def clear_empty_sign(self) -> None:
        ...

    def set_progress(self, ratio: float, label: str) -> None:
        """Update progress bar (ratio in percent) and its label."""
        ...

    def set_counter(self, label: str, color: str) -> None:
        ...

    def show_error(self, message: str) -> None:
        """Replace the single error notice."""
        ...

    def clear_error(self) -> None:
        ...

    def focus_row_editor(self, task_id: int) -> None:
        """Focus the row's text input with the caret at the end."""
        ...

    def scroll_to_bottom(self) -> None:
        ...

    def reset_input(self) -> None:
        """Clear and focus the add/search input."""
        ...

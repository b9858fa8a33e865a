"""
View Synchronizer - keeps a RenderTarget consistent with a TaskStore.

Two refresh strategies:
- render_all: discard every row and rebuild from a task sequence
- render_row: patch one row in place, addressed by task id

Row edit state lives here, keyed by task id, so patching one row never
disturbs another row that is mid-edit.
"""

from __future__ import annotations

import logging
from typing import Iterable

from tasklist.config import COUNTER_COLOR, COUNTER_WARNING_COLOR, MAX_TASK_LENGTH
from tasklist.providers import EmptyReason, RenderTarget, RowView
from tasklist.store import ErrorKind, Task, TaskStore, error_message

logger = logging.getLogger(__name__)


class ViewSynchronizer:
    """Reads the store and drives the render target. Never mutates tasks
    except through TaskStore.edit on an edit commit."""

    def __init__(self, store: TaskStore, target: RenderTarget) -> None:
        self._store = store
        self._target = target
        self._rendered: list[int] = []
        self._editing: set[int] = set()

    @property
    def rendered_ids(self) -> list[int]:
        """Task ids of the currently rendered sequence, in order."""
        return list(self._rendered)

    @property
    def editing_ids(self) -> frozenset[int]:
        return frozenset(self._editing)

    def is_editing(self, task_id: int) -> bool:
        return task_id in self._editing

    # -------------------- list rendering --------------------

    def render_all(self, tasks: Iterable[Task] | None = None, *, is_search: bool = False) -> None:
        """Full rebuild. tasks=None renders the whole store."""
        sequence = self._store.tasks() if tasks is None else list(tasks)

        self._target.clear_rows()
        self._target.clear_empty_sign()
        self._target.clear_error()
        self._rendered = []
        # Rebuilt rows start in display mode
        self._editing.clear()

        if not sequence:
            reason = EmptyReason.NO_SEARCH_RESULTS if is_search else EmptyReason.NO_TASKS
            self._target.show_empty_sign(reason)
            logger.debug("Rendered empty list (%s)", reason.name)
            return

        for task in sequence:
            self._target.append_row(RowView.from_task(task))
            self._rendered.append(task.id)
        logger.debug("Rendered %d row(s)", len(sequence))

    def render_row(self, task_id: int) -> bool:
        """
        Patch one row in display mode.

        Returns False without touching the target when the task is gone or
        is not part of the rendered sequence.
        """
        task = self._store.get(task_id)
        if task is None or task_id not in self._rendered:
            logger.debug("Skipped patch for task %d (not rendered)", task_id)
            return False

        self._editing.discard(task_id)
        self._target.replace_row(task_id, RowView.from_task(task))
        return True

    # -------------------- edit mode --------------------

    def begin_edit(self, task_id: int) -> bool:
        """Switch a row to edit mode. The store is not touched."""
        task = self._store.get(task_id)
        if task is None or task_id not in self._rendered:
            return False

        self._editing.add(task_id)
        self._target.replace_row(task_id, RowView.from_task(task, editing=True))
        self._target.focus_row_editor(task_id)
        return True

    def commit_edit(self, task_id: int, text: str) -> bool:
        """Save the row's text to the store and return the row to display mode."""
        if task_id not in self._editing:
            return False

        self._store.edit(task_id, text)
        return self.render_row(task_id)

    # -------------------- feedback --------------------

    def render_progress(self) -> None:
        progress = self._store.progress()
        self._target.set_progress(progress.ratio, progress.label)

    def render_error(self, kind: ErrorKind) -> None:
        """Show the notice for kind, replacing any previous one."""
        message = error_message(kind)
        self._target.clear_error()
        self._target.show_error(message)

    def clear_error(self) -> None:
        self._target.clear_error()

    def render_counter(self, value: str) -> None:
        length = len(value)
        self._target.set_counter(f"{length} / {MAX_TASK_LENGTH}", self._counter_color(length))
        if length >= MAX_TASK_LENGTH:
            self.render_error(ErrorKind.EXCEED)
        else:
            self._target.clear_error()

    @staticmethod
    def _counter_color(length: int) -> str:
        return COUNTER_WARNING_COLOR if length >= MAX_TASK_LENGTH else COUNTER_COLOR

    def reset_input(self) -> None:
        """Clear the add input and its counter."""
        self._target.reset_input()
        self.render_counter("")

    def scroll_to_bottom(self) -> None:
        self._target.scroll_to_bottom()

"""
Event handlers for the task list.

Each handler runs to completion for one user interaction: validate,
mutate the store, then pick a full rebuild or a single-row patch.
Validation failures end up as an error notice, never as an exception.
"""

from __future__ import annotations

import logging

from tasklist.store import ErrorKind, Task, TaskStore, ValidationError
from tasklist.sync import ViewSynchronizer

logger = logging.getLogger(__name__)


class TaskListController:
    """Input-source boundary between the view and the store."""

    def __init__(self, store: TaskStore, sync: ViewSynchronizer) -> None:
        self.store = store
        self.sync = sync

    def start(self) -> None:
        """Initial render."""
        self.sync.render_all()
        self.sync.render_progress()
        self.sync.render_counter("")

    def handle_add(self, value: str) -> Task | None:
        try:
            task = self.store.add(value)
        except ValidationError as e:
            logger.info("Rejected add: %s", e.kind.value)
            self.sync.render_error(e.kind)
            return None

        # Adding changes the row set, so rebuild (and drop any search filter)
        self.sync.render_all()
        self.sync.render_progress()
        self.sync.scroll_to_bottom()
        self.sync.reset_input()
        return task

    def handle_search(self, value: str) -> list[Task]:
        keyword = value.strip()
        if not keyword:
            tasks = self.store.tasks()
            self.sync.render_all(tasks)
            return tasks

        tasks = self.store.search(keyword)
        logger.debug("Search %r matched %d task(s)", keyword, len(tasks))
        self.sync.render_all(tasks, is_search=True)
        return tasks

    def handle_edit_toggle(self, task_id: int, row_text: str = "") -> bool:
        """Enter edit mode, or commit the row's text when already editing.

        Returns True when the row ends up in edit mode.
        """
        if not self.sync.is_editing(task_id):
            return self.sync.begin_edit(task_id)

        if not row_text.strip():
            logger.info("Rejected edit of task %d: empty", task_id)
            self.sync.render_error(ErrorKind.EMPTY)
            return True

        # Duplicate text is allowed on edit; only creation checks it.
        self.sync.commit_edit(task_id, row_text)
        self.sync.clear_error()
        return False

    def handle_delete(self, task_id: int) -> None:
        self.store.delete(task_id)
        self.sync.render_all()
        self.sync.render_progress()

    def handle_checkbox(self, task_id: int) -> None:
        self.store.toggle_complete(task_id)
        self.sync.render_row(task_id)
        self.sync.render_progress()

    def handle_input_change(self, value: str) -> None:
        self.sync.render_counter(value)

"""
Task Store - single source of truth for the task collection.

All mutations go through here. Tasks are handed out as immutable
snapshots; the store replaces its own entry when a task changes.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator

from tasklist.config import MAX_TASK_LENGTH, TaskStrings

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """User-facing validation failures."""

    EMPTY = "empty"
    DUPLICATE = "duplicate"
    EXCEED = "exceed"


ERROR_MESSAGES = {
    ErrorKind.EMPTY: TaskStrings.EMPTY_INPUT_ERROR,
    ErrorKind.DUPLICATE: TaskStrings.DUPLICATE_TASK_ERROR,
    ErrorKind.EXCEED: TaskStrings.EXCEED_LENGTH_ERROR,
}


def error_message(kind: ErrorKind) -> str:
    """Message for an error kind. Unknown kinds are a programming error."""
    try:
        return ERROR_MESSAGES[kind]
    except (KeyError, TypeError):
        raise ValueError(f"Unsupported error type: {kind!r}") from None


class ValidationError(Exception):
    """Raised when input is rejected before the store is mutated."""

    def __init__(self, kind: ErrorKind) -> None:
        self.kind = kind
        self.message = error_message(kind)
        super().__init__(self.message)


@dataclass(frozen=True)
class Task:
    """Immutable snapshot of a task."""

    id: int
    text: str
    completed: bool = False


@dataclass(frozen=True)
class Progress:
    """Completed/total counts."""

    completed: int
    total: int

    @property
    def ratio(self) -> float:
        """Completion percentage (0-100)."""
        if self.total == 0:
            return 0.0
        return self.completed / self.total * 100

    @property
    def label(self) -> str:
        return f"{self.completed} / {self.total}"


class TaskStore:
    """Ordered collection of tasks with stable ids."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        # Ids come from a counter, never from len(), so deletes can't cause reuse.
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __contains__(self, task_id: object) -> bool:
        return self._index_of(task_id) is not None

    def _index_of(self, task_id: object) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def tasks(self) -> list[Task]:
        """All tasks in insertion order."""
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        index = self._index_of(task_id)
        if index is None:
            return None
        return self._tasks[index]

    def add(self, text: str) -> Task:
        """
        Create a task from trimmed text and append it.

        Raises:
            ValidationError: EMPTY, DUPLICATE or EXCEED.
        """
        text = text.strip()
        if not text:
            raise ValidationError(ErrorKind.EMPTY)
        if any(task.text == text for task in self._tasks):
            raise ValidationError(ErrorKind.DUPLICATE)
        if len(text) > MAX_TASK_LENGTH:
            raise ValidationError(ErrorKind.EXCEED)

        task = Task(id=next(self._ids), text=text)
        self._tasks.append(task)
        logger.debug("Added task %d: %r", task.id, task.text)
        return task

    def edit(self, task_id: int, new_text: str) -> None:
        """Replace a task's text in place. No validation; unknown ids are ignored."""
        index = self._index_of(task_id)
        if index is None:
            return
        self._tasks[index] = replace(self._tasks[index], text=new_text)
        logger.debug("Edited task %d: %r", task_id, new_text)

    def toggle_complete(self, task_id: int) -> None:
        index = self._index_of(task_id)
        if index is None:
            return
        task = self._tasks[index]
        self._tasks[index] = replace(task, completed=not task.completed)
        logger.debug("Toggled task %d -> completed=%s", task_id, not task.completed)

    def delete(self, task_id: int) -> None:
        index = self._index_of(task_id)
        if index is None:
            return
        del self._tasks[index]
        logger.debug("Deleted task %d", task_id)

    def search(self, keyword: str) -> list[Task]:
        """Tasks whose text contains keyword, case-insensitively, in store order."""
        needle = keyword.lower()
        return [task for task in self._tasks if needle in task.text.lower()]

    def progress(self) -> Progress:
        completed = sum(1 for task in self._tasks if task.completed)
        return Progress(completed=completed, total=len(self._tasks))

"""Reusable widgets for the task list screen."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Checkbox, Input, Label, ProgressBar, Static

from tasklist.config import MAX_TASK_LENGTH
from tasklist.providers import EmptyReason, RowView, empty_message


class TaskRow(Static):
    """Single row in the task list, refreshed in place from a RowView."""

    DEFAULT_CSS = """
    TaskRow {
        height: auto;
        width: 100%;
    }

    TaskRow .task-item {
        height: auto;
    }

    TaskRow .task-edit-input {
        width: 1fr;
    }

    TaskRow.completed .task-edit-input {
        color: $text-muted;
        text-style: strike;
    }

    TaskRow .delete-button {
        min-width: 5;
    }
    """

    class EditToggled(Message):
        """Edit/Save pressed (or Enter in the row editor)."""

        def __init__(self, task_id: int, text: str) -> None:
            super().__init__()
            self.task_id = task_id
            self.text = text

    class DeleteRequested(Message):
        def __init__(self, task_id: int) -> None:
            super().__init__()
            self.task_id = task_id

    class CompletionToggled(Message):
        def __init__(self, task_id: int) -> None:
            super().__init__()
            self.task_id = task_id

    def __init__(self, view: RowView, **kwargs) -> None:
        super().__init__(**kwargs)
        self._view = view
        self.set_class(view.completed, "completed")

    @property
    def task_id(self) -> int:
        return self._view.task_id

    @property
    def row_view(self) -> RowView:
        return self._view

    def compose(self) -> ComposeResult:
        with Horizontal(classes="task-item"):
            yield Checkbox(value=self._view.completed, classes="task-check-box")
            yield Input(
                value=self._view.shown_text,
                max_length=MAX_TASK_LENGTH,
                disabled=not self._view.editing,
                classes="task-edit-input",
            )
            yield Button(self._edit_label(), classes="edit-button")
            yield Button("🗑", variant="error", classes="delete-button")

    def _edit_label(self) -> str:
        return "Save" if self._view.editing else "Edit"

    def show_view(self, view: RowView) -> None:
        """Rebuild this row's content without touching its siblings."""
        self._view = view
        self.set_class(view.completed, "completed")

        checkbox = self.query_one(".task-check-box", Checkbox)
        with checkbox.prevent(Checkbox.Changed):
            checkbox.value = view.completed

        editor = self.query_one(".task-edit-input", Input)
        with editor.prevent(Input.Changed):
            editor.value = view.shown_text
        editor.disabled = not view.editing

        self.query_one(".edit-button", Button).label = self._edit_label()

    def focus_editor(self) -> None:
        """Focus the editor with the caret after the last character."""
        editor = self.query_one(".task-edit-input", Input)
        editor.focus()
        editor.call_after_refresh(editor.action_end)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        self.post_message(self.CompletionToggled(self.task_id))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("edit-button"):
            editor = self.query_one(".task-edit-input", Input)
            self.post_message(self.EditToggled(self.task_id, editor.value))
        elif event.button.has_class("delete-button"):
            self.post_message(self.DeleteRequested(self.task_id))

    def on_input_changed(self, event: Input.Changed) -> None:
        # Row edits don't drive the add-input counter
        event.stop()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if self._view.editing:
            self.post_message(self.EditToggled(self.task_id, event.value))


class ProgressPanel(Static):
    """Progress bar with a completed/total label."""

    DEFAULT_CSS = """
    ProgressPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    ProgressPanel .title {
        text-style: bold;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("Progress", classes="title")
        yield ProgressBar(total=100, show_eta=False, id="progress")
        yield Label("0 / 0", id="numbers")

    def set_progress(self, ratio: float, label: str) -> None:
        self.query_one("#progress", ProgressBar).update(progress=ratio)
        self.query_one("#numbers", Label).update(label)


class CounterLabel(Label):
    """Live character counter for the add input."""

    DEFAULT_CSS = """
    CounterLabel {
        width: 100%;
        text-align: right;
    }
    """

    def set_count(self, label: str, color: str) -> None:
        self.update(label)
        self.styles.color = color


class ErrorNotice(Static):
    """The single, replaceable error notice."""

    DEFAULT_CSS = """
    ErrorNotice {
        height: auto;
        color: $error;
        display: none;
    }
    """

    notice: str = ""

    def show_message(self, message: str) -> None:
        self.notice = message
        self.update(message)
        self.display = True

    def clear_message(self) -> None:
        self.notice = ""
        self.update("")
        self.display = False


class EmptySign(Static):
    """Shown instead of the list when there is nothing to display."""

    DEFAULT_CSS = """
    EmptySign {
        height: auto;
        text-align: center;
        margin: 1;
        color: $warning;
        display: none;
    }
    """

    reason: EmptyReason | None = None

    def show_reason(self, reason: EmptyReason) -> None:
        self.reason = reason
        self.update(empty_message(reason))
        self.display = True

    def clear_reason(self) -> None:
        self.reason = None
        self.update("")
        self.display = False

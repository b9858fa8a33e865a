"""Main task list screen; the Textual RenderTarget."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input

from tasklist.config import MAX_TASK_LENGTH
from tasklist.controller import TaskListController
from tasklist.providers import EmptyReason, RowView
from tasklist.store import TaskStore
from tasklist.sync import ViewSynchronizer
from tasklist.views.widgets import (
    CounterLabel,
    EmptySign,
    ErrorNotice,
    ProgressPanel,
    TaskRow,
)


class TaskListScreen(Screen):
    """Add/search input, progress, counter, error notice and the task rows."""

    AUTO_FOCUS = "#task-input"

    DEFAULT_CSS = """
    TaskListScreen {
        layout: vertical;
    }

    #main {
        padding: 0 1;
    }

    #input-row {
        height: auto;
    }

    #task-input {
        width: 1fr;
    }

    #task-list {
        height: 1fr;
        border: solid $primary;
    }
    """

    def __init__(self, store: TaskStore, **kwargs) -> None:
        super().__init__(**kwargs)
        # Rows by task id; never by position
        self._row_widgets: dict[int, TaskRow] = {}
        self.synchronizer = ViewSynchronizer(store, self)
        self.controller = TaskListController(store, self.synchronizer)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield ProgressPanel(id="progress-panel")
            with Horizontal(id="input-row"):
                yield Input(
                    placeholder="Write your task here",
                    max_length=MAX_TASK_LENGTH,
                    id="task-input",
                )
                yield Button("+", variant="primary", id="add-button")
                yield Button("Search", id="search-button")
            yield CounterLabel(id="counter-numbers")
            yield ErrorNotice(id="error-instruction")
            yield EmptySign(id="sign-container")
            yield VerticalScroll(id="task-list")
        yield Footer()

    def on_mount(self) -> None:
        self.controller.start()

    # -------------------- input source --------------------

    def _input_value(self) -> str:
        return self.query_one("#task-input", Input).value

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-button":
            self.controller.handle_add(self._input_value())
        elif event.button.id == "search-button":
            self.controller.handle_search(self._input_value())

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "task-input":
            self.controller.handle_add(event.value)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "task-input":
            self.controller.handle_input_change(event.value)

    def on_task_row_edit_toggled(self, message: TaskRow.EditToggled) -> None:
        self.controller.handle_edit_toggle(message.task_id, message.text)

    def on_task_row_delete_requested(self, message: TaskRow.DeleteRequested) -> None:
        self.controller.handle_delete(message.task_id)

    def on_task_row_completion_toggled(self, message: TaskRow.CompletionToggled) -> None:
        self.controller.handle_checkbox(message.task_id)

    # -------------------- RenderTarget --------------------

    def clear_rows(self) -> None:
        self._row_widgets.clear()
        self.query_one("#task-list", VerticalScroll).remove_children()

    def append_row(self, row: RowView) -> None:
        widget = TaskRow(row)
        self._row_widgets[row.task_id] = widget
        self.query_one("#task-list", VerticalScroll).mount(widget)

    def replace_row(self, task_id: int, row: RowView) -> None:
        widget = self._row_widgets.get(task_id)
        if widget is not None:
            widget.show_view(row)

    def show_empty_sign(self, reason: EmptyReason) -> None:
        self.query_one(EmptySign).show_reason(reason)

    def clear_empty_sign(self) -> None:
        self.query_one(EmptySign).clear_reason()

    def set_progress(self, ratio: float, label: str) -> None:
        self.query_one(ProgressPanel).set_progress(ratio, label)

    def set_counter(self, label: str, color: str) -> None:
        self.query_one(CounterLabel).set_count(label, color)

    def show_error(self, message: str) -> None:
        self.query_one(ErrorNotice).show_message(message)

    def clear_error(self) -> None:
        self.query_one(ErrorNotice).clear_message()

    def focus_row_editor(self, task_id: int) -> None:
        widget = self._row_widgets.get(task_id)
        if widget is not None:
            widget.focus_editor()

    def scroll_to_bottom(self) -> None:
        task_list = self.query_one("#task-list", VerticalScroll)
        task_list.call_after_refresh(task_list.scroll_end, animate=False)

    def reset_input(self) -> None:
        task_input = self.query_one("#task-input", Input)
        task_input.value = ""
        task_input.focus()

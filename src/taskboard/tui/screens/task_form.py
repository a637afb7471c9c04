"""TaskFormModal — create a new card."""

from __future__ import annotations

from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from taskboard.board.models import Item, Outcome


class TaskFormModal(ModalScreen[Item | None]):
    """Collects a title and optional description.

    *submit* is called on save. If it reports a failure the form stays open
    with the message shown and the typed values kept. Dismisses with the
    created Item, or None on cancel.
    """

    def __init__(self, submit: Callable[[str, str], Outcome]) -> None:
        super().__init__()
        self._submit = submit

    def compose(self) -> ComposeResult:
        with Vertical(id="task-form-container"):
            yield Label("New Task", id="task-form-title")
            yield Label("Title:", classes="task-field-label")
            yield Input(placeholder="Task title", id="task-title")
            yield Label("Description (optional):", classes="task-field-label")
            yield Input(placeholder="Task description", id="task-description")
            yield Static("", id="task-form-error")
            with Horizontal(id="task-form-buttons"):
                yield Button("Cancel", id="btn-cancel", variant="default")
                yield Button("Add Task", id="btn-save", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-cancel":
            self.dismiss(None)
            return
        if event.button.id == "btn-save":
            self._save()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._save()

    def on_key(self, event) -> None:
        if event.key == "escape":
            event.stop()
            self.dismiss(None)

    def _save(self) -> None:
        title = self.query_one("#task-title", Input).value
        description = self.query_one("#task-description", Input).value
        error_widget = self.query_one("#task-form-error", Static)

        outcome = self._submit(title, description)
        if outcome.failure is not None:
            error_widget.update(f"[red]{outcome.failure.message}[/red]")
            return

        error_widget.update("")
        self.dismiss(outcome.item)

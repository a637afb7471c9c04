"""Task board TUI — three lanes, keyboard drag and drop, light/dark mode."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from taskboard.board.models import Item, Lane, Outcome
from taskboard.board.service import TaskBoard
from taskboard.board.timers import AsyncIOTimerScheduler
from taskboard.config.settings import Settings, get_settings
from taskboard.tui.screens.task_form import TaskFormModal
from taskboard.tui.widgets.lane import LaneColumn

logger = logging.getLogger("taskboard.tui.app")


class TaskBoardApp(App[None]):
    """The task board.

    Keyboard stands in for the mouse gesture: ``space`` picks a card up and
    drops it before the card under the cursor, ``1``-``3`` drop it onto a
    lane, ``escape`` lets go.
    """

    CSS_PATH = Path(__file__).parent / "theme.tcss"
    TITLE = "Task Board"
    BINDINGS = [
        Binding("left", "move_lane(-1)", "Lane left", show=False),
        Binding("right", "move_lane(1)", "Lane right", show=False),
        Binding("up", "move_card(-1)", "Up", show=False),
        Binding("down", "move_card(1)", "Down", show=False),
        Binding("space", "grab_or_drop", "Pick up / Drop"),
        Binding("1", "drop_on_lane(0)", "→ Lane 1", show=False),
        Binding("2", "drop_on_lane(1)", "→ Lane 2", show=False),
        Binding("3", "drop_on_lane(2)", "→ Lane 3", show=False),
        Binding("escape", "cancel_drag", "Let go"),
        Binding("n", "new_task", "New"),
        Binding("d", "delete_task", "Delete"),
        Binding("t", "toggle_dark_mode", "Light/Dark"),
        Binding("q", "quit", "Quit"),
    ]

    dark_mode: reactive[bool] = reactive(False, init=False)

    def __init__(
        self,
        board: TaskBoard | None = None,
        settings: Settings | None = None,
        timers: AsyncIOTimerScheduler | None = None,
        dark_mode: bool | None = None,
        seed_demo: bool | None = None,
    ) -> None:
        super().__init__()
        settings = settings or get_settings()
        if board is None:
            timers = timers or AsyncIOTimerScheduler()
            board = TaskBoard.from_settings(settings, timers, seed_demo=seed_demo)
        self.board = board
        self._scheduler = timers
        self._initial_dark = settings.appearance.dark_mode if dark_mode is None else dark_mode
        self._lane_index = 0
        self._card_index = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="board"):
            for lane in self.board.lanes:
                yield LaneColumn(lane)
        yield Static("", id="board-status")
        yield Footer()

    def on_mount(self) -> None:
        if self._scheduler is not None:
            self._scheduler.start()
        self.board.store.add_listener(self._on_store_changed)
        self.dark_mode = self._initial_dark
        self._apply_theme(self.dark_mode)
        self._render_board()

    def on_unmount(self) -> None:
        self.board.store.remove_listener(self._on_store_changed)
        if self._scheduler is not None:
            self._scheduler.stop()

    # -- Rendering -------------------------------------------------------------

    def watch_dark_mode(self, dark_mode: bool) -> None:
        self._apply_theme(dark_mode)
        self._render_board()

    def _apply_theme(self, dark_mode: bool) -> None:
        self.theme = "textual-dark" if dark_mode else "textual-light"
        self.screen.set_class(dark_mode, "dark")

    def _on_store_changed(self, _snapshot: tuple[Item, ...]) -> None:
        self.call_later(self._render_board)

    def _render_board(self) -> None:
        self._clamp_cursor()
        cursor = self.cursor_item
        dragged_id = self.board.dragged_item_id
        for index, column in enumerate(self.query(LaneColumn)):
            column.show(
                self.board.get_lane_view(column.lane),
                cursor_id=cursor.id if cursor else None,
                dragged_id=dragged_id,
                dark_mode=self.dark_mode,
                focused=index == self._lane_index,
            )

        status = self.query_one("#board-status", Static)
        dragged = self.board.store.find_by_id(dragged_id) if dragged_id else None
        if dragged is not None:
            status.update(
                f"Holding [bold]{escape(dragged.title)}[/bold]: space to drop, esc to let go"
            )
        else:
            status.update("")

    # -- Cursor ----------------------------------------------------------------

    @property
    def current_lane(self) -> Lane:
        return self.board.lanes[self._lane_index]

    @property
    def cursor_item(self) -> Item | None:
        cards = self.board.get_lane_view(self.current_lane)
        if 0 <= self._card_index < len(cards):
            return cards[self._card_index]
        return None

    def _clamp_cursor(self) -> None:
        count = len(self.board.get_lane_view(self.current_lane))
        self._card_index = max(0, min(self._card_index, count - 1))

    def _focus_item(self, item_id: str) -> None:
        """Put the cursor on *item_id* wherever it now sits."""
        for lane_index, lane in enumerate(self.board.lanes):
            ids = [item.id for item in self.board.get_lane_view(lane)]
            if item_id in ids:
                self._lane_index = lane_index
                self._card_index = ids.index(item_id)
                return

    def action_move_lane(self, step: int) -> None:
        self._lane_index = (self._lane_index + step) % len(self.board.lanes)
        self._render_board()

    def action_move_card(self, step: int) -> None:
        self._card_index += step
        self._render_board()

    # -- Drag and drop ---------------------------------------------------------

    def action_grab_or_drop(self) -> None:
        target = self.cursor_item
        dragged_id = self.board.dragged_item_id

        if dragged_id is None:
            if target is None or target.is_exiting:
                return
            self.board.on_drag_start(target.id)
            self._render_board()
            return

        if target is None:
            outcome = self.board.on_drop_on_lane_area(self.current_lane)
        else:
            outcome = self.board.on_drop_on_item(target.id, self.current_lane)
        self._finish_drop(dragged_id, outcome)

    def action_drop_on_lane(self, lane_index: int) -> None:
        if not 0 <= lane_index < len(self.board.lanes):
            return
        dragged_id = self.board.dragged_item_id
        if dragged_id is None:
            item = self.cursor_item
            if item is None or item.is_exiting:
                return
            dragged_id = item.id
            self.board.on_drag_start(dragged_id)
        outcome = self.board.on_drop_on_lane_area(self.board.lanes[lane_index])
        self._finish_drop(dragged_id, outcome)

    def action_cancel_drag(self) -> None:
        if self.board.dragged_item_id is not None:
            self.board.on_drag_end()
            self._render_board()

    def _finish_drop(self, dragged_id: str, outcome: Outcome) -> None:
        self.board.on_drag_end()
        if outcome.failure is not None:
            logger.debug("Drop of %s refused: %s", dragged_id, outcome.failure)
            self.notify(outcome.failure.message, severity="warning")
        elif outcome.changed:
            self._focus_item(dragged_id)
        self._render_board()

    # -- Create / delete -------------------------------------------------------

    def action_new_task(self) -> None:
        self.push_screen(TaskFormModal(self.board.create_task), callback=self._on_task_created)

    def _on_task_created(self, item: Item | None) -> None:
        if item is not None:
            self._focus_item(item.id)
            self._render_board()

    def action_delete_task(self) -> None:
        item = self.cursor_item
        if item is None:
            return
        outcome = self.board.delete_task(item.id)
        if outcome.failure is not None:
            self.notify(outcome.failure.message, severity="warning")

    # -- Theme -----------------------------------------------------------------

    def action_toggle_dark_mode(self) -> None:
        self.dark_mode = not self.dark_mode


def run_tui(
    dark_mode: bool | None = None,
    seed_demo: bool | None = None,
) -> None:
    """Launch the board."""
    TaskBoardApp(dark_mode=dark_mode, seed_demo=seed_demo).run()

"""LaneColumn — one board lane rendered as a stack of card panels."""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text
from textual.widgets import Static

from taskboard.board.models import Item, Lane, TransitionTag
from taskboard.config.constants import LANE_COLORS


def lane_color(lane: Lane, dark_mode: bool) -> str:
    light, dark = LANE_COLORS[lane.value]
    return dark if dark_mode else light


def card_classes(item: Item, *, dragged_id: str | None) -> set[str]:
    """Visual states of one card, used as style hints by render_card()."""
    classes: set[str] = set()
    if item.transition is TransitionTag.ENTERING:
        classes.add("entering")
    elif item.transition is TransitionTag.EXITING:
        classes.add("exiting")
    if dragged_id is not None:
        classes.add("dragging" if item.id == dragged_id else "drag-over-target")
    return classes


def render_card(
    item: Item,
    *,
    color: str,
    cursor: bool,
    dragged_id: str | None,
) -> Panel:
    states = card_classes(item, dragged_id=dragged_id)

    body = Text.from_markup(f"[bold]{escape(item.title)}[/bold]")
    if item.description:
        body.append("\n")
        body.append(item.description)

    style = ""
    if "entering" in states:
        style = "italic"
    elif "exiting" in states:
        style = "dim strike"
    if "dragging" in states:
        style = f"{style} dim".strip()

    subtitle = None
    if cursor and "drag-over-target" in states:
        subtitle = "▲ drop before"
    elif "dragging" in states:
        subtitle = "holding"

    return Panel(
        body,
        box=box.ASCII if "dragging" in states else box.ROUNDED,
        border_style=f"bold {color}" if cursor else color,
        style=style,
        subtitle=subtitle,
        subtitle_align="right",
    )


class LaneColumn(Static):
    """Displays the cards of a single lane, top to bottom."""

    def __init__(self, lane: Lane) -> None:
        super().__init__(id=f"lane-{lane.value}", classes="lane")
        self.lane = lane
        self.card_ids: list[str] = []
        self.border_title = lane.display_name

    def show(
        self,
        items: Sequence[Item],
        *,
        cursor_id: str | None = None,
        dragged_id: str | None = None,
        dark_mode: bool = False,
        focused: bool = False,
    ) -> None:
        self.card_ids = [item.id for item in items]
        color = lane_color(self.lane, dark_mode)
        self.styles.border = ("round", color)
        self.set_class(focused, "focused")

        renderables: list[RenderableType] = [
            render_card(
                item,
                color=color,
                cursor=focused and item.id == cursor_id,
                dragged_id=dragged_id,
            )
            for item in items
        ]
        if not renderables:
            hint = "(empty) drop here" if focused and dragged_id else "(empty)"
            renderables.append(Text(hint, style="dim"))
        self.update(Group(*renderables))

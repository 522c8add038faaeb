from __future__ import annotations

from typing import List

from match3.core.board import Board
from match3.core.types import BoardEvent
from match3.events.bus import EventBus
from match3.generators import board_from_layout, parse_layout


def make_board(layout: str, event_bus: EventBus | None = None) -> Board:
    """Build a board from a text layout such as ``"ABC/DEF"`` (``.`` is empty)."""
    return board_from_layout(parse_layout(layout), event_bus=event_bus)


def record_events(board: Board) -> List[BoardEvent]:
    """Register a listener on board and return the list it appends events to."""
    events: List[BoardEvent] = []
    board.add_listener(events.append)
    return events

"""Board engine for a match-three grid.

The board owns the grid, validates swaps, scans for matches and probes
one-step cascades. It never clears, drops or regenerates pieces: matches and
refill requests are only reported to listeners, which decide what to do.
"""
from __future__ import annotations

import logging
from typing import Generic, Iterator, List, Optional, Tuple

from match3.core import board_ops
from match3.core.grid import Grid
from match3.core.types import BoardEvent, BoardEventKind, BoardListener, Match, Position, T
from match3.events.bus import EventBus, EVENT_BOARD_MATCH, EVENT_BOARD_REFILL

logger = logging.getLogger(__name__)

_BUS_EVENT_NAMES = {
    BoardEventKind.MATCH: EVENT_BOARD_MATCH,
    BoardEventKind.REFILL: EVENT_BOARD_REFILL,
}


class Board(Generic[T]):
    def __init__(
        self,
        generator: Iterator[T],
        width: int,
        height: int,
        event_bus: Optional[EventBus] = None,
    ):
        self.width = width
        self.height = height
        # The generator is only consulted here; the board never creates pieces afterwards.
        self._grid: Grid[T] = Grid.fill(generator, width, height)
        self._listeners: List[BoardListener] = []
        self.event_bus = event_bus

    def add_listener(self, listener: BoardListener) -> None:
        self._listeners.append(listener)

    def positions(self) -> List[Position]:
        return self._grid.positions()

    def piece(self, position: Tuple[int, int]) -> Optional[T]:
        """Return the piece at position, or None when it lies outside the board."""
        return self._grid.piece(position)

    def snapshot(self):
        return self._grid.snapshot()

    def can_move(self, first: Tuple[int, int], second: Tuple[int, int]) -> bool:
        return board_ops.can_swap(self._grid, first, second)

    def move(self, first: Tuple[int, int], second: Tuple[int, int]) -> bool:
        """Swap two pieces if the swap is legal, then report matches.

        Emits one MATCH event per horizontal, vertical and cascade match, in
        that order, followed by a REFILL event when the cascade probe found
        nothing. Returns False without touching the grid for illegal swaps.
        """
        if not self.can_move(first, second):
            logger.debug("Rejected move %s -> %s", first, second)
            return False
        self._grid.swap(first, second)

        horizontal = self.find_horizontal_matches()
        vertical = self.find_vertical_matches()
        logger.debug(
            "Move %s -> %s applied: %d horizontal, %d vertical matches",
            first, second, len(horizontal), len(vertical),
        )
        for match in horizontal:
            self._notify(BoardEvent(BoardEventKind.MATCH, match))
        for match in vertical:
            self._notify(BoardEvent(BoardEventKind.MATCH, match))

        cascading = self.find_cascading_matches()
        for match in cascading:
            self._notify(BoardEvent(BoardEventKind.MATCH, match))
        if not cascading:
            self._notify(BoardEvent(BoardEventKind.REFILL))
        else:
            logger.debug("Cascade probe found %d landing matches", len(cascading))
        return True

    def find_horizontal_matches(self) -> List[Match[T]]:
        return board_ops.find_horizontal_matches(self._grid)

    def find_vertical_matches(self) -> List[Match[T]]:
        return board_ops.find_vertical_matches(self._grid)

    def find_cascading_matches(self) -> List[Match[T]]:
        return board_ops.find_cascading_matches(self._grid)

    def _notify(self, event: BoardEvent) -> None:
        for listener in self._listeners:
            listener(event)
        if self.event_bus is None:
            return
        name = _BUS_EVENT_NAMES.get(event.kind)
        if name is None:
            return
        if event.match is not None:
            self.event_bus.emit(name, event=event, match=event.match)
        else:
            self.event_bus.emit(name, event=event)

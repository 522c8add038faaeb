"""Piece generators and text layouts for building boards."""
from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Optional, Sequence

from match3.constants import LAYOUT_EMPTY_CHAR, PIECE_TYPES
from match3.core.board import Board
from match3.events.bus import EventBus


def random_pieces(choices: Sequence = PIECE_TYPES, rng: random.Random | None = None) -> Iterator:
    """Yield pieces drawn uniformly from ``choices`` forever."""
    palette = list(choices)
    if not palette:
        raise ValueError("Cannot generate pieces from an empty palette")
    rng = rng or random.Random()

    def _pieces() -> Iterator:
        while True:
            yield rng.choice(palette)

    return _pieces()


def layout_pieces(rows: Iterable[Iterable]) -> Iterator:
    """Yield the pieces of a fixed layout in row-major order."""
    for row in rows:
        yield from row


def parse_layout(text: str) -> List[List[Optional[str]]]:
    """Parse rows such as ``"ABAA/BBBC"`` (or one row per line) into single-character pieces.

    Spaces inside a row are ignored and ``.`` marks an empty cell.
    """
    lines = [line for line in text.replace("/", "\n").splitlines() if line.strip()]
    rows: List[List[Optional[str]]] = []
    for line in lines:
        chars = [ch for ch in line if not ch.isspace()]
        rows.append([None if ch == LAYOUT_EMPTY_CHAR else ch for ch in chars])
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise ValueError(f"Layout rows have different lengths: {sorted(widths)}")
    return rows


def board_from_layout(rows: Sequence[Sequence], event_bus: EventBus | None = None) -> Board:
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("Layout rows must all have the same length")
    return Board(layout_pieces(rows), width, height, event_bus=event_bus)

"""Command line demo for the match-three board engine.

Builds a board from a random palette (or a fixed layout), prints it and,
when ``--swap`` is given, performs one move and prints every notification.

Run with: ``python -m match3.main --layout "ABAA/BBBC/CCAC/AACA" --swap 1 3 0 3``
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, Sequence

from match3.constants import GRID_COLS, GRID_ROWS, LAYOUT_EMPTY_CHAR
from match3.core.board import Board
from match3.core.types import BoardEvent, BoardEventKind, Position
from match3.generators import board_from_layout, parse_layout, random_pieces

DEFAULT_PIECES = "ABCDE"


def format_board(board: Board) -> str:
    lines = []
    for row in range(board.height):
        cells = []
        for col in range(board.width):
            piece = board.piece((row, col))
            cells.append(LAYOUT_EMPTY_CHAR if piece is None else str(piece))
        lines.append(" ".join(cells))
    return "\n".join(lines)


def format_event(event: BoardEvent) -> str:
    if event.kind is BoardEventKind.MATCH and event.match is not None:
        cells = " ".join(f"({pos[0]},{pos[1]})" for pos in event.match.positions)
        return f"MATCH {event.match.matched} at {cells}"
    return event.kind.name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Match-three board engine demo")
    parser.add_argument("--width", type=int, default=GRID_COLS)
    parser.add_argument("--height", type=int, default=GRID_ROWS)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random palette")
    parser.add_argument("--pieces", default=DEFAULT_PIECES, help="Characters used as random pieces")
    parser.add_argument("--layout", default=None, help='Fixed layout, rows separated by "/" ("." is empty)')
    parser.add_argument("--swap", type=int, nargs=4, metavar=("R1", "C1", "R2", "C2"), default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.layout:
        try:
            rows = parse_layout(args.layout)
        except ValueError as exc:
            parser.error(str(exc))
        board = board_from_layout(rows)
    else:
        if args.width < 0 or args.height < 0:
            parser.error("--width and --height must not be negative")
        if not args.pieces:
            parser.error("--pieces must not be empty")
        rng = random.Random(args.seed)
        board = Board(random_pieces(list(args.pieces), rng), args.width, args.height)

    print(format_board(board))
    if args.swap is None:
        return 0

    first = Position(args.swap[0], args.swap[1])
    second = Position(args.swap[2], args.swap[3])
    events: List[BoardEvent] = []
    board.add_listener(events.append)
    if not board.move(first, second):
        print(f"Move {tuple(first)} -> {tuple(second)} rejected")
        return 1
    print()
    print(format_board(board))
    for event in events:
        print(format_event(event))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Value types shared by the board engine and its consumers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Generic, NamedTuple, Optional, Tuple, TypeVar

T = TypeVar("T")


class Position(NamedTuple):
    """Cell coordinates. Not validated; consumers check them against the board."""
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class Match(Generic[T]):
    """A detected (or predicted) match.

    Scanner matches carry the three cells of the window in scan order.
    Cascade probe matches carry only the landing cell of the fallen piece.
    Positions are stored as a tuple so every listener sees the same cells.
    """
    matched: T
    positions: Tuple[Position, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "positions", tuple(Position(*pos) for pos in self.positions))


class BoardEventKind(Enum):
    """Kinds of board notifications. MOVE and SWAP are reserved and never emitted."""
    MOVE = auto()
    SWAP = auto()
    MATCH = auto()
    REFILL = auto()


@dataclass(frozen=True, slots=True)
class BoardEvent(Generic[T]):
    kind: BoardEventKind
    match: Optional[Match[T]] = None


BoardListener = Callable[[BoardEvent], None]

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Tuple

from match3.core.types import Position, T


class Grid(Generic[T]):
    """Row-major ``height x width`` store of piece values.

    The row lists are owned by the grid; nothing outside of it holds a
    reference to them. Dimensions never change after construction.
    """

    def __init__(self, cells: List[List[Optional[T]]], width: int, height: int):
        self.width = width
        self.height = height
        self.cells = cells

    @classmethod
    def fill(cls, generator: Iterator[T], width: int, height: int) -> "Grid[T]":
        """Pull exactly ``width * height`` pieces from ``generator``, row by row."""
        cells = [[next(generator) for _ in range(width)] for _ in range(height)]
        return cls(cells, width, height)

    def in_bounds(self, position: Tuple[int, int]) -> bool:
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def piece(self, position: Tuple[int, int]) -> Optional[T]:
        # Negative indices must not wrap around to the far edge.
        if not self.in_bounds(position):
            return None
        row, col = position
        return self.cells[row][col]

    def positions(self) -> List[Position]:
        return [Position(row, col) for row in range(self.height) for col in range(self.width)]

    def swap(self, first: Tuple[int, int], second: Tuple[int, int]) -> None:
        r1, c1 = first
        r2, c2 = second
        self.cells[r1][c1], self.cells[r2][c2] = self.cells[r2][c2], self.cells[r1][c1]

    def snapshot(self) -> Tuple[Tuple[Optional[T], ...], ...]:
        return tuple(tuple(row) for row in self.cells)

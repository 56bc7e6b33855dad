"""
Board - The 3x3 grid of stacking cells.

A cell is a stack of rings in placement order. It holds at most one
ring of each size; the color of the ring already there does not matter.
Rings are never removed.

The board answers questions and appends pieces. It does not decide
whether a move is legal - the engine checks can_place() before place().
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from .pieces import BOARD_SIZE, Color, Piece, Size


@dataclass
class Cell:
    """One board position: a stack of rings, bottom first."""
    pieces: list[Piece] = field(default_factory=list)

    @property
    def top_piece(self) -> Piece | None:
        """The most recently placed ring, of any size."""
        return self.pieces[-1] if self.pieces else None

    @property
    def is_empty(self) -> bool:
        return len(self.pieces) == 0

    def can_place(self, size: Any) -> bool:
        """True if no ring of this size is in the cell yet."""
        parsed = Size.parse(size)
        return all(piece.size != parsed for piece in self.pieces)

    def place(self, size: Size, color: Color) -> Piece:
        piece = Piece(size=Size(size), color=Color(color))
        self.pieces.append(piece)
        return piece

    def top_of_size(self, size: Any) -> Piece | None:
        """The most recently placed ring of a size, if any."""
        parsed = Size.parse(size)
        for piece in reversed(self.pieces):
            if piece.size == parsed:
                return piece
        return None

    def has_piece(self, size: Any, color: Any) -> bool:
        return any(piece.matches(size, color) for piece in self.pieces)

    def has_top_piece(self, size: Any, color: Any) -> bool:
        top = self.top_piece
        return top is not None and top.matches(size, color)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {"rings": [piece.to_dict() for piece in self.pieces]}


@dataclass
class Board:
    """A fixed BOARD_SIZE x BOARD_SIZE grid of cells."""
    cells: list[list[Cell]] = field(
        default_factory=lambda: [
            [Cell() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
    )

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def can_place(self, row: int, col: int, size: Any) -> bool:
        return self.cell(row, col).can_place(size)

    def place(self, row: int, col: int, size: Size, color: Color) -> Piece:
        return self.cell(row, col).place(size, color)

    def top_of_size(self, row: int, col: int, size: Any) -> Piece | None:
        return self.cell(row, col).top_of_size(size)

    def has_piece(self, row: int, col: int, size: Any, color: Any) -> bool:
        return self.cell(row, col).has_piece(size, color)

    def has_top_piece(self, row: int, col: int, size: Any, color: Any) -> bool:
        return self.cell(row, col).has_top_piece(size, color)

    def piece_count(self) -> int:
        return sum(len(cell.pieces) for row in self.cells for cell in row)

    def to_rows(self) -> list[list[dict[str, list[dict[str, str]]]]]:
        """Serializable grid, row-major."""
        return [[cell.to_dict() for cell in row] for row in self.cells]

"""
Win Detection - Scans the whole board for a winning color.

Checked after every placement, always over the entire board, in a
fixed priority order:

1. Concentric: one cell holds SMALL, MEDIUM and LARGE of one color.
   Cells in row-major order, colors in palette order.
2. Lines: the 8 lines in order rows, columns, diagonals. For each line:
   a. same size, same color in all three cells (sizes small to large,
      then palette order)
   b. one color in ascending (SMALL, MEDIUM, LARGE) or descending
      (LARGE, MEDIUM, SMALL) size order along the line

The first match wins and scanning stops.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from .board import Board
from .pieces import BOARD_SIZE, PALETTE, SIZES, Color, Size

Coordinate = tuple[int, int]
Line = tuple[Coordinate, Coordinate, Coordinate]

ASCENDING: tuple[Size, ...] = (Size.SMALL, Size.MEDIUM, Size.LARGE)
DESCENDING: tuple[Size, ...] = (Size.LARGE, Size.MEDIUM, Size.SMALL)


@dataclass(frozen=True)
class WinResult:
    """The winning color and the cells that won it."""
    color: Color
    winning_line: list[str]


def format_coordinate(row: int, col: int) -> str:
    return f"{row},{col}"


def all_lines() -> Iterator[Line]:
    """Yield rows, then columns, then the two diagonals."""
    for row in range(BOARD_SIZE):
        yield tuple((row, col) for col in range(BOARD_SIZE))
    for col in range(BOARD_SIZE):
        yield tuple((row, col) for row in range(BOARD_SIZE))
    yield tuple((i, i) for i in range(BOARD_SIZE))
    yield tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE))


def find_winner(board: Board) -> WinResult | None:
    """Return the first win on the board, or None."""
    result = _find_concentric_win(board)
    if result:
        return result

    for line in all_lines():
        color = _line_winner(board, line)
        if color is not None:
            return WinResult(
                color=color,
                winning_line=[format_coordinate(row, col) for row, col in line],
            )
    return None


def _find_concentric_win(board: Board) -> WinResult | None:
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            cell = board.cell(row, col)
            for color in PALETTE:
                if all(cell.has_piece(size, color) for size in SIZES):
                    return WinResult(
                        color=color,
                        winning_line=[format_coordinate(row, col)],
                    )
    return None


def _line_winner(board: Board, line: Line) -> Color | None:
    for size in SIZES:
        for color in PALETTE:
            if _line_matches(board, line, (size,) * len(line), color):
                return color

    for color in PALETTE:
        if (
            _line_matches(board, line, ASCENDING, color)
            or _line_matches(board, line, DESCENDING, color)
        ):
            return color
    return None


def _line_matches(
    board: Board,
    line: Line,
    sizes: tuple[Size, ...],
    color: Color,
) -> bool:
    """True if each cell's ring of the paired size belongs to color."""
    for (row, col), size in zip(line, sizes):
        piece = board.top_of_size(row, col, size)
        if piece is None or piece.color != color:
            return False
    return True

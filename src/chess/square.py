"""
A square on the board

(placed in its own module as the pieces and the layers above them need the board dimensions)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Rows and columns are 0-indexed.
BOARD_LENGTH = 8

# Sentinel for both coordinates of a piece that is not on the board
OFF_BOARD = -1


def is_within_bounds(index: int) -> bool:
    """A single row or column index is usable if it lies in [0, BOARD_LENGTH)."""
    return 0 <= index < BOARD_LENGTH


@dataclass(frozen=True)
class Square:
    row: int
    column: int

    def is_on_board(self) -> bool:
        return is_within_bounds(self.row) and is_within_bounds(self.column)

    def lateral_distance(self, other: Square) -> int:
        """Number of columns between two squares (ignores the rows)."""
        return abs(self.column - other.column)


OFF_BOARD_SQUARE = Square(OFF_BOARD, OFF_BOARD)

"""Defines the chess pieces: a generic Piece, and the Rook and Pawn built on top of it."""

from __future__ import annotations

import logging
from typing import ClassVar, Optional

from src.chess.square import BOARD_LENGTH, OFF_BOARD, Square, is_within_bounds
from src.core.exceptions import PieceStateError
from src.core.models import PieceModel
from src.core.shared_types import Color, PieceKind

logger = logging.getLogger(__name__)

# Color used whenever the supplied one is missing or not purely alphabetic
DEFAULT_COLOR: str = Color.BLACK.value

DEFAULT_CASTLE_MOVES = 3


def is_valid_color(color: Optional[str]) -> bool:
    """Every character must be a plain (ASCII) letter. An empty label passes, only None counts as missing."""
    return (
        isinstance(color, str)
        and color.isascii()
        and (color == "" or color.isalpha())
    )


def normalize_color(color: Optional[str]) -> str:
    if is_valid_color(color):
        return color.upper()
    logger.debug("Color %r is not alphabetic, falling back to %s", color, DEFAULT_COLOR)
    return DEFAULT_COLOR


class Piece:
    """
    Color, position and orientation of a single piece.

    Two invariants hold at all times:
    * row and column are either both within [0, BOARD_LENGTH), or both OFF_BOARD.
    * color is an upper case alphabetic label, possibly empty (DEFAULT_COLOR when nothing valid was supplied).

    State can only be changed through the set_* methods, which never raise: invalid input is normalized.
    """

    kind: ClassVar[PieceKind] = PieceKind.PIECE

    def __init__(
        self,
        color: Optional[str] = DEFAULT_COLOR,
        row: int = OFF_BOARD,
        column: int = OFF_BOARD,
        moving_up: bool = False,
    ) -> None:
        self._color = normalize_color(color)
        self._row = OFF_BOARD
        self._column = OFF_BOARD
        self.set_position(row, column)
        self._moving_up = moving_up

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._repr_fields())
        return f"{type(self).__name__}({fields})"

    def _repr_fields(self) -> list[tuple[str, object]]:
        """Subclasses extend this list with their own state."""
        return [
            ("color", self._color),
            ("row", self._row),
            ("column", self._column),
            ("moving_up", self._moving_up),
        ]

    def __str__(self) -> str:
        return self.describe()

    # --- Color ---
    @property
    def color(self) -> str:
        return self._color

    def set_color(self, color: str) -> bool:
        """Returns False (and keeps the current color) if the new color is not purely alphabetic."""
        if not is_valid_color(color):
            return False
        self._color = color.upper()
        return True

    # --- Position ---
    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def square(self) -> Square:
        return Square(self._row, self._column)

    @property
    def is_on_board(self) -> bool:
        # Checking one coordinate would do, as both are always OFF_BOARD together
        return self._row != OFF_BOARD and self._column != OFF_BOARD

    def set_row(self, row: int) -> None:
        """
        An out-of-bounds row takes the piece off the board entirely (row AND column become OFF_BOARD).

        NOTE: a piece that is off the board stays off the board. Use set_position() to put it back.
        """
        if not is_within_bounds(row):
            self.take_off_board()
        elif self.is_on_board:
            self._row = row

    def set_column(self, column: int) -> None:
        """Same rules as set_row()"""
        if not is_within_bounds(column):
            self.take_off_board()
        elif self.is_on_board:
            self._column = column

    def set_position(self, row: int, column: int) -> None:
        """Place the piece at (row, column). If either one is out of bounds, the piece ends up off the board."""
        if is_within_bounds(row) and is_within_bounds(column):
            self._row = row
            self._column = column
        else:
            self.take_off_board()

    def take_off_board(self) -> None:
        """Single place where the off-board state is set, so row and column can never disagree."""
        if self.is_on_board:
            logger.debug("%r taken off the board", self)
        self._row = OFF_BOARD
        self._column = OFF_BOARD

    # --- Orientation ---
    @property
    def moving_up(self) -> bool:
        return self._moving_up

    def set_moving_up(self, moving_up: bool) -> None:
        self._moving_up = moving_up

    # --- Output ---
    def describe(self) -> str:
        if not self.is_on_board:
            return f"{self._color} piece is not on the board"
        direction = "UP" if self._moving_up else "DOWN"
        return f"{self._color} piece at ({self._row},{self._column}) is moving {direction}"

    def display(self) -> None:
        """Write the description of the piece to stdout (one line)."""
        print(self.describe())

    # --- Conversion ---
    def to_model(self) -> PieceModel:
        return PieceModel(
            kind=self.kind.value,
            color=self._color,
            row=self._row,
            column=self._column,
            moving_up=self._moving_up,
        )


class Rook(Piece):
    kind: ClassVar[PieceKind] = PieceKind.ROOK

    def __init__(
        self,
        color: Optional[str] = DEFAULT_COLOR,
        row: int = OFF_BOARD,
        column: int = OFF_BOARD,
        moving_up: bool = False,
        castle_moves: int = DEFAULT_CASTLE_MOVES,
    ) -> None:
        super().__init__(color, row, column, moving_up)
        self._castle_moves_left = max(0, castle_moves)

    def _repr_fields(self) -> list[tuple[str, object]]:
        return super()._repr_fields() + [
            ("castle_moves_left", self._castle_moves_left)
        ]

    @property
    def castle_moves_left(self) -> int:
        return self._castle_moves_left

    def can_castle(self, other: Piece) -> bool:
        """
        This rook can castle with the other piece if:
        1. it has castle moves left
        2. both pieces share the same color
        3. both pieces are on the board
        4. they are laterally adjacent: same row, columns differ by at most 1

        NOTE: Does not use up a castle move. Keeping count is up to whoever actually performs the move.
        NOTE: A rook compared to itself passes all checks (distance 0).
        """
        if self._castle_moves_left <= 0:
            return False
        if self.color != other.color:
            return False
        if not (self.is_on_board and other.is_on_board):
            return False
        if self.row != other.row:
            return False
        return self.square.lateral_distance(other.square) <= 1

    def to_model(self) -> PieceModel:
        model = super().to_model()
        model.castle_moves_left = self._castle_moves_left
        return model


class Pawn(Piece):
    kind: ClassVar[PieceKind] = PieceKind.PAWN

    def __init__(
        self,
        color: Optional[str] = DEFAULT_COLOR,
        row: int = OFF_BOARD,
        column: int = OFF_BOARD,
        moving_up: bool = False,
        double_jumpable: bool = False,
    ) -> None:
        super().__init__(color, row, column, moving_up)
        self._double_jumpable = double_jumpable

    def _repr_fields(self) -> list[tuple[str, object]]:
        return super()._repr_fields() + [("double_jumpable", self._double_jumpable)]

    def can_double_jump(self) -> bool:
        return self._double_jumpable

    def toggle_double_jump(self) -> None:
        self._double_jumpable = not self._double_jumpable

    def can_promote(self) -> bool:
        """
        A pawn promotes on the last row in its direction of movement:
        the top row (BOARD_LENGTH - 1) when moving up, row 0 when moving down.
        An off-board pawn has row OFF_BOARD, so it never qualifies.
        """
        if self.moving_up:
            return self.row == BOARD_LENGTH - 1
        return self.row == 0

    def to_model(self) -> PieceModel:
        model = super().to_model()
        model.double_jumpable = self._double_jumpable
        return model


def piece_from_model(model: PieceModel) -> Piece:
    """Rebuild the domain piece from its transport model. The constructors re-apply all normalization."""
    try:
        kind = PieceKind(model.kind)
    except ValueError:
        raise PieceStateError(
            f"Unknown piece kind: {model.kind!r}. \nPick one from {','.join(k.value for k in PieceKind)}"
        ) from None

    if kind == PieceKind.ROOK:
        castle_moves = (
            DEFAULT_CASTLE_MOVES
            if model.castle_moves_left is None
            else model.castle_moves_left
        )
        return Rook(model.color, model.row, model.column, model.moving_up, castle_moves)
    if kind == PieceKind.PAWN:
        return Pawn(
            model.color,
            model.row,
            model.column,
            model.moving_up,
            bool(model.double_jumpable),
        )
    return Piece(model.color, model.row, model.column, model.moving_up)

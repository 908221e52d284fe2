"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, model_validator

from src.chess.square import OFF_BOARD
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PieceKind


# --- REQUEST MODELS ---
class CreatePieceRequest(BaseModel):
    """
    NOTE: color and position are NOT range-checked here. The pieces normalize invalid values themselves
    (non-alphabetic color -> BLACK, any coordinate off the board -> both OFF_BOARD).
    """

    kind: PieceKind = PieceKind.PIECE
    color: Optional[str] = None
    row: int = OFF_BOARD
    column: int = OFF_BOARD
    moving_up: bool = False
    castle_moves: Optional[int] = None
    double_jumpable: Optional[bool] = None

    @model_validator(mode="after")
    def validate_kind_specific_fields(self) -> Self:
        if self.castle_moves is not None and self.kind != PieceKind.ROOK:
            raise InvalidRequestError(
                f"Only a rook has castle moves, not a {self.kind.value}."
            )
        if self.double_jumpable is not None and self.kind != PieceKind.PAWN:
            raise InvalidRequestError(
                f"Only a pawn can double jump, not a {self.kind.value}."
            )
        return self


class UpdatePieceRequest(BaseModel):
    """Only the fields that are supplied get updated."""

    piece_id: UUID
    color: Optional[str] = None
    row: Optional[int] = None
    column: Optional[int] = None
    moving_up: Optional[bool] = None

    @model_validator(mode="after")
    def validate_has_update(self) -> Self:
        if all(
            value is None
            for value in (self.color, self.row, self.column, self.moving_up)
        ):
            raise InvalidRequestError(
                f"Nothing to update for piece {self.piece_id}. Supply at least one of color, row, column, moving_up."
            )
        return self


class GetPieceRequest(BaseModel):
    piece_id: UUID


class DeletePieceRequest(BaseModel):
    piece_id: UUID


class CastleRequest(BaseModel):
    rook_id: UUID
    other_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    piece_id: UUID
    kind: PieceKind
    color: str
    row: int
    column: int
    moving_up: bool
    on_board: bool
    castle_moves_left: Optional[int] = None
    double_jumpable: Optional[bool] = None
    description: str


class CastleResponse(BaseModel):
    rook_id: UUID
    other_id: UUID
    can_castle: bool


class PromotionResponse(BaseModel):
    piece_id: UUID
    can_promote: bool

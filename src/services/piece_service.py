"""Orchestration of communication from API models to the piece entities and persistence layer (and the reverse direction)."""

import logging
from typing import TypeVar
from uuid import UUID

from src.api.models import (
    CastleRequest,
    CastleResponse,
    CreatePieceRequest,
    DeletePieceRequest,
    GetPieceRequest,
    PieceResponse,
    PromotionResponse,
    UpdatePieceRequest,
)
from src.chess.pieces import (
    DEFAULT_CASTLE_MOVES,
    Pawn,
    Piece,
    Rook,
    piece_from_model,
)
from src.core.exceptions import InvalidRequestError, RepositoryError
from src.core.models import PieceModel
from src.core.shared_types import PieceKind
from src.db.repository import PieceRepository

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Piece)


class PieceService:
    """Orchestration of layers for chess pieces."""

    def __init__(self, repository: PieceRepository) -> None:
        self.repo = repository

    # -- Public logic ---
    def create_piece(self, request: CreatePieceRequest) -> PieceResponse:
        """Create a new piece. Invalid color / position get normalized by the piece itself, not rejected."""
        piece = self._build_piece(request)
        stored_piece, piece_id = self.repo.create_piece(piece.to_model())
        logger.info("Created %s %s", piece_id, piece.describe())
        return self._create_piece_response(piece_id, stored_piece)

    def get_piece(self, request: GetPieceRequest) -> PieceResponse:
        stored_model = self._fetch_piece(request.piece_id)
        return self._create_piece_response(request.piece_id, stored_model)

    def list_pieces(self) -> list[PieceResponse]:
        return [
            self._create_piece_response(piece_id, model)
            for piece_id, model in self.repo.list_pieces()
        ]

    def update_piece(self, request: UpdatePieceRequest) -> PieceResponse:
        """
        Apply the supplied fields through the piece's own setters.

        ---
        NOTE: A rejected color is the one update the piece reports back, so here it becomes an error (and nothing is stored).
        When both row and column are supplied they are applied together, which is the only way to put an off-board piece back.
        """
        piece = piece_from_model(self._fetch_piece(request.piece_id))

        if request.color is not None and not piece.set_color(request.color):
            logger.warning(
                "Rejected color %r for piece %s", request.color, request.piece_id
            )
            raise InvalidRequestError(
                f"Color must be purely alphabetic, got {request.color!r}."
            )

        if request.row is not None and request.column is not None:
            piece.set_position(request.row, request.column)
        elif request.row is not None:
            piece.set_row(request.row)
        elif request.column is not None:
            piece.set_column(request.column)

        if request.moving_up is not None:
            piece.set_moving_up(request.moving_up)

        return self._store(request.piece_id, piece)

    def toggle_double_jump(self, request: GetPieceRequest) -> PieceResponse:
        pawn = self._fetch_domain_piece(request.piece_id, Pawn)
        pawn.toggle_double_jump()
        return self._store(request.piece_id, pawn)

    def can_castle(self, request: CastleRequest) -> CastleResponse:
        """Ask the rook whether it can castle with the other piece (which can be of any kind)."""
        rook = self._fetch_domain_piece(request.rook_id, Rook)
        other = piece_from_model(self._fetch_piece(request.other_id))
        return CastleResponse(
            rook_id=request.rook_id,
            other_id=request.other_id,
            can_castle=rook.can_castle(other),
        )

    def can_promote(self, request: GetPieceRequest) -> PromotionResponse:
        pawn = self._fetch_domain_piece(request.piece_id, Pawn)
        return PromotionResponse(
            piece_id=request.piece_id, can_promote=pawn.can_promote()
        )

    def display_piece(self, request: GetPieceRequest) -> None:
        """Print the piece's one-line description to stdout."""
        piece_from_model(self._fetch_piece(request.piece_id)).display()

    def delete_piece(self, request: DeletePieceRequest) -> None:
        """Handle a request to delete a piece record."""
        if self.repo.delete_piece(request.piece_id) is None:
            raise RepositoryError(f"Piece with piece_id={request.piece_id} not found.")
        logger.info("Deleted piece %s", request.piece_id)

    # -- Internal helpers --
    def _build_piece(self, request: CreatePieceRequest) -> Piece:
        """Use the kind in the request to pick the class. Left-out kind-specific fields use that class's defaults."""
        if request.kind == PieceKind.ROOK:
            castle_moves = (
                DEFAULT_CASTLE_MOVES
                if request.castle_moves is None
                else request.castle_moves
            )
            return Rook(
                request.color,
                request.row,
                request.column,
                request.moving_up,
                castle_moves,
            )
        if request.kind == PieceKind.PAWN:
            return Pawn(
                request.color,
                request.row,
                request.column,
                request.moving_up,
                bool(request.double_jumpable),
            )
        return Piece(request.color, request.row, request.column, request.moving_up)

    def _store(self, piece_id: UUID, piece: Piece) -> PieceResponse:
        updated = self.repo.update_piece(piece_id, piece.to_model())
        if updated is None:
            raise RepositoryError(f"Piece with {piece_id=} could not be updated.")
        logger.info("Updated %s: %s", piece_id, piece.describe())
        return self._create_piece_response(piece_id, updated)

    def _create_piece_response(
        self, piece_id: UUID, model: PieceModel
    ) -> PieceResponse:
        """
        Convert info in PieceModel to a PieceResponse (for the piece with given ID).

        NOTE: every field comes from the rebuilt piece, so missing or invalid stored values show up normalized.
        """
        piece = piece_from_model(model)
        normalized = piece.to_model()
        return PieceResponse(
            piece_id=piece_id,
            kind=piece.kind,
            color=piece.color,
            row=piece.row,
            column=piece.column,
            moving_up=piece.moving_up,
            on_board=piece.is_on_board,
            castle_moves_left=normalized.castle_moves_left,
            double_jumpable=normalized.double_jumpable,
            description=piece.describe(),
        )

    def _fetch_piece(self, piece_id: UUID) -> PieceModel:
        """Attempt to find the piece in the repository and raise error if it fails."""
        piece_model = self.repo.get_piece(piece_id)
        if piece_model is None:
            raise RepositoryError(f"Piece with {piece_id=} not found.")
        return piece_model

    def _fetch_domain_piece(self, piece_id: UUID, piece_class: type[P]) -> P:
        """Fetch a piece that must be of a specific kind (e.g. only a Rook can castle)."""
        piece = piece_from_model(self._fetch_piece(piece_id))
        if not isinstance(piece, piece_class):
            logger.warning(
                "Piece %s is a %s, expected a %s",
                piece_id,
                piece.kind.value,
                piece_class.kind.value,
            )
            raise InvalidRequestError(
                f"Piece {piece_id} is a {piece.kind.value}, not a {piece_class.kind.value}."
            )
        return piece

"""Implementation of (Piece)Repository using SQLAlchemy"""

from dataclasses import asdict
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import PieceModel
from src.db.schema import DBPiece

# PieceModel field -> DBPiece column, for the fields whose names differ
_RENAMED_COLUMNS: dict[str, str] = {"row": "board_row", "column": "board_column"}


class SQLPieceRepository:
    """Pieces stored in a single SQL table, one row per piece."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_piece(self, piece_id: UUID) -> PieceModel | None:
        piece_db = self._fetch_piece(piece_id)
        return self._to_model(piece_db) if piece_db else None

    def list_pieces(self) -> list[tuple[UUID, PieceModel]]:
        """All stored pieces, oldest first."""
        query = select(DBPiece).order_by(DBPiece.created_at)
        return [
            (piece_db.id, self._to_model(piece_db))
            for piece_db in self.db.scalars(query)
        ]

    def create_piece(self, piece: PieceModel) -> tuple[PieceModel, UUID]:
        """Store new piece and return the stored data + newly created piece ID."""
        piece_db = DBPiece(id=uuid4(), **self._to_columns(piece))
        self.db.add(piece_db)
        self._commit(piece_db)
        return self._to_model(piece_db), piece_db.id

    def update_piece(self, piece_id: UUID, piece: PieceModel) -> PieceModel | None:
        """Overwrite every column of an existing record (the piece may even change kind)."""
        piece_db = self._fetch_piece(piece_id)
        if not piece_db:
            return None
        for column, value in self._to_columns(piece).items():
            setattr(piece_db, column, value)
        self._commit(piece_db)
        return self._to_model(piece_db)

    def delete_piece(self, piece_id: UUID) -> PieceModel | None:
        piece_db = self._fetch_piece(piece_id)
        if not piece_db:
            return None
        piece_model = self._to_model(piece_db)
        self.db.delete(piece_db)
        self.db.commit()
        return piece_model

    # -- Internal helpers --
    def _fetch_piece(self, piece_id: UUID) -> DBPiece | None:
        return self.db.get(DBPiece, piece_id)

    def _commit(self, piece_db: DBPiece) -> None:
        """Commit, then reload so the timestamps set by the database are up to date."""
        self.db.commit()
        self.db.refresh(piece_db)

    @staticmethod
    def _to_columns(piece: PieceModel) -> dict[str, Any]:
        return {
            _RENAMED_COLUMNS.get(field, field): value
            for field, value in asdict(piece).items()
        }

    @staticmethod
    def _to_model(piece_db: DBPiece) -> PieceModel:
        """Convert SQLAlchemy model to data transfer model."""
        return PieceModel(
            kind=piece_db.kind,
            color=piece_db.color,
            row=piece_db.board_row,
            column=piece_db.board_column,
            moving_up=piece_db.moving_up,
            castle_moves_left=piece_db.castle_moves_left,
            double_jumpable=piece_db.double_jumpable,
        )

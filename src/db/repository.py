"""Protocol repository (implemented with SQLAlchemy, but any storage offering these methods will do)"""

from typing import Protocol
from uuid import UUID

from src.core.models import PieceModel


class PieceRepository(Protocol):
    """Persistence layer orchestration"""

    def get_piece(self, piece_id: UUID) -> PieceModel | None:
        """Get piece by ID, if record exists."""
        ...

    def list_pieces(self) -> list[tuple[UUID, PieceModel]]:
        """All stored pieces, oldest first."""
        ...

    def create_piece(self, piece: PieceModel) -> tuple[PieceModel, UUID]:
        """Store new piece and return the stored data + newly created piece ID."""
        ...

    def update_piece(self, piece_id: UUID, piece: PieceModel) -> PieceModel | None:
        """Overwrite an existing record."""
        ...

    def delete_piece(self, piece_id: UUID) -> PieceModel | None:
        """Remove a piece's record."""
        ...

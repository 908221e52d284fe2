"""
Entry point: display every piece stored in the configured database.

Run with `python -m src.main` (configure with the CHESS_* environment variables, see src/core/settings.py).
"""

import logging
from typing import Optional

from src.api.models import GetPieceRequest
from src.core.log_config import setup_logging
from src.core.settings import Settings, get_settings
from src.db.database import create_db_engine, get_db
from src.db.sql_repository import SQLPieceRepository
from src.services.piece_service import PieceService

logger = logging.getLogger(__name__)


def main(settings: Optional[Settings] = None) -> int:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    engine = create_db_engine(settings)
    try:
        for db in get_db(engine):
            service = PieceService(SQLPieceRepository(db))
            pieces = service.list_pieces()
            logger.info("Found %d piece(s)", len(pieces))
            for piece in pieces:
                service.display_piece(GetPieceRequest(piece_id=piece.piece_id))
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBPiece(Base):
    __tablename__ = "pieces"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    kind: Mapped[str]
    color: Mapped[str]
    # "row" / "column" are (non-)reserved words depending on the dialect, so prefix them
    board_row: Mapped[int]
    board_column: Mapped[int]
    moving_up: Mapped[bool]
    castle_moves_left: Mapped[Optional[int]]
    double_jumpable: Mapped[Optional[bool]]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)

"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PieceModel:
    """Transport-safe representation of a single piece used between API, Service, DB, and domain layers."""

    kind: str
    color: str
    row: int
    column: int
    moving_up: bool
    # Only rooks have a castling budget and only pawns a double jump flag. None for every other kind.
    castle_moves_left: Optional[int] = None
    double_jumpable: Optional[bool] = None

"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    """The two colors of a standard game. Pieces accept any alphabetic label, these are just the common ones."""

    WHITE = "WHITE"
    BLACK = "BLACK"


class PieceKind(StrEnum):
    PIECE = "piece"
    ROOK = "rook"
    PAWN = "pawn"

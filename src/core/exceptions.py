"""
Exceptions raised by the layers around the piece entities.

The entities themselves never raise: invalid input is normalized there.
NOTE: PieceError must not derive from ValueError, otherwise pydantic wraps it into a ValidationError when raised from a validator.
"""


class PieceError(Exception):
    """Top-level exception of this project."""


class InvalidRequestError(PieceError):
    """A request could not be interpreted, or asks for something the piece cannot do."""


class RepositoryError(PieceError):
    """Persistence layer could not find (or store) the requested record."""


class PieceStateError(PieceError):
    """Stored data cannot be turned back into a piece."""

"""Errors for the gamestate module.

Backend failures are never wrapped in these types: native client exceptions
propagate unchanged once the retry policy gives up.
"""


class GameStateError(Exception):
    """Base class for game state store errors."""


class ValidationError(GameStateError, ValueError):
    """Raised for malformed or missing input, including malformed page tokens.

    Raised before any backend I/O and never retried.
    """


class NotFoundError(GameStateError):
    """Raised by ``get`` when the backend has no matching record."""


class PaginationError(GameStateError):
    """Raised when a full page is encoded without a native end position."""

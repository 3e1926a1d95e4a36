"""Continuation token protocol shared by all backends."""

from modules.gamestate.pagination.strategies import (
    CursorPagination,
    KeyPagination,
    OffsetPagination,
    PaginationStrategy,
)
from modules.gamestate.pagination.tokens import (
    CursorToken,
    KeyToken,
    OffsetToken,
    PageToken,
)

__all__ = [
    "CursorPagination",
    "CursorToken",
    "KeyPagination",
    "KeyToken",
    "OffsetPagination",
    "OffsetToken",
    "PageToken",
    "PaginationStrategy",
]

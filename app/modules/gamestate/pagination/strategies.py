"""Pagination strategies translating native page state to opaque tokens."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence

from modules.gamestate.domain.errors import PaginationError, ValidationError
from modules.gamestate.pagination.tokens import CursorToken, KeyToken, OffsetToken


class PaginationStrategy(ABC):
    """Turns native page positions into continuation tokens and back.

    The exhaustion rule is shared by every strategy: a page shorter than the
    page size ends the result set and yields ``""``; a full page always
    yields a non-empty token.
    """

    def decode_page(self, token: str) -> Any:
        """Return the native start position for ``token``.

        An empty token means the first page.

        Raises:
            ValidationError: If the token does not have the expected shape.
        """
        if not isinstance(token, str):
            raise ValidationError("Page token must be a string")
        if not token:
            return self.first_page()
        return self._decode(token)

    def encode_page(
        self,
        result_count: int,
        page_size: int,
        prior_token: str = "",
        end_position: Any = None,
    ) -> str:
        """Return the token for the page after the one just read.

        Args:
            result_count: Number of records returned for this page.
            page_size: Requested page size.
            prior_token: Token that produced this page ("" for the first).
            end_position: Native position after the last returned record.

        Raises:
            PaginationError: For a full page the strategy cannot continue.
        """
        if result_count < page_size:
            return ""
        token = self._encode_next(page_size, prior_token, end_position)
        if not token:
            raise PaginationError(
                f"{type(self).__name__}: full page without a native end position"
            )
        return token

    @abstractmethod
    def first_page(self) -> Any:
        """Native start position of the first page."""

    @abstractmethod
    def _decode(self, token: str) -> Any:
        pass

    @abstractmethod
    def _encode_next(self, page_size: int, prior_token: str, end_position: Any) -> str:
        pass


class OffsetPagination(PaginationStrategy):
    """Skip/limit paging; the token is the decimal offset of the next page."""

    def first_page(self) -> int:
        return 0

    def _decode(self, token: str) -> int:
        return OffsetToken.decode(token).offset

    def _encode_next(self, page_size: int, prior_token: str, end_position: Any) -> str:
        return OffsetToken(self.decode_page(prior_token) + page_size).encode()


class CursorPagination(PaginationStrategy):
    """Native cursor paging; the token is URL-safe base64 of the cursor bytes."""

    def first_page(self) -> Optional[bytes]:
        return None

    def _decode(self, token: str) -> bytes:
        return CursorToken.decode(token).cursor

    def _encode_next(
        self, page_size: int, prior_token: str, end_position: Optional[bytes]
    ) -> str:
        if not end_position:
            return ""
        return CursorToken(bytes(end_position)).encode()


class KeyPagination(PaginationStrategy):
    """Exclusive-start-key paging; the token is JSON of the last evaluated key.

    Args:
        key_attributes: Native key attribute names. When given, a decoded key
            must hold exactly these attributes, each a string attribute value
            such as ``{"S": "P1"}``.
    """

    def __init__(self, key_attributes: Optional[Sequence[str]] = None) -> None:
        self._key_attributes = frozenset(key_attributes or ())

    def first_page(self) -> Optional[Dict[str, Any]]:
        return None

    def _decode(self, token: str) -> Dict[str, Any]:
        key = KeyToken.decode(token).key
        if self._key_attributes:
            if set(key) != self._key_attributes:
                raise ValidationError(
                    f"Key page token must hold exactly {sorted(self._key_attributes)}"
                )
            for name, value in key.items():
                if (
                    not isinstance(value, dict)
                    or list(value) != ["S"]
                    or not isinstance(value["S"], str)
                ):
                    raise ValidationError(
                        f"Key page token attribute {name} must be a string value"
                    )
        return key

    def _encode_next(
        self, page_size: int, prior_token: str, end_position: Optional[Dict[str, Any]]
    ) -> str:
        if not end_position:
            return ""
        return KeyToken(dict(end_position)).encode()

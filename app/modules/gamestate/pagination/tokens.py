"""Continuation token types.

Each token type owns its string form. Tokens are opaque to callers and are
not portable between backends; decoding validates only the shape the token
type expects.
"""

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, Dict, Union

from modules.gamestate.domain.errors import ValidationError


@dataclass(frozen=True)
class OffsetToken:
    """Number of records already returned (offset-style backends)."""

    offset: int

    def encode(self) -> str:
        return str(self.offset)

    @classmethod
    def decode(cls, token: str) -> "OffsetToken":
        if not (token.isascii() and token.isdigit()):
            raise ValidationError(f"Malformed offset page token: {token!r}")
        return cls(int(token))


@dataclass(frozen=True)
class CursorToken:
    """Raw end cursor returned by the backend (cursor-style backends)."""

    cursor: bytes

    def encode(self) -> str:
        return base64.urlsafe_b64encode(self.cursor).decode("ascii")

    @classmethod
    def decode(cls, token: str) -> "CursorToken":
        try:
            cursor = base64.b64decode(token.encode("ascii"), altchars=b"-_", validate=True)
        except (UnicodeEncodeError, binascii.Error) as e:
            raise ValidationError(f"Malformed cursor page token: {token!r}") from e
        if not cursor:
            raise ValidationError("Cursor page token is empty")
        return cls(cursor)


@dataclass(frozen=True)
class KeyToken:
    """Last evaluated native key (key-style backends)."""

    key: Dict[str, Any]

    def encode(self) -> str:
        return json.dumps(self.key, sort_keys=True, separators=(",", ":"))

    @classmethod
    def decode(cls, token: str) -> "KeyToken":
        try:
            key = json.loads(token)
        except ValueError as e:
            raise ValidationError(f"Malformed key page token: {token!r}") from e
        if not isinstance(key, dict) or not key:
            raise ValidationError(f"Key page token must be a JSON object: {token!r}")
        return cls(key)


PageToken = Union[OffsetToken, CursorToken, KeyToken]

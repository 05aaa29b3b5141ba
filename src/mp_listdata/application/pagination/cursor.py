"""Application pagination – Cursor token encoding."""
from __future__ import annotations

import base64
import binascii
import dataclasses
import json

from mp_listdata.kernel.errors import InvalidCursorError


@dataclasses.dataclass(frozen=True, slots=True)
class Cursor:
    """Resume position inside a processed result set.

    Encoded as URL-safe base64 of ``{"offset": n}`` without padding.
    """
    offset: int = 0

    def encode(self) -> str:
        payload = json.dumps({"offset": self.offset}, separators=(",", ":")).encode()
        return base64.urlsafe_b64encode(payload).rstrip(b"=").decode("ascii")

    @classmethod
    def decode(cls, token: str) -> Cursor:
        """Decode *token*; empty means offset 0, negative offsets clamp to 0."""
        if not token:
            return cls(0)
        try:
            padded = token + "=" * (-len(token) % 4)
            payload = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
        except (binascii.Error, UnicodeError, ValueError) as exc:
            raise InvalidCursorError(token, cause=exc) from exc
        if not isinstance(payload, dict):
            raise InvalidCursorError(token)
        offset = payload.get("offset")
        if not isinstance(offset, int) or isinstance(offset, bool):
            raise InvalidCursorError(token, "cursor token carries no integer offset")
        return cls(max(0, offset))

    def __str__(self) -> str:
        return self.encode()


__all__ = ["Cursor"]

"""Keyset cursor for the notes list.

A cursor marks the last item of a page by its ``(updated_at, id)`` pair. On
the wire it is URL-safe base64 of ``{"updatedAt": ..., "id": ...}``.
"""

import base64
import binascii
import json
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class NoteCursor:
    updated_at: datetime
    id: uuid.UUID

    def encode(self) -> str:
        payload = json.dumps(
            {"updatedAt": _as_utc(self.updated_at).isoformat(), "id": str(self.id)},
            separators=(",", ":"),
        )
        return base64.urlsafe_b64encode(payload.encode()).decode().rstrip("=")

    @classmethod
    def decode(cls, raw: Optional[str]) -> Optional["NoteCursor"]:
        """Parse a cursor; anything malformed means "start from the first page"."""
        if not raw:
            return None
        try:
            padded = raw + "=" * (-len(raw) % 4)
            data = json.loads(base64.urlsafe_b64decode(padded.encode()))
            return cls(
                updated_at=_as_utc(datetime.fromisoformat(data["updatedAt"])),
                id=uuid.UUID(str(data["id"])),
            )
        except (
            binascii.Error, UnicodeDecodeError, ValueError, KeyError, TypeError, OverflowError
        ):
            return None


def _as_utc(value: datetime) -> datetime:
    # SQLite returns naive values; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def clamp_page_size(limit: Optional[int], default: int, maximum: int) -> int:
    if not limit or limit < 1:
        return default
    return min(limit, maximum)

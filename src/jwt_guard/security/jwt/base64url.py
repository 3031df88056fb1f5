"""Unpadded URL-safe base64 as used by every compact-serialization segment."""
from __future__ import annotations

import base64
import binascii
import re

from jwt_guard.kernel.errors import InvalidTokenStructureError

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    """Encode *data* with the URL-safe alphabet and strip trailing ``=``."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(segment: str) -> bytes:
    """Decode an unpadded base64url *segment*.

    Raises:
        InvalidTokenStructureError: on characters outside ``A-Z a-z 0-9 - _``
            or a length that cannot be a base64 encoding (``len % 4 == 1``).
    """
    if not _ALPHABET.fullmatch(segment):
        raise InvalidTokenStructureError("Segment contains characters outside the base64url alphabet")
    if len(segment) % 4 == 1:
        raise InvalidTokenStructureError("Segment length is not a valid base64url length")
    padded = segment + "=" * (-len(segment) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise InvalidTokenStructureError("Segment is not valid base64url", cause=exc) from exc


__all__ = ["b64url_decode", "b64url_encode"]

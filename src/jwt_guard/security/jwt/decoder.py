"""Structural decoding of compact-serialization tokens.

``header.body.signature`` → :class:`Token`. Nothing here looks at time,
audience or the signature bytes; that is the validators' and verifier's job.
"""
from __future__ import annotations

import json
from typing import Any, TypeVar

from jwt_guard.kernel.errors import InvalidTokenStructureError
from jwt_guard.security.jwt.base64url import b64url_decode
from jwt_guard.security.jwt.claims import Body, ClaimSet, Header, Token

SEGMENT_COUNT = 3

C = TypeVar("C", bound=ClaimSet)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _last_wins(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for name, value in pairs:
        obj[name] = value
    return obj


def parse_json_object(data: bytes) -> list[tuple[str, Any]]:
    """Parse *data* as a UTF-8 JSON object and return its members in document order.

    Every object, nested or not, keeps the last occurrence of a duplicate name;
    the parser builds each one in a single pass.
    ``NaN`` / ``Infinity`` literals are rejected.
    """
    try:
        members = json.loads(
            data.decode("utf-8"),
            object_pairs_hook=_last_wins,
            parse_constant=_reject_constant,
        )
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise InvalidTokenStructureError("Segment is not valid JSON", cause=exc) from exc
    if not isinstance(members, dict):
        raise InvalidTokenStructureError("Segment is not a JSON object")
    return list(members.items())


class TokenDecoder:
    """Split, base64url-decode and parse a raw token into a :class:`Token`."""

    def decode(self, raw: str) -> Token:
        """Decode *raw* or raise :class:`InvalidTokenStructureError`.

        The signature segment is kept verbatim and never decoded here.
        """
        if not isinstance(raw, str):
            raise InvalidTokenStructureError("Token must be a string")
        segments = raw.split(".")
        if len(segments) != SEGMENT_COUNT:
            raise InvalidTokenStructureError(
                f"Token must have {SEGMENT_COUNT} segments, got {len(segments)}",
                detail={"segments": len(segments)},
            )
        header_segment, body_segment, signature = segments
        return Token(
            header=self._claim_set(Header, header_segment),
            body=self._claim_set(Body, body_segment),
            signature=signature,
            header_segment=header_segment,
            body_segment=body_segment,
        )

    @staticmethod
    def _claim_set(kind: type[C], segment: str) -> C:
        return kind(parse_json_object(b64url_decode(segment)))


__all__ = ["SEGMENT_COUNT", "TokenDecoder", "parse_json_object"]

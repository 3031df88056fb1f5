"""Compact serialisation of a :class:`Token`.

Tokens are emitted unsigned (empty third segment); signing belongs to the
caller's key-management layer.
"""
from __future__ import annotations

import json
from typing import Any

from jwt_guard.kernel.time import Clock, SystemClock
from jwt_guard.security.jwt.base64url import b64url_encode
from jwt_guard.security.jwt.claims import Body, ClaimSet, Header, Token
from jwt_guard.security.jwt.options import IssuingOptions


def _segment(claims: ClaimSet) -> str:
    compact = {k: v for k, v in claims.items() if v is not None}
    return b64url_encode(json.dumps(compact, separators=(",", ":"), ensure_ascii=False).encode("utf-8"))


class TokenIssuer:
    def __init__(self, options: IssuingOptions | None = None, clock: Clock | None = None) -> None:
        self._options = options or IssuingOptions()
        self._clock = clock or SystemClock()

    def issue(self, token: Token) -> str:
        """Serialise *token* as ``header.body.`` with the issuing defaults applied."""
        header: dict[str, Any] = token.header.to_dict()
        body: dict[str, Any] = token.body.to_dict()
        if self._options.default_type is not None:
            header.setdefault("typ", self._options.default_type)
        if self._options.set_issued_at:
            body.setdefault("iat", self._clock.now())
        return f"{_segment(Header(header))}.{_segment(Body(body))}."


__all__ = ["TokenIssuer"]

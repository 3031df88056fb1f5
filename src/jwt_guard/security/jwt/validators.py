"""Per-claim validators: expiration, not-before and audience.

Each validator is a pure function of ``(body, now, skew)`` and its options. It
returns ``None`` when the token passes and the :class:`TokenError` describing
the first problem otherwise; it never raises for a policy failure.
"""
from __future__ import annotations

import abc
from datetime import timedelta

from jwt_guard.kernel.errors import (
    InvalidAudienceError,
    MissingRequiredClaimError,
    TokenError,
    TokenExpiredError,
    TokenNotYetValidError,
)
from jwt_guard.security.jwt.claims import Body
from jwt_guard.security.jwt.options import AudienceOptions, ExpirationOptions, NotBeforeOptions


def _seconds(skew: timedelta) -> int:
    return int(skew.total_seconds())


class ClaimValidator(abc.ABC):
    """Port: one claim policy."""

    claim: str

    @abc.abstractmethod
    def validate(self, body: Body, now: int, skew: timedelta) -> TokenError | None: ...


class ExpirationValidator(ClaimValidator):
    """Rejects a token at or after its ``exp`` instant.

    Expired when ``now + skew >= exp``; equality counts as expired.
    """

    claim = "exp"

    def __init__(self, options: ExpirationOptions | None = None) -> None:
        self._options = options or ExpirationOptions()

    def validate(self, body: Body, now: int, skew: timedelta) -> TokenError | None:
        opts = self._options
        if not opts.is_expiration_validation_enabled:
            return None
        exp = body.expiration_time
        if exp is None:
            return MissingRequiredClaimError(self.claim) if opts.is_expiration_claim_required else None
        if now + _seconds(skew + opts.clock_skew) >= exp:
            return TokenExpiredError(detail={"exp": exp, "now": now})
        return None


class NotBeforeValidator(ClaimValidator):
    """Rejects a token before its ``nbf`` instant (``now + skew < nbf``)."""

    claim = "nbf"

    def __init__(self, options: NotBeforeOptions | None = None) -> None:
        self._options = options or NotBeforeOptions()

    def validate(self, body: Body, now: int, skew: timedelta) -> TokenError | None:
        opts = self._options
        if not opts.is_not_before_validation_enabled:
            return None
        nbf = body.not_before
        if nbf is None:
            return MissingRequiredClaimError(self.claim) if opts.is_not_before_claim_required else None
        if now + _seconds(skew + opts.clock_skew) < nbf:
            return TokenNotYetValidError(detail={"nbf": nbf, "now": now})
        return None


class AudienceValidator(ClaimValidator):
    """Passes when any configured audience appears in ``aud`` (exact match)."""

    claim = "aud"

    def __init__(self, options: AudienceOptions | None = None) -> None:
        self._options = options or AudienceOptions()

    def validate(self, body: Body, now: int, skew: timedelta) -> TokenError | None:  # noqa: ARG002
        opts = self._options
        if not opts.is_audience_validation_enabled:
            return None
        aud = body.audience
        if aud is None:
            return MissingRequiredClaimError(self.claim) if opts.is_audience_claim_required else None
        if opts.expected.isdisjoint(aud):
            return InvalidAudienceError(detail={"aud": list(aud)})
        return None


__all__ = [
    "AudienceValidator",
    "ClaimValidator",
    "ExpirationValidator",
    "NotBeforeValidator",
]

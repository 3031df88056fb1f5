"""Validator options — immutable, strict by default.

Every group has two axes: whether the check runs at all (``*_validation_enabled``)
and whether the claim must be present when it does (``*_claim_required``).
The defaults are the most secure posture: everything on, everything required,
no clock skew. Skews are whole seconds, since NumericDate claims are.
"""
from __future__ import annotations

import dataclasses
from datetime import timedelta

from jwt_guard.kernel.time import ZERO_SKEW


def _check_skew(clock_skew: timedelta) -> None:
    if clock_skew < ZERO_SKEW:
        raise ValueError("clock_skew must not be negative")
    if clock_skew.microseconds:
        raise ValueError("clock_skew must be a whole number of seconds")


@dataclasses.dataclass(frozen=True)
class ExpirationOptions:
    is_expiration_validation_enabled: bool = True
    is_expiration_claim_required: bool = True
    clock_skew: timedelta = ZERO_SKEW

    def __post_init__(self) -> None:
        _check_skew(self.clock_skew)


@dataclasses.dataclass(frozen=True)
class NotBeforeOptions:
    is_not_before_validation_enabled: bool = True
    is_not_before_claim_required: bool = True
    clock_skew: timedelta = ZERO_SKEW

    def __post_init__(self) -> None:
        _check_skew(self.clock_skew)


@dataclasses.dataclass(frozen=True)
class AudienceOptions:
    """``expected_audience`` may be one value or several; any match passes."""

    is_audience_validation_enabled: bool = True
    is_audience_claim_required: bool = True
    expected_audience: str | tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.expected_audience, (list, set, frozenset)):
            object.__setattr__(self, "expected_audience", tuple(self.expected_audience))

    @property
    def expected(self) -> frozenset[str]:
        if self.expected_audience is None:
            return frozenset()
        if isinstance(self.expected_audience, str):
            return frozenset({self.expected_audience})
        return frozenset(self.expected_audience)


AudianceOptions = AudienceOptions


@dataclasses.dataclass(frozen=True)
class TokenValidatorOptions:
    expiration: ExpirationOptions = dataclasses.field(default_factory=ExpirationOptions)
    not_before: NotBeforeOptions = dataclasses.field(default_factory=NotBeforeOptions)
    audience: AudienceOptions = dataclasses.field(default_factory=AudienceOptions)

    @classmethod
    def permissive(cls) -> TokenValidatorOptions:
        """Every check disabled and no claim required; structure is still enforced."""
        return cls(
            expiration=ExpirationOptions(False, False),
            not_before=NotBeforeOptions(False, False),
            audience=AudienceOptions(False, False),
        )


@dataclasses.dataclass(frozen=True)
class IssuingOptions:
    """Defaults stamped onto tokens by :class:`~jwt_guard.security.jwt.issuer.TokenIssuer`."""

    default_type: str | None = "JWT"
    set_issued_at: bool = False


__all__ = [
    "AudianceOptions",
    "AudienceOptions",
    "ExpirationOptions",
    "IssuingOptions",
    "NotBeforeOptions",
    "TokenValidatorOptions",
]

"""Config settings – TokenValidatorSettings.

Flat, env-loadable view of :class:`TokenValidatorOptions`::

    JWT_EXPIRATION_CLOCK_SKEW_SECONDS=30
    JWT_EXPECTED_AUDIENCE=api,admin
"""
from __future__ import annotations

import dataclasses
from datetime import timedelta

from jwt_guard.config.validation import InvalidSettingValueError
from jwt_guard.security.jwt.options import (
    AudienceOptions,
    ExpirationOptions,
    NotBeforeOptions,
    TokenValidatorOptions,
)


@dataclasses.dataclass
class TokenValidatorSettings:
    _prefix: dataclasses.ClassVar[str] = "JWT"

    expiration_validation_enabled: bool = True
    expiration_claim_required: bool = True
    expiration_clock_skew_seconds: int = 0
    not_before_validation_enabled: bool = True
    not_before_claim_required: bool = True
    not_before_clock_skew_seconds: int = 0
    audience_validation_enabled: bool = True
    audience_claim_required: bool = True
    expected_audience: list[str] = dataclasses.field(default_factory=list)

    def __post_init__(self) -> None:
        for name in ("expiration_clock_skew_seconds", "not_before_clock_skew_seconds"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidSettingValueError(name, value, "must not be negative")

    def to_options(self) -> TokenValidatorOptions:
        return TokenValidatorOptions(
            expiration=ExpirationOptions(
                is_expiration_validation_enabled=self.expiration_validation_enabled,
                is_expiration_claim_required=self.expiration_claim_required,
                clock_skew=timedelta(seconds=self.expiration_clock_skew_seconds),
            ),
            not_before=NotBeforeOptions(
                is_not_before_validation_enabled=self.not_before_validation_enabled,
                is_not_before_claim_required=self.not_before_claim_required,
                clock_skew=timedelta(seconds=self.not_before_clock_skew_seconds),
            ),
            audience=AudienceOptions(
                is_audience_validation_enabled=self.audience_validation_enabled,
                is_audience_claim_required=self.audience_claim_required,
                expected_audience=tuple(self.expected_audience) or None,
            ),
        )


__all__ = ["TokenValidatorSettings"]

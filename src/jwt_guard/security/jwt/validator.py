"""TokenValidator — the decode-and-validate entry point.

Evaluation order is fixed: structural decode, signature (only when a verifier
is configured), expiration, not-before, audience. The first failure wins and
no token is returned alongside it.

A validator holds only immutable configuration, so one instance can serve
many threads at once.
"""
from __future__ import annotations

from jwt_guard.kernel.errors import TokenError
from jwt_guard.kernel.time import Clock, SystemClock
from jwt_guard.kernel.types import Err, Ok, Result
from jwt_guard.observability.logging import get_logger
from jwt_guard.security.jwt.claims import Token
from jwt_guard.security.jwt.decoder import TokenDecoder
from jwt_guard.security.jwt.options import TokenValidatorOptions
from jwt_guard.security.jwt.validators import (
    AudienceValidator,
    ClaimValidator,
    ExpirationValidator,
    NotBeforeValidator,
)
from jwt_guard.security.jwt.verifier import SignatureVerifier, verify_signature


class TokenValidator:
    """Decode a raw compact JWT and enforce the configured claim policies.

    Examples:
        >>> validator = TokenValidator(clock=FrozenClock(1300819379))
        >>> ok, token, error = validator.try_get_value(raw)
        >>> if ok:
        ...     print(token.body.issuer)
    """

    def __init__(
        self,
        options: TokenValidatorOptions | None = None,
        clock: Clock | None = None,
        verifier: SignatureVerifier | None = None,
        decoder: TokenDecoder | None = None,
    ) -> None:
        self._options = options or TokenValidatorOptions()
        self._clock = clock or SystemClock()
        self._verifier = verifier
        self._decoder = decoder or TokenDecoder()
        self._validators: tuple[ClaimValidator, ...] = (
            ExpirationValidator(self._options.expiration),
            NotBeforeValidator(self._options.not_before),
            AudienceValidator(self._options.audience),
        )
        self._logger = get_logger(__name__)

    @property
    def options(self) -> TokenValidatorOptions:
        return self._options

    def validate(self, raw: str) -> Result[Token, TokenError]:
        """Return ``Ok(token)`` or ``Err(error)``; never raises for a bad token."""
        try:
            token = self._decoder.decode(raw)
            if self._verifier is not None:
                verify_signature(token, self._verifier)
        except TokenError as exc:
            return self._reject(exc)

        # one snapshot so exp and nbf see the same instant
        now = self._clock.now()
        skew = self._clock.skew()
        for validator in self._validators:
            error = validator.validate(token.body, now, skew)
            if error is not None:
                return self._reject(error)
        return Ok(token)

    def try_get_value(self, raw: str) -> tuple[bool, Token | None, TokenError | None]:
        """``(ok, token, error)`` with exactly one of *token* / *error* set."""
        result = self.validate(raw)
        if isinstance(result, Ok):
            return True, result.value, None
        return False, None, result.error

    def _reject(self, error: TokenError) -> Err[TokenError]:
        self._logger.debug("token_rejected", **error.to_dict())
        return Err(error)


__all__ = ["TokenValidator"]

"""Token errors — one class per way a bearer token can be rejected.

Every class carries an :class:`ErrorKind` so callers can branch on a flat
enumeration without ``isinstance`` chains::

    result = validator.validate(raw)
    if result.is_err() and result.error.kind is ErrorKind.TOKEN_EXPIRED:
        ...
"""

from __future__ import annotations

import enum
from typing import Any, ClassVar

from jwt_guard.kernel.errors.application import UnauthorizedError


class ErrorKind(enum.Enum):
    INVALID_TOKEN_STRUCTURE = "invalid_token_structure"
    MISSING_REQUIRED_CLAIM = "missing_required_claim"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_NOT_YET_VALID = "token_not_yet_valid"
    INVALID_AUDIENCE = "invalid_audience"
    INVALID_SIGNATURE = "invalid_signature"


class TokenError(UnauthorizedError):
    """Base class for every token rejection."""

    kind: ClassVar[ErrorKind]
    default_code = "invalid_token"
    default_message: ClassVar[str] = "Invalid token"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        if hasattr(type(self), "kind"):
            kwargs.setdefault("code", self.kind.value)
        super().__init__(message or self.default_message, **kwargs)


class InvalidTokenStructureError(TokenError):
    """Bad segment count, bad base64url, bad JSON or a mistyped registered claim."""

    kind = ErrorKind.INVALID_TOKEN_STRUCTURE
    default_message = "Token structure is invalid"


class MissingRequiredClaimError(TokenError):
    """A claim is absent while its policy marks it required."""

    kind = ErrorKind.MISSING_REQUIRED_CLAIM

    def __init__(self, claim_name: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"claim": claim_name})
        super().__init__(f"Required claim '{claim_name}' is missing", **kwargs)
        self.claim_name = claim_name


class TokenExpiredError(TokenError):
    kind = ErrorKind.TOKEN_EXPIRED
    default_message = "Token has expired"


class TokenNotYetValidError(TokenError):
    kind = ErrorKind.TOKEN_NOT_YET_VALID
    default_message = "Token is not yet valid"


class InvalidAudienceError(TokenError):
    kind = ErrorKind.INVALID_AUDIENCE
    default_message = "Token audience does not match"


class InvalidSignatureError(TokenError):
    """Only produced when a signature verifier is configured."""

    kind = ErrorKind.INVALID_SIGNATURE
    default_message = "Token signature could not be verified"


__all__ = [
    "ErrorKind",
    "InvalidAudienceError",
    "InvalidSignatureError",
    "InvalidTokenStructureError",
    "MissingRequiredClaimError",
    "TokenError",
    "TokenExpiredError",
    "TokenNotYetValidError",
]

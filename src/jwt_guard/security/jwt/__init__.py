"""Security – JWT decoding and claim validation (RFC 7519)."""
from jwt_guard.kernel.errors import (
    ErrorKind,
    InvalidAudienceError,
    InvalidSignatureError,
    InvalidTokenStructureError,
    MissingRequiredClaimError,
    TokenError,
    TokenExpiredError,
    TokenNotYetValidError,
)
from jwt_guard.security.jwt.base64url import b64url_decode, b64url_encode
from jwt_guard.security.jwt.claims import Body, ClaimSet, Header, Token
from jwt_guard.security.jwt.decoder import TokenDecoder
from jwt_guard.security.jwt.issuer import TokenIssuer
from jwt_guard.security.jwt.options import (
    AudianceOptions,
    AudienceOptions,
    ExpirationOptions,
    IssuingOptions,
    NotBeforeOptions,
    TokenValidatorOptions,
)
from jwt_guard.security.jwt.validator import TokenValidator
from jwt_guard.security.jwt.validators import (
    AudienceValidator,
    ClaimValidator,
    ExpirationValidator,
    NotBeforeValidator,
)
from jwt_guard.security.jwt.verifier import PyJwtSignatureVerifier, SignatureVerifier, verify_signature

__all__ = [
    "AudianceOptions",
    "AudienceOptions",
    "AudienceValidator",
    "Body",
    "ClaimSet",
    "ClaimValidator",
    "ErrorKind",
    "ExpirationOptions",
    "ExpirationValidator",
    "Header",
    "InvalidAudienceError",
    "InvalidSignatureError",
    "InvalidTokenStructureError",
    "IssuingOptions",
    "MissingRequiredClaimError",
    "NotBeforeOptions",
    "NotBeforeValidator",
    "PyJwtSignatureVerifier",
    "SignatureVerifier",
    "Token",
    "TokenDecoder",
    "TokenError",
    "TokenExpiredError",
    "TokenIssuer",
    "TokenNotYetValidError",
    "TokenValidator",
    "TokenValidatorOptions",
    "b64url_decode",
    "b64url_encode",
    "verify_signature",
]

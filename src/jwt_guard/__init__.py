"""jwt-guard – decode and validate compact-serialization JSON Web Tokens (RFC 7519)."""
from jwt_guard.security.jwt import (
    Body,
    ErrorKind,
    Header,
    Token,
    TokenDecoder,
    TokenError,
    TokenIssuer,
    TokenValidator,
    TokenValidatorOptions,
)

__version__ = "0.1.0"

__all__ = [
    "Body",
    "ErrorKind",
    "Header",
    "Token",
    "TokenDecoder",
    "TokenError",
    "TokenIssuer",
    "TokenValidator",
    "TokenValidatorOptions",
    "__version__",
]

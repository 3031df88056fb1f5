"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError              (application.py)
        ├── UnauthorizedError
        │   └── TokenError            (token.py)
        │       ├── InvalidTokenStructureError
        │       ├── MissingRequiredClaimError
        │       ├── TokenExpiredError
        │       ├── TokenNotYetValidError
        │       ├── InvalidAudienceError
        │       └── InvalidSignatureError
        └── ConfigError               (config/validation)
"""

from jwt_guard.kernel.errors.application import ApplicationError, UnauthorizedError
from jwt_guard.kernel.errors.base import BaseError
from jwt_guard.kernel.errors.token import (
    ErrorKind,
    InvalidAudienceError,
    InvalidSignatureError,
    InvalidTokenStructureError,
    MissingRequiredClaimError,
    TokenError,
    TokenExpiredError,
    TokenNotYetValidError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ErrorKind",
    "InvalidAudienceError",
    "InvalidSignatureError",
    "InvalidTokenStructureError",
    "MissingRequiredClaimError",
    "TokenError",
    "TokenExpiredError",
    "TokenNotYetValidError",
    "UnauthorizedError",
]

"""Application-layer errors — raised at the use-case boundary."""

from __future__ import annotations

from jwt_guard.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """Missing or invalid credentials."""

    default_code = "unauthorized"


__all__ = ["ApplicationError", "UnauthorizedError"]

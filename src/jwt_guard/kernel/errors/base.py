"""Root error class for the jwt-guard error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context; merged flat into :meth:`to_dict`, so keys must
            not collide with ``code`` / ``message`` / ``kind``.
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flat, log-ready fields: ``code``, ``message``, ``kind`` when the
        subclass declares one, the ``detail`` entries and ``cause``."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        kind = getattr(type(self), "kind", None)
        if kind is not None:
            payload["kind"] = kind.name
        for key, value in self.detail.items():
            payload.setdefault(key, value)
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]

"""Signature verification seam.

This package does not implement any signing primitive. A caller hands a
:class:`SignatureVerifier` to :class:`~jwt_guard.security.jwt.validator.TokenValidator`
(or calls :func:`verify_signature` itself) and the verifier decides whether the
signature over ``header_segment.body_segment`` is authentic.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from jwt.algorithms import Algorithm, get_default_algorithms

from jwt_guard.kernel.errors import InvalidSignatureError, InvalidTokenStructureError
from jwt_guard.security.jwt.base64url import b64url_decode
from jwt_guard.security.jwt.claims import Token


class SignatureVerifier(Protocol):
    """Port: ``verify(signing_input, signature, algorithm) -> bool``."""

    def verify(self, signing_input: bytes, signature: bytes, algorithm: str | None) -> bool: ...


class PyJwtSignatureVerifier:
    """Verify with PyJWT's algorithm registry, restricted to an allow-list.

    ``none`` can never be allowed. RSA / EC algorithms need the ``cryptography``
    package, as they do for PyJWT itself.
    """

    def __init__(self, key: Any, algorithms: Iterable[str] = ("HS256",)) -> None:
        names = list(algorithms)
        if not names:
            raise ValueError("At least one algorithm must be allowed")
        if "none" in names:
            raise ValueError("The 'none' algorithm cannot be allowed")
        registry = get_default_algorithms()
        unknown = [n for n in names if n not in registry]
        if unknown:
            raise ValueError(f"Unsupported algorithms: {', '.join(unknown)}")
        self._algorithms: dict[str, Algorithm] = {n: registry[n] for n in names}
        self._key = key

    @property
    def algorithms(self) -> tuple[str, ...]:
        return tuple(self._algorithms)

    def verify(self, signing_input: bytes, signature: bytes, algorithm: str | None) -> bool:
        algo = self._algorithms.get(algorithm or "")
        if algo is None:
            return False
        return bool(algo.verify(signing_input, algo.prepare_key(self._key), signature))


def verify_signature(token: Token, verifier: SignatureVerifier) -> None:
    """Raise :class:`InvalidSignatureError` unless *verifier* accepts *token*.

    Exceptions raised by the verifier are wrapped, with the original kept as
    ``cause``.
    """
    try:
        signature = b64url_decode(token.signature)
    except InvalidTokenStructureError as exc:
        raise InvalidSignatureError("Signature segment is not valid base64url", cause=exc) from exc
    try:
        accepted = verifier.verify(token.signing_input, signature, token.header.algorithm)
    except Exception as exc:
        raise InvalidSignatureError("Signature verifier failed", cause=exc) from exc
    if not accepted:
        raise InvalidSignatureError(detail={"alg": token.header.algorithm})


__all__ = ["PyJwtSignatureVerifier", "SignatureVerifier", "verify_signature"]

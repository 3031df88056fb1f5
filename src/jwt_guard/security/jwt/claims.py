"""Claim sets, the Header / Body pair and the decoded Token.

A :class:`ClaimSet` is a read-only mapping built from ``(name, value)`` pairs
in document order; a repeated name overwrites the earlier one, so the lexically
last duplicate wins (RFC 7159 §4, ECMAScript 5.1 §15.12).

Registered claims are type-checked when the set is built. A registered claim
holding the wrong JSON type is a structural defect of the token and raises
:class:`InvalidTokenStructureError`; JSON ``null`` is treated as absent.
"""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Callable, ClassVar

from jwt_guard.kernel.errors import InvalidTokenStructureError

JsonValue = None | bool | int | float | str | list[Any] | dict[str, Any]


def _structure_error(name: str, expected: str) -> InvalidTokenStructureError:
    return InvalidTokenStructureError(
        f"Claim '{name}' must be {expected}",
        detail={"claim": name},
    )


def _string(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise _structure_error(name, "a string")
    return value


def _numeric_date(name: str, value: Any) -> int:
    """Whole seconds since the epoch; integral floats are normalised to ``int``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _structure_error(name, "a NumericDate")
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise _structure_error(name, "a NumericDate")
        return int(value)
    return value


def _audience(name: str, value: Any) -> str | list[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    raise _structure_error(name, "a string or an array of strings")


class ClaimSet(Mapping[str, Any]):
    """Read-only claim-name → JSON-value mapping with typed registered claims."""

    registered: ClassVar[Mapping[str, Callable[[str, Any], Any]]] = {}

    __slots__ = ("_claims",)

    def __init__(self, claims: Mapping[str, Any] | Iterable[tuple[str, Any]] = ()) -> None:
        pairs = claims.items() if isinstance(claims, Mapping) else claims
        resolved: dict[str, Any] = {}
        for name, value in pairs:
            if not isinstance(name, str):
                raise InvalidTokenStructureError("Claim names must be strings")
            resolved[name] = value
        for name, check in self.registered.items():
            value = resolved.get(name)
            if value is None:
                resolved.pop(name, None)
            else:
                resolved[name] = check(name, value)
        self._claims = resolved

    def __getitem__(self, name: str) -> Any:
        return self._claims[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._claims)

    def __len__(self) -> int:
        return len(self._claims)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._claims!r})"

    @property
    def claims(self) -> Mapping[str, Any]:
        """Every claim, registered and custom."""
        return MappingProxyType(self._claims)

    @property
    def custom_claims(self) -> dict[str, Any]:
        """Claims this model does not interpret; passed through untouched."""
        return {k: v for k, v in self._claims.items() if k not in self.registered}

    def to_dict(self) -> dict[str, Any]:
        return dict(self._claims)


class Header(ClaimSet):
    """JOSE header. ``alg`` is exposed but never trusted here."""

    registered = {"typ": _string, "alg": _string}

    __slots__ = ()

    @property
    def type(self) -> str | None:
        return self._claims.get("typ")

    @property
    def algorithm(self) -> str | None:
        return self._claims.get("alg")


class Body(ClaimSet):
    """JWT claims set with the seven registered claims of RFC 7519 §4.1."""

    registered = {
        "iss": _string,
        "sub": _string,
        "aud": _audience,
        "exp": _numeric_date,
        "nbf": _numeric_date,
        "iat": _numeric_date,
        "jti": _string,
    }

    __slots__ = ()

    @property
    def issuer(self) -> str | None:
        return self._claims.get("iss")

    @property
    def subject(self) -> str | None:
        return self._claims.get("sub")

    @property
    def audience(self) -> tuple[str, ...] | None:
        """``aud`` as a tuple, whether it was sent as a string or an array."""
        aud = self._claims.get("aud")
        if aud is None:
            return None
        return (aud,) if isinstance(aud, str) else tuple(aud)

    @property
    def expiration_time(self) -> int | None:
        return self._claims.get("exp")

    @property
    def not_before(self) -> int | None:
        return self._claims.get("nbf")

    @property
    def issued_at(self) -> int | None:
        return self._claims.get("iat")

    @property
    def jwt_id(self) -> str | None:
        return self._claims.get("jti")


@dataclasses.dataclass(frozen=True)
class Token:
    """A structurally valid token. Only ever built by a successful decode or by hand."""

    header: Header
    body: Body
    signature: str = ""
    header_segment: str = dataclasses.field(default="", repr=False, compare=False)
    body_segment: str = dataclasses.field(default="", repr=False, compare=False)

    @property
    def signing_input(self) -> bytes:
        """``header_segment + "." + body_segment`` as ASCII, the JWS signing input."""
        return f"{self.header_segment}.{self.body_segment}".encode("ascii")


__all__ = ["Body", "ClaimSet", "Header", "JsonValue", "Token"]

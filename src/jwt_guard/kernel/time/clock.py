"""Kernel time – Clock protocol + implementations.

A clock answers two questions: the current instant as whole seconds since the
Unix epoch, and how much drift between issuer and validator to tolerate.
"""
from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, Protocol

ZERO_SKEW = timedelta(0)


class Clock(Protocol):
    """Port: abstract clock for deterministic claim checks."""

    def now(self) -> int: ...
    def skew(self) -> timedelta: ...


class _SkewedClock:
    def __init__(self, clock_skew: timedelta = ZERO_SKEW) -> None:
        if clock_skew < ZERO_SKEW:
            raise ValueError("clock_skew must not be negative")
        if clock_skew.microseconds:
            raise ValueError("clock_skew must be a whole number of seconds")
        self._clock_skew = clock_skew

    def skew(self) -> timedelta:
        return self._clock_skew


class SystemClock(_SkewedClock):
    """Production clock that truncates ``time.time()`` to whole seconds."""

    def now(self) -> int:
        return int(time.time())


class FrozenClock(_SkewedClock):
    """Test clock pinned to a fixed epoch second."""

    def __init__(self, fixed: int, clock_skew: timedelta = ZERO_SKEW) -> None:
        super().__init__(clock_skew)
        self._fixed = int(fixed)

    def now(self) -> int:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += int(timedelta(**kwargs).total_seconds())


class CallableClock(_SkewedClock):
    """Clock backed by a caller-supplied ``get_current_time`` function."""

    def __init__(
        self,
        get_current_time: Callable[[], int],
        clock_skew: timedelta = ZERO_SKEW,
    ) -> None:
        super().__init__(clock_skew)
        self._get_current_time = get_current_time

    def now(self) -> int:
        return int(self._get_current_time())


def epoch_seconds() -> int:
    """Shorthand for the current Unix time in whole seconds."""
    return int(time.time())


__all__ = ["ZERO_SKEW", "CallableClock", "Clock", "FrozenClock", "SystemClock", "epoch_seconds"]

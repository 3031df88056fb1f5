"""Kernel time – Clock port + implementations."""
from jwt_guard.kernel.time.clock import (
    ZERO_SKEW,
    CallableClock,
    Clock,
    FrozenClock,
    SystemClock,
    epoch_seconds,
)

__all__ = ["ZERO_SKEW", "CallableClock", "Clock", "FrozenClock", "SystemClock", "epoch_seconds"]

"""Testing fakes."""
from jwt_guard.testing.fakes.clock import FAKE_NOW, FakeClock

__all__ = ["FAKE_NOW", "FakeClock"]

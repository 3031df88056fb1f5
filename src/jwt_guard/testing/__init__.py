"""Testing helpers – fake clocks and token builders for deterministic tests."""
from jwt_guard.testing.fakes import FAKE_NOW, FakeClock
from jwt_guard.testing.generators import StepClock, encode_segment, make_token

__all__ = ["FAKE_NOW", "FakeClock", "StepClock", "encode_segment", "make_token"]

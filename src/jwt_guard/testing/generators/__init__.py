"""Testing generators."""
from jwt_guard.testing.generators.step_clock import StepClock
from jwt_guard.testing.generators.tokens import encode_segment, make_token

__all__ = ["StepClock", "encode_segment", "make_token"]

"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from jwt_guard.kernel.time import FrozenClock
from jwt_guard.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)
from jwt_guard.security.jwt import TokenValidator, TokenValidatorOptions
from jwt_guard.testing import make_token


@pytest.fixture
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_token_fields_in_defaults(self) -> None:
        assert {"token", "authorization", "signature"} <= DEFAULT_SENSITIVE_FIELDS

    def test_redact(self) -> None:
        result = SensitiveFieldsFilter().redact({"token": "abc", "user": "joe"})
        assert result == {"token": "[REDACTED]", "user": "joe"}

    def test_redact_is_case_insensitive(self) -> None:
        assert SensitiveFieldsFilter().redact({"Authorization": "Bearer x"}) == {
            "Authorization": "[REDACTED]"
        }

    def test_redact_deep(self) -> None:
        result = SensitiveFieldsFilter().redact_deep({"req": {"headers": {"authorization": "x"}}})
        assert result == {"req": {"headers": {"authorization": "[REDACTED]"}}}

    def test_custom_fields(self) -> None:
        flt = SensitiveFieldsFilter(frozenset({"jti"}))
        assert flt.redact({"jti": "1", "token": "t"}) == {"jti": "[REDACTED]", "token": "t"}

    def test_processor_call(self) -> None:
        assert SensitiveFieldsFilter()(None, "info", {"secret": "s"}) == {"secret": "[REDACTED]"}


# ---------------------------------------------------------------------------
# get_logger / JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_bound_values_reach_event(self) -> None:
        with capture_logs() as logs:
            get_logger("test", component="jwt").info("hello")
        assert logs == [{"component": "jwt", "event": "hello", "log_level": "info"}]


@pytest.mark.usefixtures("_restore_logging")
class TestJsonLoggerFactory:
    def test_emits_json_and_redacts(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("jwt.test").info("issued", token="abc.def.", sub="u1")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "issued"
        assert payload["token"] == "[REDACTED]"
        assert payload["sub"] == "u1"
        assert payload["level"] == "info"

    def test_redacts_bound_contextvars(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.contextvars.bind_contextvars(authorization="Bearer abc.def.", request_id="r1")
        try:
            get_logger("jwt.test").info("request")
        finally:
            structlog.contextvars.clear_contextvars()
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["authorization"] == "[REDACTED]"
        assert payload["request_id"] == "r1"

    def test_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING


# ---------------------------------------------------------------------------
# Validator logging
# ---------------------------------------------------------------------------


class TestValidatorLogging:
    def test_rejection_logged_with_code(self) -> None:
        validator = TokenValidator(clock=FrozenClock(50))
        with capture_logs() as logs:
            validator.try_get_value(make_token(body={"exp": 10}))
        assert logs[-1]["event"] == "token_rejected"
        assert logs[-1]["code"] == "token_expired"
        assert logs[-1]["kind"] == "TOKEN_EXPIRED"
        assert logs[-1]["exp"] == 10
        assert logs[-1]["log_level"] == "debug"

    def test_raw_token_never_logged(self) -> None:
        raw = make_token(body={})
        with capture_logs() as logs:
            TokenValidator().try_get_value(raw)
        assert all(raw not in json.dumps(entry, default=str) for entry in logs)

    def test_success_is_silent(self) -> None:
        with capture_logs() as logs:
            TokenValidator(TokenValidatorOptions.permissive()).try_get_value("e30.e30.")
        assert logs == []

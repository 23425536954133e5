"""Unit tests for account id parsing and the validate-once guard."""

import logging

import pytest

from ga_snippet.analytics.account import AccountValidator, parse_account_id
from ga_snippet.core.config.enums import AccountValidationMode
from ga_snippet.core.exceptions import ConfigurationError, InvalidAccountIdError


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("UA-1234-1", "UA-1234-1"),
        ("ua-1234-1", "UA-1234-1"),
        ("Mo-1234567890-123", "MO-1234567890-123"),
        ("UA-12345678-99", "UA-12345678-99"),
    ],
)
def test_accepts_and_uppercases(raw, expected):
    assert parse_account_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "XX-1234-1",
        "UA-123-1",
        "UA-12345678901-1",
        "UA-1234-1234",
        "UA-1234-",
        "UA1234-1",
        " UA-1234-1",
        "UA-1234-1\n",
        "ua-abcd-1",
        "G-ABCDEF1234",
        None,
        1234,
    ],
)
def test_rejects_malformed(raw):
    assert parse_account_id(raw) is None


class TestAccountValidator:
    def test_valid_id_is_stored(self):
        validator = AccountValidator()

        assert validator.validate("ua-1234-1") == "UA-1234-1"
        assert validator.account_id == "UA-1234-1"

    def test_revalidation_is_a_no_op(self):
        validator = AccountValidator()
        validator.validate("UA-1234-1")

        assert validator.validate("UA-9999-9") == "UA-1234-1"
        assert validator.validate("garbage") == "UA-1234-1"
        assert validator.account_id == "UA-1234-1"

    def test_warn_mode_logs_and_returns_none(self, caplog):
        validator = AccountValidator(AccountValidationMode.WARN)

        with caplog.at_level(logging.WARNING, logger="ga_snippet.analytics.account"):
            assert validator.validate("XX-1234-1") is None

        assert validator.account_id is None
        assert "Invalid Google Analytics account ID" in caplog.text

    def test_raise_mode_raises(self):
        validator = AccountValidator(AccountValidationMode.RAISE)

        with pytest.raises(InvalidAccountIdError) as exc_info:
            validator.validate("XX-1234-1")

        assert exc_info.value.account == "XX-1234-1"
        assert isinstance(exc_info.value, ConfigurationError)
        assert validator.account_id is None

    def test_mode_accepts_plain_string(self):
        validator = AccountValidator("raise")

        with pytest.raises(InvalidAccountIdError):
            validator.validate("")

    def test_injected_logger_receives_warning(self):
        sink = logging.getLogger("test.account.sink")
        records = []

        class _Collect(logging.Handler):
            def emit(self, record):
                records.append(record)

        handler = _Collect(level=logging.WARNING)
        sink.addHandler(handler)
        try:
            AccountValidator(logger=sink).validate("nope")
        finally:
            sink.removeHandler(handler)

        assert [r.levelno for r in records] == [logging.WARNING]

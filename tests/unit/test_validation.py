"""
Unit tests for utils/validation.py
"""
import pytest

from http_echo.exceptions import ValidationError
from http_echo.utils.validation import parse_port, validate_port


# ── validate_port ───────────────────────────────────────────────────────────

class TestValidatePort:
    def test_common_port(self):
        assert validate_port(8080) == 8080

    def test_ephemeral_port(self):
        assert validate_port(0) == 0

    def test_max_port(self):
        assert validate_port(65535) == 65535

    def test_out_of_range_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_port(65536)
        assert exc_info.value.context["port"] == 65536

    def test_negative_raises(self):
        with pytest.raises(ValidationError):
            validate_port(-1)

    def test_string_raises(self):
        with pytest.raises(ValidationError):
            validate_port("8080")

    def test_bool_raises(self):
        with pytest.raises(ValidationError):
            validate_port(True)

    def test_custom_range(self):
        with pytest.raises(ValidationError):
            validate_port(80, min_port=1024)


# ── parse_port ──────────────────────────────────────────────────────────────

class TestParsePort:
    def test_numeric_string(self):
        assert parse_port("9000") == 9000

    def test_not_a_number_raises(self):
        with pytest.raises(ValidationError):
            parse_port("http")

    def test_out_of_range_raises(self):
        with pytest.raises(ValidationError):
            parse_port("99999")

"""
Tests for the binary converter rules.

Tests cover:
- Conversion of binary text to decimal text
- Digit validation in strict and legacy rules
- Length boundary for appends and replacements
"""

import pytest

from binaryconverter.controller import converter
from binaryconverter.model.errors import ValidationError, ErrorKind, INVALID_DIGIT_MESSAGE
from binaryconverter.model.state import CompatibilityMode

STRICT = CompatibilityMode.STRICT
LEGACY = CompatibilityMode.LEGACY


class TestConvert:
    @pytest.mark.parametrize(
        "binary,expected",
        [
            ("", "0"),
            ("0", "0"),
            ("1", "1"),
            ("101", "5"),
            ("0101", "5"),
            ("10000000", "128"),
            ("11111111", "255"),
        ],
    )
    def test_base_two_value(self, binary, expected):
        assert converter.convert(binary) == expected

    def test_matches_builtin_int(self):
        for n in (3, 42, 200, 1023, 65535):
            binary = format(n, "b")
            assert converter.convert(binary) == str(int(binary, 2))

    def test_long_input_does_not_overflow(self):
        binary = "1" * 80
        assert converter.convert(binary) == str(2 ** 80 - 1)

    def test_is_idempotent(self):
        assert converter.convert("1101") == converter.convert("1101") == "13"

    def test_non_binary_character_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            converter.convert("12")
        assert exc_info.value.kind == ErrorKind.INVALID_DIGIT


class TestIsValidText:
    def test_strict_requires_every_character_binary(self):
        assert converter.is_valid_text("0101", STRICT)
        assert not converter.is_valid_text("012", STRICT)
        assert not converter.is_valid_text("2", STRICT)

    def test_legacy_accepts_any_binary_character(self):
        assert converter.is_valid_text("012", LEGACY)
        assert converter.is_valid_text("a1", LEGACY)
        assert not converter.is_valid_text("2", LEGACY)


class TestValidateAndAppend:
    def test_accepts_binary_replacement(self):
        assert converter.validate_and_append("10", "101", True, 8) == "101"

    def test_invalid_digit_raises_with_user_message(self):
        current = "10"
        with pytest.raises(ValidationError) as exc_info:
            converter.validate_and_append(current, "2", True, 8)
        assert exc_info.value.kind == ErrorKind.INVALID_DIGIT
        assert str(exc_info.value) == INVALID_DIGIT_MESSAGE
        assert current == "10"

    def test_invalid_digit_raises_in_legacy_rules(self):
        with pytest.raises(ValidationError):
            converter.validate_and_append("", "2", True, 8, LEGACY)

    def test_empty_text_clears(self):
        assert converter.validate_and_append("1011", "", True, 8) == ""

    def test_strict_rejects_text_longer_than_limit(self):
        assert converter.validate_and_append("11111111", "111111110", True, 8) == "11111111"

    def test_strict_allows_shortening_at_limit(self):
        assert converter.validate_and_append("11111111", "1111111", True, 8) == "1111111"

    def test_legacy_rejects_once_current_exceeds_limit(self):
        assert converter.validate_and_append("111111111", "1", True, 8, LEGACY) == "111111111"
        assert converter.validate_and_append("11111111", "111111110", True, 8, LEGACY) == "111111110"

    def test_legacy_accepts_partially_binary_text(self):
        assert converter.validate_and_append("", "12", True, 8, LEGACY) == "12"

    def test_limit_disabled_accepts_long_text(self):
        text = "1" * 30
        assert converter.validate_and_append("", text, False, 8) == text


class TestAppendDigit:
    def _fill(self, times, limit_enabled, rules):
        value = ""
        for _ in range(times):
            value = converter.append_digit(value, "1", limit_enabled, 8, rules)
        return value

    def test_appends_digit(self):
        assert converter.append_digit("10", "1", True, 8) == "101"
        assert converter.append_digit("10", "0", True, 8) == "100"

    def test_strict_caps_at_limit(self):
        assert len(self._fill(20, True, STRICT)) == 8

    def test_legacy_allows_one_past_limit(self):
        assert len(self._fill(20, True, LEGACY)) == 9

    @pytest.mark.parametrize("rules", [STRICT, LEGACY])
    def test_no_cap_when_limit_disabled(self, rules):
        assert len(self._fill(20, False, rules)) == 20

    def test_rejects_non_binary_digit(self):
        with pytest.raises(ValidationError):
            converter.append_digit("1", "2", True, 8)


def test_clear_returns_empty_input():
    assert converter.clear() == ""

"""Тесты для Parser: текст в произвольном radix → ExactNumber

Покрытие:
- целые и дробные числа в разных radix
- знак и нормализация "-0"
- префиксы 0b/0o/0x
- разделители (пробелы, '_')
- типизированные ошибки: UNSUPPORTED_RADIX, EMPTY_INPUT, MALFORMED_NUMBER, INVALID_DIGIT
"""

import pytest

from src.converter import parse
from src.core.domain import (
    ExactNumber,
    ParseError,
    ParseErrorKind,
    ParseOptions,
    Sign,
)


def _parse_ok(text: str, radix: int = 10, **kwargs) -> ExactNumber:
    result = parse(text, ParseOptions(radix=radix, **kwargs))
    assert isinstance(result, ExactNumber), result
    return result


def _parse_error(text: str, radix: int = 10, **kwargs) -> ParseError:
    result = parse(text, ParseOptions(radix=radix, **kwargs))
    assert isinstance(result, ParseError), result
    return result


# =============================================================================
# INTEGERS
# =============================================================================


class TestParseIntegers:
    """Разбор целых чисел"""

    def test_default_options_decimal(self):
        """Без options используется radix 10"""
        result = parse("255")
        assert isinstance(result, ExactNumber)
        assert result.integer_magnitude == 255
        assert result.source_radix == 10

    def test_hex_upper_and_lower(self):
        assert _parse_ok("FF", 16).integer_magnitude == 255
        assert _parse_ok("ff", 16).integer_magnitude == 255

    def test_binary(self):
        value = _parse_ok("1010", 2)
        assert value.integer_magnitude == 10
        assert value.sign == Sign.POSITIVE
        assert value.is_integer

    def test_base36_letter(self):
        """G — валидная цифра в radix 36"""
        assert _parse_ok("G", 36).integer_magnitude == 16
        assert _parse_ok("zz", 36).integer_magnitude == 35 * 36 + 35

    def test_explicit_plus(self):
        value = _parse_ok("+7")
        assert value.sign == Sign.POSITIVE
        assert value.integer_magnitude == 7

    def test_negative(self):
        value = _parse_ok("-42")
        assert value.sign == Sign.NEGATIVE
        assert value.integer_magnitude == 42

    def test_beyond_53_bits(self):
        """Строки длиннее машинного слова не теряют точности"""
        text = "1" + "0" * 100
        assert _parse_ok(text).integer_magnitude == 10**100

        text = "F" * 64
        assert _parse_ok(text, 16).integer_magnitude == 16**64 - 1

    def test_surrounding_whitespace_ignored(self):
        assert _parse_ok("  12  ", strip_separators=False).integer_magnitude == 12


# =============================================================================
# FRACTIONS
# =============================================================================


class TestParseFractions:
    """Разбор дробной части в точное отношение numerator / radix**k"""

    def test_hex_fraction(self):
        value = _parse_ok("A.8", 16)
        assert value.integer_magnitude == 10
        assert value.fraction_numerator == 8
        assert value.fraction_denominator == 16
        assert value.fraction_digits == 1

    def test_binary_fraction(self):
        value = _parse_ok("101.101", 2)
        assert value.integer_magnitude == 5
        assert value.fraction_numerator == 5
        assert value.fraction_denominator == 8

    def test_denominator_is_power_of_source_radix(self):
        """0.1 в radix 10 → 1/10 (не сокращается, не переводится в float)"""
        value = _parse_ok("0.1")
        assert value.fraction_numerator == 1
        assert value.fraction_denominator == 10

    def test_trailing_zeros_dropped(self):
        value = _parse_ok("0.50")
        assert value.fraction_numerator == 5
        assert value.fraction_denominator == 10

    def test_zero_fraction_equals_absent_fraction(self):
        """'1.0', '1.' и '1' эквивалентны: дробь 0/1"""
        assert _parse_ok("1.0") == _parse_ok("1")
        assert _parse_ok("1.") == _parse_ok("1")
        value = _parse_ok("1.000")
        assert value.fraction_numerator == 0
        assert value.fraction_denominator == 1

    def test_leading_point(self):
        value = _parse_ok(".5")
        assert value.integer_magnitude == 0
        assert value.fraction_numerator == 5
        assert value.sign == Sign.POSITIVE

    def test_negative_fraction(self):
        value = _parse_ok("-0.25")
        assert value.sign == Sign.NEGATIVE
        assert value.integer_magnitude == 0
        assert value.fraction_numerator == 25


# =============================================================================
# SIGN NORMALIZATION
# =============================================================================


class TestNegativeZero:
    """Ноль со знаком '-' нормализуется в ZERO"""

    @pytest.mark.parametrize("text", ["-0", "-0.000", "-.0", "+0", "0", "-0x0", "-00"])
    def test_zero_forms(self, text):
        value = _parse_ok(text)
        assert value.sign == Sign.ZERO
        assert value.is_zero


# =============================================================================
# PREFIXES
# =============================================================================


class TestPrefixDetection:
    """Автоопределение radix по префиксу"""

    def test_hex_prefix_overrides_radix(self):
        value = _parse_ok("0x1F", 10)
        assert value.integer_magnitude == 31
        assert value.source_radix == 16

    def test_binary_prefix_with_sign(self):
        value = _parse_ok("-0b101", 10)
        assert value.sign == Sign.NEGATIVE
        assert value.integer_magnitude == 5
        assert value.source_radix == 2

    def test_octal_prefix_uppercase(self):
        value = _parse_ok("0O17", 10)
        assert value.integer_magnitude == 15
        assert value.source_radix == 8

    def test_prefix_with_fraction(self):
        value = _parse_ok("0x0.8", 10)
        assert value.fraction_numerator == 8
        assert value.fraction_denominator == 16

    def test_prefix_detection_disabled(self):
        """Без автоопределения '0x1F' — обычное число в radix 36"""
        value = _parse_ok("0x1F", 36, detect_prefix=False)
        assert value.integer_magnitude == 33 * 36**2 + 1 * 36 + 15
        assert value.source_radix == 36

    def test_prefix_without_digits(self):
        assert _parse_error("0x", 10).kind == ParseErrorKind.EMPTY_INPUT

    def test_digit_invalid_for_prefixed_radix(self):
        error = _parse_error("0b102", 10)
        assert error.kind == ParseErrorKind.INVALID_DIGIT
        assert error.character == "2"
        assert error.position == 4

    def test_sign_after_prefix_is_invalid(self):
        error = _parse_error("0x-1", 10)
        assert error.kind == ParseErrorKind.INVALID_DIGIT
        assert error.character == "-"
        assert error.position == 2


# =============================================================================
# SEPARATORS
# =============================================================================


class TestSeparators:
    """Удаление пробелов и '_'"""

    def test_spaces_and_underscores_stripped(self):
        assert _parse_ok("1 000_000").integer_magnitude == 1_000_000

    def test_grouped_binary(self):
        assert _parse_ok("1111 0000", 2).integer_magnitude == 240

    def test_separators_kept_when_disabled(self):
        error = _parse_error("1 000", strip_separators=False)
        assert error.kind == ParseErrorKind.INVALID_DIGIT
        assert error.character == " "
        assert error.position == 1

    def test_position_refers_to_original_text(self):
        """Позиция ошибки — индекс в исходной строке, а не в очищенной"""
        error = _parse_error("  12_3Z")
        assert error.character == "Z"
        assert error.position == 6


# =============================================================================
# ERRORS
# =============================================================================


class TestParseErrors:
    """Типизированные ошибки разбора"""

    def test_invalid_hex_digit(self):
        """G не является цифрой radix 16"""
        error = _parse_error("G", 16)
        assert error.kind == ParseErrorKind.INVALID_DIGIT
        assert error.character == "G"
        assert error.position == 0

    def test_digit_equal_to_radix(self):
        error = _parse_error("12", 2)
        assert error.kind == ParseErrorKind.INVALID_DIGIT
        assert error.character == "2"
        assert error.position == 1

    def test_non_alphanumeric_character(self):
        error = _parse_error("12#4")
        assert error.kind == ParseErrorKind.INVALID_DIGIT
        assert error.character == "#"

    def test_invalid_digit_in_fraction(self):
        error = _parse_error("1.9", 8)
        assert error.kind == ParseErrorKind.INVALID_DIGIT
        assert error.position == 2

    def test_double_sign(self):
        error = _parse_error("+-1")
        assert error.kind == ParseErrorKind.INVALID_DIGIT
        assert error.character == "-"

    def test_more_than_one_point(self):
        error = _parse_error("1.2.3")
        assert error.kind == ParseErrorKind.MALFORMED_NUMBER
        assert error.position == 3

    @pytest.mark.parametrize("text", ["", "   ", ".", "-", "+", "-.", " _ "])
    def test_empty_input(self, text):
        assert _parse_error(text).kind == ParseErrorKind.EMPTY_INPUT

    @pytest.mark.parametrize("radix", [-1, 0, 1, 37, 64])
    def test_unsupported_radix(self, radix):
        error = _parse_error("1", radix)
        assert error.kind == ParseErrorKind.UNSUPPORTED_RADIX
        assert str(radix) in error.message

    def test_unsupported_radix_checked_before_input(self):
        assert _parse_error("", 1).kind == ParseErrorKind.UNSUPPORTED_RADIX

    def test_error_payload(self):
        payload = _parse_error("G", 16).to_payload()
        assert payload["kind"] == "invalid_digit"
        assert payload["character"] == "G"
        assert payload["position"] == 0
        assert payload["message"]

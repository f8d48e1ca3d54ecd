"""Parser: текст в произвольном radix → ExactNumber

Поддерживаемые формы входа:
- знак: необязательный ведущий '+' / '-'
- префикс: 0b / 0o / 0x (регистронезависимо) переопределяет radix на 2 / 8 / 16
- разделители: пробелы и '_' удаляются (если strip_separators)
- дробная часть: не более одной '.'

Порядок проверок:
1. radix ∈ [2, 36]              → иначе UNSUPPORTED_RADIX
2. пустой ввод / только знак    → EMPTY_INPUT
3. более одной '.'               → MALFORMED_NUMBER
4. каждая цифра < radix          → иначе INVALID_DIGIT(character, position)

parse никогда не выбрасывает исключений на пользовательском вводе и не пишет в лог.
"""

from typing import Final

from src.core.domain.exact_number import ExactNumber, Sign
from src.core.domain.options import ParseOptions
from src.core.domain.outcomes import ParseError, ParseErrorKind
from src.core.math.exact_arithmetic import (
    MAX_RADIX,
    MIN_RADIX,
    accumulate_digits,
    digit_value,
    radix_power,
    validate_radix,
)


# =============================================================================
# CONSTANTS
# =============================================================================

# Префиксы, переопределяющие radix (второй символ после '0', в нижнем регистре)
PREFIX_RADICES: Final[dict[str, int]] = {"b": 2, "o": 8, "x": 16}

# Символы-разделители групп, удаляемые при strip_separators
SEPARATOR_CHARS: Final[str] = "_"

RADIX_POINT: Final[str] = "."


# =============================================================================
# PARSE
# =============================================================================


def parse(text: str, options: ParseOptions | None = None) -> ExactNumber | ParseError:
    """Разбор текстового представления числа в ExactNumber.

    Args:
        text: исходная строка (как её ввёл пользователь или вернул OCR/voice/AI)
        options: параметры разбора (default: radix 10, разделители и префиксы включены)

    Returns:
        ExactNumber при успехе, иначе ParseError
    """
    options = options or ParseOptions()
    radix = options.radix

    if not validate_radix(radix):
        return ParseError(
            kind=ParseErrorKind.UNSUPPORTED_RADIX,
            message=f"Radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}",
        )

    # (символ, позиция в исходной строке) без внешних пробелов и разделителей
    chars = _significant_chars(text, options.strip_separators)
    if not chars:
        return _empty_input()

    negative = False
    if chars[0][0] in "+-":
        negative = chars[0][0] == "-"
        chars = chars[1:]

    if options.detect_prefix and len(chars) >= 2 and chars[0][0] == "0":
        prefix_radix = PREFIX_RADICES.get(chars[1][0].lower())
        if prefix_radix is not None:
            radix = prefix_radix
            chars = chars[2:]

    point_indexes = [i for i, (char, _) in enumerate(chars) if char == RADIX_POINT]
    if len(point_indexes) > 1:
        char, position = chars[point_indexes[1]]
        return ParseError(
            kind=ParseErrorKind.MALFORMED_NUMBER,
            message=f"Number contains more than one radix point (second at position {position})",
            character=char,
            position=position,
        )

    if point_indexes:
        integer_part = chars[: point_indexes[0]]
        fraction_part = chars[point_indexes[0] + 1 :]
    else:
        integer_part, fraction_part = chars, []

    if not integer_part and not fraction_part:
        return _empty_input()

    integer_values: list[int] = []
    fraction_values: list[int] = []
    for part, values in ((integer_part, integer_values), (fraction_part, fraction_values)):
        for char, position in part:
            value = digit_value(char)
            if value is None or value >= radix:
                return ParseError(
                    kind=ParseErrorKind.INVALID_DIGIT,
                    message=f"Invalid digit {char!r} for base {radix} at position {position}",
                    character=char,
                    position=position,
                )
            values.append(value)

    return _build_number(integer_values, fraction_values, radix, negative)


# =============================================================================
# HELPERS
# =============================================================================


def _significant_chars(text: str, strip_separators: bool) -> list[tuple[str, int]]:
    """Символы, участвующие в разборе, с их позициями в исходной строке.

    Внешние пробелы игнорируются всегда; внутренние пробелы и '_' — только при
    strip_separators (иначе они дойдут до проверки цифр как INVALID_DIGIT).
    """
    start = len(text) - len(text.lstrip())
    end = len(text.rstrip())

    chars = []
    for position in range(start, end):
        char = text[position]
        if strip_separators and (char.isspace() or char in SEPARATOR_CHARS):
            continue
        chars.append((char, position))
    return chars


def _build_number(
    integer_values: list[int],
    fraction_values: list[int],
    radix: int,
    negative: bool,
) -> ExactNumber:
    """Сборка нормализованного ExactNumber из проверенных цифр."""
    # Хвостовые нули дроби не меняют значения: "0.50" ≡ "0.5", "1.0" ≡ "1"
    while fraction_values and fraction_values[-1] == 0:
        fraction_values.pop()

    integer_magnitude = accumulate_digits(integer_values, radix)
    fraction_numerator = accumulate_digits(fraction_values, radix)
    fraction_digits = len(fraction_values)

    if integer_magnitude == 0 and fraction_numerator == 0:
        sign = Sign.ZERO
    elif negative:
        sign = Sign.NEGATIVE
    else:
        sign = Sign.POSITIVE

    return ExactNumber(
        sign=sign,
        integer_magnitude=integer_magnitude,
        fraction_numerator=fraction_numerator,
        fraction_denominator=radix_power(radix, fraction_digits),
        fraction_digits=fraction_digits,
        source_radix=radix,
    )


def _empty_input() -> ParseError:
    return ParseError(kind=ParseErrorKind.EMPTY_INPUT, message="No digits to parse")

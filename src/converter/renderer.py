"""Renderer: ExactNumber → текст в целевом radix

Алгоритм:
- целая часть: повторное деление на radix, остатки → цифры (старшая первой), 0 → "0"
- дробная часть: повторное умножение остатка на radix до нулевого остатка
  или до max_fractional_digits; обрыв при ненулевом остатке → truncated=True
- знак: '-' только для NEGATIVE
- группировка: разделитель каждые group_width цифр целой части, считая от младшей

Последняя цифра обрезается, а не округляется: последовательные render с ростом
точности дают префиксы друг друга.
"""

from src.core.domain.exact_number import ExactNumber
from src.core.domain.options import LetterCase, RenderOptions
from src.core.domain.outcomes import RenderError, RenderErrorKind, RenderResult
from src.core.math.exact_arithmetic import (
    MAX_RADIX,
    MIN_RADIX,
    digit_char,
    fraction_to_digits,
    integer_to_digits,
    validate_radix,
)


def render(value: ExactNumber, options: RenderOptions | None = None) -> RenderResult | RenderError:
    """Форматирование ExactNumber в целевом radix.

    Args:
        value: точное число (не изменяется)
        options: параметры форматирования (default: radix 10, 8 цифр дроби)

    Returns:
        RenderResult(text, truncated) или RenderError при неподдерживаемом radix
    """
    options = options or RenderOptions()
    radix = options.radix

    if not validate_radix(radix):
        return RenderError(
            kind=RenderErrorKind.UNSUPPORTED_RADIX,
            message=f"Radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}",
        )

    lowercase = options.letter_case == LetterCase.LOWER

    integer_text = "".join(
        digit_char(d, lowercase) for d in integer_to_digits(value.integer_magnitude, radix)
    )
    if options.group_width > 0:
        integer_text = group_digits(integer_text, options.group_width, options.group_separator)

    fraction_digits, remainder = fraction_to_digits(
        value.fraction_numerator,
        value.fraction_denominator,
        radix,
        options.max_fractional_digits,
    )
    fraction_text = "".join(digit_char(d, lowercase) for d in fraction_digits)

    text = integer_text
    if fraction_text:
        text = f"{text}.{fraction_text}"
    if value.is_negative:
        text = f"-{text}"

    return RenderResult(text=text, truncated=remainder != 0)


def group_digits(digits: str, width: int, separator: str = " ") -> str:
    """Разбивка строки цифр на группы по width, считая от младшей цифры.

    Examples:
        >>> group_digits("1000000", 3)
        '1 000 000'
        >>> group_digits("11111", 4, "_")
        '1_1111'
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")

    head = len(digits) % width or width
    groups = [digits[:head]]
    groups.extend(digits[i : i + width] for i in range(head, len(digits), width))
    return separator.join(groups)

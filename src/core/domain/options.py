"""
ParseOptions / RenderOptions — параметры разбора и форматирования чисел

Immutable Pydantic модели. radix намеренно не ограничен на уровне модели:
неподдерживаемый radix — это ожидаемая пользовательская ошибка, которую parse/render
возвращают как типизированный результат (UNSUPPORTED_RADIX), а не исключение.

Прочие параметры (точность, ширина группы, разделитель) задаются программистом,
поэтому их нарушение → pydantic ValidationError при создании модели.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_RADIX: Final[int] = 10
DEFAULT_MAX_FRACTIONAL_DIGITS: Final[int] = 8
DEFAULT_GROUP_SEPARATOR: Final[str] = " "


# =============================================================================
# ENUMS
# =============================================================================


class LetterCase(str, Enum):
    """Регистр буквенных цифр (10..35) при форматировании"""

    UPPER = "upper"
    LOWER = "lower"


# =============================================================================
# OPTIONS
# =============================================================================


class ParseOptions(BaseModel):
    """
    Параметры разбора текстового представления числа.

    - radix: исходный radix (2–36, проверяется в parse)
    - strip_separators: удалять пробелы и '_' перед разбором
    - detect_prefix: префикс 0b/0o/0x переопределяет radix на 2/8/16
    """

    radix: int = Field(DEFAULT_RADIX, description="Исходный radix")
    strip_separators: bool = Field(True, description="Удалять пробелы и '_'")
    detect_prefix: bool = Field(True, description="Автоопределение radix по 0b/0o/0x")

    model_config = {"frozen": True}


class RenderOptions(BaseModel):
    """
    Параметры форматирования ExactNumber в целевой radix.

    - radix: целевой radix (2–36, проверяется в render)
    - max_fractional_digits: максимум цифр дробной части (0 = только целая часть)
    - group_width: группировка целой части по N цифр (0 = без группировки)
    - letter_case: регистр букв A-Z / a-z
    - group_separator: символ-разделитель групп
    """

    radix: int = Field(DEFAULT_RADIX, description="Целевой radix")
    max_fractional_digits: int = Field(
        DEFAULT_MAX_FRACTIONAL_DIGITS, ge=0, description="Максимум цифр после точки"
    )
    group_width: int = Field(0, ge=0, description="Ширина группы цифр (0 = нет)")
    letter_case: LetterCase = Field(LetterCase.UPPER, description="Регистр букв")
    group_separator: str = Field(
        DEFAULT_GROUP_SEPARATOR,
        min_length=1,
        max_length=1,
        description="Разделитель групп",
    )

    model_config = {"frozen": True}

    @field_validator("group_separator")
    @classmethod
    def validate_group_separator(cls, v: str) -> str:
        """Разделитель не должен совпадать с цифрой, знаком или точкой"""
        if v.isalnum() or v in ".+-":
            raise ValueError(f"group_separator {v!r} would be ambiguous in a numeral")
        return v

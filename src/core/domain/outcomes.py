"""
Outcomes — типизированные результаты и ошибки parse/render

Ошибки возвращаются как значения (frozen dataclass), а не выбрасываются:
каждая ошибка детерминирована для заданного входа, повторять нечего, а
сообщение пользователю формирует вызывающая сторона.

Таксономия:
- ParseError  {UNSUPPORTED_RADIX, EMPTY_INPUT, MALFORMED_NUMBER, INVALID_DIGIT}
- RenderError {UNSUPPORTED_RADIX}

Единственный "мягкий" отказ — флаг RenderResult.truncated (потеря точности без
прерывания операции).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# =============================================================================
# ENUMS
# =============================================================================


class ParseErrorKind(str, Enum):
    """Категория ошибки разбора"""

    UNSUPPORTED_RADIX = "unsupported_radix"
    EMPTY_INPUT = "empty_input"
    MALFORMED_NUMBER = "malformed_number"
    INVALID_DIGIT = "invalid_digit"


class RenderErrorKind(str, Enum):
    """Категория ошибки форматирования"""

    UNSUPPORTED_RADIX = "unsupported_radix"


# =============================================================================
# ERRORS
# =============================================================================


@dataclass(frozen=True)
class ParseError:
    """Ошибка разбора текста в ExactNumber.

    character/position заполняются для INVALID_DIGIT (и для MALFORMED_NUMBER —
    позиция лишней точки). position — индекс в исходной строке вызывающей стороны.
    """

    kind: ParseErrorKind
    message: str
    character: Optional[str] = None
    position: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "character": self.character,
            "position": self.position,
        }


@dataclass(frozen=True)
class RenderError:
    """Ошибка форматирования ExactNumber."""

    kind: RenderErrorKind
    message: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "character": None,
            "position": None,
        }


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RenderResult:
    """Результат render.

    truncated=True: дробное разложение остановлено по max_fractional_digits
    при ненулевом остатке (последняя цифра обрезана, не округлена).
    """

    text: str
    truncated: bool

"""Conversion Pipeline — одно число во все целевые radix за один проход

Слой между presentation (страница конвертера, OCR / voice / AI front ends) и
ядром parse/render:
- ограничивает длину входа (стоимость bignum-арифметики растёт ~ квадратично)
- разбирает вход один раз, форматирует в каждый целевой radix
- применяет ширину группировки, своя для каждого radix (binary по 4, octal по 3 ...)
- собирает ConversionReport, сериализуемый по контракту conversion_report.json

В отличие от parse/render, этот слой пишет в лог: DEBUG при успехе,
INFO при отклонённом вводе.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Final, Mapping, Optional, Sequence, Tuple

from src.converter.parser import parse
from src.converter.renderer import render
from src.core.contracts import validate_conversion_request
from src.core.domain.exact_number import ExactNumber
from src.core.domain.options import (
    DEFAULT_MAX_FRACTIONAL_DIGITS,
    LetterCase,
    ParseOptions,
    RenderOptions,
)
from src.core.domain.outcomes import ParseError, RenderError
from src.core.math.exact_arithmetic import validate_radix

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

RADIX_LABELS: Final[dict[int, str]] = {
    2: "Binary",
    8: "Octal",
    10: "Decimal",
    16: "Hexadecimal",
}

DEFAULT_TARGET_RADICES: Final[Tuple[int, ...]] = (2, 8, 10, 16)

# Ширина группы по radix: nibble для binary, tribit для octal, тысячи для decimal,
# байт для hex
DEFAULT_GROUP_WIDTHS: Final[dict[int, int]] = {2: 4, 8: 3, 10: 3, 16: 2}

# Ширина группы для radix, отсутствующего в group_widths
FALLBACK_GROUP_WIDTH: Final[int] = 3

DEFAULT_MAX_INPUT_LENGTH: Final[int] = 4096


def radix_label(radix: int) -> str:
    """Человекочитаемое название radix ("Binary", ..., "Base 7")"""
    return RADIX_LABELS.get(radix, f"Base {radix}")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация NumberConverter.

    Значения по умолчанию соответствуют странице конвертера: четыре целевых radix,
    8 цифр после точки, группировка выключена.
    """

    target_radices: Tuple[int, ...] = DEFAULT_TARGET_RADICES
    max_fractional_digits: int = DEFAULT_MAX_FRACTIONAL_DIGITS
    group_digits: bool = False
    group_widths: Mapping[int, int] = field(default_factory=lambda: dict(DEFAULT_GROUP_WIDTHS))
    letter_case: LetterCase = LetterCase.UPPER
    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH
    strip_separators: bool = True
    detect_prefix: bool = True

    def __post_init__(self):
        if not self.target_radices:
            raise ValueError("target_radices must not be empty")
        for radix in self.target_radices:
            if not validate_radix(radix):
                raise ValueError(f"target radix {radix!r} is not supported")
        if self.max_fractional_digits < 0:
            raise ValueError(
                f"max_fractional_digits must be non-negative, got {self.max_fractional_digits}"
            )
        if self.max_input_length <= 0:
            raise ValueError(f"max_input_length must be positive, got {self.max_input_length}")
        for radix, width in self.group_widths.items():
            if width < 0:
                raise ValueError(f"group width for radix {radix} must be non-negative, got {width}")

    def group_width_for(self, radix: int) -> int:
        """Ширина группы для radix (0, если группировка выключена)"""
        if not self.group_digits:
            return 0
        return self.group_widths.get(radix, FALLBACK_GROUP_WIDTH)


# =============================================================================
# RESULT
# =============================================================================


class ConversionErrorKind(str, Enum):
    """Ошибки уровня pipeline (дополняют ParseError / RenderError)"""

    INPUT_TOO_LONG = "input_too_long"


@dataclass(frozen=True)
class ConversionError:
    """Вход отклонён до разбора."""

    kind: ConversionErrorKind
    message: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "character": None,
            "position": None,
        }


@dataclass(frozen=True)
class ConversionEntry:
    """Представление числа в одном целевом radix."""

    radix: int
    label: str
    text: str
    truncated: bool

    def to_payload(self) -> Dict[str, Any]:
        return {
            "radix": self.radix,
            "label": self.label,
            "text": self.text,
            "truncated": self.truncated,
        }


@dataclass(frozen=True)
class ConversionReport:
    """Результат конвертации одного входа во все целевые radix.

    source_radix — фактический radix разбора (после автоопределения префикса);
    при ошибке — radix, запрошенный вызывающей стороной.
    """

    ok: bool
    input_text: str
    source_radix: int
    results: Tuple[ConversionEntry, ...] = ()
    value: Optional[ExactNumber] = None
    error: ParseError | RenderError | ConversionError | None = None

    @property
    def any_truncated(self) -> bool:
        return any(entry.truncated for entry in self.results)

    def result_for(self, radix: int) -> Optional[ConversionEntry]:
        for entry in self.results:
            if entry.radix == radix:
                return entry
        return None

    def to_payload(self) -> Dict[str, Any]:
        """dict по контракту conversion_report.json"""
        return {
            "ok": self.ok,
            "input": self.input_text,
            "source_radix": self.source_radix,
            "results": [entry.to_payload() for entry in self.results],
            "error": self.error.to_payload() if self.error is not None else None,
        }


# =============================================================================
# CONVERTER
# =============================================================================


class NumberConverter:
    """Конвертер одного входа во множество radix.

    Порядок:
    1. Ограничение длины входа
    2. parse (один раз)
    3. render в каждый целевой radix с его шириной группы
    """

    def __init__(self, config: ConverterConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ConverterConfig()

    def convert(
        self,
        text: str,
        source_radix: int = 10,
        target_radices: Sequence[int] | None = None,
        max_fractional_digits: int | None = None,
    ) -> ConversionReport:
        """Конвертация text (в source_radix) во все целевые radix.

        Args:
            text: исходная строка
            source_radix: radix входа (может быть переопределён префиксом)
            target_radices: целевые radix (default: из конфигурации)
            max_fractional_digits: точность дроби (default: из конфигурации)

        Returns:
            ConversionReport (ok=False с типизированной ошибкой при отказе)
        """
        if len(text) > self.config.max_input_length:
            logger.info(
                "Rejected conversion input: %d characters exceeds limit %d",
                len(text),
                self.config.max_input_length,
            )
            return ConversionReport(
                ok=False,
                input_text=text,
                source_radix=source_radix,
                error=ConversionError(
                    kind=ConversionErrorKind.INPUT_TOO_LONG,
                    message=(
                        f"Input is {len(text)} characters long, "
                        f"limit is {self.config.max_input_length}"
                    ),
                ),
            )

        parsed = parse(
            text,
            ParseOptions(
                radix=source_radix,
                strip_separators=self.config.strip_separators,
                detect_prefix=self.config.detect_prefix,
            ),
        )
        if isinstance(parsed, ParseError):
            logger.info("Rejected conversion input in base %s: %s", source_radix, parsed.message)
            return ConversionReport(
                ok=False, input_text=text, source_radix=source_radix, error=parsed
            )

        return self.render_all(parsed, text, target_radices, max_fractional_digits)

    def render_all(
        self,
        value: ExactNumber,
        input_text: str = "",
        target_radices: Sequence[int] | None = None,
        max_fractional_digits: int | None = None,
    ) -> ConversionReport:
        """Форматирование уже разобранного значения во все целевые radix."""
        radices = tuple(target_radices) if target_radices is not None else self.config.target_radices
        precision = (
            self.config.max_fractional_digits
            if max_fractional_digits is None
            else max_fractional_digits
        )

        entries = []
        for radix in radices:
            rendered = render(
                value,
                RenderOptions(
                    radix=radix,
                    max_fractional_digits=precision,
                    group_width=self.config.group_width_for(radix),
                    letter_case=self.config.letter_case,
                ),
            )
            if isinstance(rendered, RenderError):
                logger.info("Rejected target radix %s: %s", radix, rendered.message)
                return ConversionReport(
                    ok=False,
                    input_text=input_text,
                    source_radix=value.source_radix,
                    value=value,
                    error=rendered,
                )
            entries.append(
                ConversionEntry(
                    radix=radix,
                    label=radix_label(radix),
                    text=rendered.text,
                    truncated=rendered.truncated,
                )
            )

        report = ConversionReport(
            ok=True,
            input_text=input_text,
            source_radix=value.source_radix,
            results=tuple(entries),
            value=value,
        )
        logger.debug(
            "Converted %r from base %d into %d radices (truncated=%s)",
            input_text,
            value.source_radix,
            len(entries),
            report.any_truncated,
        )
        return report

    def convert_request(self, payload: Dict[str, Any]) -> ConversionReport:
        """Конвертация по JSON-запросу (контракт conversion_request.json).

        Raises:
            jsonschema.ValidationError: если payload не соответствует контракту
        """
        validate_conversion_request(payload)

        if "group_digits" in payload and payload["group_digits"] != self.config.group_digits:
            converter = NumberConverter(replace(self.config, group_digits=payload["group_digits"]))
        else:
            converter = self

        return converter.convert(
            payload["text"],
            source_radix=payload["source_radix"],
            target_radices=payload.get("target_radices"),
            max_fractional_digits=payload.get("max_fractional_digits"),
        )

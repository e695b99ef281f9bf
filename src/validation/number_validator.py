"""
NumberFormatValidator — Проверка строки на соответствие формату N(m.k)

Проверяет соответствие входного значения формату N(m.k) из Формата описи
документов, направляемых в налоговый орган в электронном виде по
телекоммуникационным каналам связи.

Структура допустимого значения:
    [+|-] цифры [(.|,) цифры]

Правила бюджета:
1. знак + цифры целой части + цифры дробной части <= precision
2. цифры дробной части <= scale
3. при only_positive знак "-" запрещён

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка тотальна: никогда не бросает исключений, только True/False
2. Валидатор не имеет изменяемого состояния после создания
3. Оба разделителя "." и "," допустимы независимо от локали
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

import structlog

from src.core.domain.number_format import NumberFormat, ParsedNumber

log = structlog.wrap_logger(logging.getLogger(__name__))


# =============================================================================
# CONSTANTS
# =============================================================================

# Группы: 1 — знак, 2 — целая часть, 3 — разделитель с дробью, 4 — дробная часть
# \d — любые десятичные цифры Unicode (категория Nd)
NUMBER_PATTERN: Final[re.Pattern] = re.compile(
    r"^([+-]?)(\d+)([.,](\d+))?$",
    re.IGNORECASE,
)


# =============================================================================
# RESULT
# =============================================================================


class RejectReason(str, Enum):
    """Причина отклонения значения.

    EMPTY — None или пустая строка; MALFORMED — любое другое значение
    (включая не-строки), не совпавшее с NUMBER_PATTERN.
    """

    EMPTY = "EMPTY"
    MALFORMED = "MALFORMED"
    PRECISION_EXCEEDED = "PRECISION_EXCEEDED"
    SCALE_EXCEEDED = "SCALE_EXCEEDED"
    NEGATIVE_NOT_ALLOWED = "NEGATIVE_NOT_ALLOWED"


@dataclass(frozen=True)
class NumberCheckResult:
    """Результат проверки значения."""

    is_valid: bool
    reason: Optional[RejectReason]

    # None если значение не прошло структурную проверку
    parsed: Optional[ParsedNumber] = None

    def __bool__(self) -> bool:
        return self.is_valid


# =============================================================================
# VALIDATOR
# =============================================================================


class NumberFormatValidator:
    """Валидатор строкового представления числа формата N(precision.scale).

    Порядок проверок:
    1. Пустое значение (None, "")
    2. Структура (не-строки и несовпадение с NUMBER_PATTERN)
    3. Бюджет precision (знак учитывается как единица)
    4. Бюджет scale
    5. Знак при only_positive
    """

    def __init__(self, precision: int, scale: int = 0, only_positive: bool = False):
        """Инициализация валидатора.

        Args:
            precision: максимальное количество знаков (m), > 0
            scale: максимальное количество знаков дробной части (k), 0 <= k < m
            only_positive: запретить отрицательные значения

        Raises:
            ConfigurationError: если нарушены инварианты precision/scale
        """
        self._format = NumberFormat.create(precision, scale, only_positive)
        log.debug(
            "number_validator_created",
            notation=self._format.notation,
            only_positive=only_positive,
        )

    @classmethod
    def from_format(cls, number_format: NumberFormat) -> "NumberFormatValidator":
        """Создание валидатора из готовой модели формата."""
        return cls(number_format.precision, number_format.scale, number_format.only_positive)

    @classmethod
    def from_notation(cls, notation: str, only_positive: bool = False) -> "NumberFormatValidator":
        """Создание валидатора из нотации N(m.k).

        Raises:
            ConfigurationError: если нотация некорректна
        """
        return cls.from_format(NumberFormat.from_notation(notation, only_positive))

    @property
    def number_format(self) -> NumberFormat:
        return self._format

    @property
    def precision(self) -> int:
        return self._format.precision

    @property
    def scale(self) -> int:
        return self._format.scale

    @property
    def only_positive(self) -> bool:
        return self._format.only_positive

    def parse(self, value: Optional[str]) -> Optional[ParsedNumber]:
        """Структурный разбор значения без проверки бюджета.

        Returns:
            ParsedNumber или None, если значение пустое или не совпадает с шаблоном
        """
        if not isinstance(value, str) or not value:
            return None

        match = NUMBER_PATTERN.fullmatch(value)
        if match is None:
            return None

        return ParsedNumber(
            sign=match.group(1),
            integer_digits=match.group(2),
            fraction_digits=match.group(4) or "",
        )

    def check(self, value: Optional[str]) -> NumberCheckResult:
        """Проверка значения с указанием причины отклонения.

        Args:
            value: проверяемая строка (может быть None)

        Returns:
            NumberCheckResult; исключений не бросает
        """
        if value is None or (isinstance(value, str) and not value):
            return NumberCheckResult(is_valid=False, reason=RejectReason.EMPTY)

        parsed = self.parse(value)
        if parsed is None:
            return NumberCheckResult(is_valid=False, reason=RejectReason.MALFORMED)

        if parsed.total_digit_units > self.precision:
            return NumberCheckResult(
                is_valid=False, reason=RejectReason.PRECISION_EXCEEDED, parsed=parsed
            )

        if parsed.fractional_digit_count > self.scale:
            return NumberCheckResult(
                is_valid=False, reason=RejectReason.SCALE_EXCEEDED, parsed=parsed
            )

        if self.only_positive and parsed.is_negative:
            return NumberCheckResult(
                is_valid=False, reason=RejectReason.NEGATIVE_NOT_ALLOWED, parsed=parsed
            )

        return NumberCheckResult(is_valid=True, reason=None, parsed=parsed)

    def is_valid_number(self, value: Optional[str]) -> bool:
        """Проверка соответствия значения формату N(m.k).

        Examples:
            >>> NumberFormatValidator(4, 2, True).is_valid_number("+3.14")
            True
            >>> NumberFormatValidator(4, 2, True).is_valid_number("-3.14")
            False
        """
        return self.check(value).is_valid

    def __repr__(self) -> str:
        return (
            f"NumberFormatValidator(precision={self.precision}, scale={self.scale}, "
            f"only_positive={self.only_positive})"
        )

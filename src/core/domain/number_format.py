"""
NumberFormat — Модель числового формата N(m.k)

Формат числового значения указывается в виде N(m.k), где:
- m — максимальное количество знаков в числе, включая знак (для
  отрицательного числа), целую и дробную часть без разделяющей точки
- k — максимальное число знаков дробной части

Если число знаков дробной части равно 0 (число целое), формат имеет вид N(m).

ИНВАРИАНТЫ:
1. precision > 0
2. 0 <= scale < precision
"""

import logging
import re
from typing import Final, NamedTuple

import structlog
from pydantic import BaseModel, Field, ValidationError, model_validator

from src.core.domain.errors import ConfigurationError

log = structlog.wrap_logger(logging.getLogger(__name__))


# =============================================================================
# CONSTANTS
# =============================================================================

# N(m), N(m.k) или N(m,k); пробелы внутри скобок допустимы
NOTATION_PATTERN: Final[re.Pattern] = re.compile(
    r"^\s*N\s*\(\s*(\d+)\s*(?:[.,]\s*(\d+)\s*)?\)\s*$",
    re.IGNORECASE | re.ASCII,
)


# =============================================================================
# NUMBER FORMAT MODEL
# =============================================================================


class NumberFormat(BaseModel):
    """
    Конфигурация числового формата N(precision.scale).

    Immutable модель (frozen=True). Создаётся один раз и принадлежит
    валидатору.
    """

    precision: int = Field(..., strict=True, description="Максимум знаков, включая знак")
    scale: int = Field(0, strict=True, description="Максимум знаков дробной части")
    only_positive: bool = Field(False, strict=True, description="Запрет знака минус")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_precision_and_scale(self) -> "NumberFormat":
        """Проверка инвариантов precision/scale"""
        if self.precision <= 0:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.scale < 0 or self.scale >= self.precision:
            raise ValueError(
                f"scale must be non-negative and less than precision, "
                f"got scale={self.scale}, precision={self.precision}"
            )
        return self

    @classmethod
    def create(
        cls, precision: int, scale: int = 0, only_positive: bool = False
    ) -> "NumberFormat":
        """
        Создание формата с конверсией ошибок pydantic в ConfigurationError.

        Args:
            precision: Максимальное количество знаков (m)
            scale: Максимальное количество знаков дробной части (k)
            only_positive: Запретить отрицательные значения

        Returns:
            NumberFormat

        Raises:
            ConfigurationError: Если нарушены инварианты формата
        """
        try:
            return cls(precision=precision, scale=scale, only_positive=only_positive)
        except ValidationError as e:
            log.warning(
                "number_format_rejected",
                precision=precision,
                scale=scale,
                only_positive=only_positive,
            )
            raise ConfigurationError(_first_error_message(e)) from e

    @classmethod
    def from_notation(cls, text: str, only_positive: bool = False) -> "NumberFormat":
        """
        Разбор нотации N(m), N(m.k) или N(m,k).

        Examples:
            >>> NumberFormat.from_notation("N(4.2)").scale
            2
            >>> NumberFormat.from_notation("N(10)").precision
            10

        Raises:
            ConfigurationError: Если нотация некорректна или нарушены инварианты
        """
        match = NOTATION_PATTERN.match(text) if isinstance(text, str) else None
        if match is None:
            log.warning("number_format_notation_rejected", notation=text)
            raise ConfigurationError(f"invalid number format notation: {text!r}")

        precision = int(match.group(1))
        scale = int(match.group(2)) if match.group(2) is not None else 0
        return cls.create(precision, scale, only_positive)

    @property
    def notation(self) -> str:
        """Нотация формата: N(m) для целых, N(m.k) иначе"""
        if self.scale == 0:
            return f"N({self.precision})"
        return f"N({self.precision}.{self.scale})"


def _first_error_message(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first["msg"]
    # pydantic добавляет префикс "Value error, " для ValueError из валидаторов
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return f"{loc}: {msg}" if loc else msg


# =============================================================================
# PARSED NUMBER
# =============================================================================


class ParsedNumber(NamedTuple):
    """
    Разложение строки на знак, целую и дробную части.

    Существует только в рамках одной проверки; значение не вычисляется.
    """

    sign: str  # "", "+" или "-"
    integer_digits: str
    fraction_digits: str  # "" если дробной части нет

    @property
    def sign_length(self) -> int:
        return len(self.sign)

    @property
    def integer_digit_count(self) -> int:
        return len(self.integer_digits)

    @property
    def fractional_digit_count(self) -> int:
        return len(self.fraction_digits)

    @property
    def is_negative(self) -> bool:
        return self.sign == "-"

    @property
    def total_digit_units(self) -> int:
        """Знак + целая часть + дробная часть (единицы бюджета precision)"""
        return self.sign_length + self.integer_digit_count + self.fractional_digit_count

"""
Validation of textual numeric fields against the N(m.k) format.
"""

from src.core.domain.errors import ConfigurationError
from src.validation.number_validator import (
    NUMBER_PATTERN,
    NumberCheckResult,
    NumberFormatValidator,
    RejectReason,
)

__all__ = [
    "ConfigurationError",
    "NUMBER_PATTERN",
    "NumberCheckResult",
    "NumberFormatValidator",
    "RejectReason",
]

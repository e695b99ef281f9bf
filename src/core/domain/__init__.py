"""
Domain models and value objects.

Contains the N(m.k) number format model, parsed number decomposition and errors.
"""

from src.core.domain.errors import ConfigurationError, NumberFormatError
from src.core.domain.number_format import NOTATION_PATTERN, NumberFormat, ParsedNumber

__all__ = [
    # Errors
    "NumberFormatError",
    "ConfigurationError",
    # Number format model
    "NOTATION_PATTERN",
    "NumberFormat",
    "ParsedNumber",
]

"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигурации числового формата.
"""

from .validators import (
    ContractValidator,
    NumberFormatContractValidator,
    SchemaLoader,
    load_number_format,
    validate_number_format,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumberFormatContractValidator",
    # Functions
    "validate_number_format",
    "load_number_format",
]

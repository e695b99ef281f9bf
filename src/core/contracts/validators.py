"""
JSON Schema Contract Validators

Модуль для валидации JSON-документов конфигурации формата N(m.k)
согласно формальному JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- number_format.json

Межполевое правило scale < precision схемой не выражается и проверяется
моделью NumberFormat.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
import structlog
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.errors import ConfigurationError
from src.core.domain.number_format import NumberFormat

log = structlog.wrap_logger(logging.getLogger(__name__))


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self):
        # Схемы поставляются вместе с пакетом (package-data)
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'number_format')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class NumberFormatContractValidator(ContractValidator):
    """Валидатор для number_format контракта."""

    def __init__(self):
        super().__init__("number_format")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_number_format(data: Dict[str, Any]) -> None:
    """
    Валидация number_format документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumberFormatContractValidator().validate(data)


def load_number_format(data: Dict[str, Any]) -> NumberFormat:
    """
    Загрузка NumberFormat из JSON-документа.

    Сначала документ проверяется по схеме, затем строится модель,
    которая проверяет межполевой инвариант scale < precision.

    Args:
        data: Документ вида {"precision": 4, "scale": 2, "only_positive": true}

    Returns:
        NumberFormat

    Raises:
        ConfigurationError: Если документ не соответствует контракту или инвариантам
    """
    try:
        validate_number_format(data)
    except ValidationError as e:
        log.warning("number_format_contract_violation", error=e.message)
        raise ConfigurationError(f"number_format contract violation: {e.message}") from e

    return NumberFormat.create(
        precision=data["precision"],
        scale=data.get("scale", 0),
        only_positive=data.get("only_positive", False),
    )

"""
Enumeration Contracts — JSON Schema граница движка

Внешние данные (payload запроса) и исходящие сводки проходят через
JSON Schema контракты из contracts/schema/:
- enumeration_request.json: вход Enumerator.run
- enumeration_summary.json: сводка, возвращаемая Enumerator.run/describe

Схемы загружаются лениво (при первом обращении) и кэшируются; импорт модуля
не обращается к файловой системе.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Payload запроса валидируется схемой ДО построения pydantic модели
2. Каждая сводка, покидающая Enumerator, соответствует схеме
3. Нарушение контракта → jsonschema.ValidationError (не перехватывается)
"""

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from src.core.domain.enumeration import EnumerationRequest

# Каталог схем: <корень проекта>/contracts/schema
SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (кэшируется по имени и каталогу).

    Args:
        schema_name: Имя схемы без расширения (например, 'enumeration_summary')
        schema_dir: Каталог схем (default: SCHEMA_DIR)

    Returns:
        Схема как dict (один и тот же объект при повторных вызовах)

    Raises:
        RuntimeError: Если каталог схем не существует
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной Draft 2020-12 схемой
    """
    if not schema_dir.is_dir():
        raise RuntimeError(f"Schema directory not found: {schema_dir}")

    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return schema


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Подклассы задают schema_name; схема берётся из кэша load_schema.
    """

    schema_name: str = ""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self.schema = load_schema(self.schema_name, schema_dir)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def error_messages(self, data: Mapping[str, Any]) -> list[str]:
        """
        Все нарушения схемы в виде "<json-path>: <сообщение>",
        отсортированные по пути.

        Examples:
            >>> EnumerationRequestValidator().error_messages({"schema_version": "1", "power": 1, "domain_size": 2})
            ["<root>: 'variant' is a required property"]
        """
        messages = []
        for error in self._validator.iter_errors(data):
            path = "/".join(str(p) for p in error.absolute_path) or "<root>"
            messages.append(f"{path}: {error.message}")
        return sorted(messages)

    def validate_model(self, model: BaseModel) -> Dict[str, Any]:
        """
        Сериализация pydantic модели в JSON-совместимый dict и его валидация.

        Returns:
            Провалидированный dict (model_dump(mode="json"))
        """
        data = model.model_dump(mode="json")
        self.validate(data)
        return data


class EnumerationRequestValidator(ContractValidator):
    """Контракт входного запроса перечисления."""

    schema_name = "enumeration_request"


class EnumerationSummaryValidator(ContractValidator):
    """Контракт сводки перечисления."""

    schema_name = "enumeration_summary"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_enumeration_request(data: Mapping[str, Any]) -> None:
    """Raises: ValidationError при нарушении enumeration_request."""
    EnumerationRequestValidator().validate(data)


def validate_enumeration_summary(data: Mapping[str, Any]) -> None:
    """Raises: ValidationError при нарушении enumeration_summary."""
    EnumerationSummaryValidator().validate(data)


def parse_enumeration_request(
    payload: EnumerationRequest | Mapping[str, Any],
) -> EnumerationRequest:
    """
    Запрос из payload: схема проверяется до построения модели.

    Готовая EnumerationRequest возвращается как есть.

    Raises:
        ValidationError (jsonschema): Если payload нарушает контракт
    """
    if isinstance(payload, EnumerationRequest):
        return payload

    validate_enumeration_request(payload)
    return EnumerationRequest(**payload)

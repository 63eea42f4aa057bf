"""
Complex Number Contract

Сериализованная форма комплексного числа — {"re": number, "im": number}.
Контракт описан JSON Schema (Draft 2020-12) в schema/complex_number.json,
который поставляется внутри пакета и читается через importlib.resources.

Схема дополняет Draft 2020-12 ключевым словом "finite": строгий JSON
не кодирует NaN/Infinity, поэтому неконечные компоненты контракт отвергает.
"""

import json
from importlib.resources import files
from importlib.resources.abc import Traversable
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError, validators

from complexfield.core.math.numerical_safeguards import is_valid_float


# =============================================================================
# SCHEMA
# =============================================================================


def load_schema(schema_name: str, root: Traversable | None = None) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema файла.

    Args:
        schema_name: Имя схемы без расширения (например, 'complex_number')
        root: Каталог схем (default: schema/ внутри пакета)

    Returns:
        Загруженная схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    root = root or files("complexfield.core.contracts") / "schema"
    schema_path = root / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        FiniteNumberValidator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


def _finite(validator, finite, instance, schema) -> Iterator[ValidationError]:
    # int из JSON всегда конечен; проверяются только float
    if finite and isinstance(instance, float) and not is_valid_float(instance):
        yield ValidationError(f"{instance!r} is not a finite number")


# Draft 2020-12 + ключевое слово "finite"
FiniteNumberValidator = validators.extend(Draft202012Validator, {"finite": _finite})

COMPLEX_NUMBER_SCHEMA: Dict[str, Any] = load_schema("complex_number")

_COMPLEX_NUMBER_VALIDATOR = FiniteNumberValidator(COMPLEX_NUMBER_SCHEMA)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_complex_number(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного комплексного числа.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют контракту
            (нет поля, лишнее поле, нечисловая или неконечная компонента)
    """
    _COMPLEX_NUMBER_VALIDATOR.validate(data)


def is_valid_complex_number(data: Dict[str, Any]) -> bool:
    """Проверка соответствия контракту без exception."""
    return _COMPLEX_NUMBER_VALIDATOR.is_valid(data)


def iter_complex_number_errors(data: Dict[str, Any]) -> Iterator[ValidationError]:
    """Итератор по всем нарушениям контракта."""
    return _COMPLEX_NUMBER_VALIDATOR.iter_errors(data)

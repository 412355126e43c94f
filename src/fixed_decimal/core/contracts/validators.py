"""
JSON Schema Contract Validators

Контракт storage-формата Decimal: сохранённое значение является JSON string
scalar в reference 18-decimal нотации. Схемы лежат в schema/ внутри
пакета и проверяются jsonschema (Draft 2020-12).

Схемы:
- stored_decimal.json

validate_stored_decimal является самостоятельной проверкой сырых
значений из storage (миграции, аудит данных). Decimal.from_storage_string,
Decimal.from_json и Pydantic-валидатор её не вызывают: они разбирают
строку storage-кодеком, который принимает ровно тот же язык и
возвращает DecimalParseError. Схема используется ими только как JSON
Schema поля модели (stored_decimal_json_schema).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"

STORED_DECIMAL_SCHEMA = "stored_decimal"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    Каждая схема проходит meta-валидацию при первой загрузке.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Файла schema_name.json нет в каталоге
            ValueError: Схема не проходит meta-валидацию Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


# Загрузчик схем пакета
_SCHEMA_LOADER = SchemaLoader()


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Схема пакета по имени"""
    return _SCHEMA_LOADER.load_schema(schema_name)


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка значений против одной JSON Schema.

    Args:
        schema_name: Имя схемы
        loader: Загрузчик (default: схемы пакета)
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Значение не соответствует схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)


class StoredDecimalValidator(ContractValidator):
    """Валидатор сохранённого Decimal (string scalar)"""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(STORED_DECIMAL_SCHEMA, loader)


@lru_cache(maxsize=1)
def _stored_decimal_validator() -> StoredDecimalValidator:
    return StoredDecimalValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_stored_decimal(data: Any) -> None:
    """
    Проверка значения, прочитанного из storage.

    Raises:
        ValidationError: Значение не строка вида "123" / "1.5"
    """
    _stored_decimal_validator().validate(data)


def stored_decimal_json_schema() -> Dict[str, Any]:
    """
    JSON Schema поля Decimal для встраивания в схему Pydantic модели.

    Ключи $schema и $id отбрасываются; возвращается новый dict.
    """
    schema = load_schema(STORED_DECIMAL_SCHEMA)
    return {key: value for key, value in schema.items() if not key.startswith("$")}

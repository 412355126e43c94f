"""
Contract Validation Module

Модуль для валидации JSON контрактов storage-формата Decimal.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    StoredDecimalValidator,
    load_schema,
    stored_decimal_json_schema,
    validate_stored_decimal,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "StoredDecimalValidator",
    # Functions
    "load_schema",
    "stored_decimal_json_schema",
    "validate_stored_decimal",
]

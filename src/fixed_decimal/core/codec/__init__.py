"""
Codecs: текстовая нотация и storage-формат (reference 18 decimals).

Оба кодека работают с парой (atomics, decimal_places) и не зависят
от класса Decimal.
"""

from fixed_decimal.core.codec.storage import (
    deserialize_decimal,
    dumps_decimal,
    loads_decimal,
    serialize_decimal,
)
from fixed_decimal.core.codec.text import format_decimal, parse_decimal

__all__ = [
    # Text
    "format_decimal",
    "parse_decimal",
    # Storage
    "serialize_decimal",
    "deserialize_decimal",
    "dumps_decimal",
    "loads_decimal",
]

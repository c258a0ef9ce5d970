"""
Contract Module

Целочисленный контракт для Fraction и валидация JSON контрактов
сериализованных дробей.
"""

from .integer_contract import (
    IntegerCapabilityError,
    SupportsIntegerOps,
    Z,
    check_integer_capability,
    is_integer_like,
    one_like,
    zero_like,
)
from .validators import (
    FRACTION_SCHEMA_NAME,
    ContractValidator,
    FractionPayloadValidator,
    SchemaLoader,
    get_schema_loader,
    validate_fraction_payload,
)

__all__ = [
    # Integer contract
    "SupportsIntegerOps",
    "Z",
    "IntegerCapabilityError",
    "check_integer_capability",
    "is_integer_like",
    "zero_like",
    "one_like",
    # JSON Schema contracts
    "FRACTION_SCHEMA_NAME",
    "SchemaLoader",
    "get_schema_loader",
    "ContractValidator",
    "FractionPayloadValidator",
    "validate_fraction_payload",
]

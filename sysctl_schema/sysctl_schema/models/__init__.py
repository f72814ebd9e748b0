from .config_value import (
    BoolValue,
    ConfigValue,
    FloatValue,
    IntValue,
    NamespaceValue,
    StringValue,
    config_from_mapping,
    matches_type,
)
from .schema_tree import SchemaEntry, SchemaNamespace, SchemaTree
from .value_types import ValueType
from .violations import (
    MissingKey,
    TypeMismatch,
    UnexpectedStructure,
    UnknownKey,
    ValidationResult,
    Violation,
)

__all__ = [
    "BoolValue",
    "ConfigValue",
    "FloatValue",
    "IntValue",
    "NamespaceValue",
    "StringValue",
    "config_from_mapping",
    "matches_type",
    "SchemaEntry",
    "SchemaNamespace",
    "SchemaTree",
    "ValueType",
    "MissingKey",
    "TypeMismatch",
    "UnexpectedStructure",
    "UnknownKey",
    "ValidationResult",
    "Violation",
]

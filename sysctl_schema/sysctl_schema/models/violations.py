from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .config_value import ConfigValue, describe_kind
from .schema_tree import KeyPath, format_path
from .value_types import ValueType


@dataclass(frozen=True)
class MissingKey:
    path: KeyPath

    @property
    def dotted_path(self) -> str:
        return format_path(self.path)

    @property
    def message(self) -> str:
        return f"Missing required key '{self.dotted_path}'"


@dataclass(frozen=True)
class TypeMismatch:
    path: KeyPath
    expected: ValueType
    actual: ConfigValue

    @property
    def dotted_path(self) -> str:
        return format_path(self.path)

    @property
    def message(self) -> str:
        return (
            f"Key '{self.dotted_path}' has invalid type. "
            f"Expected: {self.expected}, got {describe_kind(self.actual)} value '{self.actual}'"
        )


@dataclass(frozen=True)
class UnexpectedStructure:
    """A namespace found where a leaf was declared, or the reverse."""

    path: KeyPath
    expected_namespace: bool

    @property
    def dotted_path(self) -> str:
        return format_path(self.path)

    @property
    def message(self) -> str:
        if self.expected_namespace:
            return f"Key '{self.dotted_path}' is declared as a namespace but holds a value"
        return f"Key '{self.dotted_path}' is declared as a value but holds a namespace"


@dataclass(frozen=True)
class UnknownKey:
    """Only reported in strict mode."""

    path: KeyPath

    @property
    def dotted_path(self) -> str:
        return format_path(self.path)

    @property
    def message(self) -> str:
        return f"Key '{self.dotted_path}' is not declared in the schema"


Violation = Union[MissingKey, TypeMismatch, UnexpectedStructure, UnknownKey]


@dataclass(frozen=True)
class ValidationResult:
    violations: Tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    def __iter__(self):
        return iter(self.violations)


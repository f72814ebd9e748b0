"""Tagged configuration values produced by the config parsers.

Every value in a parsed configuration is one of the closed set of variants
below. The validator never looks at raw Python objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from ..exceptions import ConfigSyntaxError
from .value_types import ValueType


@dataclass(frozen=True)
class StringValue:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BoolValue:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class IntValue:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FloatValue:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


ScalarValue = Union[StringValue, BoolValue, IntValue, FloatValue]


@dataclass
class NamespaceValue:
    """A nested mapping of path segment to value, in insertion order."""

    entries: Dict[str, "ConfigValue"] = field(default_factory=dict)

    def __getitem__(self, key: str) -> "ConfigValue":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str) -> Optional["ConfigValue"]:
        return self.entries.get(key)

    def items(self):
        return self.entries.items()

    def lookup(self, path: Sequence[str]) -> Optional["ConfigValue"]:
        """Follow ``path`` through nested namespaces; None if any segment is absent."""
        current: ConfigValue = self
        for segment in path:
            if not isinstance(current, NamespaceValue):
                return None
            current = current.entries.get(segment)
            if current is None:
                return None
        return current

    def to_python(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in self.entries.items():
            if isinstance(value, NamespaceValue):
                result[key] = value.to_python()
            else:
                result[key] = value.value
        return result


ConfigValue = Union[StringValue, BoolValue, IntValue, FloatValue, NamespaceValue]


# Accepted value variants per declared type. INT widens to FLOAT, nothing else.
_TYPE_MAP: Dict[ValueType, Tuple[type, ...]] = {
    ValueType.STRING: (StringValue,),
    ValueType.BOOL: (BoolValue,),
    ValueType.INT: (IntValue,),
    ValueType.FLOAT: (IntValue, FloatValue),
}


def matches_type(value: ScalarValue, expected: ValueType) -> bool:
    """Check a scalar against a declared type."""
    return isinstance(value, _TYPE_MAP[expected])


def describe_kind(value: ConfigValue) -> str:
    if isinstance(value, NamespaceValue):
        return "namespace"
    if isinstance(value, StringValue):
        return ValueType.STRING.value
    if isinstance(value, BoolValue):
        return ValueType.BOOL.value
    if isinstance(value, IntValue):
        return ValueType.INT.value
    return ValueType.FLOAT.value


def scalar_from_python(value: Any, key: str = "") -> ScalarValue:
    """Tag a native Python scalar.

    bool is checked before int since bool is an int subclass.

    Raises:
        ConfigSyntaxError: For lists, None and any other unsupported value.
    """
    if isinstance(value, bool):
        return BoolValue(value)
    if isinstance(value, int):
        return IntValue(value)
    if isinstance(value, float):
        return FloatValue(value)
    if isinstance(value, str):
        return StringValue(value)
    where = f" at '{key}'" if key else ""
    raise ConfigSyntaxError(f"unsupported value {value!r} ({type(value).__name__}){where}")


def config_from_mapping(data: Mapping[str, Any], _prefix: str = "") -> NamespaceValue:
    """Convert a plain nested mapping into a NamespaceValue.

    Already-tagged values are kept as they are.
    """
    if isinstance(data, NamespaceValue):
        return data
    namespace = NamespaceValue()
    for key, value in data.items():
        key = str(key)
        dotted = f"{_prefix}.{key}" if _prefix else key
        if isinstance(value, (NamespaceValue, StringValue, BoolValue, IntValue, FloatValue)):
            namespace.entries[key] = value
        elif isinstance(value, Mapping):
            namespace.entries[key] = config_from_mapping(value, dotted)
        else:
            namespace.entries[key] = scalar_from_python(value, dotted)
    return namespace

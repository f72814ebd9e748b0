from __future__ import annotations

"""
Unit tests for tagged configuration values and the type-matching rule.
"""

import pytest

from sysctl_schema.exceptions import ConfigSyntaxError
from sysctl_schema.models.config_value import (
    BoolValue,
    FloatValue,
    IntValue,
    NamespaceValue,
    StringValue,
    config_from_mapping,
    matches_type,
)
from sysctl_schema.models.value_types import ValueType


@pytest.mark.parametrize(
    "value, expected, result",
    [
        (StringValue("x"), ValueType.STRING, True),
        (StringValue("1"), ValueType.INT, False),
        (StringValue("true"), ValueType.BOOL, False),
        (BoolValue(True), ValueType.BOOL, True),
        (BoolValue(False), ValueType.INT, False),
        (BoolValue(True), ValueType.STRING, False),
        (IntValue(3), ValueType.INT, True),
        (IntValue(3), ValueType.FLOAT, True),
        (IntValue(3), ValueType.STRING, False),
        (FloatValue(1.5), ValueType.FLOAT, True),
        (FloatValue(1.5), ValueType.INT, False),
        (FloatValue(2.0), ValueType.INT, False),
    ],
)
def test_matches_type(value, expected: ValueType, result: bool) -> None:
    assert matches_type(value, expected) is result


def test_config_from_mapping_tags_python_values() -> None:
    data = config_from_mapping({
        "endpoint": "http://x",
        "debug": True,
        "port": 8080,
        "ratio": 0.5,
        "log": {"file": "/var/log/a.log"},
    })

    assert data["endpoint"] == StringValue("http://x")
    assert data["debug"] == BoolValue(True)
    assert data["port"] == IntValue(8080)
    assert data["ratio"] == FloatValue(0.5)
    assert isinstance(data["log"], NamespaceValue)
    assert data.lookup(["log", "file"]) == StringValue("/var/log/a.log")


def test_config_from_mapping_keeps_tagged_values() -> None:
    nested = NamespaceValue({"a": IntValue(1)})
    data = config_from_mapping({"n": nested, "s": StringValue("x")})

    assert data["n"] is nested
    assert data["s"] == StringValue("x")


@pytest.mark.parametrize("bad", [[1, 2], None, {1, 2}])
def test_config_from_mapping_rejects_unsupported_values(bad) -> None:
    with pytest.raises(ConfigSyntaxError, match="'section.key'"):
        config_from_mapping({"section": {"key": bad}})


def test_lookup_stops_at_scalars_and_missing_keys() -> None:
    data = config_from_mapping({"a": {"b": 1}, "s": "x"})

    assert data.lookup(["a", "b"]) == IntValue(1)
    assert data.lookup(["a", "c"]) is None
    assert data.lookup(["s", "t"]) is None
    assert data.lookup(["missing"]) is None


def test_to_python_round_trips_plain_mapping() -> None:
    plain = {"a": {"b": 1, "c": "x"}, "d": False}

    assert config_from_mapping(plain).to_python() == plain

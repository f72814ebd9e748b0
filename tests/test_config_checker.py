from __future__ import annotations

"""
Integration tests for ConfigChecker and check_files.

Covers the schema-bound loader end to end: schema file, config file on disk,
violations mapped back to config line numbers.
"""

import pytest

from sysctl_schema.check import check_files
from sysctl_schema.check.config_checker import ConfigChecker
from sysctl_schema.exceptions import ConfigSyntaxError, ConfigValidationError
from sysctl_schema.models.config_value import StringValue
from sysctl_schema.models.violations import MissingKey, TypeMismatch, UnknownKey
from sysctl_schema.parsers.schema_parser import compile_schema


VALID_CONF = "endpoint = http://x\ndebug = true\nlog.file = /var/log/a.log\n"


def test_load_returns_valid_configuration(write_file, sample_schema_text: str) -> None:
    schema = write_file("app.schema", sample_schema_text)
    conf = write_file("app.conf", VALID_CONF)

    data = ConfigChecker.from_schema_file(schema).load(conf)

    assert data.lookup(["log", "file"]) == StringValue("/var/log/a.log")


def test_load_raises_with_all_violations(write_file, sample_schema_text: str) -> None:
    conf = write_file("app.conf", "endpoint = 123\n")
    checker = ConfigChecker.from_schema_text(sample_schema_text)

    with pytest.raises(ConfigValidationError) as exc_info:
        checker.load(conf)

    violations = exc_info.value.violations
    assert [type(v) for v in violations] == [TypeMismatch, MissingKey, MissingKey]
    assert "3 schema violation(s)" in str(exc_info.value)


def test_load_propagates_parse_errors(write_file, sample_schema_text: str) -> None:
    conf = write_file("app.conf", "endpoint\n")
    checker = ConfigChecker.from_schema_text(sample_schema_text)

    with pytest.raises(ConfigSyntaxError):
        checker.load(conf)


def test_check_file_reports_config_lines(write_file, sample_schema_text: str) -> None:
    conf = write_file("app.conf", "debug = true\nendpoint = 8080\nlog.file = a.log\n")
    checker = ConfigChecker.from_schema_text(sample_schema_text)

    result = checker.check_file(conf)

    assert not result.ok
    assert not result.load_failed
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error["line"] == 2
    assert error["key_path"] == "endpoint"
    assert "Expected: string" in error["message"]
    assert "8080" in error["message"]
    assert f"{conf}:2" in error["message"]


def test_check_file_missing_key_has_no_line(write_file, sample_schema_text: str) -> None:
    conf = write_file("app.conf", "endpoint = http://x\nlog.file = a.log\n")

    result = ConfigChecker.from_schema_text(sample_schema_text).check_file(conf)

    assert result.violations == [MissingKey(("debug",))]
    assert "line" not in result.errors[0]


def test_check_file_messages_name_the_declared_type(write_file, sample_schema_text: str) -> None:
    conf = write_file("app.conf", "endpoint = http://x\nlog = plain\n")

    result = ConfigChecker.from_schema_text(sample_schema_text).check_file(conf)

    messages = [error["message"] for error in result.errors]
    assert messages[0].startswith("Missing required key 'debug' (expected bool)")
    assert messages[1].startswith("Key 'log' is declared as a namespace but holds a value (expected namespace)")
    assert len(messages) == 2


def test_structure_mismatch_on_a_leaf_names_its_type(write_file) -> None:
    conf = write_file("app.conf", "port.number = 80\n")

    result = ConfigChecker.from_schema_text("port -> int\n").check_file(conf)

    assert "(expected int)" in result.errors[0]["message"]


def test_check_file_load_failure(write_file, sample_schema_text: str) -> None:
    conf = write_file("app.conf", "ok = 1\nbroken line\n")

    result = ConfigChecker.from_schema_text(sample_schema_text).check_file(conf)

    assert result.load_failed
    assert result.errors[0]["line"] == 2
    assert result.violations == []


def test_quoted_digits_satisfy_string(write_file, sample_schema_text: str) -> None:
    conf = write_file("app.conf", 'endpoint = "123"\ndebug = false\nlog.file = a.log\n')

    result = ConfigChecker.from_schema_text(sample_schema_text).check_file(conf)

    assert result.ok


def test_check_files_strict_mode(write_file, sample_schema_text: str) -> None:
    good = write_file("good.conf", VALID_CONF)
    extra = write_file("extra.yaml", "endpoint: x\ndebug: true\nlog:\n  file: a\nunused: 1\n")
    tree = compile_schema(sample_schema_text)

    lenient = check_files(tree, [good, extra])
    strict = check_files(tree, [good, extra], strict=True)

    assert all(r.ok for r in lenient)
    assert strict[0].ok
    assert strict[1].violations == [UnknownKey(("unused",))]
    assert strict[1].errors[0]["line"] == 5


def test_check_files_keeps_going_after_a_bad_file(tmp_path, write_file, sample_schema_text: str) -> None:
    good = write_file("good.conf", VALID_CONF)
    tree = compile_schema(sample_schema_text)

    results = check_files(tree, [tmp_path / "missing.conf", good])

    assert results[0].load_failed
    assert results[1].ok

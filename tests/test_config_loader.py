from __future__ import annotations

"""
Unit tests for configuration loading (sysctl and YAML formats).
"""

import pytest

from sysctl_schema.exceptions import ConfigFileError, ConfigSyntaxError
from sysctl_schema.models.config_value import BoolValue, FloatValue, IntValue, StringValue
from sysctl_schema.parsers.config_loader import (
    FORMAT_SYSCTL,
    FORMAT_YAML,
    detect_format,
    load_config_file,
    parse_config_text,
)
from sysctl_schema.parsers.yaml_parser import yaml_parser


def test_detect_format_by_suffix(tmp_path) -> None:
    assert detect_format(tmp_path / "a.yaml") == FORMAT_YAML
    assert detect_format(tmp_path / "a.YML") == FORMAT_YAML
    assert detect_format(tmp_path / "99-app.conf") == FORMAT_SYSCTL
    assert detect_format(tmp_path / "settings") == FORMAT_SYSCTL


def test_load_sysctl_file(write_file) -> None:
    path = write_file("app.conf", "endpoint = http://x\ndebug = true\nlog.file = /var/log/a.log\n")

    loaded = load_config_file(path)

    assert loaded.file_path == path
    assert loaded.data["debug"] == BoolValue(True)
    assert loaded.data.lookup(["log", "file"]) == StringValue("/var/log/a.log")
    assert loaded.source_map["log.file"]["line"] == 3


def test_load_yaml_file(write_file) -> None:
    path = write_file(
        "app.yaml",
        "endpoint: http://x\n"
        "debug: true\n"
        "log:\n"
        "  file: /var/log/a.log\n"
        "  level: 3\n"
        "ratio: 0.5\n",
    )

    loaded = load_config_file(path)

    assert loaded.data["debug"] == BoolValue(True)
    assert loaded.data["ratio"] == FloatValue(0.5)
    assert loaded.data.lookup(["log", "level"]) == IntValue(3)
    assert loaded.source_map["log.file"] == {"line": 4, "column": 3}


def test_forced_format_overrides_suffix(write_file) -> None:
    path = write_file("app.txt", "a: 1\n")

    loaded = load_config_file(path, FORMAT_YAML)

    assert loaded.data["a"] == IntValue(1)


def test_empty_yaml_is_an_empty_namespace() -> None:
    data, source_map = yaml_parser.parse("")

    assert len(data) == 0
    assert source_map == {}


@pytest.mark.parametrize("content", ["- a\n- b\n", "just a string\n"])
def test_yaml_root_must_be_a_mapping(content: str) -> None:
    with pytest.raises(ConfigSyntaxError, match="root must be a mapping"):
        yaml_parser.parse(content)


def test_yaml_lists_are_not_supported() -> None:
    with pytest.raises(ConfigSyntaxError, match="'servers'"):
        yaml_parser.parse("servers:\n  - a\n  - b\n")


def test_malformed_yaml_reports_line() -> None:
    with pytest.raises(ConfigSyntaxError) as exc_info:
        yaml_parser.parse("a: 1\nb: [unclosed\n")

    assert exc_info.value.line_number is not None


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(ConfigFileError, match="not found"):
        load_config_file(tmp_path / "missing.conf")


def test_directory_is_not_a_file(tmp_path) -> None:
    with pytest.raises(ConfigFileError, match="not a file"):
        load_config_file(tmp_path)


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ValueError):
        parse_config_text("a = 1", "ini")


def test_yaml_dates_stay_strings() -> None:
    data, source_map = yaml_parser.parse("release: 2024-01-01\nbuilt: 2024-01-01 10:00:00\n")

    assert data["release"] == StringValue("2024-01-01")
    assert data["built"] == StringValue("2024-01-01 10:00:00")
    assert source_map["built"]["line"] == 2

from __future__ import annotations

"""
Unit tests for CheckerConfig and the split stream logging setup.
"""

import logging

from sysctl_schema.config import CheckerConfig
from sysctl_schema.utils.logging_utils import SplitStreamHandler, level_from_name


def test_defaults_from_empty_environment(monkeypatch) -> None:
    for name in ("SYSCTL_SCHEMA_LOG_LEVEL", "SYSCTL_SCHEMA_PRINT_LEVEL", "SYSCTL_SCHEMA_STRICT"):
        monkeypatch.delenv(name, raising=False)

    config = CheckerConfig.from_env()

    assert config == CheckerConfig(log_level="INFO", print_level="WARNING", strict=False)


def test_values_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SYSCTL_SCHEMA_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SYSCTL_SCHEMA_PRINT_LEVEL", "ERROR")
    monkeypatch.setenv("SYSCTL_SCHEMA_STRICT", "Yes")

    config = CheckerConfig.from_env()

    assert config.log_level == "DEBUG"
    assert config.print_level == "ERROR"
    assert config.strict is True


def test_set_logging_installs_one_split_handler() -> None:
    CheckerConfig(log_level="info").set_logging()
    logger = CheckerConfig(log_level="debug", print_level="error").set_logging()

    root = logging.getLogger()
    handlers = [h for h in root.handlers if isinstance(h, SplitStreamHandler)]
    assert logger.name == "sysctl_schema"
    assert root.level == logging.DEBUG
    assert len(handlers) == 1
    assert handlers[0].stderr_level == logging.ERROR


def test_records_are_routed_by_level(capsys) -> None:
    CheckerConfig(log_level="debug", print_level="warning").set_logging()
    logger = logging.getLogger("sysctl_schema.test")

    logger.info("progress note")
    logger.warning("something odd")

    captured = capsys.readouterr()
    assert "progress note" in captured.out
    assert "progress note" not in captured.err
    assert "something odd" in captured.err
    assert "something odd" not in captured.out


def test_level_from_name() -> None:
    assert level_from_name(" Debug ", logging.INFO) == logging.DEBUG
    assert level_from_name("chatty", logging.WARNING) == logging.WARNING


def test_unknown_level_falls_back_to_info() -> None:
    CheckerConfig(log_level="chatty").set_logging()

    assert logging.getLogger().level == logging.INFO

from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Puts the package directory on sys.path so tests run from a source checkout,
and provides the sample schema shared by most test modules.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_PACKAGE_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "sysctl_schema"))
if _PACKAGE_PATH not in sys.path:
    sys.path.insert(0, _PACKAGE_PATH)

from sysctl_schema.utils.logging_utils import SplitStreamHandler  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_SCHEMA = """endpoint -> string
debug -> bool
log.file -> string
"""


@pytest.fixture
def sample_schema_text() -> str:
    """Schema with a top-level string, a bool and one nested namespace."""
    return SAMPLE_SCHEMA


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing text content to a file under tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, SplitStreamHandler):
            root.removeHandler(handler)
    root.setLevel(level)

"""Diagnostic logging for the checker CLI.

Violation reports are printed on stdout. Log records at or above the print
level go to stderr so they stay separable when a report is piped
(e.g. ``--format json``).
"""

import logging
import sys

DEFAULT_LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def level_from_name(name: str, default: int) -> int:
    """Resolve a level name such as ``"debug"``; unknown names give ``default``."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


class SplitStreamHandler(logging.StreamHandler):
    """Writes records below ``stderr_level`` to stdout and the rest to stderr.

    Streams are looked up per record, so a replaced ``sys.stdout`` is honoured.
    """

    def __init__(self, stderr_level: int = logging.WARNING) -> None:
        super().__init__(stream=sys.stdout)
        self.stderr_level = max(stderr_level, logging.DEBUG)

    def emit(self, record: logging.LogRecord) -> None:
        # emit() runs under the handler lock.
        self.stream = sys.stderr if record.levelno >= self.stderr_level else sys.stdout
        super().emit(record)


def install_checker_logging(level: int, stderr_level: int, fmt: str = DEFAULT_LOG_FORMAT) -> SplitStreamHandler:
    """Route root logging through one SplitStreamHandler.

    A handler left by an earlier call is replaced; other handlers are kept.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, SplitStreamHandler):
            root.removeHandler(handler)

    handler = SplitStreamHandler(stderr_level)
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
    root.setLevel(level)
    return handler

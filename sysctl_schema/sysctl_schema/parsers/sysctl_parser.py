# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Parser for sysctl.conf style ``key.path = value`` files."""

import logging
import re
from typing import Dict, Tuple

from ..exceptions import ConfigSyntaxError
from ..models.config_value import (
    BoolValue,
    FloatValue,
    IntValue,
    NamespaceValue,
    ScalarValue,
    StringValue,
)

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]

COMMENT_PREFIXES = ("#", ";")
IGNORE_ERRORS_PREFIX = "-"

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")


def parse_scalar(text: str) -> ScalarValue:
    """Tag a raw value string.

    ``true``/``false`` are booleans, decimal literals are numbers, and a value
    wrapped in double quotes is always a string.
    """
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return StringValue(text[1:-1])
    if text in ("true", "false"):
        return BoolValue(text == "true")
    if _INT_RE.match(text):
        return IntValue(int(text))
    if _FLOAT_RE.match(text):
        return FloatValue(float(text))
    return StringValue(text)


class SysctlParser:
    """Builds a NamespaceValue from sysctl.conf text."""

    def parse(self, content: str) -> Tuple[NamespaceValue, SourceMap]:
        """Parse sysctl.conf content and return (data, source_map).

        source_map keys are dotted key paths (e.g. "net.ipv4.ip_forward").
        Values contain 1-based line/column.

        Raises:
            ConfigSyntaxError: For a malformed line not prefixed with '-'
        """
        root = NamespaceValue()
        source_map: SourceMap = {}
        for line_number, line in enumerate(content.split("\n"), start=1):
            self._insert_line(root, source_map, line.rstrip("\r"), line_number)
        return root, source_map

    def _insert_line(self, root: NamespaceValue, source_map: SourceMap, line: str, line_number: int) -> None:
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIXES):
            return

        ignore_errors = stripped.startswith(IGNORE_ERRORS_PREFIX)
        if ignore_errors:
            stripped = stripped[len(IGNORE_ERRORS_PREFIX):]

        try:
            self._insert_entry(root, source_map, stripped, line, line_number)
        except ConfigSyntaxError as exc:
            if not ignore_errors:
                raise
            logger.debug(f"Ignoring invalid line: {exc}")

    @staticmethod
    def _insert_entry(
        root: NamespaceValue,
        source_map: SourceMap,
        text: str,
        raw_line: str,
        line_number: int,
    ) -> None:
        key_part, equals, value_part = text.partition("=")
        if not equals:
            raise ConfigSyntaxError("expected '<key> = <value>'", line_number=line_number)

        key = key_part.strip()
        value = value_part.strip()
        if not key:
            raise ConfigSyntaxError("empty key", line_number=line_number)
        if not value:
            raise ConfigSyntaxError(f"empty value for key '{key}'", line_number=line_number)
        if any(ch.isspace() for ch in key):
            raise ConfigSyntaxError(f"key '{key}' must not contain whitespace", line_number=line_number)

        segments = key.split(".")
        if not all(segments):
            raise ConfigSyntaxError(f"empty segment in key '{key}'", line_number=line_number)

        namespace = root
        for index, segment in enumerate(segments[:-1]):
            child = namespace.entries.get(segment)
            if child is None:
                child = NamespaceValue()
                namespace.entries[segment] = child
            elif not isinstance(child, NamespaceValue):
                prefix = ".".join(segments[:index + 1])
                raise ConfigSyntaxError(
                    f"key '{key}' nests under '{prefix}', which already holds a value",
                    line_number=line_number,
                )
            namespace = child

        leaf = segments[-1]
        if isinstance(namespace.entries.get(leaf), NamespaceValue):
            raise ConfigSyntaxError(
                f"key '{key}' already holds nested keys", line_number=line_number
            )
        # Later assignments win, as with sysctl itself.
        namespace.entries[leaf] = parse_scalar(value)

        location = {"line": line_number, "column": raw_line.find(key) + 1}
        source_map[key] = location
        # Namespaces point at the line that first opened them.
        for index in range(1, len(segments)):
            source_map.setdefault(".".join(segments[:index]), dict(location))


sysctl_parser = SysctlParser()

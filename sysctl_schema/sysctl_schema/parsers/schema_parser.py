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

"""Schema compiler: turns ``<path> -> <type>`` lines into a SchemaTree."""

import logging
from pathlib import Path
from typing import Tuple, Union

from ..exceptions import SchemaError, SchemaSyntaxError
from ..models.schema_tree import SchemaTree
from ..models.value_types import ValueType, parse_type_token

logger = logging.getLogger(__name__)

ARROW = "->"


def split_key_path(raw_path: str, line_number: int) -> Tuple[str, ...]:
    """Split a dotted schema path into segments."""
    # example: 'log.file' -> ('log', 'file')

    if not raw_path:
        raise SchemaSyntaxError("empty key path", line_number=line_number)

    segments = raw_path.split(".")
    for segment in segments:
        if not segment:
            raise SchemaSyntaxError(f"empty segment in key path '{raw_path}'", line_number=line_number)
        if any(ch.isspace() for ch in segment):
            raise SchemaSyntaxError(
                f"key path '{raw_path}' must not contain whitespace", line_number=line_number
            )
    return tuple(segments)


def parse_schema_line(line: str, line_number: int) -> Tuple[Tuple[str, ...], ValueType]:
    """Parse one non-blank schema line into (path, type)."""
    path_part, arrow, type_part = line.partition(ARROW)
    if not arrow:
        raise SchemaSyntaxError(
            f"expected '<path> {ARROW} <type>', got '{line.strip()}'",
            line_number=line_number,
            line=line,
        )

    path = split_key_path(path_part.strip(), line_number)
    value_type = parse_type_token(type_part.strip(), line_number=line_number)
    return path, value_type


def compile_schema(source: str) -> SchemaTree:
    """Compile schema source text into a SchemaTree.

    Args:
        source: Schema text, one ``<path> -> <type>`` declaration per line

    Returns:
        The root namespace of the compiled tree

    Raises:
        SchemaSyntaxError: For a malformed line or unknown type token
        SchemaConflictError: For leaf/namespace clashes or type redeclarations
    """
    tree = SchemaTree()
    declared = 0
    # Only "\n" ends a line.
    for line_number, line in enumerate(source.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        path, value_type = parse_schema_line(line, line_number)
        tree.insert(path, value_type, line_number=line_number)
        declared += 1

    logger.debug(f"Compiled schema with {declared} declaration(s)")
    return tree


def load_schema_file(file_path: Union[str, Path]) -> SchemaTree:
    """Read and compile a schema file.

    Raises:
        SchemaError: If the file cannot be read, or any compile error
    """
    path = Path(file_path)

    if not path.is_file():
        raise SchemaError(f"Schema file not found: {path}")

    try:
        logger.debug(f"Loading schema file: {path}")
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaError(f"Failed to read schema file {path}: {exc}") from exc

    return compile_schema(content)


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

"""Checks configuration files against one compiled schema."""

import logging
from pathlib import Path
from typing import Optional, Union

from ..exceptions import ConfigError, ConfigValidationError
from ..file_io.source_location import format_source, lookup_source
from ..models.config_value import NamespaceValue
from ..models.schema_tree import SchemaEntry, SchemaNamespace, SchemaTree
from ..models.violations import TypeMismatch, UnknownKey, Violation
from ..parsers.config_loader import LoadedConfig, load_config_file
from ..parsers.schema_parser import compile_schema, load_schema_file
from ..validation.validator import SchemaValidator
from .report import CheckResult

logger = logging.getLogger(__name__)


class ConfigChecker:
    """Schema-bound loader: parse a config file, then validate it."""

    def __init__(self, tree: SchemaTree, strict: bool = False):
        self.tree = tree
        self.strict = strict
        self._validator = SchemaValidator(tree, strict=strict)

    @classmethod
    def from_schema_file(cls, schema_path: Union[str, Path], strict: bool = False) -> 'ConfigChecker':
        return cls(load_schema_file(schema_path), strict=strict)

    @classmethod
    def from_schema_text(cls, source: str, strict: bool = False) -> 'ConfigChecker':
        return cls(compile_schema(source), strict=strict)

    def load(self, file_path: Union[str, Path], config_format: Optional[str] = None) -> NamespaceValue:
        """Load a configuration file and return it only if it is valid.

        Raises:
            ConfigFileError: If the file cannot be read
            ConfigSyntaxError: If the file cannot be parsed
            ConfigValidationError: If the configuration violates the schema
        """
        loaded = load_config_file(file_path, config_format)
        result = self._validator.validate(loaded.data)
        if not result.ok:
            raise ConfigValidationError(result.violations, source=str(file_path))
        return loaded.data

    def check_file(self, file_path: Union[str, Path], config_format: Optional[str] = None) -> CheckResult:
        """Check a configuration file and collect every problem into a CheckResult."""
        path = Path(file_path)
        result = CheckResult(path)

        try:
            loaded = load_config_file(path, config_format)
        except ConfigError as e:
            line = getattr(e, "line_number", None)
            result.add_error(f"Failed to load configuration: {str(e)}", line=line)
            result.load_failed = True
            return result

        self._report_violations(loaded, result)
        return result

    def _expected_suffix(self, violation: Violation) -> str:
        # TypeMismatch already names the type; UnknownKey has no declaration.
        if isinstance(violation, (TypeMismatch, UnknownKey)):
            return ""
        node = self.tree.get(violation.path)
        if isinstance(node, SchemaEntry):
            return f" (expected {node.type})"
        if isinstance(node, SchemaNamespace):
            return " (expected namespace)"
        return ""

    def _report_violations(self, loaded: LoadedConfig, result: CheckResult) -> None:
        validation = self._validator.validate(loaded.data)
        result.violations.extend(validation.violations)
        logger.debug(f"{result.file_path}: {len(validation.violations)} violation(s)")

        for violation in validation.violations:
            loc = lookup_source(loaded.source_map, violation.dotted_path, file_path=result.file_path)
            result.add_error(
                f"{violation.message}{self._expected_suffix(violation)}{format_source(loc)}",
                line=loc.line,
                column=loc.column,
                key_path=violation.dotted_path,
            )

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

"""Custom exceptions for the sysctl schema checker."""

from typing import Optional, Sequence


class SysctlSchemaError(Exception):
    """Base exception for sysctl-schema related errors."""
    pass


class SchemaError(SysctlSchemaError):
    """Exception raised when a schema file cannot be compiled."""
    pass


class SchemaSyntaxError(SchemaError):
    """Exception raised for a malformed schema line."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class SchemaConflictError(SchemaError):
    """Exception raised when a path is declared as both leaf and namespace,
    or redeclared with a different type."""

    def __init__(self, path: Sequence[str], line_number: Optional[int] = None, detail: str = ""):
        self.path = tuple(path)
        self.line_number = line_number
        message = f"conflicting declaration for '{'.'.join(self.path)}'"
        if detail:
            message = f"{message}: {detail}"
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class ConfigError(SysctlSchemaError):
    """Base exception for configuration file problems."""
    pass


class ConfigFileError(ConfigError):
    """Exception raised when a configuration file cannot be read."""
    pass


class ConfigSyntaxError(ConfigError):
    """Exception raised for a malformed configuration line or value."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class ConfigValidationError(ConfigError):
    """Exception raised when a loaded configuration violates its schema."""

    def __init__(self, violations: Sequence, source: Optional[str] = None):
        self.violations = tuple(violations)
        self.source = source
        header = f"{len(self.violations)} schema violation(s)"
        if source:
            header = f"{header} in {source}"
        details = "\n".join(f"  - {v.message}" for v in self.violations)
        super().__init__(f"{header}:\n{details}" if details else header)

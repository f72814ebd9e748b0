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

"""Typed schemas for sysctl-style configuration files."""

__version__ = "0.1.0"

from .exceptions import (  # noqa: E402
    ConfigError,
    ConfigSyntaxError,
    ConfigValidationError,
    SchemaConflictError,
    SchemaError,
    SchemaSyntaxError,
    SysctlSchemaError,
)
from .models import (  # noqa: E402
    MissingKey,
    NamespaceValue,
    SchemaTree,
    TypeMismatch,
    UnexpectedStructure,
    UnknownKey,
    ValidationResult,
    ValueType,
)
from .parsers.schema_parser import compile_schema, load_schema_file  # noqa: E402
from .validation.validator import validate  # noqa: E402

__all__ = [
    "ConfigError",
    "ConfigSyntaxError",
    "ConfigValidationError",
    "SchemaConflictError",
    "SchemaError",
    "SchemaSyntaxError",
    "SysctlSchemaError",
    "MissingKey",
    "NamespaceValue",
    "SchemaTree",
    "TypeMismatch",
    "UnexpectedStructure",
    "UnknownKey",
    "ValidationResult",
    "ValueType",
    "compile_schema",
    "load_schema_file",
    "validate",
]

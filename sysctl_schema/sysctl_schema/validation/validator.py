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

"""Validates a parsed configuration against a compiled schema tree.

The walk is depth-first over the schema in declaration order and collects
every violation instead of stopping at the first one.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from ..models.config_value import ConfigValue, NamespaceValue, config_from_mapping, matches_type
from ..models.schema_tree import SchemaEntry, SchemaNamespace, SchemaTree
from ..models.violations import (
    MissingKey,
    TypeMismatch,
    UnexpectedStructure,
    UnknownKey,
    ValidationResult,
    Violation,
)

logger = logging.getLogger(__name__)


class SchemaValidator:
    """Collects violations for one schema tree."""

    def __init__(self, tree: SchemaTree, strict: bool = False):
        if tree is None:
            raise TypeError("schema tree must not be None")
        self.tree = tree
        self.strict = strict

    def validate(self, config: Union[NamespaceValue, Mapping[str, Any]]) -> ValidationResult:
        if not isinstance(config, NamespaceValue):
            config = config_from_mapping(config)

        violations: List[Violation] = []
        self._validate_namespace(self.tree, config, violations)
        logger.debug(f"Validation finished with {len(violations)} violation(s)")
        return ValidationResult(tuple(violations))

    def _validate_namespace(
        self,
        namespace: SchemaNamespace,
        config: Optional[NamespaceValue],
        violations: List[Violation],
    ) -> None:
        for name, node in namespace.children.items():
            value = config.get(name) if config is not None else None
            if isinstance(node, SchemaEntry):
                self._validate_entry(node, value, violations)
            else:
                self._validate_child_namespace(node, value, violations)

        if self.strict and config is not None:
            for name in config:
                if name not in namespace.children:
                    violations.append(UnknownKey(namespace.path + (name,)))

    def _validate_child_namespace(
        self,
        namespace: SchemaNamespace,
        value: Optional[ConfigValue],
        violations: List[Violation],
    ) -> None:
        if value is not None and not isinstance(value, NamespaceValue):
            violations.append(UnexpectedStructure(namespace.path, expected_namespace=True))
            return
        # An absent namespace still reports each declared leaf as missing.
        self._validate_namespace(namespace, value, violations)

    @staticmethod
    def _validate_entry(
        entry: SchemaEntry,
        value: Optional[ConfigValue],
        violations: List[Violation],
    ) -> None:
        if value is None:
            violations.append(MissingKey(entry.path))
        elif isinstance(value, NamespaceValue):
            violations.append(UnexpectedStructure(entry.path, expected_namespace=False))
        elif not matches_type(value, entry.type):
            violations.append(TypeMismatch(entry.path, entry.type, value))


def validate(
    tree: SchemaTree,
    config: Union[NamespaceValue, Mapping[str, Any]],
    strict: bool = False,
) -> ValidationResult:
    """Validate a configuration mapping against a schema tree.

    Args:
        tree: Compiled schema tree
        config: Parsed configuration, tagged or as a plain nested mapping
        strict: Also report keys the schema does not declare

    Returns:
        ValidationResult; ``ok`` is True iff no violation was found
    """
    return SchemaValidator(tree, strict=strict).validate(config)

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

"""In-memory schema tree built by the schema compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Sequence, Tuple, Union

from ..exceptions import SchemaConflictError
from .value_types import ValueType


KeyPath = Tuple[str, ...]


def format_path(path: Sequence[str]) -> str:
    return ".".join(path)


@dataclass(frozen=True)
class SchemaEntry:
    """A leaf declaration: ``path -> type``."""

    path: KeyPath
    type: ValueType
    line_number: Optional[int] = field(default=None, compare=False)

    @property
    def dotted_path(self) -> str:
        return format_path(self.path)


@dataclass
class SchemaNamespace:
    """A namespace node; children keep their declaration order."""

    path: KeyPath = ()
    children: Dict[str, Union["SchemaNamespace", SchemaEntry]] = field(default_factory=dict)

    @property
    def dotted_path(self) -> str:
        return format_path(self.path)

    def __len__(self) -> int:
        return len(self.children)

    def get(self, path: Sequence[str]) -> Optional[Union["SchemaNamespace", SchemaEntry]]:
        node: Union[SchemaNamespace, SchemaEntry] = self
        for segment in path:
            if not isinstance(node, SchemaNamespace):
                return None
            node = node.children.get(segment)
            if node is None:
                return None
        return node

    def entries(self) -> Iterator[SchemaEntry]:
        """Yield every leaf depth-first in declaration order."""
        for child in self.children.values():
            if isinstance(child, SchemaNamespace):
                yield from child.entries()
            else:
                yield child

    def insert(self, path: Sequence[str], value_type: ValueType, line_number: Optional[int] = None) -> SchemaEntry:
        """Declare ``path`` as a leaf of ``value_type``.

        Intermediate namespaces are created on demand. Redeclaring a leaf with
        the same type is a no-op.

        Raises:
            SchemaConflictError: If a prefix is already a leaf, the path is
                already a namespace, or the leaf exists with another type.
        """
        path = tuple(path)
        if not path:
            raise ValueError("schema path must not be empty")

        node = self
        for index, segment in enumerate(path[:-1]):
            child = node.children.get(segment)
            if child is None:
                child = SchemaNamespace(path=path[:index + 1])
                node.children[segment] = child
            elif isinstance(child, SchemaEntry):
                raise SchemaConflictError(
                    child.path,
                    line_number=line_number,
                    detail=f"declared as '{child.type}' and used as a namespace",
                )
            node = child

        leaf_name = path[-1]
        existing = node.children.get(leaf_name)
        if isinstance(existing, SchemaNamespace):
            raise SchemaConflictError(
                path,
                line_number=line_number,
                detail=f"already used as a namespace, cannot declare as '{value_type}'",
            )
        if isinstance(existing, SchemaEntry):
            if existing.type != value_type:
                raise SchemaConflictError(
                    path,
                    line_number=line_number,
                    detail=f"redeclared as '{value_type}', previously '{existing.type}'",
                )
            return existing

        entry = SchemaEntry(path=path, type=value_type, line_number=line_number)
        node.children[leaf_name] = entry
        return entry


# The root namespace is the schema tree.
SchemaTree = SchemaNamespace

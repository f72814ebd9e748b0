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

"""Export a compiled schema tree as a JSON Schema document.

The exported document describes the same minimum shape the validator checks,
so editors and other JSON Schema tools can validate YAML configs too.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from jsonschema import Draft7Validator

from ..models.schema_tree import SchemaEntry, SchemaNamespace, SchemaTree
from ..models.value_types import ValueType

JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

# int widens to float, so float maps to "number" which accepts integers.
_JSON_TYPES = {
    ValueType.STRING: "string",
    ValueType.BOOL: "boolean",
    ValueType.INT: "integer",
    ValueType.FLOAT: "number",
}


def _node_to_json_schema(node: Union[SchemaNamespace, SchemaEntry], strict: bool) -> Dict[str, Any]:
    if isinstance(node, SchemaEntry):
        return {"type": _JSON_TYPES[node.type]}

    properties = {
        name: _node_to_json_schema(child, strict) for name, child in node.children.items()
    }
    return {
        "type": "object",
        "properties": properties,
        "required": list(node.children),
        "additionalProperties": not strict,
    }


def to_json_schema(tree: SchemaTree, strict: bool = False, title: str = "") -> Dict[str, Any]:
    """Build a draft-07 JSON Schema for the tree.

    Raises:
        jsonschema.exceptions.SchemaError: If the generated document is not a
            valid JSON Schema
    """
    document: Dict[str, Any] = {"$schema": JSON_SCHEMA_DRAFT}
    if title:
        document["title"] = title
    document.update(_node_to_json_schema(tree, strict))
    Draft7Validator.check_schema(document)
    return document


def write_json_schema(tree: SchemaTree, output_path: Union[str, Path], strict: bool = False, title: str = "") -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(to_json_schema(tree, strict, title), indent=2) + "\n", encoding="utf-8")
    return path

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

"""YAML configuration parser producing tagged values."""

import logging
from typing import Dict, Tuple

import yaml

from ..exceptions import ConfigSyntaxError
from ..models.config_value import NamespaceValue, config_from_mapping

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]


class ConfigLoader(yaml.SafeLoader):
    """SafeLoader without the timestamp resolver.

    Dates stay strings, since configuration values have no date type.
    """


ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class YamlParser:
    """YAML parser that keeps key locations."""

    @staticmethod
    def _build_source_map_from_yaml(content: str) -> SourceMap:
        """Build a mapping from dotted key paths to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so we can track locations without
        changing the parsed data shapes.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=ConfigLoader)
        except yaml.YAMLError:
            # Parsing errors are reported by parse().
            return source_map

        def _walk(node, path: str) -> None:
            if not isinstance(node, yaml.nodes.MappingNode):
                return
            for key_node, value_node in node.value:
                key = getattr(key_node, "value", None)
                if key is None:
                    continue
                child_path = f"{path}.{key}" if path else str(key)
                mark = key_node.start_mark
                # PyYAML uses 0-based line/column
                source_map[child_path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}
                _walk(value_node, child_path)

        if root is not None:
            _walk(root, "")
        return source_map

    def parse(self, content: str) -> Tuple[NamespaceValue, SourceMap]:
        """Parse YAML content and return (data, source_map).

        Raises:
            ConfigSyntaxError: If the YAML is malformed, the root is not a
                mapping, or a value is not a supported scalar
        """
        try:
            data = yaml.load(content, Loader=ConfigLoader)
        except yaml.YAMLError as exc:
            line_number = None
            mark = getattr(exc, "problem_mark", None)
            if mark is not None:
                line_number = int(mark.line) + 1
            raise ConfigSyntaxError(f"failed to parse YAML: {exc}", line_number=line_number) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigSyntaxError(f"root must be a mapping, got {type(data).__name__}")

        namespace = config_from_mapping(data)
        logger.debug(f"Parsed YAML configuration with {len(namespace)} top-level key(s)")
        return namespace, self._build_source_map_from_yaml(content)


yaml_parser = YamlParser()

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

import logging
from typing import List, Optional

from ..file_io.template_renderer import TemplateRenderer
from ..models.schema_tree import SchemaEntry, SchemaTree

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "sysctl.conf.jinja2"


class ConfigTemplateGenerator:
    """Generates a sysctl.conf skeleton from a schema tree.

    Every declared key is written once with a placeholder of its type, so the
    generated file validates against the schema it came from.
    """

    def __init__(self, tree: SchemaTree, template_renderer: Optional[TemplateRenderer] = None):
        self.tree = tree
        self.template_renderer = template_renderer or TemplateRenderer()

    def collect_groups(self) -> List[List[SchemaEntry]]:
        """Group leaves by their top-level key, in declaration order."""
        groups: List[List[SchemaEntry]] = []
        for child in self.tree.children.values():
            if isinstance(child, SchemaEntry):
                groups.append([child])
            else:
                groups.append(list(child.entries()))
        return groups

    def render(self, schema_name: str = "schema") -> str:
        return self.template_renderer.render_template(
            TEMPLATE_NAME,
            schema_name=schema_name,
            groups=self.collect_groups(),
        )

    def generate_to_file(self, output_path: str, schema_name: str = "schema") -> str:
        self.template_renderer.render_template_to_file(
            TEMPLATE_NAME,
            output_path,
            schema_name=schema_name,
            groups=self.collect_groups(),
        )
        logger.info(f"Generated configuration template: {output_path}")
        return output_path

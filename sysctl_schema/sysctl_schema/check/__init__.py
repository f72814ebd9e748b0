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

"""Checker package: validate configuration files against a schema."""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..models.schema_tree import SchemaTree
from .config_checker import ConfigChecker
from .report import CheckResult

__all__ = ['check_files', 'CheckResult', 'ConfigChecker']


def check_files(
    tree: SchemaTree,
    file_paths: Sequence[Union[str, Path]],
    strict: bool = False,
    config_format: Optional[str] = None,
) -> List[CheckResult]:
    """Check a list of configuration files against one schema.

    Args:
        tree: Compiled schema tree
        file_paths: List of configuration file paths
        strict: Also report keys the schema does not declare
        config_format: Force 'sysctl' or 'yaml' instead of detecting by suffix

    Returns:
        List of CheckResult objects, one per file
    """
    checker = ConfigChecker(tree, strict=strict)
    return [checker.check_file(Path(file_path), config_format) for file_path in file_paths]

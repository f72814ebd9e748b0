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

"""Loads configuration files with the parser matching their format."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from ..exceptions import ConfigFileError
from ..models.config_value import NamespaceValue
from .sysctl_parser import sysctl_parser
from .yaml_parser import yaml_parser

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}

FORMAT_SYSCTL = "sysctl"
FORMAT_YAML = "yaml"
CONFIG_FORMATS = (FORMAT_SYSCTL, FORMAT_YAML)


@dataclass
class LoadedConfig:
    data: NamespaceValue
    source_map: Dict[str, Dict[str, int]] = field(default_factory=dict)
    file_path: Optional[Path] = None


def detect_format(path: Path) -> str:
    if path.suffix.lower() in YAML_SUFFIXES:
        return FORMAT_YAML
    return FORMAT_SYSCTL


def parse_config_text(content: str, config_format: str = FORMAT_SYSCTL) -> LoadedConfig:
    """Parse configuration text in the given format."""
    if config_format == FORMAT_YAML:
        data, source_map = yaml_parser.parse(content)
    elif config_format == FORMAT_SYSCTL:
        data, source_map = sysctl_parser.parse(content)
    else:
        raise ValueError(f"Unknown config format '{config_format}'. Valid formats: {CONFIG_FORMATS}")
    return LoadedConfig(data=data, source_map=source_map)


def load_config_file(file_path: Union[str, Path], config_format: Optional[str] = None) -> LoadedConfig:
    """Load a configuration file.

    Args:
        file_path: Path to the configuration file
        config_format: 'sysctl' or 'yaml'; detected from the suffix if None

    Raises:
        ConfigFileError: If the file does not exist or cannot be read
        ConfigSyntaxError: If the content cannot be parsed
    """
    path = Path(file_path)

    if not path.exists():
        raise ConfigFileError(f"Configuration file not found: {path}")

    if not path.is_file():
        raise ConfigFileError(f"Path is not a file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFileError(f"Failed to read configuration file {path}: {exc}") from exc

    config_format = config_format or detect_format(path)
    logger.debug(f"Loading {config_format} configuration file: {path}")
    loaded = parse_config_text(content, config_format)
    loaded.file_path = path
    return loaded

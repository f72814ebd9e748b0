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

"""Runtime settings for the sysctl schema checker."""

import logging
import os
from dataclasses import dataclass

from .utils.logging_utils import install_checker_logging, level_from_name

ENV_PREFIX = "SYSCTL_SCHEMA_"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CheckerConfig:
    """Configuration class for a checker run."""
    log_level: str = "INFO"
    print_level: str = "WARNING"
    strict: bool = False

    @classmethod
    def from_env(cls) -> 'CheckerConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv(f'{ENV_PREFIX}LOG_LEVEL', 'INFO'),
            print_level=os.getenv(f'{ENV_PREFIX}PRINT_LEVEL', 'WARNING'),
            strict=_env_flag(f'{ENV_PREFIX}STRICT', 'false'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        install_checker_logging(
            level=level_from_name(self.log_level, logging.INFO),
            stderr_level=level_from_name(self.print_level, logging.WARNING),
        )

        return logging.getLogger('sysctl_schema')

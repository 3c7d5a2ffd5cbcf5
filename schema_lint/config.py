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

"""Configuration management for the schema linter."""

import os
import logging
from dataclasses import dataclass
from typing import List, Optional

from .utils.logging_utils import configure_split_stream_logging, parse_level


def _split_names(raw: Optional[str]) -> Optional[List[str]]:
    if raw is None:
        return None
    names = [name.strip() for name in raw.split(",") if name.strip()]
    return names or None


@dataclass
class LinterConfig:
    """Configuration class for lint runs."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = True

    # None runs every built-in rule
    rule_names: Optional[List[str]] = None

    @classmethod
    def from_env(cls) -> 'LinterConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('SCHEMA_LINT_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('SCHEMA_LINT_PRINT_LEVEL', 'ERROR'),
            cache_enabled=os.getenv('SCHEMA_LINT_CACHE_ENABLED', 'true').lower() == 'true',
            rule_names=_split_names(os.getenv('SCHEMA_LINT_RULES')),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = parse_level(self.log_level, logging.INFO)
        stderr_level = parse_level(self.print_level, logging.ERROR)

        return configure_split_stream_logging(level=level, stderr_level=stderr_level)


# Global configuration instance
lint_config = LinterConfig.from_env()

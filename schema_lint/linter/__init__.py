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

"""Linter package for API description documents."""

import logging
from pathlib import Path
from typing import List, Optional

from ..validation.registry import RuleSet
from .report import LintResult
from .schema_linter import SchemaLinter

__all__ = ['lint_files', 'LintResult', 'SchemaLinter']

logger = logging.getLogger(__name__)


def lint_files(file_paths: List[Path], rule_set: Optional[RuleSet] = None) -> List[LintResult]:
    """Lint a list of description documents.

    Args:
        file_paths: List of file paths to lint
        rule_set: Rules to run (default: all built-in rules)

    Returns:
        List of LintResult objects, one per file
    """
    results = []

    schema_linter = SchemaLinter(rule_set)

    for file_path in file_paths:
        result = LintResult(file_path)

        try:
            schema_linter.lint(file_path, result)
        except Exception as e:
            # One broken document must not stop the rest of the run
            logger.debug(f"Unexpected error while linting {file_path}", exc_info=True)
            result.add_error(f"Unexpected error during linting: {str(e)}")

        results.append(result)

    return results

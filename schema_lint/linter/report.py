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

"""Error reporting for the linter."""

from pathlib import Path
from typing import List, Dict, Any, Optional


class LintResult:
    """Container for linting results for a single file."""
    
    def __init__(self, file_path: Path):
        """Initialize lint result.
        
        Args:
            file_path: Path to the file being linted
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @staticmethod
    def _entry(
        message: str,
        rule: Optional[str],
        pointer: Optional[str],
        line: Optional[int],
        column: Optional[int],
    ) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if rule is not None:
            entry['rule'] = rule
        if pointer is not None:
            entry['pointer'] = pointer
        if line is not None:
            entry['line'] = line
        if column is not None:
            entry['column'] = column
        return entry
    
    def add_error(
        self,
        message: str,
        rule: Optional[str] = None,
        pointer: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        """Add an error message.
        
        Args:
            message: Error message
            rule: Name of the rule that produced the finding
            pointer: Document pointer of the offending element
            line: Optional line number where error occurred
        """
        self.errors.append(self._entry(message, rule, pointer, line, column))
    
    def add_warning(
        self,
        message: str,
        rule: Optional[str] = None,
        pointer: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        """Add a warning message."""
        self.warnings.append(self._entry(message, rule, pointer, line, column))

    @property
    def ok(self) -> bool:
        return not self.errors

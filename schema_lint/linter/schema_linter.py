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

"""Schema linter for API description documents.

Loads a document, checks its envelope against the bundled JSON Schema,
builds the component schema graphs and walks each of them with the rule
set, reporting every finding with its document location.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..exceptions import DocumentLoadError, InvalidGraphError
from ..file_io.source_location import (
    SourceLocation,
    SourceMap,
    format_source,
    lookup_source,
    pointer_to_yaml_path,
)
from ..models.json_schema_loader import validate_envelope
from ..parsers.document_loader import DocumentLoader
from ..parsers.yaml_parser import YamlParser, yaml_parser
from ..validation.registry import RuleSet
from ..validation.walker import SchemaWalker
from .report import LintResult

logger = logging.getLogger(__name__)

DOCUMENT_STRUCTURE_RULE = "DocumentStructure"
INVALID_GRAPH_RULE = "InvalidGraph"


class SchemaLinter:
    """Linter for default/example/enum type compatibility and discriminator wiring."""

    def __init__(self, rule_set: Optional[RuleSet] = None, parser: Optional[YamlParser] = None):
        self.rule_set = rule_set if rule_set is not None else RuleSet.default()
        self.parser = parser or yaml_parser

    def _add(
        self,
        result: LintResult,
        message: str,
        rule: str,
        pointer: str,
        source_map: Optional[SourceMap],
    ) -> None:
        loc = lookup_source(source_map, pointer_to_yaml_path(pointer))
        src = SourceLocation(file_path=result.file_path, yaml_path=loc.yaml_path, line=loc.line, column=loc.column)
        result.add_error(
            f"{message}{format_source(src)}",
            rule=rule,
            pointer=pointer,
            line=loc.line,
            column=loc.column,
        )

    def lint(self, file_path: Path, result: LintResult):
        """Lint the description document at ``file_path``.

        Args:
            file_path: Path to the file to lint
            result: LintResult to add errors/warnings to
        """
        try:
            document, source_map = self.parser.load_document(file_path)
        except DocumentLoadError as e:
            result.add_error(f"Failed to load document: {str(e)}", rule=DOCUMENT_STRUCTURE_RULE)
            return

        self.lint_document(document, source_map, result)

    def lint_document(self, document: Dict[str, Any], source_map: Optional[SourceMap], result: LintResult):
        """Lint an already parsed document."""
        issues = validate_envelope(document)
        if issues:
            for issue in issues:
                self._add(result, issue.message, DOCUMENT_STRUCTURE_RULE, issue.pointer, source_map)
            return

        try:
            loaded = DocumentLoader(document).load()
        except DocumentLoadError as e:
            result.add_error(str(e), rule=DOCUMENT_STRUCTURE_RULE)
            return

        if not loaded.schemas:
            result.add_warning(
                f"No component schemas found under '{'/'.join(loaded.version.schemas_path)}'",
                rule=DOCUMENT_STRUCTURE_RULE,
            )
            return

        for name, pointer, node in loaded.items():
            if name in loaded.aliases:
                # The alias has no literals of its own; they are reported on the target
                logger.debug(f"Schema '{name}' aliases '{loaded.aliases[name]}'; not walked")
                continue
            walker = SchemaWalker(self.rule_set, base_pointer=pointer, stop_at_references=True)
            try:
                errors = walker.walk(node)
            except InvalidGraphError as e:
                self._add(result, str(e), INVALID_GRAPH_RULE, e.pointer or pointer, source_map)
                continue

            logger.debug(f"Schema '{name}': {len(errors)} finding(s)")
            for error in errors:
                self._add(result, error.message, error.rule_name, error.pointer, source_map)

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

"""YAML/JSON document parser with caching and source locations."""

import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Union, Optional, Tuple

from ..config import lint_config
from ..exceptions import DocumentLoadError
from ..file_io.source_location import SourceMap
from ..validation.errors import escape_segment

logger = logging.getLogger(__name__)


class YamlParser:
    """Document parser with caching.

    JSON is a subset of YAML, so ``.json`` descriptions load through the
    same path and get the same source map.
    """

    def __init__(self, cache_enabled: bool = None):
        """Initialize document parser.

        Args:
            cache_enabled: Whether to enable caching. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else lint_config.cache_enabled
        self._cache: Dict[Path, Dict[str, Any]] = {}
        self._source_cache: Dict[Path, SourceMap] = {}

    @staticmethod
    def build_source_map(content: str) -> SourceMap:
        """Build a mapping from JSON-pointer-like paths to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so we can track locations without
        changing the parsed data shapes returned by safe_load.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # Parsing errors are reported by safe_load
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{escape_segment(str(key))}")
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        _walk(root, "")
        return source_map

    @staticmethod
    def _parse(content: str, origin: str) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Failed to parse {origin}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DocumentLoadError(f"Document root of {origin} must be a mapping/object")
        return data

    def load_document(self, file_path: Union[str, Path]) -> Tuple[Dict[str, Any], SourceMap]:
        """Load a description file and return (data, source_map).

        source_map keys are JSON-pointer-like paths (e.g. "/components/schemas/Pet/default").
        Values contain 1-based line/column.

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Document not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading document from cache: {path}")
            return self._cache[path], self._source_cache[path]

        logger.debug(f"Loading document: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc

        data = self._parse(content, f"document {path}")
        source_map = self.build_source_map(content)

        if self.cache_enabled:
            self._cache[path] = data
            self._source_cache[path] = source_map

        return data, source_map

    def load_document_from_string(self, content: str) -> Tuple[Dict[str, Any], SourceMap]:
        """Load a description from string content and return (data, source_map)."""
        data = self._parse(content, "document content")
        return data, self.build_source_map(content)

    def clear_cache(self):
        """Clear the document cache."""
        self._cache.clear()
        self._source_cache.clear()
        logger.debug("Document cache cleared")


# Global parser instance
yaml_parser = YamlParser()

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

"""Bundled JSON Schema for the description-document envelope.

The envelope check catches shapes the graph builder cannot work with
(``required`` that is not a list, ``properties`` that is not a mapping, an
unknown ``type``) and reports them with document pointers before any
schema node is built.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from ..validation.errors import join_pointer

ENVELOPE_SCHEMA_NAME = "document"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


@dataclass(frozen=True)
class EnvelopeIssue:
    message: str
    pointer: str = "#"


def get_schema_path(name: str) -> Path:
    """Get the path to a bundled JSON Schema file."""
    schema_dir = Path(__file__).parent.parent / "schema"
    return schema_dir / f"{name}.json"


def load_schema(name: str = ENVELOPE_SCHEMA_NAME) -> dict:
    """Load a bundled JSON Schema file.

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    if name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[name]

    schema_path = get_schema_path(name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in schema file {schema_path}: {e.msg}",
            e.doc,
            e.pos,
        ) from e

    _SCHEMA_CACHE[name] = schema
    return schema


def validate_envelope(document: Any, schema: Optional[dict] = None) -> List[EnvelopeIssue]:
    """Validate ``document`` against the envelope schema.

    Returns one issue per violation, ordered by document location.
    """
    schema = schema if schema is not None else load_schema()
    validator_cls = jsonschema.validators.validator_for(schema)
    validator = validator_cls(schema)

    issues: List[EnvelopeIssue] = []
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path])
    for error in errors:
        pointer = join_pointer("#", *(str(p) for p in error.absolute_path))
        issues.append(EnvelopeIssue(message=error.message, pointer=pointer))
    return issues


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()

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

"""Build resolved schema graphs from a parsed description document.

Every named component schema becomes one shared ``SchemaNode`` whose
``reference_id`` is the component name. Local ``$ref``s to components are
replaced by that shared node, so recursive components produce cyclic graphs.
Nodes are allocated for all components before any of them is filled in,
which is what lets a component refer to itself or to a later component.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from ..exceptions import DocumentLoadError
from ..models.schema_node import Discriminator, SchemaNode
from ..models.values import ArrayValue, ObjectValue, Value, from_literal
from ..utils.spec_version import SpecVersion, detect_spec_version
from ..validation.errors import escape_segment, join_pointer

logger = logging.getLogger(__name__)

_MAX_LITERAL_DEPTH = 64


@dataclass
class LoadedDocument:
    """Component schemas of one document, in declaration order."""
    version: SpecVersion
    schemas: Dict[str, SchemaNode] = field(default_factory=dict)
    pointers: Dict[str, str] = field(default_factory=dict)
    # alias component name -> name of the component that defines its shape
    aliases: Dict[str, str] = field(default_factory=dict)

    def items(self):
        for name, node in self.schemas.items():
            yield name, self.pointers[name], node


class DocumentLoader:
    """Turns a parsed document (plain dicts/lists) into SchemaNode graphs."""

    def __init__(self, document: Mapping[str, Any]):
        self.document = document
        self.version = detect_spec_version(document)
        self._ref_prefix = "#/" + "/".join(self.version.schemas_path) + "/"
        self._raw_components = self._component_mapping()
        self._components: Dict[str, SchemaNode] = {}

    def _component_mapping(self) -> Mapping[str, Any]:
        container: Any = self.document
        for key in self.version.schemas_path:
            if not isinstance(container, Mapping):
                return {}
            container = container.get(key) or {}
        if not isinstance(container, Mapping):
            raise DocumentLoadError(
                f"'{'/'.join(self.version.schemas_path)}' must be a mapping of schemas"
            )
        return container

    def load(self) -> LoadedDocument:
        loaded = LoadedDocument(version=self.version)

        for name in self._raw_components:
            self._components[str(name)] = SchemaNode(reference_id=str(name))

        for name, raw in self._raw_components.items():
            name = str(name)
            pointer = self._ref_prefix + escape_segment(name)
            node = self._components[name]
            # "Alias: {$ref: Other}" keeps its own identity but takes the target's shape
            target, shape = self._alias_target(name, raw, pointer)
            self._fill(node, shape, pointer)
            if target != name:
                loaded.aliases[name] = target
            loaded.schemas[name] = node
            loaded.pointers[name] = pointer

        logger.debug(f"Loaded {len(loaded.schemas)} component schema(s) from {self.version}")
        return loaded

    # -------------------------
    # References
    # -------------------------

    def _resolve_ref(self, ref: Any, pointer: str) -> SchemaNode:
        if not isinstance(ref, str):
            raise DocumentLoadError(f"$ref must be a string at {pointer}")
        if not ref.startswith(self._ref_prefix):
            raise DocumentLoadError(
                f"Unsupported reference '{ref}' at {pointer}: only local "
                f"'{self._ref_prefix}<name>' references are resolved"
            )
        name = ref[len(self._ref_prefix):].replace("~1", "/").replace("~0", "~")
        if name not in self._components:
            raise DocumentLoadError(f"Unresolved reference '{ref}' at {pointer}")
        return self._components[name]

    def _alias_target(self, name: str, raw: Any, pointer: str) -> Tuple[str, Any]:
        """Follow a chain of component-to-component aliases.

        Returns the name of the defining component and its raw schema.
        """
        chain = [name]
        while isinstance(raw, Mapping) and "$ref" in raw:
            target = self._resolve_ref(raw["$ref"], pointer).reference_id
            if target in chain:
                raise DocumentLoadError(
                    f"Circular alias chain at {pointer}: {' -> '.join(chain + [target])}"
                )
            chain.append(target)
            raw = self._raw_components[target]
        return chain[-1], raw

    # -------------------------
    # Schema construction
    # -------------------------

    def _schema(self, raw: Any, pointer: str) -> SchemaNode:
        if not isinstance(raw, Mapping):
            raise DocumentLoadError(f"Schema at {pointer} must be a mapping, got {type(raw).__name__}")
        if "$ref" in raw:
            return self._resolve_ref(raw["$ref"], pointer)
        node = SchemaNode()
        self._fill(node, raw, pointer)
        return node

    def _fill(self, node: SchemaNode, raw: Any, pointer: str) -> None:
        if not isinstance(raw, Mapping):
            raise DocumentLoadError(f"Schema at {pointer} must be a mapping, got {type(raw).__name__}")

        node.type = raw.get("type")
        node.format = raw.get("format")
        node.nullable = bool(raw.get("nullable") or raw.get("x-nullable"))
        node.required = frozenset(str(n) for n in raw.get("required") or ())

        for name, prop in (raw.get("properties") or {}).items():
            node.properties[str(name)] = self._schema(prop, join_pointer(pointer, "properties", str(name)))

        if raw.get("items") is not None:
            node.items = self._schema(raw["items"], join_pointer(pointer, "items"))

        # A boolean additionalProperties places no schema on extra keys
        additional = raw.get("additionalProperties")
        if isinstance(additional, Mapping):
            node.additional_properties = self._schema(additional, join_pointer(pointer, "additionalProperties"))

        for keyword, target in (("oneOf", node.one_of), ("anyOf", node.any_of), ("allOf", node.all_of)):
            for idx, member in enumerate(raw.get(keyword) or ()):
                target.append(self._schema(member, join_pointer(pointer, keyword, str(idx))))

        node.discriminator = self._discriminator(raw.get("discriminator"), pointer)

        if "default" in raw:
            node.default = self._literal(raw["default"], raw)
        if "example" in raw:
            node.example = self._literal(raw["example"], raw)
        node.enum = [self._literal(member, raw) for member in raw.get("enum") or ()]

    @staticmethod
    def _discriminator(raw: Any, pointer: str) -> Optional[Discriminator]:
        if raw is None:
            return None
        if isinstance(raw, str):
            return Discriminator(raw)
        if isinstance(raw, Mapping) and isinstance(raw.get("propertyName"), str):
            mapping = tuple((str(k), str(v)) for k, v in (raw.get("mapping") or {}).items())
            return Discriminator(raw["propertyName"], mapping)
        raise DocumentLoadError(f"Invalid discriminator at {join_pointer(pointer, 'discriminator')}")

    # -------------------------
    # Literals
    # -------------------------

    def _literal_hints(self, raw_schema: Any) -> Tuple[Optional[str], Optional[str], Any]:
        """Return (type, format, raw schema) after following a component $ref."""
        seen = set()
        while isinstance(raw_schema, Mapping) and "$ref" in raw_schema:
            ref = raw_schema["$ref"]
            if not isinstance(ref, str) or not ref.startswith(self._ref_prefix) or ref in seen:
                return None, None, None
            seen.add(ref)
            name = ref[len(self._ref_prefix):].replace("~1", "/").replace("~0", "~")
            raw_schema = self._raw_components.get(name)
        if not isinstance(raw_schema, Mapping):
            return None, None, None
        return raw_schema.get("type"), raw_schema.get("format"), raw_schema

    def _literal(self, raw: Any, raw_schema: Any, depth: int = 0) -> Value:
        """Convert ``raw`` using the type/format hints of its governing schema.

        Nested members follow ``properties``/``additionalProperties``/``items``
        so a nested ``int64`` property converts its literal to a long.
        """
        # YAML anchors can build self-containing lists and mappings
        if depth > _MAX_LITERAL_DEPTH:
            raise DocumentLoadError(f"Literal nested deeper than {_MAX_LITERAL_DEPTH} levels")
        type_hint, format_hint, raw_schema = self._literal_hints(raw_schema)

        if isinstance(raw, list):
            item_schema = raw_schema.get("items") if isinstance(raw_schema, Mapping) else None
            return ArrayValue(tuple(self._literal(item, item_schema, depth + 1) for item in raw))

        if isinstance(raw, dict):
            members: Dict[str, Value] = {}
            props: Mapping[str, Any] = {}
            additional = None
            if isinstance(raw_schema, Mapping):
                props = raw_schema.get("properties") or {}
                additional = raw_schema.get("additionalProperties")
            for key, member in raw.items():
                key = str(key)
                member_schema = props.get(key) if key in props else additional
                members[key] = self._literal(member, member_schema, depth + 1)
            return ObjectValue(members)

        try:
            return from_literal(raw, type_hint, format_hint)
        except TypeError as exc:
            raise DocumentLoadError(str(exc)) from exc


def load_document(document: Mapping[str, Any]) -> LoadedDocument:
    """Build the component schema graphs of a parsed document."""
    return DocumentLoader(document).load()

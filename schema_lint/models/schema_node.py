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

"""In-memory schema graph consumed by the walker.

Nodes may be shared between several parents and may reference themselves
(directly or through other nodes); the graph is resolved before it gets here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple, Union

from .values import Value

SCHEMA_TYPES = ("string", "number", "integer", "boolean", "object", "array")


class CompositionKind(Enum):
    """Composition keywords, in the order the walker visits them."""

    ONE_OF = "oneOf"
    ANY_OF = "anyOf"
    ALL_OF = "allOf"

    @property
    def keyword(self) -> str:
        return self.value

    @property
    def attribute(self) -> str:
        return _COMPOSITION_ATTRIBUTES[self]


_COMPOSITION_ATTRIBUTES = {
    CompositionKind.ONE_OF: "one_of",
    CompositionKind.ANY_OF: "any_of",
    CompositionKind.ALL_OF: "all_of",
}


@dataclass(frozen=True)
class Discriminator:
    """Discriminator of a composed schema.

    Only ``property_name`` is checked. ``mapping`` (value -> schema reference)
    is carried for hosts and reports and is not validated.
    """
    property_name: str
    mapping: Tuple[Tuple[str, str], ...] = ()


@dataclass(eq=False)
class SchemaNode:
    """One schema in the graph.

    Equality is identity: two structurally equal schemas are still distinct
    nodes, and cyclic graphs must not be compared field by field.
    """

    type: Optional[str] = None
    format: Optional[str] = None
    properties: Dict[str, "SchemaNode"] = field(default_factory=dict)
    items: Optional["SchemaNode"] = None
    additional_properties: Optional["SchemaNode"] = None
    one_of: List["SchemaNode"] = field(default_factory=list)
    any_of: List["SchemaNode"] = field(default_factory=list)
    all_of: List["SchemaNode"] = field(default_factory=list)
    discriminator: Optional[Union[Discriminator, str]] = None
    default: Optional[Value] = None
    example: Optional[Value] = None
    enum: List[Value] = field(default_factory=list)
    required: FrozenSet[str] = frozenset()
    reference_id: Optional[str] = None
    nullable: bool = False

    def __post_init__(self):
        # Swagger 2.0 writes the discriminator as a bare property name
        if isinstance(self.discriminator, str):
            self.discriminator = Discriminator(self.discriminator)
        if not isinstance(self.required, frozenset):
            self.required = frozenset(self.required)

    @property
    def discriminator_property(self) -> Optional[str]:
        if self.discriminator is None:
            return None
        return self.discriminator.property_name

    def composition(self, kind: CompositionKind) -> List["SchemaNode"]:
        return getattr(self, kind.attribute)

    def compositions(self) -> Iterator[Tuple[CompositionKind, List["SchemaNode"]]]:
        for kind in CompositionKind:
            yield kind, self.composition(kind)

    def literals(self) -> Iterator[Tuple[Tuple[str, ...], Value]]:
        """Yield (pointer segments, value) for default, example and enum members."""
        if self.default is not None:
            yield ("default",), self.default
        if self.example is not None:
            yield ("example",), self.example
        for idx, member in enumerate(self.enum):
            yield ("enum", str(idx)), member

    def describe(self) -> str:
        if self.reference_id:
            return self.reference_id
        return f"<inline {self.type or 'schema'}>"

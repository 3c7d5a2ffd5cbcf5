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

"""Depth-first walker that runs a rule set over a schema graph.

At every node the walker runs, in order:

1. SCHEMA rules, with the pointer on the node itself.
2. LITERAL rules for ``default``, ``example`` and each ``enum`` member, with
   the pointer on ``/default``, ``/example`` or ``/enum/<i>``.
3. The children: ``properties`` (definition order), ``items``,
   ``additionalProperties``, then ``oneOf``, ``anyOf``, ``allOf`` members.
   Composition members share the un-indexed ``/oneOf`` (etc.) pointer.

A node whose identity is already on the current path is skipped, which is
how self- and mutually-referential schemas terminate.
"""

import logging
from contextlib import contextmanager
from typing import Hashable, Iterator, List, Optional, Set

from ..exceptions import InvalidGraphError
from ..models.schema_node import SchemaNode
from ..models.values import is_value
from .errors import ErrorCollector, ErrorKind, JsonPointer, ROOT_POINTER, ValidationError, join_pointer
from .registry import RuleSet, VisitKind

logger = logging.getLogger(__name__)


class ValidationContext:
    """Per-walk state handed to every rule: the pointer stack and the collector."""

    def __init__(self, collector: ErrorCollector, base_pointer: JsonPointer = ROOT_POINTER):
        self.collector = collector
        self._stack: List[JsonPointer] = [base_pointer]

    @property
    def pointer(self) -> JsonPointer:
        return self._stack[-1]

    @contextmanager
    def enter(self, *segments: str) -> Iterator[JsonPointer]:
        self._stack.append(join_pointer(self.pointer, *segments))
        try:
            yield self.pointer
        finally:
            self._stack.pop()

    def report(
        self,
        rule_name: str,
        message: str,
        pointer: Optional[JsonPointer] = None,
        kind: ErrorKind = ErrorKind.CUSTOM,
    ) -> ValidationError:
        error = ValidationError(rule_name=rule_name, pointer=pointer or self.pointer, message=message, kind=kind)
        self.collector.add(error)
        return error

    def extend(self, errors) -> None:
        self.collector.extend(errors)


def _path_key(node: SchemaNode) -> Hashable:
    if node.reference_id:
        return ("ref", node.reference_id)
    return ("node", id(node))


class SchemaWalker:
    """Walks a schema graph and collects the findings of a rule set.

    The walker holds no per-walk state between calls, so one instance can
    walk many graphs (sequentially or from several threads).

    With ``stop_at_references`` the walker does not descend into nodes below
    the root that carry a ``reference_id``; a host that walks every named
    component on its own uses it to report each finding once.
    """

    def __init__(
        self,
        rule_set: Optional[RuleSet] = None,
        base_pointer: JsonPointer = ROOT_POINTER,
        stop_at_references: bool = False,
    ):
        self.rule_set = rule_set if rule_set is not None else RuleSet.default()
        self.base_pointer = base_pointer
        self.stop_at_references = stop_at_references

    def walk(self, root: SchemaNode) -> ErrorCollector:
        collector = ErrorCollector()
        context = ValidationContext(collector, self.base_pointer)
        on_path: Set[Hashable] = set()

        logger.debug(f"Walking schema graph at {self.base_pointer} with rules {self.rule_set.names()}")
        self._visit(root, context, on_path)
        logger.debug(f"Walk at {self.base_pointer} finished with {len(collector)} error(s)")
        return collector

    def _visit(self, node: SchemaNode, context: ValidationContext, on_path: Set[Hashable]) -> None:
        if not isinstance(node, SchemaNode):
            raise InvalidGraphError(
                f"Expected a schema node, got {type(node).__name__}", pointer=context.pointer
            )

        key = _path_key(node)
        if key in on_path:
            logger.debug(f"Cycle through '{node.describe()}' at {context.pointer}; not descending")
            return

        if self.stop_at_references and on_path and node.reference_id:
            return

        self._check_node_shape(node, context)

        on_path.add(key)
        try:
            for schema_rule in self.rule_set.rules_for(VisitKind.SCHEMA):
                schema_rule.check(context, node)

            literal_rules = self.rule_set.rules_for(VisitKind.LITERAL)
            if literal_rules:
                for segments, value in node.literals():
                    with context.enter(*segments):
                        for literal_rule in literal_rules:
                            literal_rule.check(context, node, value)

            for name, child in node.properties.items():
                with context.enter("properties", name):
                    self._visit(child, context, on_path)

            if node.items is not None:
                with context.enter("items"):
                    self._visit(node.items, context, on_path)

            if node.additional_properties is not None:
                with context.enter("additionalProperties"):
                    self._visit(node.additional_properties, context, on_path)

            for kind, members in node.compositions():
                if not members:
                    continue
                with context.enter(kind.keyword):
                    for member in members:
                        self._visit(member, context, on_path)
        finally:
            on_path.discard(key)

    @staticmethod
    def _check_node_shape(node: SchemaNode, context: ValidationContext) -> None:
        """Reject graphs the rules cannot inspect before any rule runs on ``node``."""
        for name, child in node.properties.items():
            if not isinstance(child, SchemaNode):
                raise InvalidGraphError(
                    f"Property '{name}' has no schema",
                    pointer=join_pointer(context.pointer, "properties", name),
                )
        for attr, keyword in (("items", "items"), ("additional_properties", "additionalProperties")):
            child = getattr(node, attr)
            if child is not None and not isinstance(child, SchemaNode):
                raise InvalidGraphError(
                    f"'{keyword}' must be a schema node, got {type(child).__name__}",
                    pointer=join_pointer(context.pointer, keyword),
                )
        for kind, members in node.compositions():
            for idx, member in enumerate(members):
                if not isinstance(member, SchemaNode):
                    raise InvalidGraphError(
                        f"{kind.keyword} member #{idx} has no schema",
                        pointer=join_pointer(context.pointer, kind.keyword),
                    )
        for segments, value in node.literals():
            if not is_value(value):
                raise InvalidGraphError(
                    f"Literal is not a value: {value!r}",
                    pointer=join_pointer(context.pointer, *segments),
                )


def walk(
    root: SchemaNode,
    rule_set: Optional[RuleSet] = None,
    base_pointer: JsonPointer = ROOT_POINTER,
    stop_at_references: bool = False,
) -> ErrorCollector:
    """Validate ``root`` with ``rule_set`` (default: all built-in rules)."""
    walker = SchemaWalker(rule_set, base_pointer=base_pointer, stop_at_references=stop_at_references)
    return walker.walk(root)

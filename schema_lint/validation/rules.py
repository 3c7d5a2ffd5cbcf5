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

"""Built-in rules, registered in the order they run by default."""

from ..models.schema_node import CompositionKind, SchemaNode
from ..models.values import Value
from . import discriminator, type_matcher
from .registry import VisitKind, rule


@rule(type_matcher.TYPE_MISMATCH_RULE, VisitKind.LITERAL)
def validate_data_type_mismatch(context, schema: SchemaNode, value: Value) -> None:
    """Default, example and enum members must fit the enclosing schema."""
    context.extend(type_matcher.check(schema, value, context.pointer))


@rule(discriminator.ONE_OF_DISCRIMINATOR_RULE, VisitKind.SCHEMA)
def validate_one_of_discriminator(context, schema: SchemaNode) -> None:
    context.extend(discriminator.check_composition(schema, CompositionKind.ONE_OF, context.pointer))


@rule(discriminator.ANY_OF_DISCRIMINATOR_RULE, VisitKind.SCHEMA)
def validate_any_of_discriminator(context, schema: SchemaNode) -> None:
    context.extend(discriminator.check_composition(schema, CompositionKind.ANY_OF, context.pointer))

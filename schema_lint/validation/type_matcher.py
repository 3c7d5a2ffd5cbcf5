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

"""Type compatibility between a literal value and its governing schema.

Matching rules, applied at each level:

1. A schema without ``type`` accepts anything.
2. A ``nullable`` schema accepts null.
3. An ``object`` schema accepts a plain string (an encoded object) as-is.
4. The value's base type must equal the schema type; a mismatch is terminal.
5. Scalars must also carry exactly the schema's format (absent == absent).
6. Arrays recurse into ``items``; objects recurse into ``properties`` then
   ``additionalProperties``. Siblings are checked independently and each
   failure is reported at its own pointer only.
"""

from typing import List

from ..models.schema_node import SchemaNode
from ..models.values import ArrayValue, ObjectValue, ScalarKind, ScalarValue, Value, base_type, format_tag
from .errors import ErrorKind, JsonPointer, ROOT_POINTER, ValidationError, join_pointer

TYPE_MISMATCH_RULE = "TypeMismatch"

DATA_TYPE_MISMATCH_MESSAGE = "Data and type mismatch found."


def _mismatch(pointer: JsonPointer) -> ValidationError:
    return ValidationError(
        rule_name=TYPE_MISMATCH_RULE,
        pointer=pointer,
        message=DATA_TYPE_MISMATCH_MESSAGE,
        kind=ErrorKind.TYPE_MISMATCH,
    )


def check(schema: SchemaNode, value: Value, pointer: JsonPointer = ROOT_POINTER) -> List[ValidationError]:
    """Return the type mismatches between ``value`` and ``schema``.

    A mismatch at this level yields exactly one error at ``pointer`` and
    nothing below it. Otherwise each failing nested member is reported at
    its own pointer.
    """
    if schema.type is None:
        return []

    if schema.nullable and isinstance(value, ScalarValue) and value.kind is ScalarKind.NULL:
        return []

    if schema.type == "object" and isinstance(value, ScalarValue) and value.kind is ScalarKind.STRING:
        return []

    if base_type(value) != schema.type:
        return [_mismatch(pointer)]

    if isinstance(value, ScalarValue):
        if format_tag(value) != schema.format:
            return [_mismatch(pointer)]
        return []

    errors: List[ValidationError] = []

    if isinstance(value, ArrayValue):
        if schema.items is not None:
            for idx, item in enumerate(value.items):
                errors.extend(check(schema.items, item, join_pointer(pointer, str(idx))))
        return errors

    if isinstance(value, ObjectValue):
        for key, member in value.members.items():
            if key in schema.properties:
                member_schema = schema.properties[key]
            elif schema.additional_properties is not None:
                member_schema = schema.additional_properties
            else:
                continue
            errors.extend(check(member_schema, member, join_pointer(pointer, key)))
        return errors

    return errors


def matches(schema: SchemaNode, value: Value) -> bool:
    return not check(schema, value)

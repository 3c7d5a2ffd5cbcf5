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

"""Discriminator wiring checks for oneOf/anyOf compositions.

Every member of a discriminated composition must declare the discriminator
property and list it as required. Both checks run for every member, in
member order, property presence first.
"""

from typing import List, Optional

from ..models.schema_node import CompositionKind, SchemaNode
from .errors import ErrorKind, JsonPointer, ROOT_POINTER, ValidationError, join_pointer

ONE_OF_DISCRIMINATOR_RULE = "ValidateOneOfDiscriminator"
ANY_OF_DISCRIMINATOR_RULE = "ValidateAnyOfDiscriminator"

DISCRIMINATOR_PROPERTY_MISSING_MESSAGE = (
    "Composite schema '{schema}' must contain the property specified in the discriminator '{property}'."
)
DISCRIMINATOR_NOT_REQUIRED_MESSAGE = (
    "Composite schema '{schema}''s required field list must contain the property "
    "specified in the discriminator '{property}'."
)

_RULE_NAMES = {
    CompositionKind.ONE_OF: ONE_OF_DISCRIMINATOR_RULE,
    CompositionKind.ANY_OF: ANY_OF_DISCRIMINATOR_RULE,
}


def _member_name(member: SchemaNode, idx: int) -> str:
    if member.reference_id:
        return member.reference_id
    return f"<inline #{idx}>"


def check_composition(
    schema: SchemaNode,
    kind: CompositionKind,
    pointer: JsonPointer = ROOT_POINTER,
    rule_name: Optional[str] = None,
) -> List[ValidationError]:
    """Check each member of ``schema``'s ``kind`` list against its discriminator.

    Returns no errors when the schema has no discriminator or the list is
    empty. allOf is conjunctive and has no alternatives to discriminate, so
    it is rejected.
    """
    if kind not in _RULE_NAMES:
        raise ValueError(f"Discriminator checks apply to oneOf/anyOf only, got {kind.keyword}")

    property_name = schema.discriminator_property
    members = schema.composition(kind)
    if property_name is None or not members:
        return []

    rule_name = rule_name or _RULE_NAMES[kind]
    location = join_pointer(pointer, kind.keyword)
    errors: List[ValidationError] = []

    for idx, member in enumerate(members):
        name = _member_name(member, idx)
        if property_name not in member.properties:
            errors.append(
                ValidationError(
                    rule_name=rule_name,
                    pointer=location,
                    message=DISCRIMINATOR_PROPERTY_MISSING_MESSAGE.format(schema=name, property=property_name),
                    kind=ErrorKind.DISCRIMINATOR_PROPERTY_MISSING,
                )
            )
        if property_name not in member.required:
            errors.append(
                ValidationError(
                    rule_name=rule_name,
                    pointer=location,
                    message=DISCRIMINATOR_NOT_REQUIRED_MESSAGE.format(schema=name, property=property_name),
                    kind=ErrorKind.DISCRIMINATOR_NOT_REQUIRED,
                )
            )

    return errors

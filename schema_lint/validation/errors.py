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

"""Validation findings and the per-walk collector."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

JsonPointer = str

ROOT_POINTER: JsonPointer = "#"


class ErrorKind(Enum):
    TYPE_MISMATCH = "TypeMismatch"
    DISCRIMINATOR_PROPERTY_MISSING = "DiscriminatorPropertyMissing"
    DISCRIMINATOR_NOT_REQUIRED = "DiscriminatorNotRequired"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class ValidationError:
    """A single finding produced by a rule.

    ``pointer`` is ``#``-rooted and ``/``-delimited; segments are property
    names (RFC 6901 escaped) or zero-based indices.
    """
    rule_name: str
    pointer: JsonPointer
    message: str
    kind: ErrorKind = ErrorKind.CUSTOM

    def __str__(self) -> str:
        return f"[{self.rule_name}] {self.pointer}: {self.message}"


def escape_segment(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def join_pointer(base: Optional[JsonPointer], *segments: str) -> JsonPointer:
    pointer = base or ROOT_POINTER
    for segment in segments:
        pointer = f"{pointer}/{escape_segment(str(segment))}"
    return pointer


class ErrorCollector:
    """Append-only, ordered sequence of findings for one walk."""

    def __init__(self):
        self._errors: List[ValidationError] = []

    def add(self, error: ValidationError) -> None:
        if not isinstance(error, ValidationError):
            raise TypeError(f"Expected ValidationError, got {type(error).__name__}")
        self._errors.append(error)

    def extend(self, errors: Iterable[ValidationError]) -> None:
        for error in errors:
            self.add(error)

    @property
    def errors(self) -> Tuple[ValidationError, ...]:
        return tuple(self._errors)

    def by_rule(self, rule_name: str) -> List[ValidationError]:
        return [e for e in self._errors if e.rule_name == rule_name]

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(tuple(self._errors))

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"ErrorCollector({len(self._errors)} error(s))"

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

"""Literal values embedded in a schema (default, example, enum members).

A value is one of three shapes:

* ``ScalarValue`` - a literal whose kind fixes its base type and format tag.
* ``ArrayValue``  - an ordered sequence of values.
* ``ObjectValue`` - an insertion-ordered mapping of string keys to values.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union


class ScalarKind(Enum):
    """Scalar literal kinds, each bound to its (base type, format tag)."""

    INTEGER = ("integer", None)
    LONG = ("integer", "int64")
    FLOAT = ("number", "float")
    DOUBLE = ("number", None)
    STRING = ("string", None)
    PASSWORD = ("string", "password")
    BYTE = ("string", "byte")
    BINARY = ("string", "binary")
    BOOLEAN = ("boolean", None)
    DATE = ("string", "date")
    DATE_TIME = ("string", "date-time")
    # "null" is never a declared schema type, so nulls only satisfy untyped schemas.
    NULL = ("null", None)

    @property
    def base_type(self) -> str:
        return self.value[0]

    @property
    def format(self) -> Optional[str]:
        return self.value[1]


@dataclass(frozen=True)
class ScalarValue:
    kind: ScalarKind
    value: Any = None


@dataclass(frozen=True)
class ArrayValue:
    items: Tuple["Value", ...] = ()


@dataclass(frozen=True)
class ObjectValue:
    members: Dict[str, "Value"] = field(default_factory=dict)


Value = Union[ScalarValue, ArrayValue, ObjectValue]

VALUE_TYPES = (ScalarValue, ArrayValue, ObjectValue)


def is_value(candidate: Any) -> bool:
    return isinstance(candidate, VALUE_TYPES)


def base_type(value: Value) -> str:
    if isinstance(value, ScalarValue):
        return value.kind.base_type
    if isinstance(value, ArrayValue):
        return "array"
    if isinstance(value, ObjectValue):
        return "object"
    raise TypeError(f"Not a literal value: {value!r}")


def format_tag(value: Value) -> Optional[str]:
    if isinstance(value, ScalarValue):
        return value.kind.format
    return None


# -------------------------
# Factories
# -------------------------

def integer(value: int) -> ScalarValue:
    return ScalarValue(ScalarKind.INTEGER, value)


def long(value: int) -> ScalarValue:
    return ScalarValue(ScalarKind.LONG, value)


def float_(value: float) -> ScalarValue:
    return ScalarValue(ScalarKind.FLOAT, value)


def double(value: float) -> ScalarValue:
    return ScalarValue(ScalarKind.DOUBLE, value)


def string(value: str) -> ScalarValue:
    return ScalarValue(ScalarKind.STRING, value)


def password(value: str) -> ScalarValue:
    return ScalarValue(ScalarKind.PASSWORD, value)


def byte(value: str) -> ScalarValue:
    return ScalarValue(ScalarKind.BYTE, value)


def binary(value: str) -> ScalarValue:
    return ScalarValue(ScalarKind.BINARY, value)


def boolean(value: bool) -> ScalarValue:
    return ScalarValue(ScalarKind.BOOLEAN, value)


def date(value: _dt.date) -> ScalarValue:
    return ScalarValue(ScalarKind.DATE, value)


def date_time(value: _dt.datetime) -> ScalarValue:
    return ScalarValue(ScalarKind.DATE_TIME, value)


def null() -> ScalarValue:
    return ScalarValue(ScalarKind.NULL, None)


def array(*items: Value) -> ArrayValue:
    return ArrayValue(tuple(items))


def obj(members: Optional[Mapping[str, Value]] = None, **kwargs: Value) -> ObjectValue:
    merged: Dict[str, Value] = dict(members or {})
    merged.update(kwargs)
    return ObjectValue(merged)


# -------------------------
# Conversion from parsed YAML/JSON literals
# -------------------------

_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1

_STRING_FORMATS = {
    "password": ScalarKind.PASSWORD,
    "byte": ScalarKind.BYTE,
    "binary": ScalarKind.BINARY,
}


def _parse_iso_date(text: str) -> Optional[_dt.date]:
    try:
        return _dt.date.fromisoformat(text)
    except ValueError:
        return None


def _parse_iso_datetime(text: str) -> Optional[_dt.datetime]:
    # fromisoformat() on older interpreters rejects the "Z" suffix
    candidate = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return _dt.datetime.fromisoformat(candidate)
    except ValueError:
        return None


def _scalar_from_literal(raw: Any, type_hint: Optional[str], format_hint: Optional[str]) -> ScalarValue:
    if raw is None:
        return null()

    # bool is a subclass of int; check it first
    if isinstance(raw, bool):
        return boolean(raw)

    if isinstance(raw, int):
        if type_hint in (None, "integer") and format_hint == "int64":
            return long(raw)
        if type_hint == "number" and format_hint == "float":
            return float_(float(raw))
        # JSON has one number syntax; "0" under a plain number schema is a double
        if type_hint == "number" and format_hint is None:
            return double(float(raw))
        if _INT32_MIN <= raw <= _INT32_MAX:
            return integer(raw)
        return long(raw)

    if isinstance(raw, float):
        if format_hint == "float":
            return float_(raw)
        return double(raw)

    # datetime is a subclass of date; check it first
    if isinstance(raw, _dt.datetime):
        return date_time(raw)

    if isinstance(raw, _dt.date):
        if format_hint == "date-time":
            return date_time(_dt.datetime(raw.year, raw.month, raw.day))
        return date(raw)

    if isinstance(raw, str):
        if type_hint in (None, "string"):
            if format_hint in _STRING_FORMATS:
                return ScalarValue(_STRING_FORMATS[format_hint], raw)
            if format_hint == "date":
                parsed_date = _parse_iso_date(raw)
                if parsed_date is not None:
                    return date(parsed_date)
            if format_hint == "date-time":
                parsed = _parse_iso_datetime(raw)
                if parsed is not None:
                    return date_time(parsed)
        return string(raw)

    raise TypeError(f"Unsupported literal type: {type(raw).__name__}")


def from_literal(raw: Any, type_hint: Optional[str] = None, format_hint: Optional[str] = None) -> Value:
    """Convert a parsed YAML/JSON literal into a Value.

    ``type_hint``/``format_hint`` come from the governing schema. When the
    literal can be represented in the declared format (e.g. an int under
    ``int64`` or an ISO string under ``date-time``) the formatted kind is
    produced; otherwise the plain kind inferred from the literal is used.
    Hints only apply to the top-level literal: container members are
    converted without hints.
    """
    if isinstance(raw, (list, tuple)):
        return ArrayValue(tuple(from_literal(item) for item in raw))
    if isinstance(raw, dict):
        return ObjectValue({str(key): from_literal(item) for key, item in raw.items()})
    return _scalar_from_literal(raw, type_hint, format_hint)

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

"""Description-format version detection.

A document declares its format in a top-level field:

  * ``openapi: 3.x.y`` - schemas live under ``components/schemas`` and the
    discriminator is an object with ``propertyName``.
  * ``swagger: "2.0"`` - schemas live under ``definitions`` and the
    discriminator is a bare property name.

Any other major version is rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from ..exceptions import SpecVersionError


_VERSION_RE = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?(?:[-+].*)?$")

OPENAPI = "openapi"
SWAGGER = "swagger"

SUPPORTED_MAJORS = {OPENAPI: 3, SWAGGER: 2}


@dataclass(frozen=True)
class SpecVersion:
    """A parsed description-format version."""

    family: str
    major: int
    minor: int
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.family} {self.major}.{self.minor}.{self.patch}"

    @property
    def schemas_path(self) -> Tuple[str, ...]:
        if self.family == SWAGGER:
            return ("definitions",)
        return ("components", "schemas")


def parse_spec_version(family: str, raw: Any) -> SpecVersion:
    """Parse a version such as ``3.0.3`` or ``2.0``.

    Raises:
        SpecVersionError: If the value is not a recognisable version string.
    """
    # YAML reads an unquoted 2.0 as a float
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        raw = str(raw)
    if not isinstance(raw, str):
        raise SpecVersionError(
            f"'{family}' version must be a string, got {type(raw).__name__}: {raw!r}"
        )

    m = _VERSION_RE.match(raw.strip())
    if m is None:
        raise SpecVersionError(
            f"Invalid '{family}' version string: '{raw}'. Expected 'MAJOR.MINOR[.PATCH]'."
        )
    return SpecVersion(family, int(m.group(1)), int(m.group(2)), int(m.group(3) or 0))


def detect_spec_version(document: Mapping[str, Any]) -> SpecVersion:
    """Return the declared format version of ``document``.

    Raises:
        SpecVersionError: If no version is declared or the major version is unsupported.
    """
    if not isinstance(document, Mapping):
        raise SpecVersionError("Document root must be a mapping/object")

    for family in (OPENAPI, SWAGGER):
        if family in document:
            version = parse_spec_version(family, document[family])
            if version.major != SUPPORTED_MAJORS[family]:
                raise SpecVersionError(
                    f"Unsupported {family} version {version.major}.{version.minor}.{version.patch}: "
                    f"this tool supports major version {SUPPORTED_MAJORS[family]}."
                )
            return version

    raise SpecVersionError("Missing 'openapi' or 'swagger' version field.")

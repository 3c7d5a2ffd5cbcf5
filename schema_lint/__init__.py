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

"""Schema linter for API description documents.

Checks that default, example and enum literals fit their schema's declared
type and format, and that discriminated oneOf/anyOf compositions are wired
consistently.
"""

__version__ = "0.1.0"

from .exceptions import (  # noqa: F401
    SchemaLintError,
    InvalidGraphError,
    DocumentLoadError,
    UnknownRuleError,
    SpecVersionError,
)
from .models import CompositionKind, Discriminator, SchemaNode  # noqa: F401
from .validation import (  # noqa: F401
    ErrorCollector,
    Rule,
    RuleSet,
    SchemaWalker,
    ValidationError,
    VisitKind,
    walk,
)

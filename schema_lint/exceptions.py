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

"""Custom exceptions for the schema linter."""

from typing import Optional


class SchemaLintError(Exception):
    """Base exception for schema-lint related errors."""
    pass


class InvalidGraphError(SchemaLintError):
    """Exception raised when a schema graph violates a structural precondition.

    Type and discriminator findings are never raised; this is reserved for
    graphs the walker cannot traverse (e.g. a property schema that is None).
    """

    def __init__(self, message: str, pointer: Optional[str] = None):
        self.pointer = pointer
        if pointer:
            message = f"{message} (pointer={pointer})"
        super().__init__(message)


class DocumentLoadError(SchemaLintError):
    """Exception raised when a document cannot be read, parsed or resolved."""
    pass


class UnknownRuleError(SchemaLintError):
    """Exception raised when a rule set names an unrecognised rule."""
    pass


class SpecVersionError(DocumentLoadError):
    """Exception raised when a document's openapi/swagger version is unsupported."""
    pass

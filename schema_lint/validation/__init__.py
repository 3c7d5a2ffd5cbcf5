"""Validation engine: type matching, discriminator checks, rules and the walker.

Typical use:

    from schema_lint.validation import walk
    errors = walk(root_schema)
    for error in errors:
        print(error.pointer, error.message)
"""

from .errors import (  # noqa: F401
    ROOT_POINTER,
    ErrorCollector,
    ErrorKind,
    ValidationError,
    join_pointer,
)
from .registry import (  # noqa: F401
    BUILTIN_RULES,
    Rule,
    RuleSet,
    VisitKind,
    rule,
)
from .type_matcher import (  # noqa: F401
    DATA_TYPE_MISMATCH_MESSAGE,
    TYPE_MISMATCH_RULE,
    check,
    matches,
)
from .discriminator import (  # noqa: F401
    ANY_OF_DISCRIMINATOR_RULE,
    ONE_OF_DISCRIMINATOR_RULE,
    DISCRIMINATOR_NOT_REQUIRED_MESSAGE,
    DISCRIMINATOR_PROPERTY_MISSING_MESSAGE,
    check_composition,
)
from .walker import SchemaWalker, ValidationContext, walk  # noqa: F401

# Import to trigger built-in rule registration.
from . import rules  # noqa: F401

"""Value model and schema graph.

The value and graph modules do not depend on the validation or parsing
modules, so the graph stays format- and rule-independent.
"""

from .values import (
    ScalarKind,
    ScalarValue,
    ArrayValue,
    ObjectValue,
    Value,
    base_type,
    format_tag,
    from_literal,
)
from .schema_node import (
    SCHEMA_TYPES,
    CompositionKind,
    Discriminator,
    SchemaNode,
)

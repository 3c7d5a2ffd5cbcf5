"""Shared fixtures and helpers for the test suite.

pytest discovers conftest.py automatically: fixtures defined here are
available to all test files in this directory without explicit imports.
"""

import datetime
import textwrap

import pytest

from schema_lint.models import SchemaNode
from schema_lint.models import values as v
from schema_lint.parsers.yaml_parser import YamlParser


# ---------------------------------------------------------------------------
# Schemas from the reference scenarios
# ---------------------------------------------------------------------------

def discriminated_schema(composition: str = "one_of") -> SchemaNode:
    """object schema composing schema1 (property1, property2) and schema2 (property1).

    The discriminator names property2; neither member lists it as required.
    """
    schema1 = SchemaNode(
        type="object",
        properties={
            "property1": SchemaNode(type="integer", format="int64"),
            "property2": SchemaNode(type="string"),
        },
        reference_id="schema1",
    )
    schema2 = SchemaNode(
        type="object",
        properties={
            "property1": SchemaNode(type="integer", format="int64"),
        },
        reference_id="schema2",
    )
    root = SchemaNode(type="object", discriminator="property2")
    getattr(root, composition).extend([schema1, schema2])
    return root


def complex_default_schema() -> SchemaNode:
    """Object schema whose default disagrees with several nested property schemas."""
    return SchemaNode(
        type="object",
        properties={
            "property1": SchemaNode(
                type="array",
                items=SchemaNode(type="integer", format="int64"),
            ),
            "property2": SchemaNode(
                type="array",
                items=SchemaNode(
                    type="object",
                    additional_properties=SchemaNode(type="boolean"),
                ),
            ),
            "property3": SchemaNode(type="string", format="password"),
            "property4": SchemaNode(type="string"),
        },
        default=v.obj(
            property1=v.array(v.integer(12), v.long(13), v.string("1")),
            property2=v.array(
                v.integer(2),
                v.obj(x=v.boolean(True), y=v.boolean(False), z=v.string("1234")),
            ),
            property3=v.password("123"),
            property4=v.date_time(datetime.datetime(2024, 1, 2, 3, 4, 5)),
        ),
    )


@pytest.fixture
def parser():
    return YamlParser(cache_enabled=False)


@pytest.fixture
def write_document(tmp_path):
    """Write dedented YAML/JSON text to a file and return its path."""
    def _write(content: str, name: str = "api.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path
    return _write

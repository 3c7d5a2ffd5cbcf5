"""Tests for the schema walker: traversal order, pointers, cycles and graph errors."""

import pytest

from conftest import complex_default_schema, discriminated_schema

from schema_lint.exceptions import InvalidGraphError
from schema_lint.models import SchemaNode
from schema_lint.models import values as v
from schema_lint.validation import (
    DATA_TYPE_MISMATCH_MESSAGE,
    ErrorCollector,
    Rule,
    RuleSet,
    SchemaWalker,
    VisitKind,
    walk,
)


def _pointers(errors):
    return [e.pointer for e in errors]


def _trace_rule(trace):
    """A SCHEMA rule recording the pointer of every visited node."""
    return Rule("Trace", VisitKind.SCHEMA, lambda context, schema: trace.append(context.pointer))


# ===========================================================================
# Reference scenarios
# ===========================================================================

class TestScenarios:

    def test_default_mismatch(self):
        schema = SchemaNode(type="string", default=v.integer(55))
        errors = walk(schema)
        assert isinstance(errors, ErrorCollector)
        assert _pointers(errors) == ["#/default"]
        assert [e.message for e in errors] == [DATA_TYPE_MISMATCH_MESSAGE]

    def test_default_before_example(self):
        schema = SchemaNode(type="string", default=v.password("1234"), example=v.long(55))
        assert _pointers(walk(schema)) == ["#/default", "#/example"]

    def test_enum_members(self):
        schema = SchemaNode(
            type="object",
            additional_properties=SchemaNode(type="integer"),
            enum=[
                v.string("1"),
                v.obj(x=v.integer(2), y=v.string("20"), z=v.string("200")),
                v.array(v.integer(3)),
                v.obj(x=v.integer(4), y=v.integer(40)),
            ],
        )
        assert _pointers(walk(schema)) == ["#/enum/1/y", "#/enum/1/z", "#/enum/2"]

    def test_complex_default(self):
        assert _pointers(walk(complex_default_schema())) == [
            "#/default/property1/0",
            "#/default/property1/2",
            "#/default/property2/0",
            "#/default/property2/1/z",
            "#/default/property4",
        ]

    @pytest.mark.parametrize("attribute, keyword, rule_name", [
        ("one_of", "oneOf", "ValidateOneOfDiscriminator"),
        ("any_of", "anyOf", "ValidateAnyOfDiscriminator"),
    ])
    def test_discriminator(self, attribute, keyword, rule_name):
        errors = walk(discriminated_schema(attribute))
        assert [(e.rule_name, e.pointer) for e in errors] == [(rule_name, f"#/{keyword}")] * 3
        assert "schema1" in errors.errors[0].message
        assert "schema2" in errors.errors[1].message
        assert "must contain the property" in errors.errors[1].message
        assert "required field list" in errors.errors[2].message

    def test_valid_schema_has_no_errors(self):
        schema = SchemaNode(
            type="object",
            properties={"id": SchemaNode(type="integer", format="int64", example=v.long(1))},
            default=v.obj(id=v.long(7)),
        )
        assert len(walk(schema)) == 0
        assert not walk(schema)


# ===========================================================================
# Traversal order and pointers
# ===========================================================================

class TestTraversal:

    def test_visit_order(self):
        trace = []
        schema = SchemaNode(
            type="object",
            properties={
                "b": SchemaNode(type="string"),
                "a": SchemaNode(type="array", items=SchemaNode(type="integer")),
            },
            additional_properties=SchemaNode(type="boolean"),
            one_of=[SchemaNode(), SchemaNode()],
            any_of=[SchemaNode()],
            all_of=[SchemaNode()],
        )
        walk(schema, RuleSet([_trace_rule(trace)]))
        assert trace == [
            "#",
            "#/properties/b",
            "#/properties/a",
            "#/properties/a/items",
            "#/additionalProperties",
            "#/oneOf",
            "#/oneOf",
            "#/anyOf",
            "#/allOf",
        ]

    def test_nested_literals_use_node_pointer(self):
        schema = SchemaNode(
            type="object",
            properties={
                "tags": SchemaNode(
                    type="array",
                    items=SchemaNode(type="string", enum=[v.string("a"), v.integer(1)]),
                ),
            },
        )
        assert _pointers(walk(schema)) == ["#/properties/tags/items/enum/1"]

    def test_literals_checked_before_children(self):
        schema = SchemaNode(
            type="string",
            example=v.integer(1),
            all_of=[SchemaNode(type="integer", default=v.string("x"))],
        )
        assert _pointers(walk(schema)) == ["#/example", "#/allOf/default"]

    def test_property_names_are_escaped(self):
        schema = SchemaNode(type="object", properties={"a/b": SchemaNode(type="string", default=v.integer(1))})
        assert _pointers(walk(schema)) == ["#/properties/a~1b/default"]

    def test_base_pointer(self):
        schema = SchemaNode(type="string", default=v.integer(1))
        errors = walk(schema, base_pointer="#/components/schemas/Name")
        assert _pointers(errors) == ["#/components/schemas/Name/default"]

    def test_schema_rules_run_before_literal_rules(self):
        trace = []
        rule_set = RuleSet([
            Rule("Literal", VisitKind.LITERAL, lambda context, schema, value: trace.append(("literal", context.pointer))),
            Rule("Schema", VisitKind.SCHEMA, lambda context, schema: trace.append(("schema", context.pointer))),
        ])
        walk(SchemaNode(default=v.null()), rule_set)
        assert trace == [("schema", "#"), ("literal", "#/default")]

    def test_all_of_members_are_not_discriminator_checked(self):
        schema = SchemaNode(type="object", discriminator="kind", all_of=[SchemaNode(reference_id="Base")])
        assert len(walk(schema)) == 0

    def test_idempotent(self):
        schema = complex_default_schema()
        schema.one_of.extend(discriminated_schema().one_of)
        schema.discriminator = discriminated_schema().discriminator
        walker = SchemaWalker()
        first = walker.walk(schema).errors
        second = walker.walk(schema).errors
        assert first == second
        assert [str(e) for e in first] == [str(e) for e in walk(schema).errors]


# ===========================================================================
# Cycles
# ===========================================================================

class TestCycles:

    def test_self_reference_terminates(self):
        node = SchemaNode(type="object", reference_id="Node", default=v.integer(1))
        node.properties["next"] = node
        node.items = node
        errors = walk(node)
        assert _pointers(errors) == ["#/default"]

    def test_mutual_reference_terminates(self):
        a = SchemaNode(type="object", reference_id="A")
        b = SchemaNode(type="object", reference_id="B", example=v.string("x"))
        c = SchemaNode(type="boolean", reference_id="C", example=v.integer(0))
        a.properties["b"] = b
        b.properties["a"] = a
        b.properties["c"] = c
        assert _pointers(walk(a)) == ["#/properties/b/properties/c/example"]

    def test_cycle_without_reference_ids_terminates(self):
        node = SchemaNode(type="array")
        node.items = node
        trace = []
        walk(node, RuleSet([_trace_rule(trace)]))
        assert trace == ["#"]

    def test_shared_node_on_sibling_branches_is_visited_each_time(self):
        shared = SchemaNode(type="string", reference_id="Shared", default=v.integer(1))
        root = SchemaNode(type="object", properties={"x": shared, "y": shared})
        assert _pointers(walk(root)) == ["#/properties/x/default", "#/properties/y/default"]

    def test_discriminator_members_that_refer_back(self):
        root = discriminated_schema()
        for member in root.one_of:
            member.properties["parent"] = root
        root.reference_id = "Root"
        assert len(walk(root)) == 3

    def test_stop_at_references(self):
        shared = SchemaNode(type="string", reference_id="Shared", default=v.integer(1))
        root = SchemaNode(
            type="object",
            reference_id="Root",
            properties={"x": shared, "y": SchemaNode(type="integer", default=v.string("1"))},
        )
        errors = walk(root, stop_at_references=True)
        assert _pointers(errors) == ["#/properties/y/default"]


# ===========================================================================
# Invalid graphs
# ===========================================================================

class TestInvalidGraph:

    def test_none_property_schema(self):
        schema = SchemaNode(type="object", properties={"broken": None})
        with pytest.raises(InvalidGraphError) as excinfo:
            walk(schema)
        assert excinfo.value.pointer == "#/properties/broken"

    def test_non_schema_root(self):
        with pytest.raises(InvalidGraphError):
            walk({"type": "string"})

    def test_non_schema_composition_member(self):
        schema = SchemaNode(one_of=[SchemaNode(), "Pet"])
        with pytest.raises(InvalidGraphError) as excinfo:
            walk(schema)
        assert excinfo.value.pointer == "#/oneOf"

    def test_non_value_literal(self):
        schema = SchemaNode(type="string", enum=[v.string("a"), "b"])
        with pytest.raises(InvalidGraphError) as excinfo:
            walk(schema)
        assert excinfo.value.pointer == "#/enum/1"

    def test_invalid_items(self):
        schema = SchemaNode(type="array", items="string")
        with pytest.raises(InvalidGraphError) as excinfo:
            walk(schema)
        assert excinfo.value.pointer == "#/items"

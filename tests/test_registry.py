"""Tests for rule sets: selection, ordering and host-defined rules."""

import pytest

from conftest import discriminated_schema

from schema_lint.exceptions import UnknownRuleError
from schema_lint.models import SchemaNode
from schema_lint.models import values as v
from schema_lint.validation import BUILTIN_RULES, ErrorKind, Rule, RuleSet, VisitKind, walk


BUILTIN_NAMES = ["TypeMismatch", "ValidateOneOfDiscriminator", "ValidateAnyOfDiscriminator"]


def _no_empty_enum(context, schema):
    if schema.type == "string" and schema.enum == [] and schema.default is None:
        context.report("NoDefaultOrEnum", "String schema declares neither default nor enum.")


class TestRuleSet:

    def test_default_rule_order(self):
        assert RuleSet.default().names() == BUILTIN_NAMES
        assert [r.name for r in BUILTIN_RULES] == BUILTIN_NAMES

    def test_default_sets_are_independent(self):
        first = RuleSet.default()
        first.remove("TypeMismatch")
        assert "TypeMismatch" in RuleSet.default()
        assert "TypeMismatch" not in first

    def test_from_names_selects_and_orders(self):
        rule_set = RuleSet.from_names(["ValidateAnyOfDiscriminator", "TypeMismatch"])
        assert rule_set.names() == ["ValidateAnyOfDiscriminator", "TypeMismatch"]

    def test_from_names_unknown(self):
        with pytest.raises(UnknownRuleError, match="NotARule"):
            RuleSet.from_names(["TypeMismatch", "NotARule"])

    def test_from_names_with_host_rules(self):
        host_rule = Rule("NoDefaultOrEnum", VisitKind.SCHEMA, _no_empty_enum)
        rule_set = RuleSet.from_names(["NoDefaultOrEnum", "TypeMismatch"], extra_rules=[host_rule])
        assert rule_set.names() == ["NoDefaultOrEnum", "TypeMismatch"]

    def test_add_duplicate(self):
        rule_set = RuleSet.default()
        with pytest.raises(ValueError):
            rule_set.add(rule_set.rules_for(VisitKind.LITERAL)[0])

    def test_add_at_index(self):
        rule_set = RuleSet.default().add(Rule("First", VisitKind.SCHEMA, _no_empty_enum), index=0)
        assert rule_set.names()[0] == "First"
        assert len(rule_set) == 4

    def test_remove_unknown(self):
        with pytest.raises(UnknownRuleError):
            RuleSet.default().remove("NotARule")

    def test_reorder(self):
        rule_set = RuleSet.default().reorder(["ValidateAnyOfDiscriminator"])
        assert rule_set.names() == [
            "ValidateAnyOfDiscriminator", "TypeMismatch", "ValidateOneOfDiscriminator",
        ]

    def test_rules_for(self):
        rule_set = RuleSet.default()
        assert [r.name for r in rule_set.rules_for(VisitKind.LITERAL)] == ["TypeMismatch"]
        assert [r.name for r in rule_set.rules_for(VisitKind.SCHEMA)] == BUILTIN_NAMES[1:]

    def test_copy(self):
        original = RuleSet.default()
        clone = original.copy().remove("TypeMismatch")
        assert original.names() == BUILTIN_NAMES
        assert clone.names() == BUILTIN_NAMES[1:]


class TestWalkWithRuleSets:

    def _schema(self):
        schema = discriminated_schema()
        schema.default = v.integer(1)
        return schema

    def test_empty_rule_set_reports_nothing(self):
        assert len(walk(self._schema(), RuleSet.empty())) == 0

    def test_only_type_mismatch(self):
        errors = walk(self._schema(), RuleSet.from_names(["TypeMismatch"]))
        assert [e.rule_name for e in errors] == ["TypeMismatch"]

    def test_only_discriminator(self):
        errors = walk(self._schema(), RuleSet.from_names(["ValidateOneOfDiscriminator"]))
        assert [e.rule_name for e in errors] == ["ValidateOneOfDiscriminator"] * 3

    def test_rule_order_changes_error_order(self):
        schema = SchemaNode(
            type="object",
            discriminator="kind",
            one_of=[SchemaNode(reference_id="A")],
            any_of=[SchemaNode(reference_id="B")],
        )
        assert [e.pointer for e in walk(schema)] == ["#/oneOf", "#/oneOf", "#/anyOf", "#/anyOf"]

        errors = walk(schema, RuleSet.default().reorder(["ValidateAnyOfDiscriminator"]))
        assert [e.pointer for e in errors] == ["#/anyOf", "#/anyOf", "#/oneOf", "#/oneOf"]

    def test_host_rule_reports_through_context(self):
        rule_set = RuleSet.default().add(Rule("NoDefaultOrEnum", VisitKind.SCHEMA, _no_empty_enum))
        schema = SchemaNode(
            type="object",
            properties={"name": SchemaNode(type="string"), "id": SchemaNode(type="string", default=v.string("x"))},
        )
        errors = walk(schema, rule_set)
        assert [(e.rule_name, e.pointer, e.kind) for e in errors] == [
            ("NoDefaultOrEnum", "#/properties/name", ErrorKind.CUSTOM),
        ]

    def test_host_literal_rule(self):
        def forbid_empty_strings(context, schema, value):
            if value == v.string(""):
                context.report("NoEmptyString", "Empty string literal.")

        rule_set = RuleSet([Rule("NoEmptyString", VisitKind.LITERAL, forbid_empty_strings)])
        schema = SchemaNode(type="string", enum=[v.string("a"), v.string("")])
        assert [e.pointer for e in walk(schema, rule_set)] == ["#/enum/1"]

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

"""Rule registry.

Rules are named callbacks tagged with the kind of visit they handle. The
built-in rules register themselves with the ``rule`` decorator; a
``RuleSet`` is an ordered, independent copy that callers can reshape
without touching the walker:

    rule_set = RuleSet.from_names(["ValidateOneOfDiscriminator"])
    rule_set.add(Rule("NoEmptyEnum", VisitKind.SCHEMA, check_enum))
    errors = walk(root, rule_set)
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from ..exceptions import UnknownRuleError

logger = logging.getLogger(__name__)


class VisitKind(Enum):
    """What a rule is invoked on.

    SCHEMA:  once per visited schema node, ``check(context, schema)``.
    LITERAL: once per default/example/enum member, ``check(context, schema, value)``
             with the context pointer already positioned on the literal.
    """
    SCHEMA = auto()
    LITERAL = auto()


@dataclass(frozen=True)
class Rule:
    name: str
    visit_kind: VisitKind
    check: Callable[..., None]


# Built-in rules in registration order; populated by the rules module.
BUILTIN_RULES: List[Rule] = []


def rule(name: str, visit_kind: VisitKind):
    """Decorator to register a built-in rule.

    Usage:
        @rule("TypeMismatch", VisitKind.LITERAL)
        def check_type_mismatch(context, schema, value):
            ...
    """
    def decorator(fn: Callable[..., None]):
        if any(r.name == name for r in BUILTIN_RULES):
            raise ValueError(f"Rule '{name}' is already registered")
        BUILTIN_RULES.append(Rule(name=name, visit_kind=visit_kind, check=fn))
        return fn
    return decorator


def _builtin_rules() -> List[Rule]:
    # Importing the module registers the built-in rules.
    from . import rules  # noqa: F401
    return list(BUILTIN_RULES)


class RuleSet:
    """Ordered collection of rules run by one walker."""

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self._rules: List[Rule] = []
        for r in rules or ():
            self.add(r)

    @classmethod
    def default(cls) -> "RuleSet":
        return cls(_builtin_rules())

    @classmethod
    def empty(cls) -> "RuleSet":
        return cls()

    @classmethod
    def from_names(cls, names: Iterable[str], extra_rules: Iterable[Rule] = ()) -> "RuleSet":
        """Build a rule set running exactly ``names``, in the given order.

        ``extra_rules`` makes host-defined rules selectable by name.
        """
        available: Dict[str, Rule] = {r.name: r for r in _builtin_rules()}
        for r in extra_rules:
            available[r.name] = r

        selected = []
        for name in names:
            if name not in available:
                raise UnknownRuleError(
                    f"Unknown rule '{name}'. Known rules: {', '.join(sorted(available))}"
                )
            selected.append(available[name])
        logger.debug(f"Selected rules: {[r.name for r in selected]}")
        return cls(selected)

    def add(self, new_rule: Rule, index: Optional[int] = None) -> "RuleSet":
        if new_rule.name in self:
            raise ValueError(f"Rule '{new_rule.name}' is already in the rule set")
        if index is None:
            self._rules.append(new_rule)
        else:
            self._rules.insert(index, new_rule)
        return self

    def remove(self, name: str) -> "RuleSet":
        if name not in self:
            raise UnknownRuleError(f"Rule '{name}' is not in the rule set")
        self._rules = [r for r in self._rules if r.name != name]
        return self

    def reorder(self, names: Iterable[str]) -> "RuleSet":
        """Move the named rules to the front, in the given order."""
        names = list(names)
        by_name = {r.name: r for r in self._rules}
        missing = [n for n in names if n not in by_name]
        if missing:
            raise UnknownRuleError(f"Rules not in the rule set: {', '.join(missing)}")
        front = [by_name[n] for n in names]
        rest = [r for r in self._rules if r.name not in names]
        self._rules = front + rest
        return self

    def copy(self) -> "RuleSet":
        return RuleSet(self._rules)

    def names(self) -> List[str]:
        return [r.name for r in self._rules]

    def rules_for(self, visit_kind: VisitKind) -> List[Rule]:
        return [r for r in self._rules if r.visit_kind == visit_kind]

    def __contains__(self, name: object) -> bool:
        return any(r.name == name for r in self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({self.names()})"

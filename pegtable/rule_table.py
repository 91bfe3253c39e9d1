"""
Accumulation of PEG rule declarations and their serialization.

A rule table is an ordered, immutable sequence of :py:class:`RuleRecord`
objects stored in a :py:class:`~pegtable.scope.ScopeStore` under
:py:data:`RULES_KEY`. Every mutation reads the whole table from the store,
builds a new table and writes it back, so a table defined in an enclosing
scope is never altered through a shared reference.
"""

import logging

from collections import Counter

from dataclasses import dataclass, replace

from typing import Iterable, List, Optional, Tuple

from pegtable.errors import RuleNotFoundError, UninitializedTableError
from pegtable.scope import ScopeStore, UndefinedScopeKeyError


__all__ = [
    "RULES_KEY",
    "DEFINE_PEG",
    "MISSING_EMITTER",
    "RuleRecord",
    "get_rules",
    "find_rule",
    "duplicate_rule_names",
    "create_empty_tables",
    "add_rule",
    "add_emitter",
    "construct_peg",
]

logger = logging.getLogger(__name__)


RULES_KEY = "rules"
"""The scope key under which the rule table is stored."""

DEFINE_PEG = "define-peg"
"""The form which introduces each serialized rule declaration."""

MISSING_EMITTER = "undefined"
"""Rendered in place of the emitter of a rule which was never given one."""


@dataclass(frozen=True)
class RuleRecord:
    """A single rule declaration."""

    name: str
    """The grammar symbol being defined."""

    pattern: str
    """The PEG pattern expression, used verbatim."""

    emitter: Optional[str] = None
    """
    The action expression applied to the rule's match, used verbatim, or
    None if :py:func:`add_emitter` has not been called for this rule.
    """

    def to_peg(self, missing_emitter: str = MISSING_EMITTER) -> str:
        """Render this rule as a single ``(define-peg ...)`` form."""
        emitter = self.emitter if self.emitter is not None else missing_emitter
        return f"({DEFINE_PEG} {self.name} {self.pattern} {emitter})"


RuleTable = Tuple[RuleRecord, ...]


def get_rules(scope: ScopeStore) -> RuleTable:
    """
    Return the rule table visible in the provided scope.

    Raises :py:exc:`.UninitializedTableError` if :py:func:`create_empty_tables`
    has not been called.
    """
    try:
        return tuple(scope.get(RULES_KEY))
    except UndefinedScopeKeyError as exc:
        raise UninitializedTableError(RULES_KEY) from exc


def find_rule(rules: Iterable[RuleRecord], name: str) -> Optional[int]:
    """
    Return the index of the first rule named ``name``, or None if there is no
    such rule.
    """
    for index, rule in enumerate(rules):
        if rule.name == name:
            return index
    return None


def duplicate_rule_names(rules: Iterable[RuleRecord]) -> List[str]:
    """
    Return the names which are used by more than one rule, in the order they
    first appear.
    """
    counts = Counter(rule.name for rule in rules)
    return [name for name, count in counts.items() if count > 1]


def create_empty_tables(scope: ScopeStore) -> str:
    """
    Define an empty rule table in the current scope, discarding any rules
    previously added in this scope.
    """
    scope.add(RULES_KEY, ())
    logger.debug("Created empty rule table")
    return ""


def add_rule(scope: ScopeStore, name: str, pattern: str) -> str:
    """
    Append a rule (with no emitter) to the end of the rule table.

    Rule names are not required to be unique: adding a second rule with an
    existing name results in both being serialized.
    """
    rules = get_rules(scope)
    scope.modify(RULES_KEY, rules + (RuleRecord(name, pattern),))
    logger.debug("Added rule %s <- %s", name, pattern)
    return ""


def add_emitter(scope: ScopeStore, name: str, emitter: str) -> str:
    """
    Set the emitter of the first rule named ``name``.

    Raises :py:exc:`.RuleNotFoundError` if no such rule exists, in which case
    the rule table is left unchanged.
    """
    rules = get_rules(scope)

    index = find_rule(rules, name)
    if index is None:
        raise RuleNotFoundError(name)

    updated = replace(rules[index], emitter=emitter)
    scope.modify(RULES_KEY, rules[:index] + (updated,) + rules[index + 1 :])
    logger.debug("Set emitter of rule %s to %s", name, emitter)
    return ""


def construct_peg(scope: ScopeStore, missing_emitter: str = MISSING_EMITTER) -> str:
    """
    Serialize the rule table into a block of ``(define-peg ...)`` forms, one
    per rule in the order the rules were added. Each form is preceded by a
    newline. Rules without an emitter are given ``missing_emitter`` in its
    place.
    """
    rules = get_rules(scope)

    duplicates = duplicate_rule_names(rules)
    if duplicates:
        logger.warning(
            "Rule table defines some rules more than once: %s", ", ".join(duplicates)
        )

    logger.debug("Serializing %d rules", len(rules))
    return "".join("\n" + rule.to_peg(missing_emitter) for rule in rules)

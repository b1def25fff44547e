"""Ordered, data-driven intent rules.

A parser is a list of :class:`IntentRule` evaluated top to bottom; the first
rule whose predicate holds builds the intent.  Pure logic, no I/O.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

IntentT = TypeVar("IntentT")

# (lowercased+stripped text, original text)
Predicate = Callable[[str, str], bool]
Builder = Callable[[str, str], IntentT]


@dataclass(frozen=True)
class IntentRule(Generic[IntentT]):
    """One (predicate, builder) pair."""

    name: str
    predicate: Predicate
    build: Builder[IntentT]


class IntentParser(Generic[IntentT]):
    """Evaluate rules in order, first match wins, else *fallback*."""

    def __init__(
        self,
        rules: Sequence[IntentRule[IntentT]],
        fallback: Callable[[], IntentT],
    ) -> None:
        self._rules = tuple(rules)
        self._fallback = fallback

    @property
    def rules(self) -> tuple[IntentRule[IntentT], ...]:
        return self._rules

    def matching_rule(self, message: str) -> IntentRule[IntentT] | None:
        """Return the rule that would fire for *message*, if any."""
        lower = message.lower().strip()
        for rule in self._rules:
            if rule.predicate(lower, message):
                return rule
        return None

    def parse(self, message: str) -> IntentT:
        rule = self.matching_rule(message)
        if rule is None:
            return self._fallback()
        return rule.build(message.lower().strip(), message)


# ---------------------------------------------------------------------------
# Predicate helpers
# ---------------------------------------------------------------------------


def contains_any(*needles: str) -> Predicate:
    return lambda lower, _original: any(needle in lower for needle in needles)


def starts_with_any(*prefixes: str) -> Predicate:
    return lambda lower, _original: lower.startswith(prefixes)


def equals_any(*values: str) -> Predicate:
    return lambda lower, _original: lower in values


def searches_any(*patterns: str) -> Predicate:
    compiled = [re.compile(p, re.IGNORECASE) for p in patterns]
    return lambda lower, _original: any(p.search(lower) for p in compiled)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda lower, original: any(p(lower, original) for p in predicates)


def first_group(pattern: re.Pattern[str], text: str) -> str | None:
    """Stripped first capture group of *pattern* in *text*, or ``None``."""
    match = pattern.search(text)
    if match is None or match.group(1) is None:
        return None
    return match.group(1).strip()


HELP_PREDICATE = any_of(equals_any("help", "?"), contains_any("what can you do", "how do"))

"""Filter predicates for filtered views.

Predicates are frozen dataclasses so two filters built from the same input
compare equal, which keeps command objects and tests simple.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hairstylex.domain.entities import Client, Hairdresser, Person

Record = Person | Client | Hairdresser
Predicate = Callable[[Any], bool]


def show_all(_record: object) -> bool:
    """The default predicate: every record is visible."""
    return True


SHOW_ALL: Predicate = show_all


@dataclass(frozen=True)
class NameContainsKeywords:
    """Matches records whose name contains any keyword as a whole word.

    Matching is case-insensitive; partial words do not match
    (``"Ali"`` does not match ``"Alice Tan"``).
    """

    keywords: tuple[str, ...]

    def __call__(self, record: Record) -> bool:
        words = {word.casefold() for word in record.name.split()}
        return any(keyword.casefold() in words for keyword in self.keywords)


@dataclass(frozen=True)
class HasTag:
    """Matches records carrying *tag* (case-insensitive)."""

    tag: str

    def __call__(self, record: Record) -> bool:
        wanted = self.tag.casefold()
        return any(tag.casefold() == wanted for tag in record.tags)


@dataclass(frozen=True)
class HasSpecialisation:
    """Matches hairdressers listing *label* among their specialisations."""

    label: str

    def __call__(self, record: Hairdresser) -> bool:
        wanted = self.label.casefold()
        return any(spec.casefold() == wanted for spec in record.specialisations)


@dataclass(frozen=True)
class AllOf:
    """Conjunction of predicates. An empty conjunction matches everything."""

    predicates: tuple[Predicate, ...]

    def __call__(self, record: Record) -> bool:
        return all(predicate(record) for predicate in self.predicates)


def combine(*predicates: Predicate | None) -> Predicate:
    """Build one predicate from optional parts; ``SHOW_ALL`` when none are given."""
    parts = tuple(p for p in predicates if p is not None)
    if not parts:
        return SHOW_ALL
    if len(parts) == 1:
        return parts[0]
    return AllOf(parts)

"""Rule validation — decides whether a candidate rule may join a RuleSet.

Checks run in a fixed order and the first failure wins:

1. Empty source or destination (whitespace only counts as empty).
2. Duplicate source.
3. 2-hop cycle (the new source is already some rule's destination).
4. Subdomain mismatch between source and destination (advisory only).

Duplicate and cycle checks compare raw, untrimmed strings. Stored rules are
trimmed by the caller, so a whitespace-padded duplicate is not detected.

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from redirectctl.domain.normalize import get_domain

if TYPE_CHECKING:
    from redirectctl.domain.rules import RuleSet

_NON_WHITESPACE = re.compile(r"\S")


class OutcomeKind(StrEnum):
    """Top-level classification of a validation result."""

    ACCEPTED = "accepted"
    ADVISORY = "accepted_with_advisory"
    REJECTED = "rejected"


class RejectReason(StrEnum):
    """Why a candidate rule was rejected."""

    EMPTY = "empty"
    DUPLICATE_SOURCE = "duplicate_source"
    CYCLE = "cycle"


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of one :func:`validate` call."""

    kind: OutcomeKind
    reason: RejectReason | None = None
    subdomain_delta: int = 0

    @classmethod
    def accept(cls) -> ValidationOutcome:
        return cls(kind=OutcomeKind.ACCEPTED)

    @classmethod
    def advise(cls, subdomain_delta: int) -> ValidationOutcome:
        return cls(kind=OutcomeKind.ADVISORY, subdomain_delta=subdomain_delta)

    @classmethod
    def reject(cls, reason: RejectReason) -> ValidationOutcome:
        return cls(kind=OutcomeKind.REJECTED, reason=reason)

    @property
    def accepted(self) -> bool:
        """True for both plain and advisory acceptance."""
        return self.kind is not OutcomeKind.REJECTED


def has_chars(text: str) -> bool:
    """Whether *text* contains at least one non-whitespace character."""
    return _NON_WHITESPACE.search(text) is not None


def subdomain_difference(source: str, destination: str) -> int:
    """Estimate the subdomain-depth mismatch between two URL-like strings.

    The shorter bare domain is removed from the longer one (first literal
    occurrence) and the dots left over are counted. If the shorter domain
    is not contained in the longer one the difference is 0.

    Examples:
        >>> subdomain_difference("one.example.com", "example.com")
        1
        >>> subdomain_difference("one.example.com", "two.example.com")
        0
    """
    source = get_domain(source)
    destination = get_domain(destination)

    if len(destination) >= len(source):
        longer, shorter = destination, source
    else:
        longer, shorter = source, destination

    residual = longer.replace(shorter, "", 1)
    if len(residual) == len(longer):
        return 0
    return residual.count(".")


def validate(source: str, destination: str, existing: RuleSet) -> ValidationOutcome:
    """Decide whether ``source -> destination`` may be added to *existing*.

    *existing* is read, never mutated. Identical inputs always produce an
    identical outcome.
    """
    if not has_chars(source) or not has_chars(destination):
        return ValidationOutcome.reject(RejectReason.EMPTY)

    if any(rule.source == source for rule in existing):
        return ValidationOutcome.reject(RejectReason.DUPLICATE_SOURCE)

    # Only the direct swap is caught; longer chains are not walked.
    if any(rule.destination == source for rule in existing):
        return ValidationOutcome.reject(RejectReason.CYCLE)

    delta = subdomain_difference(source, destination)
    if delta > 0:
        return ValidationOutcome.advise(delta)

    return ValidationOutcome.accept()

"""RuleService — add, delete, list, and dry-run check redirection rules.

The validator decides; this service turns each outcome into a
ServiceResult the CLI can present, commits accepted rules, and announces
changes to plugins after the commit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from redirectctl.domain.ids import format_rule_id, parse_trailing_index
from redirectctl.domain.rules import Rule
from redirectctl.domain.validation import OutcomeKind, RejectReason, validate
from redirectctl.infrastructure.store import StoreError, TransactionAborted
from redirectctl.services.base import BaseService
from redirectctl.services.result import ServiceResult

if TYPE_CHECKING:
    from redirectctl.infrastructure.store import RuleStore
    from redirectctl.plugins.event_bus import EventBus

logger = logging.getLogger(__name__)

# Rejection reason -> (error code, user-facing message).
REJECTION_MESSAGES: dict[RejectReason, tuple[str, str]] = {
    RejectReason.EMPTY: (
        "EMPTY_RULE",
        "Rules can't be empty or contain only whitespace.",
    ),
    RejectReason.DUPLICATE_SOURCE: (
        "DUPLICATE_SOURCE",
        "A rule for this source already exists.",
    ),
    RejectReason.CYCLE: (
        "REDIRECT_CYCLE",
        "This source is already the destination of another rule.",
    ),
}

SUBDOMAIN_WARNING = (
    "Source and destination differ by {delta} subdomain level(s); "
    "the redirect may not land where expected."
)


def _rule_data(index: int, rule: Rule) -> dict[str, Any]:
    return {
        "id": format_rule_id(index),
        "index": index,
        "source": rule.source,
        "destination": rule.destination,
        "is_regex": rule.is_regex,
    }


def _store_error(op: str, exc: Exception, *, code: str = "STORE_ERROR") -> ServiceResult:
    return ServiceResult.failure(op, code, str(exc))


class RuleService(BaseService):
    """Operations over the persisted RuleSet.

    Parameters:
        store: Rule persistence.
        event_bus: Optional change announcer.
        warn_subdomain_mismatch: Turn advisory outcomes into result warnings.
    """

    def __init__(
        self,
        store: RuleStore,
        *,
        event_bus: EventBus | None = None,
        warn_subdomain_mismatch: bool = True,
    ) -> None:
        super().__init__(store, event_bus=event_bus)
        self._warn_subdomain_mismatch = warn_subdomain_mismatch

    def add_rule(self, source: str, destination: str, *, is_regex: bool = False) -> ServiceResult:
        """Validate and append a rule in one store transaction."""
        op = "add_rule"
        warnings: list[str] = []

        try:
            with self._store.transaction() as txn:
                outcome = validate(source, destination, txn.snapshot)
                if outcome.reason is not None:
                    logger.debug(
                        "Rejected rule %r -> %r (regex=%s): %s",
                        source,
                        destination,
                        is_regex,
                        outcome.reason,
                    )
                    return self._rejection(op, outcome.reason, source)

                rule = Rule.from_input(source, destination, is_regex=is_regex)
                index = txn.append(rule)
        except StoreError as exc:
            return _store_error(op, exc)
        except TransactionAborted as exc:
            return _store_error(op, exc, code="STORE_WRITE_FAILED")

        logger.debug(
            "Added rule %r -> %r (regex=%s)", rule.source, rule.destination, rule.is_regex
        )
        data = _rule_data(index, rule)
        if outcome.kind is OutcomeKind.ADVISORY:
            data["subdomain_delta"] = outcome.subdomain_delta
            if self._warn_subdomain_mismatch:
                warnings.append(SUBDOMAIN_WARNING.format(delta=outcome.subdomain_delta))

        self._dispatch_event(
            "post_add_rule",
            {
                "source": rule.source,
                "destination": rule.destination,
                "is_regex": rule.is_regex,
            },
            warnings,
        )

        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def delete_rule(self, rule_id: str) -> ServiceResult:
        """Delete the rule at the position encoded in *rule_id*."""
        op = "delete_rule"
        index = parse_trailing_index(rule_id)
        if index is None:
            logger.debug("Invalid rule id: %r", rule_id)
            return ServiceResult.failure(
                op, "INVALID_RULE_ID", f"No rule index found in: {rule_id!r}"
            )

        try:
            with self._store.transaction() as txn:
                if index >= len(txn.rules):
                    return ServiceResult.failure(
                        op,
                        "NOT_FOUND",
                        f"No rule found with ID: {format_rule_id(index)}",
                        index=index,
                        count=len(txn.rules),
                    )
                removed = txn.pop(index)
        except StoreError as exc:
            return _store_error(op, exc)
        except TransactionAborted as exc:
            return _store_error(op, exc, code="STORE_WRITE_FAILED")

        logger.debug("Deleted rule %s (%r)", format_rule_id(index), removed.source)
        warnings: list[str] = []
        self._dispatch_event("post_delete_rule", {"source": removed.source}, warnings)

        return ServiceResult(
            ok=True,
            op=op,
            data=_rule_data(index, removed),
            warnings=warnings,
        )

    def list_rules(self) -> ServiceResult:
        """Return every stored rule in display order."""
        op = "list_rules"
        try:
            rules = self._store.load()
        except StoreError as exc:
            return _store_error(op, exc)

        items = [_rule_data(index, rule) for index, rule in enumerate(rules)]
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

    def check_rule(self, source: str, destination: str) -> ServiceResult:
        """Validate a candidate against the stored rules without adding it."""
        op = "check_rule"
        try:
            rules = self._store.load()
        except StoreError as exc:
            return _store_error(op, exc)

        outcome = validate(source, destination, rules)
        if outcome.reason is not None:
            return self._rejection(op, outcome.reason, source)

        warnings: list[str] = []
        if outcome.kind is OutcomeKind.ADVISORY and self._warn_subdomain_mismatch:
            warnings.append(SUBDOMAIN_WARNING.format(delta=outcome.subdomain_delta))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": source,
                "destination": destination,
                "outcome": str(outcome.kind),
                "subdomain_delta": outcome.subdomain_delta,
            },
            warnings=warnings,
        )

    @staticmethod
    def _rejection(op: str, reason: RejectReason, source: str) -> ServiceResult:
        code, message = REJECTION_MESSAGES[reason]
        return ServiceResult.failure(op, code, message, reason=str(reason), source=source)

"""BaseService — abstract foundation for redirectctl services.

Every service receives a :class:`RuleStore` at construction time, plus an
optional :class:`EventBus` for change announcements. Services own their
transaction boundaries via ``self._store.transaction()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from redirectctl.infrastructure.store import RuleStore
    from redirectctl.plugins.event_bus import EventBus

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class RuleService(BaseService):
            def add_rule(self, source: str, destination: str) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: RuleStore, *, event_bus: EventBus | None = None) -> None:
        self._store = store
        self._event_bus = event_bus

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Announce a change. No-op if no event bus is attached.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._event_bus is None:
            return
        try:
            self._event_bus.dispatch(hook_name, payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")

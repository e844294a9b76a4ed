"""Tests for BaseService event dispatch."""

from __future__ import annotations

from typing import Any

from redirectctl.infrastructure.store import RuleStore
from redirectctl.services.base import BaseService


class _RecordingBus:
    def __init__(self, *, fail: bool = False) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.fail = fail

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> None:
        if self.fail:
            raise RuntimeError("plugin exploded")
        self.calls.append((hook_name, payload))


class TestBaseService:
    def test_store_stored(self, store: RuleStore) -> None:
        service = BaseService(store)
        assert service._store is store

    def test_dispatch_without_bus_is_noop(self, store: RuleStore) -> None:
        warnings: list[str] = []
        BaseService(store)._dispatch_event("post_delete_rule", {"source": "a"}, warnings)
        assert warnings == []

    def test_dispatch_forwards_payload(self, store: RuleStore) -> None:
        bus = _RecordingBus()
        warnings: list[str] = []
        BaseService(store, event_bus=bus)._dispatch_event(  # type: ignore[arg-type]
            "post_delete_rule", {"source": "a"}, warnings
        )
        assert bus.calls == [("post_delete_rule", {"source": "a"})]
        assert warnings == []

    def test_dispatch_failure_becomes_warning(self, store: RuleStore) -> None:
        warnings: list[str] = []
        BaseService(store, event_bus=_RecordingBus(fail=True))._dispatch_event(  # type: ignore[arg-type]
            "post_delete_rule", {"source": "a"}, warnings
        )
        assert warnings == ["Event dispatch failed for post_delete_rule"]

"""Tests for the built-in change log plugin."""

from __future__ import annotations

from structlog.testing import capture_logs

from redirectctl.plugins.builtins.changelog import ChangeLogPlugin


class TestChangeLogPlugin:
    def test_logs_added_rule(self) -> None:
        with capture_logs() as logs:
            ChangeLogPlugin().post_add_rule(
                source="m.example.com", destination="example.com", is_regex=False
            )
        assert logs == [
            {
                "event": "rule_added",
                "log_level": "info",
                "source": "m.example.com",
                "destination": "example.com",
                "regex": False,
            }
        ]

    def test_logs_deleted_rule(self) -> None:
        with capture_logs() as logs:
            ChangeLogPlugin().post_delete_rule(source="m.example.com")
        assert logs[0]["event"] == "rule_deleted"
        assert logs[0]["source"] == "m.example.com"

"""Tests for output formatting — JSON, quiet, and Rich modes."""

from __future__ import annotations

import json

from redirectctl.output.formatters import OutputSettings, format_result
from redirectctl.services.result import ServiceError, ServiceResult

_RULE = {
    "id": "rule-0",
    "index": 0,
    "source": "m.example.com",
    "destination": "example.com",
    "is_regex": False,
}


class TestFormatResult:
    def test_json_mode(self) -> None:
        result = ServiceResult(ok=True, op="add_rule", data=_RULE)
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["ok"] is True
        assert parsed["data"]["source"] == "m.example.com"

    def test_json_wins_over_quiet(self) -> None:
        result = ServiceResult(ok=True, op="add_rule", data=_RULE)
        output = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "add_rule"

    def test_quiet_list_prints_ids(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list_rules",
            data={"items": [_RULE, {**_RULE, "id": "rule-1", "index": 1}], "count": 2},
        )
        assert format_result(result, settings=OutputSettings(quiet=True)) == "rule-0\nrule-1"

    def test_quiet_mutation(self) -> None:
        result = ServiceResult(ok=True, op="delete_rule", data=_RULE)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: delete_rule"

    def test_quiet_error(self) -> None:
        result = ServiceResult(
            ok=False, op="add_rule", error=ServiceError(code="EMPTY_RULE", message="empty")
        )
        assert format_result(result, settings=OutputSettings(quiet=True)) == (
            "ERROR: add_rule — empty"
        )

    def test_default_is_rich(self) -> None:
        result = ServiceResult(ok=True, op="add_rule", data=_RULE)
        output = format_result(result)
        assert output.splitlines()[0].split() == ["OK", "add_rule"]
        assert "m.example.com" in output

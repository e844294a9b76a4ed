"""Shared pytest fixtures and test helpers for redirectctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from redirectctl.domain.rules import Rule
from redirectctl.infrastructure.store import RuleStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rules_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary directory used as the settings root.

    Clears env overrides so a developer's shell cannot leak into tests.
    """
    for var in ("REDIRECTCTL_CONFIG", "REDIRECTCTL_STORE__PATH", "REDIRECTCTL_ROOT"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def store(rules_root: Path) -> RuleStore:
    """Empty RuleStore backed by a file in the temp root."""
    return RuleStore(rules_root / "redirect_rules.json")


@pytest.fixture
def sample_rules() -> tuple[Rule, ...]:
    """Three rules with no duplicate sources and no cycles."""
    return (
        Rule(source="nickschorr.com/path/", destination="nickschorr.com/path/test/"),
        Rule(source="test.nickschorr.com/path/", destination="test.nickschorr.com/path/test/"),
        Rule(source="test.sub.nickschorr.com/", destination="sub.nickschorr.com/test/path/"),
    )


@pytest.fixture
def _isolated_root(rules_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp root so the CLI uses an isolated rule file.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(rules_root)

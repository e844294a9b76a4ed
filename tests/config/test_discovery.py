"""Tests for redirectctl.toml walk-up discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from redirectctl.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


class TestFindConfig:
    def test_in_start_dir(self, rules_root: Path) -> None:
        config = rules_root / CONFIG_FILENAME
        config.write_text("")
        assert find_config(rules_root) == config.resolve()

    def test_walks_up(self, rules_root: Path) -> None:
        config = rules_root / CONFIG_FILENAME
        config.write_text("")
        nested = rules_root / "x" / "y"
        nested.mkdir(parents=True)
        assert find_config(nested) == config.resolve()

    def test_env_var_wins(self, rules_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (rules_root / CONFIG_FILENAME).write_text("")
        other = rules_root / "other.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(rules_root) == other

    def test_env_var_missing_file(self, rules_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(rules_root / "nope.toml"))
        assert find_config(rules_root) is None

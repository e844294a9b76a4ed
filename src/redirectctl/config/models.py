"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, redirectctl.toml only contains
overrides. An empty file (or no file) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    path: str = "redirect_rules.json"
    key: str = "redirectionRules"


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    warn_subdomain_mismatch: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    log_changes: bool = True

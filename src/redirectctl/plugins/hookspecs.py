"""Pluggy hook specifications for rule-change announcements.

Hooks fire after the store commit succeeds, so listeners never see a
rule that was not persisted.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("redirectctl")
hookimpl = pluggy.HookimplMarker("redirectctl")


class RedirectctlHookSpec:
    """Hook specifications for the redirectctl plugin system."""

    @hookspec
    def post_add_rule(self, source: str, destination: str, is_regex: bool) -> None:
        """Called after a rule is added."""

    @hookspec
    def post_delete_rule(self, source: str) -> None:
        """Called after a rule is deleted."""

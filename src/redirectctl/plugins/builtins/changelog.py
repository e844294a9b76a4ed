"""Built-in plugin: log every rule change through structlog."""

from __future__ import annotations

import structlog

from redirectctl.config.logging import CHANGES_LOGGER
from redirectctl.plugins.hookspecs import hookimpl

log = structlog.get_logger(CHANGES_LOGGER)


class ChangeLogPlugin:
    """Emit one log event per added or deleted rule."""

    @hookimpl
    def post_add_rule(self, source: str, destination: str, is_regex: bool) -> None:
        log.info("rule_added", source=source, destination=destination, regex=is_regex)

    @hookimpl
    def post_delete_rule(self, source: str) -> None:
        log.info("rule_deleted", source=source)

"""Synchronous change announcements via pluggy.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from redirectctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class EventBus:
    """Dispatch rule-change hooks to every registered plugin.

    Dispatch is synchronous: it completes before the calling service returns.
    """

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> None:
        """Call *hook_name* with *payload* as keyword arguments.

        Raises whatever a plugin raises; callers convert that into a warning.
        """
        hook = getattr(self._pm.hook, hook_name, None)
        if hook is None:
            msg = f"Unknown hook: {hook_name}"
            raise ValueError(msg)
        logger.debug("Dispatching %s", hook_name)
        hook(**payload)

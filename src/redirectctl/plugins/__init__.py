"""Extension layer — rule-change announcements via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

from redirectctl.plugins.event_bus import EventBus
from redirectctl.plugins.manager import PluginManager

__all__ = ["EventBus", "PluginManager"]

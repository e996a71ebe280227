"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus built-in plugins registered by the command layer.
INVARIANT: Plugin failures are warnings, never errors.
"""

from hairstylex.plugins.event_bus import EventBus, EventRecord
from hairstylex.plugins.manager import PluginManager

__all__ = ["EventBus", "EventRecord", "PluginManager"]

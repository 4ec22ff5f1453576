"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) in the ``roverctl.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from roverctl.plugins.manager import PluginManager, hookimpl

__all__ = ["PluginManager", "hookimpl"]

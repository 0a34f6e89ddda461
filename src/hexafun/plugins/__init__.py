"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
A plugin implements ``hexafun_configure(builder)`` to add registrations.
"""

from hexafun.plugins.hookspecs import hookimpl
from hexafun.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]

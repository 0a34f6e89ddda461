"""Plugin discovery, loading, and builder configuration.

Discovery: entry_points (pip-installed) in the ``hexafun.plugins`` group via
pluggy, plus plugins registered directly with :meth:`PluginManager.register_plugin`.

INVARIANT: A plugin that fails while configuring a builder propagates its
exception. A half-configured container is never built silently.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from hexafun.plugins.hookspecs import PROJECT_NAME, HexafunHookSpec

if TYPE_CHECKING:
    from hexafun.config.models import PluginsConfig
    from hexafun.core.builder import ContainerBuilder

DEFAULT_ENTRY_POINT_GROUP = "hexafun.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, registration, and builder configuration."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(HexafunHookSpec)
        self._loaded: bool = False

    @classmethod
    def from_config(cls, config: PluginsConfig) -> PluginManager:
        """Create a manager and load entry points unless plugins are disabled."""
        manager = cls()
        if config.enabled:
            manager.discover_and_load(
                group=config.entry_point_group,
                blocked=config.disabled,
            )
        return manager

    def discover_and_load(
        self,
        *,
        group: str = DEFAULT_ENTRY_POINT_GROUP,
        blocked: list[str] | None = None,
    ) -> list[str]:
        """Load plugins from the *group* entry points, skipping *blocked* names.

        Returns a list of loaded plugin names.
        """
        for name in blocked or []:
            self._pm.set_blocked(name)
        count = self._pm.load_setuptools_entrypoints(group)
        self._normalize_plugin_instances()
        self._loaded = True
        logger.debug("Loaded %d entry-point plugins from %s", count, group)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching."""
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def configure(self, builder: ContainerBuilder) -> None:
        """Call every plugin's ``hexafun_configure`` hook with *builder*."""
        self._pm.hook.hexafun_configure(builder=builder)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            self._pm.register(plugin(), name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("hexafun")`` sets a ``hexafun_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False

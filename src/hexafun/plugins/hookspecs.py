"""Pluggy hook specifications for hexafun.

A plugin contributes use cases, ports, and adapters to a
:class:`~hexafun.core.builder.ContainerBuilder` before it is built.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from hexafun.core.builder import ContainerBuilder

PROJECT_NAME = "hexafun"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class HexafunHookSpec:
    """Hook specifications for the hexafun plugin system."""

    @hookspec
    def hexafun_configure(self, builder: ContainerBuilder) -> None:
        """Add registrations to *builder*. Called once per ``with_plugins``."""

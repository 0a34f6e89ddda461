"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy plugin loading, target resolution, and
centralized report emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hexafun.output.formatters import format_report

if TYPE_CHECKING:
    from hexafun.config.settings import HexafunSettings
    from hexafun.core.container import Container
    from hexafun.output.report import CommandReport
    from hexafun.plugins.manager import PluginManager


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are loaded lazily on first use so ``--help`` and ``--version``
    never import third-party entry points.
    """

    def __init__(self, settings: HexafunSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from hexafun.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (entry points loaded lazily on first access)."""
        if self._plugins is None:
            from hexafun.plugins.manager import PluginManager

            self._plugins = PluginManager.from_config(self.settings.plugins)
        return self._plugins

    def load_container(self, target: str) -> Container:
        """Resolve *target* (``module:attr``) to a container."""
        from hexafun.commands._loader import load_container

        return load_container(target, settings=self.settings, plugins=self.plugins)

    def emit(self, report: CommandReport) -> None:
        """Format and output a CommandReport with correct exit semantics.

        * Success (``report.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_report(report, json_output=self.settings.json_output)
        if report.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

"""Subcommand modules for hexafun.

Provides register_commands() which uses deferred imports to keep
``hexafun --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from hexafun.commands.inspect_cmd import inspect_cmd
    from hexafun.commands.invoke import invoke

    cli.add_command(inspect_cmd)
    cli.add_command(invoke)

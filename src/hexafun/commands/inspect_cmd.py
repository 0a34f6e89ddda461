"""Command: list the registrations held by a container."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hexafun.commands._base import HexaCommand
from hexafun.commands._loader import TargetError
from hexafun.errors import type_name
from hexafun.output.report import CommandReport, ReportError

if TYPE_CHECKING:
    from hexafun.commands._context import AppContext


@click.command(
    "inspect",
    cls=HexaCommand,
    examples="""\
  hexafun inspect myapp.wiring:app
  hexafun inspect myapp.wiring:make_app
  hexafun --json inspect myapp.wiring:builder""",
)
@click.argument("target")
@click.pass_obj
def inspect_cmd(app: AppContext, target: str) -> None:
    """Show use cases, ports, and adapters registered in TARGET (module:attr)."""
    try:
        container = app.load_container(target)
    except TargetError as exc:
        app.emit(
            CommandReport(
                ok=False,
                op="inspect",
                error=ReportError(code="BAD_TARGET", message=str(exc)),
            )
        )
        return

    app.emit(
        CommandReport(
            ok=True,
            op="inspect",
            data={
                "target": target,
                "use_cases": sorted(container.registered_use_case_names()),
                "ports": sorted(type_name(t) for t in container.registered_port_types()),
                "adapters": sorted(container.registered_adapter_names()),
            },
        )
    )

"""Command: invoke one use case with a JSON-decoded input."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click
from pydantic_core import to_jsonable_python

from hexafun.commands._base import HexaCommand
from hexafun.commands._loader import TargetError
from hexafun.domain.result import Result
from hexafun.errors import UnregisteredUseCaseError
from hexafun.output.report import CommandReport, ReportError

if TYPE_CHECKING:
    from hexafun.commands._context import AppContext


def _error(code: str, message: str, **detail: object) -> CommandReport:
    return CommandReport(
        ok=False,
        op="invoke",
        error=ReportError(code=code, message=message, detail=detail),
    )


@click.command(
    cls=HexaCommand,
    examples="""\
  hexafun invoke myapp.wiring:app double --input 5
  hexafun invoke myapp.wiring:app divide --input '[10, 2]'
  hexafun --json invoke myapp.wiring:app greet --input '"world"'""",
)
@click.argument("target")
@click.argument("name")
@click.option("--input", "raw_input", default="null", help="Use-case input as JSON.")
@click.pass_obj
def invoke(app: AppContext, target: str, name: str, raw_input: str) -> None:
    """Invoke use case NAME registered in TARGET (module:attr).

    A Failure result exits with status 1. Exceptions raised by the use case
    itself are not caught.
    """
    try:
        value = json.loads(raw_input)
    except json.JSONDecodeError as exc:
        app.emit(_error("BAD_INPUT", f"--input is not valid JSON: {exc}"))
        return

    try:
        container = app.load_container(target)
    except TargetError as exc:
        app.emit(_error("BAD_TARGET", str(exc)))
        return

    try:
        output = container.invoke_by_name(name, value)
    except UnregisteredUseCaseError as exc:
        available = sorted(container.registered_use_case_names())
        app.emit(_error("UNREGISTERED", str(exc), available=available))
        return

    if isinstance(output, Result):
        if output.is_failure():
            app.emit(_error("FAILURE", output.error(), use_case=name))
            return
        output = output.get()

    app.emit(
        CommandReport(
            ok=True,
            op="invoke",
            data={"use_case": name, "value": to_jsonable_python(output, fallback=repr)},
        )
    )

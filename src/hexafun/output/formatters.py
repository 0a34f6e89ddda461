"""Rich/JSON formatting for CommandReport.

Humans get Rich-rendered text (plain when not on a terminal); machines get
``--json``. Renderers are dispatched by ``report.op``; unknown ops fall back
to indented key-value pairs.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from hexafun.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from hexafun.output.report import CommandReport


def format_report(report: CommandReport, *, json_output: bool = False) -> str:
    """Format a CommandReport for display.

    Args:
        report: The report to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return report.model_dump_json(indent=2)

    console = create_console()
    if report.ok:
        renderer = _OP_RENDERERS.get(report.op, _render_generic)
        renderer(report, console)
    else:
        _render_error(report, console)
    return get_output(console).rstrip("\n")


def _status_line(console: Console, report: CommandReport) -> None:
    console.print(Text.assemble(("OK", "hexa.ok"), (f"  {report.op}", "hexa.op")))


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    console.print(Text.assemble((f"  {key}: ", "hexa.key"), str(value)))


def _render_generic(report: CommandReport, console: Console) -> None:
    _status_line(console, report)
    for key, value in report.data.items():
        _field(console, key, value)


def _render_inspect(report: CommandReport, console: Console) -> None:
    _status_line(console, report)
    _field(console, "target", report.data.get("target", ""))

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Registry")
    table.add_column("Name")
    rows = (
        ("use case", "use_cases", "hexa.use_case"),
        ("port", "ports", "hexa.port"),
        ("adapter", "adapters", "hexa.adapter"),
    )
    for label, key, style in rows:
        for name in report.data.get(key, []):
            table.add_row(Text(label, style=style), name)

    if table.row_count:
        console.print()
        console.print(table)
    else:
        console.print(Text("  (empty container)", style="dim"))


def _render_invoke(report: CommandReport, console: Console) -> None:
    _status_line(console, report)
    _field(console, "use_case", report.data.get("use_case", ""))
    _field(console, "value", report.data.get("value"))


def _render_error(report: CommandReport, console: Console) -> None:
    message = report.error.message if report.error else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "hexa.error"), (f"  {report.op}", "hexa.op"), f": {message}")
    )


_OP_RENDERERS: dict[str, Callable[[CommandReport, Console], None]] = {
    "inspect": _render_inspect,
    "invoke": _render_invoke,
}

"""Command 'presets' of repeatrule-cli - list named rules."""

import typer

from repeatrule_cli.recurrence.describe import describe
from repeatrule_cli.recurrence.presets import PRESETS
from repeatrule_cli.recurrence.wire import to_wire_format
from repeatrule_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import resolve_output


@command_wrapper
def presets_command(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List the named rule presets."""
    output_format = resolve_output(output)
    rows = [
        {"name": name, "rrule": to_wire_format(rule), "description": describe(rule)}
        for name, rule in PRESETS.items()
    ]
    # Pretty output of a list of dicts is a table
    format_output(rows, "table" if output_format == "pretty" else output_format)

"""Command 'decode' of repeatrule-cli - parse an RRULE or preset."""

import typer

from repeatrule_cli.recurrence.describe import describe
from repeatrule_cli.recurrence.presets import describe_rrule
from repeatrule_cli.recurrence.wire import to_wire_format
from repeatrule_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import parse_rule_argument, resolve_output


@command_wrapper
def decode_command(
    rrule: str = typer.Argument(..., help="RRULE value or preset name"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Parse an RRULE or preset name and show the rule it describes."""
    output_format = resolve_output(output)
    rule = parse_rule_argument(rrule)

    data = {"description": describe(rule), **rule.to_dict()}
    text = to_wire_format(rule)
    if text is not None:
        name = describe_rrule(text)
        if name != text:
            data["preset"] = name
    format_output(data, output_format)

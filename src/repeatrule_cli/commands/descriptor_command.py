"""Commands 'descriptor' and 'import-descriptor' of repeatrule-cli."""

from pathlib import Path

import typer

from repeatrule_cli.models.descriptor import PlatformDescriptor, PlatformFrequency
from repeatrule_cli.recurrence.describe import describe
from repeatrule_cli.recurrence.platform import (
    from_platform_descriptor,
    to_platform_descriptor,
)
from repeatrule_cli.recurrence.wire import to_wire_format
from repeatrule_cli.utils.exit_codes import ERROR_NOT_FOUND
from repeatrule_cli.utils.ui.formatters import format_output, format_warning

from .decorators import AppError, command_wrapper
from .utils import parse_date, parse_rule_argument, resolve_output


@command_wrapper
def descriptor_command(
    rrule: str = typer.Argument(..., help="RRULE value or preset name"),
    start: str | None = typer.Option(
        None, "--start", help="Event start date; fills empty selections"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show the platform recurrence descriptor for an RRULE."""
    output_format = resolve_output(output)
    rule = parse_rule_argument(rrule)
    start_date = parse_date(start, "--start") if start is not None else None

    descriptor = to_platform_descriptor(rule, start_date=start_date)
    if descriptor is None:
        if output_format == "pretty":
            format_warning("Rule does not repeat; no descriptor")
        else:
            format_output(None, output_format)
        return
    format_output(descriptor.model_dump(mode="json"), output_format)


@command_wrapper
def import_descriptor_command(
    path: Path = typer.Argument(..., help="JSON file holding a platform descriptor"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Convert a platform descriptor file into a repeat rule."""
    output_format = resolve_output(output)
    try:
        payload = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise AppError(f"File not found: {path}", exit_code=ERROR_NOT_FOUND) from e

    descriptor = PlatformDescriptor.model_validate_json(payload)
    rule = from_platform_descriptor(descriptor)
    if (
        output_format == "pretty"
        and descriptor.frequency in (PlatformFrequency.MONTHLY, PlatformFrequency.YEARLY)
        and len(descriptor.days_of_week or []) > 1
    ):
        format_warning("Only the first weekday pair is kept for this frequency")

    format_output(
        {"rrule": to_wire_format(rule), "description": describe(rule), **rule.to_dict()},
        output_format,
    )

"""Command 'preview' of repeatrule-cli - list upcoming occurrences."""

from datetime import UTC, datetime

import typer

from repeatrule_cli.recurrence.preview import next_occurrences
from repeatrule_cli.services.config_service import get_config_service
from repeatrule_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import parse_datetime, parse_rule_argument, resolve_output


@command_wrapper
def preview_command(
    rrule: str = typer.Argument(..., help="RRULE value or preset name"),
    start: str | None = typer.Option(
        None, "--start", "-s", help="First occurrence (ISO date/time); defaults to now"
    ),
    limit: int | None = typer.Option(
        None, "--limit", "-n", help="Number of occurrences (default from config)"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List the next occurrences of an RRULE."""
    output_format = resolve_output(output)
    rule = parse_rule_argument(rrule)
    if start is not None:
        start_at = parse_datetime(start, "--start")
    else:
        start_at = datetime.now(UTC).replace(microsecond=0)
    if limit is None:
        limit = get_config_service().config.preview.limit

    occurrences = [moment.isoformat() for moment in next_occurrences(rule, start_at, limit)]
    if output_format == "pretty":
        for moment in occurrences:
            print(moment)
        return
    format_output(occurrences, output_format)

"""Helpers shared by command modules."""

from __future__ import annotations

from datetime import UTC, date, datetime

from repeatrule_cli.models.rule import RepeatRule
from repeatrule_cli.recurrence.presets import resolve_preset
from repeatrule_cli.recurrence.wire import from_wire_format
from repeatrule_cli.services.config_service import get_config_service
from repeatrule_cli.utils.exit_codes import ERROR_INVALID_ARGS
from repeatrule_cli.utils.ui.formatters import OUTPUT_FORMATS

from .decorators import AppError


def resolve_output(output: str | None) -> str:
    """Return the requested output format, or the configured default."""
    if output is None:
        return get_config_service().config.output.format
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}'. Use one of: {', '.join(OUTPUT_FORMATS)}",
            exit_code=ERROR_INVALID_ARGS,
        )
    return output


def parse_date(value: str, option: str) -> date:
    """Parse a YYYY-MM-DD option value."""
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise AppError(
            f"{option} must be a date (YYYY-MM-DD), got '{value}'",
            exit_code=ERROR_INVALID_ARGS,
        ) from e


def parse_datetime(value: str, option: str) -> datetime:
    """Parse an ISO date or datetime option value; naive values are UTC."""
    try:
        moment = datetime.fromisoformat(value)
    except ValueError as e:
        raise AppError(
            f"{option} must be an ISO date or datetime, got '{value}'",
            exit_code=ERROR_INVALID_ARGS,
        ) from e
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment


def parse_rule_argument(value: str) -> RepeatRule:
    """Parse a rule argument given as a preset name or an RRULE value."""
    preset = resolve_preset(value)
    if preset is not None:
        return preset
    return from_wire_format(value)

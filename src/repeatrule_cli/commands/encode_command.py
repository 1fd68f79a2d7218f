"""Command 'encode' of repeatrule-cli - build a rule and print its RRULE."""

from typing import Any

import typer

from repeatrule_cli.errors import InvalidCodeError
from repeatrule_cli.models.rule import RepeatRule, RuleFallback
from repeatrule_cli.models.types import EndType, Frequency, MonthMode, YearMode
from repeatrule_cli.recurrence.describe import describe
from repeatrule_cli.recurrence.ordinals import rrule_symbol_to_weekday
from repeatrule_cli.recurrence.wire import to_wire_format
from repeatrule_cli.services.config_service import get_config_service
from repeatrule_cli.utils.exit_codes import ERROR_INVALID_ARGS
from repeatrule_cli.utils.ui.formatters import format_output

from .decorators import AppError, command_wrapper
from .utils import parse_date, parse_datetime, resolve_output


def _weekday(symbol: str) -> int:
    try:
        return rrule_symbol_to_weekday(symbol)
    except InvalidCodeError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e


def build_rule(
    freq: Frequency,
    interval: int = 1,
    weekdays: list[str] | None = None,
    month_days: list[int] | None = None,
    months: list[int] | None = None,
    by_weekday: bool = False,
    ordinal: int | None = None,
    on_weekday: str | None = None,
    count: int | None = None,
    until: str | None = None,
) -> RepeatRule:
    """Build a RepeatRule from command-line option values."""
    if count is not None and until is not None:
        raise AppError("Use either --count or --until, not both", ERROR_INVALID_ARGS)

    fields: dict[str, Any] = {"frequency": freq, "interval": interval}

    if count is not None:
        fields.update(end_type=EndType.COUNT, count=count)
    elif until is not None:
        fields.update(end_type=EndType.UNTIL, end_date=parse_datetime(until, "--until"))

    if freq is Frequency.WEEKLY:
        fields["weekdays"] = frozenset(_weekday(s) for s in weekdays or [])
    elif freq is Frequency.MONTHLY:
        if by_weekday:
            fields["month_mode"] = MonthMode.BY_WEEKDAY
        else:
            fields.update(month_mode=MonthMode.BY_DATE, month_days=frozenset(month_days or []))
    elif freq is Frequency.YEARLY:
        fields["months"] = frozenset(months or [])
        if by_weekday:
            fields["year_mode"] = YearMode.BY_WEEKDAY
        else:
            fields.update(year_mode=YearMode.BY_DATE, month_days=frozenset(month_days or []))

    if by_weekday:
        fields["week_ordinal"] = ordinal
        fields["weekday"] = _weekday(on_weekday) if on_weekday else None

    return RepeatRule(**fields)


@command_wrapper
def encode_command(
    freq: Frequency = typer.Option(..., "--freq", "-f", help="Repeat frequency"),
    interval: int = typer.Option(1, "--interval", "-i", help="Units between occurrences (1-99)"),
    weekday: list[str] = typer.Option(
        None, "--weekday", "-w", help="Weekday for weekly rules (SU, MO, ...); repeatable"
    ),
    month_day: list[int] = typer.Option(
        None, "--month-day", "-d", help="Day of month (1-31); repeatable"
    ),
    month: list[int] = typer.Option(
        None, "--month", "-m", help="Month for yearly rules (1-12); repeatable"
    ),
    by_weekday: bool = typer.Option(
        False, "--by-weekday", help="Monthly/yearly: repeat on an ordinal weekday"
    ),
    ordinal: int | None = typer.Option(
        None, "--ordinal", help="1-5 counts forward, 6 = second to last, 7 = last"
    ),
    on_weekday: str | None = typer.Option(
        None, "--on-weekday", help="Weekday paired with --ordinal (SU, MO, ...)"
    ),
    count: int | None = typer.Option(None, "--count", "-c", help="Stop after N occurrences"),
    until: str | None = typer.Option(None, "--until", help="Stop at this date/time (ISO)"),
    start: str | None = typer.Option(
        None, "--start", help="Event start date; fills empty selections"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Build a repeat rule from options and print its RRULE."""
    output_format = resolve_output(output)
    rule = build_rule(
        freq,
        interval=interval,
        weekdays=weekday,
        month_days=month_day,
        months=month,
        by_weekday=by_weekday,
        ordinal=ordinal,
        on_weekday=on_weekday,
        count=count,
        until=until,
    )

    if start is not None and get_config_service().config.editor.apply_fallback:
        rule = rule.with_fallback(RuleFallback.from_date(parse_date(start, "--start")))

    rrule = to_wire_format(rule)
    if output_format == "pretty":
        print(rrule or "")
        return
    format_output(
        {"rrule": rrule, "description": describe(rule), "rule": rule.to_dict()},
        output_format,
    )

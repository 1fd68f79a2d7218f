"""Conversion between repeat rules and platform recurrence descriptors."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from repeatrule_cli.models.descriptor import (
    DayOfWeek,
    PlatformDescriptor,
    PlatformFrequency,
    RecurrenceEnd,
)
from repeatrule_cli.models.patterns import (
    CountEnd,
    EndCondition,
    MonthlyByDatePattern,
    MonthlyByWeekdayPattern,
    UntilEnd,
    WeeklyPattern,
    YearlyByDatePattern,
    YearlyByWeekdayPattern,
)
from repeatrule_cli.models.rule import RepeatRule, RuleFallback
from repeatrule_cli.models.types import EndType, Frequency, MonthMode, YearMode
from repeatrule_cli.recurrence.ordinals import (
    ordinal_to_week_number,
    week_number_to_ordinal,
)

logger = logging.getLogger(__name__)

_TO_PLATFORM: dict[Frequency, PlatformFrequency] = {
    Frequency.DAILY: PlatformFrequency.DAILY,
    Frequency.WEEKLY: PlatformFrequency.WEEKLY,
    Frequency.MONTHLY: PlatformFrequency.MONTHLY,
    Frequency.YEARLY: PlatformFrequency.YEARLY,
}
_FROM_PLATFORM: dict[PlatformFrequency, Frequency] = {
    platform: frequency for frequency, platform in _TO_PLATFORM.items()
}


def to_platform_descriptor(
    rule: RepeatRule, start_date: date | None = None
) -> PlatformDescriptor | None:
    """Build the platform descriptor for *rule*.

    Args:
        rule: Rule to convert
        start_date: Optional event start; when given, empty selections are
            filled from it first

    Returns:
        The descriptor, or None when the rule does not repeat
    """
    if rule.is_none:
        return None

    platform_frequency = _TO_PLATFORM.get(rule.frequency)
    if platform_frequency is None:
        return None

    if start_date is not None:
        rule = rule.with_fallback(RuleFallback.from_date(start_date))
    pattern = rule.to_pattern()

    fields: dict[str, Any] = {
        "frequency": platform_frequency,
        "interval": max(1, pattern.interval),
        "recurrence_end": _recurrence_end(pattern.end),
    }

    if isinstance(pattern, WeeklyPattern):
        if pattern.weekdays:
            fields["days_of_week"] = [
                DayOfWeek(day_of_week=day) for day in sorted(pattern.weekdays)
            ]

    elif isinstance(pattern, MonthlyByDatePattern):
        if pattern.month_days:
            fields["days_of_month"] = sorted(pattern.month_days)

    elif isinstance(pattern, MonthlyByWeekdayPattern):
        fields["days_of_week"] = [_ordinal_day(pattern.ordinal, pattern.weekday)]

    elif isinstance(pattern, YearlyByDatePattern):
        if pattern.months:
            fields["months_of_year"] = sorted(pattern.months)
        if pattern.month_days:
            fields["days_of_month"] = sorted(pattern.month_days)

    elif isinstance(pattern, YearlyByWeekdayPattern):
        if pattern.months:
            fields["months_of_year"] = sorted(pattern.months)
        fields["days_of_week"] = [_ordinal_day(pattern.ordinal, pattern.weekday)]

    return PlatformDescriptor(**fields)


def _ordinal_day(ordinal: int, weekday: int) -> DayOfWeek:
    return DayOfWeek(day_of_week=weekday, week_number=ordinal_to_week_number(ordinal))


def _recurrence_end(end: EndCondition) -> RecurrenceEnd | None:
    if isinstance(end, CountEnd):
        return RecurrenceEnd.after_occurrences(end.count)
    if isinstance(end, UntilEnd):
        return RecurrenceEnd.at(end.end_date)
    return None


def from_platform_descriptor(descriptor: PlatformDescriptor) -> RepeatRule:
    """Rebuild a repeat rule from an externally created descriptor.

    Monthly and yearly rules keep only the first weekday pair; a rule with
    several ordinal weekdays cannot be expressed and the rest are dropped.
    A week number with no ordinal leaves the weekday fields unset and the
    mode falls back to ``byDate``.
    """
    frequency = _FROM_PLATFORM[descriptor.frequency]
    fields: dict[str, Any] = {
        "frequency": frequency,
        "interval": max(1, descriptor.interval),
    }

    end = descriptor.recurrence_end
    if end is not None:
        if end.occurrence_count > 0:
            fields.update(end_type=EndType.COUNT, count=end.occurrence_count)
        elif end.end_date is not None:
            fields.update(end_type=EndType.UNTIL, end_date=end.end_date)

    days_of_week = descriptor.days_of_week or []
    days_of_month = frozenset(descriptor.days_of_month or [])

    if frequency is Frequency.WEEKLY:
        fields["weekdays"] = frozenset(day.day_of_week for day in days_of_week)

    elif frequency is Frequency.MONTHLY:
        weekday_fields = {} if days_of_month else _first_ordinal_weekday(days_of_week)
        if weekday_fields:
            fields.update(month_mode=MonthMode.BY_WEEKDAY, **weekday_fields)
        else:
            fields.update(month_mode=MonthMode.BY_DATE, month_days=days_of_month)

    elif frequency is Frequency.YEARLY:
        fields["months"] = frozenset(descriptor.months_of_year or [])
        weekday_fields = _first_ordinal_weekday(days_of_week)
        if weekday_fields:
            fields.update(year_mode=YearMode.BY_WEEKDAY, **weekday_fields)
        else:
            fields.update(year_mode=YearMode.BY_DATE, month_days=days_of_month)

    return RepeatRule(**fields)


def _first_ordinal_weekday(days_of_week: list[DayOfWeek]) -> dict[str, int]:
    if not days_of_week:
        return {}
    if len(days_of_week) > 1:
        logger.debug(
            "descriptor has %d weekday pairs, keeping the first", len(days_of_week)
        )
    first = days_of_week[0]
    ordinal = week_number_to_ordinal(first.week_number)
    if ordinal is None:
        logger.debug("week number %d has no ordinal", first.week_number)
        return {}
    return {"week_ordinal": ordinal, "weekday": first.day_of_week}

"""Human-readable descriptions of repeat rules."""

from __future__ import annotations

import calendar

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
from repeatrule_cli.models.rule import RepeatRule
from repeatrule_cli.models.types import Frequency

WEEKDAY_NAMES = {
    1: "Sunday",
    2: "Monday",
    3: "Tuesday",
    4: "Wednesday",
    5: "Thursday",
    6: "Friday",
    7: "Saturday",
}

ORDINAL_NAMES = {
    1: "first",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    6: "second to last",
    7: "last",
}

_UNITS = {
    Frequency.DAILY: "day",
    Frequency.WEEKLY: "week",
    Frequency.MONTHLY: "month",
    Frequency.YEARLY: "year",
}


def _join_words(words: list[str]) -> str:
    if len(words) <= 1:
        return "".join(words)
    return f"{', '.join(words[:-1])} and {words[-1]}"


def _day_of_month(day: int) -> str:
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def _end_phrase(end: EndCondition) -> str:
    if isinstance(end, CountEnd):
        return ", once" if end.count == 1 else f", {end.count} times"
    if isinstance(end, UntilEnd):
        return f", until {end.end_date:%Y-%m-%d}"
    return ""


def describe(rule: RepeatRule) -> str:
    """Describe *rule* in a short English sentence.

    Examples:
        "Every 2 weeks on Monday, Wednesday and Friday"
        "Every month on the last Friday, 5 times"
    """
    pattern = rule.to_pattern()
    if pattern is None:
        return "Does not repeat"

    unit = _UNITS[pattern.frequency]
    text = f"Every {unit}" if pattern.interval == 1 else f"Every {pattern.interval} {unit}s"

    if isinstance(pattern, WeeklyPattern) and pattern.weekdays:
        names = [WEEKDAY_NAMES[day] for day in sorted(pattern.weekdays)]
        text += f" on {_join_words(names)}"

    elif isinstance(pattern, MonthlyByDatePattern) and pattern.month_days:
        days = [_day_of_month(day) for day in sorted(pattern.month_days)]
        text += f" on the {_join_words(days)}"

    elif isinstance(pattern, MonthlyByWeekdayPattern):
        text += f" on the {ORDINAL_NAMES[pattern.ordinal]} {WEEKDAY_NAMES[pattern.weekday]}"

    elif isinstance(pattern, (YearlyByDatePattern, YearlyByWeekdayPattern)):
        if pattern.months:
            months = [calendar.month_name[month] for month in sorted(pattern.months)]
            text += f" in {_join_words(months)}"
        if isinstance(pattern, YearlyByWeekdayPattern):
            text += (
                f" on the {ORDINAL_NAMES[pattern.ordinal]}"
                f" {WEEKDAY_NAMES[pattern.weekday]}"
            )
        elif pattern.month_days:
            days = [_day_of_month(day) for day in sorted(pattern.month_days)]
            text += f" on the {_join_words(days)}"

    return text + _end_phrase(pattern.end)

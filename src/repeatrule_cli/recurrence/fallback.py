"""Date helpers used to derive editor fallbacks from an event's start date."""

from __future__ import annotations

from datetime import date, timedelta


def weekday_code(day: date) -> int:
    """Return the weekday code of *day* (1 = Sunday ... 7 = Saturday)."""
    return day.isoweekday() % 7 + 1


def _leaves_month(day: date, weeks: int) -> bool:
    """Whether the same weekday *weeks* later falls in another month."""
    try:
        return (day + timedelta(weeks=weeks)).month != day.month
    except OverflowError:
        # Past date.max, i.e. beyond the end of December 9999
        return True


def ordinal_for_date(day: date) -> int:
    """Return the ordinal (1-7) that names *day*'s weekday within its month.

    Dates in the final week of the month map to 7 (last) and dates in the
    week before it map to 6 (second to last); earlier dates count forward.
    """
    if _leaves_month(day, 1):
        return 7
    if _leaves_month(day, 2):
        return 6
    return (day.day - 1) // 7 + 1

"""Platform recurrence descriptor models.

Mirrors the shape of a host calendar framework's recurrence object: a
frequency, an interval, an optional end, and weekday pairs / day lists /
month lists. Weekday selections are (weekday, week number) pairs where the
week number is 0 for "every such weekday", 1..5 to count forward and
negative values to count back from the end of the period.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from repeatrule_cli.models.types import Month, MonthDay, Weekday


class PlatformFrequency(str, Enum):
    """Frequencies the host recurrence type supports."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class DayOfWeek(BaseModel):
    """A weekday, optionally pinned to a week within the period."""

    model_config = {"frozen": True}

    day_of_week: Weekday
    week_number: int = Field(default=0, ge=-53, le=53)


class RecurrenceEnd(BaseModel):
    """End of a recurrence: an occurrence count or an end date.

    An occurrence count of 0 means the end is date-based.
    """

    model_config = {"frozen": True}

    occurrence_count: int = Field(default=0, ge=0)
    end_date: datetime | None = None

    @classmethod
    def after_occurrences(cls, count: int) -> RecurrenceEnd:
        return cls(occurrence_count=count)

    @classmethod
    def at(cls, end_date: datetime) -> RecurrenceEnd:
        return cls(end_date=end_date)


class PlatformDescriptor(BaseModel):
    """Host recurrence descriptor.

    Attributes:
        frequency: Repeat unit
        interval: Units between occurrences
        recurrence_end: End condition, None for open-ended
        days_of_week: Weekday pairs
        days_of_month: Days of the month
        months_of_year: Months of the year
    """

    model_config = {"frozen": True}

    frequency: PlatformFrequency
    interval: int = 1
    recurrence_end: RecurrenceEnd | None = None
    days_of_week: list[DayOfWeek] | None = None
    days_of_month: list[MonthDay] | None = None
    months_of_year: list[Month] | None = None

"""Tagged recurrence patterns.

Each pattern carries only the fields its frequency and mode use, so a
combination such as a weekly rule with month days cannot be built. The
flat ``RepeatRule`` lowers to one of these before conversion.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, Field, PositiveInt

from repeatrule_cli.models.types import (
    MAX_INTERVAL,
    MIN_INTERVAL,
    Frequency,
    Month,
    MonthDay,
    Ordinal,
    Weekday,
)


class NeverEnd(BaseModel):
    """Open-ended recurrence."""

    model_config = {"frozen": True}

    kind: Literal["never"] = "never"


class CountEnd(BaseModel):
    """Recurrence that stops after a number of occurrences."""

    model_config = {"frozen": True}

    kind: Literal["count"] = "count"
    count: PositiveInt


class UntilEnd(BaseModel):
    """Recurrence that stops at a point in time."""

    model_config = {"frozen": True}

    kind: Literal["until"] = "until"
    end_date: datetime


EndCondition = Annotated[
    NeverEnd | CountEnd | UntilEnd, Field(discriminator="kind")
]


class _Pattern(BaseModel):
    model_config = {"frozen": True}

    frequency: ClassVar[Frequency]

    interval: int = Field(default=1, ge=MIN_INTERVAL, le=MAX_INTERVAL)
    end: EndCondition = Field(default_factory=NeverEnd)


class DailyPattern(_Pattern):
    frequency: ClassVar[Frequency] = Frequency.DAILY

    kind: Literal["daily"] = "daily"


class WeeklyPattern(_Pattern):
    frequency: ClassVar[Frequency] = Frequency.WEEKLY

    kind: Literal["weekly"] = "weekly"
    weekdays: frozenset[Weekday] = frozenset()


class MonthlyByDatePattern(_Pattern):
    frequency: ClassVar[Frequency] = Frequency.MONTHLY

    kind: Literal["monthly_by_date"] = "monthly_by_date"
    month_days: frozenset[MonthDay] = frozenset()


class MonthlyByWeekdayPattern(_Pattern):
    frequency: ClassVar[Frequency] = Frequency.MONTHLY

    kind: Literal["monthly_by_weekday"] = "monthly_by_weekday"
    ordinal: Ordinal
    weekday: Weekday


class YearlyByDatePattern(_Pattern):
    frequency: ClassVar[Frequency] = Frequency.YEARLY

    kind: Literal["yearly_by_date"] = "yearly_by_date"
    months: frozenset[Month] = frozenset()
    month_days: frozenset[MonthDay] = frozenset()


class YearlyByWeekdayPattern(_Pattern):
    frequency: ClassVar[Frequency] = Frequency.YEARLY

    kind: Literal["yearly_by_weekday"] = "yearly_by_weekday"
    months: frozenset[Month] = frozenset()
    ordinal: Ordinal
    weekday: Weekday


RecurrencePattern = Annotated[
    DailyPattern
    | WeeklyPattern
    | MonthlyByDatePattern
    | MonthlyByWeekdayPattern
    | YearlyByDatePattern
    | YearlyByWeekdayPattern,
    Field(discriminator="kind"),
]

"""Canonical repeat rule model.

``RepeatRule`` is the flat value an editor fills in: one field per control,
with mode enums deciding which fields matter. It is immutable and compares
structurally. Conversions go through ``to_pattern()``, which keeps only the
fields the frequency and mode actually use.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from repeatrule_cli.models.patterns import (
    CountEnd,
    DailyPattern,
    EndCondition,
    MonthlyByDatePattern,
    MonthlyByWeekdayPattern,
    NeverEnd,
    RecurrencePattern,
    UntilEnd,
    WeeklyPattern,
    YearlyByDatePattern,
    YearlyByWeekdayPattern,
)
from repeatrule_cli.models.types import (
    MAX_INTERVAL,
    MIN_INTERVAL,
    EndType,
    Frequency,
    Month,
    MonthDay,
    MonthMode,
    Ordinal,
    Weekday,
    YearMode,
)
from repeatrule_cli.recurrence.fallback import ordinal_for_date, weekday_code


class RuleFallback(BaseModel):
    """Selections to use when an editor leaves a set empty.

    Attributes:
        weekday: Weekday code of the event's start date
        day: Day of month of the start date
        month: Month of the start date
        ordinal: Ordinal of the start date's weekday within its month
    """

    model_config = {"frozen": True}

    weekday: Weekday
    day: MonthDay
    month: Month
    ordinal: Ordinal

    @classmethod
    def from_date(cls, start: date) -> RuleFallback:
        """Derive fallbacks from an event start date."""
        return cls(
            weekday=weekday_code(start),
            day=start.day,
            month=start.month,
            ordinal=ordinal_for_date(start),
        )


class RepeatRule(BaseModel):
    """A recurring-event pattern as edited by the user.

    Attributes:
        frequency: Repeat unit, or ``none`` for a one-off event
        interval: Units between occurrences, clamped into [1, 99]
        end_type: How the recurrence stops
        count: Occurrence count, used when end_type is ``count``
        end_date: Last moment of the recurrence, used when end_type is ``until``
        weekdays: Weekday codes for weekly rules
        month_mode: Monthly selection mode
        month_days: Days of the month for by-date monthly and yearly rules
        week_ordinal: Ordinal (1-7) for by-weekday monthly and yearly rules
        weekday: Weekday code paired with week_ordinal
        months: Months for yearly rules
        year_mode: Yearly selection mode
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    frequency: Frequency
    interval: int = 1
    end_type: EndType = EndType.NEVER
    count: int | None = None
    end_date: datetime | None = None
    weekdays: frozenset[Weekday] = frozenset()
    month_mode: MonthMode | None = None
    month_days: frozenset[MonthDay] = frozenset()
    week_ordinal: Ordinal | None = None
    weekday: Weekday | None = None
    months: frozenset[Month] = frozenset()
    year_mode: YearMode | None = None

    @field_validator("interval")
    @classmethod
    def clamp_interval(cls, v: int) -> int:
        """Clamp the interval into the supported range."""
        return max(MIN_INTERVAL, min(MAX_INTERVAL, v))

    @field_serializer("weekdays", "month_days", "months")
    def serialize_codes(self, values: frozenset[int]) -> list[int]:
        return sorted(values)

    @classmethod
    def none(cls) -> RepeatRule:
        """Return the rule for an event that does not repeat."""
        return cls(frequency=Frequency.NONE)

    @property
    def is_none(self) -> bool:
        return self.frequency is Frequency.NONE

    @property
    def has_weekday_ordinal(self) -> bool:
        return self.week_ordinal is not None and self.weekday is not None

    def end_condition(self) -> EndCondition:
        """Return the end condition the end fields actually describe."""
        if self.end_type is EndType.COUNT and self.count is not None and self.count > 0:
            return CountEnd(count=self.count)
        if self.end_type is EndType.UNTIL and self.end_date is not None:
            return UntilEnd(end_date=self.end_date)
        return NeverEnd()

    def to_pattern(self) -> RecurrencePattern | None:
        """Lower the rule to its tagged pattern, or None for ``none``.

        Under-specified by-weekday selections lower to the by-date pattern
        with no days, so the dependent selection is simply left out.
        """
        if self.is_none:
            return None

        common: dict[str, Any] = {
            "interval": self.interval,
            "end": self.end_condition(),
        }

        if self.frequency is Frequency.DAILY:
            return DailyPattern(**common)

        if self.frequency is Frequency.WEEKLY:
            return WeeklyPattern(weekdays=self.weekdays, **common)

        if self.frequency is Frequency.MONTHLY:
            if self.month_mode is MonthMode.BY_WEEKDAY and self.has_weekday_ordinal:
                return MonthlyByWeekdayPattern(
                    ordinal=self.week_ordinal, weekday=self.weekday, **common
                )
            if self.month_mode is MonthMode.BY_DATE:
                return MonthlyByDatePattern(month_days=self.month_days, **common)
            return MonthlyByDatePattern(**common)

        # Yearly: an incomplete byWeekday rule keeps only its months and never
        # falls back to month days; an unset mode still uses month days.
        if self.year_mode is YearMode.BY_WEEKDAY:
            if self.has_weekday_ordinal:
                return YearlyByWeekdayPattern(
                    months=self.months,
                    ordinal=self.week_ordinal,
                    weekday=self.weekday,
                    **common,
                )
            return YearlyByDatePattern(months=self.months, **common)
        return YearlyByDatePattern(
            months=self.months, month_days=self.month_days, **common
        )

    @classmethod
    def from_pattern(cls, pattern: RecurrencePattern | None) -> RepeatRule:
        """Lift a tagged pattern back to the flat editor value."""
        if pattern is None:
            return cls.none()

        fields: dict[str, Any] = {
            "frequency": pattern.frequency,
            "interval": pattern.interval,
        }

        end = pattern.end
        if isinstance(end, CountEnd):
            fields.update(end_type=EndType.COUNT, count=end.count)
        elif isinstance(end, UntilEnd):
            fields.update(end_type=EndType.UNTIL, end_date=end.end_date)

        if isinstance(pattern, WeeklyPattern):
            fields["weekdays"] = pattern.weekdays
        elif isinstance(pattern, MonthlyByDatePattern):
            fields.update(month_mode=MonthMode.BY_DATE, month_days=pattern.month_days)
        elif isinstance(pattern, MonthlyByWeekdayPattern):
            fields.update(
                month_mode=MonthMode.BY_WEEKDAY,
                week_ordinal=pattern.ordinal,
                weekday=pattern.weekday,
            )
        elif isinstance(pattern, YearlyByDatePattern):
            fields.update(
                year_mode=YearMode.BY_DATE,
                months=pattern.months,
                month_days=pattern.month_days,
            )
        elif isinstance(pattern, YearlyByWeekdayPattern):
            fields.update(
                year_mode=YearMode.BY_WEEKDAY,
                months=pattern.months,
                week_ordinal=pattern.ordinal,
                weekday=pattern.weekday,
            )

        return cls(**fields)

    def with_fallback(self, fallback: RuleFallback) -> RepeatRule:
        """Return a copy whose empty selections are filled from *fallback*.

        Only selections the frequency uses are touched; populated fields are
        kept as they are. A missing month or year mode becomes ``byDate``.
        """
        updates: dict[str, Any] = {}

        if self.frequency is Frequency.WEEKLY:
            if not self.weekdays:
                updates["weekdays"] = frozenset({fallback.weekday})

        elif self.frequency is Frequency.MONTHLY:
            mode = self.month_mode or MonthMode.BY_DATE
            updates["month_mode"] = mode
            if mode is MonthMode.BY_DATE and not self.month_days:
                updates["month_days"] = frozenset({fallback.day})
            elif mode is MonthMode.BY_WEEKDAY:
                updates.update(self._ordinal_fallback(fallback))

        elif self.frequency is Frequency.YEARLY:
            mode = self.year_mode or YearMode.BY_DATE
            updates["year_mode"] = mode
            if not self.months:
                updates["months"] = frozenset({fallback.month})
            if mode is YearMode.BY_DATE and not self.month_days:
                updates["month_days"] = frozenset({fallback.day})
            elif mode is YearMode.BY_WEEKDAY:
                updates.update(self._ordinal_fallback(fallback))

        if not updates:
            return self
        return self.model_copy(update=updates)

    def _ordinal_fallback(self, fallback: RuleFallback) -> dict[str, int]:
        updates = {}
        if self.week_ordinal is None:
            updates["week_ordinal"] = fallback.ordinal
        if self.weekday is None:
            updates["weekday"] = fallback.weekday
        return updates

    def to_dict(self) -> dict[str, Any]:
        """Serialize populated fields to a JSON-ready dict with camelCase keys."""
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {key: value for key, value in data.items() if value != []}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RepeatRule:
        """Build a rule from a dict produced by ``to_dict``."""
        return cls.model_validate(data)

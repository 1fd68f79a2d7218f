"""Unit tests for start-date fallback helpers."""

from __future__ import annotations

from datetime import date

import pytest

from repeatrule_cli.models.rule import RepeatRule, RuleFallback
from repeatrule_cli.models.types import Frequency, MonthMode
from repeatrule_cli.recurrence.fallback import ordinal_for_date, weekday_code
from repeatrule_cli.recurrence.wire import to_wire_format


class TestWeekdayCode:
    @pytest.mark.parametrize(
        "day,expected",
        [
            (date(2025, 1, 5), 1),  # Sunday
            (date(2025, 1, 6), 2),  # Monday
            (date(2025, 1, 10), 6),  # Friday
            (date(2025, 1, 11), 7),  # Saturday
        ],
    )
    def test_codes(self, day, expected):
        assert weekday_code(day) == expected


class TestOrdinalForDate:
    @pytest.mark.parametrize(
        "day,expected",
        [
            (date(2025, 1, 1), 1),
            (date(2025, 1, 8), 2),
            (date(2025, 1, 15), 3),
            (date(2025, 1, 22), 6),
            (date(2025, 1, 29), 7),
            (date(2025, 1, 31), 7),
            (date(2025, 2, 14), 2),
            (date(2025, 2, 15), 6),
            (date(2025, 2, 28), 7),
            (date(9999, 12, 18), 6),
            (date(9999, 12, 30), 7),
            (date.max, 7),
        ],
    )
    def test_ordinals(self, day, expected):
        assert ordinal_for_date(day) == expected

    def test_result_is_always_a_valid_ordinal(self):
        for offset in range(366):
            day = date.fromordinal(date(2024, 1, 1).toordinal() + offset)
            assert 1 <= ordinal_for_date(day) <= 7


class TestRuleFallbackFromDate:
    def test_last_friday_of_january(self):
        fallback = RuleFallback.from_date(date(2025, 1, 31))
        assert fallback == RuleFallback(weekday=6, day=31, month=1, ordinal=7)

    def test_first_wednesday(self):
        fallback = RuleFallback.from_date(date(2025, 1, 1))
        assert (fallback.weekday, fallback.ordinal) == (4, 1)

    def test_last_representable_date(self):
        fallback = RuleFallback.from_date(date.max)
        assert (fallback.day, fallback.month, fallback.ordinal) == (31, 12, 7)

    def test_wire_format_from_last_week_of_calendar(self):
        rule = RepeatRule(frequency=Frequency.MONTHLY, month_mode=MonthMode.BY_WEEKDAY)
        text = to_wire_format(rule, start_date=date(9999, 12, 30))
        assert text.startswith("FREQ=MONTHLY;BYDAY=-1")

"""Unit tests for English rule descriptions."""

from __future__ import annotations

import pytest

from repeatrule_cli.models.rule import RepeatRule
from repeatrule_cli.models.types import EndType, Frequency, MonthMode, YearMode
from repeatrule_cli.recurrence.describe import describe


class TestDescribe:
    def test_none(self):
        assert describe(RepeatRule.none()) == "Does not repeat"

    def test_daily(self):
        assert describe(RepeatRule(frequency=Frequency.DAILY)) == "Every day"

    def test_interval_pluralizes(self):
        assert describe(RepeatRule(frequency=Frequency.DAILY, interval=3)) == "Every 3 days"

    def test_weekly_days(self):
        rule = RepeatRule(
            frequency=Frequency.WEEKLY, interval=2, weekdays=frozenset({6, 2, 4})
        )
        assert describe(rule) == "Every 2 weeks on Monday, Wednesday and Friday"

    def test_single_weekday(self):
        rule = RepeatRule(frequency=Frequency.WEEKLY, weekdays=frozenset({1}))
        assert describe(rule) == "Every week on Sunday"

    def test_monthly_last_friday(self, last_friday_rule):
        assert describe(last_friday_rule) == "Every month on the last Friday, 5 times"

    def test_second_to_last(self):
        rule = RepeatRule(
            frequency=Frequency.MONTHLY,
            month_mode=MonthMode.BY_WEEKDAY,
            week_ordinal=6,
            weekday=2,
        )
        assert describe(rule) == "Every month on the second to last Monday"

    @pytest.mark.parametrize(
        "days,text",
        [
            ({1}, "the 1st"),
            ({2, 3}, "the 2nd and 3rd"),
            ({11, 12, 13}, "the 11th, 12th and 13th"),
            ({21, 22, 23, 31}, "the 21st, 22nd, 23rd and 31st"),
        ],
    )
    def test_month_day_suffixes(self, days, text):
        rule = RepeatRule(
            frequency=Frequency.MONTHLY,
            month_mode=MonthMode.BY_DATE,
            month_days=frozenset(days),
        )
        assert describe(rule) == f"Every month on {text}"

    def test_yearly_by_date(self):
        rule = RepeatRule(
            frequency=Frequency.YEARLY,
            months=frozenset({12}),
            year_mode=YearMode.BY_DATE,
            month_days=frozenset({25}),
        )
        assert describe(rule) == "Every year in December on the 25th"

    def test_yearly_by_weekday(self):
        rule = RepeatRule(
            frequency=Frequency.YEARLY,
            months=frozenset({11}),
            year_mode=YearMode.BY_WEEKDAY,
            week_ordinal=4,
            weekday=5,
        )
        assert describe(rule) == "Every year in November on the fourth Thursday"

    def test_until(self, new_year_eve):
        rule = RepeatRule(
            frequency=Frequency.DAILY, end_type=EndType.UNTIL, end_date=new_year_eve
        )
        assert describe(rule) == "Every day, until 2025-12-31"

    def test_once(self):
        rule = RepeatRule(frequency=Frequency.DAILY, end_type=EndType.COUNT, count=1)
        assert describe(rule) == "Every day, once"

"""Unit tests for named repeat rule presets."""

from __future__ import annotations

import pytest

from repeatrule_cli.models.types import Frequency
from repeatrule_cli.recurrence.presets import PRESETS, describe_rrule, resolve_preset
from repeatrule_cli.recurrence.wire import to_wire_format


class TestPresetRules:
    @pytest.mark.parametrize(
        "name,rrule",
        [
            ("daily", "FREQ=DAILY"),
            ("weekdays", "FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR"),
            ("weekly", "FREQ=WEEKLY"),
            ("bi-weekly", "FREQ=WEEKLY;INTERVAL=2"),
            ("monthly", "FREQ=MONTHLY"),
            ("yearly", "FREQ=YEARLY"),
        ],
    )
    def test_wire_form(self, name, rrule):
        assert to_wire_format(PRESETS[name]) == rrule

    def test_all_presets_present(self):
        expected = {"daily", "weekdays", "weekly", "bi-weekly", "monthly", "yearly"}
        assert set(PRESETS) == expected


class TestResolvePreset:
    def test_returns_rule(self):
        rule = resolve_preset("bi-weekly")
        assert rule.frequency is Frequency.WEEKLY
        assert rule.interval == 2

    def test_case_insensitive(self):
        assert resolve_preset("DAILY") == PRESETS["daily"]
        assert resolve_preset(" Weekly ") == PRESETS["weekly"]

    @pytest.mark.parametrize("name", ["hourly", "fortnightly", "", "FREQ=DAILY"])
    def test_unknown_returns_none(self, name):
        assert resolve_preset(name) is None


class TestDescribeRrule:
    def test_known_rrule(self):
        assert describe_rrule("FREQ=DAILY") == "daily"
        assert describe_rrule("FREQ=WEEKLY;INTERVAL=2") == "bi-weekly"
        assert describe_rrule("FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR") == "weekdays"

    def test_unknown_rrule_returns_rrule_itself(self):
        unknown = "FREQ=DAILY;INTERVAL=7"
        assert describe_rrule(unknown) == unknown

    def test_empty_rrule_returns_empty(self):
        assert describe_rrule("") == ""

    def test_roundtrip(self):
        for name, rule in PRESETS.items():
            assert describe_rrule(to_wire_format(rule)) == name

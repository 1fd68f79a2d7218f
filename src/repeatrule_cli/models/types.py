"""Enumerations and constrained scalar types shared by the recurrence models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import Field

# 1 = Sunday ... 7 = Saturday
Weekday = Annotated[int, Field(ge=1, le=7)]
MonthDay = Annotated[int, Field(ge=1, le=31)]
Month = Annotated[int, Field(ge=1, le=12)]
# 1-5 = nth occurrence, 6 = second to last, 7 = last
Ordinal = Annotated[int, Field(ge=1, le=7)]

MIN_INTERVAL = 1
MAX_INTERVAL = 99


class Frequency(str, Enum):
    """How often a rule repeats."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class EndType(str, Enum):
    """How a repeating rule stops."""

    NEVER = "never"
    COUNT = "count"
    UNTIL = "until"


class MonthMode(str, Enum):
    """Monthly selection: days of the month or an ordinal weekday."""

    BY_DATE = "byDate"
    BY_WEEKDAY = "byWeekday"


class YearMode(str, Enum):
    """Yearly selection: days of the month or an ordinal weekday."""

    BY_DATE = "byDate"
    BY_WEEKDAY = "byWeekday"

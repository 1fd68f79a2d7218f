"""RRULE text encoding for repeat rules.

Only the subset FREQ, INTERVAL, BYDAY, BYMONTHDAY, BYMONTH, COUNT and UNTIL
is written or read. Tokens are always written in that order so output is
stable.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime
from typing import Any

from repeatrule_cli.errors import InvalidCodeError, WireFormatError
from repeatrule_cli.models.patterns import (
    CountEnd,
    EndCondition,
    MonthlyByDatePattern,
    MonthlyByWeekdayPattern,
    RecurrencePattern,
    UntilEnd,
    WeeklyPattern,
    YearlyByDatePattern,
    YearlyByWeekdayPattern,
)
from repeatrule_cli.models.rule import RepeatRule, RuleFallback
from repeatrule_cli.models.types import EndType, Frequency, MonthMode, YearMode
from repeatrule_cli.recurrence.ordinals import (
    format_byday_token,
    rrule_prefix_to_ordinal,
    rrule_symbol_to_weekday,
)

logger = logging.getLogger(__name__)

RRULE_PREFIX = "RRULE:"

SUPPORTED_KEYS = ("FREQ", "INTERVAL", "BYDAY", "BYMONTHDAY", "BYMONTH", "COUNT", "UNTIL")

_FREQUENCIES = {
    "DAILY": Frequency.DAILY,
    "WEEKLY": Frequency.WEEKLY,
    "MONTHLY": Frequency.MONTHLY,
    "YEARLY": Frequency.YEARLY,
}

# Which BY* tokens each frequency may carry
_ALLOWED_BY_KEYS = {
    Frequency.DAILY: frozenset(),
    Frequency.WEEKLY: frozenset({"BYDAY"}),
    Frequency.MONTHLY: frozenset({"BYDAY", "BYMONTHDAY"}),
    Frequency.YEARLY: frozenset({"BYDAY", "BYMONTHDAY", "BYMONTH"}),
}

_BYDAY_PATTERN = re.compile(r"^([+-]?\d+)?([A-Z]{2})$", re.ASCII)


# ============================================================================
# Serialization
# ============================================================================


def to_wire_format(rule: RepeatRule, start_date: date | None = None) -> str | None:
    """Encode *rule* as an RRULE value, or None when it does not repeat.

    Args:
        rule: Rule to encode
        start_date: Optional event start; when given, empty selections are
            filled from it before encoding. Nothing is defaulted otherwise.

    Returns:
        Semicolon-joined RRULE value such as "FREQ=WEEKLY;BYDAY=MO,WE"
    """
    if rule.is_none:
        return None
    if start_date is not None:
        rule = rule.with_fallback(RuleFallback.from_date(start_date))
    return format_pattern(rule.to_pattern())


def format_pattern(pattern: RecurrencePattern) -> str:
    """Encode a tagged pattern as an RRULE value."""
    components = [f"FREQ={pattern.frequency.value.upper()}"]
    if pattern.interval != 1:
        components.append(f"INTERVAL={pattern.interval}")
    components.extend(_selection_tokens(pattern))
    components.extend(_end_tokens(pattern.end))
    return ";".join(components)


def _join_numbers(values: frozenset[int]) -> str:
    return ",".join(str(value) for value in sorted(values))


def _selection_tokens(pattern: RecurrencePattern) -> list[str]:
    tokens: list[str] = []

    if isinstance(pattern, WeeklyPattern):
        if pattern.weekdays:
            symbols = [format_byday_token(None, day) for day in sorted(pattern.weekdays)]
            tokens.append(f"BYDAY={','.join(symbols)}")

    elif isinstance(pattern, MonthlyByDatePattern):
        if pattern.month_days:
            tokens.append(f"BYMONTHDAY={_join_numbers(pattern.month_days)}")

    elif isinstance(pattern, MonthlyByWeekdayPattern):
        tokens.append(f"BYDAY={format_byday_token(pattern.ordinal, pattern.weekday)}")

    elif isinstance(pattern, YearlyByDatePattern):
        if pattern.months:
            tokens.append(f"BYMONTH={_join_numbers(pattern.months)}")
        if pattern.month_days:
            tokens.append(f"BYMONTHDAY={_join_numbers(pattern.month_days)}")

    elif isinstance(pattern, YearlyByWeekdayPattern):
        if pattern.months:
            tokens.append(f"BYMONTH={_join_numbers(pattern.months)}")
        tokens.append(f"BYDAY={format_byday_token(pattern.ordinal, pattern.weekday)}")

    return tokens


def _end_tokens(end: EndCondition) -> list[str]:
    if isinstance(end, CountEnd):
        return [f"COUNT={end.count}"]
    if isinstance(end, UntilEnd):
        return [f"UNTIL={format_until(end.end_date)}"]
    return []


def format_until(moment: datetime) -> str:
    """Render *moment* in UTC as ``yyyyMMdd'T'HHmmss'Z'``.

    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return (
        f"{moment.year:04d}{moment.month:02d}{moment.day:02d}"
        f"T{moment.hour:02d}{moment.minute:02d}{moment.second:02d}Z"
    )


# ============================================================================
# Parsing
# ============================================================================


def from_wire_format(text: str | None) -> RepeatRule:
    """Decode an RRULE value produced by ``to_wire_format``.

    Empty input decodes to the non-repeating rule. An optional ``RRULE:``
    prefix and lower-case keys are accepted.

    Raises:
        WireFormatError: If the text is outside the supported RRULE subset
    """
    if text is None or not text.strip():
        return RepeatRule.none()

    body = text.strip()
    if body.upper().startswith(RRULE_PREFIX):
        body = body[len(RRULE_PREFIX) :]

    tokens = _split_tokens(body)

    if "FREQ" not in tokens:
        raise WireFormatError(f"Missing FREQ in {text!r}")
    frequency = _FREQUENCIES.get(tokens["FREQ"])
    if frequency is None:
        raise WireFormatError(f"Unsupported FREQ: {tokens['FREQ']!r}")

    for key in tokens:
        if key.startswith("BY") and key not in _ALLOWED_BY_KEYS[frequency]:
            raise WireFormatError(f"{key} is not supported for FREQ={tokens['FREQ']}")

    fields: dict[str, Any] = {"frequency": frequency}
    if "INTERVAL" in tokens:
        fields["interval"] = _parse_positive(tokens, "INTERVAL")
    fields.update(_parse_end(tokens))

    if frequency is Frequency.WEEKLY:
        fields.update(_parse_weekly(tokens))
    elif frequency is Frequency.MONTHLY:
        fields.update(_parse_monthly(tokens))
    elif frequency is Frequency.YEARLY:
        fields.update(_parse_yearly(tokens))

    try:
        return RepeatRule(**fields)
    except ValueError as e:
        raise WireFormatError(f"Invalid value in {text!r}: {e}") from e


def _split_tokens(body: str) -> dict[str, str]:
    tokens: dict[str, str] = {}
    for part in body.split(";"):
        if not part.strip():
            continue
        key, sep, value = part.partition("=")
        key = key.strip().upper()
        if not sep or not value.strip():
            raise WireFormatError(f"Malformed RRULE component: {part!r}")
        if key not in SUPPORTED_KEYS:
            raise WireFormatError(f"Unsupported RRULE component: {key}")
        if key in tokens:
            raise WireFormatError(f"Duplicate RRULE component: {key}")
        tokens[key] = value.strip().upper()
    return tokens


def _parse_positive(tokens: dict[str, str], key: str) -> int:
    raw = tokens[key]
    if not (raw.isascii() and raw.isdigit()) or int(raw) < 1:
        raise WireFormatError(f"{key} must be a positive integer, got {raw!r}")
    return int(raw)


def _parse_numbers(tokens: dict[str, str], key: str) -> frozenset[int]:
    values = []
    for raw in tokens[key].split(","):
        raw = raw.strip()
        if not (raw.isascii() and raw.isdigit()):
            raise WireFormatError(f"{key} values must be positive integers, got {raw!r}")
        values.append(int(raw))
    return frozenset(values)


def _parse_end(tokens: dict[str, str]) -> dict[str, Any]:
    if "COUNT" in tokens and "UNTIL" in tokens:
        raise WireFormatError("COUNT and UNTIL cannot both be present")
    if "COUNT" in tokens:
        return {"end_type": EndType.COUNT, "count": _parse_positive(tokens, "COUNT")}
    if "UNTIL" in tokens:
        return {"end_type": EndType.UNTIL, "end_date": parse_until(tokens["UNTIL"])}
    return {}


def parse_until(value: str) -> datetime:
    """Parse an UNTIL value into an aware UTC datetime.

    Accepts ``yyyyMMddTHHmmssZ``, ``yyyyMMddTHHmmss`` (read as UTC) and
    ``yyyyMMdd``.

    Raises:
        WireFormatError: If the value matches none of these forms
    """
    text = value.strip().upper().removesuffix("Z")
    for fmt in ("%Y%m%dT%H%M%S", "%Y%m%d"):
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=UTC)
        except ValueError:
            continue
    raise WireFormatError(f"Invalid UNTIL value: {value!r}")


def _parse_byday(raw: str) -> list[tuple[int | None, int]]:
    """Split a BYDAY value into (ordinal or None, weekday) pairs."""
    entries = []
    for item in raw.split(","):
        match = _BYDAY_PATTERN.match(item.strip())
        if match is None:
            raise WireFormatError(f"Invalid BYDAY entry: {item!r}")
        prefix, symbol = match.groups()
        try:
            weekday = rrule_symbol_to_weekday(symbol)
            ordinal = rrule_prefix_to_ordinal(prefix) if prefix else None
        except InvalidCodeError as e:
            raise WireFormatError(str(e)) from e
        entries.append((ordinal, weekday))
    return entries


def _first_ordinal_weekday(raw: str) -> dict[str, int]:
    entries = _parse_byday(raw)
    ordinal, weekday = entries[0]
    if ordinal is None:
        raise WireFormatError(f"BYDAY needs an ordinal prefix here, got {raw!r}")
    if len(entries) > 1:
        logger.debug("keeping first BYDAY entry of %s", raw)
    return {"week_ordinal": ordinal, "weekday": weekday}


def _parse_weekly(tokens: dict[str, str]) -> dict[str, Any]:
    if "BYDAY" not in tokens:
        return {}
    entries = _parse_byday(tokens["BYDAY"])
    if any(ordinal is not None for ordinal, _ in entries):
        raise WireFormatError(f"Weekly BYDAY takes no ordinal: {tokens['BYDAY']!r}")
    return {"weekdays": frozenset(weekday for _, weekday in entries)}


def _parse_monthly(tokens: dict[str, str]) -> dict[str, Any]:
    if "BYDAY" in tokens and "BYMONTHDAY" in tokens:
        raise WireFormatError("Monthly rules take BYDAY or BYMONTHDAY, not both")
    if "BYDAY" in tokens:
        return {
            "month_mode": MonthMode.BY_WEEKDAY,
            **_first_ordinal_weekday(tokens["BYDAY"]),
        }
    fields: dict[str, Any] = {"month_mode": MonthMode.BY_DATE}
    if "BYMONTHDAY" in tokens:
        fields["month_days"] = _parse_numbers(tokens, "BYMONTHDAY")
    return fields


def _parse_yearly(tokens: dict[str, str]) -> dict[str, Any]:
    if "BYDAY" in tokens and "BYMONTHDAY" in tokens:
        raise WireFormatError("Yearly rules take BYDAY or BYMONTHDAY, not both")
    fields: dict[str, Any] = {}
    if "BYMONTH" in tokens:
        fields["months"] = _parse_numbers(tokens, "BYMONTH")
    if "BYDAY" in tokens:
        fields["year_mode"] = YearMode.BY_WEEKDAY
        fields.update(_first_ordinal_weekday(tokens["BYDAY"]))
    else:
        fields["year_mode"] = YearMode.BY_DATE
        if "BYMONTHDAY" in tokens:
            fields["month_days"] = _parse_numbers(tokens, "BYMONTHDAY")
    return fields

"""Mappings between the ordinal, week-number and RRULE encodings.

The engine names "which occurrence of a weekday within a period" with an
ordinal from 1 to 7: values 1-5 count forward, 6 is the second to last and
7 is the last. Platform descriptors use signed week numbers (1..5, -2, -1)
and RRULE uses the same signed values as a BYDAY prefix ("-1FR", "2MO").
"""

from __future__ import annotations

from repeatrule_cli.errors import InvalidCodeError

WEEKDAY_SYMBOLS: tuple[str, ...] = ("SU", "MO", "TU", "WE", "TH", "FR", "SA")

ORDINALS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)

_ORDINAL_TO_WEEK_NUMBER: dict[int, int] = {1: 1, 2: 2, 3: 3, 4: 4, 5: 5, 6: -2, 7: -1}
_WEEK_NUMBER_TO_ORDINAL: dict[int, int] = {
    week_number: ordinal for ordinal, week_number in _ORDINAL_TO_WEEK_NUMBER.items()
}
_SYMBOL_TO_WEEKDAY: dict[str, int] = {
    symbol: index for index, symbol in enumerate(WEEKDAY_SYMBOLS, start=1)
}


def _check_ordinal(ordinal: int) -> None:
    if isinstance(ordinal, bool) or ordinal not in _ORDINAL_TO_WEEK_NUMBER:
        raise InvalidCodeError(f"Ordinal must be between 1 and 7, got {ordinal!r}")


def ordinal_to_week_number(ordinal: int) -> int:
    """Map an ordinal to the platform's signed week number.

    Raises:
        InvalidCodeError: If ordinal is outside 1-7
    """
    _check_ordinal(ordinal)
    return _ORDINAL_TO_WEEK_NUMBER[ordinal]


def week_number_to_ordinal(week_number: int) -> int | None:
    """Map a platform week number back to an ordinal.

    Returns None for week numbers with no ordinal (0, -3, 6, ...); callers
    leave the weekday-ordinal fields unset in that case.
    """
    if isinstance(week_number, bool):
        return None
    return _WEEK_NUMBER_TO_ORDINAL.get(week_number)


def ordinal_to_rrule_prefix(ordinal: int) -> str:
    """Map an ordinal to a BYDAY prefix: "1".."5", "-2" or "-1".

    Raises:
        InvalidCodeError: If ordinal is outside 1-7
    """
    return str(ordinal_to_week_number(ordinal))


def rrule_prefix_to_ordinal(prefix: str) -> int:
    """Map a BYDAY prefix such as "-1", "2" or "+3" back to an ordinal.

    Raises:
        InvalidCodeError: If the prefix is not a signed integer with an ordinal
    """
    try:
        week_number = int(prefix)
    except (TypeError, ValueError) as e:
        raise InvalidCodeError(f"Invalid BYDAY prefix: {prefix!r}") from e

    ordinal = week_number_to_ordinal(week_number)
    if ordinal is None:
        raise InvalidCodeError(f"BYDAY prefix has no ordinal: {prefix!r}")
    return ordinal


def weekday_to_rrule_symbol(weekday: int) -> str:
    """Map a weekday code (1 = Sunday ... 7 = Saturday) to its RRULE symbol.

    Raises:
        InvalidCodeError: If weekday is outside 1-7
    """
    if isinstance(weekday, bool) or not isinstance(weekday, int) or not 1 <= weekday <= 7:
        raise InvalidCodeError(f"Weekday must be between 1 and 7, got {weekday!r}")
    return WEEKDAY_SYMBOLS[weekday - 1]


def rrule_symbol_to_weekday(symbol: str) -> int:
    """Map a two-letter RRULE weekday symbol to its weekday code.

    Raises:
        InvalidCodeError: If symbol is not one of SU, MO, TU, WE, TH, FR, SA
    """
    try:
        return _SYMBOL_TO_WEEKDAY[symbol.upper()]
    except (AttributeError, KeyError) as e:
        raise InvalidCodeError(f"Unknown weekday symbol: {symbol!r}") from e


def format_byday_token(ordinal: int | None, weekday: int) -> str:
    """Compose a BYDAY token such as "MO" or "-1FR"."""
    symbol = weekday_to_rrule_symbol(weekday)
    if ordinal is None:
        return symbol
    return f"{ordinal_to_rrule_prefix(ordinal)}{symbol}"

"""Exception types raised by the recurrence engine."""


class RecurrenceError(Exception):
    """Base class for recurrence engine errors."""


class InvalidCodeError(RecurrenceError, ValueError):
    """An ordinal, weekday code or BYDAY symbol outside its closed range.

    Ordinals and weekday codes are produced by the engine's own enumerations,
    so this signals an integration bug rather than bad user input.
    """


class WireFormatError(RecurrenceError, ValueError):
    """Text that is not part of the supported RRULE subset."""

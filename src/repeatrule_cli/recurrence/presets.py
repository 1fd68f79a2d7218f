"""Named repeat rule presets for the RepeatRule CLI."""

from repeatrule_cli.models.rule import RepeatRule
from repeatrule_cli.models.types import Frequency
from repeatrule_cli.recurrence.wire import to_wire_format

# Maps human-friendly names to rules. Their RRULE forms are the common
# calendar shortcuts, e.g. "weekdays" -> "FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR".
PRESETS: dict[str, RepeatRule] = {
    "daily": RepeatRule(frequency=Frequency.DAILY),
    "weekdays": RepeatRule(
        frequency=Frequency.WEEKLY, weekdays=frozenset({2, 3, 4, 5, 6})
    ),
    "weekly": RepeatRule(frequency=Frequency.WEEKLY),
    "bi-weekly": RepeatRule(frequency=Frequency.WEEKLY, interval=2),
    "monthly": RepeatRule(frequency=Frequency.MONTHLY),
    "yearly": RepeatRule(frequency=Frequency.YEARLY),
}


def resolve_preset(name: str) -> RepeatRule | None:
    """Look up a preset rule by name.

    Args:
        name: Preset name (e.g., "daily", "bi-weekly"), case-insensitive

    Returns:
        The preset rule, or None if the name is not recognized
    """
    return PRESETS.get(name.strip().lower())


def describe_rrule(rrule: str) -> str:
    """Convert an RRULE string back to its preset name.

    Args:
        rrule: iCalendar RRULE string

    Returns:
        The preset name, or the RRULE itself when no preset matches
    """
    reverse = {to_wire_format(rule): name for name, rule in PRESETS.items()}
    return reverse.get(rrule, rrule)

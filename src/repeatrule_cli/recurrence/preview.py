"""Occurrence preview for repeat rules, expanded with python-dateutil."""

from __future__ import annotations

from datetime import UTC, datetime
from itertools import islice

from dateutil.rrule import rrulestr

from repeatrule_cli.models.rule import RepeatRule
from repeatrule_cli.recurrence.wire import to_wire_format

MAX_PREVIEW = 500


def next_occurrences(
    rule: RepeatRule, start: datetime, limit: int = 10
) -> list[datetime]:
    """Expand *rule* from *start* and return up to *limit* occurrences.

    A naive *start* is read as UTC. A rule that does not repeat yields the
    start alone.

    Raises:
        ValueError: If limit is outside 1..MAX_PREVIEW
    """
    if not 1 <= limit <= MAX_PREVIEW:
        raise ValueError(f"limit must be between 1 and {MAX_PREVIEW}, got {limit}")

    if start.tzinfo is None:
        start = start.replace(tzinfo=UTC)

    text = to_wire_format(rule)
    if text is None:
        return [start]

    expansion = rrulestr(text, dtstart=start)
    return list(islice(expansion, limit))

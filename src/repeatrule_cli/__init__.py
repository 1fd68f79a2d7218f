"""RepeatRule CLI - recurrence rule engine and command-line tools."""

__version__ = "0.1.0"

"""Data models for RepeatRule CLI."""

"""Recurrence rule engine: ordinal mapping, RRULE text and platform descriptors.

Modules here are pure functions over immutable models and keep no state.
"""

"""Shared constants for expense payloads."""

# YYYY-MM-DD shape only; calendar correctness is not checked.
DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"

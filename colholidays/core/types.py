# colholidays/core/types.py

"""
Custom type definitions shared across the holiday core.
"""

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, numbered like ``datetime.date.weekday()`` (0 = Monday)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

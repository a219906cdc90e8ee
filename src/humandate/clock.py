"""
Clock sources for "current date" lookups.

The parser never reads the system date directly; it asks a ``Clock``, a
zero-argument callable returning a ``datetime.date``. Tests pin the date with
``fixed_clock``.
"""

from datetime import date
from typing import Callable

Clock = Callable[[], date]


def system_clock() -> date:
    """Return today's date from the local system clock."""
    return date.today()


def fixed_clock(today: date) -> Clock:
    """Build a clock that always reports ``today``.

    Example:
        >>> clock = fixed_clock(date(2025, 6, 15))
        >>> clock()
        datetime.date(2025, 6, 15)
    """

    def _clock() -> date:
        return today

    return _clock

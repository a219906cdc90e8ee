"""
Calendar arithmetic behind each recognized date shape.

Every function here assumes its textual input was already validated by the
parser's patterns, so the digit counts are bounded and conversions cannot fail
on malformed text. Results that fall outside the ``datetime.date`` range
(years 1-9999) raise CalendarRangeError; the parser turns those into an
unrecognized result.
"""

import calendar
from contextlib import contextmanager
from datetime import date, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta

from .models import TimeUnit

EPOCH = date(1970, 1, 1)

# Short years land in this century.
PIVOT_CENTURY = 2000


class CalendarRangeError(ValueError):
    """Raised when a computed date falls outside years 1-9999."""


@contextmanager
def _calendar_range() -> Iterator[None]:
    try:
        yield
    except (OverflowError, ValueError) as e:
        raise CalendarRangeError(str(e)) from e


def shift(base: date, amount: int, unit: TimeUnit) -> date:
    """Move ``base`` by ``amount`` units (negative amounts move backwards).

    Month and year steps clamp the day to the length of the target month:
    2025-01-31 plus one month is 2025-02-28, and 2024-02-29 plus one year is
    2025-02-28.

    Args:
        base: Starting date
        amount: Signed number of units
        unit: Calendar unit to step by

    Returns:
        The shifted date

    Raises:
        CalendarRangeError: If the result leaves years 1-9999
    """
    with _calendar_range():
        if unit is TimeUnit.WEEKS:
            return base + timedelta(weeks=amount)
        if unit is TimeUnit.MONTHS:
            return base + relativedelta(months=amount)
        if unit is TimeUnit.YEARS:
            return base + relativedelta(years=amount)
        return base + timedelta(days=amount)


def epoch_day(days: int) -> date:
    """Return the date ``days`` days after 1970-01-01."""
    with _calendar_range():
        return EPOCH + timedelta(days=days)


def day_of_month_or_epoch(today: date, day: int) -> date:
    """Place a bare day number in the current month.

    If ``day`` fits the current month it becomes that day of the month.
    Otherwise the number is read as a day count since 1970-01-01, so ``31``
    typed during a 30-day month resolves to 1970-02-01.

    Example:
        >>> day_of_month_or_epoch(date(2025, 6, 15), 7)
        datetime.date(2025, 6, 7)
        >>> day_of_month_or_epoch(date(2025, 6, 15), 31)
        datetime.date(1970, 2, 1)
    """
    month_length = calendar.monthrange(today.year, today.month)[1]
    if 0 < day <= month_length:
        return today.replace(day=day)
    return epoch_day(day)


def roll_forward(year: int, month: int, day: int) -> date:
    """Build a date from the first of the month plus ``day - 1`` days.

    Days past the end of the month spill into the following month instead of
    failing: 31/04 becomes 1 May.

    Raises:
        CalendarRangeError: If the year or the rolled date leaves years 1-9999
    """
    with _calendar_range():
        return date(year, month, 1) + timedelta(days=day - 1)


def pivot_year(token: str) -> int:
    """Expand a compact year token by its digit count.

    Two-digit years are placed in the 2000s; four-digit years are kept as
    typed, so ``0099`` stays year 99.

    Example:
        >>> pivot_year("05"), pivot_year("25"), pivot_year("1999")
        (2005, 2025, 1999)
    """
    year = int(token)
    if len(token) <= 2:
        return PIVOT_CENTURY + year
    return year


def pivot_year_value(token: str) -> int:
    """Expand a separated year token by its numeric value.

    Any year below 100 is placed in the 2000s however many digits were
    typed: ``5``, ``05`` and ``0005`` are all 2005.

    Example:
        >>> pivot_year_value("5"), pivot_year_value("0025"), pivot_year_value("0100")
        (2005, 2025, 100)
    """
    year = int(token)
    if year < 100:
        return PIVOT_CENTURY + year
    return year

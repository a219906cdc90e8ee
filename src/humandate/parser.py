"""
Parser for human-typed calendar dates.

HumanDateParser turns short tokens typed into form fields or command lines
into ``datetime.date`` values. Numeric shapes are always recognized; keyword
and unit-letter shortcuts become available once a LanguageProfile is set.

Recognizers are tried in a fixed order and the first one whose pattern
matches decides the result:

  1. Localized keywords (today / yesterday / tomorrow)   "hoy", "tmrw"
  2. Localized unit offsets                                "+2w", "-1m"
  3. Zero                                                  "0", "+0", "-0"
  4. Signed day offsets                                    "+7", "-3"
  5. Bare day of month (epoch-day count if it overflows)   "7", "07", "31"
  6. Day-month with separator                              "7/12", "01-1"
  7. Day-month-year with separator                         "7/12/25", "7.12.2025"
  8. Compact day-month                                     "0712"
  9. Compact day-month-year                                "071225", "07122025"

Anything else resolves to None. Resolution never raises.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date
from functools import partial
from typing import Callable, Mapping, Optional

from .arithmetic import (
    CalendarRangeError,
    day_of_month_or_epoch,
    pivot_year,
    pivot_year_value,
    roll_forward,
    shift,
)
from .clock import Clock, system_clock
from .compiler import CompiledLanguage, compile_language
from .models import LanguageProfile, TimeUnit

logger = logging.getLogger("humandate.parser")

Handler = Callable[[re.Match[str], date], date]

# Offsets are capped at six digits so magnitudes stay small integers.
_OFFSET_WITH_UNIT = re.compile(r"([+-])([0-9]{1,6})([A-Za-z])")
_ZERO = re.compile(r"[+-]?0")
_PLUS_DAYS = re.compile(r"\+([0-9]{1,6})")
_MINUS_DAYS = re.compile(r"-([0-9]{1,6})")

_DAY = r"(0?[1-9]|[12][0-9]|3[01])"
_MONTH = r"(0?[1-9]|1[0-2])"
_SEPARATOR = r"([-/.·])"

_BARE_DAY = re.compile(_DAY)
_DAY_MONTH = re.compile(_DAY + _SEPARATOR + _MONTH)
# Both separators must be the same character: "1-2/2025" is rejected.
_DAY_MONTH_YEAR = re.compile(_DAY + _SEPARATOR + _MONTH + r"\2([0-9]{4}|[0-9]{1,2})")
_COMPACT_DAY_MONTH = re.compile(r"(0[1-9]|[12][0-9]|3[01])(0[1-9]|1[0-2])")
_COMPACT_DAY_MONTH_YEAR = re.compile(r"(0[1-9]|[12][0-9]|3[01])(0[1-9]|1[0-2])([0-9]{4}|[0-9]{2})")


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _today(match: re.Match[str], today: date) -> date:
    return today


def _yesterday(match: re.Match[str], today: date) -> date:
    return shift(today, -1, TimeUnit.DAYS)


def _tomorrow(match: re.Match[str], today: date) -> date:
    return shift(today, 1, TimeUnit.DAYS)


def _offset_with_unit(units: Mapping[str, TimeUnit], match: re.Match[str], today: date) -> date:
    sign, digits, letter = match.groups()
    unit = units.get(letter.lower())
    if unit is None:
        logger.debug("Unit letter %r not mapped, using days", letter)
        unit = TimeUnit.DAYS
    amount = int(digits)
    return shift(today, amount if sign == "+" else -amount, unit)


def _plus_days(match: re.Match[str], today: date) -> date:
    return shift(today, int(match.group(1)), TimeUnit.DAYS)


def _minus_days(match: re.Match[str], today: date) -> date:
    return shift(today, -int(match.group(1)), TimeUnit.DAYS)


def _bare_day(match: re.Match[str], today: date) -> date:
    return day_of_month_or_epoch(today, int(match.group(1)))


def _day_month(match: re.Match[str], today: date) -> date:
    day, _, month = match.groups()
    return roll_forward(today.year, int(month), int(day))


def _day_month_year(match: re.Match[str], today: date) -> date:
    day, _, month, year = match.groups()
    return roll_forward(pivot_year_value(year), int(month), int(day))


def _compact_day_month(match: re.Match[str], today: date) -> date:
    day, month = match.groups()
    return roll_forward(today.year, int(month), int(day))


def _compact_day_month_year(match: re.Match[str], today: date) -> date:
    day, month, year = match.groups()
    return roll_forward(pivot_year(year), int(month), int(day))


_NUMERIC_RECOGNIZERS: tuple[tuple[str, re.Pattern[str], Handler], ...] = (
    ("zero", _ZERO, _today),
    ("plus_days", _PLUS_DAYS, _plus_days),
    ("minus_days", _MINUS_DAYS, _minus_days),
    ("bare_day", _BARE_DAY, _bare_day),
    ("day_month", _DAY_MONTH, _day_month),
    ("day_month_year", _DAY_MONTH_YEAR, _day_month_year),
    ("compact_day_month", _COMPACT_DAY_MONTH, _compact_day_month),
    ("compact_day_month_year", _COMPACT_DAY_MONTH_YEAR, _compact_day_month_year),
)


@dataclass(frozen=True)
class _Ruleset:
    """Active language plus the ordered recognizers derived from it."""

    language: Optional[CompiledLanguage]
    recognizers: tuple[tuple[str, re.Pattern[str], Handler], ...]


def _build_ruleset(language: Optional[CompiledLanguage]) -> _Ruleset:
    if language is None:
        return _Ruleset(None, _NUMERIC_RECOGNIZERS)

    localized: list[tuple[str, re.Pattern[str], Handler]] = []
    for name, pattern, handler in (
        ("today", language.today, _today),
        ("yesterday", language.yesterday, _yesterday),
        ("tomorrow", language.tomorrow, _tomorrow),
    ):
        if pattern is not None:
            localized.append((name, pattern, handler))
    localized.append(("offset_with_unit", _OFFSET_WITH_UNIT, partial(_offset_with_unit, language.units)))

    return _Ruleset(language, tuple(localized) + _NUMERIC_RECOGNIZERS)


class HumanDateParser:
    """Resolves human-typed date tokens against the current date.

    The parser starts in numeric-only mode. ``set_language`` activates a
    LanguageProfile; passing None returns to numeric-only mode. Activation
    compiles a complete new ruleset before publishing it, so concurrent
    ``resolve`` calls never observe a half-configured language.

    Unknown unit letters in offsets fall back to days ("+3x" is three days
    ahead). Month and year offsets clamp to the end of the target month.

    Example:
        >>> from humandate.clock import fixed_clock
        >>> from humandate.languages import en
        >>> parser = HumanDateParser(en(), clock=fixed_clock(date(2025, 6, 15)))
        >>> parser.resolve("tmrw")
        datetime.date(2025, 6, 16)
        >>> parser.resolve("1001")
        datetime.date(2025, 1, 10)
        >>> parser.resolve("abc") is None
        True
    """

    def __init__(self, language: Optional[LanguageProfile] = None, clock: Clock = system_clock) -> None:
        self._clock = clock
        self._ruleset = _build_ruleset(None)
        if language is not None:
            self.set_language(language)

    @property
    def language(self) -> Optional[LanguageProfile]:
        """The active profile, or None in numeric-only mode."""
        active = self._ruleset.language
        return active.profile if active is not None else None

    def set_language(self, language: Optional[LanguageProfile]) -> "HumanDateParser":
        """Activate ``language`` (or numeric-only mode for None).

        Returns:
            This parser, for fluent configuration
        """
        compiled = compile_language(language) if language is not None else None
        self._ruleset = _build_ruleset(compiled)
        if language is None:
            logger.info("Language disabled, numeric-only mode")
        else:
            logger.info("Language %r activated", language.code)
        return self

    def resolve(self, text: Optional[str]) -> Optional[date]:
        """Resolve ``text`` to a date, or None when it is not recognized.

        Args:
            text: Raw user input (None is treated as empty)

        Returns:
            The resolved date, or None
        """
        value = (text or "").strip()
        if not value:
            return None

        ruleset = self._ruleset
        today = self._clock()

        for name, pattern, handler in ruleset.recognizers:
            match = pattern.fullmatch(value)
            if match is None:
                continue
            try:
                result = handler(match, today)
            except CalendarRangeError:
                logger.debug("Input %r matched %s but falls outside the calendar range", value, name)
                return None
            logger.debug("Input %r matched %s -> %s", value, name, result)
            return result

        return None

    __call__ = resolve

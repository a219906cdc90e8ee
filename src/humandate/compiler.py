"""
Compiles a LanguageProfile into the matchers used by the parser.
"""

import logging
import re
import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .models import LanguageProfile, TimeUnit

logger = logging.getLogger("humandate.compiler")

# Characters tolerated around a keyword ("today!", "(hoy)", " ...kunan ").
_SURROUND = "[\\s" + re.escape(string.punctuation) + "]*"


@dataclass(frozen=True)
class CompiledLanguage:
    """Immutable bundle of everything the parser derives from a profile.

    The parser publishes a new bundle with a single attribute assignment, so a
    concurrent ``resolve`` call sees either the old language or the new one,
    never a mix of both.

    Attributes:
        profile: Source profile
        today: Matcher for "today" keywords, or None if unsupported
        yesterday: Matcher for "yesterday" keywords, or None if unsupported
        tomorrow: Matcher for "tomorrow" keywords, or None if unsupported
        units: Lower-cased unit letter to TimeUnit mapping (read-only)
    """

    profile: LanguageProfile
    today: Optional[re.Pattern[str]]
    yesterday: Optional[re.Pattern[str]]
    tomorrow: Optional[re.Pattern[str]]
    units: Mapping[str, TimeUnit]


def compile_keyword_pattern(keywords: Iterable[str]) -> Optional[re.Pattern[str]]:
    """Build a case-insensitive matcher for a keyword list.

    The pattern is meant for ``fullmatch``: it accepts the input only when,
    after dropping surrounding
    whitespace and punctuation, exactly one of the keywords remains. Keywords
    embedded in longer words are rejected ("todays" does not match "today").

    Keywords differing only in case collapse into one alternative. Blank
    keywords are ignored.

    Args:
        keywords: Raw keywords for one concept

    Returns:
        Compiled pattern, or None when no usable keyword was given

    Example:
        >>> pattern = compile_keyword_pattern(["Today", "now"])
        >>> bool(pattern.fullmatch("  TODAY! "))
        True
        >>> bool(pattern.fullmatch("nowhere"))
        False
    """
    alternatives: list[str] = []
    for keyword in keywords:
        normalized = keyword.strip().lower()
        if normalized and normalized not in alternatives:
            alternatives.append(normalized)

    if not alternatives:
        return None

    union = "|".join(re.escape(keyword) for keyword in alternatives)
    return re.compile(f"{_SURROUND}(?:{union}){_SURROUND}", re.IGNORECASE)


def normalize_unit_letters(unit_letters: Mapping[str, TimeUnit]) -> Mapping[str, TimeUnit]:
    """Lower-case unit letter keys, keeping the first registration on conflicts.

    Example:
        >>> units = normalize_unit_letters({"D": TimeUnit.DAYS, "d": TimeUnit.WEEKS})
        >>> units["d"]
        <TimeUnit.DAYS: 'days'>
    """
    resolved: dict[str, TimeUnit] = {}
    for letter, unit in unit_letters.items():
        key = letter.lower()
        if key in resolved:
            logger.debug(
                "Ignoring unit letter %r -> %s, %r already maps to %s",
                letter, unit.name, key, resolved[key].name,
            )
            continue
        resolved[key] = unit
    return MappingProxyType(resolved)


def compile_language(profile: LanguageProfile) -> CompiledLanguage:
    """Derive the full matcher bundle for ``profile``."""
    return CompiledLanguage(
        profile=profile,
        today=compile_keyword_pattern(profile.today),
        yesterday=compile_keyword_pattern(profile.yesterday),
        tomorrow=compile_keyword_pattern(profile.tomorrow),
        units=normalize_unit_letters(profile.unit_letters),
    )

"""
humandate - ergonomic parsing of human-typed calendar dates.

Turns quick tokens such as "15", "+3", "0712", "7/12/25", "tmrw" or "-2w"
into ``datetime.date`` values, with pluggable keyword vocabularies per
language, and renders dates back as ``dd/mm/yyyy``.
"""

from .arithmetic import CalendarRangeError
from .clock import Clock, fixed_clock, system_clock
from .compiler import CompiledLanguage, compile_keyword_pattern, compile_language, normalize_unit_letters
from .config import HumanDateSettings, build_formatter, build_parser, load_settings
from .formatter import DEFAULT_PATTERN, HumanDateFormatter
from .languages import (
    LanguageNotFoundError,
    available_languages,
    en,
    es,
    get_language,
    load_language_yaml,
    que,
)
from .models import LanguageProfile, TimeUnit
from .parser import HumanDateParser

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("humandate")
except Exception:
    __version__ = "1.0.0"  # Fallback if metadata unavailable

__all__ = [
    "CalendarRangeError",
    "Clock",
    "CompiledLanguage",
    "DEFAULT_PATTERN",
    "HumanDateFormatter",
    "HumanDateParser",
    "HumanDateSettings",
    "LanguageNotFoundError",
    "LanguageProfile",
    "TimeUnit",
    "available_languages",
    "build_formatter",
    "build_parser",
    "compile_keyword_pattern",
    "compile_language",
    "en",
    "es",
    "fixed_clock",
    "get_language",
    "load_language_yaml",
    "load_settings",
    "normalize_unit_letters",
    "que",
    "system_clock",
]

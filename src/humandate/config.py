"""
Configuration for humandate consumers.

Settings come from explicit arguments or from the environment (a ``.env``
file is honoured through python-dotenv):

- ``HUMANDATE_LANGUAGE``       built-in language code (en, es, que)
- ``HUMANDATE_LANGUAGE_FILE``  path to a custom YAML vocabulary
- ``HUMANDATE_DATE_FORMAT``    strftime pattern for rendered dates
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from .clock import Clock, system_clock
from .formatter import DEFAULT_PATTERN, HumanDateFormatter
from .languages import available_languages, get_language, load_language_yaml
from .models import LanguageProfile
from .parser import HumanDateParser

logger = logging.getLogger("humandate.config")


class HumanDateSettings(BaseModel):
    """Parser and formatter settings.

    A custom ``language_file`` takes precedence over a built-in ``language``.
    """

    language: Optional[str] = Field(
        default=None,
        description="Built-in language code; None keeps the parser numeric-only"
    )
    language_file: Optional[Path] = Field(
        default=None,
        description="YAML vocabulary for a custom language"
    )
    date_format: str = Field(
        default=DEFAULT_PATTERN,
        min_length=1,
        description="strftime pattern used when rendering dates"
    )

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        normalized = v.strip().lower()
        if normalized not in available_languages():
            raise ValueError(
                f"language must be one of {available_languages()}, got {v!r}"
            )
        return normalized

    def resolve_language(self) -> Optional[LanguageProfile]:
        """Return the configured profile, loading the YAML file if one is set."""
        if self.language_file is not None:
            return load_language_yaml(self.language_file)
        if self.language is not None:
            return get_language(self.language)
        return None


def load_settings(env_file: Optional[Path] = None) -> HumanDateSettings:
    """Build settings from the environment.

    Args:
        env_file: Optional .env file; by default the nearest .env above
            the working directory is used

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    load_dotenv(env_file if env_file is not None else find_dotenv(usecwd=True))

    values: dict[str, str] = {}
    for field_name, variable in (
        ("language", "HUMANDATE_LANGUAGE"),
        ("language_file", "HUMANDATE_LANGUAGE_FILE"),
        ("date_format", "HUMANDATE_DATE_FORMAT"),
    ):
        raw = os.getenv(variable)
        if raw:
            values[field_name] = raw

    settings = HumanDateSettings(**values)
    logger.debug("Loaded settings: %s", settings.model_dump())
    return settings


def build_parser(settings: HumanDateSettings, clock: Clock = system_clock) -> HumanDateParser:
    """Create a parser configured from ``settings``."""
    return HumanDateParser(settings.resolve_language(), clock=clock)


def build_formatter(settings: HumanDateSettings) -> HumanDateFormatter:
    """Create a formatter configured from ``settings``."""
    return HumanDateFormatter(settings.date_format)

"""
Data models for localized date vocabularies.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TimeUnit(Enum):
    """Calendar units a relative offset may apply to."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


class LanguageProfile(BaseModel):
    """Keyword and unit-letter vocabulary for one language.

    A profile drives the localized recognizers of the parser: the keyword
    lists name the concepts "today", "yesterday" and "tomorrow", and the
    unit letters select the calendar unit in offsets such as ``+2w``.

    Profiles are immutable once built and can be shared freely between
    parsers and threads; ``unit_letters`` is a read-only mapping.

    Attributes:
        code: Short identifier (e.g., "en", "es", "que")
        name: Human-readable language name
        today: Keywords meaning "today" (required)
        yesterday: Keywords meaning "yesterday" (empty = unsupported)
        tomorrow: Keywords meaning "tomorrow" (empty = unsupported)
        unit_letters: Single-letter unit codes mapped to a TimeUnit

    Example:
        >>> profile = LanguageProfile(
        ...     code="en",
        ...     today=["today", "now"],
        ...     unit_letters={"d": TimeUnit.DAYS, "w": TimeUnit.WEEKS},
        ... )
        >>> profile.tomorrow
        ()
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=1, description="Short language identifier")
    name: str = Field(default="", description="Human-readable language name")
    today: tuple[str, ...] = Field(..., description="Keywords meaning today")
    yesterday: tuple[str, ...] = Field(default=(), description="Keywords meaning yesterday")
    tomorrow: tuple[str, ...] = Field(default=(), description="Keywords meaning tomorrow")
    unit_letters: Mapping[str, TimeUnit] = Field(..., description="Unit letter to TimeUnit mapping")

    @field_validator("unit_letters")
    @classmethod
    def _read_only_single_letters(cls, value: Mapping[str, TimeUnit]) -> Mapping[str, TimeUnit]:
        for letter in value:
            if len(letter) != 1:
                raise ValueError(f"unit letter must be a single character, got {letter!r}")
        return MappingProxyType(dict(value))

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name"):
            data = {**data, "name": data.get("code", "")}
        return data

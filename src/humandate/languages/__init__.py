"""
Built-in language profiles and YAML vocabulary loading.

Three profiles ship with the package:

- **en**: English (today/now, yesterday/ytd, tomorrow/tmr/tmw/tmrw; d/w/m/y)
- **es**: Spanish (hoy/ya/ahora, ayer, mañana; d/s/m/a)
- **que**: Quechua (kunan/kaypi/ña, qayna..., paqarin...; p/h/k/w)

Custom vocabularies use the same YAML schema:

    language:
      code: fr
      name: Français
      today: [aujourd'hui, auj]
      yesterday: [hier]
      tomorrow: [demain]
      unit_letters:
        "j": days
        "s": weeks
        "m": months
        "a": years
"""

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from ..models import LanguageProfile

logger = logging.getLogger("humandate.languages")

_DATA_DIR = Path(__file__).parent / "data"

BUILTIN_LANGUAGES: tuple[str, ...] = ("en", "es", "que")


class LanguageNotFoundError(ValueError):
    """Raised when a built-in language code is not known."""


def load_language_yaml(path: Path) -> LanguageProfile:
    """Load a language profile from a YAML file.

    Args:
        path: Path to YAML file

    Returns:
        The parsed LanguageProfile

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        yaml.YAMLError: If the YAML is malformed
        ValueError: If the document has no 'language' mapping
        pydantic.ValidationError: If required fields are missing or invalid
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("language"), dict):
        raise ValueError("YAML file must contain a 'language' mapping")

    profile = LanguageProfile(**data["language"])
    logger.info("Loaded language profile %r from %s", profile.code, path)
    return profile


@lru_cache(maxsize=None)
def _builtin(code: str) -> LanguageProfile:
    return load_language_yaml(_DATA_DIR / f"{code}.yaml")


def available_languages() -> list[str]:
    """Return the codes of the built-in language profiles."""
    return list(BUILTIN_LANGUAGES)


def get_language(code: str) -> LanguageProfile:
    """Return a built-in profile by code (case-insensitive).

    Raises:
        LanguageNotFoundError: If no built-in profile has that code
    """
    normalized = code.strip().lower()
    if normalized not in BUILTIN_LANGUAGES:
        raise LanguageNotFoundError(
            f"Unknown language {code!r}. Available: {', '.join(BUILTIN_LANGUAGES)}"
        )
    return _builtin(normalized)


def en() -> LanguageProfile:
    """English profile."""
    return get_language("en")


def es() -> LanguageProfile:
    """Spanish profile."""
    return get_language("es")


def que() -> LanguageProfile:
    """Quechua profile."""
    return get_language("que")


__all__ = [
    "BUILTIN_LANGUAGES",
    "LanguageNotFoundError",
    "available_languages",
    "en",
    "es",
    "get_language",
    "load_language_yaml",
    "que",
]

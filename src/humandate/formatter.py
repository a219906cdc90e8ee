"""
Renders dates back into a fixed textual form.
"""

from datetime import date
from typing import Optional

DEFAULT_PATTERN = "%d/%m/%Y"


class HumanDateFormatter:
    """Formats dates with a ``strftime`` pattern, ``dd/mm/yyyy`` by default.

    Example:
        >>> HumanDateFormatter().format(date(2025, 3, 7))
        '07/03/2025'
        >>> HumanDateFormatter().with_pattern("%Y-%m-%d").format(date(2025, 3, 7))
        '2025-03-07'
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN) -> None:
        self._pattern = pattern

    @property
    def pattern(self) -> str:
        return self._pattern

    def with_pattern(self, pattern: Optional[str]) -> "HumanDateFormatter":
        """Override the rendering pattern. None keeps the current pattern."""
        if pattern is not None:
            self._pattern = pattern
        return self

    def with_default_pattern(self) -> "HumanDateFormatter":
        """Restore the ``dd/mm/yyyy`` pattern."""
        return self.with_pattern(DEFAULT_PATTERN)

    def format(self, value: Optional[date]) -> Optional[str]:
        """Render ``value``; None renders as None.

        ``%Y`` always renders four digits, so year 999 is written ``0999``
        whatever the platform's ``strftime`` does.
        """
        if value is None:
            return None
        year = f"{value.year:04d}"
        # Split on escaped percents so a literal "%%Y" is left alone.
        pattern = "%%".join(part.replace("%Y", year) for part in self._pattern.split("%%"))
        return value.strftime(pattern)

    __call__ = format

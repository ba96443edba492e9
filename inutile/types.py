"""
Option types shared by the formatting helpers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_LOCALE = "pt_BR"


class FieldStyle(Enum):
    """Rendering style of a single date field."""

    NUMERIC = "numeric"
    TWO_DIGIT = "2-digit"
    SHORT = "short"
    LONG = "long"
    NARROW = "narrow"

    @property
    def is_textual(self) -> bool:
        return self in _TEXTUAL_STYLES


_NUMERIC_STYLES = (FieldStyle.NUMERIC, FieldStyle.TWO_DIGIT)
_TEXTUAL_STYLES = (FieldStyle.SHORT, FieldStyle.LONG, FieldStyle.NARROW)


@dataclass(frozen=True)
class DateFormatConfig:
    """Which date fields to render and how.

    A field set to None is left out of the output.
    """

    weekday: Optional[FieldStyle] = None
    day: Optional[FieldStyle] = FieldStyle.TWO_DIGIT
    month: Optional[FieldStyle] = FieldStyle.TWO_DIGIT
    year: Optional[FieldStyle] = FieldStyle.NUMERIC
    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        if self.weekday is not None and self.weekday not in _TEXTUAL_STYLES:
            raise ValueError(f"Unsupported weekday style: {self.weekday!r}")
        if self.day is not None and self.day not in _NUMERIC_STYLES:
            raise ValueError(f"Unsupported day style: {self.day!r}")
        if self.year is not None and self.year not in _NUMERIC_STYLES:
            raise ValueError(f"Unsupported year style: {self.year!r}")
        if self.month is not None and not isinstance(self.month, FieldStyle):
            raise ValueError(f"Unsupported month style: {self.month!r}")
        if (self.weekday, self.day, self.month, self.year) == (None,) * 4:
            raise ValueError("At least one date field must be rendered")


@dataclass(frozen=True)
class MonthNameConfig:
    """Style of a standalone month name."""

    month: FieldStyle = FieldStyle.LONG
    capitalize: bool = True
    locale: str = DEFAULT_LOCALE


DEFAULT_DATE_FORMAT = DateFormatConfig()
DEFAULT_MONTH_NAME = MonthNameConfig()

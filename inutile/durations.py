"""Time-of-day ("HH:MM") and duration ("H:MM") helpers."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

from inutile.currency import pad_two_digits
from inutile.entities import Duration
from inutile.parsing import parse_leading_int

logger = logging.getLogger(__name__)

TIME_SEPARATOR = ":"
TIME_FMT = "%H:%M"

# Only the time of day matters; the day itself is arbitrary.
REFERENCE_DATE = date(2000, 1, 1)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def _split_time(text: str) -> Optional[Tuple[str, str]]:
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    tokens = text.split(TIME_SEPARATOR)
    if len(tokens) < 2:
        return None
    return tokens[0], tokens[1]


def _parse_time(text: str) -> Optional[datetime]:
    tokens = _split_time(text)
    if tokens is None:
        logger.debug("Rejected time without separator: %r", text)
        return None
    try:
        parsed = datetime.strptime(TIME_SEPARATOR.join(tokens), TIME_FMT)
    except ValueError:
        logger.debug("Rejected out of range time: %r", text)
        return None
    return datetime.combine(REFERENCE_DATE, parsed.time())


def is_time(text: str) -> bool:
    """
    Check whether ``text`` is a valid HH:MM time of day.

    >>> is_time("23:59"), is_time("24:00"), is_time("23:60")
    (True, False, False)
    """
    return _parse_time(text) is not None


def is_duration(text: str) -> bool:
    """
    Check whether ``text`` is an [H]:MM duration.

    The hour part is unbounded; the minutes must be two characters up to 59.

    >>> is_duration("120:59"), is_duration("100"), is_duration("50:61")
    (True, False, False)
    """
    tokens = _split_time(text)
    if tokens is None:
        return False
    minutes_text = tokens[1]
    if len(minutes_text) != 2:
        return False
    minutes = parse_leading_int(minutes_text)
    return minutes is not None and minutes <= 59


def duration_to_decimal(text: str) -> Optional[float]:
    """Convert an [H]:MM duration into decimal hours ("1:30" -> 1.5)."""
    if not is_duration(text):
        logger.debug("Rejected duration: %r", text)
        return None

    hours_text, minutes_text = _split_time(text)
    hours = parse_leading_int(hours_text)
    if hours is None:
        logger.debug("Rejected duration without hours: %r", text)
        return None
    return hours + parse_leading_int(minutes_text) / 60


def date_from_time(text: str) -> Optional[datetime]:
    """Return the HH:MM time as a datetime on REFERENCE_DATE, or None."""
    return _parse_time(text)


def difference_in_ms(
    start: Union[date, datetime], end: Union[date, datetime]
) -> int:
    """Milliseconds from ``start`` to ``end``; negative if ``end`` comes first."""
    return (end - start) // timedelta(milliseconds=1)


def ms_to_duration(duration: Union[int, float]) -> Duration:
    """
    Split a millisecond count into hours, minutes, seconds and tenths.

    Hours are not wrapped at 24. ``milliseconds`` keeps a single digit of
    resolution, i.e. ``floor((duration % 1000) / 100)``, and ``mask`` renders
    the hours and minutes as HH:MM.

    Raises
    ------
    ValueError
        If duration is negative
    """
    if duration < 0:
        raise ValueError(f"duration must be non-negative, got {duration!r}")

    hours = math.floor(duration / MS_PER_HOUR)
    minutes = math.floor(duration / MS_PER_MINUTE) % 60
    seconds = math.floor(duration / MS_PER_SECOND) % 60
    milliseconds = math.floor((duration % MS_PER_SECOND) / 100)

    return Duration(
        mask=f"{pad_two_digits(hours)}:{pad_two_digits(minutes)}",
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        milliseconds=milliseconds,
    )

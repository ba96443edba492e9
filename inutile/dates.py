"""
Calendar helpers for pt-BR dates (DD/MM/YYYY).

Month arithmetic clamps to the end of the target month and month-name
lookups are pinned to the first day of the month, so a reference date on
the 29th-31st never rolls over into the following month.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, TypeVar, Union

from babel.dates import format_date as babel_format_date
from babel.dates import get_month_names
from dateutil.relativedelta import relativedelta

from inutile.entities import MonthEntry
from inutile.parsing import parse_leading_int
from inutile.ranges import inclusive_range
from inutile.types import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_MONTH_NAME,
    DateFormatConfig,
    FieldStyle,
    MonthNameConfig,
)

logger = logging.getLogger(__name__)

DATE_SEPARATOR = "/"
DATE_FMT = "%d/%m/%Y"

DateLike = TypeVar("DateLike", date, datetime)

_WEEKDAY_PATTERNS = {
    FieldStyle.SHORT: "EEE",
    FieldStyle.LONG: "EEEE",
    FieldStyle.NARROW: "EEEEE",
}
_DAY_PATTERNS = {FieldStyle.NUMERIC: "d", FieldStyle.TWO_DIGIT: "dd"}
_MONTH_PATTERNS = {
    FieldStyle.NUMERIC: "M",
    FieldStyle.TWO_DIGIT: "MM",
    FieldStyle.SHORT: "MMM",
    FieldStyle.LONG: "MMMM",
    FieldStyle.NARROW: "MMMMM",
}
_YEAR_PATTERNS = {FieldStyle.NUMERIC: "yyyy", FieldStyle.TWO_DIGIT: "yy"}
_MONTH_NAME_WIDTHS = {
    FieldStyle.SHORT: "abbreviated",
    FieldStyle.LONG: "wide",
    FieldStyle.NARROW: "narrow",
}


def _require_date(value: object) -> None:
    if not isinstance(value, date):
        raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def _to_date(value: Union[date, datetime]) -> date:
    _require_date(value)
    if isinstance(value, datetime):
        return value.date()
    return value


def is_date(value: object) -> bool:
    """True for date and datetime instances."""
    return isinstance(value, date)


def parse_date(text: str) -> Optional[date]:
    """
    Parse a DD/MM/YYYY string.

    Returns None for malformed text and for impossible dates such as
    31/02/2021; day overflow is not carried into the next month.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if not text.isascii():
        logger.debug("Rejected non-ASCII date: %r", text)
        return None

    try:
        return datetime.strptime(text, DATE_FMT).date()
    except ValueError:
        logger.debug("Rejected invalid date: %r", text)
        return None


def is_date_string(text: str) -> bool:
    """True when ``text`` is a valid DD/MM/YYYY date."""
    return is_date(parse_date(text))


def _date_pattern(config: DateFormatConfig) -> str:
    weekday = _WEEKDAY_PATTERNS.get(config.weekday)
    day = _DAY_PATTERNS.get(config.day)
    month = _MONTH_PATTERNS.get(config.month)
    year = _YEAR_PATTERNS.get(config.year)

    fields = [field for field in (day, month, year) if field]
    if config.month is not None and config.month.is_textual:
        # "17 de outubro de 2026"
        pattern = " 'de' ".join(fields)
    else:
        pattern = DATE_SEPARATOR.join(fields)

    if weekday and pattern:
        return f"{weekday}, {pattern}"
    return weekday or pattern


def format_date(
    value: Union[date, datetime], config: DateFormatConfig = DEFAULT_DATE_FORMAT
) -> str:
    """
    Render a date with pt-BR conventions.

    >>> format_date(date(2026, 10, 17))
    '17/10/2026'
    >>> format_date(date(2026, 10, 17), DateFormatConfig(day=FieldStyle.NUMERIC, month=FieldStyle.LONG))
    '17 de outubro de 2026'
    """
    _require_date(value)
    return babel_format_date(value, format=_date_pattern(config), locale=config.locale)


def get_month_name_by_number(
    month_number: Union[int, str], config: MonthNameConfig = DEFAULT_MONTH_NAME
) -> str:
    """
    Return the name of a 0-based month (0 = janeiro).

    Numeric strings are accepted. Indices outside 0..11 wrap around the year,
    so 12 is janeiro and -1 is dezembro.
    """
    index = month_number if isinstance(month_number, int) else parse_leading_int(str(month_number))
    if index is None:
        raise ValueError(f"Invalid month number: {month_number!r}")

    # Day-pinned reference date: setting the month can never overflow.
    reference = date(date.today().year, 1, 1) + relativedelta(months=index)

    if config.month.is_textual:
        names = get_month_names(
            _MONTH_NAME_WIDTHS[config.month], context="stand-alone", locale=config.locale
        )
        name = names[reference.month]
    else:
        name = babel_format_date(
            reference, format=_MONTH_PATTERNS[config.month], locale=config.locale
        )

    if not config.capitalize:
        return name
    return name[:1].upper() + name[1:]


def add_days(value: DateLike, quantity: int) -> DateLike:
    """Add ``quantity`` days (negative values subtract)."""
    _require_date(value)
    return value + timedelta(days=quantity)


def add_months(value: DateLike, quantity: int) -> DateLike:
    """
    Add ``quantity`` months (negative values subtract).

    The day is clamped to the end of the target month, e.g.
    2023-01-31 plus one month is 2023-02-28.
    """
    _require_date(value)
    return value + relativedelta(months=quantity)


def add_years(value: DateLike, quantity: int) -> DateLike:
    """
    Add ``quantity`` years (negative values subtract).

    February 29th moved into a non-leap year becomes March 1st.
    """
    _require_date(value)
    year = value.year + quantity
    try:
        return value.replace(year=year)
    except ValueError:
        if (value.month, value.day) != (2, 29):
            raise
        logger.debug("Rolling %s over to March 1st of %s", value, year)
        return value.replace(year=year, month=3, day=1)


def get_first_date_of_month(value: Union[date, datetime]) -> date:
    """Return the first day of the month of ``value``."""
    return _to_date(value).replace(day=1)


def get_last_date_of_month(value: Union[date, datetime]) -> date:
    """Return the last day of the month of ``value``."""
    dt = _to_date(value)
    return dt.replace(day=calendar.monthrange(dt.year, dt.month)[1])


def date_range(
    start: Union[date, datetime],
    end: Union[date, datetime],
    details: bool = False,
) -> Union[List[date], List[MonthEntry]]:
    """
    Return the first day of every month from ``start`` through ``end``.

    Both ends are inclusive at month granularity: 2022-11-15 to 2023-02-10
    gives Nov 1, Dec 1, Jan 1 and Feb 1. With ``details`` each item is a
    MonthEntry carrying the year, the 0-based month and the month name.
    """
    start = _to_date(start)
    end = _to_date(end)

    years = inclusive_range(start.year, end.year)
    result = []
    for i, year in enumerate(years):
        first_month = start.month - 1 if i == 0 else 0
        last_month = end.month - 1 if i == len(years) - 1 else 11

        for month in inclusive_range(first_month, last_month):
            first_day = date(year, month + 1, 1)
            if not details:
                result.append(first_day)
                continue
            result.append(
                MonthEntry(
                    date=first_day,
                    year=year,
                    month=month,
                    month_name=get_month_name_by_number(month),
                )
            )

    return result

"""Formatting and parsing helpers for Brazilian Portuguese conventions."""

from .currency import (
    DEFAULT_CURRENCY_FORMATTER,
    CurrencyFormatter,
    currency_to_number,
    is_currency,
    number_to_currency,
    pad_two_digits,
)
from .dates import (
    add_days,
    add_months,
    add_years,
    date_range,
    format_date,
    get_first_date_of_month,
    get_last_date_of_month,
    get_month_name_by_number,
    is_date,
    is_date_string,
    parse_date,
)
from .durations import (
    date_from_time,
    difference_in_ms,
    duration_to_decimal,
    is_duration,
    is_time,
    ms_to_duration,
)
from .entities import Duration, MonthEntry
from .ranges import inclusive_range
from .text import affirmative_to_boolean, capitalize
from .types import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_MONTH_NAME,
    DateFormatConfig,
    FieldStyle,
    MonthNameConfig,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Strings
    "affirmative_to_boolean",
    "capitalize",
    # Time and durations
    "is_time",
    "is_duration",
    "duration_to_decimal",
    "date_from_time",
    "difference_in_ms",
    "ms_to_duration",
    "Duration",
    # Numbers and currency
    "pad_two_digits",
    "is_currency",
    "currency_to_number",
    "number_to_currency",
    "CurrencyFormatter",
    "DEFAULT_CURRENCY_FORMATTER",
    # Dates
    "is_date",
    "is_date_string",
    "parse_date",
    "format_date",
    "get_month_name_by_number",
    "add_days",
    "add_months",
    "add_years",
    "get_first_date_of_month",
    "get_last_date_of_month",
    "date_range",
    "MonthEntry",
    "DateFormatConfig",
    "MonthNameConfig",
    "FieldStyle",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_MONTH_NAME",
    # Ranges
    "inclusive_range",
]

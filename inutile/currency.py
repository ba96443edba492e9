"""Number and currency helpers for pt-BR money strings ("1.234,56")."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from babel.numbers import format_currency, format_decimal

from inutile.parsing import parse_leading_float, parse_leading_int
from inutile.types import DEFAULT_LOCALE

Number = Union[int, float]

DECIMAL_SEPARATOR = ","
GROUP_SEPARATOR = "."


@dataclass(frozen=True)
class CurrencyFormatter:
    """Locale-aware number formatter.

    Attributes
    ----------
    locale : str
        Babel locale identifier
    min_fraction_digits : int
        Fraction digits always rendered
    max_fraction_digits : int
        Fraction digits rendered at most, rounding beyond that
    grouping : bool
        Whether to render the thousands separator
    currency : str, optional
        ISO 4217 code; when set the currency symbol is prefixed (e.g. "R$")
    """

    locale: str = DEFAULT_LOCALE
    min_fraction_digits: int = 2
    max_fraction_digits: int = 2
    grouping: bool = True
    currency: Optional[str] = None

    def __post_init__(self) -> None:
        if self.min_fraction_digits < 0:
            raise ValueError("min_fraction_digits must be non-negative")
        if self.max_fraction_digits < self.min_fraction_digits:
            raise ValueError(
                "max_fraction_digits must be greater than or equal to min_fraction_digits"
            )

    @property
    def pattern(self) -> str:
        """CLDR number pattern equivalent to the configured options."""
        integer = "#,##0" if self.grouping else "0"
        optional = self.max_fraction_digits - self.min_fraction_digits
        fraction = "0" * self.min_fraction_digits + "#" * optional
        number = f"{integer}.{fraction}" if fraction else integer
        if self.currency:
            return f"¤ {number}"
        return number

    def format(self, number: Number) -> str:
        if self.currency:
            return format_currency(
                number,
                self.currency,
                format=self.pattern,
                locale=self.locale,
                currency_digits=False,
            )
        return format_decimal(number, format=self.pattern, locale=self.locale)


DEFAULT_CURRENCY_FORMATTER = CurrencyFormatter()


def pad_two_digits(value: Union[int, str]) -> str:
    """Left-pad ``value`` with zeros to at least two characters."""
    return str(value).rjust(2, "0")


def is_currency(value: object) -> bool:
    """
    Check whether ``value`` is a pt-BR money literal with two fraction digits.

    Examples
    --------
    >>> is_currency("1.000,30")
    True
    >>> is_currency("1.000,999")
    False
    >>> is_currency("1.000")
    False
    """
    if not isinstance(value, str):
        return False

    integer, _, fractional = value.partition(DECIMAL_SEPARATOR)
    # Only the text up to a second comma counts as the fractional part
    fractional = fractional.split(DECIMAL_SEPARATOR)[0]
    return parse_leading_int(integer) is not None and len(fractional) == 2


def currency_to_number(text: str) -> Optional[float]:
    """
    Convert a pt-BR money string into a float.

    Empty strings convert to 0.0; text without a leading number gives None.

    >>> currency_to_number("1.000,50")
    1000.5
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    normalized = text.replace(GROUP_SEPARATOR, "").replace(DECIMAL_SEPARATOR, ".", 1)
    if not normalized:
        return 0.0
    return parse_leading_float(normalized)


def number_to_currency(
    number: Number, formatter: CurrencyFormatter = DEFAULT_CURRENCY_FORMATTER
) -> str:
    """Format ``number`` as a pt-BR money string, e.g. 1000.5 -> "1.000,50"."""
    return formatter.format(number)

# qif_dom/utilities/converters_scalar.py
"""
Culture-aware scalar conversions for QIF field text.

Parsing functions raise :class:`ValueError` with the offending text; the
reader wraps those into :class:`~qif_dom.qif_errors.DataFormatError`.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any, Final

from ..config import (
    Configuration,
    Culture,
    DateOrder,
    DateStyles,
    NumberStyles,
    ReadDateFormatMode,
    WriteDateFormatMode,
    WriteDecimalFormatMode,
)

_UNICODE_MINUS: Final[str] = "\u2212"
_DIGITS_RE: Final = re.compile(r"^\d*$")
_EXPONENT_RE: Final = re.compile(r"^(.*?)[eE]([+-]?\d+)$")
_DATE_PARTS_RE: Final = re.compile(r"^(\d{1,4})[/.\-](\d{1,2})[/.\-](\d{1,4})$")

# Two-digit years up to this value are in the 2000s, the rest in the 1900s.
TWO_DIGIT_YEAR_PIVOT: Final[int] = 49


def _bad(value: Any, target: str) -> ValueError:
    return ValueError(f"Cannot convert {value!r} to {target}")


# region Numbers


def clean_number_like_string(
    value: str, culture: Culture, styles: NumberStyles = NumberStyles.ANY
) -> str:
    """
    Normalize culture-formatted number text into a string ``Decimal`` accepts.

    Only the lexical features enabled in ``styles`` are accepted:
      - surrounding whitespace, leading or trailing sign, ``(1.00)`` negatives
      - the culture's decimal and group separators
      - the culture's currency symbol and an ``e`` exponent

    Examples (en-US, ``NumberStyles.ANY``):
        "1,500.00"  -> "1500.00"
        "(12.50)"   -> "-12.50"
        "12.50-"    -> "-12.50"
        "$3"        -> "3"
    """
    s = value.replace("\xa0", " ").replace(_UNICODE_MINUS, "-")
    if styles.has_flag(NumberStyles.ALLOW_LEADING_WHITE):
        s = s.lstrip()
    if styles.has_flag(NumberStyles.ALLOW_TRAILING_WHITE):
        s = s.rstrip()
    if not s:
        raise ValueError("Empty string cannot be converted to a number")

    neg = False
    if s.startswith("(") and s.endswith(")"):
        if not styles.has_flag(NumberStyles.ALLOW_PARENTHESES):
            raise _bad(value, "number")
        neg = True
        s = s[1:-1].strip()

    if culture.currency_symbol and culture.currency_symbol in s:
        if not styles.has_flag(NumberStyles.ALLOW_CURRENCY_SYMBOL):
            raise _bad(value, "number")
        s = s.replace(culture.currency_symbol, "").strip()

    if s[:1] in ("+", "-"):
        if not styles.has_flag(NumberStyles.ALLOW_LEADING_SIGN):
            raise _bad(value, "number")
        neg = neg != (s[0] == "-")
        s = s[1:].lstrip()
    elif s[-1:] in ("+", "-"):
        if not styles.has_flag(NumberStyles.ALLOW_TRAILING_SIGN):
            raise _bad(value, "number")
        neg = neg != (s[-1] == "-")
        s = s[:-1].rstrip()

    exponent = ""
    m = _EXPONENT_RE.match(s)
    if m is not None:
        if not styles.has_flag(NumberStyles.ALLOW_EXPONENT):
            raise _bad(value, "number")
        s, exponent = m.group(1), m.group(2)

    int_part, dec_sep, frac_part = s.partition(culture.decimal_separator)
    if dec_sep and not styles.has_flag(NumberStyles.ALLOW_DECIMAL_POINT):
        raise _bad(value, "number")
    if culture.group_separator and culture.group_separator in int_part:
        if not styles.has_flag(NumberStyles.ALLOW_THOUSANDS):
            raise _bad(value, "number")
        int_part = int_part.replace(culture.group_separator, "")

    if not _DIGITS_RE.match(int_part) or not _DIGITS_RE.match(frac_part):
        raise _bad(value, "number")
    if not int_part and not frac_part:
        raise ValueError(f"No digits found in input: {value!r}")

    cleaned = int_part or "0"
    if frac_part:
        cleaned += "." + frac_part
    if exponent:
        cleaned += "E" + exponent
    return ("-" + cleaned) if neg else cleaned


def to_decimal(
    value: str, culture: Culture, styles: NumberStyles = NumberStyles.ANY
) -> Decimal:
    """Parse culture-formatted decimal text."""
    cleaned = clean_number_like_string(value, culture, styles)
    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(
            f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
        ) from e


def to_int(value: str, culture: Culture, styles: NumberStyles = NumberStyles.ANY) -> int:
    """Parse culture-formatted integer text; a fractional part must be zero."""
    d = to_decimal(value, culture, styles)
    if d != d.to_integral_value():
        raise ValueError(f"Non-integer value {value!r} for integer field")
    return int(d)


def fraction_to_decimal(value: Fraction) -> Decimal:
    """Convert an exact rational to ``Decimal`` in a single division."""
    return Decimal(value.numerator) / Decimal(value.denominator)


def parse_mixed_number(
    value: str, culture: Culture, styles: NumberStyles = NumberStyles.ANY
) -> Decimal:
    """
    Parse ``"[whole ]numerator/denominator"`` exactly.

    A leading ``-`` negates the whole quantity, so ``"-33 3/4"`` is
    ``-33.75``.

    Examples:
        "33 3/4" -> Decimal('33.75')
        "1/4"    -> Decimal('0.25')
    """
    s = value.strip()
    neg = s.startswith("-")
    if neg:
        s = s[1:].lstrip()
    whole_text, _, fraction_text = s.rpartition(" ")
    num_text, slash, den_text = fraction_text.partition("/")
    if not slash:
        raise _bad(value, "fraction")

    unsigned = styles.remove_flag(NumberStyles.ALLOW_LEADING_SIGN).remove_flag(
        NumberStyles.ALLOW_TRAILING_SIGN
    )
    whole = to_int(whole_text, culture, unsigned) if whole_text.strip() else 0
    numerator = to_int(num_text, culture, unsigned)
    denominator = to_int(den_text, culture, unsigned)
    if denominator == 0:
        raise ValueError(f"Zero denominator in {value!r}")

    result = whole + Fraction(numerator, denominator)
    return fraction_to_decimal(-result if neg else result)


def format_decimal(value: Decimal, configuration: Configuration) -> str:
    """
    Format ``value`` for writing.

    DEFAULT mode writes plain digits (no grouping) with the culture decimal
    separator. CUSTOM mode applies ``custom_write_decimal_format`` as a
    ``format()`` spec and then maps ``,``/``.`` to the culture separators.
    """
    culture = configuration.culture
    if configuration.write_decimal_format_mode is WriteDecimalFormatMode.CUSTOM:
        text = format(value, configuration.custom_write_decimal_format)
        return "".join(
            culture.group_separator if ch == ","
            else culture.decimal_separator if ch == "."
            else ch
            for ch in text
        )
    return format(value, "f").replace(".", culture.decimal_separator)


# endregion Numbers

# region Dates


def decode_qif_date_text(value: str, styles: DateStyles = DateStyles.ALLOW_WHITE_SPACES) -> str:
    """
    Undo the QIF date encoding: ``'`` becomes ``/`` and spaces become ``0``.

    ``"10/27' 6"`` -> ``"10/27/06"``
    """
    s = value
    if styles.has_flag(DateStyles.ALLOW_LEADING_WHITE):
        s = s.lstrip()
    if styles.has_flag(DateStyles.ALLOW_TRAILING_WHITE):
        s = s.rstrip()
    return s.replace("'", "/").replace(" ", "0")


def expand_year(year_text: str) -> int:
    year = int(year_text)
    if len(year_text) <= 2:
        return 2000 + year if year <= TWO_DIGIT_YEAR_PIVOT else 1900 + year
    return year


def parse_culture_date(value: str, culture: Culture) -> date:
    """
    Parse a numeric short date in the culture's day/month/year order.

    A four-digit leading part is always read as year-month-day.
    """
    m = _DATE_PARTS_RE.match(value)
    if m is None:
        raise _bad(value, "date")
    a, b, c = m.groups()
    if len(a) == 4 or culture.date_order is DateOrder.YMD:
        y, mo, d = a, b, c
    elif culture.date_order is DateOrder.DMY:
        d, mo, y = a, b, c
    else:
        mo, d, y = a, b, c
    try:
        return date(expand_year(y), int(mo), int(d))
    except ValueError as e:
        raise _bad(value, "date") from e


def to_date(value: str, configuration: Configuration) -> date:
    """Decode and parse QIF date text using the read settings of ``configuration``."""
    text = decode_qif_date_text(value, configuration.date_styles)
    if configuration.read_date_format_mode is ReadDateFormatMode.CUSTOM:
        try:
            return datetime.strptime(text, configuration.custom_read_date_format).date()
        except ValueError as e:
            raise _bad(value, "date") from e
    return parse_culture_date(text, configuration.effective_read_culture)


def format_date(value: date, configuration: Configuration) -> str:
    if configuration.write_date_format_mode is WriteDateFormatMode.CUSTOM:
        return value.strftime(configuration.custom_write_date_format)
    return configuration.culture.format_short_date(value)


# endregion Dates

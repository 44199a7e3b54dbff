# qif_dom/config/enum_parse_styles.py
from __future__ import annotations

from enum import IntFlag


class _FlagHelpers:
    def has_flag(self, flag) -> bool:
        """True if all bits in `flag` are set on this mask."""
        return (self & flag) == flag

    def remove_flag(self, flag):
        """Return a new mask with `flag` cleared."""
        return self & ~flag


class NumberStyles(_FlagHelpers, IntFlag):
    """
    Leniency flags for numeric parsing.

    Each flag permits one lexical feature; the composite members mirror the
    common combinations.
    """

    NONE = 0
    ALLOW_LEADING_WHITE = 1
    ALLOW_TRAILING_WHITE = 2
    ALLOW_LEADING_SIGN = 4
    ALLOW_TRAILING_SIGN = 8
    ALLOW_PARENTHESES = 16
    ALLOW_DECIMAL_POINT = 32
    ALLOW_THOUSANDS = 64
    ALLOW_EXPONENT = 128
    ALLOW_CURRENCY_SYMBOL = 256

    INTEGER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_LEADING_SIGN
    NUMBER = (
        INTEGER | ALLOW_TRAILING_SIGN | ALLOW_DECIMAL_POINT | ALLOW_THOUSANDS
    )
    CURRENCY = NUMBER | ALLOW_PARENTHESES | ALLOW_CURRENCY_SYMBOL
    ANY = CURRENCY | ALLOW_EXPONENT


class DateStyles(_FlagHelpers, IntFlag):
    """
    Leniency flags for date parsing.

    Whitespace inside a date is always part of the QIF encoding (a space
    stands for ``0``); these flags only govern whitespace at either end.
    """

    NONE = 0
    ALLOW_LEADING_WHITE = 1
    ALLOW_TRAILING_WHITE = 2

    ALLOW_WHITE_SPACES = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE

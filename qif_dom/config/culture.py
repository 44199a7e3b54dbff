# qif_dom/config/culture.py
"""
Minimal culture (locale) descriptions used for QIF number and date text.

The process locale is never consulted or changed. A :class:`Culture` is a
plain value carried by :class:`~qif_dom.config.configuration.Configuration`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict

# .NET-style short date tokens, longest first so "yyyy" wins over "yy".
_PATTERN_TOKEN_RE = re.compile(r"yyyy|yy|MM|M|dd|d")


class DateOrder(Enum):
    """Order of day, month and year in a culture's short date."""

    MDY = "MDY"
    DMY = "DMY"
    YMD = "YMD"


@dataclass(frozen=True)
class Culture:
    """
    Number and date conventions for one locale.

    ``short_date_pattern`` uses the tokens ``M``/``MM`` (month), ``d``/``dd``
    (day) and ``yy``/``yyyy`` (year); anything else is copied literally.
    """

    name: str
    date_order: DateOrder
    short_date_pattern: str
    decimal_separator: str = "."
    group_separator: str = ","
    currency_symbol: str = "$"

    def format_short_date(self, value: date) -> str:
        """Render ``value`` using :attr:`short_date_pattern`."""

        def _token(m: re.Match[str]) -> str:
            tok = m.group(0)
            if tok == "yyyy":
                return f"{value.year:04d}"
            if tok == "yy":
                return f"{value.year % 100:02d}"
            if tok == "MM":
                return f"{value.month:02d}"
            if tok == "M":
                return str(value.month)
            if tok == "dd":
                return f"{value.day:02d}"
            return str(value.day)

        return _PATTERN_TOKEN_RE.sub(_token, self.short_date_pattern)


INVARIANT = Culture("invariant", DateOrder.MDY, "MM/dd/yyyy", currency_symbol="¤")
EN_US = Culture("en-US", DateOrder.MDY, "M/d/yyyy")
EN_GB = Culture("en-GB", DateOrder.DMY, "dd/MM/yyyy", currency_symbol="£")
EN_CA = Culture("en-CA", DateOrder.YMD, "yyyy-MM-dd")
EN_AU = Culture("en-AU", DateOrder.DMY, "d/MM/yyyy")
DE_DE = Culture("de-DE", DateOrder.DMY, "dd.MM.yyyy", ",", ".", "€")
FR_FR = Culture("fr-FR", DateOrder.DMY, "dd/MM/yyyy", ",", " ", "€")
JA_JP = Culture("ja-JP", DateOrder.YMD, "yyyy/MM/dd", currency_symbol="¥")

_CULTURES: Dict[str, Culture] = {
    c.name.lower(): c
    for c in (INVARIANT, EN_US, EN_GB, EN_CA, EN_AU, DE_DE, FR_FR, JA_JP)
}


def get_culture(name: str) -> Culture:
    """
    Look up a registered culture by name (case-insensitive).

    Raises
    ------
    KeyError
        If no culture with that name is registered.
    """
    key = name.strip().lower()
    if key == "":
        return INVARIANT
    try:
        return _CULTURES[key]
    except KeyError:
        raise KeyError(f"Unknown culture {name!r}") from None


def available_cultures() -> list[str]:
    return sorted(c.name for c in _CULTURES.values())

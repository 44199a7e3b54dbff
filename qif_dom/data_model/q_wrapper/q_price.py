# qif_dom/data_model/q_wrapper/q_price.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from functools import total_ordering

from ...utilities import compact_dict
from ..interfaces import RecursiveDictStr


@total_ordering
@dataclass(frozen=True)
class QPrice:
    """A security price quote, written as ``"SYMBOL",value,"date"``."""

    symbol: str
    value: Decimal
    date: date

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QPrice):
            return NotImplemented
        return (self.symbol, self.date) < (other.symbol, other.date)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return compact_dict(symbol=self.symbol, value=self.value, date=self.date)

# qif_dom/data_model/q_wrapper/q_security.py
from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

from ...utilities import compact_dict
from ..interfaces import RecursiveDictStr


@total_ordering
@dataclass(frozen=True)
class QSecurity:
    """
    Represents a security (``!Type:Security``) in QIF format.
    """

    name: str
    symbol: Optional[str] = None
    type: Optional[str] = None
    goal: Optional[str] = None
    description: Optional[str] = None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QSecurity):
            return NotImplemented
        return (self.name, self.symbol or "") < (other.name, other.symbol or "")

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return compact_dict(
            name=self.name,
            symbol=self.symbol,
            type=self.type,
            goal=self.goal,
            description=self.description,
        )

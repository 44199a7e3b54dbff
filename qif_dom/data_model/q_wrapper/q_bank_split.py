# qif_dom/data_model/q_wrapper/q_bank_split.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from ...utilities import compact_dict
from ..interfaces import IToDict, RecursiveDictStr


@dataclass(frozen=True)
class QBankSplit:
    """
    One allocation of a split transaction.

    Either ``amount`` or ``percentage`` (or both) is normally present.
    """

    category: Optional[str] = None
    memo: Optional[str] = None
    amount: Optional[Decimal] = None
    percentage: Optional[Decimal] = None

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return compact_dict(
            category=self.category,
            memo=self.memo,
            amount=self.amount,
            percentage=self.percentage,
        )


if TYPE_CHECKING:
    _is_IToDict: type[IToDict] = QBankSplit

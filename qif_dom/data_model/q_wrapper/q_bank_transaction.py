# qif_dom/data_model/q_wrapper/q_bank_transaction.py
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING, Optional

from ...utilities import compact_dict
from ..interfaces import AccountType, ClearedState, ITransaction, RecursiveDictStr
from .q_bank_split import QBankSplit

TRANSFER_RE = re.compile(r"^\[(.+?)\]$")


def split_category_and_tag(value: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Split ``'Category/Tag'`` into its parts; either part may be missing."""
    if value is None:
        return None, None
    category, sep, tag = value.partition("/")
    return (category or None), (tag if sep and tag else None)


@total_ordering
@dataclass(frozen=True)
class QBankTransaction:
    """
    A transaction in a bank, cash, credit card, asset or liability block.

    ``account_type`` records which of those blocks the transaction was read
    from (or will be written to).
    """

    date: date
    amount: Decimal
    account_type: AccountType = AccountType.BANK
    cleared: Optional[ClearedState] = None
    number: Optional[str] = None
    payee: Optional[str] = None
    memo: Optional[str] = None
    category: Optional[str] = None
    address: tuple[str, ...] = ()
    splits: tuple[QBankSplit, ...] = ()

    @property
    def category_name(self) -> Optional[str]:
        """The ``L`` text without its ``/class`` suffix."""
        return split_category_and_tag(self.category)[0]

    @property
    def tag(self) -> Optional[str]:
        """The class (tag) after ``/`` in the ``L`` text."""
        return split_category_and_tag(self.category)[1]

    @property
    def transfer_account(self) -> Optional[str]:
        """Account name when the category is a ``[Account]`` transfer."""
        name = self.category_name
        if name is None:
            return None
        m = TRANSFER_RE.match(name.strip())
        return m.group(1).strip() if m else None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QBankTransaction):
            return NotImplemented
        return (self.date, self.amount, self.payee or "") < (
            other.date,
            other.amount,
            other.payee or "",
        )

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = dict(
            compact_dict(
                account_type=self.account_type,
                date=self.date,
                amount=self.amount,
                cleared=self.cleared,
                number=self.number,
                payee=self.payee,
                memo=self.memo,
                category=self.category,
            )
        )
        if self.address:
            d["address"] = list(self.address)
        if self.splits:
            d["splits"] = [s.to_dict() for s in self.splits]
        return d


if TYPE_CHECKING:
    _is_ITransaction: type[ITransaction] = QBankTransaction

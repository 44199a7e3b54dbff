# qif_dom/data_model/q_wrapper/q_investment_transaction.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING, Optional

from ...utilities import compact_dict
from ..interfaces import AccountType, ClearedState, ITransaction, RecursiveDictStr


@total_ordering
@dataclass(frozen=True)
class QInvestmentTransaction:
    """
    A transaction in an investment (``!Type:Invst``) block.
    """

    date: date
    action: Optional[str] = None
    security: Optional[str] = None
    price: Optional[Decimal] = None
    quantity: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    cleared: Optional[ClearedState] = None
    payee: Optional[str] = None
    memo: Optional[str] = None
    commission: Optional[Decimal] = None
    transfer_account: Optional[str] = None
    transfer_amount: Optional[Decimal] = None

    @property
    def account_type(self) -> AccountType:
        return AccountType.INVESTMENT

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QInvestmentTransaction):
            return NotImplemented
        return (self.date, self.security or "", self.action or "") < (
            other.date,
            other.security or "",
            other.action or "",
        )

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return compact_dict(
            date=self.date,
            action=self.action,
            security=self.security,
            price=self.price,
            quantity=self.quantity,
            amount=self.amount,
            cleared=self.cleared,
            payee=self.payee,
            memo=self.memo,
            commission=self.commission,
            transfer_account=self.transfer_account,
            transfer_amount=self.transfer_amount,
        )


if TYPE_CHECKING:
    _is_ITransaction: type[ITransaction] = QInvestmentTransaction

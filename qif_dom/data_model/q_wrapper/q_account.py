# qif_dom/data_model/q_wrapper/q_account.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING, Optional, Union

from ...utilities import compact_dict
from ..interfaces import AccountType, IToDict, RecursiveDictStr
from .q_bank_transaction import QBankTransaction
from .q_investment_transaction import QInvestmentTransaction

AccountTransaction = Union[QBankTransaction, QInvestmentTransaction]


@total_ordering
@dataclass
class QAccount:
    """
    Represents an account in QIF format.

    ``transactions`` holds the transactions read from the block(s) that
    followed this account's ``!Account`` header, in source order.
    """

    name: str
    type: Optional[str] = None
    description: Optional[str] = None
    credit_limit: Optional[Decimal] = None
    statement_balance_date: Optional[date] = None
    statement_balance: Optional[Decimal] = None
    transactions: list[AccountTransaction] = field(default_factory=list)

    @property
    def account_type(self) -> Optional[AccountType]:
        """The ``T`` text as an :class:`AccountType`, if recognized."""
        return AccountType.from_header_value(self.type) if self.type else None

    @property
    def bank_transactions(self) -> list[QBankTransaction]:
        return [t for t in self.transactions if isinstance(t, QBankTransaction)]

    @property
    def investment_transactions(self) -> list[QInvestmentTransaction]:
        return [t for t in self.transactions if isinstance(t, QInvestmentTransaction)]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QAccount):
            return NotImplemented
        return (self.name, self.type or "") < (other.name, other.type or "")

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = dict(
            compact_dict(
                name=self.name,
                type=self.type,
                description=self.description,
                credit_limit=self.credit_limit,
                statement_balance_date=self.statement_balance_date,
                statement_balance=self.statement_balance,
            )
        )
        if self.transactions:
            d["transactions"] = [t.to_dict() for t in self.transactions]
        return d


if TYPE_CHECKING:
    _is_IToDict: type[IToDict] = QAccount

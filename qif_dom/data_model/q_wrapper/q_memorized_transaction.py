# qif_dom/data_model/q_wrapper/q_memorized_transaction.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from ...utilities import compact_dict
from ..interfaces import (
    ClearedState,
    ITransaction,
    MemorizedTransactionType,
    RecursiveDictStr,
)
from .q_bank_transaction import QBankTransaction


@dataclass(frozen=True)
class QAmortization:
    """Loan amortization details of a memorized payment (fields ``1``-``7``)."""

    first_payment_date: Optional[date] = None
    total_years: Optional[int] = None
    payments_made: Optional[int] = None
    periods_per_year: Optional[int] = None
    interest_rate: Optional[Decimal] = None
    current_balance: Optional[Decimal] = None
    original_amount: Optional[Decimal] = None

    @property
    def is_empty(self) -> bool:
        return all(
            v is None
            for v in (
                self.first_payment_date,
                self.total_years,
                self.payments_made,
                self.periods_per_year,
                self.interest_rate,
                self.current_balance,
                self.original_amount,
            )
        )

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return compact_dict(
            first_payment_date=self.first_payment_date,
            total_years=self.total_years,
            payments_made=self.payments_made,
            periods_per_year=self.periods_per_year,
            interest_rate=self.interest_rate,
            current_balance=self.current_balance,
            original_amount=self.original_amount,
        )


@dataclass(frozen=True)
class QMemorizedTransaction:
    """
    A memorized transaction: bank transaction fields plus a ``K`` type code
    and optional amortization details.
    """

    type: MemorizedTransactionType
    transaction: QBankTransaction
    amortization: QAmortization = QAmortization()

    # region ITransaction passthrough

    @property
    def date(self) -> date:
        return self.transaction.date

    @property
    def amount(self) -> Decimal:
        return self.transaction.amount

    @property
    def cleared(self) -> Optional[ClearedState]:
        return self.transaction.cleared

    @property
    def payee(self) -> Optional[str]:
        return self.transaction.payee

    @property
    def memo(self) -> Optional[str]:
        return self.transaction.memo

    # endregion ITransaction passthrough

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {"type": self.type.value}
        d.update(self.transaction.to_dict())
        d.pop("account_type", None)
        if not self.amortization.is_empty:
            d["amortization"] = self.amortization.to_dict()
        return d


if TYPE_CHECKING:
    _is_ITransaction: type[ITransaction] = QMemorizedTransaction

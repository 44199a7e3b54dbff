# qif_dom/data_model/q_wrapper/q_document.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional, Union

from ..interfaces import AccountType, IToDict, RecursiveDictStr
from .q_account import AccountTransaction, QAccount
from .q_bank_transaction import QBankTransaction
from .q_category import QCategory
from .q_class import QClass
from .q_investment_transaction import QInvestmentTransaction
from .q_memorized_transaction import QMemorizedTransaction
from .q_price import QPrice
from .q_security import QSecurity
from .q_tag import QTag

# Canonical order in which flat transaction collections are written.
FLAT_TRANSACTION_ORDER: tuple[AccountType, ...] = (
    AccountType.BANK,
    AccountType.CASH,
    AccountType.CREDIT_CARD,
    AccountType.INVESTMENT,
    AccountType.ASSET,
    AccountType.LIABILITY,
)


@dataclass
class QifDocument:
    """
    An entire QIF file.

    Transactions read before any ``!Account`` header live in the flat
    per-type lists; transactions read after one are owned by that account
    (see :attr:`QAccount.transactions`).
    """

    bank_transactions: list[QBankTransaction] = field(default_factory=list)
    cash_transactions: list[QBankTransaction] = field(default_factory=list)
    credit_card_transactions: list[QBankTransaction] = field(default_factory=list)
    asset_transactions: list[QBankTransaction] = field(default_factory=list)
    liability_transactions: list[QBankTransaction] = field(default_factory=list)
    investment_transactions: list[QInvestmentTransaction] = field(default_factory=list)
    accounts: list[QAccount] = field(default_factory=list)
    categories: list[QCategory] = field(default_factory=list)
    classes: list[QClass] = field(default_factory=list)
    memorized_transactions: list[QMemorizedTransaction] = field(default_factory=list)
    securities: list[QSecurity] = field(default_factory=list)
    tags: list[QTag] = field(default_factory=list)
    prices: list[QPrice] = field(default_factory=list)

    def flat_transactions(
        self, account_type: AccountType
    ) -> Union[list[QBankTransaction], list[QInvestmentTransaction]]:
        """The flat (unowned) transaction list for ``account_type``."""
        if account_type is AccountType.BANK:
            return self.bank_transactions
        if account_type is AccountType.CASH:
            return self.cash_transactions
        if account_type is AccountType.CREDIT_CARD:
            return self.credit_card_transactions
        if account_type is AccountType.ASSET:
            return self.asset_transactions
        if account_type is AccountType.LIABILITY:
            return self.liability_transactions
        return self.investment_transactions

    def add_transaction(self, transaction: AccountTransaction) -> None:
        """Append ``transaction`` to the flat list for its account type."""
        self.flat_transactions(transaction.account_type).append(transaction)  # type: ignore[arg-type]

    def iter_transactions(self) -> Iterator[tuple[Optional[QAccount], AccountTransaction]]:
        """
        Yield ``(owner, transaction)`` for every flat and account-owned
        transaction; ``owner`` is None for flat ones.
        """
        for account_type in FLAT_TRANSACTION_ORDER:
            for txn in self.flat_transactions(account_type):
                yield None, txn
        for account in self.accounts:
            for txn in account.transactions:
                yield account, txn

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {}
        for name, items in (
            ("categories", self.categories),
            ("classes", self.classes),
            ("tags", self.tags),
            ("securities", self.securities),
            ("bank_transactions", self.bank_transactions),
            ("cash_transactions", self.cash_transactions),
            ("credit_card_transactions", self.credit_card_transactions),
            ("investment_transactions", self.investment_transactions),
            ("asset_transactions", self.asset_transactions),
            ("liability_transactions", self.liability_transactions),
            ("memorized_transactions", self.memorized_transactions),
            ("prices", self.prices),
            ("accounts", self.accounts),
        ):
            if items:
                d[name] = [item.to_dict() for item in items]
        return d


if TYPE_CHECKING:
    _is_IToDict: type[IToDict] = QifDocument

# qif_dom/data_model/__init__.py
from .interfaces import (
    AccountType,
    BlockKind,
    ClearedState,
    MemorizedTransactionType,
    TokenKind,
)
from .q_wrapper import (
    QAccount,
    QAmortization,
    QBankSplit,
    QBankTransaction,
    QCategory,
    QClass,
    QifDocument,
    QifHeader,
    QInvestmentTransaction,
    QMemorizedTransaction,
    QPrice,
    QSecurity,
    QTag,
)

__all__ = [
    "AccountType",
    "BlockKind",
    "ClearedState",
    "MemorizedTransactionType",
    "TokenKind",
    "QAccount",
    "QAmortization",
    "QBankSplit",
    "QBankTransaction",
    "QCategory",
    "QClass",
    "QifDocument",
    "QifHeader",
    "QInvestmentTransaction",
    "QMemorizedTransaction",
    "QPrice",
    "QSecurity",
    "QTag",
]

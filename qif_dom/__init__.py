# qif_dom/__init__.py
"""
Read and write Quicken Interchange Format (QIF) files.

    >>> import qif_dom
    >>> doc = qif_dom.loads("!Type:Bank\\nD1/2/2018\\nT-12.50\\nPFuel\\n^\\n")
    >>> doc.bank_transactions[0].payee
    'Fuel'
"""

from .config import Configuration, Culture, get_culture
from .controllers import dumps, load, load_path, loads, save, save_path
from .data_model import (
    AccountType,
    ClearedState,
    MemorizedTransactionType,
    QAccount,
    QAmortization,
    QBankSplit,
    QBankTransaction,
    QCategory,
    QClass,
    QifDocument,
    QInvestmentTransaction,
    QMemorizedTransaction,
    QPrice,
    QSecurity,
    QTag,
)
from .data_model.qif_parsers_emitters import QifDocumentParserEmitter
from .qif_errors import (
    DataFormatError,
    LexError,
    OperationStateError,
    QifError,
    RequiredFieldError,
    SplitConsistencyError,
    TruncatedRecordError,
)

__all__ = [
    "load",
    "loads",
    "load_path",
    "save",
    "dumps",
    "save_path",
    "Configuration",
    "Culture",
    "get_culture",
    "QifDocumentParserEmitter",
    "AccountType",
    "ClearedState",
    "MemorizedTransactionType",
    "QAccount",
    "QAmortization",
    "QBankSplit",
    "QBankTransaction",
    "QCategory",
    "QClass",
    "QifDocument",
    "QInvestmentTransaction",
    "QMemorizedTransaction",
    "QPrice",
    "QSecurity",
    "QTag",
    "QifError",
    "LexError",
    "OperationStateError",
    "DataFormatError",
    "RequiredFieldError",
    "SplitConsistencyError",
    "TruncatedRecordError",
]

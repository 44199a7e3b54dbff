# qif_dom/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the QIF data model.
"""

from .enum_account_type import AccountType
from .enum_block_kind import BlockKind
from .enum_cleared_state import ClearedState
from .enum_memorized_transaction_type import MemorizedTransactionType
from .enum_token_kind import TokenKind
from .i_parser_emitter import IParserEmitter
from .i_to_dict import IToDict, RecursiveDictStr
from .i_transaction import ITransaction

__all__ = [
    "AccountType",
    "BlockKind",
    "ClearedState",
    "MemorizedTransactionType",
    "TokenKind",
    "IParserEmitter",
    "IToDict",
    "ITransaction",
    "RecursiveDictStr",
]

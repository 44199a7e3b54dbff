# qif_dom/data_model/interfaces/enum_block_kind.py
from enum import Enum


class BlockKind(Enum):
    """
    Kinds of record block introduced by a header.

    The value is the record kind name used in error messages.
    """

    ACCOUNT = "Account"
    TRANSACTION = "Transaction"
    INVESTMENT = "Investment"
    CATEGORY = "Category"
    CLASS = "Class"
    MEMORIZED = "Memorized"
    SECURITY = "Security"
    TAG = "Tag"
    PRICE = "Price"

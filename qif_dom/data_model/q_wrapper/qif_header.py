# qif_dom/data_model/q_wrapper/qif_header.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..interfaces import AccountType, BlockKind, RecursiveDictStr

_WS_RE = re.compile(r"\s+")

# Lower-cased, whitespace-collapsed ``!Type:`` values for non-transaction blocks.
_TYPE_VALUE_NORMALIZE: dict[str, BlockKind] = {
    "cat": BlockKind.CATEGORY,
    "category": BlockKind.CATEGORY,
    "class": BlockKind.CLASS,
    "memorized": BlockKind.MEMORIZED,
    "memorised": BlockKind.MEMORIZED,
    "memorized payee": BlockKind.MEMORIZED,
    "security": BlockKind.SECURITY,
    "tag": BlockKind.TAG,
    "prices": BlockKind.PRICE,
    "price": BlockKind.PRICE,
}

# Canonical ``!Type:`` values written for each non-transaction block.
_TYPE_VALUE_FOR_KIND: dict[BlockKind, str] = {
    BlockKind.CATEGORY: "Cat",
    BlockKind.CLASS: "Class",
    BlockKind.MEMORIZED: "Memorized",
    BlockKind.SECURITY: "Security",
    BlockKind.TAG: "Tag",
    BlockKind.PRICE: "Prices",
}


@dataclass(frozen=True)
class QifHeader:
    """
    A ``!Name[:Value]`` header line.
    """

    name: str
    value: str = ""

    @classmethod
    def account(cls) -> "QifHeader":
        return cls("Account")

    @classmethod
    def for_account_type(cls, account_type: AccountType) -> "QifHeader":
        return cls("Type", account_type.header_value)

    @classmethod
    def for_block(cls, kind: BlockKind) -> "QifHeader":
        if kind is BlockKind.ACCOUNT:
            return cls.account()
        try:
            return cls("Type", _TYPE_VALUE_FOR_KIND[kind])
        except KeyError:
            raise ValueError(
                f"{kind.value} blocks are written with for_account_type()"
            ) from None

    def qif_entry(self) -> str:
        return f"!{self.name}:{self.value}" if self.value else f"!{self.name}"

    def resolve(self) -> Optional[tuple[BlockKind, Optional[AccountType]]]:
        """
        Map this header to the block it introduces.

        Returns ``(kind, account_type)`` where ``account_type`` is set for
        bank-family and investment blocks, or None if the header is not
        recognized. Matching ignores case and repeated inner whitespace.
        """
        name = self.name.strip().lower()
        if name == "account":
            return BlockKind.ACCOUNT, None
        if name != "type":
            return None
        account_type = AccountType.from_header_value(self.value)
        if account_type is AccountType.INVESTMENT:
            return BlockKind.INVESTMENT, account_type
        if account_type is not None:
            return BlockKind.TRANSACTION, account_type
        kind = _TYPE_VALUE_NORMALIZE.get(_WS_RE.sub(" ", self.value.strip()).lower())
        return (kind, None) if kind is not None else None

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {"name": self.name, "value": self.value}

# qif_dom/data_model/interfaces/enum_account_type.py
from __future__ import annotations

import re
from enum import Enum
from typing import Optional

_WS_RE = re.compile(r"\s+")


class AccountType(Enum):
    """
    Account families that own transaction blocks.

    The value is the canonical ``!Type:`` header value (and account ``T``
    field text) for the family.
    """

    BANK = "Bank"
    CASH = "Cash"
    CREDIT_CARD = "CCard"
    INVESTMENT = "Invst"
    ASSET = "Oth A"
    LIABILITY = "Oth L"

    @property
    def header_value(self) -> str:
        return self.value

    @property
    def is_investment(self) -> bool:
        return self is AccountType.INVESTMENT

    @classmethod
    def from_header_value(cls, text: str) -> Optional["AccountType"]:
        """
        Resolve a ``!Type:`` value or account ``T`` field, case-insensitively.

        Returns None for values that do not name an account family.
        """
        key = _WS_RE.sub(" ", text.strip()).lower()
        return _ALIASES.get(key)


_ALIASES: dict[str, AccountType] = {
    "bank": AccountType.BANK,
    "cash": AccountType.CASH,
    "ccard": AccountType.CREDIT_CARD,
    "credit card": AccountType.CREDIT_CARD,
    "invst": AccountType.INVESTMENT,
    "invest": AccountType.INVESTMENT,
    "port": AccountType.INVESTMENT,
    "oth a": AccountType.ASSET,
    "otha": AccountType.ASSET,
    "oth l": AccountType.LIABILITY,
    "othl": AccountType.LIABILITY,
}

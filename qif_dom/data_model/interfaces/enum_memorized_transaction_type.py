# qif_dom/data_model/interfaces/enum_memorized_transaction_type.py
from __future__ import annotations

from enum import Enum


class MemorizedTransactionType(Enum):
    """Kind of a memorized transaction, written in its ``K`` field."""

    CHECK = "C"
    DEPOSIT = "D"
    PAYMENT = "P"
    INVESTMENT = "I"
    ELECTRONIC_PAYEE = "E"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, text: str) -> "MemorizedTransactionType":
        """
        Raises
        ------
        ValueError
            Unless ``text`` is exactly one of ``C``, ``D``, ``P``, ``I``, ``E``.
        """
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unsupported memorized transaction type: {text!r}")

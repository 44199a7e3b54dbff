# qif_dom/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from .enum_cleared_state import ClearedState
from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """Structural shape shared by every transaction an account can own."""

    date: date
    amount: Optional[Decimal]
    cleared: Optional[ClearedState]
    payee: Optional[str]
    memo: Optional[str]

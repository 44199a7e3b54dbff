# qif_dom/data_model/interfaces/enum_cleared_state.py
from __future__ import annotations

from enum import Enum
from typing import Optional


class ClearedState(Enum):
    """
    Enum representing the cleared (reconciliation) state of a transaction.

    An uncleared transaction has no state at all (``None``), matching the
    format, where the ``C`` field is simply absent.
    """

    CLEARED = "*"
    RECONCILED = "R"

    @property
    def code(self) -> str:
        """Text written after the ``C`` field code."""
        return self.value

    @classmethod
    def from_code(cls, text: str) -> Optional["ClearedState"]:
        """
        Decode a ``C`` field value.

        ``""`` -> None, ``*``/``C``/``c`` -> CLEARED, ``R``/``r``/``X``/``x`` ->
        RECONCILED.

        Raises
        ------
        ValueError
            For any other value.
        """
        if text == "":
            return None
        if text in ("*", "C", "c"):
            return cls.CLEARED
        if text in ("R", "r", "X", "x"):
            return cls.RECONCILED
        raise ValueError(f"Unrecognized reconciled status: {text!r}")

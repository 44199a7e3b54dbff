# qif_dom/data_model/q_wrapper/q_category.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING, Optional

from ...utilities import compact_dict
from ..interfaces import IToDict, RecursiveDictStr


@total_ordering
@dataclass(frozen=True)
class QCategory:
    """
    Represents a category in QIF format.

    The three flags are written as bare field codes and are false when the
    code is absent.
    """

    name: str
    description: Optional[str] = None
    tax_related: bool = False
    tax_schedule: Optional[str] = None
    income_category: bool = False
    expense_category: bool = False
    budget_amount: Optional[Decimal] = None

    @property
    def parent_name(self) -> Optional[str]:
        """``'Auto'`` for ``'Auto:Fuel'``; None for a top-level category."""
        head, sep, _ = self.name.rpartition(":")
        return head if sep else None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QCategory):
            return NotImplemented
        return self.name < other.name

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return compact_dict(
            name=self.name,
            description=self.description,
            tax_related=self.tax_related,
            tax_schedule=self.tax_schedule,
            income_category=self.income_category,
            expense_category=self.expense_category,
            budget_amount=self.budget_amount,
        )


if TYPE_CHECKING:
    _is_IToDict: type[IToDict] = QCategory

# qif_dom/data_model/q_wrapper/q_class.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...utilities import compact_dict
from ..interfaces import RecursiveDictStr


@dataclass(frozen=True)
class QClass:
    """A class-list entry (``!Type:Class``)."""

    name: str
    description: Optional[str] = None

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return compact_dict(name=self.name, description=self.description)

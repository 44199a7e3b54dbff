# qif_dom/views/__init__.py
from .qif_frames import (
    PRICE_COLUMNS,
    SPLIT_COLUMNS,
    TRANSACTION_COLUMNS,
    prices_frame,
    splits_frame,
    transactions_frame,
)

__all__ = [
    "transactions_frame",
    "splits_frame",
    "prices_frame",
    "TRANSACTION_COLUMNS",
    "SPLIT_COLUMNS",
    "PRICE_COLUMNS",
]

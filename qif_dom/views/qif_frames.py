# qif_dom/views/qif_frames.py
"""
Flatten a :class:`QifDocument` into pandas DataFrames for analysis.

Amounts stay ``Decimal`` objects (``object`` dtype) so no precision is lost;
dates become ``datetime64``.
"""

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd

from ..data_model.q_wrapper import (
    QBankTransaction,
    QifDocument,
    QInvestmentTransaction,
)

TRANSACTION_COLUMNS = [
    "account",
    "account_type",
    "date",
    "amount",
    "payee",
    "memo",
    "category",
    "cleared",
    "number",
    "split_count",
    "action",
    "security",
    "quantity",
    "price",
    "commission",
]

SPLIT_COLUMNS = [
    "account",
    "date",
    "payee",
    "category",
    "memo",
    "amount",
    "percentage",
]

PRICE_COLUMNS = ["symbol", "date", "value"]


def _frame(rows: Iterable[dict[str, Any]], columns: list[str]) -> pd.DataFrame:
    df = pd.DataFrame(list(rows), columns=columns)
    if "date" in columns:
        df["date"] = pd.to_datetime(df["date"])
    return df


def transactions_frame(document: QifDocument, include_memorized: bool = False) -> pd.DataFrame:
    """
    One row per transaction, flat and account-owned.

    ``account`` is None for transactions that precede every account header.
    Memorized transactions are appended with ``account_type`` ``"Memorized"``
    when ``include_memorized`` is set.
    """
    rows: list[dict[str, Any]] = []
    for owner, txn in document.iter_transactions():
        row: dict[str, Any] = {
            "account": owner.name if owner is not None else None,
            "account_type": txn.account_type.value,
            "date": txn.date,
            "amount": txn.amount,
            "payee": txn.payee,
            "memo": txn.memo,
            "cleared": txn.cleared.name if txn.cleared is not None else None,
        }
        if isinstance(txn, QBankTransaction):
            row.update(
                category=txn.category,
                number=txn.number,
                split_count=len(txn.splits),
            )
        elif isinstance(txn, QInvestmentTransaction):
            row.update(
                category=txn.transfer_account,
                split_count=0,
                action=txn.action,
                security=txn.security,
                quantity=txn.quantity,
                price=txn.price,
                commission=txn.commission,
            )
        rows.append(row)

    if include_memorized:
        for memorized in document.memorized_transactions:
            t = memorized.transaction
            rows.append(
                {
                    "account": None,
                    "account_type": "Memorized",
                    "date": t.date,
                    "amount": t.amount,
                    "payee": t.payee,
                    "memo": t.memo,
                    "category": t.category,
                    "cleared": t.cleared.name if t.cleared is not None else None,
                    "number": t.number,
                    "split_count": len(t.splits),
                }
            )
    return _frame(rows, TRANSACTION_COLUMNS)


def splits_frame(document: QifDocument) -> pd.DataFrame:
    """One row per split of every bank-family transaction."""
    rows = (
        {
            "account": owner.name if owner is not None else None,
            "date": txn.date,
            "payee": txn.payee,
            "category": split.category,
            "memo": split.memo,
            "amount": split.amount,
            "percentage": split.percentage,
        }
        for owner, txn in document.iter_transactions()
        if isinstance(txn, QBankTransaction)
        for split in txn.splits
    )
    return _frame(rows, SPLIT_COLUMNS)


def prices_frame(document: QifDocument) -> pd.DataFrame:
    rows = ({"symbol": p.symbol, "date": p.date, "value": p.value} for p in document.prices)
    return _frame(rows, PRICE_COLUMNS)

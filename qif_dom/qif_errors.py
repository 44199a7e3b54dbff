# qif_dom/qif_errors.py
"""
Exception hierarchy for QIF parsing and emission.

Every error raised by this package derives from :class:`QifError`. The value
errors also derive from :class:`ValueError` so callers that already catch
``ValueError`` around conversions keep working.
"""

from __future__ import annotations

from typing import Optional


class QifError(Exception):
    """Base class for all QIF errors."""


class LexError(QifError, ValueError):
    """A line could not be tokenized."""

    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(f"{message} (line {line_number})")
        self.line_number = line_number


class OperationStateError(QifError, RuntimeError):
    """A reader operation was called while positioned on the wrong token."""


class DataFormatError(QifError, ValueError):
    """A field value could not be converted to its target type."""

    def __init__(self, message: str, value: Optional[str] = None) -> None:
        super().__init__(message if value is None else f"{message}: {value!r}")
        self.value = value


class RequiredFieldError(QifError, ValueError):
    """A record ended without one of its mandatory fields."""

    def __init__(self, record_kind: str, field_code: str) -> None:
        super().__init__(
            f"{record_kind} record is missing required field {field_code!r}"
        )
        self.record_kind = record_kind
        self.field_code = field_code


class SplitConsistencyError(DataFormatError):
    """Split category, memo, amount and percentage counts disagree."""

    def __init__(
        self, categories: int, memos: int, amounts: int, percentages: int
    ) -> None:
        super().__init__(
            "Split fields are inconsistent: "
            f"{categories} categories, {memos} memos, "
            f"{amounts} amounts, {percentages} percentages"
        )
        self.categories = categories
        self.memos = memos
        self.amounts = amounts
        self.percentages = percentages


class TruncatedRecordError(QifError, ValueError):
    """A record ended without its end-of-record marker."""

    def __init__(self, line_number: int, detail: str = "at end of input") -> None:
        super().__init__(
            f"Missing expected end of record token {detail} (line {line_number})"
        )
        self.line_number = line_number

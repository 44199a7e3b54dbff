# qif_dom/data_model/qif_parsers_emitters/qif_reader.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import TracebackType
from typing import Iterator, Optional, TextIO, Union

from ...config import DEFAULT_CONFIGURATION, Configuration
from ...qif_errors import DataFormatError, OperationStateError, TruncatedRecordError
from ...utilities import parse_mixed_number, to_date, to_decimal, to_int
from ..interfaces import ClearedState, TokenKind
from ..q_wrapper import QifHeader
from .qif_tokenizer import QifToken, QifTokenizer

_VALUE_KINDS = (TokenKind.FIELD, TokenKind.COMMA_VALUE)


class QifReader:
    """
    Typed access to the token stream of a QIF file.

    The reader is always positioned on a current token (initially
    ``BEGIN_OF_FILE``). The ``read_field_as_*`` methods convert the value of
    the current field or comma value using ``configuration``; calling them on
    any other token kind raises :class:`OperationStateError`.
    """

    def __init__(
        self,
        source: Union[TextIO, QifTokenizer],
        configuration: Optional[Configuration] = None,
    ) -> None:
        self._tokenizer = (
            source if isinstance(source, QifTokenizer) else QifTokenizer(source)
        )
        self.configuration = configuration or DEFAULT_CONFIGURATION

    # region Position

    @property
    def token(self) -> QifToken:
        return self._tokenizer.current

    @property
    def kind(self) -> TokenKind:
        return self._tokenizer.current.kind

    @property
    def line_number(self) -> int:
        return self._tokenizer.line_number

    def advance(self) -> QifToken:
        return self._tokenizer.advance()

    def move_to_next(self, kind: TokenKind) -> bool:
        """
        Advance until the current token is of ``kind``.

        Returns False if the end of the file is reached first.
        """
        while True:
            token = self.advance()
            if token.kind is kind:
                return True
            if token.kind is TokenKind.END_OF_FILE:
                return False

    # endregion Position

    # region Headers

    def read_header(self) -> QifHeader:
        """The current header; the position does not change."""
        self._require(TokenKind.HEADER)
        return QifHeader(self.token.name, self.token.value)

    # endregion Headers

    # region Records

    def read_these_fields(self) -> Iterator[tuple[str, str]]:
        """
        Yield ``(name, value)`` for each field of the current record.

        Each pair is yielded while the reader is positioned on that field, so
        the ``read_field_as_*`` methods may be used on it. A current header is
        skipped first. After the last field the end-of-record marker is
        required and consumed, leaving the reader on the following token.
        """
        self._skip_header()
        while self.kind is TokenKind.FIELD:
            yield self.token.name, self.token.value
            self.advance()
        self.read_end_of_record()

    def read_these_values(self) -> Iterator[str]:
        """Like :meth:`read_these_fields` for a comma-delimited record."""
        self._skip_header()
        while self.kind is TokenKind.COMMA_VALUE:
            yield self.token.value
            self.advance()
        self.read_end_of_record()

    def _skip_header(self) -> None:
        if self.kind is TokenKind.BEGIN_OF_FILE:
            self.advance()
        if self.kind is TokenKind.HEADER:
            self.advance()

    def read_end_of_record(self) -> None:
        if self.kind is TokenKind.END_OF_FILE:
            raise TruncatedRecordError(self.line_number)
        if self.kind is not TokenKind.END_OF_RECORD:
            raise TruncatedRecordError(
                self.line_number, f"found {self.kind.name.lower()} instead"
            )
        self.advance()

    # endregion Records

    # region Typed field access

    def read_field_as_string(self) -> str:
        self._require(*_VALUE_KINDS)
        return self.token.value

    def read_field_as_date(self) -> date:
        return self.parse_date(self.read_field_as_string())

    def read_field_as_decimal(self) -> Decimal:
        return self.parse_decimal(self.read_field_as_string())

    def read_field_as_int(self) -> int:
        return self.parse_int(self.read_field_as_string())

    def read_field_as_cleared_state(self) -> Optional[ClearedState]:
        text = self.read_field_as_string()
        try:
            return ClearedState.from_code(text)
        except ValueError as e:
            raise DataFormatError("Unrecognized reconciled status", text) from e

    # endregion Typed field access

    # region Text conversion

    def parse_date(self, text: str) -> date:
        try:
            return to_date(text, self.configuration)
        except ValueError as e:
            raise DataFormatError(
                f"Invalid date on line {self.line_number}", text
            ) from e

    def parse_decimal(self, text: str) -> Decimal:
        culture = self.configuration.effective_read_culture
        styles = self.configuration.number_styles
        try:
            if "/" in text:
                return parse_mixed_number(text, culture, styles)
            return to_decimal(text, culture, styles)
        except ValueError as e:
            raise DataFormatError(
                f"Invalid decimal on line {self.line_number}", text
            ) from e

    def parse_int(self, text: str) -> int:
        try:
            return to_int(
                text,
                self.configuration.effective_read_culture,
                self.configuration.number_styles,
            )
        except ValueError as e:
            raise DataFormatError(
                f"Invalid integer on line {self.line_number}", text
            ) from e

    # endregion Text conversion

    def _require(self, *kinds: TokenKind) -> None:
        if self.kind not in kinds:
            expected = " or ".join(k.name.lower() for k in kinds)
            raise OperationStateError(
                f"Expected the reader to be positioned on a {expected} "
                f"but it is on a {self.kind.name.lower()} (line {self.line_number})"
            )

    def close(self) -> None:
        self._tokenizer.close()

    def __enter__(self) -> "QifReader":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

# qif_dom/data_model/qif_parsers_emitters/qif_tokenizer.py
"""
Line tokenizer for QIF text.

Each line is classified by its first character:

- ``!``  header ``!Name[:Value]``
- ``^``  end of record (nothing may follow)
- ``"``  comma-delimited values, returned one token per value
- else   field; the first character is the field name, the rest the value
"""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType
from typing import Optional, TextIO

from ...qif_errors import LexError
from ...utilities import is_null_or_whitespace
from ..interfaces import TokenKind

_BOM = "\ufeff"


@dataclass(frozen=True)
class QifToken:
    kind: TokenKind
    name: str = ""
    value: str = ""


BEGIN_OF_FILE = QifToken(TokenKind.BEGIN_OF_FILE)
END_OF_RECORD = QifToken(TokenKind.END_OF_RECORD)
END_OF_FILE = QifToken(TokenKind.END_OF_FILE)


class QifTokenizer:
    """
    Turns a text stream into :class:`QifToken` values, one per :meth:`advance`.

    The tokenizer owns ``source`` and closes it in :meth:`close`.
    """

    def __init__(self, source: TextIO) -> None:
        self._source = source
        self._line_number = 0
        self._current = BEGIN_OF_FILE
        # Remaining text of a comma-delimited line being drained, if any.
        self._comma_line: Optional[str] = None
        self._comma_pos = 0

    # region Properties

    @property
    def current(self) -> QifToken:
        return self._current

    @property
    def line_number(self) -> int:
        """1-based number of the line the current token came from."""
        return self._line_number

    # endregion Properties

    def advance(self) -> QifToken:
        """
        Read the next token.

        Raises
        ------
        LexError
            On an empty line, an empty header, trailing text after ``^`` or
            an unterminated quoted value.
        """
        if self._current.kind is TokenKind.END_OF_FILE:
            return self._current
        if self._comma_line is not None:
            self._current = self._next_comma_value()
            return self._current

        raw = self._source.readline()
        if raw == "":
            self._current = END_OF_FILE
            return self._current

        self._line_number += 1
        line = raw.rstrip("\r\n")
        if self._line_number == 1 and line.startswith(_BOM):
            line = line[1:]
        self._current = self._classify(line)
        return self._current

    def _classify(self, line: str) -> QifToken:
        if line == "":
            raise LexError("Unexpected empty line in data file", self._line_number)

        first = line[0]
        if first == "!":
            name, _, value = line[1:].partition(":")
            if is_null_or_whitespace(name):
                raise LexError("Header line has no name", self._line_number)
            return QifToken(TokenKind.HEADER, name.rstrip(), value.rstrip())
        if first == "^":
            if len(line) > 1:
                raise LexError("End of record line too long", self._line_number)
            return END_OF_RECORD
        if first == '"':
            self._comma_line = line.rstrip()
            self._comma_pos = 0
            return self._next_comma_value()
        return QifToken(TokenKind.FIELD, first, line[1:].rstrip())

    def _next_comma_value(self) -> QifToken:
        line = self._comma_line
        assert line is not None
        pos = self._comma_pos

        if pos < len(line) and line[pos] == '"':
            close = line.find('"', pos + 1)
            if close < 0:
                raise LexError("Unterminated quoted value", self._line_number)
            value = line[pos + 1 : close]
            end = close + 1
            if end < len(line) and line[end] != ",":
                raise LexError(
                    "Expected ',' after closing quote", self._line_number
                )
        else:
            comma = line.find(",", pos)
            end = len(line) if comma < 0 else comma
            value = line[pos:end].strip()

        if end >= len(line):
            self._comma_line = None
        else:
            # Skip the comma; a value (possibly empty) always follows it.
            self._comma_pos = end + 1
        return QifToken(TokenKind.COMMA_VALUE, "", value)

    def close(self) -> None:
        self._source.close()

    def __enter__(self) -> "QifTokenizer":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

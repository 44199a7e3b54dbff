# qif_dom/data_model/qif_parsers_emitters/qif_writer.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, TextIO, Union

from ...config import DEFAULT_CONFIGURATION, Configuration
from ...utilities import format_date, format_decimal
from ..q_wrapper import QifHeader

FieldValue = Union[str, Decimal, date, int, Enum]


class QifWriter:
    """
    Writes QIF lines to ``sink``.

    Decimals and dates are formatted according to ``configuration``. The sink
    stays owned by the caller; the writer never closes it.
    """

    newline = "\n"

    def __init__(self, sink: TextIO, configuration: Optional[Configuration] = None) -> None:
        self._sink = sink
        self.configuration = configuration or DEFAULT_CONFIGURATION

    def write_header(self, header: Union[QifHeader, str], value: Optional[str] = None) -> None:
        """Write ``!name`` or ``!name:value``."""
        if isinstance(header, str):
            header = QifHeader(header, value or "")
        self._write_line(header.qif_entry())

    def write_field(self, name: str, value: FieldValue) -> None:
        if not 1 <= len(name) <= 2:
            raise ValueError(f"Field names are one or two characters, got {name!r}")
        self._write_line(name + self.format_value(value))

    def write_field_if_not_empty(self, name: str, value: Optional[FieldValue]) -> None:
        """Write the field unless ``value`` is None or an empty string."""
        if value is None or value == "":
            return
        self.write_field(name, value)

    def write_field_if(self, name: str, condition: bool) -> None:
        """Write the bare field code when ``condition`` holds."""
        if condition:
            self.write_field(name, "")

    def write_comma_values(self, *values: FieldValue) -> None:
        """
        Write one comma-delimited line.

        Strings and dates are quoted; numbers are written bare unless their
        formatted text contains a comma. The first value must be a quoted kind
        so the line is read back as comma values.
        """
        if not values or not isinstance(values[0], (str, date)):
            raise ValueError("A comma-delimited line must start with a quoted value")
        parts: list[str] = []
        for value in values:
            text = self.format_value(value)
            if isinstance(value, (str, date)) or "," in text:
                if '"' in text:
                    raise ValueError(f"Quoted values cannot contain '\"': {text!r}")
                text = f'"{text}"'
            parts.append(text)
        self._write_line(",".join(parts))

    def write_end_of_record(self) -> None:
        self._write_line("^")

    def format_value(self, value: FieldValue) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, Decimal):
            return format_decimal(value, self.configuration)
        if isinstance(value, date):
            return format_date(value, self.configuration)
        if isinstance(value, bool):
            raise TypeError("Use write_field_if() for flag fields")
        if isinstance(value, int):
            return str(value)
        raise TypeError(f"Unsupported field value type: {type(value).__name__}")

    def _write_line(self, line: str) -> None:
        if "\n" in line or "\r" in line:
            raise ValueError(f"Field text cannot contain line breaks: {line!r}")
        self._sink.write(line + self.newline)

    def flush(self) -> None:
        self._sink.flush()

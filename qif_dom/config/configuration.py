# qif_dom/config/configuration.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .culture import EN_US, Culture
from .enum_format_modes import (
    ReadDateFormatMode,
    WriteDateFormatMode,
    WriteDecimalFormatMode,
)
from .enum_parse_styles import DateStyles, NumberStyles


@dataclass(frozen=True)
class Configuration:
    """
    Formatting and parsing options for one load or save call.

    Instances are immutable; derive variants with :meth:`replace`. The same
    configuration used to save a document reads it back unchanged.

    Attributes
    ----------
    culture : Culture
        Culture used for writing, and for reading when ``read_culture`` is
        not set.
    read_culture : Culture | None
        Override culture for reading only.
    write_date_format_mode, custom_write_date_format
        ``CUSTOM`` formats dates with the ``strftime`` pattern.
    write_decimal_format_mode, custom_write_decimal_format
        ``CUSTOM`` formats decimals with the ``format()`` spec, e.g. ``",.2f"``.
    read_date_format_mode, custom_read_date_format
        ``CUSTOM`` parses dates with the ``strptime`` pattern, exactly.
    number_styles : NumberStyles
        Lexical features permitted when parsing numbers.
    date_styles : DateStyles
        Whitespace permitted around dates.
    """

    culture: Culture = EN_US
    read_culture: Optional[Culture] = None

    write_date_format_mode: WriteDateFormatMode = WriteDateFormatMode.DEFAULT
    custom_write_date_format: str = ""

    write_decimal_format_mode: WriteDecimalFormatMode = WriteDecimalFormatMode.DEFAULT
    custom_write_decimal_format: str = ""

    read_date_format_mode: ReadDateFormatMode = ReadDateFormatMode.DEFAULT
    custom_read_date_format: str = ""

    number_styles: NumberStyles = field(default=NumberStyles.ANY)
    date_styles: DateStyles = field(default=DateStyles.ALLOW_WHITE_SPACES)

    def __post_init__(self) -> None:
        if (
            self.write_date_format_mode is WriteDateFormatMode.CUSTOM
            and not self.custom_write_date_format
        ):
            raise ValueError("custom_write_date_format is required in CUSTOM mode")
        if (
            self.write_decimal_format_mode is WriteDecimalFormatMode.CUSTOM
            and not self.custom_write_decimal_format
        ):
            raise ValueError("custom_write_decimal_format is required in CUSTOM mode")
        if (
            self.read_date_format_mode is ReadDateFormatMode.CUSTOM
            and not self.custom_read_date_format
        ):
            raise ValueError("custom_read_date_format is required in CUSTOM mode")

    @property
    def effective_read_culture(self) -> Culture:
        return self.read_culture if self.read_culture is not None else self.culture

    def replace(self, **changes: Any) -> "Configuration":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


DEFAULT_CONFIGURATION = Configuration()

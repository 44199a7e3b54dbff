# qif_dom/config/__init__.py
"""
Configuration values threaded through every read and write call.
"""

from .configuration import DEFAULT_CONFIGURATION, Configuration
from .culture import (
    DE_DE,
    EN_CA,
    EN_GB,
    EN_US,
    INVARIANT,
    Culture,
    DateOrder,
    available_cultures,
    get_culture,
)
from .enum_format_modes import (
    ReadDateFormatMode,
    WriteDateFormatMode,
    WriteDecimalFormatMode,
)
from .enum_parse_styles import DateStyles, NumberStyles

__all__ = [
    "Configuration",
    "DEFAULT_CONFIGURATION",
    "Culture",
    "DateOrder",
    "DateStyles",
    "NumberStyles",
    "ReadDateFormatMode",
    "WriteDateFormatMode",
    "WriteDecimalFormatMode",
    "get_culture",
    "available_cultures",
    "INVARIANT",
    "EN_US",
    "EN_GB",
    "EN_CA",
    "DE_DE",
]

# qif_dom/config/enum_format_modes.py
from enum import Enum


class WriteDateFormatMode(Enum):
    """How dates are formatted when writing."""

    DEFAULT = "default"  # culture short date pattern
    CUSTOM = "custom"  # Configuration.custom_write_date_format (strftime)


class WriteDecimalFormatMode(Enum):
    """How decimals are formatted when writing."""

    DEFAULT = "default"  # plain digits with the culture decimal separator
    CUSTOM = "custom"  # Configuration.custom_write_decimal_format (format spec)


class ReadDateFormatMode(Enum):
    """How dates are parsed when reading."""

    DEFAULT = "default"  # culture date order, lenient separators
    CUSTOM = "custom"  # Configuration.custom_read_date_format (strptime)

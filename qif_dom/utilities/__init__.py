# qif_dom/utilities/__init__.py
from .config_logging import LOGGING, build_logging_config, configure_logging
from .converters_scalar import (
    clean_number_like_string,
    decode_qif_date_text,
    format_date,
    format_decimal,
    parse_culture_date,
    parse_mixed_number,
    to_date,
    to_decimal,
    to_int,
)
from .core_util import (
    compact_dict,
    is_null_or_whitespace,
    open_for_read,
    open_for_write,
    to_dict_str,
)

__all__ = [
    "LOGGING",
    "build_logging_config",
    "configure_logging",
    "clean_number_like_string",
    "decode_qif_date_text",
    "format_date",
    "format_decimal",
    "parse_culture_date",
    "parse_mixed_number",
    "to_date",
    "to_decimal",
    "to_int",
    "is_null_or_whitespace",
    "open_for_read",
    "open_for_write",
    "compact_dict",
    "to_dict_str",
]

# qif_dom/data_model/interfaces/enum_token_kind.py
from enum import Enum, auto


class TokenKind(Enum):
    """Kinds of token produced by the tokenizer."""

    BEGIN_OF_FILE = auto()
    HEADER = auto()
    FIELD = auto()
    COMMA_VALUE = auto()
    END_OF_RECORD = auto()
    END_OF_FILE = auto()

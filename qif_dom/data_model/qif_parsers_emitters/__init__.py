# qif_dom/data_model/qif_parsers_emitters/__init__.py
from .qif_document_parser_emitter import QifDocumentParserEmitter
from .qif_reader import QifReader
from .qif_tokenizer import QifToken, QifTokenizer
from .qif_writer import QifWriter

__all__ = [
    "QifDocumentParserEmitter",
    "QifReader",
    "QifToken",
    "QifTokenizer",
    "QifWriter",
]

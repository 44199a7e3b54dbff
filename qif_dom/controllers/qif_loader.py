# qif_dom/controllers/qif_loader.py
"""
Entry points for reading and writing QIF documents.

``load``/``save`` work on open text streams, ``loads``/``dumps`` on strings
and ``load_path``/``save_path`` on files.
"""

from __future__ import annotations

import io
from typing import Optional, TextIO

from ..config import Configuration
from ..data_model.q_wrapper import QifDocument
from ..data_model.qif_parsers_emitters import (
    QifDocumentParserEmitter,
    QifReader,
    QifWriter,
)
from ..utilities.core_util import PathLike, open_for_read, open_for_write


def load(source: TextIO, configuration: Optional[Configuration] = None) -> QifDocument:
    """
    Read a document from ``source``.

    ``source`` is consumed and closed whether or not parsing succeeds.

    Raises
    ------
    LexError, DataFormatError, RequiredFieldError, SplitConsistencyError, TruncatedRecordError
        If the input is malformed. No partial document is returned.
    """
    parser = QifDocumentParserEmitter(configuration)
    with QifReader(source, parser.configuration) as reader:
        return parser.read_document(reader)


def loads(text: str, configuration: Optional[Configuration] = None) -> QifDocument:
    return load(io.StringIO(text, newline=None), configuration)


def load_path(
    path: PathLike,
    encoding: str = "utf-8",
    configuration: Optional[Configuration] = None,
) -> QifDocument:
    return load(open_for_read(path, binary=False, encoding=encoding), configuration)


def save(
    document: QifDocument,
    sink: TextIO,
    configuration: Optional[Configuration] = None,
) -> None:
    """Write ``document`` to ``sink`` in canonical order; ``sink`` stays open."""
    emitter = QifDocumentParserEmitter(configuration)
    emitter.write_document(QifWriter(sink, emitter.configuration), document)


def dumps(document: QifDocument, configuration: Optional[Configuration] = None) -> str:
    return QifDocumentParserEmitter(configuration).emit(document)


def save_path(
    document: QifDocument,
    path: PathLike,
    encoding: str = "utf-8",
    configuration: Optional[Configuration] = None,
) -> None:
    with open_for_write(path, binary=False, encoding=encoding, newline="\n") as f:
        save(document, f, configuration)

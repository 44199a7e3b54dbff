# qif_dom/data_model/qif_parsers_emitters/qif_document_parser_emitter.py
from __future__ import annotations

import io
import logging
from typing import Callable, Optional, Sequence, TypeVar

from ...config import DEFAULT_CONFIGURATION, Configuration
from ...qif_errors import LexError
from ..interfaces import AccountType, BlockKind, IParserEmitter, TokenKind
from ..q_wrapper import (
    FLAT_TRANSACTION_ORDER,
    AccountTransaction,
    QAccount,
    QBankTransaction,
    QifDocument,
    QifHeader,
)
from .qif_reader import QifReader
from .qif_serializer import (
    read_account,
    read_bank_transaction,
    read_category,
    read_class,
    read_investment_transaction,
    read_memorized_transaction,
    read_price,
    read_security,
    read_tag,
    write_account,
    write_bank_transaction,
    write_category,
    write_class,
    write_investment_transaction,
    write_memorized_transaction,
    write_price,
    write_security,
    write_tag,
)
from .qif_writer import QifWriter

log = logging.getLogger(__name__)

T = TypeVar("T")

# Blocks whose records always go to a flat document list: (decoder, attribute).
_LIST_BLOCKS: dict[BlockKind, tuple[Callable[[QifReader], object], str]] = {
    BlockKind.CATEGORY: (read_category, "categories"),
    BlockKind.CLASS: (read_class, "classes"),
    BlockKind.MEMORIZED: (read_memorized_transaction, "memorized_transactions"),
    BlockKind.SECURITY: (read_security, "securities"),
    BlockKind.TAG: (read_tag, "tags"),
    BlockKind.PRICE: (read_price, "prices"),
}


class QifDocumentParserEmitter(IParserEmitter[QifDocument]):
    """
    Reads and writes whole QIF documents.

    Reading loops over headers and decodes each block's records. Transaction
    blocks that follow an ``!Account`` record belong to that account until the
    next ``!Account`` record; unrecognized headers and their records are
    skipped.

    Writing emits list blocks and flat transactions first and accounts last,
    each account followed by its own transactions, so a reader attributes
    every transaction to the same owner it had in the document.
    """

    file_format = "QIF"

    def __init__(self, configuration: Optional[Configuration] = None) -> None:
        self.configuration = configuration or DEFAULT_CONFIGURATION

    # region IParserEmitter

    def parse(self, unparsed_string: str) -> QifDocument:
        with QifReader(io.StringIO(unparsed_string, newline=None), self.configuration) as reader:
            return self.read_document(reader)

    def emit(self, item: QifDocument) -> str:
        buf = io.StringIO()
        self.write_document(QifWriter(buf, self.configuration), item)
        return buf.getvalue()

    # endregion IParserEmitter

    # region Reading

    def read_document(self, reader: QifReader) -> QifDocument:
        document = QifDocument()
        current_account: Optional[QAccount] = None

        reader.advance()
        while reader.kind is not TokenKind.END_OF_FILE:
            if reader.kind is not TokenKind.HEADER:
                raise LexError("Expected a header line", reader.line_number)

            header = reader.read_header()
            resolved = header.resolve()
            if resolved is None:
                log.debug(
                    "Skipping unrecognized block %r on line %d",
                    header.qif_entry(),
                    reader.line_number,
                )
                reader.move_to_next(TokenKind.HEADER)
                continue

            kind, account_type = resolved
            reader.advance()
            while reader.kind not in (TokenKind.HEADER, TokenKind.END_OF_FILE):
                current_account = self._read_record(
                    reader, document, kind, account_type, current_account
                )

        log.debug(
            "Read %d accounts, %d categories, %d flat transactions",
            len(document.accounts),
            len(document.categories),
            sum(len(document.flat_transactions(t)) for t in FLAT_TRANSACTION_ORDER),
        )
        return document

    def _read_record(
        self,
        reader: QifReader,
        document: QifDocument,
        kind: BlockKind,
        account_type: Optional[AccountType],
        current_account: Optional[QAccount],
    ) -> Optional[QAccount]:
        """Decode one record into ``document``; returns the current account."""
        if kind is BlockKind.ACCOUNT:
            account = read_account(reader)
            document.accounts.append(account)
            return account

        if kind in (BlockKind.TRANSACTION, BlockKind.INVESTMENT):
            assert account_type is not None
            txn: AccountTransaction
            if kind is BlockKind.INVESTMENT:
                txn = read_investment_transaction(reader)
            else:
                txn = read_bank_transaction(reader, account_type)
            if current_account is not None:
                current_account.transactions.append(txn)
            else:
                document.add_transaction(txn)
            return current_account

        decode, attribute = _LIST_BLOCKS[kind]
        getattr(document, attribute).append(decode(reader))
        return current_account

    # endregion Reading

    # region Writing

    def write_document(self, writer: QifWriter, document: QifDocument) -> None:
        self._write_block(writer, BlockKind.CATEGORY, document.categories, write_category)
        self._write_block(writer, BlockKind.CLASS, document.classes, write_class)
        self._write_block(writer, BlockKind.TAG, document.tags, write_tag)
        self._write_block(writer, BlockKind.SECURITY, document.securities, write_security)

        for account_type in FLAT_TRANSACTION_ORDER:
            transactions = document.flat_transactions(account_type)
            if transactions:
                writer.write_header(QifHeader.for_account_type(account_type))
                for txn in transactions:
                    self._write_transaction(writer, txn)

        self._write_block(
            writer,
            BlockKind.MEMORIZED,
            document.memorized_transactions,
            write_memorized_transaction,
        )
        self._write_block(writer, BlockKind.PRICE, document.prices, write_price)

        for account in document.accounts:
            writer.write_header(QifHeader.account())
            write_account(writer, account)
            last_type: Optional[AccountType] = None
            for txn in account.transactions:
                if txn.account_type is not last_type:
                    writer.write_header(QifHeader.for_account_type(txn.account_type))
                    last_type = txn.account_type
                self._write_transaction(writer, txn)

        writer.flush()

    @staticmethod
    def _write_block(
        writer: QifWriter,
        kind: BlockKind,
        items: Sequence[T],
        encode: Callable[[QifWriter, T], None],
    ) -> None:
        if not items:
            return
        writer.write_header(QifHeader.for_block(kind))
        for item in items:
            encode(writer, item)

    @staticmethod
    def _write_transaction(writer: QifWriter, txn: AccountTransaction) -> None:
        if isinstance(txn, QBankTransaction):
            write_bank_transaction(writer, txn)
        else:
            write_investment_transaction(writer, txn)

    # endregion Writing

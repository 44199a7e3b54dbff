# qif_dom/data_model/qif_parsers_emitters/qif_serializer.py
"""
Decoders and encoders for individual QIF records.

Each decoder owns a table mapping field codes to the slot they fill and the
reader method that converts them. Codes missing from the table are ignored.
Each encoder writes its fields in a fixed order, omitting absent optional
fields.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, NamedTuple, Optional

from ...qif_errors import DataFormatError, RequiredFieldError, SplitConsistencyError
from ..interfaces import AccountType, BlockKind, MemorizedTransactionType
from ..q_wrapper import (
    QAccount,
    QAmortization,
    QBankSplit,
    QBankTransaction,
    QCategory,
    QClass,
    QInvestmentTransaction,
    QMemorizedTransaction,
    QPrice,
    QSecurity,
    QTag,
)
from ..q_wrapper.qif_codes import (
    AccountCodes,
    BankCodes,
    CategoryCodes,
    ClassCodes,
    InvestmentCodes,
    MemorizedCodes,
    SecurityCodes,
    TagCodes,
)
from .qif_reader import QifReader
from .qif_writer import QifWriter

log = logging.getLogger(__name__)


# region Field tables


def _optional_string(reader: QifReader) -> Optional[str]:
    return reader.read_field_as_string() or None


def _flag(reader: QifReader) -> bool:
    return True


def _memorized_type(reader: QifReader) -> MemorizedTransactionType:
    text = reader.read_field_as_string()
    try:
        return MemorizedTransactionType.from_code(text)
    except ValueError as e:
        raise DataFormatError("Unsupported memorized transaction type", text) from e


class _Slot(NamedTuple):
    name: str
    read: Callable[[QifReader], Any]
    repeated: bool = False


_BANK_FIELDS: dict[str, _Slot] = {
    BankCodes.DATE.code: _Slot("date", QifReader.read_field_as_date),
    BankCodes.AMOUNT.code: _Slot("amount", QifReader.read_field_as_decimal),
    BankCodes.AMOUNT_ALIAS.code: _Slot("amount_alias", QifReader.read_field_as_decimal),
    BankCodes.CLEARED.code: _Slot("cleared", QifReader.read_field_as_cleared_state),
    BankCodes.NUMBER.code: _Slot("number", _optional_string),
    BankCodes.PAYEE.code: _Slot("payee", _optional_string),
    BankCodes.MEMO.code: _Slot("memo", _optional_string),
    BankCodes.CATEGORY.code: _Slot("category", _optional_string),
    BankCodes.ADDRESS.code: _Slot("address", QifReader.read_field_as_string, True),
    BankCodes.SPLIT_CATEGORY.code: _Slot("split_category", _optional_string, True),
    BankCodes.SPLIT_MEMO.code: _Slot("split_memo", _optional_string, True),
    BankCodes.SPLIT_AMOUNT.code: _Slot("split_amount", QifReader.read_field_as_decimal, True),
    BankCodes.SPLIT_PERCENT.code: _Slot("split_percent", QifReader.read_field_as_decimal, True),
}

_MEMORIZED_FIELDS: dict[str, _Slot] = {
    **_BANK_FIELDS,
    MemorizedCodes.TYPE.code: _Slot("type", _memorized_type),
    MemorizedCodes.FIRST_PAYMENT_DATE.code: _Slot("first_payment_date", QifReader.read_field_as_date),
    MemorizedCodes.TOTAL_YEARS.code: _Slot("total_years", QifReader.read_field_as_int),
    MemorizedCodes.PAYMENTS_MADE.code: _Slot("payments_made", QifReader.read_field_as_int),
    MemorizedCodes.PERIODS_PER_YEAR.code: _Slot("periods_per_year", QifReader.read_field_as_int),
    MemorizedCodes.INTEREST_RATE.code: _Slot("interest_rate", QifReader.read_field_as_decimal),
    MemorizedCodes.CURRENT_BALANCE.code: _Slot("current_balance", QifReader.read_field_as_decimal),
    MemorizedCodes.ORIGINAL_AMOUNT.code: _Slot("original_amount", QifReader.read_field_as_decimal),
}

_INVESTMENT_FIELDS: dict[str, _Slot] = {
    InvestmentCodes.DATE.code: _Slot("date", QifReader.read_field_as_date),
    InvestmentCodes.ACTION.code: _Slot("action", _optional_string),
    InvestmentCodes.SECURITY.code: _Slot("security", _optional_string),
    InvestmentCodes.PRICE.code: _Slot("price", QifReader.read_field_as_decimal),
    InvestmentCodes.QUANTITY.code: _Slot("quantity", QifReader.read_field_as_decimal),
    InvestmentCodes.AMOUNT.code: _Slot("amount", QifReader.read_field_as_decimal),
    InvestmentCodes.AMOUNT_ALIAS.code: _Slot("amount_alias", QifReader.read_field_as_decimal),
    InvestmentCodes.CLEARED.code: _Slot("cleared", QifReader.read_field_as_cleared_state),
    InvestmentCodes.PAYEE.code: _Slot("payee", _optional_string),
    InvestmentCodes.MEMO.code: _Slot("memo", _optional_string),
    InvestmentCodes.COMMISSION.code: _Slot("commission", QifReader.read_field_as_decimal),
    InvestmentCodes.TRANSFER_ACCOUNT.code: _Slot("transfer_account", _optional_string),
    InvestmentCodes.TRANSFER_AMOUNT.code: _Slot("transfer_amount", QifReader.read_field_as_decimal),
}

_ACCOUNT_FIELDS: dict[str, _Slot] = {
    AccountCodes.NAME.code: _Slot("name", _optional_string),
    AccountCodes.TYPE.code: _Slot("type", _optional_string),
    AccountCodes.DESCRIPTION.code: _Slot("description", _optional_string),
    AccountCodes.CREDIT_LIMIT.code: _Slot("credit_limit", QifReader.read_field_as_decimal),
    AccountCodes.STATEMENT_BALANCE_DATE.code: _Slot("statement_balance_date", QifReader.read_field_as_date),
    AccountCodes.STATEMENT_BALANCE.code: _Slot("statement_balance", QifReader.read_field_as_decimal),
}

_CATEGORY_FIELDS: dict[str, _Slot] = {
    CategoryCodes.NAME.code: _Slot("name", _optional_string),
    CategoryCodes.DESCRIPTION.code: _Slot("description", _optional_string),
    CategoryCodes.TAX_RELATED.code: _Slot("tax_related", _flag),
    CategoryCodes.TAX_SCHEDULE.code: _Slot("tax_schedule", _optional_string),
    CategoryCodes.INCOME.code: _Slot("income_category", _flag),
    CategoryCodes.EXPENSE.code: _Slot("expense_category", _flag),
    CategoryCodes.BUDGET.code: _Slot("budget_amount", QifReader.read_field_as_decimal),
}

_CLASS_FIELDS: dict[str, _Slot] = {
    ClassCodes.NAME.code: _Slot("name", _optional_string),
    ClassCodes.DESCRIPTION.code: _Slot("description", _optional_string),
}

_SECURITY_FIELDS: dict[str, _Slot] = {
    SecurityCodes.NAME.code: _Slot("name", _optional_string),
    SecurityCodes.SYMBOL.code: _Slot("symbol", _optional_string),
    SecurityCodes.TYPE.code: _Slot("type", _optional_string),
    SecurityCodes.GOAL.code: _Slot("goal", _optional_string),
    SecurityCodes.DESCRIPTION.code: _Slot("description", _optional_string),
}

_TAG_FIELDS: dict[str, _Slot] = {
    TagCodes.NAME.code: _Slot("name", _optional_string),
    TagCodes.DESCRIPTION.code: _Slot("description", _optional_string),
}

# endregion Field tables

# region Record builder


class _RecordFields:
    """Typed values gathered from one record, keyed by slot name."""

    def __init__(self, kind: BlockKind) -> None:
        self.kind = kind
        self.values: dict[str, Any] = {}
        self.lists: dict[str, list[Any]] = {}

    @classmethod
    def read(
        cls, reader: QifReader, kind: BlockKind, table: Mapping[str, _Slot]
    ) -> "_RecordFields":
        fields = cls(kind)
        for name, _ in reader.read_these_fields():
            slot = table.get(name)
            if slot is None:
                log.debug(
                    "Ignoring unknown %s field %r on line %d",
                    kind.value,
                    name,
                    reader.line_number,
                )
                continue
            value = slot.read(reader)
            if slot.repeated:
                fields.lists.setdefault(slot.name, []).append(value)
            else:
                fields.values[slot.name] = value
        return fields

    def get(self, slot: str, default: Any = None) -> Any:
        return self.values.get(slot, default)

    def get_list(self, slot: str) -> list[Any]:
        return self.lists.get(slot, [])

    def require(self, slot: str, code: str) -> Any:
        value = self.values.get(slot)
        if value is None:
            raise RequiredFieldError(self.kind.value, code)
        return value


def _splits(fields: _RecordFields) -> tuple[QBankSplit, ...]:
    categories = fields.get_list("split_category")
    memos = fields.get_list("split_memo")
    amounts = fields.get_list("split_amount")
    percentages = fields.get_list("split_percent")
    if not (len(categories) == len(memos) == max(len(amounts), len(percentages))):
        raise SplitConsistencyError(
            len(categories), len(memos), len(amounts), len(percentages)
        )
    return tuple(
        QBankSplit(
            category=categories[i],
            memo=memos[i],
            amount=amounts[i] if i < len(amounts) else None,
            percentage=percentages[i] if i < len(percentages) else None,
        )
        for i in range(len(categories))
    )


def _amount(fields: _RecordFields, code: str) -> Any:
    """``T`` wins; ``U`` is accepted when ``T`` is absent."""
    amount = fields.get("amount")
    if amount is None:
        amount = fields.get("amount_alias")
    if amount is None and code:
        raise RequiredFieldError(fields.kind.value, code)
    return amount


def _bank_transaction(fields: _RecordFields, account_type: AccountType) -> QBankTransaction:
    splits = _splits(fields)
    return QBankTransaction(
        date=fields.require("date", BankCodes.DATE.code),
        amount=_amount(fields, BankCodes.AMOUNT.code),
        account_type=account_type,
        cleared=fields.get("cleared"),
        number=fields.get("number"),
        payee=fields.get("payee"),
        memo=fields.get("memo"),
        category=fields.get("category"),
        address=tuple(fields.get_list("address")),
        splits=splits,
    )


# endregion Record builder

# region Decoders


def read_bank_transaction(reader: QifReader, account_type: AccountType) -> QBankTransaction:
    """Decode one bank-family transaction; ``D`` and ``T`` are required."""
    fields = _RecordFields.read(reader, BlockKind.TRANSACTION, _BANK_FIELDS)
    return _bank_transaction(fields, account_type)


def read_memorized_transaction(reader: QifReader) -> QMemorizedTransaction:
    """Decode one memorized transaction; ``K``, ``D`` and ``T`` are required."""
    fields = _RecordFields.read(reader, BlockKind.MEMORIZED, _MEMORIZED_FIELDS)
    txn_type = fields.require("type", MemorizedCodes.TYPE.code)
    return QMemorizedTransaction(
        type=txn_type,
        transaction=_bank_transaction(fields, AccountType.BANK),
        amortization=QAmortization(
            first_payment_date=fields.get("first_payment_date"),
            total_years=fields.get("total_years"),
            payments_made=fields.get("payments_made"),
            periods_per_year=fields.get("periods_per_year"),
            interest_rate=fields.get("interest_rate"),
            current_balance=fields.get("current_balance"),
            original_amount=fields.get("original_amount"),
        ),
    )


def read_investment_transaction(reader: QifReader) -> QInvestmentTransaction:
    fields = _RecordFields.read(reader, BlockKind.INVESTMENT, _INVESTMENT_FIELDS)
    return QInvestmentTransaction(
        date=fields.require("date", InvestmentCodes.DATE.code),
        action=fields.get("action"),
        security=fields.get("security"),
        price=fields.get("price"),
        quantity=fields.get("quantity"),
        amount=_amount(fields, ""),
        cleared=fields.get("cleared"),
        payee=fields.get("payee"),
        memo=fields.get("memo"),
        commission=fields.get("commission"),
        transfer_account=fields.get("transfer_account"),
        transfer_amount=fields.get("transfer_amount"),
    )


def read_account(reader: QifReader) -> QAccount:
    fields = _RecordFields.read(reader, BlockKind.ACCOUNT, _ACCOUNT_FIELDS)
    return QAccount(
        name=fields.require("name", AccountCodes.NAME.code),
        type=fields.get("type"),
        description=fields.get("description"),
        credit_limit=fields.get("credit_limit"),
        statement_balance_date=fields.get("statement_balance_date"),
        statement_balance=fields.get("statement_balance"),
    )


def read_category(reader: QifReader) -> QCategory:
    fields = _RecordFields.read(reader, BlockKind.CATEGORY, _CATEGORY_FIELDS)
    return QCategory(
        name=fields.require("name", CategoryCodes.NAME.code),
        description=fields.get("description"),
        tax_related=fields.get("tax_related", False),
        tax_schedule=fields.get("tax_schedule"),
        income_category=fields.get("income_category", False),
        expense_category=fields.get("expense_category", False),
        budget_amount=fields.get("budget_amount"),
    )


def read_class(reader: QifReader) -> QClass:
    fields = _RecordFields.read(reader, BlockKind.CLASS, _CLASS_FIELDS)
    return QClass(
        name=fields.require("name", ClassCodes.NAME.code),
        description=fields.get("description"),
    )


def read_security(reader: QifReader) -> QSecurity:
    fields = _RecordFields.read(reader, BlockKind.SECURITY, _SECURITY_FIELDS)
    return QSecurity(
        name=fields.require("name", SecurityCodes.NAME.code),
        symbol=fields.get("symbol"),
        type=fields.get("type"),
        goal=fields.get("goal"),
        description=fields.get("description"),
    )


def read_tag(reader: QifReader) -> QTag:
    fields = _RecordFields.read(reader, BlockKind.TAG, _TAG_FIELDS)
    return QTag(
        name=fields.require("name", TagCodes.NAME.code),
        description=fields.get("description"),
    )


def read_price(reader: QifReader) -> QPrice:
    """
    Decode one ``"SYMBOL",value,"date"`` record.

    Raises
    ------
    DataFormatError
        Unless the record has exactly three values.
    """
    symbol: Optional[str] = None
    value = None
    when = None
    count = 0
    for text in reader.read_these_values():
        if count == 0:
            symbol = text
        elif count == 1:
            value = reader.read_field_as_decimal()
        elif count == 2:
            when = reader.read_field_as_date()
        count += 1
    if count != 3 or not symbol:
        raise DataFormatError(
            f"Price records need a symbol, a value and a date; found {count} values"
            f" (line {reader.line_number})"
        )
    return QPrice(symbol=symbol, value=value, date=when)


# endregion Decoders

# region Encoders


def _write_bank_fields(writer: QifWriter, value: QBankTransaction) -> None:
    writer.write_field(BankCodes.DATE.code, value.date)
    writer.write_field(BankCodes.AMOUNT.code, value.amount)
    writer.write_field_if_not_empty(BankCodes.NUMBER.code, value.number)
    writer.write_field_if_not_empty(BankCodes.CLEARED.code, value.cleared)
    writer.write_field_if_not_empty(BankCodes.PAYEE.code, value.payee)
    writer.write_field_if_not_empty(BankCodes.MEMO.code, value.memo)
    writer.write_field_if_not_empty(BankCodes.CATEGORY.code, value.category)
    for line in value.address:
        writer.write_field(BankCodes.ADDRESS.code, line)
    for split in value.splits:
        # S and E are written for every split so the counts stay aligned.
        writer.write_field(BankCodes.SPLIT_CATEGORY.code, split.category or "")
        writer.write_field(BankCodes.SPLIT_MEMO.code, split.memo or "")
        writer.write_field_if_not_empty(BankCodes.SPLIT_AMOUNT.code, split.amount)
        writer.write_field_if_not_empty(BankCodes.SPLIT_PERCENT.code, split.percentage)


def write_bank_transaction(writer: QifWriter, value: QBankTransaction) -> None:
    _write_bank_fields(writer, value)
    writer.write_end_of_record()


def write_memorized_transaction(writer: QifWriter, value: QMemorizedTransaction) -> None:
    writer.write_field(MemorizedCodes.TYPE.code, value.type)
    _write_bank_fields(writer, value.transaction)
    a = value.amortization
    writer.write_field_if_not_empty(MemorizedCodes.FIRST_PAYMENT_DATE.code, a.first_payment_date)
    writer.write_field_if_not_empty(MemorizedCodes.TOTAL_YEARS.code, a.total_years)
    writer.write_field_if_not_empty(MemorizedCodes.PAYMENTS_MADE.code, a.payments_made)
    writer.write_field_if_not_empty(MemorizedCodes.PERIODS_PER_YEAR.code, a.periods_per_year)
    writer.write_field_if_not_empty(MemorizedCodes.INTEREST_RATE.code, a.interest_rate)
    writer.write_field_if_not_empty(MemorizedCodes.CURRENT_BALANCE.code, a.current_balance)
    writer.write_field_if_not_empty(MemorizedCodes.ORIGINAL_AMOUNT.code, a.original_amount)
    writer.write_end_of_record()


def write_investment_transaction(writer: QifWriter, value: QInvestmentTransaction) -> None:
    writer.write_field(InvestmentCodes.DATE.code, value.date)
    writer.write_field_if_not_empty(InvestmentCodes.ACTION.code, value.action)
    writer.write_field_if_not_empty(InvestmentCodes.PAYEE.code, value.payee)
    writer.write_field_if_not_empty(InvestmentCodes.MEMO.code, value.memo)
    writer.write_field_if_not_empty(InvestmentCodes.CLEARED.code, value.cleared)
    writer.write_field_if_not_empty(InvestmentCodes.QUANTITY.code, value.quantity)
    writer.write_field_if_not_empty(InvestmentCodes.SECURITY.code, value.security)
    writer.write_field_if_not_empty(InvestmentCodes.AMOUNT.code, value.amount)
    writer.write_field_if_not_empty(InvestmentCodes.PRICE.code, value.price)
    writer.write_field_if_not_empty(InvestmentCodes.COMMISSION.code, value.commission)
    writer.write_field_if_not_empty(InvestmentCodes.TRANSFER_AMOUNT.code, value.transfer_amount)
    writer.write_field_if_not_empty(InvestmentCodes.TRANSFER_ACCOUNT.code, value.transfer_account)
    writer.write_end_of_record()


def write_account(writer: QifWriter, value: QAccount) -> None:
    writer.write_field(AccountCodes.NAME.code, value.name)
    writer.write_field_if_not_empty(AccountCodes.TYPE.code, value.type)
    writer.write_field_if_not_empty(AccountCodes.DESCRIPTION.code, value.description)
    writer.write_field_if_not_empty(AccountCodes.CREDIT_LIMIT.code, value.credit_limit)
    writer.write_field_if_not_empty(
        AccountCodes.STATEMENT_BALANCE_DATE.code, value.statement_balance_date
    )
    writer.write_field_if_not_empty(AccountCodes.STATEMENT_BALANCE.code, value.statement_balance)
    writer.write_end_of_record()


def write_category(writer: QifWriter, value: QCategory) -> None:
    writer.write_field(CategoryCodes.NAME.code, value.name)
    writer.write_field_if_not_empty(CategoryCodes.DESCRIPTION.code, value.description)
    writer.write_field_if(CategoryCodes.TAX_RELATED.code, value.tax_related)
    writer.write_field_if_not_empty(CategoryCodes.TAX_SCHEDULE.code, value.tax_schedule)
    writer.write_field_if(CategoryCodes.EXPENSE.code, value.expense_category)
    writer.write_field_if(CategoryCodes.INCOME.code, value.income_category)
    writer.write_field_if_not_empty(CategoryCodes.BUDGET.code, value.budget_amount)
    writer.write_end_of_record()


def write_class(writer: QifWriter, value: QClass) -> None:
    writer.write_field(ClassCodes.NAME.code, value.name)
    writer.write_field_if_not_empty(ClassCodes.DESCRIPTION.code, value.description)
    writer.write_end_of_record()


def write_security(writer: QifWriter, value: QSecurity) -> None:
    writer.write_field(SecurityCodes.NAME.code, value.name)
    writer.write_field_if_not_empty(SecurityCodes.SYMBOL.code, value.symbol)
    writer.write_field_if_not_empty(SecurityCodes.TYPE.code, value.type)
    writer.write_field_if_not_empty(SecurityCodes.GOAL.code, value.goal)
    writer.write_field_if_not_empty(SecurityCodes.DESCRIPTION.code, value.description)
    writer.write_end_of_record()


def write_tag(writer: QifWriter, value: QTag) -> None:
    writer.write_field(TagCodes.NAME.code, value.name)
    writer.write_field_if_not_empty(TagCodes.DESCRIPTION.code, value.description)
    writer.write_end_of_record()


def write_price(writer: QifWriter, value: QPrice) -> None:
    writer.write_comma_values(value.symbol, value.value, value.date)
    writer.write_end_of_record()


# endregion Encoders

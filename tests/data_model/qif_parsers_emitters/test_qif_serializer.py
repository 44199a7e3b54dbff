# tests/data_model/qif_parsers_emitters/test_qif_serializer.py
from __future__ import annotations

import io
from datetime import date
from decimal import Decimal

import pytest

from qif_dom.data_model.interfaces import (
    AccountType,
    ClearedState,
    MemorizedTransactionType,
    TokenKind,
)
from qif_dom.data_model.q_wrapper import (
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
from qif_dom.data_model.qif_parsers_emitters import QifReader, QifWriter
from qif_dom.data_model.qif_parsers_emitters import qif_serializer as s
from qif_dom.qif_errors import DataFormatError, RequiredFieldError, SplitConsistencyError


def _reader(text: str) -> QifReader:
    return QifReader(io.StringIO(text))


def _write(encode, value) -> str:
    buf = io.StringIO()
    encode(QifWriter(buf), value)
    return buf.getvalue()


# region Bank transactions


def test_read_bank_transaction_exhaustive():
    # Arrange
    text = """D02/03/2013
T-1,234.56
CX
N1001
PPaul's Shop
MA memo
LHousehold:Furniture/Project
A1 Main St
ASpringfield
SHousehold:Furniture
ETable
$-1,000.00
SHousehold:Furniture
EChairs
$-234.56
^
"""
    reader = _reader(text)

    # Act
    txn = s.read_bank_transaction(reader, AccountType.CREDIT_CARD)

    # Assert
    assert txn.account_type is AccountType.CREDIT_CARD
    assert txn.date == date(2013, 2, 3)
    assert txn.amount == Decimal("-1234.56")
    assert txn.cleared is ClearedState.RECONCILED
    assert txn.number == "1001"
    assert txn.payee == "Paul's Shop"
    assert txn.memo == "A memo"
    assert txn.category == "Household:Furniture/Project"
    assert txn.category_name == "Household:Furniture"
    assert txn.tag == "Project"
    assert txn.address == ("1 Main St", "Springfield")
    assert txn.splits == (
        QBankSplit("Household:Furniture", "Table", Decimal("-1000.00")),
        QBankSplit("Household:Furniture", "Chairs", Decimal("-234.56")),
    )
    assert reader.kind is TokenKind.END_OF_FILE, "End of record should be consumed"


def test_unknown_field_is_ignored():
    # Arrange
    reader = _reader("D1/1/2008\nT10\nZsomething new\n^\n")

    # Act
    txn = s.read_bank_transaction(reader, AccountType.BANK)

    # Assert
    assert txn == QBankTransaction(date(2008, 1, 1), Decimal("10"))


def test_field_codes_are_case_sensitive():
    # Arrange
    reader = _reader("D1/1/2008\nT10\nd2/2/2009\nt99\n^\n")

    # Act
    txn = s.read_bank_transaction(reader, AccountType.BANK)

    # Assert
    assert txn.date == date(2008, 1, 1), "Lowercase d is an unknown code, not a date"
    assert txn.amount == Decimal("10")


def test_u_is_fallback_for_t_amount():
    # Arrange
    only_u = _reader("D1/1/2008\nU1,500.00\n^\n")
    both = _reader("D1/1/2008\nU1\nT2\n^\n")

    # Act
    a = s.read_bank_transaction(only_u, AccountType.BANK)
    b = s.read_bank_transaction(both, AccountType.BANK)

    # Assert
    assert a.amount == Decimal("1500.00")
    assert b.amount == Decimal("2"), "T wins over U when both are present"


@pytest.mark.parametrize(
    "text, missing",
    [
        ("T10\n^\n", "D"),
        ("D1/1/2008\n^\n", "T"),
    ],
)
def test_bank_transaction_required_fields(text, missing):
    # Act
    with pytest.raises(RequiredFieldError) as excinfo:
        s.read_bank_transaction(_reader(text), AccountType.BANK)

    # Assert
    assert excinfo.value.field_code == missing


def test_split_counts_must_agree():
    # Arrange
    text = "D1/1/2018\nT-3\nSA\nE\nSB\nE\n$-1\n^\n"

    # Act / Assert
    with pytest.raises(SplitConsistencyError) as excinfo:
        s.read_bank_transaction(_reader(text), AccountType.BANK)
    assert (excinfo.value.categories, excinfo.value.amounts) == (2, 1)


def test_splits_may_use_percentages():
    # Arrange
    text = "D1/1/2018\nT-100\nSA\nEfirst\n%25\nSB\nEsecond\n%75\n^\n"

    # Act
    txn = s.read_bank_transaction(_reader(text), AccountType.BANK)

    # Assert
    assert [sp.percentage for sp in txn.splits] == [Decimal("25"), Decimal("75")]
    assert all(sp.amount is None for sp in txn.splits)


def test_transfer_account_from_bracketed_category():
    # Arrange
    txn = QBankTransaction(date(2020, 1, 1), Decimal("5"), category="[Savings]")

    # Act / Assert
    assert txn.transfer_account == "Savings"
    assert QBankTransaction(date(2020, 1, 1), Decimal("5"), category="Food").transfer_account is None


def test_write_bank_transaction_field_order():
    # Arrange
    txn = QBankTransaction(
        date=date(2018, 1, 31),
        amount=Decimal("-6.25"),
        account_type=AccountType.CREDIT_CARD,
        cleared=ClearedState.CLEARED,
        number="12",
        payee="Caffe Nero",
        memo="Coffee",
        category="Dining",
        address=("High St",),
        splits=(QBankSplit("Dining", None, Decimal("-6.25")),),
    )

    # Act
    out = _write(s.write_bank_transaction, txn)

    # Assert
    assert out == (
        "D1/31/2018\nT-6.25\nN12\nC*\nPCaffe Nero\nMCoffee\nLDining\n"
        "AHigh St\nSDining\nE\n$-6.25\n^\n"
    )


def test_bank_transaction_round_trips_through_encoder():
    # Arrange
    txn = QBankTransaction(
        date=date(2018, 1, 31),
        amount=Decimal("-6.25"),
        payee="Caffe Nero",
        splits=(
            QBankSplit("Dining", "Coffee", Decimal("-2.75")),
            QBankSplit("Dining", None, Decimal("-3.50")),
        ),
    )

    # Act
    back = s.read_bank_transaction(_reader(_write(s.write_bank_transaction, txn)), AccountType.BANK)

    # Assert
    assert back == txn


# endregion Bank transactions

# region Memorized transactions


@pytest.mark.parametrize("k_first", [True, False])
def test_read_memorized_transaction_with_type_anywhere(k_first):
    # Arrange
    body = "D1/1/2018\nT-500\nPBank\n"
    text = ("KP\n" + body if k_first else body + "KP\n") + "^\n"

    # Act
    txn = s.read_memorized_transaction(_reader(text))

    # Assert
    assert txn.type is MemorizedTransactionType.PAYMENT
    assert txn.payee == "Bank"
    assert txn.amount == Decimal("-500")


def test_read_memorized_amortization_fields():
    # Arrange
    text = "KE\nD1/1/2018\nT-1,000\n11/1/2018\n230\n312\n412\n54.5\n6200,000\n7250,000\n^\n"

    # Act
    txn = s.read_memorized_transaction(_reader(text))

    # Assert
    assert txn.amortization == QAmortization(
        first_payment_date=date(2018, 1, 1),
        total_years=30,
        payments_made=12,
        periods_per_year=12,
        interest_rate=Decimal("4.5"),
        current_balance=Decimal("200000"),
        original_amount=Decimal("250000"),
    )


@pytest.mark.parametrize("code", ["Z", "CP", "c"])
def test_unsupported_memorized_type_raises(code):
    # Act / Assert
    with pytest.raises(DataFormatError, match="memorized transaction type"):
        s.read_memorized_transaction(_reader(f"K{code}\nD1/1/2018\nT1\n^\n"))


def test_memorized_type_is_required():
    # Act
    with pytest.raises(RequiredFieldError) as excinfo:
        s.read_memorized_transaction(_reader("D1/1/2018\nT1\n^\n"))

    # Assert
    assert excinfo.value.field_code == "K"


def test_write_memorized_transaction_puts_type_first():
    # Arrange
    txn = QMemorizedTransaction(
        type=MemorizedTransactionType.DEPOSIT,
        transaction=QBankTransaction(date(2018, 1, 1), Decimal("100")),
        amortization=QAmortization(total_years=2),
    )

    # Act
    out = _write(s.write_memorized_transaction, txn)

    # Assert
    assert out == "KD\nD1/1/2018\nT100\n22\n^\n"


# endregion Memorized transactions

# region Investment transactions


def test_read_investment_transaction():
    # Arrange
    text = """D02/03/2013
NBuy
YMSFT
I27.50
Q100
U2,750.00
T2,750.00
CR
PBroker
MBuy some
O7.95
L[Checking]
$2,757.95
^
"""

    # Act
    txn = s.read_investment_transaction(_reader(text))

    # Assert
    assert txn == QInvestmentTransaction(
        date=date(2013, 2, 3),
        action="Buy",
        security="MSFT",
        price=Decimal("27.50"),
        quantity=Decimal("100"),
        amount=Decimal("2750.00"),
        cleared=ClearedState.RECONCILED,
        payee="Broker",
        memo="Buy some",
        commission=Decimal("7.95"),
        transfer_account="[Checking]",
        transfer_amount=Decimal("2757.95"),
    )


def test_investment_amount_is_optional_but_date_is_not():
    # Act
    txn = s.read_investment_transaction(_reader("D1/1/2020\nNShrsIn\n^\n"))

    # Assert
    assert txn.amount is None
    with pytest.raises(RequiredFieldError):
        s.read_investment_transaction(_reader("NBuy\n^\n"))


def test_write_investment_transaction_omits_absent_fields():
    # Arrange
    txn = QInvestmentTransaction(date(2020, 1, 2), action="Div", security="VTI", amount=Decimal("12.34"))

    # Act
    out = _write(s.write_investment_transaction, txn)

    # Assert
    assert out == "D1/2/2020\nNDiv\nYVTI\nT12.34\n^\n"


# endregion Investment transactions

# region Lists


def test_read_account_with_statement_fields():
    # Arrange
    text = "NVisa\nTCCard\nDMy card\nL5,000\n/03/01/2021\n$-123.45\n^\n"

    # Act
    account = s.read_account(_reader(text))

    # Assert
    assert account == QAccount(
        name="Visa",
        type="CCard",
        description="My card",
        credit_limit=Decimal("5000"),
        statement_balance_date=date(2021, 3, 1),
        statement_balance=Decimal("-123.45"),
    )
    assert account.account_type is AccountType.CREDIT_CARD


def test_account_name_is_required():
    # Act / Assert
    with pytest.raises(RequiredFieldError, match="'N'"):
        s.read_account(_reader("TBank\n^\n"))


def test_write_account():
    # Arrange
    account = QAccount("Account1", credit_limit=Decimal("0"), statement_balance=Decimal("0"))

    # Act
    out = _write(s.write_account, account)

    # Assert
    assert out == "NAccount1\nL0\n$0\n^\n"


def test_read_category_flags():
    # Arrange
    text = "NEmployment\nDEmployment income\nT\nRW-2\nI\nB1,000.00\n^\n"

    # Act
    category = s.read_category(_reader(text))

    # Assert
    assert category == QCategory(
        name="Employment",
        description="Employment income",
        tax_related=True,
        tax_schedule="W-2",
        income_category=True,
        expense_category=False,
        budget_amount=Decimal("1000.00"),
    )


def test_write_category_writes_description_under_d():
    # Arrange
    category = QCategory("Food", description="Groceries", expense_category=True)

    # Act
    out = _write(s.write_category, category)

    # Assert
    assert out == "NFood\nDGroceries\nE\n^\n"


def test_class_security_and_tag():
    # Act
    klass = s.read_class(_reader("NBusiness\nDSide job\n^\n"))
    security = s.read_security(_reader("NMicrosoft\nSMSFT\nTStock\nGGrowth\n^\n"))
    tag = s.read_tag(_reader("NReimbursable\n^\n"))

    # Assert
    assert klass == QClass("Business", "Side job")
    assert security == QSecurity("Microsoft", symbol="MSFT", type="Stock", goal="Growth")
    assert tag == QTag("Reimbursable")
    assert _write(s.write_security, security) == "NMicrosoft\nSMSFT\nTStock\nGGrowth\n^\n"
    assert _write(s.write_class, klass) == "NBusiness\nDSide job\n^\n"
    assert _write(s.write_tag, tag) == "NReimbursable\n^\n"


# endregion Lists

# region Prices


def test_read_price_with_fraction_and_encoded_date():
    # Arrange
    reader = _reader('"IBM",33 3/4," 1/ 5\'04"\n^\n')

    # Act
    price = s.read_price(reader)

    # Assert
    assert price == QPrice("IBM", Decimal("33.75"), date(2004, 1, 5))


@pytest.mark.parametrize("text", ['"IBM",12\n^\n', '"IBM",12,"1/1/2004","x"\n^\n', '"",12,"1/1/2004"\n^\n'])
def test_malformed_price_raises(text):
    # Act / Assert
    with pytest.raises(DataFormatError):
        s.read_price(_reader(text))


def test_write_price():
    # Act
    out = _write(s.write_price, QPrice("IBM", Decimal("33.75"), date(2004, 1, 5)))

    # Assert
    assert out == '"IBM",33.75,"1/5/2004"\n^\n'


# endregion Prices

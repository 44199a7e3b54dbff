# tests/data_model/qif_parsers_emitters/test_qif_reader.py
from __future__ import annotations

import io
from datetime import date
from decimal import Decimal

import pytest

from qif_dom.config import Configuration, ReadDateFormatMode, get_culture
from qif_dom.data_model.interfaces import ClearedState, TokenKind
from qif_dom.data_model.qif_parsers_emitters import QifReader
from qif_dom.qif_errors import DataFormatError, OperationStateError, TruncatedRecordError

READER_INPUTS = """!Type:Tag
NMarket adjustment
^
NReimbursable
^
!Type:Bank
D1/1/2008
T1500
N123
PPaycheck
LIncome.Salary
^
"""


def _reader(text: str = READER_INPUTS, configuration: Configuration | None = None) -> QifReader:
    return QifReader(io.StringIO(text), configuration)


def _field_reader(value: str, configuration: Configuration | None = None) -> QifReader:
    """A reader positioned on a single ``X`` field holding ``value``."""
    reader = _reader(f"X{value}\n^\n", configuration)
    reader.advance()
    return reader


def test_read_these_fields_walks_records_and_consumes_end_of_record():
    # Arrange
    reader = _reader()
    reader.advance()

    # Act
    first = list(reader.read_these_fields())
    second = list(reader.read_these_fields())

    # Assert
    assert first == [("N", "Market adjustment")]
    assert second == [("N", "Reimbursable")]
    assert reader.kind is TokenKind.HEADER, "Reader should rest on the next header"
    assert reader.read_header().value == "Bank"


def test_read_these_fields_skips_current_header():
    # Arrange
    reader = _reader()
    assert reader.move_to_next(TokenKind.HEADER)
    assert reader.move_to_next(TokenKind.HEADER)

    # Act
    names = [name for name, _ in reader.read_these_fields()]

    # Assert
    assert names == ["D", "T", "N", "P", "L"]
    assert reader.kind is TokenKind.END_OF_FILE


def test_typed_reads_apply_to_field_being_yielded():
    # Arrange
    reader = _reader()
    reader.move_to_next(TokenKind.HEADER)
    reader.move_to_next(TokenKind.HEADER)
    seen: dict[str, object] = {}

    # Act
    for name, _ in reader.read_these_fields():
        if name == "D":
            seen["date"] = reader.read_field_as_date()
        elif name == "T":
            seen["amount"] = reader.read_field_as_decimal()
        elif name == "N":
            seen["number"] = reader.read_field_as_int()

    # Assert
    assert seen == {"date": date(2008, 1, 1), "amount": Decimal("1500"), "number": 123}


def test_move_to_next_returns_false_at_end_of_file():
    # Arrange
    reader = _reader()

    # Act
    found = [reader.move_to_next(TokenKind.HEADER) for _ in range(3)]

    # Assert
    assert found == [True, True, False]
    assert reader.kind is TokenKind.END_OF_FILE


def test_truncated_record_raises():
    # Arrange
    reader = _reader("!Type:Bank\nD1/1/2008\nT1\n")

    # Act / Assert
    with pytest.raises(TruncatedRecordError):
        list(reader.read_these_fields())


def test_header_inside_record_raises_truncation():
    # Arrange
    reader = _reader("!Type:Bank\nD1/1/2008\n!Type:Cash\n")

    # Act / Assert
    with pytest.raises(TruncatedRecordError, match="header"):
        list(reader.read_these_fields())


@pytest.mark.parametrize(
    "method",
    [
        "read_field_as_string",
        "read_field_as_date",
        "read_field_as_decimal",
        "read_field_as_int",
        "read_field_as_cleared_state",
    ],
)
def test_typed_reads_off_field_raise_operation_state_error(method):
    # Arrange
    reader = _reader()
    reader.advance()  # positioned on the !Type:Tag header

    # Act / Assert
    with pytest.raises(OperationStateError):
        getattr(reader, method)()


def test_read_header_off_header_raises_operation_state_error():
    # Arrange
    reader = _reader()

    # Act / Assert
    with pytest.raises(OperationStateError):
        reader.read_header()


# region Decimals


@pytest.mark.parametrize(
    "text, expected",
    [
        ("33 3/4", Decimal("33.75")),
        ("1/4", Decimal("0.25")),
        ("7 1/8", Decimal("7.125")),
        ("-33 3/4", Decimal("-33.75")),
        ("0 1/2", Decimal("0.5")),
    ],
)
def test_mixed_numbers_are_exact(text, expected):
    # Act
    value = _field_reader(text).read_field_as_decimal()

    # Assert
    assert value == expected


def test_thirds_are_computed_from_exact_fraction():
    # Act
    value = _field_reader("1 1/3").read_field_as_decimal()

    # Assert
    assert value.quantize(Decimal("0.01")) == Decimal("1.33")
    assert abs(value * 3 - 4) < Decimal("1e-20")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1,500.00", Decimal("1500.00")),
        ("-6.25", Decimal("-6.25")),
        ("(12.50)", Decimal("-12.50")),
        ("12.50-", Decimal("-12.50")),
        ("$3", Decimal("3")),
        ("1.5e2", Decimal("150")),
    ],
)
def test_plain_decimals_use_culture(text, expected):
    # Act
    value = _field_reader(text).read_field_as_decimal()

    # Assert
    assert value == expected


def test_read_culture_override_changes_separators():
    # Arrange
    cfg = Configuration(read_culture=get_culture("de-DE"))

    # Act
    value = _field_reader("1.500,25", cfg).read_field_as_decimal()

    # Assert
    assert value == Decimal("1500.25")


@pytest.mark.parametrize("text", ["abc", "1/0", "1 x/4", "", "1.2.3"])
def test_bad_decimals_raise_data_format_error(text):
    # Act / Assert
    with pytest.raises(DataFormatError):
        _field_reader(text).read_field_as_decimal()


def test_integer_rejects_fraction_part():
    # Act / Assert
    with pytest.raises(DataFormatError):
        _field_reader("12.5").read_field_as_int()


# endregion Decimals

# region Dates


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10/27' 6", date(2006, 10, 27)),
        ("1/ 5'04", date(2004, 1, 5)),
        (" 1/ 5'04", date(2004, 1, 5)),
        ("12/31'99", date(1999, 12, 31)),
        ("1/1/2008", date(2008, 1, 1)),
        ("2021-03-01", date(2021, 3, 1)),
    ],
)
def test_dates_decode_apostrophe_and_space(text, expected):
    # Act
    value = _field_reader(text).read_field_as_date()

    # Assert
    assert value == expected


def test_dates_follow_read_culture_order():
    # Arrange
    cfg = Configuration(read_culture=get_culture("en-GB"))

    # Act
    value = _field_reader("31/1/18", cfg).read_field_as_date()

    # Assert
    assert value == date(2018, 1, 31)


def test_custom_read_date_format_is_exact():
    # Arrange
    cfg = Configuration(
        read_date_format_mode=ReadDateFormatMode.CUSTOM,
        custom_read_date_format="%d.%m.%Y",
    )

    # Act
    value = _field_reader("27.10.2006", cfg).read_field_as_date()

    # Assert
    assert value == date(2006, 10, 27)


@pytest.mark.parametrize("text", ["13/45/2020", "yesterday", "1/1", ""])
def test_bad_dates_raise_data_format_error(text):
    # Act / Assert
    with pytest.raises(DataFormatError):
        _field_reader(text).read_field_as_date()


# endregion Dates

# region Cleared state


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", None),
        ("*", ClearedState.CLEARED),
        ("C", ClearedState.CLEARED),
        ("c", ClearedState.CLEARED),
        ("R", ClearedState.RECONCILED),
        ("r", ClearedState.RECONCILED),
        ("X", ClearedState.RECONCILED),
        ("x", ClearedState.RECONCILED),
    ],
)
def test_cleared_state_codes(text, expected):
    # Act
    value = _field_reader(text).read_field_as_cleared_state()

    # Assert
    assert value is expected


@pytest.mark.parametrize("text", ["N", "?", "Y", "**"])
def test_unknown_cleared_state_raises(text):
    # Act / Assert
    with pytest.raises(DataFormatError, match="reconciled status"):
        _field_reader(text).read_field_as_cleared_state()


# endregion Cleared state


def test_reader_closes_source():
    # Arrange
    source = io.StringIO(READER_INPUTS)

    # Act
    with QifReader(source) as reader:
        reader.advance()

    # Assert
    assert source.closed

# tests/data_model/interfaces/test_enums.py
import pytest

from qif_dom.data_model.interfaces import (
    AccountType,
    ClearedState,
    MemorizedTransactionType,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", None),
        ("*", ClearedState.CLEARED),
        ("c", ClearedState.CLEARED),
        ("R", ClearedState.RECONCILED),
        ("x", ClearedState.RECONCILED),
    ],
)
def test_cleared_state_from_code(text, expected):
    # Act / Assert
    assert ClearedState.from_code(text) is expected


def test_cleared_state_rejects_unknown_code():
    # Act / Assert
    with pytest.raises(ValueError, match="reconciled status"):
        ClearedState.from_code("?")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Bank", AccountType.BANK),
        (" credit  card ", AccountType.CREDIT_CARD),
        ("Port", AccountType.INVESTMENT),
        ("OthA", AccountType.ASSET),
        ("oth l", AccountType.LIABILITY),
        ("Memorized", None),
    ],
)
def test_account_type_from_header_value(text, expected):
    # Act / Assert
    assert AccountType.from_header_value(text) is expected


def test_memorized_type_codes():
    # Act / Assert
    assert [t.value for t in MemorizedTransactionType] == ["C", "D", "P", "I", "E"]
    assert MemorizedTransactionType.from_code("I") is MemorizedTransactionType.INVESTMENT
    with pytest.raises(ValueError):
        MemorizedTransactionType.from_code("i")

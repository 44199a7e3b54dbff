# tests/data_model/qif_parsers_emitters/test_qif_tokenizer.py
from __future__ import annotations

import io

import pytest

from qif_dom.data_model.interfaces import TokenKind
from qif_dom.data_model.qif_parsers_emitters import QifToken, QifTokenizer
from qif_dom.qif_errors import LexError


def _tokens(text: str) -> list[QifToken]:
    tokenizer = QifTokenizer(io.StringIO(text))
    out: list[QifToken] = []
    while True:
        token = tokenizer.advance()
        out.append(token)
        if token.kind is TokenKind.END_OF_FILE:
            return out


def test_starts_at_begin_of_file():
    # Arrange
    tokenizer = QifTokenizer(io.StringIO("!Type:Bank\n"))

    # Act / Assert
    assert tokenizer.current.kind is TokenKind.BEGIN_OF_FILE
    assert tokenizer.line_number == 0


def test_classifies_header_field_and_end_of_record():
    # Arrange
    text = "!Type:Bank\nD1/1/2008\nT1500\n^\n"

    # Act
    tokens = _tokens(text)

    # Assert
    assert tokens == [
        QifToken(TokenKind.HEADER, "Type", "Bank"),
        QifToken(TokenKind.FIELD, "D", "1/1/2008"),
        QifToken(TokenKind.FIELD, "T", "1500"),
        QifToken(TokenKind.END_OF_RECORD),
        QifToken(TokenKind.END_OF_FILE),
    ], "Each line should map to exactly one token"


@pytest.mark.parametrize(
    "line, name, value",
    [
        ("!Account", "Account", ""),
        ("!Type:Bank ", "Type", "Bank"),
        ("!Type:Oth A", "Type", "Oth A"),
        ("!Option:AutoSwitch", "Option", "AutoSwitch"),
        ("!Type:Memorized:Extra", "Type", "Memorized:Extra"),
    ],
)
def test_header_splits_on_first_colon_and_trims_value(line, name, value):
    # Act
    token = _tokens(line + "\n")[0]

    # Assert
    assert token.kind is TokenKind.HEADER
    assert (token.name, token.value) == (name, value)


def test_field_name_is_single_character_and_value_trimmed():
    # Act
    token = _tokens("PStarbucks \t\n")[0]

    # Assert
    assert token == QifToken(TokenKind.FIELD, "P", "Starbucks")


def test_field_with_no_value_has_empty_value():
    # Act
    token = _tokens("I\n")[0]

    # Assert
    assert token == QifToken(TokenKind.FIELD, "I", "")


def test_comma_line_is_drained_one_value_per_advance():
    # Arrange
    text = '"MSFT",12.5,"1/ 5\'04"\n^\n'

    # Act
    tokens = _tokens(text)

    # Assert
    assert [t.kind for t in tokens] == [
        TokenKind.COMMA_VALUE,
        TokenKind.COMMA_VALUE,
        TokenKind.COMMA_VALUE,
        TokenKind.END_OF_RECORD,
        TokenKind.END_OF_FILE,
    ]
    assert [t.value for t in tokens[:3]] == ["MSFT", "12.5", "1/ 5'04"]


def test_comma_line_keeps_line_number_while_draining():
    # Arrange
    tokenizer = QifTokenizer(io.StringIO('!Type:Prices\n"A","B"\n^\n'))
    tokenizer.advance()

    # Act
    tokenizer.advance()
    first_line = tokenizer.line_number
    tokenizer.advance()

    # Assert
    assert first_line == 2
    assert tokenizer.line_number == 2, "Draining a comma line must not read more lines"


def test_quoted_value_may_contain_commas():
    # Act
    tokens = _tokens('"A, Inc",3\n')

    # Assert
    assert [t.value for t in tokens[:2]] == ["A, Inc", "3"]


def test_comma_line_ignores_trailing_whitespace():
    # Act
    tokens = _tokens('"IBM",33.5,"1/5/04"\x20\t\n^\n')

    # Assert
    assert [t.kind for t in tokens[:4]] == [
        TokenKind.COMMA_VALUE,
        TokenKind.COMMA_VALUE,
        TokenKind.COMMA_VALUE,
        TokenKind.END_OF_RECORD,
    ]
    assert tokens[2].value == "1/5/04"


def test_crlf_line_endings_are_stripped():
    # Act
    tokens = _tokens("!Type:Cat\r\nNFood\r\n^\r\n")

    # Assert
    assert tokens[0] == QifToken(TokenKind.HEADER, "Type", "Cat")
    assert tokens[1] == QifToken(TokenKind.FIELD, "N", "Food")
    assert tokens[2].kind is TokenKind.END_OF_RECORD


def test_leading_byte_order_mark_is_ignored():
    # Act
    token = _tokens("\ufeff!Type:Bank\n")[0]

    # Assert
    assert token == QifToken(TokenKind.HEADER, "Type", "Bank")


def test_end_of_file_is_sticky():
    # Arrange
    tokenizer = QifTokenizer(io.StringIO(""))

    # Act
    first = tokenizer.advance()
    second = tokenizer.advance()

    # Assert
    assert first.kind is TokenKind.END_OF_FILE
    assert second.kind is TokenKind.END_OF_FILE


@pytest.mark.parametrize(
    "text, bad_line",
    [
        ("!Type:Bank\n\nD1/1/2008\n", 2),
        ("!\n", 1),
        ("!Type:Bank\n!:Bank\n", 2),
        ("! :Bank\n", 1),
        ("!Type:Bank\n^x\n", 2),
        ('!Type:Prices\n"MSFT,12\n', 2),
        ('"MSFT"12\n', 1),
    ],
)
def test_lex_errors_carry_line_number(text, bad_line):
    # Act
    with pytest.raises(LexError) as excinfo:
        _tokens(text)

    # Assert
    assert excinfo.value.line_number == bad_line
    assert f"line {bad_line}" in str(excinfo.value)


def test_context_manager_closes_source():
    # Arrange
    source = io.StringIO("!Type:Bank\n")

    # Act
    with QifTokenizer(source) as tokenizer:
        tokenizer.advance()

    # Assert
    assert source.closed, "Tokenizer owns the stream and must close it"

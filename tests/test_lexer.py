import io

import pytest

from tokenflow.lexer import Lexer, tokenize
from tokenflow.span import ParseError, Pos, Span
from tokenflow.tokens import (
    AssignOperator,
    BinaryOperator,
    Token,
    TokenKind,
    UnaryOperator,
)


def tok(kind, sline, soffset, eline, eoffset, value=None):
    return Token(kind, Span("", Pos(sline, soffset), Pos(eline, eoffset)), value)


def kinds_and_values(text):
    return [(t.kind, t.value) for t in tokenize(text)]


def test_keywords():
    tokens = list(Lexer("").read(io.StringIO("import match")))
    assert tokens == [
        tok(TokenKind.INDENT, 1, 1, 1, 1, 0),
        tok(TokenKind.IMPORT, 1, 1, 1, 6),
        tok(TokenKind.MATCH, 1, 8, 1, 12),
        tok(TokenKind.EOF, 2, 1, 2, 1),
    ]


def test_identifiers_and_numbers():
    tokens = list(tokenize("blaat 8888 _foo_16"))
    assert tokens == [
        tok(TokenKind.INDENT, 1, 1, 1, 1, 0),
        tok(TokenKind.IDENTIFIER, 1, 1, 1, 5, "blaat"),
        tok(TokenKind.NUMBER, 1, 7, 1, 10, "8888"),
        tok(TokenKind.IDENTIFIER, 1, 12, 1, 18, "_foo_16"),
        tok(TokenKind.EOF, 2, 1, 2, 1),
    ]


def test_specials():
    tokens = list(tokenize("+ - * / % < <= > >= == = != ! || && => -> : , :: $ .."))
    b = TokenKind.BINARY_OPERATOR
    assert tokens == [
        tok(TokenKind.INDENT, 1, 1, 1, 1, 0),
        tok(b, 1, 1, 1, 1, BinaryOperator.ADD),
        tok(b, 1, 3, 1, 3, BinaryOperator.SUB),
        tok(b, 1, 5, 1, 5, BinaryOperator.MUL),
        tok(b, 1, 7, 1, 7, BinaryOperator.DIV),
        tok(b, 1, 9, 1, 9, BinaryOperator.MOD),
        tok(b, 1, 11, 1, 11, BinaryOperator.LESS_THAN),
        tok(b, 1, 13, 1, 14, BinaryOperator.LESS_THAN_EQUALS),
        tok(b, 1, 16, 1, 16, BinaryOperator.GREATER_THAN),
        tok(b, 1, 18, 1, 19, BinaryOperator.GREATER_THAN_EQUALS),
        tok(b, 1, 21, 1, 22, BinaryOperator.EQUALS),
        tok(TokenKind.ASSIGN, 1, 24, 1, 24, AssignOperator.ASSIGN),
        tok(b, 1, 26, 1, 27, BinaryOperator.NOT_EQUALS),
        tok(TokenKind.UNARY_OPERATOR, 1, 29, 1, 29, UnaryOperator.NOT),
        tok(b, 1, 31, 1, 32, BinaryOperator.OR),
        tok(b, 1, 34, 1, 35, BinaryOperator.AND),
        tok(TokenKind.FAT_ARROW, 1, 37, 1, 38),
        tok(TokenKind.ARROW, 1, 40, 1, 41),
        tok(TokenKind.COLON, 1, 43, 1, 43),
        tok(TokenKind.COMMA, 1, 45, 1, 45),
        tok(TokenKind.DOUBLE_COLON, 1, 47, 1, 48),
        tok(TokenKind.DOLLAR, 1, 50, 1, 50),
        tok(TokenKind.DOT_DOT, 1, 52, 1, 53),
        tok(TokenKind.EOF, 2, 1, 2, 1),
    ]


def test_string():
    tokens = list(tokenize(r'"This is a string" "Blaat\n" "$a"'))
    assert tokens == [
        tok(TokenKind.INDENT, 1, 1, 1, 1, 0),
        tok(TokenKind.STRING_LITERAL, 1, 1, 1, 18, "This is a string"),
        tok(TokenKind.STRING_LITERAL, 1, 20, 1, 28, "Blaat\n"),
        tok(TokenKind.STRING_LITERAL, 1, 30, 1, 33, "$a"),
        tok(TokenKind.EOF, 2, 1, 2, 1),
    ]


def test_number_range():
    tokens = list(tokenize("1..5"))
    assert tokens == [
        tok(TokenKind.INDENT, 1, 1, 1, 1, 0),
        tok(TokenKind.NUMBER, 1, 1, 1, 1, "1"),
        tok(TokenKind.DOT_DOT, 1, 2, 1, 3),
        tok(TokenKind.NUMBER, 1, 4, 1, 4, "5"),
        tok(TokenKind.EOF, 2, 1, 2, 1),
    ]


def test_hex_number_with_underscores():
    tokens = list(tokenize("0xF_F"))
    assert tokens[1] == tok(TokenKind.NUMBER, 1, 1, 1, 5, "0xFF")


@pytest.mark.parametrize(
    "text,expected",
    [("0b101", "0b101"), ("0o17", "0o17"), ("1_000", "1000"), ("1.5e3", "1.5e3")],
)
def test_number_forms(text, expected):
    assert kinds_and_values(text)[1] == (TokenKind.NUMBER, expected)


def test_invalid_digit_in_binary_number():
    with pytest.raises(ParseError) as exc:
        tokenize("0b102")
    assert exc.value.message == "Invalid character 2 in number 0b10"


def test_char_literal():
    tokens = list(tokenize("'a'"))
    assert tokens[1] == tok(TokenKind.CHAR_LITERAL, 1, 1, 1, 3, "a")


def test_escaped_char_literal():
    assert kinds_and_values(r"'\n'")[1] == (TokenKind.CHAR_LITERAL, "\n")


def test_invalid_char_literal():
    with pytest.raises(ParseError) as exc:
        tokenize("'ab'")
    assert exc.value.message == "Invalid char literal"


def test_string_escape_tab():
    assert kinds_and_values(r'"a\tb"')[1] == (TokenKind.STRING_LITERAL, "a\tb")


def test_unexpected_char():
    with pytest.raises(ParseError) as exc:
        tokenize("a ` b")
    assert exc.value.message == "Unexpected char `"
    assert exc.value.span == Span("", Pos(1, 3), Pos(1, 3))


def test_invalid_operator():
    with pytest.raises(ParseError) as exc:
        tokenize("a +- b")
    assert exc.value.message == "Invalid operator +-"


def test_indentation_levels():
    assert kinds_and_values("a\n  b\n\tc") == [
        (TokenKind.INDENT, 0),
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.INDENT, 2),
        (TokenKind.IDENTIFIER, "b"),
        (TokenKind.INDENT, 4),
        (TokenKind.IDENTIFIER, "c"),
        (TokenKind.EOF, None),
    ]


def test_comments_and_blank_lines_are_skipped():
    assert kinds_and_values("a # comment\n\n   \nb") == [
        (TokenKind.INDENT, 0),
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.INDENT, 0),
        (TokenKind.IDENTIFIER, "b"),
        (TokenKind.EOF, None),
    ]


def test_crlf_line_endings_match_lf():
    assert kinds_and_values("a\r\nb") == kinds_and_values("a\nb")


def test_keyword_as_is_binary_operator():
    assert kinds_and_values("x as u8")[2] == (TokenKind.BINARY_OPERATOR, BinaryOperator.AS)


def test_assign_operators_and_brackets():
    assert kinds_and_values("a[0] += f(1)") == [
        (TokenKind.INDENT, 0),
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.OPEN_BRACKET, None),
        (TokenKind.NUMBER, "0"),
        (TokenKind.CLOSE_BRACKET, None),
        (TokenKind.ASSIGN, AssignOperator.ADD),
        (TokenKind.IDENTIFIER, "f"),
        (TokenKind.OPEN_PAREN, None),
        (TokenKind.NUMBER, "1"),
        (TokenKind.CLOSE_PAREN, None),
        (TokenKind.EOF, None),
    ]


def test_file_name_in_spans():
    tokens = list(tokenize("x", "main.mh"))
    assert tokens[1].span == Span("main.mh", Pos(1, 1), Pos(1, 1))


def test_empty_input_yields_only_eof():
    assert list(tokenize("")) == [tok(TokenKind.EOF, 1, 1, 1, 1)]


def test_read_resets_token_queue():
    lexer = Lexer("")
    first = list(lexer.read(io.StringIO("a")))
    second = list(lexer.read(io.StringIO("b")))
    assert [t.value for t in first] == [0, "a", None]
    assert [t.value for t in second] == [0, "b", None]
    assert second[1].span == Span("", Pos(2, 1), Pos(2, 1))
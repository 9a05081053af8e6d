"""Turns source text into a queue of tokens."""

from __future__ import annotations

import io
from collections.abc import Iterable
from enum import Enum, auto
from typing import Any

from .span import ParseError, Pos, Span, single
from .tokenqueue import TokenQueue
from .tokens import AssignOperator, BinaryOperator, Token, TokenKind, UnaryOperator


class _State(Enum):
    START_OF_LINE = auto()
    IDLE = auto()
    COMMENT = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    HEX_NUMBER = auto()
    OCTAL_NUMBER = auto()
    BINARY_NUMBER = auto()
    OPERATOR = auto()
    IN_STRING = auto()
    IN_CHAR = auto()


_OPERATOR_START = frozenset("+-*/%><=!.|&:^~")

_SINGLE_CHAR_TOKENS = {
    ",": TokenKind.COMMA,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "{": TokenKind.OPEN_CURLY,
    "}": TokenKind.CLOSE_CURLY,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
    "$": TokenKind.DOLLAR,
    ";": TokenKind.SEMI_COLON,
    "~": TokenKind.TILDE,
    "?": TokenKind.QUESTION_MARK,
    "@": TokenKind.AT,
}

_KEYWORDS: dict[str, tuple[TokenKind, Any]] = {
    "import": (TokenKind.IMPORT, None),
    "match": (TokenKind.MATCH, None),
    "let": (TokenKind.LET, None),
    "in": (TokenKind.IN, None),
    "true": (TokenKind.TRUE, None),
    "false": (TokenKind.FALSE, None),
    "type": (TokenKind.TYPE, None),
    "struct": (TokenKind.STRUCT, None),
    "enum": (TokenKind.ENUM, None),
    "if": (TokenKind.IF, None),
    "else": (TokenKind.ELSE, None),
    "extern": (TokenKind.EXTERN, None),
    "thread_local": (TokenKind.THREAD_LOCAL, None),
    "new": (TokenKind.NEW, None),
    "delete": (TokenKind.DELETE, None),
    "while": (TokenKind.WHILE, None),
    "for": (TokenKind.FOR, None),
    "nil": (TokenKind.NIL, None),
    "null": (TokenKind.NULL, None),
    "var": (TokenKind.VAR, None),
    "as": (TokenKind.BINARY_OPERATOR, BinaryOperator.AS),
    "interface": (TokenKind.INTERFACE, None),
    "fn": (TokenKind.FUNC, None),
    "return": (TokenKind.RETURN, None),
    "ok": (TokenKind.OK, None),
    "error": (TokenKind.ERROR, None),
    "implements": (TokenKind.IMPLEMENTS, None),
}

_BIN = TokenKind.BINARY_OPERATOR
_OPERATORS: dict[str, tuple[TokenKind, Any]] = {
    "+": (_BIN, BinaryOperator.ADD),
    "-": (_BIN, BinaryOperator.SUB),
    "*": (_BIN, BinaryOperator.MUL),
    "/": (_BIN, BinaryOperator.DIV),
    "%": (_BIN, BinaryOperator.MOD),
    ">": (_BIN, BinaryOperator.GREATER_THAN),
    ">=": (_BIN, BinaryOperator.GREATER_THAN_EQUALS),
    "<": (_BIN, BinaryOperator.LESS_THAN),
    "<=": (_BIN, BinaryOperator.LESS_THAN_EQUALS),
    "=": (TokenKind.ASSIGN, AssignOperator.ASSIGN),
    "+=": (TokenKind.ASSIGN, AssignOperator.ADD),
    "-=": (TokenKind.ASSIGN, AssignOperator.SUB),
    "*=": (TokenKind.ASSIGN, AssignOperator.MUL),
    "/=": (TokenKind.ASSIGN, AssignOperator.DIV),
    "&&=": (TokenKind.ASSIGN, AssignOperator.AND),
    "||=": (TokenKind.ASSIGN, AssignOperator.OR),
    "==": (_BIN, BinaryOperator.EQUALS),
    "!": (TokenKind.UNARY_OPERATOR, UnaryOperator.NOT),
    "!=": (_BIN, BinaryOperator.NOT_EQUALS),
    "&&": (_BIN, BinaryOperator.AND),
    "||": (_BIN, BinaryOperator.OR),
    "->": (TokenKind.ARROW, None),
    "=>": (TokenKind.FAT_ARROW, None),
    ":": (TokenKind.COLON, None),
    "::": (TokenKind.DOUBLE_COLON, None),
    ".": (_BIN, BinaryOperator.DOT),
    "..": (TokenKind.DOT_DOT, None),
    "&": (_BIN, BinaryOperator.BITWISE_AND),
    "|": (_BIN, BinaryOperator.BITWISE_OR),
    "^": (_BIN, BinaryOperator.BITWISE_XOR),
    ">>": (_BIN, BinaryOperator.RIGHT_SHIFT),
    "<<": (_BIN, BinaryOperator.LEFT_SHIFT),
    "~": (TokenKind.UNARY_OPERATOR, UnaryOperator.BITWISE_NOT),
}

_OPERATOR_END = frozenset("{([})]$,_")
_ESCAPES = {"r": "\r", "n": "\n", "t": "\t"}


def _is_operator_start(c: str) -> bool:
    return c in _OPERATOR_START


def _is_identifier_start(c: str) -> bool:
    return c.isalnum() or c == "_"


def _is_end_of_number(c: str) -> bool:
    return c.isspace() or c in "}]);:" or c.isalpha() or _is_operator_start(c)


def _is_digit(c: str, radix: int) -> bool:
    return c.isascii() and c.isalnum() and int(c, 36) < radix


class Lexer:
    """A character-driven lexer that emits indent tokens at the start of lines."""

    def __init__(self, file_name: str = "") -> None:
        self.file_name = file_name
        self._state = _State.START_OF_LINE
        self._tokens = TokenQueue()
        self._line = 1
        self._offset = 1
        self._token_start = Pos(1, 1)
        self._data = ""
        self._escape = False
        self._indent = 0
        self._handlers = {
            _State.START_OF_LINE: self._start_of_line,
            _State.IDLE: self._idle,
            _State.COMMENT: self._comment,
            _State.IDENTIFIER: self._identifier,
            _State.NUMBER: self._number,
            _State.HEX_NUMBER: lambda c: self._radix_number(c, 16),
            _State.OCTAL_NUMBER: lambda c: self._radix_number(c, 8),
            _State.BINARY_NUMBER: lambda c: self._radix_number(c, 2),
            _State.OPERATOR: self._operator,
            _State.IN_STRING: self._in_string,
            _State.IN_CHAR: self._in_char,
        }

    @property
    def _pos(self) -> Pos:
        return Pos(self._line, self._offset)

    def _current_span(self) -> Span:
        return Span(self.file_name, self._token_start, Pos(self._line, self._offset - 1))

    def _current_single_span(self) -> Span:
        return single(self.file_name, self._pos)

    def _add(self, kind: TokenKind, span: Span, value: Any = None) -> None:
        self._tokens.add(Token(kind, span, value))

    def _start(self, c: str, state: _State) -> None:
        self._token_start = self._pos
        self._state = state
        self._data = "" if state in (_State.IN_STRING, _State.IN_CHAR) else c

    def _start_of_new_line(self) -> None:
        self._state = _State.START_OF_LINE
        self._indent = 0

    def _idle(self, c: str) -> None:
        span = self._current_single_span()
        if c == "\n":
            self._start_of_new_line()
        elif c in " \t":
            pass
        elif c == "#":
            self._state = _State.COMMENT
        elif c in _SINGLE_CHAR_TOKENS:
            self._add(_SINGLE_CHAR_TOKENS[c], span)
        elif "0" <= c <= "9":
            self._start(c, _State.NUMBER)
        elif c == '"':
            self._start(c, _State.IN_STRING)
        elif c == "'":
            self._start(c, _State.IN_CHAR)
        elif _is_identifier_start(c):
            self._start(c, _State.IDENTIFIER)
        elif _is_operator_start(c):
            self._start(c, _State.OPERATOR)
        else:
            raise ParseError(span, f"Unexpected char {c}")

    def _comment(self, c: str) -> None:
        if c == "\n":
            self._start_of_new_line()

    def _identifier(self, c: str) -> None:
        if _is_identifier_start(c):
            self._data += c
            return
        self._state = _State.IDLE
        span = self._current_span()
        kind, value = _KEYWORDS.get(self._data, (TokenKind.IDENTIFIER, self._data))
        self._data = ""
        self._add(kind, span, value)
        self._idle(c)

    def _number(self, c: str) -> None:
        if c == "_":
            return
        if self._data == "0" and c in "xob":
            self._data += c
            self._state = {
                "x": _State.HEX_NUMBER,
                "o": _State.OCTAL_NUMBER,
                "b": _State.BINARY_NUMBER,
            }[c]
        elif c.isnumeric() or c in ".e":
            self._data += c
            if self._data.endswith(".."):
                # A number directly followed by a range operator
                span = Span(self.file_name, self._token_start, Pos(self._line, self._offset - 2))
                self._add(TokenKind.NUMBER, span, self._data[:-2])
                dd_span = Span(self.file_name, Pos(self._line, self._offset - 1), self._pos)
                self._add(TokenKind.DOT_DOT, dd_span)
                self._data = ""
                self._state = _State.IDLE
        else:
            self._finish_number(c)

    def _finish_number(self, c: str) -> None:
        self._state = _State.IDLE
        span = self._current_span()
        num, self._data = self._data, ""
        self._add(TokenKind.NUMBER, span, num)
        self._idle(c)

    def _radix_number(self, c: str, radix: int) -> None:
        if c == "_":
            return
        if _is_digit(c, radix):
            self._data += c
        elif _is_end_of_number(c):
            self._finish_number(c)
        else:
            raise ParseError(
                self._current_single_span(),
                f"Invalid character {c} in number {self._data}",
            )

    def _operator(self, c: str) -> None:
        if not (c.isspace() or c.isalnum() or c in _OPERATOR_END):
            self._data += c
            return
        try:
            kind, value = _OPERATORS[self._data]
        except KeyError:
            raise ParseError(
                self._current_single_span(), f"Invalid operator {self._data}"
            ) from None
        self._state = _State.IDLE
        self._add(kind, self._current_span(), value)
        self._idle(c)

    def _literal_char(self, c: str, end: str) -> None:
        if self._escape:
            self._escape = False
            self._data += _ESCAPES.get(c, c)
        elif c == "\\":
            self._escape = True
        elif c != end:
            self._data += c

    def _literal_span(self) -> Span:
        span = self._current_span()
        # The closing quote belongs to the literal
        return span.expanded(Pos(span.end.line, span.end.offset + 1))

    def _in_string(self, c: str) -> None:
        self._literal_char(c, '"')
        if c == '"':
            text, self._data = self._data, ""
            self._add(TokenKind.STRING_LITERAL, self._literal_span(), text)
            self._escape = False
            self._state = _State.IDLE

    def _in_char(self, c: str) -> None:
        self._literal_char(c, "'")
        if c == "'":
            span = self._literal_span()
            if len(self._data.encode("utf-8")) != 1:
                raise ParseError(span, "Invalid char literal")
            ch, self._data = self._data, ""
            self._add(TokenKind.CHAR_LITERAL, span, ch)
            self._escape = False
            self._state = _State.IDLE

    def _start_of_line(self, c: str) -> None:
        if c == "\n":
            self._indent = 0
        elif c == " ":
            self._indent += 1
        elif c == "\t":
            self._indent += 4
        else:
            span = Span(self.file_name, self._token_start, self._pos)
            self._add(TokenKind.INDENT, span, self._indent)
            self._start(c, _State.IDLE)
            self._feed(c)

    def _feed(self, c: str) -> None:
        self._handlers[self._state](c)

    def read(self, stream: Iterable[str]) -> TokenQueue:
        """Lex every line of ``stream`` and return the tokens, ending with EOF."""
        for line in stream:
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            for c in line:
                self._feed(c)
                self._offset += 1
            self._feed("\n")
            self._offset = 1
            self._line += 1

        self._add(TokenKind.EOF, self._current_single_span())
        tokens, self._tokens = self._tokens, TokenQueue()
        return tokens


def tokenize(text: str, file_name: str = "") -> TokenQueue:
    """Lex ``text`` as the contents of ``file_name``."""
    return Lexer(file_name).read(io.StringIO(text))
"""Token kinds, operators and tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .span import Span


class BinaryOperator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    GREATER_THAN = ">"
    GREATER_THAN_EQUALS = ">="
    LESS_THAN = "<"
    LESS_THAN_EQUALS = "<="
    EQUALS = "=="
    NOT_EQUALS = "!="
    AND = "&&"
    OR = "||"
    DOT = "."
    BITWISE_AND = "&"
    BITWISE_OR = "|"
    BITWISE_XOR = "^"
    RIGHT_SHIFT = ">>"
    LEFT_SHIFT = "<<"
    AS = "as"

    def __str__(self) -> str:
        return self.value


class UnaryOperator(Enum):
    SUB = "-"
    NOT = "!"
    BITWISE_NOT = "~"

    def __str__(self) -> str:
        return self.value


class AssignOperator(Enum):
    ASSIGN = "="
    ADD = "+="
    SUB = "-="
    MUL = "*="
    DIV = "/="
    AND = "&&="
    OR = "||="

    def __str__(self) -> str:
        return self.value


class TokenKind(Enum):
    """The kind of a token; some kinds carry a value on the token."""

    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING_LITERAL = "string literal"
    CHAR_LITERAL = "char literal"
    BINARY_OPERATOR = "binary operator"
    UNARY_OPERATOR = "unary operator"
    ASSIGN = "assign"
    INDENT = "indent"
    COLON = ":"
    DOUBLE_COLON = "::"
    SEMI_COLON = ";"
    COMMA = ","
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    OPEN_CURLY = "{"
    CLOSE_CURLY = "}"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"
    ARROW = "->"
    FAT_ARROW = "=>"
    OK = "ok"
    ERROR = "error"
    MATCH = "match"
    LET = "let"
    IN = "in"
    IMPORT = "import"
    IF = "if"
    ELSE = "else"
    WHILE = "while"
    EXTERN = "extern"
    THREAD_LOCAL = "thread_local"
    DOLLAR = "$"
    TRUE = "true"
    FALSE = "false"
    TYPE = "type"
    STRUCT = "struct"
    ENUM = "enum"
    IMPLEMENTS = "implements"
    TILDE = "~"
    NEW = "new"
    DELETE = "delete"
    QUESTION_MARK = "?"
    NIL = "nil"
    NULL = "null"
    VAR = "var"
    FOR = "for"
    INTERFACE = "interface"
    FUNC = "fn"
    AT = "@"
    RETURN = "return"
    DOT_DOT = ".."
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


_VALUE_FORMATS = {
    TokenKind.IDENTIFIER: "identifier '{}'",
    TokenKind.NUMBER: "number '{}'",
    TokenKind.STRING_LITERAL: "string litteral '{}'",
    TokenKind.CHAR_LITERAL: "char literal '{}'",
    TokenKind.BINARY_OPERATOR: "operator {}",
    TokenKind.UNARY_OPERATOR: "operator {}",
    TokenKind.ASSIGN: "{}",
    TokenKind.INDENT: "indent {}",
}


@dataclass(frozen=True)
class Token:
    """A token: its kind, where it came from, and the value its kind carries."""

    kind: TokenKind
    span: Span
    value: Any = None

    def __str__(self) -> str:
        fmt = _VALUE_FORMATS.get(self.kind)
        if fmt is None:
            return str(self.kind)
        return fmt.format(self.value)
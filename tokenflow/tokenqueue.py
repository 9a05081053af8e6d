"""A queue of tokens with the lookahead helpers the parser needs."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any

from .span import ParseError, Pos, Span
from .tokens import AssignOperator, BinaryOperator, Token, TokenKind

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class TokenQueue:
    """Tokens waiting to be parsed; indents may be skipped transparently."""

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: deque[Token] = deque(tokens)
        self.pos = Pos(1, 1)
        self.ignore_indents = False

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        while self._tokens:
            yield self._tokens.popleft()

    def add(self, token: Token) -> None:
        self._tokens.append(token)

    def push_front(self, token: Token) -> None:
        self._tokens.appendleft(token)

    def _eat_indents(self) -> None:
        if not self.ignore_indents:
            return
        while self._tokens and self._tokens[0].kind is TokenKind.INDENT:
            self._tokens.popleft()

    def _visible(self) -> Iterator[Token]:
        for tok in self._tokens:
            if self.ignore_indents and tok.kind is TokenKind.INDENT:
                continue
            yield tok

    def pop(self) -> Token:
        self._eat_indents()
        if not self._tokens:
            raise ParseError(Span(), "Unexpected end of file")
        tok = self._tokens.popleft()
        self.pos = tok.span.end
        return tok

    def pop_if(self, pred: Callable[[Token], bool]) -> Token | None:
        self._eat_indents()
        tok = self.peek()
        if tok is None:
            raise ParseError(Span(), "Unexpected end of file")
        return self.pop() if pred(tok) else None

    def peek(self) -> Token | None:
        return next(self._visible(), None)

    def peek_at(self, index: int) -> Token | None:
        return next(islice(self._visible(), index, None), None)

    def expect(self, kind: TokenKind, value: Any = None) -> Token:
        self._eat_indents()
        tok = self.pop()
        if tok.kind is kind and tok.value == value:
            return tok
        wanted = Token(kind, tok.span, value)
        raise ParseError(tok.span, f"Unexpected token '{tok}', expecting '{wanted}'")

    def expect_int(self) -> tuple[int, Span]:
        self._eat_indents()
        tok = self.pop()
        if tok.kind is not TokenKind.NUMBER:
            raise ParseError(tok.span, f"Expected integer literal, found {tok}")
        text = tok.value
        if not _UNSIGNED.fullmatch(text) or int(text) > _U64_MAX:
            raise ParseError(tok.span, f"{text} is not a valid integer")
        return int(text), tok.span

    def expect_identifier(self) -> tuple[str, Span]:
        self._eat_indents()
        tok = self.pop()
        if tok.kind is not TokenKind.IDENTIFIER:
            raise ParseError(tok.span, f"Expected identifier, found {tok}")
        return tok.value, tok.span

    def expect_binary_operator(self) -> BinaryOperator:
        self._eat_indents()
        tok = self.pop()
        if tok.kind is not TokenKind.BINARY_OPERATOR:
            raise ParseError(tok.span, f"Expected operator, found {tok}")
        return tok.value

    @staticmethod
    def _matches(tok: Token | None, kind: TokenKind, value: Any) -> bool:
        return tok is not None and tok.kind is kind and tok.value == value

    def is_next(self, kind: TokenKind, value: Any = None) -> bool:
        return self._matches(self.peek(), kind, value)

    def is_next_at(self, index: int, kind: TokenKind, value: Any = None) -> bool:
        return self._matches(self.peek_at(index), kind, value)

    def is_next_binary_operator(self) -> bool:
        tok = self.peek()
        return tok is not None and tok.kind is TokenKind.BINARY_OPERATOR

    def is_next_assign_operator(self) -> AssignOperator | None:
        tok = self.peek()
        if tok is not None and tok.kind is TokenKind.ASSIGN:
            return tok.value
        return None

    def is_next_identifier(self, value: str) -> bool:
        return self._matches(self.peek(), TokenKind.IDENTIFIER, value)

    def is_in_same_block(self, indent_level: int) -> bool:
        if not self._tokens:
            return False
        tok = self._tokens[0]
        if tok.kind is TokenKind.INDENT:
            return tok.value >= indent_level
        return tok.kind is not TokenKind.EOF

    def pop_indent(self) -> tuple[int, Span] | None:
        if not self._tokens or self._tokens[0].kind is not TokenKind.INDENT:
            return None
        level = self._tokens[0].value
        tok = self.pop()
        return level, tok.span
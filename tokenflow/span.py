"""Source positions, spans and the errors that refer to them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Pos:
    """A line and column in a source file, ordered by line, then offset."""

    line: int = 0
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.offset}"


@dataclass(frozen=True)
class Span:
    """A range within a file; a span without a file is an internal span."""

    file: str | None = None
    start: Pos = field(default_factory=Pos)
    end: Pos = field(default_factory=Pos)

    def __post_init__(self) -> None:
        if self.file is None:
            object.__setattr__(self, "start", Pos())
            object.__setattr__(self, "end", Pos())

    @property
    def is_internal(self) -> bool:
        return self.file is None

    def merge(self, other: Span) -> Span:
        """Return the smallest span covering both spans, keeping this span's file."""
        if self.is_internal or other.is_internal:
            return Span()
        return Span(self.file, min(self.start, other.start), max(self.end, other.end))

    def expanded(self, new_end: Pos) -> Span:
        """Return this span with its end moved to ``new_end``."""
        if self.is_internal:
            return Span()
        return Span(self.file, self.start, new_end)

    def __str__(self) -> str:
        if self.is_internal:
            return "internal"
        return f"{self.file}:{self.start} -> {self.end}"


def single(file: str, start: Pos) -> Span:
    """Return a span that starts and ends at ``start``."""
    return Span(file, start, start)


class CompileError(Exception):
    """An error found while compiling, tied to a place in the source."""

    def __init__(self, span: Span, message: str) -> None:
        super().__init__(message)
        self.span = span
        self.message = message

    def __str__(self) -> str:
        return f"{self.span}: {self.message}"


class ParseError(CompileError):
    """An error found while lexing or parsing."""


class TypeCheckError(CompileError):
    """An error found while checking types."""
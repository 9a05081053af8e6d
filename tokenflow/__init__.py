"""Lexing, token queues and generic type instantiation for a small compiled language."""

__version__ = "0.1.0"

__all__ = [
    "genericmapper",
    "instantiate",
    "lexer",
    "span",
    "target",
    "timer",
    "tokenqueue",
    "tokens",
    "typesystem",
]
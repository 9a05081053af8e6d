# tokenflow

Front-end building blocks for a small, indentation-based compiled language:

- `tokenflow.span`: source positions (`Pos`), source ranges (`Span`) and the
  compile errors (`CompileError`, `ParseError`, `TypeCheckError`) that carry them.
- `tokenflow.tokens`: token kinds (`TokenKind`), operators (`BinaryOperator`,
  `UnaryOperator`, `AssignOperator`) and the `Token` type.
- `tokenflow.lexer`: a character-driven `Lexer` and the `tokenize` helper that
  turn source text into tokens.
- `tokenflow.tokenqueue`: `TokenQueue`, the look-ahead queue a parser consumes.
- `tokenflow.typesystem`: the language's types and helpers to build them.
- `tokenflow.target`: the `Target` description (native integer size, triplet).
- `tokenflow.instantiate` and `tokenflow.genericmapper`: mapping generic type
  parameters onto concrete types.
- `tokenflow.timer`: timing of compiler passes (`time_operation`).

## Installation

```
pip install .
```

## Lexing

```python
from tokenflow.lexer import tokenize

for token in tokenize("let x = 0x1f + 2", "example.mn"):
    print(token.kind, token.value, token.span)
```

Every non-blank line starts with an indent token whose value is the line's
indentation level (a space counts 1, a tab counts 4), and the stream ends with
an EOF token. Comments run from `#` to the end of the line. Lexing errors raise
`ParseError` with the span of the offending character.

To lex from an open file, use the class directly:

```python
from tokenflow.lexer import Lexer

with open("example.mn") as stream:
    queue = Lexer("example.mn").read(stream)
```

`read` returns a `TokenQueue`, which offers `peek`, `peek_at`, `pop`,
`pop_if`, `expect`, `expect_identifier`, `expect_int`,
`expect_binary_operator`, `is_next`, `pop_indent`, `is_in_same_block` and the
other look-ahead helpers a recursive-descent parser needs. Setting
`ignore_indents` to `True` makes the queue skip indent tokens.

## Generic types

```python
from tokenflow.genericmapper import fill_in_generics
from tokenflow.instantiate import make_concrete
from tokenflow.span import Span
from tokenflow.typesystem import IntSize, IntType, generic_type, slice_type

mapping = {}
concrete = fill_in_generics(
    slice_type(IntType(IntSize.I32)), slice_type(generic_type("a")), mapping, Span()
)
print(make_concrete(mapping, generic_type("a"), Span()))  # i32
```

Mismatched or conflicting mappings, and mapped types that do not implement an
interface their parameter requires, raise `TypeCheckError`.

## What this package does not do

There is no parser, type checker or code generator here, and no command-line
program: the package stops at tokens, the token queue and type-parameter
substitution on types.

## Running the tests

```
pip install .[test]
pytest
```
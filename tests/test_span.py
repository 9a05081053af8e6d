import pytest

from tokenflow.span import CompileError, ParseError, Pos, Span, TypeCheckError, single


def test_pos_ordering_by_line_then_offset():
    assert Pos(1, 9) < Pos(2, 1)
    assert Pos(2, 3) < Pos(2, 4)
    assert sorted([Pos(3, 1), Pos(1, 2), Pos(1, 1)]) == [Pos(1, 1), Pos(1, 2), Pos(3, 1)]


def test_pos_default_is_zero():
    assert Pos() == Pos(0, 0)


def test_pos_str():
    assert str(Pos(3, 7)) == "3:7"


def test_internal_span_str():
    assert str(Span()) == "internal"


def test_file_span_str():
    assert str(Span("f", Pos(1, 2), Pos(3, 4))) == "f:1:2 -> 3:4"


def test_internal_span_has_zero_end():
    assert Span().end == Pos()
    assert Span().is_internal
    assert Span(None, Pos(5, 5), Pos(6, 6)) == Span()


def test_single_starts_and_ends_at_same_pos():
    s = single("a", Pos(4, 2))
    assert s.start == s.end == Pos(4, 2)
    assert s.file == "a"
    assert not s.is_internal


def test_merge_covers_both():
    a = Span("x", Pos(1, 5), Pos(1, 8))
    b = Span("y", Pos(1, 2), Pos(2, 1))
    m = a.merge(b)
    assert m == Span("x", Pos(1, 2), Pos(2, 1))
    assert b.merge(a).start == m.start
    assert b.merge(a).end == m.end


def test_merge_contained():
    outer = Span("x", Pos(1, 1), Pos(5, 5))
    inner = Span("x", Pos(2, 2), Pos(3, 3))
    assert outer.merge(inner) == outer
    assert inner.merge(outer) == outer


def test_merge_with_internal_is_internal():
    a = Span("x", Pos(1, 1), Pos(1, 2))
    assert a.merge(Span()) == Span()
    assert Span().merge(a) == Span()


def test_expanded():
    a = Span("x", Pos(1, 1), Pos(1, 2))
    assert a.expanded(Pos(4, 4)) == Span("x", Pos(1, 1), Pos(4, 4))
    assert Span().expanded(Pos(4, 4)) == Span()


def test_errors_carry_span_and_message():
    s = single("f", Pos(1, 1))
    with pytest.raises(CompileError) as info:
        raise ParseError(s, "Unexpected end of file")
    assert info.value.span == s
    assert info.value.message == "Unexpected end of file"
    assert "Unexpected end of file" in str(info.value)
    assert issubclass(TypeCheckError, CompileError)
    assert not issubclass(TypeCheckError, ParseError)
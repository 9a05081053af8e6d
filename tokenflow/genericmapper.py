"""Inference of type parameters by matching actual types against generic ones."""

from __future__ import annotations

from collections.abc import MutableMapping

from .instantiate import make_concrete
from .span import Span, TypeCheckError
from .typesystem import (
    ArrayType,
    FuncArg,
    FuncType,
    GenericType,
    OptionalType,
    PointerType,
    ResultType,
    Simple,
    SliceType,
    StructType,
    SumType,
    Type,
    array_type,
    func_type,
    optional_type,
    ptr_type,
    result_type,
    slice_type,
    struct_member,
    struct_type,
    sum_type,
    sum_type_case,
)

GenericMapping = MutableMapping[Type, Type]


def add(mapping: GenericMapping, from_type: Type, to_type: Type, span: Span) -> None:
    """Record that ``from_type`` stands for ``to_type``.

    Raises TypeCheckError when ``from_type`` was already mapped to another type.
    """
    previous = mapping.get(from_type)
    mapping[from_type] = to_type
    if previous is not None and previous != to_type:
        raise TypeCheckError(
            span,
            f"Generic argument {from_type} mismatch, expecting type {previous}, not {to_type}",
        )


def _map_error(actual: Type, generic: Type, span: Span) -> TypeCheckError:
    return TypeCheckError(span, f"Cannot map argument type {actual} on type {generic}")


def _fill_implements(
    actual: tuple[Type, ...],
    generic: tuple[Type, ...],
    known_types: GenericMapping,
    span: Span,
) -> list[Type]:
    return [fill_in_generics(ai, gi, known_types, span) for gi, ai in zip(generic, actual)]


def fill_in_generics(
    actual: Type, generic: Type, known_types: GenericMapping, span: Span
) -> Type:
    """Match ``actual`` against ``generic``, filling ``known_types`` as parameters are found.

    Returns the generic type with every parameter that could be inferred filled in.
    Raises TypeCheckError when the shapes of the two types do not fit.
    """
    if actual == generic:
        return actual

    new_generic = make_concrete(known_types, generic, span)
    if not new_generic.is_generic():
        return new_generic

    if new_generic is Simple.UNKNOWN:
        return actual

    if isinstance(new_generic, GenericType):
        add(known_types, new_generic, actual, span)
        return actual

    if isinstance(new_generic, SliceType) and isinstance(actual, SliceType):
        add(known_types, new_generic.element_type, actual.element_type, span)
        el = fill_in_generics(actual.element_type, new_generic.element_type, known_types, span)
        return slice_type(el)

    if isinstance(new_generic, (ArrayType, SliceType)) and isinstance(actual, ArrayType):
        # An array converts to a slice of the same element type
        add(known_types, new_generic.element_type, actual.element_type, span)
        el = fill_in_generics(actual.element_type, new_generic.element_type, known_types, span)
        return array_type(el, actual.length)

    if isinstance(new_generic, FuncType) and isinstance(actual, FuncType):
        if len(new_generic.args) != len(actual.args):
            raise _map_error(actual, new_generic, span)
        args = [
            FuncArg(fill_in_generics(aa.typ, ga.typ, known_types, span), ga.mutable)
            for ga, aa in zip(new_generic.args, actual.args)
        ]
        ret = fill_in_generics(actual.return_type, new_generic.return_type, known_types, span)
        return func_type(args, ret)

    if isinstance(new_generic, StructType) and isinstance(actual, StructType):
        if len(new_generic.members) != len(actual.members):
            raise _map_error(actual, new_generic, span)
        members = []
        for gm, am in zip(new_generic.members, actual.members):
            if gm.name != am.name:
                raise _map_error(actual, new_generic, span)
            members.append(
                struct_member(am.name, fill_in_generics(am.typ, gm.typ, known_types, span))
            )
        if len(new_generic.implements) != len(actual.implements):
            raise _map_error(actual, new_generic, span)
        implements = _fill_implements(
            actual.implements, new_generic.implements, known_types, span
        )
        return struct_type(actual.name, members, implements)

    if isinstance(new_generic, SumType) and isinstance(actual, SumType):
        if len(new_generic.cases) != len(actual.cases):
            raise _map_error(actual, new_generic, span)
        cases = []
        for gc, ac in zip(new_generic.cases, actual.cases):
            if gc.name != ac.name:
                raise _map_error(actual, new_generic, span)
            if ac.typ is not None and gc.typ is not None:
                cases.append(
                    sum_type_case(ac.name, fill_in_generics(ac.typ, gc.typ, known_types, span))
                )
        if len(new_generic.implements) != len(actual.implements):
            raise _map_error(actual, new_generic, span)
        implements = _fill_implements(
            actual.implements, new_generic.implements, known_types, span
        )
        return sum_type(actual.name, cases, implements)

    if isinstance(new_generic, PointerType) and isinstance(actual, PointerType):
        return ptr_type(fill_in_generics(actual.inner, new_generic.inner, known_types, span))

    if isinstance(new_generic, OptionalType) and isinstance(actual, OptionalType):
        return optional_type(
            fill_in_generics(actual.inner, new_generic.inner, known_types, span)
        )

    if isinstance(new_generic, ResultType) and isinstance(actual, ResultType):
        ok_typ = (
            fill_in_generics(actual.ok_typ, new_generic.ok_typ, known_types, span)
            if new_generic.ok_typ.is_generic()
            else new_generic.ok_typ
        )
        err_typ = (
            fill_in_generics(actual.err_typ, new_generic.err_typ, known_types, span)
            if new_generic.err_typ.is_generic()
            else new_generic.err_typ
        )
        return result_type(ok_typ, err_typ)

    raise _map_error(actual, new_generic, span)
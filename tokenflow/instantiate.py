"""Substitution of concrete types for type parameters."""

from __future__ import annotations

from collections.abc import Mapping

from .span import Span, TypeCheckError
from .typesystem import (
    ArrayType,
    FuncArg,
    FuncType,
    GenericType,
    OptionalType,
    PointerType,
    ResultType,
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

GenericMapping = Mapping[Type, Type]


class _ConstraintError(Exception):
    pass


def _check_interface_constraints(generic: Type, concrete: Type) -> Type:
    if isinstance(generic, GenericType):
        for interface in generic.interfaces:
            if not concrete.implements_interface(interface):
                raise _ConstraintError(
                    f"Type {concrete.display_name()} does not implement the interface "
                    f"{interface.display_name()}"
                )
    return concrete


def _concrete(mapping: GenericMapping, generic: Type) -> Type:
    if not generic.is_generic():
        return generic

    concrete = mapping.get(generic)
    if concrete is not None:
        return _check_interface_constraints(generic, concrete)

    if isinstance(generic, ArrayType):
        return array_type(_concrete(mapping, generic.element_type), generic.length)
    if isinstance(generic, SliceType):
        return slice_type(_concrete(mapping, generic.element_type))
    if isinstance(generic, FuncType):
        args = [FuncArg(_concrete(mapping, a.typ), a.mutable) for a in generic.args]
        return func_type(args, _concrete(mapping, generic.return_type))
    if isinstance(generic, StructType):
        members = [struct_member(m.name, _concrete(mapping, m.typ)) for m in generic.members]
        implements = [_concrete(mapping, i) for i in generic.implements]
        return struct_type(generic.name, members, implements)
    if isinstance(generic, SumType):
        cases = [
            sum_type_case(c.name, None if c.typ is None else _concrete(mapping, c.typ))
            for c in generic.cases
        ]
        implements = [_concrete(mapping, i) for i in generic.implements]
        return sum_type(generic.name, cases, implements)
    if isinstance(generic, PointerType):
        return ptr_type(_concrete(mapping, generic.inner))
    if isinstance(generic, OptionalType):
        return optional_type(_concrete(mapping, generic.inner))
    if isinstance(generic, ResultType):
        return result_type(_concrete(mapping, generic.ok_typ), _concrete(mapping, generic.err_typ))
    return generic


def make_concrete(mapping: GenericMapping, generic: Type, span: Span) -> Type:
    """Replace the type parameters in ``generic`` using ``mapping``.

    Parameters with no mapping are left in place. Raises TypeCheckError when a
    mapped type does not implement an interface its parameter requires.
    """
    try:
        return _concrete(mapping, generic)
    except _ConstraintError as exc:
        raise TypeCheckError(span, str(exc)) from None
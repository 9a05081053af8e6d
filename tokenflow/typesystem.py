"""The types of the language and helpers to build them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class IntSize(Enum):
    I8 = 8
    I16 = 16
    I32 = 32
    I64 = 64


class FloatSize(Enum):
    F32 = 32
    F64 = 64


class Type:
    """Base of every type; composite types look into their parts."""

    def is_generic(self) -> bool:
        """Whether this type still holds something to be filled in."""
        return False

    def implements_interface(self, interface: Type) -> bool:
        """Whether this type declares that it implements ``interface``."""
        return False

    def display_name(self) -> str:
        """The name used for this type in messages."""
        return str(self)


class Simple(Type, Enum):
    """Types that carry no further data."""

    UNKNOWN = "unknown"
    VOID = "void"
    BOOL = "bool"
    CHAR = "char"
    STRING = "string"
    SELF_TYPE = "Self"

    def is_generic(self) -> bool:
        return self is Simple.UNKNOWN

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntType(Type):
    size: IntSize

    def __str__(self) -> str:
        return f"i{self.size.value}"


@dataclass(frozen=True)
class UIntType(Type):
    size: IntSize

    def __str__(self) -> str:
        return f"u{self.size.value}"


@dataclass(frozen=True)
class FloatType(Type):
    size: FloatSize

    def __str__(self) -> str:
        return f"f{self.size.value}"


@dataclass(frozen=True)
class GenericType(Type):
    """A type parameter, optionally restricted to types implementing interfaces."""

    name: str
    interfaces: tuple[Type, ...] = ()

    def is_generic(self) -> bool:
        return True

    def implements_interface(self, interface: Type) -> bool:
        return interface in self.interfaces

    def __str__(self) -> str:
        return f"${self.name}"


@dataclass(frozen=True)
class ArrayType(Type):
    element_type: Type
    length: int

    def is_generic(self) -> bool:
        return self.element_type.is_generic()

    def __str__(self) -> str:
        return f"[{self.element_type}; {self.length}]"


@dataclass(frozen=True)
class SliceType(Type):
    element_type: Type

    def is_generic(self) -> bool:
        return self.element_type.is_generic()

    def __str__(self) -> str:
        return f"[{self.element_type}]"


@dataclass(frozen=True)
class FuncArg:
    typ: Type
    mutable: bool = False

    def __str__(self) -> str:
        return f"var {self.typ}" if self.mutable else str(self.typ)


@dataclass(frozen=True)
class FuncType(Type):
    args: tuple[FuncArg, ...]
    return_type: Type

    def is_generic(self) -> bool:
        return self.return_type.is_generic() or any(a.typ.is_generic() for a in self.args)

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.args)
        return f"fn({args}) -> {self.return_type}"


@dataclass(frozen=True)
class StructMember:
    name: str
    typ: Type


@dataclass(frozen=True)
class StructType(Type):
    name: str
    members: tuple[StructMember, ...] = ()
    implements: tuple[Type, ...] = ()

    def is_generic(self) -> bool:
        return any(m.typ.is_generic() for m in self.members) or any(
            i.is_generic() for i in self.implements
        )

    def implements_interface(self, interface: Type) -> bool:
        return interface in self.implements

    def display_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        if self.name:
            return self.name
        members = ", ".join(f"{m.name}: {m.typ}" for m in self.members)
        return f"{{{members}}}"


@dataclass(frozen=True)
class SumTypeCase:
    name: str
    typ: Type | None = None


@dataclass(frozen=True)
class SumType(Type):
    name: str
    cases: tuple[SumTypeCase, ...] = ()
    implements: tuple[Type, ...] = ()

    def is_generic(self) -> bool:
        return any(c.typ is not None and c.typ.is_generic() for c in self.cases) or any(
            i.is_generic() for i in self.implements
        )

    def implements_interface(self, interface: Type) -> bool:
        return interface in self.implements

    def display_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PointerType(Type):
    inner: Type

    def is_generic(self) -> bool:
        return self.inner.is_generic()

    def __str__(self) -> str:
        return f"*{self.inner}"


@dataclass(frozen=True)
class OptionalType(Type):
    inner: Type

    def is_generic(self) -> bool:
        return self.inner.is_generic()

    def __str__(self) -> str:
        return f"?{self.inner}"


@dataclass(frozen=True)
class ResultType(Type):
    ok_typ: Type
    err_typ: Type

    def is_generic(self) -> bool:
        return self.ok_typ.is_generic() or self.err_typ.is_generic()

    def __str__(self) -> str:
        return f"{self.ok_typ} ! {self.err_typ}"


@dataclass(frozen=True)
class InterfaceType(Type):
    """A named set of function signatures."""

    name: str
    functions: tuple[tuple[str, Type], ...] = ()

    def display_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class UnresolvedType(Type):
    """A type referred to by name, not yet looked up."""

    name: str
    generic_args: tuple[Type, ...] = ()

    def is_generic(self) -> bool:
        return any(a.is_generic() for a in self.generic_args)

    def display_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        if not self.generic_args:
            return self.name
        args = ", ".join(str(a) for a in self.generic_args)
        return f"{self.name}<{args}>"


def generic_type(name: str, *args: Type) -> GenericType:
    """A type parameter; extra arguments are interfaces it must implement."""
    return GenericType(name, tuple(args))


def ptr_type(inner: Type) -> PointerType:
    return PointerType(inner)


def slice_type(element_type: Type) -> SliceType:
    return SliceType(element_type)


def array_type(element_type: Type, length: int) -> ArrayType:
    return ArrayType(element_type, length)


def func_arg(typ: Type, mutable: bool = False) -> FuncArg:
    return FuncArg(typ, mutable)


def func_type(args: Iterable[FuncArg], return_type: Type) -> FuncType:
    return FuncType(tuple(args), return_type)


def struct_member(name: str, typ: Type) -> StructMember:
    return StructMember(name, typ)


def struct_type(
    name: str, members: Iterable[StructMember], implements: Iterable[Type] = ()
) -> StructType:
    return StructType(name, tuple(members), tuple(implements))


def sum_type_case(name: str, typ: Type | None = None) -> SumTypeCase:
    return SumTypeCase(name, typ)


def sum_type(name: str, cases: Iterable[SumTypeCase], implements: Iterable[Type] = ()) -> SumType:
    return SumType(name, tuple(cases), tuple(implements))


def optional_type(inner: Type) -> OptionalType:
    return OptionalType(inner)


def result_type(ok_typ: Type, err_typ: Type) -> ResultType:
    return ResultType(ok_typ, err_typ)


def unresolved_type(name: str, generic_args: Iterable[Type] = ()) -> UnresolvedType:
    return UnresolvedType(name, tuple(generic_args))
"""Type descriptors for hub introspection.

Hub methods are documented from their type annotations. Rather than letting the
schema engine poke at live ``typing`` objects, annotations are first turned into
a small, closed set of frozen descriptor values by :func:`describe`:

- ``VoidType``: ``None``
- ``PrimitiveType``: scalars such as ``str``, ``int`` and ``datetime``
- ``NullableType``: ``Optional[X]``
- ``SequenceType``: lists, sets, iterables and homogeneous tuples
- ``MappingType``: dictionaries and mappings
- ``EnumType``: ``enum.Enum`` subclasses
- ``AsyncType``: completion wrappers (``Awaitable[X]``, ``Coroutine``, futures)
- ``StreamType``: server-produced sequences (``AsyncIterator[X]``, ``asyncio.Queue[X]``)
- ``ObjectType``: any other class, with lazily resolved properties
- ``OpaqueType``: everything that cannot be classified

Object properties are resolved on demand so that self-referencing models can be
described without recursing.
"""

import asyncio
import collections.abc
import dataclasses
import datetime
import enum
import inspect
import sys
import types
import uuid
from decimal import Decimal
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    ForwardRef,
    List,
    NewType,
    Optional,
    Tuple,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

# Explicit integer/float widths for hub signatures that need them
Byte = NewType("Byte", int)
Int16 = NewType("Int16", int)
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
Single = NewType("Single", float)

# Modules whose classes are never expanded into object schemas
RESERVED_NAMESPACES = frozenset(sys.stdlib_module_names) | {
    "builtins",
    "typing",
    "typing_extensions",
    "pydantic",
    "pydantic_core",
    "fastapi",
    "starlette",
    "hubdocs",
}


def is_reserved_namespace(namespace: Optional[str]) -> bool:
    """Check whether a module belongs to the platform or a framework.

    Args:
        namespace: Dotted module name

    Returns:
        True if classes from this module should not be documented structurally
    """
    if not namespace:
        return False
    return namespace.split(".", 1)[0] in RESERVED_NAMESPACES


@dataclasses.dataclass(frozen=True)
class TypeDescriptor:
    """Base class for all type descriptors."""

    @property
    def namespace(self) -> str:
        """Module the described type comes from."""
        return "builtins"


@dataclasses.dataclass(frozen=True)
class VoidType(TypeDescriptor):
    """Absence of a value."""


@dataclasses.dataclass(frozen=True)
class PrimitiveType(TypeDescriptor):
    """A scalar with a fixed display name and JSON type."""

    name: str
    json_type: str


@dataclasses.dataclass(frozen=True)
class NullableType(TypeDescriptor):
    """``Optional`` wrapper around another descriptor."""

    inner: TypeDescriptor

    @property
    def namespace(self) -> str:
        return self.inner.namespace


@dataclasses.dataclass(frozen=True)
class SequenceType(TypeDescriptor):
    """Homogeneous sequence of items."""

    item: TypeDescriptor


@dataclasses.dataclass(frozen=True)
class MappingType(TypeDescriptor):
    """Key/value mapping."""

    key: TypeDescriptor
    value: TypeDescriptor


@dataclasses.dataclass(frozen=True)
class AsyncType(TypeDescriptor):
    """Completion wrapper whose result becomes available asynchronously."""

    result: TypeDescriptor = VoidType()

    @property
    def is_bare(self) -> bool:
        """True when the wrapper completes without a value."""
        return isinstance(self.result, VoidType)


@dataclasses.dataclass(frozen=True)
class StreamType(TypeDescriptor):
    """Unbounded, server-produced sequence delivered incrementally."""

    item: TypeDescriptor


@dataclasses.dataclass(frozen=True)
class OpaqueType(TypeDescriptor):
    """A type that carries no documentable structure."""

    name: str
    module: str = "typing"
    args: Tuple[TypeDescriptor, ...] = ()

    @property
    def namespace(self) -> str:
        return self.module


@dataclasses.dataclass(frozen=True)
class EnumType(TypeDescriptor):
    """An ``enum.Enum`` subclass."""

    cls: type

    @property
    def namespace(self) -> str:
        return self.cls.__module__

    @property
    def name(self) -> str:
        return self.cls.__name__

    def members(self) -> List[Tuple[str, int]]:
        """Return ``(name, value)`` pairs in declaration order.

        Aliases are listed under their own names. Non-integer member values are
        reported by their declaration ordinal.
        """
        members = []
        for position, (name, member) in enumerate(self.cls.__members__.items()):
            value = member.value
            if isinstance(value, int) and not isinstance(value, bool):
                members.append((name, int(value)))
            else:
                members.append((name, position))
        return members


@dataclasses.dataclass(frozen=True)
class PropertyDescriptor:
    """A public property of an object type."""

    name: str
    type: TypeDescriptor


@dataclasses.dataclass(frozen=True)
class ObjectType(TypeDescriptor):
    """A composite class whose public properties are documented."""

    cls: type
    args: Tuple[Any, ...] = ()

    @property
    def namespace(self) -> str:
        return self.cls.__module__

    @property
    def name(self) -> str:
        return self.cls.__name__

    def properties(self) -> List[PropertyDescriptor]:
        """Resolve the public properties of the class.

        Raises whatever the underlying annotation lookup raises; callers that
        need best-effort behaviour are expected to handle it.
        """
        substitutions = dict(zip(getattr(self.cls, "__parameters__", ()), self.args))
        return [
            PropertyDescriptor(name, describe(_substitute(hint, substitutions)))
            for name, hint in _public_annotations(self.cls).items()
        ]


VOID = VoidType()
ANY = OpaqueType("Object")

_PRIMITIVES: Dict[Any, PrimitiveType] = {
    str: PrimitiveType("String", "string"),
    bool: PrimitiveType("Boolean", "boolean"),
    int: PrimitiveType("Int32", "integer"),
    float: PrimitiveType("Double", "number"),
    Decimal: PrimitiveType("Decimal", "number"),
    bytes: PrimitiveType("Byte[]", "string"),
    datetime.datetime: PrimitiveType("DateTime", "string"),
    datetime.date: PrimitiveType("DateOnly", "string"),
    datetime.time: PrimitiveType("TimeOnly", "string"),
    datetime.timedelta: PrimitiveType("TimeSpan", "object"),
    uuid.UUID: PrimitiveType("Guid", "string"),
    Byte: PrimitiveType("Byte", "integer"),
    Int16: PrimitiveType("Int16", "integer"),
    Int32: PrimitiveType("Int32", "integer"),
    Int64: PrimitiveType("Int64", "integer"),
    Single: PrimitiveType("Single", "number"),
}

_ASYNC_ORIGINS = (
    collections.abc.Awaitable,
    collections.abc.Coroutine,
    asyncio.Future,
    asyncio.Task,
)
_STREAM_ORIGINS = (
    collections.abc.AsyncIterator,
    collections.abc.AsyncIterable,
    collections.abc.AsyncGenerator,
    asyncio.Queue,
)
_SEQUENCE_ORIGINS = (
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
    collections.abc.Iterator,
)
_MAPPING_ORIGINS = (
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)


def describe(tp: Any) -> TypeDescriptor:
    """Turn a type annotation into a descriptor.

    Args:
        tp: Annotation as returned by ``typing.get_type_hints`` (or a raw
            string when the annotation could not be resolved)

    Returns:
        The descriptor for the annotation
    """
    if tp is None or tp is type(None):
        return VOID
    if tp is Any or tp is inspect.Parameter.empty or tp is object:
        return ANY
    if isinstance(tp, str):
        return OpaqueType(tp, module="")
    if isinstance(tp, ForwardRef):
        return OpaqueType(tp.__forward_arg__, module="")
    if isinstance(tp, TypeVar):
        return OpaqueType(tp.__name__)

    try:
        primitive = _PRIMITIVES.get(tp)
    except TypeError:  # unhashable annotation objects
        primitive = None
    if primitive is not None:
        return primitive

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Annotated:
        return describe(args[0])
    if origin is Union or origin is types.UnionType:
        return _describe_union(args)

    supertype = getattr(tp, "__supertype__", None)
    if supertype is not None:
        return describe(supertype)

    if inspect.isclass(tp) and issubclass(tp, enum.Enum):
        return EnumType(tp)

    if origin is not None:
        return _describe_generic(origin, args)

    if tp in _ASYNC_ORIGINS:
        return AsyncType()
    if tp in _STREAM_ORIGINS:
        return StreamType(ANY)
    if tp in _SEQUENCE_ORIGINS or tp is tuple:
        return SequenceType(ANY)
    if tp in _MAPPING_ORIGINS:
        return MappingType(ANY, ANY)

    if inspect.isclass(tp):
        return ObjectType(tp)
    return OpaqueType(getattr(tp, "__name__", repr(tp)))


def _describe_union(args: Tuple[Any, ...]) -> TypeDescriptor:
    members = [arg for arg in args if arg is not type(None)]
    if len(members) == 1:
        inner = describe(members[0])
    else:
        inner = OpaqueType("Union", args=tuple(describe(arg) for arg in members))
    if len(members) < len(args):
        return NullableType(inner)
    return inner


def _describe_generic(origin: Any, args: Tuple[Any, ...]) -> TypeDescriptor:
    if origin in _ASYNC_ORIGINS:
        # Coroutine[YieldT, SendT, ReturnT] carries its result last
        return AsyncType(describe(args[-1])) if args else AsyncType()
    if origin in _STREAM_ORIGINS:
        return StreamType(describe(args[0]) if args else ANY)
    if origin in _SEQUENCE_ORIGINS:
        return SequenceType(describe(args[0]) if args else ANY)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return SequenceType(describe(args[0]))
        return OpaqueType("Tuple", module="builtins", args=tuple(describe(a) for a in args))
    if origin in _MAPPING_ORIGINS:
        key, value = (args + (Any, Any))[:2]
        return MappingType(describe(key), describe(value))
    if inspect.isclass(origin) and not is_reserved_namespace(origin.__module__):
        return ObjectType(origin, args)
    return OpaqueType(
        getattr(origin, "__name__", None) or getattr(origin, "_name", None) or repr(origin),
        module=getattr(origin, "__module__", "typing"),
        args=tuple(describe(arg) for arg in args),
    )


def _substitute(hint: Any, substitutions: Dict[Any, Any]) -> Any:
    """Replace type variables of a generic class by its concrete arguments."""
    if not substitutions:
        return hint
    if isinstance(hint, TypeVar):
        return substitutions.get(hint, hint)
    parameters = getattr(hint, "__parameters__", ())
    if parameters and all(p in substitutions for p in parameters):
        try:
            return hint[tuple(substitutions[p] for p in parameters)]
        except TypeError:
            return hint
    return hint


def _public_annotations(cls: type) -> Dict[str, Any]:
    """Collect public property annotations of a class in declaration order."""
    annotations: Dict[str, Any] = {}

    model_fields = getattr(cls, "model_fields", None)
    if isinstance(model_fields, dict):
        for name, info in model_fields.items():
            annotations[name] = info.annotation
    elif dataclasses.is_dataclass(cls):
        hints = get_type_hints(cls)
        for field in dataclasses.fields(cls):
            annotations[field.name] = hints.get(field.name, field.type)
    else:
        for name, hint in get_type_hints(cls).items():
            if hint is ClassVar or get_origin(hint) is ClassVar:
                continue
            annotations[name] = hint

    for klass in reversed(cls.__mro__):
        if is_reserved_namespace(klass.__module__):
            continue
        for name, member in vars(klass).items():
            if not isinstance(member, property) or name in annotations:
                continue
            if member.fget is None:
                continue
            returns = get_type_hints(member.fget).get("return")
            if returns is not None:
                annotations[name] = returns

    return {name: hint for name, hint in annotations.items() if not name.startswith("_")}


__all__ = [
    "Byte",
    "Int16",
    "Int32",
    "Int64",
    "Single",
    "RESERVED_NAMESPACES",
    "is_reserved_namespace",
    "TypeDescriptor",
    "VoidType",
    "PrimitiveType",
    "NullableType",
    "SequenceType",
    "MappingType",
    "AsyncType",
    "StreamType",
    "OpaqueType",
    "EnumType",
    "ObjectType",
    "PropertyDescriptor",
    "VOID",
    "ANY",
    "describe",
]

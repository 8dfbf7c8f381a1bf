"""Type classification helpers shared by the inspector and the schema engine."""

from .descriptors import (
    AsyncType,
    EnumType,
    MappingType,
    NullableType,
    ObjectType,
    OpaqueType,
    PrimitiveType,
    SequenceType,
    StreamType,
    TypeDescriptor,
    VoidType,
    describe,
)

VOID_NAME = "void"


def strip_nullable(descriptor: TypeDescriptor) -> TypeDescriptor:
    """Return the descriptor without its ``Optional`` wrapper."""
    while isinstance(descriptor, NullableType):
        descriptor = descriptor.inner
    return descriptor


def is_nullable(descriptor: TypeDescriptor) -> bool:
    """Check whether a value of this type may be absent."""
    return isinstance(descriptor, (NullableType, VoidType))


def json_type(descriptor: TypeDescriptor) -> str:
    """Map a descriptor to its bare JSON type tag.

    Args:
        descriptor: Type descriptor

    Returns:
        One of "string", "integer", "number", "boolean" or "object"
    """
    descriptor = strip_nullable(descriptor)
    if isinstance(descriptor, PrimitiveType):
        return descriptor.json_type
    if isinstance(descriptor, EnumType):
        return "string"
    return "object"


def friendly_name(descriptor: TypeDescriptor) -> str:
    """Render a short, human readable name for a type.

    Completion wrappers are transparent, sequences render as ``Item[]`` and
    streams render as their item type.
    """
    if isinstance(descriptor, VoidType):
        return VOID_NAME
    if isinstance(descriptor, PrimitiveType):
        return descriptor.name
    if isinstance(descriptor, NullableType):
        return f"{friendly_name(descriptor.inner)}?"
    if isinstance(descriptor, AsyncType):
        return friendly_name(descriptor.result)
    if isinstance(descriptor, StreamType):
        return friendly_name(descriptor.item)
    if isinstance(descriptor, SequenceType):
        return f"{friendly_name(descriptor.item)}[]"
    if isinstance(descriptor, MappingType):
        return f"Dictionary<{friendly_name(descriptor.key)}, {friendly_name(descriptor.value)}>"
    if isinstance(descriptor, ObjectType):
        if descriptor.args:
            args = ", ".join(friendly_name(describe(arg)) for arg in descriptor.args)
            return f"{descriptor.name}<{args}>"
        return descriptor.name
    if isinstance(descriptor, EnumType):
        return descriptor.name
    if isinstance(descriptor, OpaqueType) and descriptor.args:
        args = ", ".join(friendly_name(arg) for arg in descriptor.args)
        return f"{descriptor.name}<{args}>"
    return getattr(descriptor, "name", "Object")


def camel_case(name: str) -> str:
    """Project a property name onto lower-first-letter casing.

    ``Name`` becomes ``name`` and ``first_name`` becomes ``firstName``.
    """
    parts = [part for part in name.split("_") if part]
    if not parts:
        return name
    head = parts[0][0].lower() + parts[0][1:]
    return head + "".join(part[0].upper() + part[1:] for part in parts[1:])


__all__ = [
    "VOID_NAME",
    "strip_nullable",
    "is_nullable",
    "json_type",
    "friendly_name",
    "camel_case",
]

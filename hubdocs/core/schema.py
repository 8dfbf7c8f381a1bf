"""Schema inference for hub parameters and return values.

The engine walks a type descriptor graph and produces a JSON-schema-like
structure for the shapes a reader cannot guess from the type name alone.
Scalars are elided (``None``) so callers fall back to a bare JSON type tag.

Inference is best-effort: any failure while expanding a subtree is logged and
degrades that subtree to ``None`` instead of failing the whole document.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict

from .descriptors import (
    AsyncType,
    EnumType,
    MappingType,
    ObjectType,
    OpaqueType,
    PrimitiveType,
    SequenceType,
    StreamType,
    TypeDescriptor,
    VoidType,
    is_reserved_namespace,
)
from .naming import camel_case, is_nullable, json_type, strip_nullable

logger = logging.getLogger(__name__)


class SchemaNode(BaseModel, ABC):
    """Base class for inferred schema nodes."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def to_json_schema(self) -> Dict[str, Any]:
        """Render the node as a JSON-schema-like dictionary."""
        pass


class PrimitiveSchema(SchemaNode):
    """Bare JSON type reference."""

    json_type: str

    def to_json_schema(self) -> Dict[str, Any]:
        return {"type": self.json_type}


class ArraySchema(SchemaNode):
    """Homogeneous array."""

    items: SchemaNode

    def to_json_schema(self) -> Dict[str, Any]:
        return {"type": "array", "items": self.items.to_json_schema()}


class ObjectSchema(SchemaNode):
    """Composite object with named properties."""

    properties: Dict[str, SchemaNode]
    required: Tuple[str, ...] = ()

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {
                name: node.to_json_schema() for name, node in self.properties.items()
            },
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema


class EnumMember(BaseModel):
    """Enumeration member name and underlying integer value."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: int


class EnumSchema(SchemaNode):
    """Enumeration with members in declaration order."""

    names: Tuple[str, ...]
    values: Tuple[EnumMember, ...]
    send_as_string: bool = False

    def to_json_schema(self) -> Dict[str, Any]:
        listed = ", ".join(f"{member.name}({member.value})" for member in self.values)
        return {
            "type": "string",
            "enum": list(self.names),
            "enumValues": [member.model_dump() for member in self.values],
            "description": f"Enum values: {listed}",
            "sendAsString": self.send_as_string,
        }


class StreamSchema(SchemaNode):
    """Server-to-client stream of items."""

    item_schema: SchemaNode

    def to_json_schema(self) -> Dict[str, Any]:
        return {
            "type": "stream",
            "description": "Server-to-client streaming",
            "itemSchema": self.item_schema.to_json_schema(),
        }


def render_schema(node: Optional[SchemaNode]) -> Optional[Dict[str, Any]]:
    """Render an optional schema node."""
    return node.to_json_schema() if node is not None else None


@contextmanager
def _visiting(visited: Set[TypeDescriptor], descriptor: TypeDescriptor) -> Iterator[None]:
    visited.add(descriptor)
    try:
        yield
    finally:
        visited.discard(descriptor)


class SchemaInferrer:
    """Cycle-guarded schema inference over type descriptors.

    The inferrer itself is stateless; the ``visited`` set passed through the
    recursion holds the types currently being expanded on the stack.
    """

    def infer(
        self,
        descriptor: TypeDescriptor,
        enum_as_string: bool = False,
        visited: Optional[Set[TypeDescriptor]] = None,
    ) -> Optional[SchemaNode]:
        """Infer the schema of a type.

        Args:
            descriptor: Type to document
            enum_as_string: Whether enum values are sent by name
            visited: Types currently being expanded (a fresh set when omitted)

        Returns:
            The schema node, or None when the type has no interesting structure
        """
        if visited is None:
            visited = set()

        if self._should_skip(descriptor):
            return None

        underlying = strip_nullable(descriptor)
        if isinstance(underlying, (PrimitiveType, VoidType)):
            return None

        try:
            if isinstance(underlying, StreamType):
                return StreamSchema(
                    item_schema=self._infer_or_tag(underlying.item, enum_as_string, visited)
                )

            if isinstance(underlying, EnumType):
                return self._enum_schema(underlying, enum_as_string)

            if underlying in visited:
                return PrimitiveSchema(json_type=json_type(underlying))

            with _visiting(visited, underlying):
                if isinstance(underlying, SequenceType):
                    return ArraySchema(
                        items=self._infer_or_tag(underlying.item, enum_as_string, visited)
                    )
                if isinstance(underlying, AsyncType):
                    return self.infer(underlying.result, enum_as_string, visited)
                if isinstance(underlying, ObjectType):
                    return self._object_schema(underlying, enum_as_string, visited)
                return PrimitiveSchema(json_type=json_type(underlying))
        except Exception as e:
            logger.debug(
                f"Schema inference degraded for {underlying!r}: {e}",
                exc_info=True,
                extra={"type_name": repr(underlying)},
            )
            return None

    def _infer_or_tag(
        self,
        descriptor: TypeDescriptor,
        enum_as_string: bool,
        visited: Set[TypeDescriptor],
    ) -> SchemaNode:
        node = self.infer(descriptor, enum_as_string, visited)
        if node is None:
            return PrimitiveSchema(json_type=json_type(descriptor))
        return node

    @staticmethod
    def _should_skip(descriptor: TypeDescriptor) -> bool:
        underlying = strip_nullable(descriptor)
        if isinstance(underlying, OpaqueType) and not underlying.module:
            return True  # unresolved annotation
        if isinstance(underlying, (ObjectType, MappingType, OpaqueType)):
            return is_reserved_namespace(underlying.namespace)
        return False

    @staticmethod
    def _enum_schema(descriptor: EnumType, enum_as_string: bool) -> EnumSchema:
        members = descriptor.members()
        return EnumSchema(
            names=tuple(name for name, _ in members),
            values=tuple(EnumMember(name=name, value=value) for name, value in members),
            send_as_string=enum_as_string,
        )

    def _object_schema(
        self,
        descriptor: ObjectType,
        enum_as_string: bool,
        visited: Set[TypeDescriptor],
    ) -> ObjectSchema:
        properties: Dict[str, SchemaNode] = {}
        required: List[str] = []

        for prop in descriptor.properties():
            name = camel_case(prop.name)
            properties[name] = self._infer_or_tag(prop.type, enum_as_string, visited)
            if not is_nullable(prop.type):
                required.append(name)

        return ObjectSchema(properties=properties, required=tuple(required))


__all__ = [
    "SchemaNode",
    "PrimitiveSchema",
    "ArraySchema",
    "ObjectSchema",
    "EnumMember",
    "EnumSchema",
    "StreamSchema",
    "SchemaInferrer",
    "render_schema",
]

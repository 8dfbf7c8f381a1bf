"""Core hub introspection: descriptors, schema inference and inspection."""

from .annotations import (
    Authorization,
    HubMetadata,
    MethodMetadata,
    authorize,
    get_authorization,
    get_hub_documentation,
    get_method_documentation,
    hub_documentation,
    hub_method_documentation,
)
from .cache import DescriptorCache
from .descriptors import (
    ANY,
    VOID,
    AsyncType,
    Byte,
    EnumType,
    Int16,
    Int32,
    Int64,
    MappingType,
    NullableType,
    ObjectType,
    OpaqueType,
    PrimitiveType,
    PropertyDescriptor,
    SequenceType,
    Single,
    StreamType,
    TypeDescriptor,
    VoidType,
    describe,
    is_reserved_namespace,
)
from .hub import FRAMEWORK_METHODS, CancellationToken, Hub
from .inspector import HubInspector, effective_return_type, iter_hub_methods
from .models import (
    AuthScheme,
    AuthType,
    HubDocumentation,
    HubInfo,
    HubMethodInfo,
    HubParameterInfo,
)
from .naming import camel_case, friendly_name, is_nullable, json_type, strip_nullable
from .schema import (
    ArraySchema,
    EnumMember,
    EnumSchema,
    ObjectSchema,
    PrimitiveSchema,
    SchemaInferrer,
    SchemaNode,
    StreamSchema,
    render_schema,
)

__all__ = [
    # Annotations
    "Authorization",
    "HubMetadata",
    "MethodMetadata",
    "authorize",
    "get_authorization",
    "get_hub_documentation",
    "get_method_documentation",
    "hub_documentation",
    "hub_method_documentation",
    # Cache
    "DescriptorCache",
    # Descriptors
    "ANY",
    "VOID",
    "AsyncType",
    "Byte",
    "EnumType",
    "Int16",
    "Int32",
    "Int64",
    "MappingType",
    "NullableType",
    "ObjectType",
    "OpaqueType",
    "PrimitiveType",
    "PropertyDescriptor",
    "SequenceType",
    "Single",
    "StreamType",
    "TypeDescriptor",
    "VoidType",
    "describe",
    "is_reserved_namespace",
    # Hubs
    "FRAMEWORK_METHODS",
    "CancellationToken",
    "Hub",
    # Inspection
    "HubInspector",
    "effective_return_type",
    "iter_hub_methods",
    # Models
    "AuthScheme",
    "AuthType",
    "HubDocumentation",
    "HubInfo",
    "HubMethodInfo",
    "HubParameterInfo",
    # Naming
    "camel_case",
    "friendly_name",
    "is_nullable",
    "json_type",
    "strip_nullable",
    # Schema
    "ArraySchema",
    "EnumMember",
    "EnumSchema",
    "ObjectSchema",
    "PrimitiveSchema",
    "SchemaInferrer",
    "SchemaNode",
    "StreamSchema",
    "render_schema",
]

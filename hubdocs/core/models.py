"""Descriptor models for documented hubs.

All models are immutable snapshots. Serialized keys use lower-first-letter
camel casing (``returnType``, ``requiresAuth``) through pydantic's alias
generator; schema nodes render through their own ``to_json_schema``.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from .schema import SchemaNode, render_schema

DEFAULT_PROTOCOLS: Tuple[str, ...] = ("json", "messagepack")

_DESCRIPTOR_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class AuthType(str, Enum):
    """How a client presents its credentials."""

    BEARER = "Bearer"
    API_KEY = "ApiKey"
    QUERY_PARAM = "QueryParam"
    COOKIE = "Cookie"
    CUSTOM_HEADER = "CustomHeader"


class AuthScheme(BaseModel):
    """Authentication scheme offered by the test console.

    Attributes:
        name: Display name
        type: Credential transport
        header_name: Header carrying the credential (CustomHeader, ApiKey)
        query_param_name: Query parameter carrying the credential (QueryParam)
        cookie_name: Cookie carrying the credential (Cookie)
        description: Human readable description
        is_default: Whether the console preselects this scheme
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    type: AuthType = AuthType.BEARER
    header_name: Optional[str] = None
    query_param_name: Optional[str] = None
    cookie_name: Optional[str] = None
    description: str = ""
    is_default: bool = False


class HubParameterInfo(BaseModel):
    """A documented hub method parameter."""

    model_config = _DESCRIPTOR_CONFIG

    name: str
    type: str
    is_optional: bool = False
    default_value: Any = None
    description: str
    schema_: Optional[SchemaNode] = Field(default=None, alias="schema")
    send_enum_as_string: bool = False

    @field_serializer("schema_")
    def _serialize_schema(self, node: Optional[SchemaNode]) -> Optional[Dict[str, Any]]:
        return render_schema(node)

    @field_serializer("default_value")
    def _serialize_default(self, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if value is None or isinstance(value, (str, int, float, bool)):
            return value
        return str(value)


class HubMethodInfo(BaseModel):
    """A documented hub method."""

    model_config = _DESCRIPTOR_CONFIG

    name: str
    summary: str
    description: str
    tags: Tuple[str, ...] = ()
    return_type: str
    parameters: Tuple[HubParameterInfo, ...] = ()
    requires_auth: bool = False
    required_roles: Optional[Tuple[str, ...]] = None
    required_policies: Optional[Tuple[str, ...]] = None
    return_schema: Optional[SchemaNode] = None

    @field_serializer("return_schema")
    def _serialize_schema(self, node: Optional[SchemaNode]) -> Optional[Dict[str, Any]]:
        return render_schema(node)


class HubInfo(BaseModel):
    """A documented hub and its invocable methods."""

    model_config = _DESCRIPTOR_CONFIG

    name: str
    description: str
    route: str
    methods: Tuple[HubMethodInfo, ...] = ()
    requires_auth: bool = False
    supported_protocols: Tuple[str, ...] = DEFAULT_PROTOCOLS
    supported_auth_schemes: Tuple[str, ...] = ()

    def get_method(self, name: str) -> Optional[HubMethodInfo]:
        for method in self.methods:
            if method.name == name:
                return method
        return None


class HubDocumentation(BaseModel):
    """Top-level documentation payload served to the test console."""

    model_config = _DESCRIPTOR_CONFIG

    title: str = "Hub Documentation"
    version: str = "1.0.0"
    description: Optional[str] = None
    hubs: Tuple[HubInfo, ...] = ()
    supported_protocols: Tuple[str, ...] = DEFAULT_PROTOCOLS
    supported_auth_schemes: Tuple[AuthScheme, ...] = ()

    def to_json(self) -> str:
        """Serialize with camelCase keys, in declaration order, pretty-printed."""
        return self.model_dump_json(by_alias=True, indent=2)

    def get_hub(self, name: str) -> Optional[HubInfo]:
        for hub in self.hubs:
            if hub.name == name:
                return hub
        return None


__all__ = [
    "DEFAULT_PROTOCOLS",
    "AuthType",
    "AuthScheme",
    "HubParameterInfo",
    "HubMethodInfo",
    "HubInfo",
    "HubDocumentation",
]

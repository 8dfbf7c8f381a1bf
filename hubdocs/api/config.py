"""Configuration model for the hub documentation surface.

Settings can be passed explicitly or read from ``HUBDOCS_*`` environment
variables through :meth:`DocumentationConfig.from_env`.
"""

import os
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from hubdocs.core.models import AuthScheme

DEFAULT_CLIENT_CDN_URL = (
    "https://cdnjs.cloudflare.com/ajax/libs/microsoft-signalr/{version}/signalr.min.js"
)
DEFAULT_MESSAGE_PACK_CLIENT_CDN_URL = (
    "https://cdn.jsdelivr.net/npm/@microsoft/signalr-protocol-msgpack@{version}"
    "/dist/browser/signalr-protocol-msgpack.min.js"
)


class DocumentationConfig(BaseModel):
    """Configuration for the documentation routes and test console.

    Attributes:
        route_prefix: Path the documentation is served under
        title: Documentation title
        version: Documentation version
        description: Documentation description
        send_enum_by_string: Whether clients send enum values by name
        supported_auth_schemes: Authentication schemes offered by the console
        client_version: Version of the browser client library
        message_pack_client_version: Version of the MessagePack protocol library
        client_cdn_url: Client script URL template (``{version}`` placeholder)
        message_pack_client_cdn_url: MessagePack script URL template
        log_level: Level for the ``hubdocs`` logger
    """

    route_prefix: str = "/hub-docs"
    title: str = "Hub Documentation"
    version: str = "1.0.0"
    description: str = "Auto-generated hub documentation"
    send_enum_by_string: bool = False
    supported_auth_schemes: List[AuthScheme] = Field(default_factory=list)

    # Console client scripts
    client_version: str = "8.0.0"
    message_pack_client_version: str = "8.0.0"
    client_cdn_url: str = DEFAULT_CLIENT_CDN_URL
    message_pack_client_cdn_url: str = DEFAULT_MESSAGE_PACK_CLIENT_CDN_URL

    log_level: str = "info"

    @field_validator("route_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith("/"):
            value = "/" + value
        return value

    @property
    def client_url(self) -> str:
        return self.client_cdn_url.replace("{version}", self.client_version)

    @property
    def message_pack_client_url(self) -> str:
        return self.message_pack_client_cdn_url.replace(
            "{version}", self.message_pack_client_version
        )

    @classmethod
    def from_env(cls, **overrides) -> "DocumentationConfig":
        """Build a configuration from ``HUBDOCS_*`` environment variables.

        Explicit keyword overrides take precedence over the environment.
        """
        values = {}
        for field_name in (
            "route_prefix",
            "title",
            "version",
            "description",
            "client_version",
            "message_pack_client_version",
            "client_cdn_url",
            "message_pack_client_cdn_url",
            "log_level",
        ):
            env_value: Optional[str] = os.getenv(f"HUBDOCS_{field_name.upper()}")
            if env_value is not None:
                values[field_name] = env_value

        send_enum = os.getenv("HUBDOCS_SEND_ENUM_BY_STRING")
        if send_enum is not None:
            values["send_enum_by_string"] = send_enum.lower() in ("1", "true", "yes")

        values.update(overrides)
        return cls(**values)


__all__ = ["DocumentationConfig"]

"""
hubdocs - Auto-generated documentation for real-time hub endpoints.

hubdocs inspects hub classes (groups of remotely invocable methods), infers a
JSON-schema-like description of their parameters and return values, and serves
the result together with an interactive test console from a FastAPI app.

Main Exports (Import from top level):
    Hubs:
        - Hub: Base class for hub endpoints
        - CancellationToken: Framework-supplied cancellation parameter

    Annotations:
        - hub_documentation: Name and describe a hub
        - hub_method_documentation: Summarize and tag a hub method
        - authorize: Require an authenticated caller

    Discovery:
        - hub: Register a hub on the default registry
        - HubRegistry: Explicit hub registry

    Inspection:
        - HubInspector: Build hub descriptors
        - SchemaInferrer: Infer schemas from type descriptors

    API:
        - setup_hub_documentation: Mount documentation routes on an app
        - DocumentationConfig: Documentation configuration

Example:
    >>> from fastapi import FastAPI
    >>> from hubdocs import Hub, hub, setup_hub_documentation
    >>>
    >>> @hub("/chat")
    ... class ChatHub(Hub):
    ...     async def send_message(self, user: str, message: str) -> None:
    ...         ...
    >>>
    >>> app = FastAPI()
    >>> setup_hub_documentation(app)
"""

__version__ = "0.1.0"

# Modules
from . import exceptions

# API
from .api import (
    DocumentationConfig,
    HubRegistry,
    create_docs_router,
    get_default_registry,
    hub,
    setup_hub_documentation,
)

# Core
from .core import (
    AuthScheme,
    AuthType,
    CancellationToken,
    Hub,
    HubDocumentation,
    HubInfo,
    HubInspector,
    HubMethodInfo,
    HubParameterInfo,
    SchemaInferrer,
    authorize,
    describe,
    hub_documentation,
    hub_method_documentation,
)

__all__ = [
    # Version
    "__version__",
    # Hubs
    "Hub",
    "CancellationToken",
    # Annotations
    "hub_documentation",
    "hub_method_documentation",
    "authorize",
    # Discovery
    "hub",
    "HubRegistry",
    "get_default_registry",
    # Inspection
    "HubInspector",
    "SchemaInferrer",
    "describe",
    # Models
    "AuthScheme",
    "AuthType",
    "HubDocumentation",
    "HubInfo",
    "HubMethodInfo",
    "HubParameterInfo",
    # API
    "DocumentationConfig",
    "create_docs_router",
    "setup_hub_documentation",
    # Modules
    "exceptions",
]

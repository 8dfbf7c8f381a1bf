"""API module for hubdocs.

This module provides:
- Documentation routes and the test console
- Hub discovery
- Configuration
- Error handling and logging setup
"""

from .config import DocumentationConfig
from .router import (
    DocumentationService,
    create_docs_router,
    setup_hub_documentation,
)
from .services.discovery import HubEndpoint, HubRegistry, get_default_registry, hub

__all__ = [
    "DocumentationConfig",
    "DocumentationService",
    "create_docs_router",
    "setup_hub_documentation",
    "HubEndpoint",
    "HubRegistry",
    "get_default_registry",
    "hub",
]

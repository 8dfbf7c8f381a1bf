"""FastAPI routes serving hub documentation and the test console.

Routes, relative to the configured prefix:

- ``GET /api.json`` and ``GET /swagger.json``: the documentation document
- ``GET /hubs/{name}``: a single documented hub
- ``GET /`` and any other path: the HTML test console
"""

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.responses import HTMLResponse, Response

from hubdocs.core.cache import DescriptorCache
from hubdocs.core.inspector import HubInspector
from hubdocs.core.models import HubDocumentation
from hubdocs.exceptions import HubDocsError, HubNotFoundError

from .components.error_handler import APIErrorHandler
from .components.logging_config import LoggingConfigurator
from .components.template_service import TemplateService
from .config import DocumentationConfig
from .services.discovery import HubRegistry, get_default_registry

_logger = logging.getLogger(__name__)

TESTING_TEMPLATE = "testing"
_DOCUMENT_KEY = "documentation"
_JSON_KEY = "json"


class DocumentationService:
    """Builds the documentation document once and serves it from memory."""

    def __init__(
        self,
        config: DocumentationConfig,
        registry: HubRegistry,
        inspector: HubInspector,
    ):
        self.config = config
        self.registry = registry
        self.inspector = inspector
        self._documents: DescriptorCache[str, HubDocumentation] = DescriptorCache("document")
        self._rendered: DescriptorCache[str, str] = DescriptorCache("rendered document")

    def get_documentation(self) -> HubDocumentation:
        return self._documents.get_or_add(_DOCUMENT_KEY, lambda _: self._build())

    def get_documentation_json(self) -> str:
        """Return the documentation as camelCase, pretty-printed JSON."""
        return self._rendered.get_or_add(_JSON_KEY, lambda _: self.get_documentation().to_json())

    def get_hub_json(self, name: str) -> str:
        """Return a single documented hub as JSON.

        Raises:
            HubNotFoundError: If no documented hub has this name
        """
        hub = self.get_documentation().get_hub(name)
        if hub is None:
            raise HubNotFoundError(name)
        return hub.model_dump_json(by_alias=True, indent=2)

    def invalidate(self) -> None:
        """Drop the cached document so the next request rebuilds it."""
        self._documents.clear()
        self._rendered.clear()
        self.inspector.clear_cache()

    def _build(self) -> HubDocumentation:
        documentation = self.inspector.generate_documentation(
            self.registry, self.config.send_enum_by_string
        )
        _logger.info(f"Generated documentation for {len(documentation.hubs)} hub(s)")
        return documentation.model_copy(
            update={
                "title": self.config.title,
                "version": self.config.version,
                "description": self.config.description,
                "supported_auth_schemes": tuple(self.config.supported_auth_schemes),
            }
        )


def render_testing_page(
    config: DocumentationConfig, templates: TemplateService
) -> str:
    template = templates.load_template(TESTING_TEMPLATE)
    return templates.process_template(
        template,
        {
            "Title": f"{config.title} - Testing Interface",
            "Description": config.description,
            "ApiJsonUrl": f"{config.route_prefix}/api.json",
            "ClientUrl": config.client_url,
            "MessagePackClientUrl": config.message_pack_client_url,
        },
    )


def create_docs_router(
    config: DocumentationConfig,
    registry: Optional[HubRegistry] = None,
    inspector: Optional[HubInspector] = None,
    templates: Optional[TemplateService] = None,
    service: Optional[DocumentationService] = None,
) -> APIRouter:
    """Create the router serving documentation under ``config.route_prefix``.

    Args:
        config: Documentation configuration
        registry: Hubs to document (the default registry when omitted)
        inspector: Hub inspector (built from the configured auth schemes when omitted)
        templates: Template service for the test console
        service: Prebuilt documentation service; overrides registry and inspector

    Returns:
        Router with the documentation routes
    """
    service = service or DocumentationService(
        config,
        registry if registry is not None else get_default_registry(),
        inspector or HubInspector(config.supported_auth_schemes),
    )
    templates = templates or TemplateService()
    prefix = config.route_prefix

    router = APIRouter(prefix=prefix, tags=["Hub Documentation"])

    async def documentation_json() -> Response:
        return Response(
            content=service.get_documentation_json(), media_type="application/json"
        )

    router.add_api_route("/api.json", documentation_json, methods=["GET"], include_in_schema=False)
    router.add_api_route("/swagger.json", documentation_json, methods=["GET"], include_in_schema=False)

    @router.get("/hubs/{name}", include_in_schema=False)
    async def hub_json(name: str) -> Response:
        return Response(content=service.get_hub_json(name), media_type="application/json")

    @router.get("", include_in_schema=False)
    @router.get("/{path:path}", include_in_schema=False)
    async def testing_page(path: str = "") -> HTMLResponse:
        return HTMLResponse(render_testing_page(config, templates))

    return router


def setup_hub_documentation(
    app: FastAPI,
    config: Optional[DocumentationConfig] = None,
    registry: Optional[HubRegistry] = None,
) -> DocumentationService:
    """Mount the documentation routes on an application.

    Args:
        app: FastAPI application
        config: Documentation configuration (defaults when omitted)
        registry: Hubs to document (the default registry when omitted)

    Returns:
        The service backing the mounted routes
    """
    config = config or DocumentationConfig()
    LoggingConfigurator.configure(config.log_level)

    service = DocumentationService(
        config,
        registry if registry is not None else get_default_registry(),
        HubInspector(config.supported_auth_schemes),
    )
    app.include_router(create_docs_router(config, service=service))
    app.add_exception_handler(HubDocsError, APIErrorHandler.handle_exception)

    _logger.debug(f"Hub documentation mounted at {config.route_prefix}")
    return service


__all__ = [
    "DocumentationService",
    "create_docs_router",
    "render_testing_page",
    "setup_hub_documentation",
]

"""Components used by the documentation routes."""

from .error_handler import APIErrorHandler
from .logging_config import LoggingConfigurator, SchemaDegradationFilter
from .template_service import TemplateService

__all__ = [
    "APIErrorHandler",
    "LoggingConfigurator",
    "SchemaDegradationFilter",
    "TemplateService",
]

"""HTML templates shipped as package data."""

import logging
from importlib import resources
from typing import Mapping

from hubdocs.core.cache import DescriptorCache
from hubdocs.exceptions import TemplateNotFoundError

_logger = logging.getLogger(__name__)

TEMPLATE_PACKAGE = "hubdocs.templates"


class TemplateService:
    """Loads packaged templates and fills their ``{{Key}}`` placeholders."""

    def __init__(self, package: str = TEMPLATE_PACKAGE):
        self.package = package
        self._cache: DescriptorCache[str, str] = DescriptorCache("template")

    def load_template(self, name: str) -> str:
        """Return the contents of ``<name>.html``.

        Raises:
            TemplateNotFoundError: If the template is not packaged
        """
        return self._cache.get_or_add(name, self._read)

    def _read(self, name: str) -> str:
        resource = f"{name}.html"
        path = resources.files(self.package).joinpath(resource)
        if not path.is_file():
            raise TemplateNotFoundError(name, f"{self.package}/{resource}")
        _logger.debug(f"Loaded template {resource}")
        return path.read_text(encoding="utf-8")

    @staticmethod
    def process_template(template: str, replacements: Mapping[str, str]) -> str:
        """Replace ``{{Key}}`` placeholders; unknown placeholders are left as is."""
        for key, value in replacements.items():
            template = template.replace("{{" + key + "}}", value)
        return template


__all__ = ["TemplateService"]

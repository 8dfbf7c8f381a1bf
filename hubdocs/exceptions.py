"""Exception hierarchy for hubdocs.

Schema inference never raises to its callers; the exceptions below are used
by the registration, template and HTTP layers where a failure is meaningful
to the caller.
"""

from typing import Any, Dict, Optional


class HubDocsError(Exception):
    """Base exception for hubdocs errors surfaced over HTTP.

    Attributes:
        message: Human readable message
        error_code: Stable machine readable code
        status_code: HTTP status code used when rendered as a response
        details: Optional structured details
    """

    error_code: str = "hubdocs_error"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Render the error as a JSON-compatible dictionary."""
        data: Dict[str, Any] = {
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            data["details"] = self.details
        return data


class HubRegistrationError(HubDocsError):
    """Raised when a hub cannot be registered for discovery."""

    error_code = "hub_registration_error"
    status_code = 400


class HubNotFoundError(HubDocsError):
    """Raised when a documented hub is requested by an unknown name."""

    error_code = "hub_not_found"
    status_code = 404

    def __init__(self, name: str):
        super().__init__(f"Hub '{name}' is not documented", details={"name": name})


class TemplateNotFoundError(HubDocsError):
    """Raised when a packaged HTML template does not exist."""

    error_code = "template_not_found"
    status_code = 500

    def __init__(self, template_name: str, resource: str):
        self.template_name = template_name
        super().__init__(
            f"Template '{resource}' not found",
            details={"template": template_name},
        )


__all__ = [
    "HubDocsError",
    "HubRegistrationError",
    "HubNotFoundError",
    "TemplateNotFoundError",
]

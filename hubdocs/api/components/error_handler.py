"""Error handling for the documentation routes."""

import logging
from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse

from hubdocs.exceptions import HubDocsError


class APIErrorHandler:
    """Converts hubdocs errors into JSON responses with request context."""

    @staticmethod
    async def handle_exception(request: Request, exc: Exception) -> JSONResponse:
        """Render an exception raised by a documentation route.

        Args:
            request: FastAPI request object
            exc: Exception that occurred

        Returns:
            JSONResponse with error details
        """
        logger = logging.getLogger(__name__)

        if isinstance(exc, HubDocsError):
            if exc.status_code >= 500:
                logger.error(
                    f"API Error [{exc.error_code}]: {exc.message}",
                    exc_info=exc,
                    extra={
                        "error_code": exc.error_code,
                        "status_code": exc.status_code,
                        "path": request.url.path,
                        "method": request.method,
                        "details": exc.details,
                    },
                )
            else:
                # Client errors stay out of the error log
                logger.debug(
                    f"API Error [{exc.error_code}]: {exc.message}",
                    extra={
                        "error_code": exc.error_code,
                        "status_code": exc.status_code,
                        "path": request.url.path,
                        "method": request.method,
                    },
                )

            response_data = exc.to_dict()
            response_data["timestamp"] = datetime.now(timezone.utc).isoformat()
            response_data["path"] = request.url.path
            return JSONResponse(status_code=exc.status_code, content=response_data)

        logger.error(
            f"Unhandled error on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=500,
            content={
                "error_code": "internal_error",
                "message": "An unexpected error occurred",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "path": request.url.path,
            },
        )


__all__ = ["APIErrorHandler"]

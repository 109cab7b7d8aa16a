"""
Exception handlers for file url resolution errors in FastAPI applications.

Maps neo-files exceptions to JSON error responses with the status code
from the exception mapping.
"""
import logging
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...core.exceptions import NeoFilesError, create_error_response, get_http_status_code
from ..core.exceptions import CannotGetUrl

logger = logging.getLogger(__name__)


class ExceptionHandlerRegistry:
    """Registry for file url exception handlers."""

    def __init__(
        self,
        response_formatter: Optional[Callable[[NeoFilesError], Dict[str, Any]]] = None,
        is_production: bool = True
    ):
        """
        Initialize exception handler registry.

        Args:
            response_formatter: Function building the response body from an exception
            is_production: Hide wrapped error details when True
        """
        self.response_formatter = response_formatter or create_error_response
        self.is_production = is_production

    def build_response(self, exc: NeoFilesError) -> JSONResponse:
        """Build the JSON response for a neo-files exception."""
        content = self.response_formatter(exc)
        if self.is_production and isinstance(exc, CannotGetUrl) and "error" in content:
            content["error"]["details"] = {
                key: value for key, value in content["error"]["details"].items()
                if key != "cause"
            }
        return JSONResponse(status_code=get_http_status_code(exc), content=content)

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.

        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(NeoFilesError)
        async def neo_files_exception_handler(request: Request, exc: NeoFilesError):
            """Handle neo-files exceptions."""
            status_code = get_http_status_code(exc)
            if status_code >= 500:
                logger.error(f"File url error on {request.url.path}: {exc.message}", exc_info=exc)
            else:
                logger.info(f"File url unavailable on {request.url.path}: {exc.message}")
            return self.build_response(exc)


def register_exception_handlers(
    app: FastAPI,
    response_formatter: Optional[Callable[[NeoFilesError], Dict[str, Any]]] = None,
    is_production: bool = True
) -> None:
    """
    Register neo-files exception handlers for a FastAPI application.

    Args:
        app: FastAPI application instance
        response_formatter: Custom response formatter function
        is_production: Whether running in production mode
    """
    registry = ExceptionHandlerRegistry(response_formatter, is_production)
    registry.register_handlers(app)

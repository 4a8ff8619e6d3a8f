"""
Global exception handlers and custom exception classes.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from typing import Any, Dict, Optional
import logging

# Set up logging
logger = logging.getLogger(__name__)

class AppException(Exception):
    """
    Base exception class for application-specific exceptions.
    
    Every subclass is a recoverable, user-facing error: the handler below
    turns it into a JSON body carrying the detail, a stable error code and
    any extra fields the subclass provides.
    """
    error_code = "app_error"

    def __init__(self, status_code: int, detail: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
        self.extra = extra or {}


class InvalidInputException(AppException):
    """Exception raised when a submitted value fails validation."""
    error_code = "invalid_input"

    def __init__(self, field: str, detail: str):
        super().__init__(status.HTTP_422_UNPROCESSABLE_ENTITY, detail, {"field": field})
        self.field = field


class NotFoundException(AppException):
    """Exception raised when a requested resource does not exist."""
    error_code = "not_found"

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status.HTTP_404_NOT_FOUND, detail)


class InvalidTransitionException(AppException):
    """Exception raised when a report cannot move to the requested status."""
    error_code = "invalid_transition"

    def __init__(self, detail: str = "Report status does not allow this operation"):
        super().__init__(status.HTTP_409_CONFLICT, detail)


async def app_exception_handler(request: Request, exc: AppException):
    """
    Handler for application-specific exceptions.
    
    Args:
        request: The request that caused the exception
        exc: The exception instance
        
    Returns:
        JSONResponse: Standardized error response
    """
    logger.warning(f"Application error on {request.url.path}: {exc.detail}")
    content = {"detail": exc.detail, "error": exc.error_code}
    content.update(exc.extra)
    return JSONResponse(
        status_code=exc.status_code,
        content=content
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation exceptions.
    
    Args:
        request: The request that caused the exception
        exc: The validation exception instance
        
    Returns:
        JSONResponse: Standardized error response with validation details
    """
    logger.warning(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation error",
            "error": "invalid_input",
            "errors": jsonable_encoder(exc.errors())
        }
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Last-resort handler: logs the failure and answers with a generic message.
    """
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Something went wrong. Please try again.", "error": "internal_error"}
    )


# Register exception handlers with FastAPI app
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI application.
    
    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

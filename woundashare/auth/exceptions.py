"""
Authentication-specific exceptions.
"""
from fastapi import status
from typing import Optional
from ..exceptions import AppException

class AuthException(AppException):
    """Base class for authentication exceptions."""
    error_code = "auth_error"

    def __init__(self, status_code: int, detail: str, redirect: Optional[str] = None):
        extra = {"redirect": redirect} if redirect else None
        super().__init__(status_code=status_code, detail=detail, extra=extra)
        self.redirect = redirect

class InvalidCredentialsException(AuthException):
    """Exception raised when credentials are invalid."""
    error_code = "invalid_credentials"

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)

class NotAuthenticatedException(AuthException):
    """Exception raised when a guarded endpoint is called without a principal."""
    error_code = "not_authenticated"

    def __init__(self, detail: str = "Authentication required", redirect: str = "/login"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, redirect=redirect)

class UnauthorizedException(AuthException):
    """Exception raised when the principal may not reach a page or resource."""
    error_code = "unauthorized"

    def __init__(self, detail: str = "Permission denied", redirect: Optional[str] = "/dashboard"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail, redirect=redirect)

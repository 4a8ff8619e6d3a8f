"""
FastAPI dependencies for authentication and authorization.
"""
from typing import Iterator, Optional
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
import logging

from ..core.permissions import DEFAULT_LANDING_ROUTE, Permission, has_permission
from .exceptions import NotAuthenticatedException, UnauthorizedException
from .models import Principal
from .service import principal_from_token
from .session import SessionHolder

logger = logging.getLogger(__name__)

# Bearer tokens are optional; the session cookie is the fallback
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)

def get_session_holder(request: Request) -> Iterator[SessionHolder]:
    """
    Session holder dependency bound to the request's session cookie.
    
    The holder is initialized from the cookie before the endpoint runs and
    closed afterwards.
    
    Yields:
        SessionHolder: Initialized session holder
    """
    holder = SessionHolder(request.session)
    holder.initialize()
    try:
        yield holder
    finally:
        holder.close()

def get_optional_principal(
    token: Optional[str] = Depends(oauth2_scheme),
    holder: SessionHolder = Depends(get_session_holder)
) -> Optional[Principal]:
    """
    Resolve the current principal without requiring one.
    
    A bearer token takes precedence over the session cookie; an invalid
    token means no principal.
    """
    if token:
        return principal_from_token(token)
    return holder.principal

def get_current_principal(
    principal: Optional[Principal] = Depends(get_optional_principal)
) -> Principal:
    """
    Require an authenticated principal.
    
    Raises:
        NotAuthenticatedException: If nobody is logged in
    """
    if principal is None:
        raise NotAuthenticatedException()
    return principal

def require_permission(permission: Permission):
    """
    Dependency factory to require a specific permission.
    
    Args:
        permission: Permission the principal's role must hold
        
    Returns:
        Function that checks the current principal
    """
    def permission_checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not has_permission(principal, permission):
            logger.warning(f"Principal {principal.id} denied {permission.value}")
            raise UnauthorizedException(
                f"Access denied. Required permission: {permission.value}",
                redirect=DEFAULT_LANDING_ROUTE,
            )
        return principal
    return permission_checker

def require_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    """
    Require an admin principal.
    
    Raises:
        UnauthorizedException: If the principal is not an admin
    """
    if not principal.is_admin:
        logger.warning(f"Principal {principal.id} denied admin access")
        raise UnauthorizedException("Admin access required", redirect=DEFAULT_LANDING_ROUTE)
    return principal

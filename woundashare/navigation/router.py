"""
Navigation Router - tells the client whether a front-end route may be shown.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ..auth.dependencies import get_optional_principal
from ..auth.models import Principal
from ..core.permissions import RouteAccess, classify_route, resolve_redirect

router = APIRouter(prefix="/api/v1/navigation", tags=["Navigation"])

class NavigationDecision(BaseModel):
    """
    Navigation Decision Schema
    
    Fields:
    - path: The requested front-end path
    - access: public, authenticated or admin
    - allowed: Whether the page may be rendered
    - redirect: Where to go instead when not allowed
    """
    path: str
    access: RouteAccess
    allowed: bool
    redirect: Optional[str] = None

@router.get("", response_model=NavigationDecision)
async def resolve_navigation(
    path: str = Query(..., description="Front-end path, e.g. /admin/reports/1"),
    principal: Optional[Principal] = Depends(get_optional_principal)
):
    """
    Resolve the redirect for a front-end route and the current principal.
    """
    redirect = resolve_redirect(principal, path)
    return NavigationDecision(
        path=path,
        access=classify_route(path),
        allowed=redirect is None,
        redirect=redirect,
    )

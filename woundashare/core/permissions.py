"""
Core permissions utilities - the access policy.

Everything here is a pure function of (principal, resource): no I/O, no
exceptions. Callers turn a False answer into a redirect or an error.
"""
from enum import Enum
from typing import Dict, List, Set, Optional, Tuple, TYPE_CHECKING
from ..auth.models import UserRole, Principal

if TYPE_CHECKING:
    from ..reports.models import Report

class Permission(str, Enum):
    """
    Permission types for role-based access control.
    """
    # Patient permissions
    VIEW_OWN_REPORTS = "view_own_reports"
    CREATE_REPORT = "create_report"
    UPLOAD_IMAGE = "upload_image"
    
    # Admin permissions
    VIEW_ALL_REPORTS = "view_all_reports"
    CREATE_PRESCRIPTION = "create_prescription"
    VIEW_USERS = "view_users"


# Role-based permission mapping
ROLE_PERMISSIONS: Dict[UserRole, List[Permission]] = {
    UserRole.ADMIN: [
        # Admin has all permissions
        Permission.VIEW_OWN_REPORTS,
        Permission.CREATE_REPORT,
        Permission.UPLOAD_IMAGE,
        Permission.VIEW_ALL_REPORTS,
        Permission.CREATE_PRESCRIPTION,
        Permission.VIEW_USERS,
    ],
    UserRole.PATIENT: [
        Permission.VIEW_OWN_REPORTS,
        Permission.CREATE_REPORT,
        Permission.UPLOAD_IMAGE,
    ],
}


def get_permissions_for_role(role: UserRole) -> Set[Permission]:
    """
    Get permissions for a specific role.
    
    Args:
        role: User role
        
    Returns:
        Set[Permission]: Set of permissions for the role
    """
    return set(ROLE_PERMISSIONS.get(role, []))


def has_permission(principal: Optional[Principal], permission: Permission) -> bool:
    """
    Check if a principal holds a specific permission.
    
    Args:
        principal: Current principal, None when logged out
        permission: Permission to check
        
    Returns:
        bool: True if the principal's role has the permission
    """
    if principal is None:
        return False
    return permission in get_permissions_for_role(principal.role)


def can_view_report(principal: Optional[Principal], report: "Report") -> bool:
    """Admins see every report; patients see only their own."""
    if principal is None:
        return False
    return principal.is_admin or principal.id == report.user_id


def can_create_prescription(principal: Optional[Principal]) -> bool:
    return principal is not None and principal.is_admin


# ---------------------------------------------------------------------------
# Route classification
# ---------------------------------------------------------------------------

class RouteAccess(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


LOGIN_ROUTE = "/login"
DEFAULT_LANDING_ROUTE = "/dashboard"
# Routes only shown to logged-out visitors
GUEST_ONLY_ROUTES = ("/login", "/register")

# Front-end route patterns; ":name" matches one path segment
ROUTES: List[Tuple[str, RouteAccess]] = [
    ("/login", RouteAccess.PUBLIC),
    ("/register", RouteAccess.PUBLIC),
    ("/", RouteAccess.AUTHENTICATED),
    ("/dashboard", RouteAccess.AUTHENTICATED),
    ("/upload-report", RouteAccess.AUTHENTICATED),
    ("/my-reports", RouteAccess.AUTHENTICATED),
    ("/reports/:id", RouteAccess.AUTHENTICATED),
    ("/admin", RouteAccess.ADMIN),
    ("/admin/reports/:id", RouteAccess.ADMIN),
    ("/admin/users", RouteAccess.ADMIN),
]


def _segments(path: str) -> List[str]:
    path = path.split("?", 1)[0].split("#", 1)[0]
    return [part for part in path.strip().split("/") if part]


def _matches(pattern: str, path: str) -> bool:
    pattern_parts = _segments(pattern)
    path_parts = _segments(path)
    if len(pattern_parts) != len(path_parts):
        return False
    return all(
        expected.startswith(":") or expected == actual
        for expected, actual in zip(pattern_parts, path_parts)
    )


def classify_route(route: str) -> RouteAccess:
    """Return the access class of a front-end route; unknown routes are public."""
    for pattern, access in ROUTES:
        if _matches(pattern, route):
            return access
    return RouteAccess.PUBLIC


def requires_auth(route: str) -> bool:
    return classify_route(route) in (RouteAccess.AUTHENTICATED, RouteAccess.ADMIN)


def requires_admin(route: str) -> bool:
    return classify_route(route) == RouteAccess.ADMIN


def resolve_redirect(principal: Optional[Principal], route: str) -> Optional[str]:
    """
    Decide where navigation to a route should be redirected.
    
    Args:
        principal: Current principal, None when logged out
        route: Requested front-end path
        
    Returns:
        The redirect target, or None when the route may be shown
    """
    if requires_auth(route) and principal is None:
        return LOGIN_ROUTE
    if requires_admin(route) and not principal.is_admin:
        return DEFAULT_LANDING_ROUTE
    if principal is not None and not _segments(route):
        return DEFAULT_LANDING_ROUTE
    if principal is not None and any(_matches(p, route) for p in GUEST_ONLY_ROUTES):
        return DEFAULT_LANDING_ROUTE
    return None

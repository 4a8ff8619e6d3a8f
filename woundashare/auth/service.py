"""
Authentication service - demo credential check, principal construction,
access tokens and the directory of known principals.
"""
from typing import Dict, List, Optional, Any
import logging
import threading
import uuid

from ..core.security import hash_password, verify_password, create_access_token, verify_token
from .exceptions import InvalidCredentialsException
from .models import Principal, UserRole, DEMO_ACCOUNTS

# Set up logging
logger = logging.getLogger(__name__)

# email -> (principal, password hash)
_DEMO_CREDENTIALS: Dict[str, Any] = {
    email: (principal, hash_password(password))
    for email, (principal, password) in DEMO_ACCOUNTS.items()
}


def authenticate(email: str, password: str) -> Principal:
    """
    Check credentials against the fixed demo account set.
    
    Args:
        email: Login email
        password: Plain text password
        
    Returns:
        Principal: The matching demo principal
        
    Raises:
        InvalidCredentialsException: For any other email/password combination
    """
    entry = _DEMO_CREDENTIALS.get(email)
    if entry is None or not verify_password(password, entry[1]):
        logger.warning(f"Login failed: Invalid credentials for {email}")
        raise InvalidCredentialsException("Invalid email or password")
    return entry[0]


def build_principal(email: str, name: str) -> Principal:
    """
    Construct a new non-admin principal with a fresh id.
    
    No uniqueness check against existing emails is performed.
    """
    return Principal(
        id=f"user-{uuid.uuid4().hex}",
        email=email,
        name=name,
        is_admin=False,
    )


def issue_access_token(principal: Principal) -> str:
    """Create a bearer token carrying the principal's identity claims."""
    return create_access_token({
        "sub": principal.id,
        "email": principal.email,
        "name": principal.name,
        "is_admin": principal.is_admin,
    })


def principal_from_token(token: str) -> Optional[Principal]:
    """
    Decode a bearer token back into a principal.
    
    Returns:
        Principal, or None if the token is invalid, expired or incomplete
    """
    payload = verify_token(token)
    if not payload:
        return None
    try:
        return Principal(
            id=payload["sub"],
            email=payload["email"],
            name=payload["name"],
            is_admin=bool(payload.get("is_admin", False)),
        )
    except KeyError as e:
        logger.warning(f"Access token missing claim {str(e)}")
        return None


class PrincipalDirectory:
    """
    In-memory directory of every principal the service has seen.
    
    Seeded with the demo accounts; registrations are appended. Listing
    order is insertion order.
    """

    def __init__(self, seed: bool = True):
        self._principals: Dict[str, Principal] = {}
        self._lock = threading.Lock()
        if seed:
            for principal, _ in DEMO_ACCOUNTS.values():
                self.add(principal)

    def add(self, principal: Principal) -> Principal:
        with self._lock:
            self._principals[principal.id] = principal
        return principal

    def get(self, principal_id: str) -> Optional[Principal]:
        with self._lock:
            return self._principals.get(principal_id)

    def list(self, search: Optional[str] = None, role: Optional[UserRole] = None) -> List[Principal]:
        """List principals, optionally filtered by role and a case-insensitive name/email substring."""
        with self._lock:
            principals = list(self._principals.values())
        if role is not None:
            principals = [p for p in principals if p.role == role]
        if search and search.strip():
            needle = search.strip().lower()
            principals = [
                p for p in principals
                if needle in p.name.lower() or needle in p.email.lower()
            ]
        return principals

    def __len__(self) -> int:
        with self._lock:
            return len(self._principals)

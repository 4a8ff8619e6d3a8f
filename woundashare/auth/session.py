"""
Session holder - the single owner of "who is logged in" for one client.

The holder reads and writes one JSON-serialized principal under a single
well-known key of the client's durable storage. In the HTTP service that
storage is the signed session cookie; anything that behaves like a mutable
mapping of strings works (tests use a plain dict).
"""
from typing import Any, MutableMapping, Optional
import logging

from ..config import settings
from ..core.latency import simulate_latency
from .models import Principal
from .service import authenticate, build_principal

logger = logging.getLogger(__name__)


class SessionNotInitialized(RuntimeError):
    """Raised when identity is read before the holder restored it."""


class SessionHolder:
    """
    Owns the current principal for one client session.
    
    Lifecycle: construct, call initialize() to restore a persisted
    principal, use login/register/logout, then close(). While `loading` is
    true the identity is unknown, which is not the same as logged out.
    """

    def __init__(self, storage: MutableMapping[str, Any], storage_key: Optional[str] = None):
        self._storage = storage
        self._storage_key = storage_key or settings.session_storage_key
        self._principal: Optional[Principal] = None
        self.loading = True
        self.closed = False

    def initialize(self) -> Optional[Principal]:
        """
        Restore a previously persisted principal, if any.
        
        A record that cannot be parsed is discarded and the session starts
        logged out.
        
        Returns:
            The restored principal, or None
        """
        raw = self._storage.get(self._storage_key)
        if raw is not None:
            try:
                self._principal = Principal.model_validate_json(raw)
            except (ValueError, TypeError) as e:
                logger.warning(f"Discarding unreadable session record: {str(e)}")
                self._storage.pop(self._storage_key, None)
                self._principal = None
        self.loading = False
        return self._principal

    @property
    def principal(self) -> Optional[Principal]:
        if self.loading:
            raise SessionNotInitialized("Session identity has not been restored yet")
        return self._principal

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None

    @property
    def is_admin(self) -> bool:
        principal = self.principal
        return bool(principal and principal.is_admin)

    async def login(self, email: str, password: str) -> Principal:
        """
        Log in with one of the demo accounts.
        
        Raises:
            InvalidCredentialsException: On any other combination; the
                current principal is left as it was
        """
        self._ensure_open()
        await simulate_latency("login")
        principal = authenticate(email, password)
        self._set(principal)
        logger.info(f"Principal {principal.id} logged in (admin={principal.is_admin})")
        return principal

    async def register(self, email: str, password: str, name: str) -> Principal:
        """
        Create a new non-admin principal and make it current.
        
        The password is accepted but not stored; only the demo accounts can
        log in again after a logout.
        """
        self._ensure_open()
        await simulate_latency("register")
        principal = build_principal(email, name)
        self._set(principal)
        logger.info(f"Registered principal {principal.id} for {email}")
        return principal

    def logout(self) -> None:
        """Clear the current principal and remove it from storage."""
        self._ensure_open()
        previous = self._principal
        self._principal = None
        self.loading = False
        self._storage.pop(self._storage_key, None)
        if previous is not None:
            logger.info(f"Principal {previous.id} logged out")

    def close(self) -> None:
        """Tear the holder down; storage is left untouched."""
        self._principal = None
        self.loading = True
        self.closed = True

    def _set(self, principal: Principal) -> None:
        self._principal = principal
        self.loading = False
        self._storage[self._storage_key] = principal.model_dump_json()

    def _ensure_open(self) -> None:
        if self.closed:
            raise RuntimeError("Session holder has been closed")

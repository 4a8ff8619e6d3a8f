"""
Authentication routes - login, registration, logout and the current principal.
"""
from fastapi import APIRouter, Depends, status
import logging

from ..database import get_principal_directory
from .dependencies import get_current_principal, get_session_holder
from .models import Principal
from .schemas import LoginResponse, MessageResponse, UserLogin, UserRegistration
from .service import PrincipalDirectory, issue_access_token
from .session import SessionHolder

# Set up logging
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])

@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    holder: SessionHolder = Depends(get_session_holder)
):
    """
    Log in with a demo account.
    
    On success the principal is stored in the session cookie and a bearer
    token is returned for non-browser clients.
    
    Raises:
        InvalidCredentialsException: For unknown email/password combinations
    """
    principal = await holder.login(credentials.email, credentials.password)
    return LoginResponse(access_token=issue_access_token(principal), user=principal)

@router.post("/register", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
async def register(
    registration: UserRegistration,
    holder: SessionHolder = Depends(get_session_holder),
    directory: PrincipalDirectory = Depends(get_principal_directory)
):
    """
    Register a new patient account and log it in.
    
    No uniqueness check against existing emails is performed.
    """
    principal = await holder.register(registration.email, registration.password, registration.name)
    directory.add(principal)
    return LoginResponse(access_token=issue_access_token(principal), user=principal)

@router.post("/logout", response_model=MessageResponse)
async def logout(holder: SessionHolder = Depends(get_session_holder)):
    """
    Clear the cookie session. Always succeeds.

    Bearer tokens are stateless and are not revoked here; a token issued
    by /login stays valid until it expires.
    """
    holder.logout()
    return MessageResponse(message="You have been successfully logged out")

@router.get("/me", response_model=Principal)
async def read_current_principal(principal: Principal = Depends(get_current_principal)):
    """
    Return the currently authenticated principal.
    """
    return principal

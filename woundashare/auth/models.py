"""
Principal model and the fixed demo accounts.
"""
from enum import Enum
from pydantic import BaseModel


class UserRole(str, Enum):
    """Roles derived from the principal's admin flag."""
    PATIENT = "patient"
    ADMIN = "admin"


class Principal(BaseModel):
    """
    An authenticated actor, either a patient or an admin.
    
    Fields:
    - id: Opaque unique identifier
    - email: Login key
    - name: Display name
    - is_admin: Whether the principal may review reports and issue prescriptions
    """
    id: str
    email: str
    name: str
    is_admin: bool = False

    class Config:
        frozen = True

    @property
    def role(self) -> UserRole:
        return UserRole.ADMIN if self.is_admin else UserRole.PATIENT


DEMO_ADMIN_USER = Principal(
    id="admin-1",
    email="admin@woundashare.com",
    name="Admin User",
    is_admin=True,
)

DEMO_NORMAL_USER = Principal(
    id="user-1",
    email="user@example.com",
    name="Demo Patient",
    is_admin=False,
)

# email -> (principal, plain password); hashed once in auth.service
DEMO_ACCOUNTS = {
    DEMO_ADMIN_USER.email: (DEMO_ADMIN_USER, "admin123"),
    DEMO_NORMAL_USER.email: (DEMO_NORMAL_USER, "user123"),
}

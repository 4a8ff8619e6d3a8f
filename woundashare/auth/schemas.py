"""
Authentication schemas for request validation and response serialization.
"""
from pydantic import BaseModel, EmailStr, Field
from .models import Principal

class UserLogin(BaseModel):
    """
    User Login Schema - Used for authentication
    
    Fields:
    - email: User's email address
    - password: User's plain text password
    """
    email: str
    password: str

class UserRegistration(BaseModel):
    """
    User Registration Schema - Used when a patient signs up
    
    Fields:
    - email: User's email address
    - password: User's chosen password
    - name: Display name
    """
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=2)

class LoginResponse(BaseModel):
    """
    Login Response Schema - Returned after login or registration
    
    Fields:
    - access_token: JWT access token
    - token_type: Type of token (always "bearer")
    - user: The authenticated principal
    """
    access_token: str
    token_type: str = "bearer"
    user: Principal

class MessageResponse(BaseModel):
    message: str

"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.
    
    Attributes:
        secret_key: Secret key for JWT tokens and the session cookie signature
        algorithm: Algorithm used for JWT encoding (typically HS256)
        access_token_expire_minutes: Access token expiration time in minutes
        
        # Session settings
        session_cookie_name: Name of the signed session cookie
        session_max_age_seconds: Lifetime of the session cookie
        session_storage_key: Key under which the logged-in principal is stored
        
        # Mock data service settings
        latency_scale: Multiplier applied to every simulated delay (0 disables them)
        seed_demo_data: Whether the report store starts with the demo reports
        allow_prescription_overwrite: Whether a completed report may be re-prescribed
        
        # Upload settings
        placeholder_image_url: URL returned by the image upload stub
        max_upload_bytes: Largest accepted image upload
        accepted_image_types: Accepted image content types
        
        # Frontend settings
        frontend_url: URL of the frontend application
        log_level: Root logging level
    """
    # JWT settings
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    
    # Session settings
    session_cookie_name: str = "woundashare_session"
    session_max_age_seconds: int = 14 * 24 * 60 * 60
    session_storage_key: str = "woundashare_user"
    
    # Mock data service settings
    latency_scale: float = 1.0
    seed_demo_data: bool = True
    allow_prescription_overwrite: bool = True
    
    # Upload settings
    placeholder_image_url: str = "/placeholder.svg"
    max_upload_bytes: int = 5 * 1024 * 1024
    accepted_image_types: List[str] = ["image/jpeg", "image/jpg", "image/png", "image/webp"]
    
    # Frontend settings
    frontend_url: str = "http://localhost:5173"
    log_level: str = "INFO"

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False

# Create settings instance
settings = Settings()

"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from . import __version__
from .config import settings
from .auth.router import router as auth_router
from .reports.router import router as reports_router
from .admin.router import router as admin_router
from .navigation.router import router as navigation_router
from .exceptions import register_exception_handlers
from .core.middleware import setup_middlewares
from .database import report_repository, principal_directory

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

logger.info(
    f"🚀 Starting WoundaShare API with {len(report_repository)} reports "
    f"and {len(principal_directory)} known principals"
)

# Create FastAPI application
app = FastAPI(
    title="WoundaShare API",
    description="API for submitting wound reports and issuing prescriptions",
    version=__version__
)

# Register exception handlers
register_exception_handlers(app)

# Configure CORS middleware
origins = [
    settings.frontend_url,
    "http://localhost:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware
setup_middlewares(app)

# Include routers
app.include_router(auth_router)
app.include_router(reports_router)
app.include_router(admin_router)
app.include_router(navigation_router)

# Root endpoint
@app.get("/")
def root():
    """
    Root endpoint for API health check.
    
    Returns:
        dict: Simple welcome message
    """
    return {"message": "Welcome to WoundaShare API", "version": __version__}

# Health check endpoint
@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring.
    
    Returns:
        dict: Health status information
    """
    return {"status": "healthy", "reports": len(report_repository)}

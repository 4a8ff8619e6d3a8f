"""
Authentication module for the wound report service.

This module provides:
- Demo-account login and patient registration
- The session holder that persists the logged-in principal
- Bearer access tokens for non-browser clients
- FastAPI dependencies that guard authenticated and admin endpoints
"""

"""
API v0 package.

Contains versioned API routes for the team catalog.
"""

from src.api.v0.routes import router

__all__ = ["router"]

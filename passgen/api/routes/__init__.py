"""
API routes module.
Contains FastAPI route definitions.
"""

# Export all routers for easy import in main.py
from .healthcheck import router as healthcheck_router
from .password import router as password_router

__all__ = ["healthcheck_router", "password_router"]

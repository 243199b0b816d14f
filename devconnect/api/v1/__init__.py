"""
API v1 Package
===============

Version 1 API controllers.
"""
from .profile_controller import router as profile_router

__all__ = ["profile_router"]

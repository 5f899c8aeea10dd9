"""API router package for endpoint composition."""

from .info import api_create_info_router

__all__ = ["api_create_info_router"]

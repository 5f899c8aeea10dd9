"""API layer package for the FastAPI application and info route composition."""

from .application import create_api_application

__all__ = ["create_api_application"]

"""FastAPI application factory for the environment info service."""

from fastapi import FastAPI

from app.config import AppSettings
from app.environment import EnvironmentInfoProvider

from .routers import api_create_info_router


def create_api_application(
    settings: AppSettings,
    info_provider: EnvironmentInfoProvider,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        info_provider: Environment info provider used by the root endpoint.

    Returns:
        FastAPI: Framework application instance with the info router mounted.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title=settings.service_title)
    application.include_router(api_create_info_router(info_provider=info_provider))
    return application

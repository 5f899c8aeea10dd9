"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from app.api import create_api_application
from app.config import AppSettings, config_load_settings
from app.environment import EnvironmentInfoProvider, LoguruInfoLogSink, ProcessEnvironmentLookup


def bootstrap_create_info_provider() -> EnvironmentInfoProvider:
    """Build the info provider over the live process environment.

    Returns:
        EnvironmentInfoProvider: Provider wired to process lookup and loguru sink.
    """

    return EnvironmentInfoProvider(
        lookup=ProcessEnvironmentLookup(),
        log_sink=LoguruInfoLogSink(),
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        info_provider=bootstrap_create_info_provider(),
    )

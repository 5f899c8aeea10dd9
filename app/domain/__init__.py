"""Domain models used across application layer boundaries."""

from .models import INFO_ENVIRONMENT_VARIABLE_NAME, INFO_HOST_VARIABLE_NAME, InfoResponse

__all__ = ["INFO_ENVIRONMENT_VARIABLE_NAME", "INFO_HOST_VARIABLE_NAME", "InfoResponse"]

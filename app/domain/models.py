"""Typed domain models shared across runtime layers.

This module provides the response contract for the environment info surface
and the logical variable names it reports.
"""

from dataclasses import dataclass
from typing import Final

INFO_ENVIRONMENT_VARIABLE_NAME: Final[str] = "ASPNETCORE_ENVIRONMENT"
INFO_HOST_VARIABLE_NAME: Final[str] = "APPHOST"


@dataclass(frozen=True)
class InfoResponse:
    """Environment info contract returned by the root endpoint.

    Attributes:
        app_environment: Application environment name, or None when unset.
        app_host: Application host identifier, or None when unset.
    """

    app_environment: str | None
    app_host: str | None

    def to_payload(self) -> dict[str, str | None]:
        """Render the wire payload with its public field names.

        Returns:
            dict[str, str | None]: JSON-ready mapping with `AppEnvironment` and `AppHost` keys.
        """

        return {
            "AppEnvironment": self.app_environment,
            "AppHost": self.app_host,
        }

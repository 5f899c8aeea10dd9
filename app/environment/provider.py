"""Environment info provider resolving logical names to current variable values."""

from __future__ import annotations

from app.domain import INFO_ENVIRONMENT_VARIABLE_NAME, INFO_HOST_VARIABLE_NAME, InfoResponse

from .interfaces import EnvironmentLookupPort, InfoLogSinkPort


class EnvironmentInfoProvider:
    """Resolve reported settings from ambient environment state.

    The provider holds no state of its own. Every call re-reads the lookup
    collaborator, so results follow environment changes between calls.
    """

    def __init__(self, lookup: EnvironmentLookupPort, log_sink: InfoLogSinkPort):
        """Initialize provider dependencies.

        Args:
            lookup: Exact-key environment lookup capability.
            log_sink: Informational record sink for lookup logging.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when dependencies are invalid.
        """

        if lookup is None:
            raise ValueError("lookup must not be None")
        if log_sink is None:
            raise ValueError("log_sink must not be None")
        self._lookup = lookup
        self._log_sink = log_sink

    def resolve(self, name: str) -> str | None:
        """Resolve one logical name, preferring its lowercase variant.

        The lowercase key wins whenever it is set, even to an empty string.
        The uppercase key is read only when the lowercase key is absent.

        Args:
            name: Logical variable name, for example `APPHOST`.

        Returns:
            str | None: Current value, or None when neither case variant is set.

        Raises:
            ValueError: Raised when name is blank.
        """

        if not name or not name.strip():
            raise ValueError("name must not be blank")

        self._log_sink.record(f"Getting environment variable '{name}'.")
        lowercase_value = self._lookup.lookup(name.lower())
        if lowercase_value is not None:
            return lowercase_value
        return self._lookup.lookup(name.upper())

    def get_info(self) -> InfoResponse:
        """Build the environment info response from current environment state.

        Returns:
            InfoResponse: Freshly resolved environment name and host identifier.
        """

        return InfoResponse(
            app_environment=self.resolve(INFO_ENVIRONMENT_VARIABLE_NAME),
            app_host=self.resolve(INFO_HOST_VARIABLE_NAME),
        )

"""Typed interfaces for environment lookup and lookup logging capabilities."""

from typing import Protocol


class EnvironmentLookupPort(Protocol):
    """Port definition for reading one environment variable by exact key."""

    def lookup(self, key: str) -> str | None:
        """Return the current value for one exact environment key.

        Args:
            key: Exact environment variable name, already cased by the caller.

        Returns:
            str | None: Variable value, or None when the key is not set.
        """


class InfoLogSinkPort(Protocol):
    """Port definition for informational lookup records."""

    def record(self, message: str) -> None:
        """Emit one informational record.

        Args:
            message: Fully rendered log message.

        Returns:
            None: Records are emitted as a side effect.
        """

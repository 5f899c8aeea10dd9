"""Environment lookup adapters over live process state and fixed snapshots."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .interfaces import EnvironmentLookupPort


class ProcessEnvironmentLookup(EnvironmentLookupPort):
    """Lookup adapter that reads the live process environment on every call."""

    def lookup(self, key: str) -> str | None:
        """Read one key from `os.environ` at call time.

        Args:
            key: Exact environment variable name.

        Returns:
            str | None: Current value, or None when the key is not set.
        """

        return os.environ.get(key)


class MappingEnvironmentLookup(EnvironmentLookupPort):
    """Lookup adapter backed by a fixed snapshot of key/value pairs."""

    def __init__(self, values: Mapping[str, str]):
        """Initialize lookup snapshot.

        Args:
            values: Key/value pairs copied at construction time.

        Raises:
            ValueError: Raised when values is None.
        """

        if values is None:
            raise ValueError("values must not be None")
        self._values = dict(values)

    def lookup(self, key: str) -> str | None:
        return self._values.get(key)

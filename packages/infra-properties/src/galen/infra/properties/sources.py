"""Override property sources.

Adapters implementing the ``PropertySource`` port. The default override
chain consults in-process properties first, then the process environment.
"""

from __future__ import annotations

import os
import re
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from galen.foundation.domain.ports import PropertySource

_ENV_NAME_PATTERN = re.compile(r"[^A-Za-z0-9]+")


def environment_name(key: str) -> str:
    """Translate a dotted property key into an environment variable name.

    Example:
        >>> environment_name("galen.config.file")
        'GALEN_CONFIG_FILE'
    """
    return _ENV_NAME_PATTERN.sub("_", key).upper()


class MappingPropertySource:
    """Read-only property source backed by any mapping."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = mapping

    def get(self, key: str) -> str | None:
        return self._mapping.get(key)


class ProcessProperties:
    """Thread-safe, mutable property table scoped to the current process.

    Plays the role of command-line ``-Dkey=value`` style properties: set
    once by a runner, read by every configuration store in the process.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def unset(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def snapshot(self) -> dict[str, str]:
        """Copy of all properties currently set."""
        with self._lock:
            return dict(self._values)


class EnvironmentPropertySource:
    """Property source reading environment variables.

    A key is looked up verbatim first (``galen.config.file``), then under
    its environment form (``GALEN_CONFIG_FILE``).

    Args:
        environ: Mapping to read from. Defaults to the live ``os.environ``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> str | None:
        value = self._environ.get(key)
        if value is not None:
            return value
        return self._environ.get(environment_name(key))


class ChainedPropertySource:
    """Consults sources in order; the first one defining a key wins."""

    def __init__(self, *sources: PropertySource) -> None:
        self._sources = sources

    def get(self, key: str) -> str | None:
        for source in self._sources:
            value = source.get(key)
            if value is not None:
                return value
        return None


SYSTEM_PROPERTIES = ProcessProperties()
"""Process-wide in-memory properties, highest priority in the default chain."""

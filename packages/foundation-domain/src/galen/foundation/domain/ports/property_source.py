"""Port interface for key-value property sources.

A property source answers single-key lookups. The configuration store
consults an override source of this shape before its own file-based
properties, which makes the ambient process state injectable in tests.

Example:
    >>> from galen.foundation.domain.ports import PropertySource
    >>> class Fixed:
    ...     def get(self, key: str) -> str | None:
    ...         return {"galen.default.browser": "chrome"}.get(key)
    >>> isinstance(Fixed(), PropertySource)
    True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PropertySource(Protocol):
    """Read-only, flat key-value lookup."""

    def get(self, key: str) -> str | None:
        """Return the value stored for key, or None when the key is unset.

        An empty string is a value and must be returned as such.
        """
        ...

"""Two-layer property resolution.

Implements the resolution chain: override source -> base properties ->
caller default. Both functions are pure with respect to their inputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from galen.foundation.domain.exceptions import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from galen.foundation.domain.ports import PropertySource


def resolve_property(
    key: str,
    base: Mapping[str, str],
    override: PropertySource,
    default: str | None = None,
) -> str | None:
    """Resolve a single property.

    Args:
        key: Flat property key.
        base: Base properties loaded from the config file.
        override: Higher-priority source consulted first.
        default: Returned when neither source defines the key.

    Returns:
        The resolved string, or None when the key is unset everywhere and
        no default is given. An empty string is returned as-is.
    """
    value = override.get(key)
    if value is not None:
        return value
    value = base.get(key)
    if value is not None:
        return value
    return default


def resolve_mandatory_property(
    key: str,
    base: Mapping[str, str],
    override: PropertySource,
) -> str:
    """Resolve a property that must be set to a non-blank value.

    Raises:
        MissingConfigurationError: If the key is unset or blank.
    """
    value = resolve_property(key, base, override)
    if value is None or not value.strip():
        raise MissingConfigurationError(key)
    return value

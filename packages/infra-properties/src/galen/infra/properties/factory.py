"""Configuration store factory.

Wires the default override chain and the file loader into a
:class:`~galen.foundation.application.config_store.ConfigStore`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from galen.foundation.application.config_store import ConfigStore, PropertiesFileLoader
from galen.infra.properties.file_source import FilePropertiesLoader
from galen.infra.properties.sources import (
    SYSTEM_PROPERTIES,
    ChainedPropertySource,
    EnvironmentPropertySource,
)

if TYPE_CHECKING:
    from galen.foundation.domain.ports import PropertySource


def default_override_source() -> PropertySource:
    """In-process properties first, then environment variables."""
    return ChainedPropertySource(SYSTEM_PROPERTIES, EnvironmentPropertySource())


def create_config(
    override_source: PropertySource | None = None,
    *,
    loader: PropertiesFileLoader | None = None,
    load: bool = True,
) -> ConfigStore:
    """Create a configuration store.

    Args:
        override_source: Source consulted before the config file. Defaults
            to :func:`default_override_source`.
        loader: Config file loader. Defaults to a UTF-8 FilePropertiesLoader.
        load: Load the config file immediately instead of on first access.

    Returns:
        The configuration store. A failed initial load is reported through
        ``store.last_load_outcome`` and never raised.
    """
    store = ConfigStore(
        override_source=(
            default_override_source() if override_source is None else override_source
        ),
        loader=FilePropertiesLoader() if loader is None else loader,
    )
    if load:
        store.load()
    return store

"""Galen Foundation Application -- configuration resolution services."""

from galen.foundation.application.config_store import (
    ConfigSnapshot,
    ConfigStore,
    LoadOutcome,
    PropertiesFileLoader,
)
from galen.foundation.application.context import (
    NoConfigContextError,
    clear_current_config,
    config_scope,
    get_current_config,
    set_current_config,
)
from galen.foundation.application.property_overlay import (
    resolve_mandatory_property,
    resolve_property,
)
from galen.foundation.application.visibility import require_visible

__all__ = [
    "ConfigSnapshot",
    "ConfigStore",
    "LoadOutcome",
    "NoConfigContextError",
    "PropertiesFileLoader",
    "clear_current_config",
    "config_scope",
    "get_current_config",
    "require_visible",
    "resolve_mandatory_property",
    "resolve_property",
    "set_current_config",
]

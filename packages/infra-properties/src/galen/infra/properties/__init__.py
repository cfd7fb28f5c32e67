"""Galen Infra Properties -- config file loading and override sources."""

from galen.infra.properties.factory import create_config, default_override_source
from galen.infra.properties.file_source import (
    FilePropertiesLoader,
    PropertiesSyntaxError,
    load_properties_file,
    parse_properties,
)
from galen.infra.properties.sources import (
    SYSTEM_PROPERTIES,
    ChainedPropertySource,
    EnvironmentPropertySource,
    MappingPropertySource,
    ProcessProperties,
    environment_name,
)

__all__ = [
    "SYSTEM_PROPERTIES",
    "ChainedPropertySource",
    "EnvironmentPropertySource",
    "FilePropertiesLoader",
    "MappingPropertySource",
    "ProcessProperties",
    "PropertiesSyntaxError",
    "create_config",
    "default_override_source",
    "environment_name",
    "load_properties_file",
    "parse_properties",
]

"""Galen Foundation Domain -- pure Python configuration primitives.

This package provides the building blocks of the configuration core:
exceptions, recognized keys, value parsers, the error rate value object,
and port interfaces.
"""

from galen.foundation.domain.config_keys import GalenConfigKey
from galen.foundation.domain.error_rate import ErrorRate, ErrorRateType
from galen.foundation.domain.exceptions import (
    ConfigurationError,
    ElementNotVisibleError,
    GalenError,
    InvalidConfigurationError,
    MissingConfigurationError,
    OutOfRangeConfigurationError,
)
from galen.foundation.domain.parsers import (
    is_numeric,
    parse_boolean,
    parse_comma_separated_list,
    parse_error_rate,
    parse_int,
)
from galen.foundation.domain.ports import PageElement, PropertySource

__all__ = [
    "ConfigurationError",
    "ElementNotVisibleError",
    "ErrorRate",
    "ErrorRateType",
    "GalenConfigKey",
    "GalenError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "OutOfRangeConfigurationError",
    "PageElement",
    "PropertySource",
    "is_numeric",
    "parse_boolean",
    "parse_comma_separated_list",
    "parse_error_rate",
    "parse_int",
]

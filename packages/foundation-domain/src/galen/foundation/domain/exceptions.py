"""Exception hierarchy for configuration and validation errors.

Every error carries a machine-readable error code and structured context
so callers and log processors can handle failures uniformly.

Example:
    >>> from galen.foundation.domain.exceptions import MissingConfigurationError
    >>> raise MissingConfigurationError("galen.browser.url")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigurationError",
    "ElementNotVisibleError",
    "GalenError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "OutOfRangeConfigurationError",
]


class GalenError(Exception):
    """Base class for all Galen errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (keys, raw values, bounds).

    Example:
        >>> raise GalenError("Operation failed", context={"key": "galen.log.level"})
        GalenError: Operation failed (key=galen.log.level)
    """

    error_code: str = "GALEN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ConfigurationError(GalenError):
    """Base class for errors raised while reading configuration.

    Attributes:
        error_code: "CONFIGURATION_ERROR" (class constant).
        key: The property key being read.
    """

    error_code: str = "CONFIGURATION_ERROR"

    def __init__(self, key: str, message: str, **extra_context: Any) -> None:
        self.key = key
        context = {"key": key, **extra_context}
        super().__init__(message, context)


class MissingConfigurationError(ConfigurationError):
    """Raised when a mandatory property is absent or blank in every source.

    Attributes:
        error_code: "MISSING_CONFIGURATION" (class constant).

    Example:
        >>> raise MissingConfigurationError("galen.browser.url")
        MissingConfigurationError: Missing property: galen.browser.url (key=galen.browser.url)
    """

    error_code: str = "MISSING_CONFIGURATION"

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Missing property: {key}")


class InvalidConfigurationError(ConfigurationError):
    """Raised when a present value cannot be coerced to the requested type.

    Attributes:
        error_code: "INVALID_CONFIGURATION" (class constant).
        raw_value: The unparsed value as it was resolved.
        reason: Optional parser message describing the failure.

    Example:
        >>> raise InvalidConfigurationError("galen.spec.image.tolerance", "abc")
        InvalidConfigurationError: Couldn't parse property "galen.spec.image.tolerance" ...
    """

    error_code: str = "INVALID_CONFIGURATION"

    def __init__(
        self,
        key: str,
        raw_value: str,
        reason: str | None = None,
        **extra_context: Any,
    ) -> None:
        self.raw_value = raw_value
        self.reason = reason
        message = f'Couldn\'t parse property "{key}" from config'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(key, message, raw_value=raw_value, **extra_context)


class OutOfRangeConfigurationError(InvalidConfigurationError):
    """Raised when a coerced integer falls outside its inclusive bounds.

    A ``None`` bound means the value is unbounded on that side.

    Attributes:
        error_code: "CONFIGURATION_OUT_OF_RANGE" (class constant).
        value: The parsed integer.
        min_value: Inclusive lower bound.
        max_value: Inclusive upper bound.
    """

    error_code: str = "CONFIGURATION_OUT_OF_RANGE"

    def __init__(
        self,
        key: str,
        value: int,
        min_value: int | None,
        max_value: int | None,
    ) -> None:
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        lower = "-inf" if min_value is None else str(min_value)
        upper = "+inf" if max_value is None else str(max_value)
        super().__init__(
            key,
            str(value),
            reason=f"{value} is not in allowed range [{lower}, {upper}]",
            value=value,
            min_value=min_value,
            max_value=max_value,
        )


class ElementNotVisibleError(GalenError):
    """Raised when a page element that must be visible reports itself hidden.

    Attributes:
        error_code: "ELEMENT_NOT_VISIBLE" (class constant).
        element_name: Name of the element in the page spec.
    """

    error_code: str = "ELEMENT_NOT_VISIBLE"

    def __init__(self, element_name: str) -> None:
        self.element_name = element_name
        super().__init__(
            f'"{element_name}" is not visible on page',
            {"element_name": element_name},
        )

"""Structured logging configuration using structlog.

Galen library modules log through the standard library
(``logging.getLogger(__name__)``) with snake_case event names and
structured ``extra`` fields. This module routes those records, and any
structlog loggers, through one structlog processor chain:

- console output with colors for interactive runs
- JSON output for CI pipelines and log collectors
- ``extra`` fields promoted to top-level keys

Usage:
    # Once, at runner startup
    from galen.infra.observability.logging import configure_logging
    configure_logging()

    # In application code
    from galen.infra.observability import get_logger
    logger = get_logger(__name__)
    logger.info("test_suite_started", suite="homepage")
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Type alias for structlog processor
Processor = structlog.types.Processor

ROOT_LOGGER_NAME = "galen"

_VALID_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_VALID_FORMATS = frozenset({"console", "json"})


class LoggingSettings(BaseSettings):
    """Logging configuration settings from environment variables.

    Loads configuration from environment variables:
    - LOG_LEVEL: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_FORMAT: Output format (console, json)
    - LOG_COLORS: Colorize console output (true, false)

    These control the Python logging of the framework itself, not the
    ``galen.log.level`` report verbosity read from the config file.

    Example:
        >>> settings = LoggingSettings(log_format="json")
        >>> settings.use_json_logs
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Minimum log level to output",
    )
    log_format: str = Field(
        default="console",
        alias="LOG_FORMAT",
        description="Renderer used for log lines",
    )
    colors: bool = Field(
        default=True,
        alias="LOG_COLORS",
        description="Colorize console output",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        if isinstance(v, str):
            return v.upper()
        return str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level.

        Raises:
            ValueError: If log level is not a valid Python logging level.
        """
        if v not in _VALID_LEVELS:
            msg = f"log_level must be one of {sorted(_VALID_LEVELS)}"
            raise ValueError(msg)
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        return str(v).strip().lower()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in _VALID_FORMATS:
            msg = f"log_format must be one of {sorted(_VALID_FORMATS)}"
            raise ValueError(msg)
        return v

    @property
    def use_json_logs(self) -> bool:
        return self.log_format == "json"

    @property
    def log_level_int(self) -> int:
        """Convert log level string to logging module constant."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def build_formatter(settings: LoggingSettings) -> structlog.stdlib.ProcessorFormatter:
    """Build the stdlib formatter rendering records through structlog.

    Args:
        settings: Logging settings selecting the renderer.

    Returns:
        ProcessorFormatter usable on any ``logging.Handler``.
    """
    processors: list[Processor] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if settings.use_json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=settings.colors))
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=processors,
    )


def configure_logging(
    settings: LoggingSettings | None = None,
    stream: Any = None,
) -> logging.Handler:
    """Configure structlog and the ``galen`` logger hierarchy.

    Replaces any handler previously installed by this function, so it is
    safe to call again (e.g. after changing settings in tests).

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
        stream: Stream for the handler. Defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    if settings is None:
        settings = get_logging_settings()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(build_formatter(settings))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers = [handler]
    root.setLevel(settings.log_level_int)
    root.propagate = False
    return handler


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger for the given module name.

    Args:
        name: Logger name (typically __name__ from calling module).

    Example:
        >>> from galen.infra.observability import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("page_checked", page="home", errors=0)
    """
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(name)

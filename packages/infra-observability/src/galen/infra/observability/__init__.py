"""Galen Infra Observability -- structlog logging configuration."""

from __future__ import annotations

from galen.infra.observability.logging import (
    LoggingSettings,
    build_formatter,
    configure_logging,
    get_logger,
    get_logging_settings,
)

__all__ = [
    "LoggingSettings",
    "build_formatter",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
]

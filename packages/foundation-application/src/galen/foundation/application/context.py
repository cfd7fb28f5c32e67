"""Configuration context management.

Provides a ContextVar holding the configuration store for the current run,
so consumers deep in the call stack can reach it without explicit
parameter passing and without a module-level singleton. The runner
installs the store once at startup; tests install their own.

Usage:
    from galen.foundation.application.context import config_scope, get_current_config

    with config_scope(store):
        browser = get_current_config().default_browser
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from contextvars import Token

    from galen.foundation.application.config_store import ConfigStore


# ContextVar for the active configuration - None when nothing is installed
config_context: ContextVar[ConfigStore | None] = ContextVar("config_context", default=None)


class NoConfigContextError(RuntimeError):
    """Raised when configuration is accessed before a store is installed."""

    def __init__(self) -> None:
        super().__init__(
            "No configuration available. "
            "Install a ConfigStore with set_current_config() or config_scope()."
        )


def get_current_config() -> ConfigStore:
    """Get the configuration store for the current context.

    Raises:
        NoConfigContextError: If no store has been installed.
    """
    config = config_context.get()
    if config is None:
        raise NoConfigContextError()
    return config


def set_current_config(config: ConfigStore) -> Token[ConfigStore | None]:
    """Install a configuration store for the current context.

    Returns:
        Token for restoring the previous store via clear_current_config().
    """
    return config_context.set(config)


def clear_current_config(token: Token[ConfigStore | None]) -> None:
    """Restore the store that was active before set_current_config()."""
    config_context.reset(token)


@contextmanager
def config_scope(config: ConfigStore) -> Iterator[ConfigStore]:
    """Install config for the duration of a with-block."""
    token = set_current_config(config)
    try:
        yield config
    finally:
        clear_current_config(token)

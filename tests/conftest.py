"""Shared fixtures for integration tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from galen.infra.properties import SYSTEM_PROPERTIES

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

# Prefixes of environment variables that would leak host configuration.
GALEN_ENV_PREFIXES = ("GALEN_", "galen.")


@pytest.fixture(autouse=True)
def _isolated_process(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run each test in an empty working directory with no Galen overrides."""
    for name in list(os.environ):
        if name.startswith(GALEN_ENV_PREFIXES):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    SYSTEM_PROPERTIES.clear()
    yield
    SYSTEM_PROPERTIES.clear()


@pytest.fixture()
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a config file into the working directory and return its path."""

    def _write(text: str, name: str = "config") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write

"""Shared fixtures for foundation-application tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from galen.foundation.application.config_store import ConfigStore

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


class MockedPageElement:
    """Page element with a fixed area that always reports itself visible."""

    def __init__(self, left: int, top: int, width: int, height: int) -> None:
        self.left = left
        self.top = top
        self.width = width
        self.height = height

    def is_visible(self) -> bool:
        return True


class MockedInvisiblePageElement(MockedPageElement):
    """Page element that always reports itself invisible."""

    def is_visible(self) -> bool:
        return False


class DictOverrideSource:
    """Mutable in-memory override source."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)


class FakeLoader:
    """Loader returning preset properties, or raising a preset error."""

    def __init__(self, properties: dict[str, str] | None = None) -> None:
        self.properties: dict[str, str] = dict(properties or {})
        self.error: Exception | None = None
        self.loaded_paths: list[Path] = []

    def load(self, path: Path) -> dict[str, str]:
        self.loaded_paths.append(path)
        if self.error is not None:
            raise self.error
        return dict(self.properties)


@pytest.fixture()
def visible_element() -> MockedPageElement:
    return MockedPageElement(10, 20, 100, 50)


@pytest.fixture()
def invisible_element() -> MockedInvisiblePageElement:
    return MockedInvisiblePageElement(10, 20, 100, 50)


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    """An existing (empty) config file; the FakeLoader supplies its contents."""
    path = tmp_path / "config"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture()
def overrides(config_file: Path) -> DictOverrideSource:
    """Override source pointing the store at config_file."""
    return DictOverrideSource({"galen.config.file": str(config_file)})


@pytest.fixture()
def loader() -> FakeLoader:
    return FakeLoader()


@pytest.fixture()
def make_store(
    overrides: DictOverrideSource,
    loader: FakeLoader,
) -> Callable[..., ConfigStore]:
    """Build a store whose file contains ``file`` and whose overrides add ``env``."""

    def _make(
        file: dict[str, str] | None = None,
        env: dict[str, str] | None = None,
    ) -> ConfigStore:
        loader.properties.update(file or {})
        overrides.values.update(env or {})
        return ConfigStore(override_source=overrides, loader=loader)

    return _make

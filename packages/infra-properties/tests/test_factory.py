"""Unit tests for galen.infra.properties.factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from galen.foundation.application.config_store import ConfigStore
from galen.infra.properties.factory import create_config, default_override_source
from galen.infra.properties.sources import SYSTEM_PROPERTIES, MappingPropertySource

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_system_properties() -> Iterator[None]:
    SYSTEM_PROPERTIES.clear()
    yield
    SYSTEM_PROPERTIES.clear()


class TestCreateConfig:
    @pytest.mark.unit
    def test_loads_immediately(self, tmp_path: Path) -> None:
        path = tmp_path / "galen.config"
        path.write_text("galen.default.browser=chrome\n", encoding="utf-8")

        store = create_config(MappingPropertySource({"galen.config.file": str(path)}))

        assert isinstance(store, ConfigStore)
        assert store.is_loaded is True
        assert store.default_browser == "chrome"

    @pytest.mark.unit
    def test_lazy(self, tmp_path: Path) -> None:
        store = create_config(
            MappingPropertySource({"galen.config.file": str(tmp_path / "absent")}),
            load=False,
        )
        assert store.is_loaded is False
        assert store.default_browser == "firefox"
        assert store.is_loaded is True

    @pytest.mark.unit
    def test_malformed_file_does_not_raise(self, tmp_path: Path) -> None:
        path = tmp_path / "config"
        path.write_text("galen.default.browser=chr\\u00\n", encoding="utf-8")

        store = create_config(MappingPropertySource({"galen.config.file": str(path)}))

        outcome = store.last_load_outcome
        assert outcome is not None
        assert outcome.ok is False
        assert store.default_browser == "firefox"

    @pytest.mark.unit
    def test_custom_loader(self, tmp_path: Path) -> None:
        path = tmp_path / "config"
        path.write_text("", encoding="utf-8")

        class _Loader:
            def load(self, path: Path) -> dict[str, str]:
                return {"galen.range.approximation": "7"}

        store = create_config(
            MappingPropertySource({"galen.config.file": str(path)}),
            loader=_Loader(),
        )
        assert store.range_approximation == 7


class TestDefaultOverrideSource:
    @pytest.mark.unit
    def test_system_properties_beat_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GALEN_DEFAULT_BROWSER", "chrome")
        SYSTEM_PROPERTIES.set("galen.default.browser", "edge")
        assert default_override_source().get("galen.default.browser") == "edge"

    @pytest.mark.unit
    def test_environment_used_when_no_system_property(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GALEN_DEFAULT_BROWSER", "chrome")
        assert default_override_source().get("galen.default.browser") == "chrome"

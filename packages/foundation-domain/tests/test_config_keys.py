"""Tests for the recognized configuration keys."""

from __future__ import annotations

import pytest

from galen.foundation.domain.config_keys import GalenConfigKey


@pytest.mark.unit
class TestGalenConfigKey:
    def test_members_are_strings(self) -> None:
        assert GalenConfigKey.CONFIG_FILE == "galen.config.file"
        assert isinstance(GalenConfigKey.LOG_LEVEL, str)

    def test_usable_as_dict_key(self) -> None:
        values = {"galen.default.browser": "chrome"}
        assert values[GalenConfigKey.DEFAULT_BROWSER] == "chrome"

    def test_all_keys_are_galen_namespaced(self) -> None:
        assert all(key.value.startswith("galen.") for key in GalenConfigKey)

    def test_key_count(self) -> None:
        assert len(GalenConfigKey) == 15

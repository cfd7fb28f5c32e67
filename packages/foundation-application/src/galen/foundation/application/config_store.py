"""Layered configuration store.

Resolution chain for every read: override source -> base properties loaded
from the config file -> caller default. Typed accessors coerce the resolved
string with the domain parsers and report coercion failures as errors,
except for the log level and boolean accessors which degrade silently.

The store holds an immutable snapshot of the base properties. ``load()``,
``reset()`` and ``set_property()`` build a new snapshot and publish it with
a single reference assignment, so a reader always observes one complete
snapshot.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from galen.foundation.application.property_overlay import (
    resolve_mandatory_property,
    resolve_property,
)
from galen.foundation.domain.config_keys import (
    DEFAULT_BROWSER,
    DEFAULT_CONFIG_FILE,
    DEFAULT_IMAGE_ERROR_RATE,
    DEFAULT_IMAGE_TOLERANCE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RANGE_APPROXIMATION,
    DEFAULT_REPORTING_LISTENERS,
    DEFAULT_TEST_JS_SUFFIX,
    DEFAULT_TEST_SUFFIX,
    GalenConfigKey,
)
from galen.foundation.domain.exceptions import (
    InvalidConfigurationError,
    OutOfRangeConfigurationError,
)
from galen.foundation.domain.parsers import (
    INT_MAX,
    is_numeric,
    parse_boolean,
    parse_comma_separated_list,
    parse_error_rate,
    parse_int,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from galen.foundation.domain.error_rate import ErrorRate
    from galen.foundation.domain.ports import PropertySource

logger = logging.getLogger(__name__)


class PropertiesFileLoader(Protocol):
    """Protocol for reading a flat key/value properties file.

    Implementations live in infrastructure packages. Any exception raised
    by ``load`` is treated as a failed load by the store.
    """

    def load(self, path: Path) -> dict[str, str]:
        """Read and parse the file at path."""
        ...


@dataclass(frozen=True, slots=True)
class ConfigSnapshot:
    """Immutable view of one successful load.

    Attributes:
        properties: Base properties read from the config file.
        config_file: Path the base properties were looked up at.
        range_approximation: Derived from ``galen.range.approximation``.
        reporting_listeners: Derived from ``galen.reporting.listeners``.
        default_browser: Derived from ``galen.default.browser``.
    """

    properties: Mapping[str, str]
    config_file: Path | None = None
    range_approximation: int = DEFAULT_RANGE_APPROXIMATION
    reporting_listeners: tuple[str, ...] = ()
    default_browser: str = DEFAULT_BROWSER

    @classmethod
    def empty(cls, config_file: Path | None = None) -> ConfigSnapshot:
        """Snapshot with no base properties and default derived fields."""
        return cls(properties=MappingProxyType({}), config_file=config_file)


@dataclass(frozen=True, slots=True)
class LoadOutcome:
    """Result of a ``load()`` or ``reset()`` call.

    Attributes:
        path: Config file path that was resolved.
        file_found: Whether a regular file existed at path.
        property_count: Number of base properties in the published snapshot.
        error: The swallowed exception when the load failed, else None.
    """

    path: Path
    file_found: bool = False
    property_count: int = 0
    error: Exception | None = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None


class ConfigStore:
    """Typed, validated access to layered configuration.

    The store starts unloaded and loads its config file on first access or
    on an explicit ``load()``. Load failures never propagate: the previously
    published snapshot stays in place (an empty one on the very first load)
    and the failure is reported through the returned ``LoadOutcome``.

    Args:
        override_source: Higher-priority source consulted before the file
            for every key, including the config file path itself.
        loader: Reads the properties file located by the store.
    """

    def __init__(
        self,
        override_source: PropertySource,
        loader: PropertiesFileLoader,
    ) -> None:
        self._override = override_source
        self._loader = loader
        self._snapshot: ConfigSnapshot | None = None
        self._last_outcome: LoadOutcome | None = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def load(self) -> LoadOutcome:
        """Load the config file and publish a new snapshot.

        Returns:
            LoadOutcome describing the attempt. ``outcome.ok`` is False when
            the load failed and the previous snapshot was kept.
        """
        with self._lock:
            return self._load_locked()

    def reset(self) -> LoadOutcome:
        """Reload configuration, discarding properties set at runtime."""
        return self.load()

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def last_load_outcome(self) -> LoadOutcome | None:
        return self._last_outcome

    @property
    def properties(self) -> Mapping[str, str]:
        """Read-only view of the current base properties."""
        return self._current().properties

    @property
    def config_file(self) -> Path | None:
        return self._current().config_file

    def _current(self) -> ConfigSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            with self._lock:
                if self._snapshot is None:
                    self._load_locked()
                snapshot = self._snapshot
        assert snapshot is not None
        return snapshot

    def _load_locked(self) -> LoadOutcome:
        path = Path(
            resolve_property(
                GalenConfigKey.CONFIG_FILE,
                {},
                self._override,
                DEFAULT_CONFIG_FILE,
            )
            or ""
        )
        previous = self._snapshot
        file_found = False
        error: Exception | None = None
        try:
            file_found = path.is_file()
            properties = self._loader.load(path) if file_found else {}
        except Exception as exc:
            error = exc
            snapshot = previous if previous is not None else ConfigSnapshot.empty(path)
        else:
            snapshot, error = self._build_snapshot(properties, path, previous)
        self._snapshot = snapshot
        outcome = LoadOutcome(
            path=path,
            file_found=file_found,
            property_count=len(snapshot.properties),
            error=error,
        )
        if error is not None:
            logger.warning(
                "config_load_failed",
                extra={
                    "path": str(path),
                    "file_found": file_found,
                    "error": str(error),
                },
            )
        else:
            logger.info(
                "config_loaded",
                extra={
                    "path": str(path),
                    "file_found": file_found,
                    "property_count": outcome.property_count,
                },
            )
        self._last_outcome = outcome
        return outcome

    def _build_snapshot(
        self,
        properties: Mapping[str, str],
        path: Path,
        previous: ConfigSnapshot | None,
    ) -> tuple[ConfigSnapshot, InvalidConfigurationError | None]:
        """Build a snapshot from freshly loaded properties.

        An unparsable range approximation keeps the previous value (the
        default on first load) and is returned as the error; the new base
        properties are published either way.
        """
        base = MappingProxyType(dict(properties))
        error: InvalidConfigurationError | None = None
        approximation_text = resolve_property(
            GalenConfigKey.RANGE_APPROXIMATION,
            base,
            self._override,
            str(DEFAULT_RANGE_APPROXIMATION),
        )
        try:
            range_approximation = parse_int(approximation_text or "")
        except ValueError as exc:
            error = InvalidConfigurationError(
                GalenConfigKey.RANGE_APPROXIMATION,
                approximation_text or "",
                reason=str(exc),
            )
            error.__cause__ = exc
            range_approximation = (
                previous.range_approximation
                if previous is not None
                else DEFAULT_RANGE_APPROXIMATION
            )
        listeners = resolve_property(
            GalenConfigKey.REPORTING_LISTENERS,
            base,
            self._override,
            DEFAULT_REPORTING_LISTENERS,
        )
        default_browser = resolve_property(
            GalenConfigKey.DEFAULT_BROWSER,
            base,
            self._override,
            DEFAULT_BROWSER,
        )
        snapshot = ConfigSnapshot(
            properties=base,
            config_file=path,
            range_approximation=range_approximation,
            reporting_listeners=tuple(parse_comma_separated_list(listeners or "")),
            default_browser=default_browser or DEFAULT_BROWSER,
        )
        return snapshot, error

    # ------------------------------------------------------------------
    # Raw reads
    # ------------------------------------------------------------------

    def read_property(self, key: str, default: str | None = None) -> str | None:
        """Resolve key through the override source, then the config file.

        Returns:
            The resolved value, default when unset everywhere, or None.
        """
        return resolve_property(key, self._current().properties, self._override, default)

    def read_mandatory_property(self, key: str) -> str:
        """Resolve a property that must be set.

        Raises:
            MissingConfigurationError: If the key is unset or blank.
        """
        return resolve_mandatory_property(key, self._current().properties, self._override)

    def set_property(self, key: str, value: str) -> None:
        """Set a base property in memory for the rest of this run.

        The config file is not modified, derived fields are not recomputed,
        and the override source still takes priority. The value is dropped
        by the next ``reset()``.
        """
        with self._lock:
            if self._snapshot is None:
                self._load_locked()
            snapshot = self._snapshot
            assert snapshot is not None
            properties = dict(snapshot.properties)
            properties[key] = value
            self._snapshot = replace(snapshot, properties=MappingProxyType(properties))
        logger.debug("config_property_set", extra={"key": str(key)})

    # ------------------------------------------------------------------
    # Typed reads
    # ------------------------------------------------------------------

    def get_int_property(
        self,
        key: str,
        default: int,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int:
        """Read an integer property, optionally within inclusive bounds.

        Args:
            key: Property key.
            default: Used only when the key is unset everywhere.
            min_value: Inclusive lower bound, or None for unbounded.
            max_value: Inclusive upper bound, or None for unbounded.

        Raises:
            InvalidConfigurationError: If the value is set but not an integer.
            OutOfRangeConfigurationError: If the value is outside the bounds.
        """
        raw = self.read_property(key)
        if raw is None:
            value = default
        else:
            try:
                value = parse_int(raw)
            except ValueError as exc:
                raise InvalidConfigurationError(key, raw, reason=str(exc)) from exc

        if (min_value is not None and value < min_value) or (
            max_value is not None and value > max_value
        ):
            raise OutOfRangeConfigurationError(key, value, min_value, max_value)
        return value

    def get_boolean_property(self, key: str, default: bool) -> bool:
        """Read a boolean leniently; anything but ``"true"`` is False."""
        raw = self.read_property(key)
        if raw is None:
            return default
        return parse_boolean(raw)

    # ------------------------------------------------------------------
    # Well-known settings
    # ------------------------------------------------------------------

    @property
    def range_approximation(self) -> int:
        return self._current().range_approximation

    @property
    def reporting_listeners(self) -> list[str]:
        return list(self._current().reporting_listeners)

    @property
    def default_browser(self) -> str:
        return self._current().default_browser

    def get_log_level(self) -> int:
        """Log level, falling back to 10 for anything non-numeric."""
        raw = self.read_property(GalenConfigKey.LOG_LEVEL) or ""
        if is_numeric(raw):
            try:
                return parse_int(raw)
            except ValueError:
                return DEFAULT_LOG_LEVEL
        return DEFAULT_LOG_LEVEL

    def use_fail_exit_code(self) -> bool:
        raw = self.read_property(GalenConfigKey.USE_FAIL_EXIT_CODE)
        if raw is not None and raw.strip():
            return parse_boolean(raw)
        return False

    def should_autoresize_screenshots(self) -> bool:
        return self.get_boolean_property(GalenConfigKey.SCREENSHOT_AUTORESIZE, True)

    def should_check_visibility_globally(self) -> bool:
        return self.get_boolean_property(GalenConfigKey.SPEC_GLOBAL_VISIBILITY_CHECK, True)

    def should_take_full_page_screenshots(self, default: bool = False) -> bool:
        return self.get_boolean_property(GalenConfigKey.SCREENSHOT_FULLPAGE, default)

    def get_full_page_scroll_timeout(self, default: int = 0) -> int:
        """Smart scroll wait timeout; zero disables the smart wait."""
        return self.get_int_property(
            GalenConfigKey.SCREENSHOT_FULLPAGE_SCROLL_TIMEOUT, default, 0, INT_MAX
        )

    def get_full_page_scroll_wait(self, default: int = 0) -> int:
        return self.get_int_property(
            GalenConfigKey.SCREENSHOT_FULLPAGE_SCROLL_WAIT, default, 0, INT_MAX
        )

    def get_image_spec_default_tolerance(self) -> int:
        return self.get_int_property(GalenConfigKey.SPEC_IMAGE_TOLERANCE, DEFAULT_IMAGE_TOLERANCE)

    def get_image_spec_default_error_rate(self) -> ErrorRate:
        """Default error rate for image specs.

        Raises:
            InvalidConfigurationError: If the configured text is not a valid
                error rate.
        """
        raw = self.read_property(GalenConfigKey.SPEC_IMAGE_ERROR_RATE, DEFAULT_IMAGE_ERROR_RATE)
        raw = DEFAULT_IMAGE_ERROR_RATE if raw is None else raw
        try:
            return parse_error_rate(raw)
        except ValueError as exc:
            raise InvalidConfigurationError(
                GalenConfigKey.SPEC_IMAGE_ERROR_RATE, raw, reason=str(exc)
            ) from exc

    def get_test_suffix(self) -> str:
        value = self.read_property(GalenConfigKey.TEST_SUFFIX)
        return DEFAULT_TEST_SUFFIX if value is None else value

    def get_test_js_suffix(self) -> str:
        value = self.read_property(GalenConfigKey.TEST_JS_SUFFIX)
        return DEFAULT_TEST_JS_SUFFIX if value is None else value

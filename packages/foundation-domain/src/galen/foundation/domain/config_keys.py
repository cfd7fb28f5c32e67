"""Registry of recognized Galen configuration keys and their defaults.

Keys are flat dotted strings. ``GalenConfigKey`` is a StrEnum so members can
be passed anywhere a plain key string is accepted.
"""

from __future__ import annotations

from enum import StrEnum


class GalenConfigKey(StrEnum):
    """Property keys understood by the configuration store."""

    SCREENSHOT_AUTORESIZE = "galen.screenshot.autoresize"
    SCREENSHOT_FULLPAGE = "galen.browser.screenshots.fullPage"
    # smart wait for scroll position with a timeout, zero turns smart wait off
    SCREENSHOT_FULLPAGE_SCROLL_TIMEOUT = "galen.browser.screenshots.fullPage.scrollTimeout"
    # hard wait during scroll
    SCREENSHOT_FULLPAGE_SCROLL_WAIT = "galen.browser.screenshots.fullPage.scrollWait"
    SPEC_IMAGE_TOLERANCE = "galen.spec.image.tolerance"
    SPEC_IMAGE_ERROR_RATE = "galen.spec.image.error"
    SPEC_GLOBAL_VISIBILITY_CHECK = "galen.spec.global.visibility"
    TEST_JS_SUFFIX = "galen.test.js.file.suffix"
    TEST_SUFFIX = "galen.test.file.suffix"
    CONFIG_FILE = "galen.config.file"
    RANGE_APPROXIMATION = "galen.range.approximation"
    REPORTING_LISTENERS = "galen.reporting.listeners"
    DEFAULT_BROWSER = "galen.default.browser"
    LOG_LEVEL = "galen.log.level"
    USE_FAIL_EXIT_CODE = "galen.use.fail.exit.code"


DEFAULT_CONFIG_FILE = "config"
DEFAULT_RANGE_APPROXIMATION = 2
DEFAULT_REPORTING_LISTENERS = ""
DEFAULT_BROWSER = "firefox"
DEFAULT_LOG_LEVEL = 10
DEFAULT_IMAGE_TOLERANCE = 25
DEFAULT_IMAGE_ERROR_RATE = "0px"
DEFAULT_TEST_SUFFIX = ".test"
DEFAULT_TEST_JS_SUFFIX = ".test.js"

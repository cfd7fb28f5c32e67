"""Global visibility check applied before validating page elements.

When ``galen.spec.global.visibility`` is enabled (the default), every
element referenced by a spec must be visible before any other check runs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from galen.foundation.domain.exceptions import ElementNotVisibleError

if TYPE_CHECKING:
    from galen.foundation.application.config_store import ConfigStore
    from galen.foundation.domain.ports import PageElement

logger = logging.getLogger(__name__)


def require_visible(element: PageElement, name: str, config: ConfigStore) -> None:
    """Ensure element is visible when the global visibility check is on.

    Args:
        element: Element located on the page.
        name: Element name used in the spec, for error reporting.
        config: Configuration store providing the global visibility flag.

    Raises:
        ElementNotVisibleError: If the check is enabled and the element
            is not visible.
    """
    if not config.should_check_visibility_globally():
        return
    if not element.is_visible():
        logger.debug(
            "element_not_visible",
            extra={
                "element_name": name,
                "left": element.left,
                "top": element.top,
                "width": element.width,
                "height": element.height,
            },
        )
        raise ElementNotVisibleError(name)

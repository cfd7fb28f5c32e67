"""Port interface for page elements inspected by layout specs.

The page model itself belongs to the browser integration. Only the
capabilities used by visibility checks are declared here.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PageElement(Protocol):
    """An element located on a rendered page.

    Attributes:
        left: X coordinate of the element's left edge, in pixels.
        top: Y coordinate of the element's top edge, in pixels.
        width: Element width in pixels.
        height: Element height in pixels.
    """

    left: int
    top: int
    width: int
    height: int

    def is_visible(self) -> bool:
        """Return True when the element is displayed on the page."""
        ...

"""Error rate value object for image comparison specs.

An error rate expresses how much visual difference an image comparison
tolerates, either as an absolute number of pixels (``"5px"``) or as a
percentage of the compared area (``"2%"``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorRateType(StrEnum):
    """Unit of an error rate."""

    PIXELS = "px"
    PERCENT = "%"


@dataclass(frozen=True, slots=True)
class ErrorRate:
    """Validated, immutable error rate.

    Attributes:
        value: Non-negative amount of tolerated difference.
        type: Whether ``value`` counts pixels or percent.

    Raises:
        ValueError: If value is negative, or a percentage exceeds 100.
    """

    value: float
    type: ErrorRateType

    def __post_init__(self) -> None:
        if self.value < 0:
            msg = f"Error rate cannot be negative: {self.value}"
            raise ValueError(msg)
        if self.type is ErrorRateType.PERCENT and self.value > 100:
            msg = f"Error rate percentage cannot exceed 100: {self.value}"
            raise ValueError(msg)

    @classmethod
    def from_string(cls, text: str) -> ErrorRate:
        """Parse ``"<number>px"`` or ``"<number>%"`` into an ErrorRate."""
        from galen.foundation.domain.parsers import parse_error_rate

        return parse_error_rate(text)

    def __str__(self) -> str:
        number = format(self.value, "f").rstrip("0").rstrip(".")
        return f"{number or '0'}{self.type.value}"

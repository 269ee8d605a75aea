"""RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Color"]


@dataclass
class Color:
    """A colour with red, green, blue and alpha channels."""

    red: float
    green: float
    blue: float
    alpha: float

    def as_vec4(self) -> tuple[float, float, float, float]:
        """The channels in RGBA order."""
        return (self.red, self.green, self.blue, self.alpha)
"""Integer screen rectangles and their floating-point counterparts."""

from __future__ import annotations

import math
from dataclasses import dataclass

_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def _to_u16(value: float) -> int:
    """Convert to an unsigned 16-bit cell count, saturating at the bounds."""
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), float(_U16_MAX)))


@dataclass
class RectFloat:
    """A rectangle with fractional position and size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_rect(cls, rect: Rect) -> "RectFloat":
        return cls(float(rect.x), float(rect.y), float(rect.width), float(rect.height))

    def round(self) -> Rect:
        """Snap to whole cells so that neighbouring rectangles stay adjacent."""
        rounded_x = _round_half_away(self.x)
        rounded_y = _round_half_away(self.y)
        x = _to_u16(rounded_x)
        y = _to_u16(rounded_y)
        width = _to_u16(_round_half_away((self.x - rounded_x) + self.width))
        height = _to_u16(_round_half_away((self.y - rounded_y) + self.height))

        # fix rounding errors
        if _to_u16(_round_half_away(self.x + self.width)) > x + width:
            width += 1
        if _to_u16(_round_half_away(self.y + self.height)) > y + height:
            height += 1
        return Rect(x, y, width, height)
"""Layout enumerations and the Dimension type with its px/pc helpers."""

import enum
import math
import sys
from dataclasses import dataclass

SHORT_MIN = -32768
SHORT_MAX = 32767


class HorizontalAlignment(enum.Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class VerticalAlignment(enum.Enum):
    TOP = 0
    CENTER = 1
    BOTTOM = 2


class Arrangement(enum.Enum):
    START = 0
    CENTER = 1
    END = 2
    SPACE_BETWEEN = 3
    SPACE_AROUND = 4
    SPACE_EVENLY = 5


class DimensionUnit(enum.Enum):
    PIXEL = 0
    PERCENT = 1
    AUTO = 2
    FIT_CONTENT = 3


class AutoSizeHint(enum.Enum):
    FIT_CONTENT = 0
    EXPAND = 1


class Sizing(enum.Enum):
    PIXEL = 0
    PERCENT = 1
    FIT_CONTENT = 2
    EXPAND = 3


def _clamp_short(value):
    return max(SHORT_MIN, min(SHORT_MAX, value))


def _round_half_away(value):
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


@dataclass(frozen=True)
class Dimension:
    """A length given in pixels, as a fraction of the available space, or left to layout."""

    unit: DimensionUnit = DimensionUnit.AUTO
    value: float = 0.0

    @classmethod
    def pixels(cls, value):
        return cls(DimensionUnit.PIXEL, float(value))

    @classmethod
    def percent(cls, value):
        return cls(DimensionUnit.PERCENT, float(value))

    @classmethod
    def automatic(cls):
        return cls()

    @classmethod
    def fit_content(cls):
        return cls(DimensionUnit.FIT_CONTENT, 0.0)

    def pixel_value(self, total_pixels):
        """Resolve to pixels against ``total_pixels``; auto and fit-content give 0."""
        if self.unit is DimensionUnit.PIXEL:
            if math.isnan(self.value):
                return 0
            if math.isinf(self.value):
                return SHORT_MAX if self.value > 0 else SHORT_MIN
            return _clamp_short(int(self.value))
        if self.unit is DimensionUnit.PERCENT:
            product = self.value * total_pixels
            if math.isnan(product):
                return 0
            if product > SHORT_MAX:
                return SHORT_MAX
            if product < SHORT_MIN:
                return SHORT_MIN
            return _clamp_short(_round_half_away(product))
        return 0

    def is_auto(self):
        return self.unit is DimensionUnit.AUTO

    def is_fit_content(self):
        return self.unit is DimensionUnit.FIT_CONTENT

    def __neg__(self):
        return Dimension(self.unit, -self.value)

    def __mul__(self, factor):
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Dimension(self.unit, self.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Dimension(self.unit, self.value / divisor)


def px(value):
    """A pixel dimension, saturated at the largest representable pixel count."""
    if value > SHORT_MAX:
        return Dimension.pixels(SHORT_MAX)
    return Dimension.pixels(value)


def pc(value):
    """A percentage dimension, where 1.0 means all of the available space."""
    return Dimension.percent(min(float(value), sys.float_info.max))
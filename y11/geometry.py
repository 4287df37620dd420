"""Basic value types: colours, padding, points, sizes, rectangles and layout results."""

from dataclasses import dataclass

_CHANNELS = ("r", "g", "b", "a")


@dataclass(frozen=True)
class Color:
    """An ARGB colour with 8-bit channels; opaque red by default."""

    r: int = 255
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self):
        for name in _CHANNELS:
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour channel {name} must be an integer in 0..255, got {value!r}")

    @classmethod
    def from_raw(cls, raw):
        """Build a colour from a packed 0xAARRGGBB integer."""
        return cls(
            r=(raw >> 16) & 0xFF,
            g=(raw >> 8) & 0xFF,
            b=raw & 0xFF,
            a=(raw >> 24) & 0xFF,
        )

    def raw(self):
        """Return the colour packed as 0xAARRGGBB."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


@dataclass(frozen=True, init=False)
class Padding:
    """Space between a widget's edge and its content.

    Takes one value (all sides), two (vertical, horizontal) or four
    (top, right, bottom, left), like the CSS shorthand.
    """

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __init__(self, *values):
        if not values:
            values = (0,)
        if len(values) == 1:
            top = right = bottom = left = values[0]
        elif len(values) == 2:
            top = bottom = values[0]
            right = left = values[1]
        elif len(values) == 4:
            top, right, bottom, left = values
        else:
            raise TypeError(f"Padding takes 0, 1, 2 or 4 values, got {len(values)}")
        object.__setattr__(self, "top", top)
        object.__setattr__(self, "right", right)
        object.__setattr__(self, "bottom", bottom)
        object.__setattr__(self, "left", left)

    def total_horizontal(self):
        return self.left + self.right

    def total_vertical(self):
        return self.top + self.bottom


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Size:
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def position(self):
        return Point(self.x, self.y)

    def size(self):
        return Size(self.width, self.height)


@dataclass
class LayoutMetadata:
    """Where layout placed a widget, in pixels."""

    x: int = 0
    y: int = 0
    content_x: int = 0
    content_y: int = 0
    width: int = 0
    height: int = 0
    content_width: int = 0
    content_height: int = 0
    overflow: bool = False
"""The widget base class and the layout visitor interface."""

from abc import ABC, abstractmethod

from y11.common import AutoSizeHint, Dimension, DimensionUnit, Sizing
from y11.geometry import Color, LayoutMetadata, Padding, Point, Rect, Size

# Pixel dimensions resolve to the same value whatever total they are given.
_ANY_TOTAL = 2137

_FIXED_SIZING = {
    DimensionUnit.PIXEL: Sizing.PIXEL,
    DimensionUnit.PERCENT: Sizing.PERCENT,
    DimensionUnit.FIT_CONTENT: Sizing.FIT_CONTENT,
}


class LayoutVisitor(ABC):
    """Places widgets by filling in their layout metadata."""

    @abstractmethod
    def visit(self, widget, metadata):
        """Compute the placement of ``widget`` into ``metadata``."""


def _sizing(dimension, hint):
    if dimension.unit in _FIXED_SIZING:
        return _FIXED_SIZING[dimension.unit]
    return Sizing.FIT_CONTENT if hint is AutoSizeHint.FIT_CONTENT else Sizing.EXPAND


class Widget(ABC):
    """Something that takes up space in the widget tree and can be drawn."""

    def __init__(self, width=Dimension(), height=Dimension(), *, padding=Padding(), widget_id=0):
        super().__init__()
        self.width = width
        self.height = height
        self.padding = padding
        self.id = widget_id
        self.layout_metadata = LayoutMetadata()

    def color(self):
        return Color()

    def set_color(self, color):
        return self

    def set_dims(self, width, height):
        self.width = width
        self.height = height
        return self

    def bounding_rect(self):
        """Area occupied by the widget after layout."""
        m = self.layout_metadata
        return Rect(m.x, m.y, m.width, m.height)

    def pos(self):
        return Point(self.layout_metadata.x, self.layout_metadata.y)

    def size(self):
        return Size(self.layout_metadata.width, self.layout_metadata.height)

    def width_auto_size_hint(self):
        return AutoSizeHint.FIT_CONTENT

    def height_auto_size_hint(self):
        return AutoSizeHint.FIT_CONTENT

    def horizontal_sizing(self):
        return _sizing(self.width, self.width_auto_size_hint())

    def vertical_sizing(self):
        return _sizing(self.height, self.height_auto_size_hint())

    def measure(self):
        """Size the widget needs without layout context; unknown parts count as 0."""
        return Size(self.measure_width(), self.measure_height())

    def measure_width(self):
        width = 0
        if self.width.unit is DimensionUnit.PIXEL:
            width = max(0, self.width.pixel_value(_ANY_TOTAL))
        return max(width, self.padding.total_horizontal())

    def measure_height(self):
        height = 0
        if self.height.unit is DimensionUnit.PIXEL:
            height = max(0, self.height.pixel_value(_ANY_TOTAL))
        return max(height, self.padding.total_vertical())

    def set_padding(self, padding):
        self.padding = padding
        return self

    @abstractmethod
    def accept_renderer(self, visitor):
        """Hand the widget to a renderer."""

    def accept_layout(self, visitor):
        visitor.visit(self, self.layout_metadata)
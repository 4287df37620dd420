"""Layout widgets and the default top-to-bottom layout visitor."""

from abc import abstractmethod

from y11.common import AutoSizeHint
from y11.geometry import Point, Rect
from y11.widget import LayoutVisitor, Widget


class Layout(Widget):
    """A widget that arranges its own children once it has been placed."""

    @abstractmethod
    def apply_layout(self):
        """Place the children inside this widget's content area."""

    def accept_layout(self, visitor):
        visitor.visit(self, self.layout_metadata)
        self.apply_layout()


def _extent(dimension, hint, available, measure):
    if dimension.is_auto():
        return available if hint is AutoSizeHint.EXPAND else measure()
    if dimension.is_fit_content():
        return measure()
    return dimension.pixel_value(available)


class DefaultLayoutVisitor(LayoutVisitor):
    """Stacks widgets from the top of a rectangle downward."""

    def __init__(self, rect=None):
        self._rect = Rect()
        self._current = Point()
        self.set_layout_rect(rect if rect is not None else Rect())

    def set_layout_rect(self, rect):
        self._rect = rect
        self._current = rect.position()

    def visit(self, widget, metadata):
        rect = self._rect
        width = _extent(widget.width, widget.width_auto_size_hint(), rect.width, widget.measure_width)
        height = _extent(widget.height, widget.height_auto_size_hint(), rect.height, widget.measure_height)

        metadata.width = max(0, width)
        metadata.height = max(0, height)
        metadata.content_width = max(0, metadata.width - widget.padding.total_horizontal())
        metadata.content_height = max(0, metadata.height - widget.padding.total_vertical())

        metadata.x = self._current.x
        metadata.y = self._current.y
        metadata.content_x = self._current.x + widget.padding.left
        metadata.content_y = self._current.y + widget.padding.top

        self._current = Point(self._current.x, self._current.y + metadata.height)
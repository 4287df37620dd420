"""The top of a widget tree."""

from y11.composite import Composite
from y11.layout import DefaultLayoutVisitor


class Root(Composite):
    """Lays out its children from the top of a rectangle downward."""

    def __init__(self):
        super().__init__()
        self._layout_visitor = DefaultLayoutVisitor()

    def set_layout_rect(self, rect):
        self._layout_visitor.set_layout_rect(rect)

    def apply_layout(self):
        for widget in self:
            widget.accept_layout(self._layout_visitor)
"""Leaf widgets: rectangles, circles, ellipses, text and buttons."""

from y11.common import Dimension
from y11.geometry import BLACK, WHITE, Padding
from y11.widget import Widget


class _Painted(Widget):
    """A widget with a single fill colour."""

    _default_color = BLACK

    def __init__(self, width=Dimension(), height=Dimension(), *, color=None, padding=Padding(), widget_id=0):
        super().__init__(width, height, padding=padding, widget_id=widget_id)
        self._color = self._default_color if color is None else color

    def color(self):
        return self._color

    def set_color(self, color):
        self._color = color
        return self


class Rectangle(_Painted):
    """A filled rectangle."""

    def __init__(self, width, height, **kwargs):
        super().__init__(width, height, **kwargs)

    def accept_renderer(self, visitor):
        visitor.visit_rectangle(self, self.layout_metadata)


class Circle(_Painted):
    """A filled circle; its width and height are twice the radius."""

    _default_color = WHITE

    def __init__(self, radius, **kwargs):
        super().__init__(radius * 2.0, radius * 2.0, **kwargs)

    def set_radius(self, radius):
        self.width = radius * 2.0
        self.height = radius * 2.0
        return self

    def radius(self):
        return self.width * 0.5

    def accept_renderer(self, visitor):
        visitor.visit_circle(self, self.layout_metadata)


class Ellipse(_Painted):
    """A filled ellipse inscribed in its box."""

    def __init__(self, width, height, **kwargs):
        super().__init__(width, height, **kwargs)

    def accept_renderer(self, visitor):
        visitor.visit_ellipse(self, self.layout_metadata)


class Text(_Painted):
    """A line of text.

    Width is measured with ``measurer(string, letter_height)`` when one is
    given; otherwise every character counts as one letter height wide.
    """

    _default_color = WHITE

    def __init__(self, string="", *, letter_height=14, measurer=None, **kwargs):
        super().__init__(**kwargs)
        self.string = string
        self.letter_height = letter_height
        self.measurer = measurer

    def set_letter_height(self, height):
        self.letter_height = height
        return self

    def set_string(self, string):
        self.string = string
        return self

    def measure_width(self):
        if self.measurer is not None:
            return self.measurer(self.string, self.letter_height)
        return len(self.string) * self.letter_height + self.padding.total_horizontal()

    def measure_height(self):
        return self.letter_height + self.padding.total_vertical()

    def accept_renderer(self, visitor):
        visitor.visit_text(self, self.layout_metadata)


class Button(_Painted):
    """A coloured box with a caption."""

    def __init__(self, width, height, *, text=None, **kwargs):
        super().__init__(width, height, **kwargs)
        self.text = Text("XOXO") if text is None else text

    def set_text(self, text):
        self.text = text
        return self

    def accept_renderer(self, visitor):
        visitor.visit_button(self, self.layout_metadata)
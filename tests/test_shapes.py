import pytest

from y11.common import Dimension, pc, px
from y11.geometry import BLACK, WHITE, Color, Padding, Size
from y11.shapes import Button, Circle, Ellipse, Rectangle, Text


class Recorder:
    def __init__(self):
        self.calls = []

    def visit_rectangle(self, widget, metadata):
        self.calls.append(("rectangle", widget, metadata))

    def visit_circle(self, widget, metadata):
        self.calls.append(("circle", widget, metadata))

    def visit_ellipse(self, widget, metadata):
        self.calls.append(("ellipse", widget, metadata))

    def visit_text(self, widget, metadata):
        self.calls.append(("text", widget, metadata))

    def visit_button(self, widget, metadata):
        self.calls.append(("button", widget, metadata))


@pytest.mark.parametrize(
    "widget, expected",
    [
        (Rectangle(px(1), px(1)), BLACK),
        (Ellipse(px(1), px(1)), BLACK),
        (Button(px(1), px(1)), BLACK),
        (Circle(px(1)), WHITE),
        (Text("hi"), WHITE),
    ],
)
def test_default_colors(widget, expected):
    assert widget.color() == expected


@pytest.mark.parametrize(
    "widget",
    [Rectangle(px(1), px(1)), Ellipse(px(1), px(1)), Button(px(1), px(1)), Circle(px(1)), Text("hi")],
)
def test_set_color_round_trip(widget):
    green = Color(0, 255, 0)
    assert widget.set_color(green) is widget
    assert widget.color() == green


def test_rectangle_dimensions_and_measure():
    rect = Rectangle(px(100), px(50))
    assert rect.width == px(100)
    assert rect.height == px(50)
    assert rect.measure() == Size(100, 50)


def test_ellipse_dimensions():
    ellipse = Ellipse(px(100), px(50))
    assert ellipse.measure() == Size(100, 50)


def test_circle_radius_round_trip():
    circle = Circle(px(10))
    assert circle.radius() == px(10)
    assert circle.width == px(10) * 2.0
    assert circle.height == circle.width


def test_circle_set_radius():
    circle = Circle(pc(0.2))
    assert circle.set_radius(px(7)) is circle
    assert circle.radius() == px(7)
    assert circle.measure_width() == circle.measure_height()


def test_text_defaults_and_height():
    text = Text("Hello World")
    assert text.letter_height == 14
    assert text.measure_height() == 14


def test_text_height_includes_padding():
    text = Text("x", padding=Padding(3))
    text.set_letter_height(32)
    assert text.measure_height() == 32 + Padding(3).total_vertical()


def test_text_default_width_scales_with_length():
    text = Text("abcd").set_letter_height(10)
    assert text.measure_width() == len("abcd") * 10
    longer = Text("abcdabcd").set_letter_height(10)
    assert longer.measure_width() == 2 * text.measure_width()


def test_text_custom_measurer():
    seen = []

    def measurer(string, height):
        seen.append((string, height))
        return len(string) + height

    text = Text("abc", letter_height=5, measurer=measurer)
    assert text.measure_width() == len("abc") + 5
    assert seen == [("abc", 5)]


def test_text_set_string_chain():
    text = Text("one")
    assert text.set_string("two") is text
    assert text.string == "two"


def test_text_auto_dimensions():
    text = Text("x")
    assert text.width == Dimension.automatic()
    assert text.height.is_auto()


def test_button_default_caption_and_set_text():
    button = Button(px(200), px(100))
    assert button.text.string == "XOXO"
    caption = Text("Press")
    assert button.set_text(caption) is button
    assert button.text is caption


def test_buttons_do_not_share_default_caption():
    first = Button(px(1), px(1))
    second = Button(px(1), px(1))
    first.text.set_string("changed")
    assert second.text.string == "XOXO"


@pytest.mark.parametrize(
    "widget, name",
    [
        (Rectangle(px(1), px(1)), "rectangle"),
        (Circle(px(1)), "circle"),
        (Ellipse(px(1), px(1)), "ellipse"),
        (Text("t"), "text"),
        (Button(px(1), px(1)), "button"),
    ],
)
def test_accept_renderer_dispatches(widget, name):
    recorder = Recorder()
    widget.accept_renderer(recorder)
    assert recorder.calls == [(name, widget, widget.layout_metadata)]
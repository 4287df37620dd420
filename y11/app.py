"""A demonstration window showing layouts, shapes, text and animation."""

import argparse

from y11.animation import Animation, Keyframe
from y11.column import Column
from y11.common import Arrangement, Dimension, HorizontalAlignment, VerticalAlignment, pc, px
from y11.event_loop import EventLoop
from y11.events import EventType, Key
from y11.geometry import Color
from y11.root import Root
from y11.row import Row
from y11.shapes import Button, Circle, Ellipse, Rectangle, Text

DEMO_TEXTS = (
    "UwU ->",
    "<- Hello World ->",
    "<- Zażółć gęślą jaźń ->",
    "<- Layouts ->",
    "<- Animations ->",
    "<- Naura",
)


class Demo:
    """The demo widget tree, its animation and the event loop that drives it."""

    def __init__(self, backend):
        self.backend = backend
        measurer = getattr(backend, "measure_text", None)

        self.square = Rectangle(px(100), px(50), color=Color(0, 255, 0))
        self.circle = Circle(pc(0.2))
        self.ellipse = Ellipse(px(100), px(50), color=Color(0, 255, 0))
        self.text = Text("Hello World", letter_height=32, measurer=measurer)
        self.button = Button(px(200), px(100), color=Color(64, 128, 0))
        self.button.text.measurer = measurer

        column = Column(gap=20, alignment=HorizontalAlignment.CENTER, arrangement=Arrangement.CENTER)
        column.height = pc(1.0)

        inner = Column(gap=20, alignment=HorizontalAlignment.CENTER, arrangement=Arrangement.CENTER)
        inner.set_dims(Dimension.automatic(), px(300))
        inner.add_widget(self.square)
        inner.add_widget(self.ellipse)

        column.add_widget(self.text)
        column.add_widget(inner)
        column.add_widget(self.circle)
        column.add_widget(self.button)

        row = Row(alignment=VerticalAlignment.CENTER, arrangement=Arrangement.SPACE_EVENLY)
        row.add_widget(Rectangle(px(20), px(30), color=Color(255, 0, 0)))
        row.add_widget(Rectangle(px(40), px(50), color=Color(0, 255, 0)))
        row.add_widget(Rectangle(pc(0.1), px(10), color=Color(0, 0, 255)))
        column.add_widget(row)

        self.column = column
        self.root = Root()
        self.root.add_widget(column)

        self.animation = Animation(
            [
                Keyframe(100, 0.01, Color(255, 0, 0), 1.01, 1.0),
                Keyframe(100, 0.01, Color(0, 255, 0), 1.0, 1.01),
                Keyframe(100, 0.01, Color(0, 0, 255), 1.0 / 1.01, 1.0 / 1.01),
            ]
        )

        self.texts = DEMO_TEXTS
        self.index = 1
        self.text.set_string(self.texts[self.index])

        self.loop = EventLoop()
        self.loop.bind(backend)
        self.loop.add_event_listener(EventType.KEY_DOWN, self.on_key_down)
        self.loop.add_event_listener(EventType.QUIT, lambda event: self.loop.stop())
        self.loop.add_event_listener(EventType.ANIMATION_FRAME, self.on_animation_frame)

    def _show(self, index):
        self.index = index
        self.text.set_string(self.texts[index])
        return self.texts[index]

    def next_text(self):
        """Show the following caption, wrapping to the first; return it."""
        return self._show((self.index + 1) % len(self.texts))

    def previous_text(self):
        """Show the preceding caption, wrapping to the last; return it."""
        return self._show((self.index - 1) % len(self.texts))

    def on_key_down(self, event):
        if event.key is Key.ESC:
            self.loop.stop()
        elif event.key is Key.LEFT:
            self.previous_text()
        elif event.key is Key.RIGHT:
            self.next_text()

    def on_animation_frame(self, event):
        self.animation.evaluate(self.ellipse)
        self.animation.evaluate(self.square)
        self.animation.advance()
        self.backend.render(self.root)


def build_demo(backend):
    """Build the demo on an initialised ``backend``."""
    return Demo(backend)


def main(argv=None):
    """Open the demo window and run until it is closed or Esc is pressed."""
    from y11.pygame_backend import PygameBackend

    parser = argparse.ArgumentParser(prog="y11", description="Widget toolkit demo.")
    parser.add_argument("--width", type=int, default=1200, help="window width in pixels")
    parser.add_argument("--height", type=int, default=800, help="window height in pixels")
    parser.add_argument("--font", default=None, help="path of a TrueType font to use")
    args = parser.parse_args(argv)

    with PygameBackend(args.width, args.height, font_path=args.font) as backend:
        backend.init()
        demo = build_demo(backend)
        backend.render(demo.root)
        demo.loop.run()
    return 0
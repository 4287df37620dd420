# y11

A small widget toolkit: a tree of widgets, flexbox-like `Column` and `Row`
layouts, keyframe colour and size animations, and a polling event loop with
listeners, timeouts and intervals. Drawing goes through a pluggable backend
(`y11.backend.Backend`); a pygame backend (`y11.pygame_backend.PygameBackend`)
is included, and `BlankBackend` draws nothing and produces no input, which is
handy for headless use and tests.

## Installing

```
pip install .
```

## Running the demo

```
y11-demo
```

Options: `--width` and `--height` set the window size in pixels (default
1200 by 800), and `--font` gives the path of a TrueType font (pygame's default
font otherwise).

A window opens with a column holding a line of text, a box with an animated
rectangle and ellipse, a circle, a button, and a row of coloured rectangles.
Left and Right cycle the text; Esc or closing the window quits.

## Using the toolkit

```python
from y11.common import Arrangement, HorizontalAlignment, px, pc
from y11.geometry import Color
from y11.root import Root
from y11.column import Column
from y11.shapes import Rectangle, Text
from y11.events import EventType, Key
from y11.event_loop import EventLoop
from y11.pygame_backend import PygameBackend

with PygameBackend(800, 600) as backend:
    backend.init()

    tree = Root()
    column = Column()
    column.set_arrangement(Arrangement.CENTER).set_alignment(HorizontalAlignment.CENTER).set_gap(20)
    column.height = pc(1.0)

    box = Rectangle(px(100), px(50))
    box.set_color(Color(0, 255, 0))
    column.add_widget(Text("Hello", measurer=backend.measure_text))
    column.add_widget(box)
    tree.add_widget(column)

    loop = EventLoop()
    loop.bind(backend)

    def on_key(event):
        if event.key is Key.ESC:
            loop.stop()

    loop.add_event_listener(EventType.KEY_DOWN, on_key)
    loop.add_event_listener(EventType.QUIT, lambda event: loop.stop())
    loop.add_event_listener(EventType.ANIMATION_FRAME, lambda event: backend.render(tree))
    loop.run()
```

### Modules

- `y11.geometry`: `Color` (ARGB, packed with `raw()` / `Color.from_raw()`),
  `Padding` (1, 2 or 4 values, CSS-style), `Point`, `Size`, `Rect`,
  `LayoutMetadata`.
- `y11.common`: `Dimension` and the `px()` / `pc()` helpers, plus the
  `HorizontalAlignment`, `VerticalAlignment`, `Arrangement`, `DimensionUnit`,
  `AutoSizeHint` and `Sizing` enumerations.
- `y11.widget`: the `Widget` base class and the `LayoutVisitor` interface.
- `y11.composite`, `y11.layout`, `y11.root`: containers, the `Layout` base
  and `DefaultLayoutVisitor`, and `Root`, the top of a tree.
- `y11.column`, `y11.row`: `Column` and `Row` layouts with gap, alignment and
  arrangement (`START`, `CENTER`, `END`, `SPACE_BETWEEN`, `SPACE_AROUND`,
  `SPACE_EVENLY`).
- `y11.shapes`: `Rectangle`, `Circle`, `Ellipse`, `Text` and `Button`.
- `y11.renderer`: the `RendererVisitor` interface; `y11.pygame_renderer`
  implements it with pygame.
- `y11.animation`: `Keyframe` and `Animation`.
- `y11.events`, `y11.event_loop`: event types and `EventLoop`.
- `y11.cursor`: `Cursor`, a dot drawn with `render_raw` and moved with the
  arrow keys.
- `y11.render_metadata`: `RendererMetadata` and `WidgetMetadata`.
- `y11.app`: the demo (`Demo`, `build_demo`, `main`).

### Sizes

`Dimension` values come in four kinds: pixels (`px(100)`), a fraction of the
available space (`pc(0.5)`, where `1.0` means all of it), automatic
(`Dimension.automatic()`), and fit-content (`Dimension.fit_content()`).
When a column has a fixed height (or a row a fixed width), free space is
shared between percent-sized and expanding children; when it grows with its
content, such children collapse to their measured size.

`Text` measures its width with the `measurer(string, letter_height)`
callable it is given (for example `PygameBackend.measure_text`); without
one, each character counts as one letter height wide.

### Animations

An `Animation` holds a sequence of `Keyframe`s (duration, strength, target
colour, `mul_x`, `mul_y`). `evaluate(widget)` blends the widget's colour
toward the current keyframe's target and multiplies its width and height;
`advance()` moves one frame forward and wraps around after the last keyframe.
Either raises `ValueError` when the animation has no keyframes.

### Event loop

`EventLoop.add_event_listener(event_type, callback, target=None)` registers a
listener; with a `target` it only hears events whose `target()` is that
widget. `set_timeout` and `set_interval` take a delay in milliseconds and
return a handle for `clear_timeout` / `clear_interval`; at most one timeout
and one interval fire per iteration. An `ANIMATION_FRAME` event is sent every
`animation_interval_ms` (10 by default). `run()` loops until `stop()`;
`run_once()` performs a single iteration, and the clock and sleep functions
can be passed in, which makes the loop easy to drive in tests.

## What it does not do

Nothing in the package turns pointer input into `ClickEvent` or `HoverEvent`:
those event types exist, but no backend produces them, so there is no hit
testing and buttons do not react to clicks. Only keys in `y11.events.Key` are
recognised, and the only drawing backend is pygame.
"""Event kinds and the event objects that backends and the event loop deliver."""

import enum
from dataclasses import dataclass, field
from typing import Any


class EventType(enum.Enum):
    KEY_UP = enum.auto()
    KEY_DOWN = enum.auto()
    MOUSE_DOWN = enum.auto()
    MOUSE_UP = enum.auto()
    MOUSE_MOVE = enum.auto()
    CLICK = enum.auto()
    HOVER = enum.auto()
    TIMEOUT = enum.auto()
    INTERVAL = enum.auto()
    ANIMATION_FRAME = enum.auto()
    QUIT = enum.auto()


class Key(enum.Enum):
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    A = enum.auto()
    B = enum.auto()
    C = enum.auto()
    D = enum.auto()
    E = enum.auto()
    F = enum.auto()
    G = enum.auto()
    H = enum.auto()
    I = enum.auto()  # noqa: E741
    J = enum.auto()
    K = enum.auto()
    L = enum.auto()
    M = enum.auto()
    N = enum.auto()
    O = enum.auto()  # noqa: E741
    P = enum.auto()
    Q = enum.auto()
    R = enum.auto()
    S = enum.auto()
    T = enum.auto()
    U = enum.auto()
    W = enum.auto()
    V = enum.auto()
    X = enum.auto()
    Y = enum.auto()
    Z = enum.auto()
    ESC = enum.auto()
    LALT = enum.auto()
    RALT = enum.auto()
    LCTRL = enum.auto()
    RCTRL = enum.auto()
    SPACE = enum.auto()
    LSHIFT = enum.auto()
    RSHIFT = enum.auto()
    ENTER = enum.auto()
    GRAVE = enum.auto()
    TAB = enum.auto()
    BSPACE = enum.auto()
    N0 = enum.auto()
    N1 = enum.auto()
    N2 = enum.auto()
    N3 = enum.auto()
    N4 = enum.auto()
    N5 = enum.auto()
    N6 = enum.auto()
    N7 = enum.auto()
    N8 = enum.auto()
    N9 = enum.auto()
    UNKNOWN = enum.auto()


class MouseButton(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()
    OTHER = enum.auto()


class Event:
    """Base of all events; ``type`` says which kind it is."""

    type: EventType

    def target(self):
        """The widget the event is aimed at, or None if it is not aimed at one."""
        return None


@dataclass
class KeyEvent(Event):
    """A key went down or up."""

    type: EventType
    key: Key


@dataclass
class MouseButtonEvent(Event):
    """A mouse button went down or up at a position."""

    type: EventType
    x: int
    y: int
    button: MouseButton


@dataclass
class MouseMoveEvent(Event):
    """The mouse moved to (x, y), by (dx, dy) since the last move."""

    x: int
    y: int
    dx: int
    dy: int
    type: EventType = field(default=EventType.MOUSE_MOVE, init=False)


@dataclass
class ClickEvent(Event):
    x: int
    y: int
    button: MouseButton
    type: EventType = field(default=EventType.CLICK, init=False)


@dataclass
class HoverEvent(Event):
    """The pointer is over a widget."""

    widget: Any
    type: EventType = field(default=EventType.HOVER, init=False)

    def target(self):
        return self.widget


@dataclass
class TimeoutEvent(Event):
    timeout_due: int
    actual_trigger_time: int
    type: EventType = field(default=EventType.TIMEOUT, init=False)


@dataclass
class IntervalEvent(Event):
    planned_execution: int
    actual_trigger_time: int
    type: EventType = field(default=EventType.INTERVAL, init=False)


@dataclass
class AnimationFrameEvent(Event):
    timestamp: int
    type: EventType = field(default=EventType.ANIMATION_FRAME, init=False)


@dataclass
class QuitEvent(Event):
    type: EventType = field(default=EventType.QUIT, init=False)
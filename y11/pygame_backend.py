"""A backend that draws into a pygame window and reads pygame input."""

import string

import pygame

from y11.backend import Backend
from y11.events import (
    EventType,
    Key,
    KeyEvent,
    MouseButton,
    MouseButtonEvent,
    MouseMoveEvent,
    QuitEvent,
)
from y11.geometry import Rect
from y11.pygame_renderer import PygameRenderer

_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_LALT: Key.LALT,
    pygame.K_RALT: Key.RALT,
    pygame.K_LCTRL: Key.LCTRL,
    pygame.K_RCTRL: Key.RCTRL,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_LSHIFT: Key.LSHIFT,
    pygame.K_RSHIFT: Key.RSHIFT,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_BACKQUOTE: Key.GRAVE,
    pygame.K_TAB: Key.TAB,
    pygame.K_BACKSPACE: Key.BSPACE,
}
_KEYS.update({getattr(pygame, f"K_{letter.lower()}"): Key[letter] for letter in string.ascii_uppercase})
_KEYS.update({getattr(pygame, f"K_{digit}"): Key[f"N{digit}"] for digit in string.digits})

_KEY_CODES = {key: code for code, key in _KEYS.items()}

_MOUSE_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}

_MARKER_COLOR = (255, 0, 0)


def map_key(code):
    """The toolkit key for a pygame key code; UNKNOWN when it has none."""
    return _KEYS.get(code, Key.UNKNOWN)


def map_mouse_button(button):
    """The toolkit mouse button for a pygame button number."""
    return _MOUSE_BUTTONS.get(button, MouseButton.OTHER)


class PygameBackend(Backend):
    """Draws into a window of ``width`` by ``height`` pixels."""

    def __init__(self, width=1200, height=800, *, title="Y11", font_path=None):
        self._width = width
        self._height = height
        self._title = title
        self._font_path = font_path
        self._window = None
        self._renderer = None
        self._last_mouse = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def surface(self):
        """The window's drawing surface."""
        return self._require_window()

    def _require_window(self):
        if self._window is None:
            raise RuntimeError("backend is not initialised; call init() first")
        return self._window

    def init(self):
        pygame.display.init()
        pygame.font.init()
        self._window = pygame.display.set_mode((self._width, self._height))
        pygame.display.set_caption(self._title)
        self._renderer = PygameRenderer(self._window, self._font_path)

    def measure_text(self, string_, letter_height):
        """Width of ``string_`` in the backend's font."""
        self._require_window()
        return self._renderer.measure_text(string_, letter_height)

    def render(self, widget_tree):
        window = self._require_window()
        window.fill((0, 0, 0))
        width, height = window.get_size()
        widget_tree.set_layout_rect(Rect(0, 0, width, height))
        widget_tree.apply_layout()
        for widget in widget_tree:
            widget.accept_renderer(self._renderer)
        pygame.display.flip()

    def width(self):
        return self._width

    def height(self):
        return self._height

    def key_state(self, key):
        """True while ``key`` is held; KeyError for keys with no pygame code."""
        self._require_window()
        code = _KEY_CODES[key]
        return bool(pygame.key.get_pressed()[code])

    def render_raw(self, x, y, radius):
        window = self._require_window()
        center = (x + radius / 2.0, y + radius / 2.0)
        pygame.draw.circle(window, _MARKER_COLOR, center, radius)
        pygame.display.flip()

    def poll_event(self):
        self._require_window()
        event = pygame.event.poll()
        kind = event.type
        if kind == pygame.QUIT:
            return QuitEvent()
        if kind == pygame.KEYDOWN:
            return KeyEvent(EventType.KEY_DOWN, map_key(event.key))
        if kind == pygame.KEYUP:
            return KeyEvent(EventType.KEY_UP, map_key(event.key))
        if kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            event_type = EventType.MOUSE_DOWN if kind == pygame.MOUSEBUTTONDOWN else EventType.MOUSE_UP
            x, y = event.pos
            return MouseButtonEvent(event_type, x, y, map_mouse_button(event.button))
        if kind == pygame.MOUSEMOTION:
            x, y = event.pos
            last_x, last_y = self._last_mouse if self._last_mouse is not None else (x, y)
            self._last_mouse = (x, y)
            return MouseMoveEvent(x, y, x - last_x, y - last_y)
        return None

    def close(self):
        """Close the window, if it is open."""
        if self._window is not None:
            pygame.display.quit()
            self._window = None
            self._renderer = None
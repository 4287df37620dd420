"""The interface between the widget toolkit and a drawing/input system."""

from abc import ABC, abstractmethod


class Backend(ABC):
    """Draws widget trees and supplies input events."""

    @abstractmethod
    def init(self):
        """Prepare the backend for drawing."""

    @abstractmethod
    def render(self, widget_tree):
        """Lay out and draw ``widget_tree``."""

    @abstractmethod
    def width(self):
        """Width of the drawing area in pixels."""

    @abstractmethod
    def height(self):
        """Height of the drawing area in pixels."""

    @abstractmethod
    def render_raw(self, x, y, radius):
        """Draw a marker dot at (x, y)."""

    @abstractmethod
    def poll_event(self):
        """Return the next pending event, or None when there is none."""

    @abstractmethod
    def key_state(self, key):
        """True while ``key`` is held down."""


class BlankBackend(Backend):
    """A backend that draws nothing and never produces input."""

    def init(self):
        pass

    def render(self, widget_tree):
        pass

    def width(self):
        return 0

    def height(self):
        return 0

    def render_raw(self, x, y, radius):
        pass

    def poll_event(self):
        return None

    def key_state(self, key):
        return False
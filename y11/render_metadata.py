"""Where a renderer drew a widget."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from y11.geometry import Point, Rect, Size


class RendererMetadata(ABC):
    """Placement of a widget as seen by a renderer."""

    @abstractmethod
    def size(self):
        """Drawn size."""

    @abstractmethod
    def pos(self):
        """Drawn position."""

    @abstractmethod
    def bounding_rect(self):
        """Drawn area."""


@dataclass
class WidgetMetadata(RendererMetadata):
    """Renderer metadata held as a plain rectangle."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def size(self):
        return Size(self.width, self.height)

    def pos(self):
        return Point(self.x, self.y)

    def bounding_rect(self):
        return Rect(self.x, self.y, self.width, self.height)
"""The interface that renderers implement to draw a widget tree."""

from abc import ABC, abstractmethod


class RendererVisitor(ABC):
    """Draws each kind of widget; widgets pick the method in ``accept_renderer``."""

    @abstractmethod
    def visit_rectangle(self, rect, metadata):
        """Draw a rectangle."""

    @abstractmethod
    def visit_ellipse(self, ellipse, metadata):
        """Draw an ellipse."""

    @abstractmethod
    def visit_column(self, column, metadata):
        """Draw a column and its children."""

    @abstractmethod
    def visit_row(self, row, metadata):
        """Draw a row and its children."""

    @abstractmethod
    def visit_circle(self, circle, metadata):
        """Draw a circle."""

    @abstractmethod
    def visit_text(self, text, metadata):
        """Draw a line of text."""

    @abstractmethod
    def visit_button(self, button, metadata):
        """Draw a button."""
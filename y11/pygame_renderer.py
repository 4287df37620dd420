"""A renderer that draws widget trees onto a pygame surface."""

import pygame

from y11.renderer import RendererVisitor

# Fraction of a button's smaller side taken by its face; the rest is border.
_BUTTON_FACE = 0.8


def _rgb(color):
    return (color.r, color.g, color.b)


def _content_rect(metadata):
    return pygame.Rect(
        metadata.content_x,
        metadata.content_y,
        metadata.content_width,
        metadata.content_height,
    )


class PygameRenderer(RendererVisitor):
    """Draws each widget into its content box on ``surface``.

    Text uses the font at ``font_path``, or pygame's default font when it is None.
    """

    def __init__(self, surface, font_path=None):
        self.surface = surface
        self._font_path = font_path
        self._fonts = {}

    def _font(self, letter_height):
        size = max(1, int(letter_height))
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(self._font_path, size)
            self._fonts[size] = font
        return font

    def measure_text(self, string, letter_height):
        """Width in pixels of ``string`` drawn at ``letter_height``."""
        return self._font(letter_height).size(string)[0]

    def _draw_string(self, string, letter_height, color, x, y):
        image = self._font(letter_height).render(string, True, _rgb(color))
        self.surface.blit(image, (int(x), int(y)))

    def visit_rectangle(self, rect, metadata):
        pygame.draw.rect(self.surface, _rgb(rect.color()), _content_rect(metadata))

    def visit_ellipse(self, ellipse, metadata):
        if metadata.content_width <= 0 or metadata.content_height <= 0:
            return
        pygame.draw.ellipse(self.surface, _rgb(ellipse.color()), _content_rect(metadata))

    def visit_column(self, column, metadata):
        for child in column:
            child.accept_renderer(self)

    def visit_row(self, row, metadata):
        for child in row:
            child.accept_renderer(self)

    def visit_circle(self, circle, metadata):
        bound = min(metadata.content_width, metadata.content_height)
        radius = circle.radius().pixel_value(bound)
        if radius <= 0:
            return
        center = (metadata.content_x + radius, metadata.content_y + radius)
        pygame.draw.circle(self.surface, _rgb(circle.color()), center, radius)

    def visit_text(self, text, metadata):
        x = metadata.content_x + (metadata.content_width - text.measure_width()) / 2.0
        self._draw_string(text.string, text.letter_height, text.color(), x, metadata.content_y)

    def visit_button(self, button, metadata):
        color = button.color()
        border_color = (int(0.5 * color.r), int(0.5 * color.g), int(0.5 * color.b))
        pygame.draw.rect(self.surface, border_color, _content_rect(metadata))

        shorter = float(min(metadata.content_width, metadata.content_height))
        offset = (shorter - shorter * _BUTTON_FACE) / 2.0
        face = pygame.Rect(
            int(metadata.content_x + offset),
            int(metadata.content_y + offset),
            max(0, int(metadata.content_width - 2 * offset)),
            max(0, int(metadata.content_height - 2 * offset)),
        )
        pygame.draw.rect(self.surface, _rgb(color), face)

        caption = button.text
        x = metadata.content_width / 2.0 + metadata.content_x - caption.measure_width() / 2.0
        y = metadata.content_height / 2.0 + metadata.content_y - caption.letter_height / 2.0
        self._draw_string(caption.string, caption.letter_height, caption.color(), x, y)
"""A keyboard-driven pointer drawn directly by the backend."""

from dataclasses import dataclass

from y11.events import Key

_STEP = 4
_RADIUS = 4


@dataclass
class Cursor:
    """A dot moved with the arrow keys."""

    x: int = 0
    y: int = 0

    def evaluate(self, backend):
        """Draw the cursor, then move it by the arrow keys currently held."""
        backend.render_raw(self.x, self.y, _RADIUS)
        if backend.key_state(Key.UP):
            self.y -= _STEP
        if backend.key_state(Key.DOWN):
            self.y += _STEP
        if backend.key_state(Key.LEFT):
            self.x -= _STEP
        if backend.key_state(Key.RIGHT):
            self.x += _STEP
"""Keyframe animations that blend a widget's colour and scale its size."""

from dataclasses import dataclass

from y11.geometry import BLACK, Color


@dataclass
class Keyframe:
    """One step of an animation.

    For ``duration`` frames the widget's colour is pulled toward ``target``
    with weight ``strength`` and its size is multiplied by ``mul_x`` and
    ``mul_y`` on each evaluation.
    """

    duration: int = 0
    strength: float = 0.5
    target: Color = BLACK
    mul_x: float = 1.0
    mul_y: float = 1.0


def _blend(current, target, strength):
    value = int((current + target * strength) / (1.0 + strength))
    return max(0, min(255, value))


class Animation:
    """Cycles through keyframes, applying the current one to widgets."""

    def __init__(self, keyframes=()):
        self._keyframes = list(keyframes)
        self._index = 0
        self._timer = 0

    def add_keyframe(self, keyframe):
        """Append ``keyframe`` and return it."""
        self._keyframes.append(keyframe)
        return keyframe

    def _current(self):
        if not self._keyframes:
            raise ValueError("animation has no keyframes")
        return self._keyframes[self._index]

    def advance(self):
        """Move one frame forward, wrapping to the first keyframe at the end."""
        if self._timer >= self._current().duration:
            self._index += 1
            self._timer = 0
        if self._index >= len(self._keyframes):
            self._index = 0
        self._timer += 1
        return self

    def evaluate(self, widget):
        """Apply the current keyframe to ``widget``'s colour and size."""
        keyframe = self._current()
        color = widget.color()
        target = keyframe.target
        strength = keyframe.strength
        widget.set_color(
            Color(
                r=_blend(color.r, target.r, strength),
                g=_blend(color.g, target.g, strength),
                b=_blend(color.b, target.b, strength),
                a=_blend(color.a, target.a, strength),
            )
        )
        widget.set_dims(widget.width * keyframe.mul_x, widget.height * keyframe.mul_y)
        return self
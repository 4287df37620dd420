import itertools
from unittest import mock

import pygame
import pytest

from y11.app import DEMO_TEXTS, build_demo, main
from y11.backend import BlankBackend
from y11.events import AnimationFrameEvent, EventType, Key, KeyEvent, QuitEvent
from y11.geometry import Rect


class ScriptedBackend(BlankBackend):
    def __init__(self, events=()):
        self.events = list(events)
        self.renders = 0

    def poll_event(self):
        return self.events.pop(0) if self.events else None

    def render(self, widget_tree):
        self.renders += 1


def key_down(key):
    return KeyEvent(EventType.KEY_DOWN, key)


def test_starts_on_second_caption():
    demo = build_demo(BlankBackend())
    assert demo.text.string == DEMO_TEXTS[1]


def test_previous_wraps_to_last():
    demo = build_demo(BlankBackend())
    demo.previous_text()
    assert demo.previous_text() == DEMO_TEXTS[-1]
    assert demo.text.string == DEMO_TEXTS[-1]


def test_next_wraps_to_first():
    demo = build_demo(BlankBackend())
    for _ in range(len(DEMO_TEXTS) - 2):
        demo.next_text()
    assert demo.text.string == DEMO_TEXTS[-1]
    assert demo.next_text() == DEMO_TEXTS[0]


def test_arrow_keys_change_caption():
    demo = build_demo(BlankBackend())
    demo.on_key_down(key_down(Key.RIGHT))
    assert demo.text.string == DEMO_TEXTS[2]
    demo.on_key_down(key_down(Key.LEFT))
    demo.on_key_down(key_down(Key.LEFT))
    assert demo.text.string == DEMO_TEXTS[0]


def test_escape_stops_running_loop():
    backend = ScriptedBackend([key_down(Key.RIGHT), key_down(Key.ESC)])
    demo = build_demo(backend)
    demo.loop.run()
    assert demo.loop.running is False
    assert demo.text.string == DEMO_TEXTS[2]


def test_quit_event_stops_loop():
    backend = ScriptedBackend([QuitEvent()])
    demo = build_demo(backend)
    demo.loop.run()
    assert demo.loop.running is False
    assert backend.events == []


def test_animation_frame_animates_and_renders():
    backend = ScriptedBackend()
    demo = build_demo(backend)
    before = demo.square.color()
    width_before = demo.square.width.value
    demo.on_animation_frame(AnimationFrameEvent(0))
    after = demo.square.color()
    assert backend.renders == 1
    assert after.r > before.r
    assert after.g < before.g
    assert demo.square.width.value > width_before


def test_caption_is_centred_after_layout():
    demo = build_demo(BlankBackend())
    demo.root.set_layout_rect(Rect(0, 0, 1200, 800))
    demo.root.apply_layout()
    metadata = demo.text.layout_metadata
    assert abs(metadata.x + metadata.width / 2 - 1200 / 2) <= 1
    assert demo.column.layout_metadata.height == 800


def test_main_runs_until_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    events = itertools.chain(
        [pygame.event.Event(pygame.QUIT)],
        itertools.repeat(pygame.event.Event(pygame.NOEVENT)),
    )
    with mock.patch("pygame.event.poll", side_effect=events):
        assert main(["--width", "64", "--height", "48"]) == 0


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit):
        main(["--width", "wide"])
"""A polling event loop with timers, animation frames and listeners."""

import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable

from y11.events import AnimationFrameEvent, EventType, IntervalEvent, TimeoutEvent


def _now_ms():
    return time.monotonic_ns() // 1_000_000


@dataclass
class _Listener:
    callback: Callable
    target: Any = None


@dataclass
class _Timeout:
    due: int
    callback: Callable


@dataclass
class _Interval:
    next_execution: int
    interval: int
    callback: Callable


class EventLoop:
    """Runs timers, animation frames and backend events until stopped.

    ``clock`` returns the current time in milliseconds and ``sleep`` is
    called with ``tick`` seconds between iterations.
    """

    def __init__(self, *, clock=_now_ms, sleep=time.sleep, animation_interval_ms=10, tick=0.0001):
        self._clock = clock
        self._sleep = sleep
        self._tick = tick
        self.animation_interval_ms = animation_interval_ms
        self._listeners = defaultdict(list)
        self._timeouts = {}
        self._intervals = {}
        self._last_handle = 0
        self._last_animation_time = None
        self._backend = None
        self._running = False

    @property
    def running(self):
        return self._running

    def bind(self, backend):
        """Take input events from ``backend``."""
        self._backend = backend

    def add_event_listener(self, event_type, callback, target=None):
        """Call ``callback(event)`` for events of ``event_type``.

        With a ``target`` the callback only hears events aimed at that widget.
        """
        self._listeners[event_type].append(_Listener(callback, target))

    def _next_handle(self):
        self._last_handle += 1
        return self._last_handle

    @staticmethod
    def _check_delay(ms):
        if ms < 0:
            raise ValueError(f"delay must not be negative, got {ms}")

    def set_timeout(self, ms, callback):
        """Call ``callback`` once after ``ms`` milliseconds; return its handle."""
        self._check_delay(ms)
        handle = self._next_handle()
        self._timeouts[handle] = _Timeout(self._clock() + ms, callback)
        return handle

    def clear_timeout(self, handle):
        self._timeouts.pop(handle, None)

    def set_interval(self, ms, callback):
        """Call ``callback`` every ``ms`` milliseconds; return its handle."""
        self._check_delay(ms)
        handle = self._next_handle()
        self._intervals[handle] = _Interval(self._clock() + ms, ms, callback)
        return handle

    def clear_interval(self, handle):
        self._intervals.pop(handle, None)

    def _fire_timeout(self, now):
        # One timer per iteration, so callbacks may freely clear other timers.
        for handle, timeout in list(self._timeouts.items()):
            if now >= timeout.due:
                timeout.callback(TimeoutEvent(timeout.due, now))
                self._timeouts.pop(handle, None)
                return

    def _fire_interval(self, now):
        for interval in list(self._intervals.values()):
            if now >= interval.next_execution:
                event = IntervalEvent(interval.next_execution, now)
                interval.next_execution = now + interval.interval
                interval.callback(event)
                return

    def _fire_animation_frame(self, now):
        if now >= self._last_animation_time + self.animation_interval_ms:
            event = AnimationFrameEvent(now)
            for listener in list(self._listeners[EventType.ANIMATION_FRAME]):
                listener.callback(event)
            self._last_animation_time = now

    def _dispatch(self, event):
        target = event.target()
        for listener in list(self._listeners[event.type]):
            if listener.target is None or listener.target is target:
                listener.callback(event)

    def run_once(self):
        """Do one iteration: due timers, an animation frame, pending backend events."""
        now = self._clock()
        if self._last_animation_time is None:
            self._last_animation_time = now

        self._fire_timeout(now)
        self._fire_interval(now)
        self._fire_animation_frame(now)

        if self._backend is not None:
            while (event := self._backend.poll_event()) is not None:
                self._dispatch(event)

    def run(self):
        """Iterate until ``stop`` is called."""
        self._running = True
        self._last_animation_time = self._clock()
        while self._running:
            self.run_once()
            self._sleep(self._tick)

    def stop(self):
        self._running = False
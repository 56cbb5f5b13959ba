# toggle_anim/clock.py
from __future__ import annotations

import time
from typing import Callable

import pygame

from toggle_anim.errors import InvalidArgument

# Any zero-arg callable returning "now" in whole milliseconds.
Clock = Callable[[], int]


class SystemClock:
    """Monotonic wall clock in milliseconds. Default time source."""

    def __call__(self) -> int:
        return time.monotonic_ns() // 1_000_000


class PygameClock:
    """
    Reads pygame's tick counter (ms since pygame.init()).
    Use this when the host already runs its frame loop on pygame.time.
    """

    def __call__(self) -> int:
        return int(pygame.time.get_ticks())


class ManualClock:
    """
    Settable clock for tests and offline simulation.

    Example:
        clock = ManualClock()
        anim = Animation(clock=clock)
        clock.advance(500)
    """

    __slots__ = ("now_ms",)

    def __init__(self, start_ms: int = 0) -> None:
        self.now_ms = int(start_ms)

    def __call__(self) -> int:
        return self.now_ms

    def set(self, ms: int) -> None:
        self.now_ms = int(ms)

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise InvalidArgument("Clock cannot run backwards")
        self.now_ms += int(ms)
        return self.now_ms

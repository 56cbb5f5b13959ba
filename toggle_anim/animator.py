# toggle_anim/animator.py
from __future__ import annotations

import numbers
from typing import Any, Optional

from toggle_anim.clock import Clock, SystemClock
from toggle_anim.curves import SpeedCurve
from toggle_anim.errors import InvalidArgument


def check_duration(duration_ms: Any) -> int:
    """Whole, non-negative milliseconds; floats are not truncated silently."""
    if isinstance(duration_ms, bool) or not isinstance(duration_ms, numbers.Integral):
        raise InvalidArgument(f"Duration must be whole milliseconds, got {duration_ms!r}")
    if duration_ms < 0:
        raise InvalidArgument("Negative duration")
    return int(duration_ms)


class Animator:
    """
    Timer + speed curve. One run at a time:
      - start(duration_ms) begins a new run, superseding any run in progress
      - is_done() once the run's duration has elapsed
      - get_progress(curve) eases the elapsed fraction into [0.0, 1.0]

    A never-started animator counts as done, so its progress is 1.0.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock: Clock = clock if clock is not None else SystemClock()
        self.start_ms: Optional[int] = None
        self.duration_ms: int = 0

    def start(self, duration_ms: int) -> None:
        """Start a run lasting `duration_ms` milliseconds."""
        duration_ms = check_duration(duration_ms)
        self.start_ms = self.clock()
        self.duration_ms = duration_ms

    def is_done(self) -> bool:
        if self.start_ms is None:
            return True
        return self.clock() >= self.start_ms + self.duration_ms

    def elapsed_ms(self) -> int:
        if self.start_ms is None:
            return self.duration_ms
        return max(0, self.clock() - self.start_ms)

    def get_progress(self, curve: SpeedCurve = SpeedCurve.LINEAR) -> float:
        """Eased progress of the current run, clamped to exactly 1.0 once done."""
        if self.is_done():
            return 1.0
        # duration_ms > 0 here: a zero-length run is always done
        linear = self.elapsed_ms() / float(self.duration_ms)
        return curve.ease(linear)

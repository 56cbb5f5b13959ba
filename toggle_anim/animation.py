# toggle_anim/animation.py
from __future__ import annotations

import logging
from typing import Optional, TypeVar, TYPE_CHECKING

from toggle_anim.animator import Animator, check_duration
from toggle_anim.clock import Clock
from toggle_anim.curves import SpeedCurve
from toggle_anim.numeric import convert_like, kind_of

if TYPE_CHECKING:
    from toggle_anim.settings import PresetCfg

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Animation(Animator):
    """
    A toggleable animation that can be reversed cleanly, even mid-run.

    Poll get_value() every frame with the same start/end and the current
    trigger state. Flipping `triggered` restarts the timer in the other
    direction, resuming from wherever the value currently is.

    Two offsets (relative to `start`) carry the value across reversals:
      - moving forth reads progress_forth and writes progress_back
      - moving back reads progress_back and writes progress_forth
    The written one is where the next reversal picks up.

    Not thread-safe; one consumer per instance.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        super().__init__(clock)
        self.is_turned = False
        self.progress_forth = 0.0
        self.progress_back = 0.0

    def _toggle(self, triggered: bool, duration_ms: int) -> None:
        # Edge-triggered: a new duration only applies on the next flip.
        if triggered != self.is_turned:
            self.start(duration_ms)
            self.is_turned = triggered
            logger.debug(
                "animation %s for %dms",
                "forth" if triggered else "back",
                duration_ms,
            )

    def get_value(
        self,
        start: T,
        end: T,
        duration_ms: int,
        triggered: bool = True,
        curve: SpeedCurve = SpeedCurve.LINEAR,
    ) -> T:
        """
        Toggle the animation and return the animated value, typed like `start`.

        - start/end: first and last value of the animation
        - duration_ms: run length in milliseconds (>= 0)
        - triggered: True animates toward `end`, False relaxes back to `start`
        - curve: speed curve the progress is eased with
        """
        duration_ms = check_duration(duration_ms)
        # reject unsupported kinds before any state is touched
        kind_of(start)
        kind_of(end)

        triggered = bool(triggered)
        self._toggle(triggered, duration_ms)

        start_f = float(start)
        end_f = float(end)
        progress = self.get_progress(curve)

        if triggered:
            offset = self.progress_forth + (end_f - start_f - self.progress_forth) * progress
            self.progress_back = offset
        else:
            offset = self.progress_back - self.progress_back * progress
            self.progress_forth = offset

        return convert_like(start_f + offset, start)

    def get_preset_value(self, start: T, end: T, preset: "PresetCfg", triggered: bool = True) -> T:
        """get_value() with duration and curve taken from a configured preset."""
        return self.get_value(start, end, preset.duration_ms, triggered, preset.curve)

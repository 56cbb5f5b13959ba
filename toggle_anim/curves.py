# toggle_anim/curves.py
from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict

from toggle_anim.errors import InvalidArgument


def ease_linear(t: float) -> float:
    return t


def ease_in_sine(t: float) -> float:
    # zero slope at 0, reaches 1 at t=1
    return 1.0 + math.sin(math.radians(-90.0 + t * 90.0))


def ease_out_sine(t: float) -> float:
    return math.sin(math.radians(t * 90.0))


def ease_in_out_sine(t: float) -> float:
    return (1.0 + math.sin(math.radians(-90.0 + t * 180.0))) * 0.5


EaseFunc = Callable[[float], float]


class SpeedCurve(Enum):
    """The curve an animation's speed is eased with."""

    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"

    def ease(self, linear: float) -> float:
        """Map linear progress in [0, 1] onto this curve."""
        return _EASE_FUNCS[self](linear)

    @classmethod
    def parse(cls, name: str) -> "SpeedCurve":
        """Resolve 'ease_in_out', 'EASE-IN-OUT', 'ease in out' and the like."""
        key = str(name).strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError as e:
            raise InvalidArgument(f"Unknown speed curve: {name!r}") from e


_EASE_FUNCS: Dict[SpeedCurve, EaseFunc] = {
    SpeedCurve.LINEAR: ease_linear,
    SpeedCurve.EASE_IN: ease_in_sine,
    SpeedCurve.EASE_OUT: ease_out_sine,
    SpeedCurve.EASE_IN_OUT: ease_in_out_sine,
}

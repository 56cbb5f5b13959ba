# toggle_anim/settings.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from toggle_anim.animator import check_duration
from toggle_anim.curves import SpeedCurve
from toggle_anim.errors import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PresetCfg:
    duration_ms: int = 250
    curve: SpeedCurve = SpeedCurve.LINEAR


@dataclass
class AnimCfg:
    default: PresetCfg = field(default_factory=PresetCfg)
    presets: Dict[str, PresetCfg] = field(default_factory=dict)

    def preset(self, name: str) -> PresetCfg:
        """Named preset; unknown names fall back to `default`."""
        return self.presets.get(name, self.default)


def _preset_from(data: Any, base: PresetCfg, where: str) -> PresetCfg:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidArgument(f"{where}: expected a mapping, got {type(data).__name__}")
    try:
        duration_ms = check_duration(data.get("duration_ms", base.duration_ms))
    except InvalidArgument as e:
        raise InvalidArgument(f"{where}: {e}") from e

    curve = data.get("curve", base.curve)
    if not isinstance(curve, SpeedCurve):
        curve = SpeedCurve.parse(curve)
    return PresetCfg(duration_ms=duration_ms, curve=curve)


def parse_settings(data: Dict[str, Any]) -> AnimCfg:
    """ Build an AnimCfg from already-loaded YAML data. """
    default = _preset_from(data.get("default", {}), PresetCfg(), "default")

    raw_presets = data.get("presets", {}) or {}
    if not isinstance(raw_presets, dict):
        raise InvalidArgument("presets: expected a mapping of name -> preset")

    presets = {
        str(name): _preset_from(body, default, f"presets.{name}")
        for name, body in raw_presets.items()
    }
    return AnimCfg(default=default, presets=presets)


def load_settings(path: str = "config/animations.yaml") -> AnimCfg:
    p = Path(path)
    if not p.exists():
        logger.warning("Animation settings '%s' not found; using defaults", p)
        return AnimCfg()

    with p.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidArgument(f"Could not parse animation settings '{p}'") from e

    if not isinstance(data, dict):
        raise InvalidArgument(f"Animation settings '{p}' must be a mapping")
    return parse_settings(data)

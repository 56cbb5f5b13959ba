# toggle_anim/errors.py
from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised for usage errors: negative durations, unsupported number kinds, bad config."""

"""Envelope states and the per-sample rate computation shared by envelope code."""

from __future__ import annotations

import math
from enum import Enum

MIN_LEVEL = 0.0001
"""Level at or below which a releasing envelope is considered finished."""


class EnvelopeState(Enum):
    """Phase an ADSR envelope is currently in."""

    IDLE = "Idle"
    ATTACK = "Attack"
    DECAY = "Decay"
    SUSTAIN = "Sustain"
    RELEASE = "Release"


def calculate_rate(time_secs: float, delta_level: float, sample_rate: float) -> float:
    """Return the per-sample change needed to move ``delta_level`` in ``time_secs``.

    A non-positive time yields an infinite rate, meaning the change is instant.
    """
    if time_secs <= 0.0:
        return math.inf
    return delta_level / (time_secs * sample_rate)
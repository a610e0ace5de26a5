"""Naive phase-accumulating oscillators and their waveform shapes."""

from __future__ import annotations

import math
from typing import Callable

Waveform = Callable[[float], float]
"""A waveform maps a phase in ``[0.0, 1.0)`` to a sample, usually in ``[-1.0, 1.0]``."""


def sine(phase: float) -> float:
    """Sine wave."""
    return math.sin(phase * math.tau)


def saw(phase: float) -> float:
    """Naive rising sawtooth (aliasing)."""
    return 2.0 * phase - 1.0


def square(phase: float) -> float:
    """Naive square wave (aliasing): high for the first half of the cycle, low after."""
    return 2.0 * float(phase < 0.5) - 1.0


def triangle(phase: float) -> float:
    """Naive triangle wave (aliasing)."""
    return 1.0 - 4.0 * abs(phase - 0.5)


def _fract(value: float) -> float:
    return math.modf(value)[0]


def _check_sample_rate(sample_rate: float) -> None:
    if not sample_rate > 0.0:
        raise ValueError("Sample rate must be positive.")


class Oscillator:
    """Generates samples of a waveform at a given frequency and sample rate."""

    def __init__(self, sample_rate: float, frequency: float, shape: Waveform = sine) -> None:
        _check_sample_rate(sample_rate)
        self._sample_rate = sample_rate
        self._phase = 0.0
        self._phase_increment = max(frequency, 0.0) / sample_rate
        self.shape = shape

    def __repr__(self) -> str:
        name = getattr(self.shape, "__name__", repr(self.shape))
        return (
            f"{type(self).__name__}(sample_rate={self._sample_rate!r}, "
            f"frequency={self.frequency!r}, shape={name})"
        )

    @property
    def frequency(self) -> float:
        """Frequency in Hz."""
        return self._phase_increment * self._sample_rate

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def phase(self) -> float:
        """Current phase in ``[0.0, 1.0)``."""
        return self._phase

    def set_frequency(self, frequency: float) -> None:
        """Set the frequency; negative values are treated as zero."""
        self._phase_increment = max(frequency, 0.0) / self._sample_rate

    def set_sample_rate(self, sample_rate: float) -> None:
        """Change the sample rate while keeping the frequency."""
        _check_sample_rate(sample_rate)
        frequency = self.frequency
        self._sample_rate = sample_rate
        self.set_frequency(frequency)

    def next_sample(self) -> float:
        """Return the sample at the current phase, then advance the phase."""
        output = self.shape(self._phase)
        self._phase = _fract(self._phase + self._phase_increment)
        return output

    def reset_phase(self, phase: float) -> None:
        """Set the phase to the absolute fractional part of ``phase``."""
        self._phase = abs(_fract(phase))
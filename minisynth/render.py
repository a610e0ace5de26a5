"""Rendering synthesizer output into interleaved buffers of a given sample format."""

from __future__ import annotations

import math
from enum import Enum

from minisynth.synthesizer import Synthesizer


class SampleFormat(Enum):
    """Output sample encodings."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"

    @property
    def is_float(self) -> bool:
        return self.value.startswith("f")

    @property
    def signed(self) -> bool:
        return not self.value.startswith("u")

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def min_value(self) -> float | int:
        """Smallest representable sample (nominal -1.0 for float formats)."""
        if self.is_float:
            return -1.0
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> float | int:
        """Largest representable sample (nominal 1.0 for float formats)."""
        if self.is_float:
            return 1.0
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def equilibrium(self) -> float | int:
        """Value that encodes silence."""
        if self.is_float:
            return 0.0
        return 0 if self.signed else 1 << (self.bits - 1)


def convert_sample(value: float, sample_format: SampleFormat) -> float | int:
    """Convert a float sample in ``[-1.0, 1.0]`` to ``sample_format``.

    Integer formats scale, truncate toward zero and saturate; unsigned formats
    are offset so that silence sits at mid-range.
    """
    if sample_format.is_float:
        return float(value)
    half = 1 << (sample_format.bits - 1)
    if math.isnan(value):
        signed = 0
    else:
        scaled = value * half
        signed = int(max(min(scaled, half - 1), -half))
    return signed if sample_format.signed else signed + half


def render_frames(
    synth: Synthesizer,
    frames: int,
    channels: int,
    sample_format: SampleFormat,
) -> list[float | int]:
    """Render ``frames`` frames of the synthesizer's voice as an interleaved buffer.

    Every channel of a frame carries the same sample. The voice is locked once
    for the whole buffer.
    """
    if channels < 1:
        raise ValueError("channels must be at least 1")
    if frames < 0:
        raise ValueError("frames must not be negative")
    out: list[float | int] = []
    with synth.locked_voice() as voice:
        for _ in range(frames):
            sample = convert_sample(voice.next_sample(), sample_format)
            out.extend([sample] * channels)
    return out
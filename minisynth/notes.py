"""Musical notes, MIDI conversions and the chromatic scale."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

CHROMATIC = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
"""Note names of one octave, starting from C."""


class Accidental(Enum):
    """Alteration of a pitch; the value is how it is written in a label."""

    SHARP = "#"
    FLAT = "b"
    NATURAL = ""

    def __str__(self) -> str:
        return self.value


class Pitch(Enum):
    """Natural note letter."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    def __str__(self) -> str:
        return self.value


def _format_frequency(frequency: float) -> str:
    text = repr(float(frequency))
    return text[:-2] if text.endswith(".0") else text


@dataclass(frozen=True)
class Note:
    """A named note with its frequency kept as text."""

    pitch: Pitch
    accidental: Accidental
    octave: int
    frequency: str
    note_label: str

    def __str__(self) -> str:
        return f"{self.pitch}{self.accidental}{self.octave}"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Note:
        """Build a note from a mapping with pitch, accidental, octave, frequency and note_label.

        The accidental is named as in ``"Sharp"``, ``"Flat"`` or ``"Natural"``;
        the numeric frequency is stored as text.
        """
        try:
            pitch = Pitch[record["pitch"]]
            accidental = Accidental[str(record["accidental"]).upper()]
            octave = int(record["octave"])
            frequency = _format_frequency(record["frequency"])
            label = str(record["note_label"])
        except KeyError as exc:
            raise ValueError(f"invalid note record: missing or unknown {exc}") from exc
        return cls(pitch, accidental, octave, frequency, label)


def midi_to_note_label(midi: int) -> str | None:
    """Return the label of a MIDI note number, e.g. 60 -> ``"C4"``; None outside 12..127."""
    if midi < 12 or midi > 127:
        return None
    octave = midi // 12 - 1
    return f"{CHROMATIC[midi % 12]}{octave}"


def midi_to_frequency(midi: int) -> float:
    """Return the frequency in Hz of a MIDI note number, tuned to A4 = 440 Hz."""
    if not 0 <= midi <= 255:
        raise ValueError(f"MIDI value out of range: {midi}")
    return 440.0 * 2.0 ** ((midi - 69.0) / 12.0)


def chromatic_scale_in_octave(octave: int) -> list[str]:
    """Return the twelve note labels of the chromatic scale in ``octave``."""
    return [f"{name}{octave}" for name in CHROMATIC]
"""Control commands a user interface issues to the synthesizer."""

from __future__ import annotations

from minisynth.notes import midi_to_frequency
from minisynth.synthesizer import ActiveWaveform, Synthesizer


def parse_waveform(name: str) -> ActiveWaveform:
    """Return the waveform called ``name``; unknown names fall back to sine."""
    try:
        return ActiveWaveform(name)
    except ValueError:
        return ActiveWaveform.SINE


def set_waveform(synth: Synthesizer, waveform: str) -> None:
    """Switch the synthesizer to the waveform named ``waveform``."""
    synth.set_waveform(parse_waveform(waveform))


def play_midi_note(synth: Synthesizer, midi_value: int) -> None:
    """Start the note with MIDI number ``midi_value``."""
    synth.note_on(midi_to_frequency(midi_value))


def stop_midi_note(synth: Synthesizer) -> None:
    """Release the playing note."""
    synth.note_off()


def set_attack(synth: Synthesizer, value: float) -> None:
    synth.set_attack(value)


def set_decay(synth: Synthesizer, value: float) -> None:
    synth.set_decay(value)


def set_sustain(synth: Synthesizer, value: float) -> None:
    synth.set_sustain(value)


def set_release(synth: Synthesizer, value: float) -> None:
    synth.set_release(value)
"""Monophonic voice and a thread-safe synthesizer wrapping it."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Iterator

from minisynth.envelope import AdsrEnvelope
from minisynth.oscillator import Oscillator, Waveform, saw, sine, square, triangle

DEFAULT_SAMPLE_RATE = 44100.0

_DEFAULT_ADSR = (0.01, 0.1, 0.8, 0.2)
_DEFAULT_FREQUENCY = 440.0


class ActiveWaveform(Enum):
    """Waveform a voice plays."""

    SINE = "Sine"
    SQUARE = "Square"
    SAW = "Saw"
    TRIANGLE = "Triangle"


_SHAPES: dict[ActiveWaveform, Waveform] = {
    ActiveWaveform.SINE: sine,
    ActiveWaveform.SQUARE: square,
    ActiveWaveform.SAW: saw,
    ActiveWaveform.TRIANGLE: triangle,
}


class Voice:
    """A single note source: one oscillator per waveform shaped by an ADSR envelope."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._oscillators = {
            waveform: Oscillator(sample_rate, 0.0, shape)
            for waveform, shape in _SHAPES.items()
        }
        self._envelope = AdsrEnvelope(sample_rate, *_DEFAULT_ADSR)
        self._frequency = _DEFAULT_FREQUENCY
        self._waveform = ActiveWaveform.SINE

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sample_rate={self._sample_rate!r}, "
            f"frequency={self._frequency!r}, waveform={self._waveform.value}, "
            f"envelope={self._envelope!r})"
        )

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def frequency(self) -> float:
        """Frequency in Hz the voice plays at."""
        return self._frequency

    @property
    def waveform(self) -> ActiveWaveform:
        return self._waveform

    @property
    def envelope(self) -> AdsrEnvelope:
        return self._envelope

    @property
    def oscillator(self) -> Oscillator:
        """The oscillator of the active waveform."""
        return self._oscillators[self._waveform]

    def set_frequency(self, freq: float) -> None:
        """Set the frequency; the oscillator picks it up on the next sample."""
        self._frequency = freq

    def set_waveform(self, waveform: ActiveWaveform) -> None:
        """Switch waveform and restart its oscillator at phase zero."""
        self._waveform = waveform
        self._oscillators[waveform].reset_phase(0.0)

    def note_on(self, freq: float) -> None:
        """Start a note at ``freq`` Hz."""
        self._frequency = freq
        self._envelope.trigger()

    def note_off(self) -> None:
        """Release the current note."""
        self._envelope.release()

    def next_sample(self) -> float:
        """Return the next output sample; silence while the envelope is idle."""
        if not self._envelope.is_active():
            return 0.0
        level = self._envelope.process()
        osc = self.oscillator
        osc.set_frequency(self._frequency)
        return osc.next_sample() * level

    def is_active(self) -> bool:
        """Return True while the envelope is not idle."""
        return self._envelope.is_active()

    def set_adsr(self, attack: float, decay: float, sustain: float, release: float) -> None:
        """Replace the envelope with a fresh one using the given parameters."""
        self._envelope = AdsrEnvelope(self._sample_rate, attack, decay, sustain, release)

    def set_attack(self, attack_secs: float) -> None:
        self._envelope.set_attack(attack_secs)

    def set_decay(self, decay_secs: float) -> None:
        self._envelope.set_decay(decay_secs)

    def set_sustain(self, sustain_level: float) -> None:
        self._envelope.set_sustain(sustain_level)

    def set_release(self, release_secs: float) -> None:
        self._envelope.set_release(release_secs)


class Synthesizer:
    """Thread-safe controller for a single voice shared with an audio renderer."""

    def __init__(self, sample_rate: float = DEFAULT_SAMPLE_RATE) -> None:
        self._sample_rate = sample_rate
        self._voice = Voice(sample_rate)
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sample_rate={self._sample_rate!r})"

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @contextmanager
    def locked_voice(self) -> Iterator[Voice]:
        """Hold the voice lock and yield the voice for the duration of the block."""
        with self._lock:
            yield self._voice

    def _apply(self, action: Callable[..., None], *args: Any) -> None:
        with self._lock:
            action(self._voice, *args)

    def set_frequency(self, freq: float) -> None:
        self._apply(Voice.set_frequency, freq)

    def set_waveform(self, waveform: ActiveWaveform) -> None:
        self._apply(Voice.set_waveform, waveform)

    def set_adsr(self, attack: float, decay: float, sustain: float, release: float) -> None:
        self._apply(Voice.set_adsr, attack, decay, sustain, release)

    def set_attack(self, attack_secs: float) -> None:
        self._apply(Voice.set_attack, attack_secs)

    def set_decay(self, decay_secs: float) -> None:
        self._apply(Voice.set_decay, decay_secs)

    def set_sustain(self, sustain_level: float) -> None:
        self._apply(Voice.set_sustain, sustain_level)

    def set_release(self, release_secs: float) -> None:
        self._apply(Voice.set_release, release_secs)

    def note_on(self, freq: float) -> None:
        self._apply(Voice.note_on, freq)

    def note_off(self) -> None:
        self._apply(Voice.note_off)
"""ADSR (attack, decay, sustain, release) envelope generator."""

from __future__ import annotations

import math

from minisynth.rates import MIN_LEVEL, EnvelopeState, calculate_rate


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class AdsrEnvelope:
    """Linear ADSR envelope advanced one sample at a time.

    Times are in seconds, the sustain level is clamped to ``[0.0, 1.0]``.
    """

    def __init__(
        self,
        sample_rate: float,
        attack_secs: float,
        decay_secs: float,
        sustain_level: float,
        release_secs: float,
    ) -> None:
        sustain = _clamp_unit(sustain_level)
        self._sample_rate = sample_rate
        self._attack_secs = attack_secs
        self._decay_secs = decay_secs
        self._release_secs = release_secs
        self._sustain_level = sustain
        self._attack_rate = calculate_rate(attack_secs, 1.0, sample_rate)
        self._decay_rate = calculate_rate(decay_secs, 1.0 - sustain, sample_rate)
        # Provisional; release() recomputes it from the level at release time.
        self._release_rate = calculate_rate(
            release_secs, max(sustain, MIN_LEVEL), sample_rate
        )
        self._state = EnvelopeState.IDLE
        self._level = 0.0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self._state.value}, level={self._level!r}, "
            f"attack={self._attack_secs!r}, decay={self._decay_secs!r}, "
            f"sustain={self._sustain_level!r}, release={self._release_secs!r})"
        )

    @property
    def state(self) -> EnvelopeState:
        """Current phase of the envelope."""
        return self._state

    @property
    def level(self) -> float:
        """Current output level."""
        return self._level

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def attack_rate(self) -> float:
        return self._attack_rate

    @property
    def decay_rate(self) -> float:
        return self._decay_rate

    @property
    def release_rate(self) -> float:
        return self._release_rate

    @property
    def sustain_level(self) -> float:
        return self._sustain_level

    @property
    def attack_secs(self) -> float:
        return self._attack_secs

    @property
    def decay_secs(self) -> float:
        return self._decay_secs

    @property
    def release_secs(self) -> float:
        return self._release_secs

    def set_attack(self, attack_secs: float) -> None:
        """Change the attack time."""
        self._attack_secs = attack_secs
        self._attack_rate = calculate_rate(attack_secs, 1.0, self._sample_rate)

    def set_decay(self, decay_secs: float) -> None:
        """Change the decay time, targeting the current sustain level."""
        self._decay_secs = decay_secs
        self._decay_rate = calculate_rate(
            decay_secs, 1.0 - self._sustain_level, self._sample_rate
        )

    def set_sustain(self, sustain_level: float) -> None:
        """Change the sustain level and recompute the rates that depend on it."""
        self._sustain_level = _clamp_unit(sustain_level)
        self._decay_rate = calculate_rate(
            self._decay_secs, 1.0 - self._sustain_level, self._sample_rate
        )
        self._release_rate = calculate_rate(
            self._release_secs, max(self._sustain_level, MIN_LEVEL), self._sample_rate
        )

    def set_release(self, release_secs: float) -> None:
        """Change the release time."""
        self._release_secs = release_secs
        self._release_rate = calculate_rate(
            release_secs, max(self._sustain_level, MIN_LEVEL), self._sample_rate
        )

    def process(self) -> float:
        """Advance one sample and return the level from before the update."""
        output = self._level
        state = self._state

        if state is EnvelopeState.ATTACK:
            if math.isinf(self._attack_rate):
                self._level = 1.0
            else:
                self._level += self._attack_rate
            if self._level >= 1.0:
                self._level = 1.0
                self._state = EnvelopeState.DECAY

        elif state is EnvelopeState.DECAY:
            if math.isinf(self._decay_rate) or self._sustain_level >= 1.0:
                self._level = self._sustain_level
            else:
                self._level -= self._decay_rate
            if self._level <= self._sustain_level:
                self._level = self._sustain_level
                # A zero sustain still holds in Sustain until released.
                self._state = EnvelopeState.SUSTAIN

        elif state is EnvelopeState.SUSTAIN:
            self._level = self._sustain_level

        elif state is EnvelopeState.RELEASE:
            if math.isinf(self._release_rate):
                self._level = 0.0
            else:
                self._level -= self._release_rate
            if self._level <= MIN_LEVEL:
                self._level = 0.0
                self._state = EnvelopeState.IDLE

        return output

    def trigger(self) -> None:
        """Start the attack phase; the level restarts from zero only when idle or releasing."""
        if self._state in (EnvelopeState.IDLE, EnvelopeState.RELEASE):
            self._level = 0.0
        self._state = EnvelopeState.ATTACK

    def release(self) -> None:
        """Start the release phase from the current level, unless idle."""
        if self._state is not EnvelopeState.IDLE:
            self._release_rate = calculate_rate(
                self._release_secs, max(self._level, 0.0), self._sample_rate
            )
            self._state = EnvelopeState.RELEASE

    def is_active(self) -> bool:
        """Return True unless the envelope is idle."""
        return self._state is not EnvelopeState.IDLE
import math
import threading

import pytest

from minisynth.rates import EnvelopeState
from minisynth.synthesizer import ActiveWaveform, Synthesizer, Voice

SAMPLE_RATE = 44100.0
FREQ = 440.0
TOLERANCE = 0.001


def _process_samples(voice, count):
    for _ in range(count):
        voice.next_sample()


def _process_secs(voice, seconds):
    _process_samples(voice, math.ceil(seconds * voice.sample_rate))


def _read(synth, read):
    with synth.locked_voice() as voice:
        return read(voice)


def _state(synth):
    return _read(synth, lambda voice: voice.envelope.state)


def test_voice_creation():
    voice = Voice(SAMPLE_RATE)
    assert voice.frequency == 440.0
    assert voice.waveform is ActiveWaveform.SINE
    assert not voice.is_active()
    assert voice.sample_rate == SAMPLE_RATE


def test_idle_voice_outputs_silence():
    voice = Voice(SAMPLE_RATE)
    assert [voice.next_sample() for _ in range(10)] == [0.0] * 10


def test_voice_note_on_off():
    voice = Voice(SAMPLE_RATE)
    assert voice.envelope.state is EnvelopeState.IDLE

    voice.note_on(FREQ)
    assert voice.is_active()
    assert voice.frequency == FREQ
    assert voice.envelope.state is EnvelopeState.ATTACK

    _process_samples(voice, 100)
    assert voice.is_active()
    assert voice.envelope.state in (EnvelopeState.ATTACK, EnvelopeState.DECAY)

    voice.note_off()
    assert voice.is_active()
    assert voice.envelope.state is EnvelopeState.RELEASE

    _process_secs(voice, 0.3)
    assert not voice.is_active()
    assert voice.envelope.state is EnvelopeState.IDLE


def test_voice_waveform_change():
    voice = Voice(SAMPLE_RATE)
    voice.note_on(FREQ)
    samples = []
    for waveform in (ActiveWaveform.SQUARE, ActiveWaveform.SAW):
        voice.set_waveform(waveform)
        assert voice.waveform is waveform
        samples.append(voice.next_sample())
    assert samples[0] != samples[1]


def test_set_waveform_resets_phase():
    voice = Voice(SAMPLE_RATE)
    voice.note_on(FREQ)
    _process_samples(voice, 7)
    assert voice.oscillator.phase > 0.0
    voice.set_waveform(ActiveWaveform.SINE)
    assert voice.oscillator.phase == 0.0


def test_voice_frequency_change():
    voice = Voice(SAMPLE_RATE)
    voice.note_on(FREQ)
    assert voice.frequency == FREQ

    voice.set_frequency(880.0)
    assert voice.frequency == 880.0

    voice.next_sample()
    assert voice.oscillator.frequency == pytest.approx(880.0)


@pytest.mark.parametrize("waveform", list(ActiveWaveform))
def test_voice_output_stays_in_unit_range(waveform):
    voice = Voice(SAMPLE_RATE)
    voice.set_waveform(waveform)
    voice.note_on(FREQ)
    samples = [voice.next_sample() for _ in range(2000)]
    assert all(-1.0 <= s <= 1.0 for s in samples)
    assert any(s != 0.0 for s in samples)


def test_voice_adsr_change():
    voice = Voice(SAMPLE_RATE)
    voice.set_adsr(0.001, 0.001, 0.1, 0.001)
    voice.note_on(FREQ)

    _process_secs(voice, 0.01)
    assert voice.envelope.state is EnvelopeState.SUSTAIN
    assert voice.envelope.level == pytest.approx(0.1, abs=TOLERANCE)

    voice.note_off()
    _process_secs(voice, 0.01)
    assert voice.envelope.state is EnvelopeState.IDLE


def test_voice_individual_adsr_setters():
    voice = Voice(SAMPLE_RATE)
    attack_time, decay_time, sustain, release_time = 0.01, 0.02, 0.6, 0.03

    voice.set_attack(attack_time)
    voice.set_sustain(sustain)
    voice.set_decay(decay_time)
    voice.set_release(release_time)

    env = voice.envelope
    rate_tol = TOLERANCE / SAMPLE_RATE
    assert env.attack_rate == pytest.approx(1.0 / (attack_time * SAMPLE_RATE), abs=rate_tol)
    assert env.decay_rate == pytest.approx((1.0 - sustain) / (decay_time * SAMPLE_RATE), abs=rate_tol)
    assert env.sustain_level == pytest.approx(sustain, abs=TOLERANCE)
    assert env.release_rate == pytest.approx(sustain / (release_time * SAMPLE_RATE), abs=rate_tol)

    voice.note_on(FREQ)
    assert voice.envelope.state is EnvelopeState.ATTACK
    _process_secs(voice, attack_time + decay_time + 0.01)
    assert voice.envelope.state is EnvelopeState.SUSTAIN
    assert voice.envelope.level == pytest.approx(sustain, abs=TOLERANCE)

    voice.note_off()
    assert voice.envelope.state is EnvelopeState.RELEASE
    _process_secs(voice, release_time + 0.01)
    assert voice.envelope.state is EnvelopeState.IDLE


def test_synthesizer_default_sample_rate():
    assert Synthesizer().sample_rate == 44100.0


def test_synthesizer_controls_voice():
    synth = Synthesizer(SAMPLE_RATE)
    assert synth.sample_rate == SAMPLE_RATE
    assert _state(synth) is EnvelopeState.IDLE

    synth.note_on(FREQ)
    assert _read(synth, lambda voice: voice.frequency) == FREQ
    assert _state(synth) is EnvelopeState.ATTACK

    synth.note_off()
    assert _state(synth) is EnvelopeState.RELEASE

    synth.set_waveform(ActiveWaveform.TRIANGLE)
    assert _read(synth, lambda voice: voice.waveform) is ActiveWaveform.TRIANGLE

    synth.set_frequency(660.0)
    assert _read(synth, lambda voice: voice.frequency) == 660.0

    synth.set_adsr(0.1, 0.2, 0.7, 0.3)
    assert _read(synth, lambda voice: voice.envelope.sustain_level) == pytest.approx(0.7, abs=TOLERANCE)


@pytest.mark.parametrize(
    "setter, value, attribute",
    [
        ("set_attack", 0.05, "attack_rate"),
        ("set_decay", 0.02, "decay_rate"),
        ("set_sustain", 0.6, "sustain_level"),
        ("set_release", 0.03, "release_rate"),
    ],
)
def test_synthesizer_individual_adsr_setters(setter, value, attribute):
    synth = Synthesizer(SAMPLE_RATE)
    initial = _read(synth, lambda voice: getattr(voice.envelope, attribute))
    getattr(synth, setter)(value)
    assert _read(synth, lambda voice: getattr(voice.envelope, attribute)) != initial

    synth.note_on(FREQ)
    assert _state(synth) is EnvelopeState.ATTACK


def test_synthesizer_setter_values():
    synth = Synthesizer(SAMPLE_RATE)
    synth.set_attack(0.05)
    synth.set_sustain(0.6)
    env = _read(synth, lambda voice: voice.envelope)
    assert env.attack_rate == pytest.approx(1.0 / (0.05 * SAMPLE_RATE))
    assert env.sustain_level == pytest.approx(0.6, abs=TOLERANCE)


def test_locked_voice_blocks_other_threads():
    synth = Synthesizer(SAMPLE_RATE)
    done = threading.Event()

    def worker():
        synth.note_on(FREQ)
        done.set()

    with synth.locked_voice() as voice:
        thread = threading.Thread(target=worker)
        thread.start()
        assert not done.wait(0.05)
        assert voice.envelope.state is EnvelopeState.IDLE

    thread.join(timeout=2.0)
    assert done.is_set()
    assert _state(synth) is EnvelopeState.ATTACK
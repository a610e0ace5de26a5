# minisynth

minisynth is a small monophonic synthesizer written in pure Python. It uses
only the standard library. It provides:

- naive `sine`, `square`, `saw` and `triangle` waveforms and an `Oscillator`
  that plays them (`minisynth.oscillator`)
- a linear ADSR envelope generator, `AdsrEnvelope` (`minisynth.envelope`),
  with its `EnvelopeState` phases and the `calculate_rate` helper
  (`minisynth.rates`)
- a single-voice `Voice` and a thread-safe `Synthesizer` that wraps it, with
  the `ActiveWaveform` choice (`minisynth.synthesizer`)
- note helpers: `Note`, `Pitch`, `Accidental`, `midi_to_frequency`,
  `midi_to_note_label` and `chromatic_scale_in_octave` (`minisynth.notes`)
- rendering of interleaved sample frames in integer or float formats,
  `render_frames` and `convert_sample` with `SampleFormat`
  (`minisynth.render`)
- control functions a user interface can call, such as `play_midi_note`,
  `stop_midi_note`, `set_waveform` and `set_attack` / `set_decay` /
  `set_sustain` / `set_release` (`minisynth.commands`)

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from minisynth.synthesizer import Synthesizer
from minisynth.commands import play_midi_note, stop_midi_note, set_waveform, set_attack
from minisynth.render import SampleFormat, render_frames

synth = Synthesizer(44100.0)
set_waveform(synth, "Saw")
set_attack(synth, 0.005)
play_midi_note(synth, 69)          # A4, 440 Hz

block = render_frames(synth, 512, 2, SampleFormat.F32)

stop_midi_note(synth)
```

`set_waveform` accepts `"Sine"`, `"Square"`, `"Saw"` or `"Triangle"`. Any other
name selects sine.

`render_frames` holds the voice lock for the whole block. It puts the same mono
sample on every channel of a frame and converts each sample to the chosen
`SampleFormat`. Float formats pass the value through unchanged. Integer formats
scale the value, truncate it toward zero and saturate at the format's limits.
Unsigned formats are offset so that silence sits at mid-range.

### Envelope

`AdsrEnvelope(sample_rate, attack_secs, decay_secs, sustain_level, release_secs)`
moves through Idle → Attack → Decay → Sustain → Release → Idle.

- Each call to `process()` returns the level as it was before that sample's
  update.
- A time of zero or less makes that stage instant.
- The sustain level is clamped to 0.0–1.0.
- `trigger()` restarts the level from zero only when the envelope is idle or
  releasing.
- `release()` fades out from whatever the current level is.

### Notes

```python
from minisynth.notes import midi_to_note_label, midi_to_frequency, chromatic_scale_in_octave

midi_to_note_label(60)         # "C4"  (None outside 12..127)
midi_to_frequency(69)          # 440.0
chromatic_scale_in_octave(4)   # ["C4", "C#4", ..., "B4"]
```

`Note.from_record` builds a `Note` from a mapping with `pitch`, `accidental`,
`octave`, `frequency` and `note_label` keys.

## What it does not do

minisynth computes samples but does not play them. It does not open an audio
device. To hear the output, pass the blocks from `render_frames` to an audio
library of your choice.

There is no command-line program and no graphical interface. The functions in
`minisynth.commands` are meant to be called from one.

No table of notes is bundled. You supply note records to `Note.from_record`
yourself.
"""
Diatonic - spelled pitch classes and pitches for Python.

Models the twelve-tone equal-tempered pitch space the way it is written
rather than only the way it sounds: ``C♯4`` and ``D♭4`` share a MIDI number
and a frequency but are different, ordered values.

- ``PitchClass`` - the seven natural letters C … B with their semitone rank.
- ``Sharp`` / ``Flat`` - accidentals wrapping any spelling, to any depth,
  cancelling one level at a time (``x.sharp.flat == x``).
- ``Pitch`` - a spelling plus an octave, with semitone arithmetic that carries
  the octave, frequency scaling, frequency ratios and nearest-octave lookup.
- ``mtof`` / ``ftom`` - MIDI ↔ Hertz under 12-TET, A4 = 440 Hz.
- ``parse_spelling`` / ``parse_pitch`` - read names such as ``"F#"`` or ``"Bb3"``.
- ``diatonic.constants`` - ready-made values (``pitches.C4``, ``pitch_classes.FS``).

Minimal example:

    ```python
    import diatonic

    c4 = diatonic.parse_pitch("C4")
    c4 + 1                       # C♯4
    c4 - 1                       # B3
    c4 * 2                       # C5
    diatonic.Pitch.from_hz(440)  # A4
    ```

All values are immutable and hashable, and nothing in the package performs I/O
apart from the ``python -m diatonic`` command line.
"""

import diatonic.conversions
import diatonic.exceptions
import diatonic.notation
import diatonic.pitch
import diatonic.pitch_class


PitchClass = diatonic.pitch_class.PitchClass
Accidental = diatonic.pitch_class.Accidental
Sharp = diatonic.pitch_class.Sharp
Flat = diatonic.pitch_class.Flat
Spelling = diatonic.pitch_class.Spelling
Pitch = diatonic.pitch.Pitch

mtof = diatonic.conversions.mtof
ftom = diatonic.conversions.ftom

parse_spelling = diatonic.notation.parse_spelling
parse_pitch = diatonic.notation.parse_pitch

DiatonicError = diatonic.exceptions.DiatonicError
InvalidPitchClassName = diatonic.exceptions.InvalidPitchClassName
InvalidConstructionArgument = diatonic.exceptions.InvalidConstructionArgument

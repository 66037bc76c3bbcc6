"""Parsing spelled note names.

Accepts a natural letter (any case) followed by accidental glyphs and, for
pitches, a signed octave::

    parse_spelling("F#")   # → F♯
    parse_spelling("Bbb")  # → B♭♭
    parse_spelling("Cx")   # → C♯♯
    parse_pitch("Eb3")     # → E♭3
    parse_pitch("C-1")     # → C-1 (MIDI 0)

Accidental glyphs: ``#``, ``♯``, ``s`` (sharp), ``x``, ``𝄪`` (double sharp),
``b``, ``♭``, ``f`` (flat), ``𝄫`` (double flat). A lowercase ``b`` after the
letter is always a flat, so ``"bb"`` is B♭.
"""

import re
import typing

import diatonic.exceptions
import diatonic.pitch
import diatonic.pitch_class


ACCIDENTAL_VALUES: typing.Dict[str, int] = {
	"#": 1,
	"♯": 1,
	"s": 1,
	"x": 2,
	"𝄪": 2,
	"b": -1,
	"♭": -1,
	"f": -1,
	"𝄫": -2,
}

_NAME_RE = re.compile(
	r"^\s*([A-Ga-g])([" + re.escape("".join(ACCIDENTAL_VALUES)) + r"]*)(-?\d+)?\s*$"
)


def _match (text: str) -> typing.Tuple[diatonic.pitch_class.Spelling, typing.Optional[int]]:

	if not isinstance(text, str):
		raise diatonic.exceptions.InvalidPitchClassName(f"Expected a note name string, got {text!r}")

	match = _NAME_RE.match(text)

	if match is None:
		raise diatonic.exceptions.InvalidPitchClassName(
			f"Unknown note name: {text!r}. Expected e.g. 'C', 'F#', 'Bb', 'Eb3'."
		)

	letter, glyphs, octave = match.groups()
	natural = diatonic.pitch_class.PitchClass.from_string(letter)
	spelling = natural.acc(sum(ACCIDENTAL_VALUES[glyph] for glyph in glyphs))

	return spelling, (int(octave) if octave is not None else None)


def parse_spelling (text: str) -> diatonic.pitch_class.Spelling:

	"""
	Parse a spelled pitch class such as ``"C"``, ``"F#"`` or ``"Dbb"``.

	Raises:
		InvalidPitchClassName: If the text is not a letter plus accidentals.
	"""

	spelling, octave = _match(text)

	if octave is not None:
		raise diatonic.exceptions.InvalidPitchClassName(
			f"Unexpected octave in pitch class name: {text!r}"
		)

	return spelling


def parse_pitch (text: str) -> diatonic.pitch.Pitch:

	"""
	Parse a spelled pitch such as ``"A4"``, ``"C#5"`` or ``"Bb-1"``.

	Raises:
		InvalidPitchClassName: If the name or the octave is missing or malformed.
	"""

	spelling, octave = _match(text)

	if octave is None:
		raise diatonic.exceptions.InvalidPitchClassName(f"Missing octave in pitch name: {text!r}")

	return diatonic.pitch.Pitch(spelling, octave)

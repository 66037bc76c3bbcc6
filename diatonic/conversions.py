"""Conversions between MIDI note numbers and frequency in 12-TET.

Reference pitch is A4 = MIDI 69 = 440 Hz.

    mtof(69)     # → 440.0
    mtof(60)     # → 261.625...
    ftom(261.62) # → 60
"""

import math
import typing


A4_HZ: float = 440.0
A4_MIDI: int = 69
SEMITONES_PER_OCTAVE: int = 12


def mtof (midi: typing.Union[int, float]) -> float:

	"""Convert a (possibly fractional) MIDI note number to Hertz."""

	return A4_HZ * (2.0 ** ((float(midi) - A4_MIDI) / SEMITONES_PER_OCTAVE))


def ftom (hz: float) -> int:

	"""
	Convert a frequency in Hertz to the nearest MIDI note number.

	Halfway cases round away from zero, so a frequency exactly between two
	semitones above A4 snaps up and one below MIDI 0 snaps down.

	Raises:
		ValueError: If ``hz`` is not positive.
	"""

	return round_half_away(A4_MIDI + SEMITONES_PER_OCTAVE * math.log2(hz / A4_HZ))


def round_half_away (value: float) -> int:

	"""Round to the nearest integer, ties away from zero (``round(2.5) == 3``)."""

	return int(math.copysign(math.floor(abs(value) + 0.5), value))
